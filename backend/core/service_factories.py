from fastapi_injector import Injected

from domain.interfaces import IContentService


def get_content_service(
    service: IContentService = Injected(IContentService),
) -> IContentService:
    return service
