import structlog
from injector import Injector, singleton
from structlog.stdlib import BoundLogger

from domain.interfaces import ICacheRepository, IClock, IContentService, ILLMService
from repositories.cache import create_cache_repository
from services.content_service import ContentFetchCache
from services.llm_service import OpenAILLMService
from utils.clock import SystemClock


def create_injector() -> Injector:
    injector = Injector()
    injector.binder.bind(ILLMService, to=OpenAILLMService, scope=singleton)
    injector.binder.bind(ICacheRepository, to=create_cache_repository, scope=singleton)
    injector.binder.bind(IClock, to=SystemClock, scope=singleton)
    injector.binder.bind(IContentService, to=ContentFetchCache, scope=singleton)
    injector.binder.bind(
        BoundLogger, to=structlog.get_logger("movistore"), scope=singleton
    )
    return injector
