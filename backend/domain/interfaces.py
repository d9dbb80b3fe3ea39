from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import ChatTurn, ContentItem, ContentRequest, FetchOutcome


class IClock(ABC):
    @abstractmethod
    def now(self) -> float:
        pass


class ICacheRepository(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        pass

    @abstractmethod
    def set(self, key: str, value: bytes):
        pass

    @abstractmethod
    def delete(self, key: str):
        pass


class ILLMService(ABC):
    @abstractmethod
    async def generate(self, request: ContentRequest) -> str:
        pass

    @abstractmethod
    async def chat(self, history: List[ChatTurn], message: str, system_instruction: str) -> str:
        pass


class IContentService(ABC):
    @abstractmethod
    async def fetch_trending(self) -> List[ContentItem]:
        pass

    @abstractmethod
    async def fetch_category(self, category: str) -> List[ContentItem]:
        pass

    @abstractmethod
    async def search(self, query: str) -> List[ContentItem]:
        pass

    @abstractmethod
    async def chat(self, history: List[ChatTurn], new_message: str) -> str:
        pass

    @abstractmethod
    async def fetch_trending_outcome(self) -> FetchOutcome:
        pass

    @abstractmethod
    async def fetch_category_outcome(self, category: str) -> FetchOutcome:
        pass

    @abstractmethod
    async def search_outcome(self, query: str) -> FetchOutcome:
        pass
