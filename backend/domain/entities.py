from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class ContentKind(str, Enum):
    TRENDING = "trending"
    CATEGORY = "category"
    SEARCH = "search"
    CHAT = "chat"


class ContentItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    overview: str
    vote_average: float
    release_date: Optional[str] = None
    genres: Optional[List[str]] = None
    reason: Optional[str] = Field(default=None, description="Why this movie fits the criteria")
    poster_path: Optional[str] = Field(
        default=None,
        description="The specific TMDB poster filename (e.g. /1E5baAaEse26fej7uHcjOgEE2t2.jpg). Leave empty if unknown.",
    )
    backdrop_path: Optional[str] = Field(
        default=None,
        description="The specific TMDB backdrop filename (e.g. /2LL5lyC454CCXv05tf.jpg). Leave empty if unknown.",
    )


class ContentItems(RootModel[List[ContentItem]]):
    pass


class CacheEntry(BaseModel):
    data: List[ContentItem]
    timestamp: float


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    text: str
    movies: Optional[List[ContentItem]] = None


class FetchOutcome(BaseModel):
    """Result of a content fetch.

    ``items`` is always a list so callers that only care about content can
    ignore ``status``; an empty success means the backend confirmed no
    matches, an empty error means nothing could be fetched.
    """

    status: Literal["success", "error"]
    items: List[ContentItem] = []
    cached: bool = False
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == "error"

    @classmethod
    def success(cls, items: List[ContentItem], cached: bool = False) -> "FetchOutcome":
        return cls(status="success", items=items, cached=cached)

    @classmethod
    def failure(cls, error: str) -> "FetchOutcome":
        return cls(status="error", items=[], error=error)


@dataclass
class ContentRequest:
    kind: ContentKind
    cache_key: str
    instruction: str
    system_instruction: str
    count: int
    params: dict = field(default_factory=dict)
    format_instructions: str = ""
