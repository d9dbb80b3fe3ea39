from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from domain.entities import ChatTurn, ContentItem, FetchOutcome
from utils.presentation import format_match, placeholder_url, resolve_image_url


class ContentItemView(BaseModel):
    id: int
    title: str
    overview: str
    release_date: Optional[str]
    vote_average: float
    match: str
    genres: List[str]
    reason: Optional[str]
    poster_url: str
    backdrop_url: str
    thumbnail_url: str
    poster_placeholder_url: str
    backdrop_placeholder_url: str

    @classmethod
    def from_item(cls, item: ContentItem) -> "ContentItemView":
        return cls(
            id=item.id,
            title=item.title,
            overview=item.overview,
            release_date=item.release_date,
            vote_average=item.vote_average,
            match=format_match(item.vote_average),
            genres=item.genres or [],
            reason=item.reason,
            poster_url=resolve_image_url(item.poster_path, item.id, "poster"),
            backdrop_url=resolve_image_url(item.backdrop_path, item.id, "backdrop"),
            thumbnail_url=resolve_image_url(item.poster_path, item.id, "thumbnail"),
            poster_placeholder_url=placeholder_url(item.id, "poster"),
            backdrop_placeholder_url=placeholder_url(item.id, "backdrop"),
        )


class ContentListResponse(BaseModel):
    status: Literal["success", "error"]
    cached: bool
    items: List[ContentItemView]

    @classmethod
    def from_outcome(cls, outcome: FetchOutcome) -> "ContentListResponse":
        return cls(
            status=outcome.status,
            cached=outcome.cached,
            items=[ContentItemView.from_item(i) for i in outcome.items],
        )


class ChatRequest(BaseModel):
    history: List[ChatTurn] = Field(default_factory=list)
    message: str


class ChatResponse(BaseModel):
    reply: str
