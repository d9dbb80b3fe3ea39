from typing import List, Optional

import orjson
from injector import NoInject, inject
from langchain_core.output_parsers import PydanticOutputParser
from pydantic import ValidationError
from structlog.stdlib import BoundLogger

from core.settings import settings
from domain.entities import CacheEntry, ChatTurn, ContentItem, ContentItems, ContentRequest, FetchOutcome
from domain.interfaces import ICacheRepository, IClock, IContentService, ILLMService
from services.prompts import CHAT_SYSTEM_INSTRUCTION, category_request, search_request, trending_request

CHAT_FALLBACK_REPLY = "I'm having trouble connecting to the server. Try again later."


class ContentFetchCache(IContentService):
    """Read-through cache in front of the LLM content backend.

    Trending, category and search results are cached per key for ``ttl``
    seconds. Expiry is checked lazily when an entry is read; nothing sweeps
    the store in the background. Backend and parse failures never escape a
    fetch: they are logged and reported as an empty error outcome, and the
    cache is left untouched so the next call tries the backend again.
    """

    @inject
    def __init__(
        self,
        llm: ILLMService,
        cache: ICacheRepository,
        clock: IClock,
        logger: BoundLogger,
        ttl: NoInject[Optional[int]] = None,
    ):
        self.llm = llm
        self.cache = cache
        self.clock = clock
        self.logger = logger
        self.ttl = settings.cache_ttl_seconds if ttl is None else ttl
        self.parser = PydanticOutputParser(pydantic_object=ContentItems)

    async def fetch_trending(self) -> List[ContentItem]:
        return (await self.fetch_trending_outcome()).items

    async def fetch_category(self, category: str) -> List[ContentItem]:
        return (await self.fetch_category_outcome(category)).items

    async def search(self, query: str) -> List[ContentItem]:
        return (await self.search_outcome(query)).items

    async def fetch_trending_outcome(self) -> FetchOutcome:
        return await self._fetch(trending_request())

    async def fetch_category_outcome(self, category: str) -> FetchOutcome:
        return await self._fetch(category_request(category))

    async def search_outcome(self, query: str) -> FetchOutcome:
        return await self._fetch(search_request(query))

    async def chat(self, history: List[ChatTurn], new_message: str) -> str:
        try:
            return await self.llm.chat(history, new_message, CHAT_SYSTEM_INSTRUCTION)
        except Exception as e:
            self.logger.error("Chat request failed", error=str(e), history_turns=len(history))
            return CHAT_FALLBACK_REPLY

    async def _fetch(self, request: ContentRequest) -> FetchOutcome:
        cached = self._read_cache(request.cache_key)
        if cached is not None:
            self.logger.info("Cache hit", cache_key=request.cache_key, items=len(cached))
            return FetchOutcome.success(cached, cached=True)

        self.logger.info("Cache miss - requesting content", cache_key=request.cache_key, kind=request.kind.value)
        request.format_instructions = self.parser.get_format_instructions()
        try:
            text = await self.llm.generate(request)
        except Exception as e:
            self.logger.error("Content backend call failed", cache_key=request.cache_key, error=str(e))
            return FetchOutcome.failure(f"backend error: {e}")

        items = self._parse_items(text, request.cache_key)
        if items is None:
            return FetchOutcome.failure("malformed response")

        self._write_cache(request.cache_key, items)
        self.logger.info("Content fetched and cached", cache_key=request.cache_key, items=len(items))
        return FetchOutcome.success(items)

    def _parse_items(self, text: str, cache_key: str) -> Optional[List[ContentItem]]:
        # An empty body reads as an empty list, same as a literal "[]".
        if not text or not text.strip():
            self.logger.warning("Empty response from content backend", cache_key=cache_key)
            return []
        try:
            return self.parser.parse(text).root
        except Exception as e:
            self.logger.error("Malformed content response", cache_key=cache_key, error=str(e), response_length=len(text))
            return None

    def _read_cache(self, key: str) -> Optional[List[ContentItem]]:
        try:
            raw = self.cache.get(key)
        except Exception as e:
            self.logger.warning("Error reading from cache", cache_key=key, error=str(e))
            return None
        if raw is None:
            return None

        try:
            entry = CacheEntry.model_validate(orjson.loads(raw))
        except (orjson.JSONDecodeError, ValidationError) as e:
            self.logger.warning("Discarding unreadable cache entry", cache_key=key, error=str(e))
            self._evict(key)
            return None

        age = self.clock.now() - entry.timestamp
        if age > self.ttl:
            self.logger.info("Cache entry expired", cache_key=key, age_seconds=round(age, 1))
            self._evict(key)
            return None
        return entry.data

    def _write_cache(self, key: str, items: List[ContentItem]):
        entry = CacheEntry(data=items, timestamp=self.clock.now())
        try:
            self.cache.set(key, orjson.dumps(entry.model_dump(mode="json")))
        except Exception as e:
            self.logger.warning("Error writing to cache", cache_key=key, error=str(e))

    def _evict(self, key: str):
        try:
            self.cache.delete(key)
        except Exception as e:
            self.logger.warning("Error removing cache entry", cache_key=key, error=str(e))
