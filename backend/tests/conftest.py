from typing import List
from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest
from structlog.stdlib import BoundLogger

from domain.entities import ContentItem
from domain.interfaces import ILLMService
from repositories.cache import InMemoryCacheRepository
from services.content_service import ContentFetchCache
from utils.clock import FrozenClock

SAMPLE_MOVIES = [
    {
        "id": 27205,
        "title": "Inception",
        "overview": "A thief who steals corporate secrets through dream-sharing technology.",
        "release_date": "2010-07-15",
        "vote_average": 8.4,
        "genres": ["Action", "Sci-Fi", "Thriller"],
        "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
        "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
    },
    {
        "id": 157336,
        "title": "Interstellar",
        "overview": "A team of explorers travel through a wormhole in space.",
        "release_date": "2014-11-05",
        "vote_average": 8.7,
        "genres": ["Adventure", "Drama", "Sci-Fi"],
        "poster_path": "",
    },
]


def llm_payload(movies: List[dict] = None) -> str:
    return orjson.dumps(SAMPLE_MOVIES if movies is None else movies).decode()


@pytest.fixture
def mock_logger() -> BoundLogger:
    """Create a mock logger for testing."""
    logger = MagicMock(spec=BoundLogger)
    logger.info = MagicMock()
    logger.debug = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(start=1_700_000_000.0)


@pytest.fixture
def memory_cache() -> InMemoryCacheRepository:
    return InMemoryCacheRepository(prefix="test_")


@pytest.fixture
def mock_llm_service() -> ILLMService:
    """Create a mock LLM backend returning two well-formed movies."""
    service = MagicMock(spec=ILLMService)
    service.generate = AsyncMock(return_value=llm_payload())
    service.chat = AsyncMock(return_value="Try Arrival, it's a slow-burn gem.")
    return service


@pytest.fixture
def content_service(mock_llm_service, memory_cache, clock, mock_logger) -> ContentFetchCache:
    return ContentFetchCache(
        llm=mock_llm_service,
        cache=memory_cache,
        clock=clock,
        logger=mock_logger,
        ttl=3600,
    )


@pytest.fixture
def sample_items() -> List[ContentItem]:
    return [ContentItem(**m) for m in SAMPLE_MOVIES]


@pytest.fixture
def make_payload():
    return llm_payload
