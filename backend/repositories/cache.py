from typing import Dict, Optional

import redis

from core.settings import settings
from domain.interfaces import ICacheRepository


class RedisCacheRepository(ICacheRepository):
    def __init__(self, url: Optional[str] = None, prefix: Optional[str] = None):
        self.redis = redis.from_url(url or settings.redis_url)
        self.prefix = settings.cache_prefix if prefix is None else prefix

    def get(self, key: str):
        return self.redis.get(self.prefix + key)

    def set(self, key: str, value: bytes):
        # No server-side expiry, entries are aged out when read.
        self.redis.set(self.prefix + key, value)

    def delete(self, key: str):
        self.redis.delete(self.prefix + key)


class InMemoryCacheRepository(ICacheRepository):
    def __init__(self, prefix: Optional[str] = None):
        self.prefix = settings.cache_prefix if prefix is None else prefix
        self.store: Dict[str, bytes] = {}

    def get(self, key: str):
        return self.store.get(self.prefix + key)

    def set(self, key: str, value: bytes):
        self.store[self.prefix + key] = value

    def delete(self, key: str):
        self.store.pop(self.prefix + key, None)


def create_cache_repository() -> ICacheRepository:
    if settings.redis_url:
        return RedisCacheRepository()
    return InMemoryCacheRepository()
