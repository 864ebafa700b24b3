"""Debug endpoints for inspecting and seeding the collection cache entry."""

from typing import Any

from article_cache.entities import Hit
from article_cache.services import CacheAccessor, collection_key

SAMPLE_ARTICLES: list[dict[str, Any]] = [{"title": "test3"}, {"title": "test4"}]


class DebugHandler:
    """Handles GET /read-kv and GET /write-kv."""

    def __init__(self, cache: CacheAccessor) -> None:
        self._cache = cache

    async def read_kv(self) -> Any:
        """Return the cached collection, or None when nothing is cached."""
        cached = await self._cache.read(collection_key())
        return cached.value if isinstance(cached, Hit) else None

    async def write_kv(self) -> list[dict[str, Any]]:
        """Seed the collection entry with a fixed sample."""
        await self._cache.write(collection_key(), SAMPLE_ARTICLES)
        return SAMPLE_ARTICLES
