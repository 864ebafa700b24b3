"""Cache-aside accessor.

Wraps a KeyValueStore with JSON (de)serialization and an explicit
hit/absent outcome. Corrupt entries are bypassed, never surfaced.
"""

from typing import Any

from article_cache.codec import decode, encode
from article_cache.entities import ABSENT, CacheLookup, Hit
from article_cache.errors import DecodeError
from article_cache.logger import get_logger
from article_cache.protocols import KeyValueStore

logger = get_logger(__name__)


async def read(cache: KeyValueStore, key: str) -> CacheLookup:
    """Look up key in the cache.

    Args:
        cache: The key-value store
        key: Logical cache key

    Returns:
        Hit with the decoded value, or ABSENT if there is no entry or the
        entry cannot be decoded
    """
    text = await cache.get(key)
    if text is None:
        logger.debug("cache miss", key=key)
        return ABSENT

    try:
        value = decode(text)
    except DecodeError as e:
        logger.warning("corrupt cache entry bypassed", key=key, reason=e.details.get("reason"))
        return ABSENT

    logger.debug("cache hit", key=key)
    return Hit(value)


async def write(cache: KeyValueStore, key: str, value: Any) -> None:
    """Encode value and store it at key, overwriting any existing entry."""
    await cache.put(key, encode(value))


async def delete(cache: KeyValueStore, key: str) -> None:
    """Remove the entry at key. No-op if absent."""
    await cache.delete(key)


class CacheAccessor:
    """Cache-aside access bound to one store.

    Example:
        ```python
        accessor = CacheAccessor(store)
        result = await accessor.read("/articles")
        if isinstance(result, Hit):
            return result.value
        ```
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def read(self, key: str) -> CacheLookup:
        """Return Hit(value) or ABSENT for key."""
        return await read(self._store, key)

    async def write(self, key: str, value: Any) -> None:
        """Store value at key."""
        await write(self._store, key, value)

    async def delete(self, key: str) -> None:
        """Remove key."""
        await delete(self._store, key)

    @property
    def store(self) -> KeyValueStore:
        """Get the underlying store (for testing)."""
        return self._store
