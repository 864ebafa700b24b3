"""Redis implementation of KeyValueStore.

Entries are plain Redis strings. Logical keys are prefixed with a namespace
so several caches can share one Redis database.
"""

import redis.asyncio as redis

from article_cache.config import Settings, get_redis_client
from article_cache.logger import get_logger

logger = get_logger(__name__)


class RedisKeyValueRepository:
    """Redis implementation of the KeyValueStore protocol.

    No expiry is set on writes; Redis' own eviction policy (``maxmemory``)
    governs how long entries live.
    """

    def __init__(self, redis_client: redis.Redis, namespace: str = "") -> None:
        """Initialize the repository.

        Args:
            redis_client: An asyncio Redis client (decode_responses=True).
            namespace: Prefix joined to every logical key with ":".
        """
        self._client = redis_client
        self._namespace = namespace

    @classmethod
    def create(cls, settings: Settings) -> "RedisKeyValueRepository":
        """Factory method building the client from settings.

        Args:
            settings: Application settings

        Returns:
            Configured RedisKeyValueRepository
        """
        return cls(redis_client=get_redis_client(settings), namespace=settings.cache_namespace)

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}" if self._namespace else key

    async def get(self, key: str) -> str | None:
        """Fetch the text stored at key, or None."""
        value = await self._client.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def put(self, key: str, value: str) -> None:
        """Store text at key, overwriting any existing entry."""
        await self._client.set(self._key(key), value)

    async def delete(self, key: str) -> None:
        """Remove the entry at key. No-op if absent."""
        removed = await self._client.delete(self._key(key))
        if not removed:
            logger.debug("cache delete of absent key", key=key)

    async def health_check(self) -> bool:
        """Check if Redis is reachable.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except redis.RedisError as e:
            logger.warning("redis ping failed", error=str(e))
            return False

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
