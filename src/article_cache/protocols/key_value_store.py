"""Key-value store protocol.

Defines the opaque string store the cache lives in. The store owns eviction
and expiry; this service never sets a TTL.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for key-value cache backends.

    Any type implementing these coroutines satisfies the protocol, no
    explicit inheritance needed.

    Example:
        ```python
        store: KeyValueStore = RedisKeyValueRepository.create(settings)
        await store.put("/articles", "[]")
        ```
    """

    async def get(self, key: str) -> str | None:
        """Fetch the text stored at key.

        Args:
            key: Logical cache key, e.g. "/articles/5"

        Returns:
            The stored text, or None if nothing is stored
        """
        ...

    async def put(self, key: str, value: str) -> None:
        """Store text at key, overwriting any existing entry.

        Args:
            key: Logical cache key
            value: Text to store
        """
        ...

    async def delete(self, key: str) -> None:
        """Remove the entry at key. No-op if absent.

        Args:
            key: Logical cache key
        """
        ...
