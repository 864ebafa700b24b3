"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the cache backend (Redis, an edge KV namespace, memory)
- Swapping the origin (PostgREST, a direct database driver)
- Unit testing with in-memory fakes
"""

from .key_value_store import KeyValueStore
from .origin_store import OriginStore

__all__ = [
    "KeyValueStore",
    "OriginStore",
]
