"""Repository layer for data access.

This layer hides the external collaborators (Redis, the PostgREST origin)
behind the protocols in ``article_cache.protocols``. The repositories satisfy
those protocols structurally, not through inheritance.
"""

from article_cache.protocols import KeyValueStore, OriginStore

from .postgrest_repository import PostgrestOriginRepository
from .redis_repository import RedisKeyValueRepository

__all__ = [
    "KeyValueStore",
    "OriginStore",
    "PostgrestOriginRepository",
    "RedisKeyValueRepository",
]
