"""Article Cache - cache-aside edge service for an articles backend.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (KeyValueStore, OriginStore)
    - repositories: Redis and PostgREST implementations
    - services: Cache-aside reads, origin writes, change-event revalidation
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from article_cache.services import ArticleService, CacheAccessor

    service = ArticleService(cache=CacheAccessor(store), origin=origin)
    result = await service.list_articles()
    ```

For HTTP API:
    ```python
    from article_cache.api.app import app
    ```
"""

from article_cache.codec import decode, encode
from article_cache.config import Settings, get_settings
from article_cache.entities import ABSENT, ChangeEvent, ChangeType, Err, Hit, Ok
from article_cache.errors import ArticleCacheError, DecodeError, NotFoundError, OriginError
from article_cache.handlers import ArticleHandler, WebhookHandler
from article_cache.protocols import KeyValueStore, OriginStore
from article_cache.repositories import PostgrestOriginRepository, RedisKeyValueRepository
from article_cache.services import ArticleService, CacheAccessor, RevalidationService

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Serialization
    "encode",
    "decode",
    # Protocols (interfaces)
    "KeyValueStore",
    "OriginStore",
    # Services (business logic)
    "ArticleService",
    "CacheAccessor",
    "RevalidationService",
    # Handlers (HTTP)
    "ArticleHandler",
    "WebhookHandler",
    # Repositories (data access)
    "PostgrestOriginRepository",
    "RedisKeyValueRepository",
    # Entities (domain models)
    "ABSENT",
    "Hit",
    "Ok",
    "Err",
    "ChangeEvent",
    "ChangeType",
    # Errors
    "ArticleCacheError",
    "DecodeError",
    "NotFoundError",
    "OriginError",
]
