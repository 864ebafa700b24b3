"""Service layer for business logic.

Services depend on protocols, not concrete implementations, and report
failures as ``OperationResult`` values rather than HTTP errors.

Architecture:
    Handler -> Service -> CacheAccessor / OriginStore
    (HTTP)  -> (Business) -> (Data Access)
"""

from .article_service import ArticleService, collection_key, item_key
from .cache_accessor import CacheAccessor
from .revalidation_service import RevalidationService

__all__ = [
    "ArticleService",
    "CacheAccessor",
    "RevalidationService",
    "collection_key",
    "item_key",
]
