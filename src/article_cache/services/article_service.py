"""Article resource service.

Read paths follow cache-aside: try the cache, fall back to the origin on a
miss, then populate the cache. Create goes straight to the origin; the cache
catches up when the origin's change event reaches the revalidation webhook.
"""

from typing import Any

from article_cache.entities import Err, ErrorKind, Hit, OperationResult, Ok
from article_cache.errors import ArticleCacheError, NotFoundError, OriginError
from article_cache.logger import get_logger
from article_cache.protocols import OriginStore
from article_cache.services.cache_accessor import CacheAccessor

logger = get_logger(__name__)

ARTICLES_PATH = "/articles"


def collection_key() -> str:
    """Cache key of the full article collection."""
    return ARTICLES_PATH


def item_key(record_id: Any) -> str:
    """Cache key of a single article."""
    return f"{ARTICLES_PATH}/{record_id}"


ERROR_KINDS: dict[type[ArticleCacheError], ErrorKind] = {
    NotFoundError: ErrorKind.NOT_FOUND,
    OriginError: ErrorKind.ORIGIN,
}


def to_err(e: ArticleCacheError) -> Err:
    """Convert a service exception into a failed OperationResult."""
    return Err(kind=ERROR_KINDS[type(e)], message=e.message, detail=e.details)


class ArticleService:
    """Cache-aside article operations.

    Example:
        ```python
        service = ArticleService(cache=CacheAccessor(store), origin=origin)
        result = await service.get_article("5")
        ```
    """

    def __init__(self, cache: CacheAccessor, origin: OriginStore, table: str = "articles") -> None:
        """Initialize the service.

        Args:
            cache: Cache accessor over the key-value store
            origin: Authoritative data store
            table: Origin table holding articles
        """
        self._cache = cache
        self._origin = origin
        self._table = table

    async def list_articles(self) -> OperationResult:
        """Return every article, from cache when present.

        Returns:
            Ok(list of records) or Err(ORIGIN)
        """
        key = collection_key()
        cached = await self._cache.read(key)
        if isinstance(cached, Hit):
            return Ok(cached.value)

        try:
            records = await self._origin.select_all(self._table)
        except OriginError as e:
            return to_err(e)

        await self._cache.write(key, records)
        return Ok(records)

    async def get_article(self, record_id: Any) -> OperationResult:
        """Return one article by id, from cache when present.

        A missing origin row is reported as NOT_FOUND and is never cached. A
        found row is cached only under the key of its own id, so an id the
        origin normalizes (e.g. "05") never creates a second entry.

        Args:
            record_id: The article id

        Returns:
            Ok(record), Err(NOT_FOUND) or Err(ORIGIN)
        """
        key = item_key(record_id)
        cached = await self._cache.read(key)
        if isinstance(cached, Hit):
            return Ok(cached.value)

        try:
            record = await self._origin.select_by_id(self._table, record_id)
        except OriginError as e:
            return to_err(e)

        if record is None:
            logger.info("article not found at origin", id=str(record_id))
            return to_err(NotFoundError(details={"id": str(record_id)}))

        canonical_key = item_key(record.get("id", record_id))
        if canonical_key != key:
            logger.debug("origin normalized article id", requested=key, cached_as=canonical_key)
        await self._cache.write(canonical_key, record)
        return Ok(record)

    async def create_article(self, title: str, content: str | None) -> OperationResult:
        """Insert a new article at the origin.

        Args:
            title: Article title
            content: Article body

        Returns:
            Ok(inserted rows) or Err(ORIGIN) carrying the origin's error payload
        """
        try:
            data = await self._origin.insert(self._table, {"title": title, "content": content})
        except OriginError as e:
            logger.warning("article insert rejected", error=e.message)
            return to_err(e)

        logger.info("article created", rows=len(data))
        return Ok(data)
