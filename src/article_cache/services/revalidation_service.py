"""Change-event driven cache resynchronization."""

from article_cache.entities import ChangeEvent, ChangeType
from article_cache.errors import OriginError
from article_cache.logger import get_logger
from article_cache.protocols import OriginStore
from article_cache.services.article_service import collection_key, item_key
from article_cache.services.cache_accessor import CacheAccessor

logger = get_logger(__name__)


class RevalidationService:
    """Applies origin change events to the cache.

    The item entry is written or deleted according to the event type, then
    the collection entry is rebuilt from a fresh origin read. Rebuilding the
    whole list costs one origin query per event; no partial patching of the
    cached list is attempted.
    """

    def __init__(self, cache: CacheAccessor, origin: OriginStore, table: str = "articles") -> None:
        self._cache = cache
        self._origin = origin
        self._table = table

    async def apply(self, event: ChangeEvent) -> None:
        """Resynchronize the cache after one origin mutation.

        Event types other than INSERT, UPDATE and DELETE skip the item step
        and only refresh the collection. Origin failures while refreshing
        the collection are logged and swallowed; cache store failures
        propagate.

        Args:
            event: The change notification
        """
        change_type = event.change_type
        if change_type is None:
            logger.info(
                "change event without row handling",
                type=event.type_name,
                table=event.table,
                schema=event.schema,
            )
        else:
            record_id = event.record_id
            logger.info(
                "change event received",
                type=change_type.value,
                id=str(record_id),
                table=event.table,
                schema=event.schema,
            )
            if change_type is ChangeType.DELETE:
                await self._cache.delete(item_key(record_id))
            else:
                await self._cache.write(item_key(record_id), event.record)

        await self.refresh_collection()

    async def refresh_collection(self) -> bool:
        """Rewrite the collection entry from the origin.

        Returns:
            True if the entry was rewritten, False if the origin query failed
        """
        try:
            records = await self._origin.select_all(self._table)
        except OriginError as e:
            logger.error("collection refresh failed", error=e.message, details=e.details)
            return False

        await self._cache.write(collection_key(), records)
        return True
