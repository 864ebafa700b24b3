"""HTTP handler for origin change events."""

from article_cache.dto import ChangeEventRequest, RevalidateResponse
from article_cache.services import RevalidationService


class WebhookHandler:
    """Handles POST /revalidate.

    The sender always receives an acknowledgement once the event validates;
    origin failures during the collection refresh are not reported back.
    """

    def __init__(self, revalidation_service: RevalidationService) -> None:
        self._revalidation = revalidation_service

    async def revalidate(self, request: ChangeEventRequest) -> RevalidateResponse:
        """Apply one change event to the cache."""
        await self._revalidation.apply(request.to_entity())
        return RevalidateResponse(received=True)
