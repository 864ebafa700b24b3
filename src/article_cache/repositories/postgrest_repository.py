"""PostgREST implementation of OriginStore.

Talks to a Supabase project (or any PostgREST server) over its REST API:

- ``GET  /rest/v1/{table}?select=*``
- ``GET  /rest/v1/{table}?select=*&id=eq.{id}``
- ``POST /rest/v1/{table}`` with ``Prefer: return=representation``
"""

from typing import Any

import httpx

from article_cache.config import Settings
from article_cache.errors import OriginError
from article_cache.logger import get_logger

logger = get_logger(__name__)


class PostgrestOriginRepository:
    """PostgREST implementation of the OriginStore protocol.

    Example:
        ```python
        origin = PostgrestOriginRepository.create(settings)
        rows = await origin.select_all("articles")
        await origin.close()
        ```
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the origin client.

        Args:
            base_url: PostgREST root, e.g. "https://xyz.supabase.co/rest/v1"
            api_key: Key sent as both ``apikey`` and bearer token
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(cls, settings: Settings) -> "PostgrestOriginRepository":
        """Factory method to create the client from settings."""
        return cls(
            base_url=settings.rest_url,
            api_key=settings.origin_key,
            timeout=settings.origin_timeout,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "apikey": self._api_key,
                    "Authorization": f"Bearer {self._api_key}",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def select_all(self, table: str) -> list[dict[str, Any]]:
        """Fetch every row of a table."""
        return await self._request("GET", f"/{table}", params={"select": "*"})

    async def select_by_id(self, table: str, record_id: Any) -> dict[str, Any] | None:
        """Fetch the row whose id matches, or None.

        An id the id column cannot represent (PostgREST answers 4xx with
        ``22P02``) cannot match any row, so it is reported as None too.
        """
        try:
            rows = await self._request(
                "GET",
                f"/{table}",
                params={"select": "*", "id": f"eq.{record_id}"},
            )
        except OriginError as e:
            if _is_invalid_id(e):
                logger.info("id rejected by origin column type", table=table, id=str(record_id))
                return None
            raise
        return rows[0] if rows else None

    async def insert(self, table: str, fields: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert one row and return it as stored."""
        return await self._request(
            "POST",
            f"/{table}",
            json=[fields],
            headers={"Prefer": "return=representation"},
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            OriginError: On transport failure, error status or non-JSON body
        """
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("origin request failed", method=method, path=path, error=str(e))
            raise OriginError(f"Origin request failed: {e}") from e

        if response.is_error:
            payload = _error_payload(response)
            logger.warning(
                "origin returned error",
                method=method,
                path=path,
                status=response.status_code,
                message=payload.get("message"),
            )
            raise OriginError(
                payload.get("message") or f"Origin responded with {response.status_code}",
                details=payload,
                status_code=response.status_code,
            )

        if not response.content:
            return []

        try:
            return response.json()
        except ValueError as e:
            raise OriginError(
                "Origin returned a non-JSON body",
                details={"body": response.text[:200]},
                status_code=response.status_code,
            ) from e

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None


INVALID_TEXT_REPRESENTATION = "22P02"


def _is_invalid_id(e: OriginError) -> bool:
    """True when the origin rejected the id value itself."""
    return (
        e.status_code is not None
        and 400 <= e.status_code < 500
        and e.details.get("code") == INVALID_TEXT_REPRESENTATION
    )


def _error_payload(response: httpx.Response) -> dict[str, Any]:
    """Extract PostgREST's error object, falling back to the raw text."""
    try:
        payload = response.json()
    except ValueError:
        return {"message": response.text or response.reason_phrase}
    if isinstance(payload, dict):
        return payload
    return {"message": str(payload)}
