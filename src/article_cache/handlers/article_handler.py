"""HTTP handlers for article operations.

Every service outcome passes through ``result_to_response`` so error kinds
map to status codes the same way on every route.
"""

from collections.abc import Callable
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from article_cache.dto import (
    CreateArticleRequest,
    CreateArticleResponse,
    OriginErrorResponse,
    StatusMessageResponse,
)
from article_cache.entities import Err, ErrorKind, OperationResult
from article_cache.services import ArticleService

CORS_HEADERS = {
    "Access-Control-Allow-Methods": "GET,HEAD,POST,OPTIONS",
    "Access-Control-Max-Age": "86400",
}


def cors_headers(allow_origins: tuple[str, ...], request_origin: str | None) -> dict[str, str]:
    """CORS headers for the collection routes.

    ``*`` in allow_origins allows everyone; otherwise an allowed request
    origin is echoed back and any other origin gets no Allow-Origin header.
    """
    headers = dict(CORS_HEADERS)
    if "*" in allow_origins:
        headers["Access-Control-Allow-Origin"] = "*"
    elif request_origin in allow_origins:
        headers["Access-Control-Allow-Origin"] = request_origin
        headers["Vary"] = "Origin"
    return headers

ERROR_STATUS = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ORIGIN: status.HTTP_502_BAD_GATEWAY,
}


def error_response(err: Err, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render a failed outcome."""
    status_code = ERROR_STATUS[err.kind]
    if err.kind is ErrorKind.ORIGIN:
        body = OriginErrorResponse(error={"message": err.message, **err.detail})
    else:
        body = StatusMessageResponse(status=status_code, message=err.message)
    return JSONResponse(body.model_dump(), status_code=status_code, headers=headers)


def result_to_response(
    result: OperationResult,
    render: Callable[[Any], Any] = lambda value: value,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Map an OperationResult to an HTTP response.

    Args:
        result: Outcome of a service call
        render: Builds the JSON body from an Ok value
        headers: Extra headers for both success and error responses
    """
    if isinstance(result, Err):
        return error_response(result, headers=headers)
    return JSONResponse(render(result.value), status_code=status.HTTP_200_OK, headers=headers)


class ArticleHandler:
    """HTTP handlers for the /articles routes.

    Example:
        ```python
        handler = ArticleHandler(article_service=service)

        @app.get("/articles/{article_id}")
        async def get_article(article_id: str):
            return await handler.get_article(article_id)
        ```
    """

    def __init__(self, article_service: ArticleService, allow_origins: tuple[str, ...] = ("*",)) -> None:
        """Initialize the article handler.

        Args:
            article_service: The article service for business logic (required).
            allow_origins: Origins allowed by CORS on the collection routes.
        """
        self._articles = article_service
        self._allow_origins = allow_origins

    async def preflight(self, origin: str | None = None) -> Response:
        """Handle OPTIONS /articles without touching cache or origin."""
        return PlainTextResponse("OK", headers=cors_headers(self._allow_origins, origin))

    async def list_articles(self, origin: str | None = None) -> JSONResponse:
        """Handle GET /articles requests."""
        result = await self._articles.list_articles()
        return result_to_response(result, headers=cors_headers(self._allow_origins, origin))

    async def get_article(self, article_id: str) -> JSONResponse:
        """Handle GET /articles/{id} requests."""
        result = await self._articles.get_article(article_id)
        return result_to_response(result)

    async def create_article(self, request: CreateArticleRequest) -> JSONResponse:
        """Handle POST /articles requests.

        The cache is not touched here; the origin's INSERT event refreshes it
        through the revalidation webhook.
        """
        result = await self._articles.create_article(request.title, request.content)
        return result_to_response(
            result,
            render=lambda data: CreateArticleResponse(data=data).model_dump(),
        )
