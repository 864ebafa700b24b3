from typing import Annotated, Any

from fastapi import FastAPI, Header, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from redis.exceptions import RedisError

from article_cache.api.dependencies import (
    ArticleHandlerDep,
    DebugHandlerDep,
    WebhookHandlerDep,
    lifespan,
)
from article_cache.config import Settings, get_settings
from article_cache.dto import (
    ChangeEventRequest,
    CreateArticleRequest,
    RevalidateResponse,
    StatusMessageResponse,
)
from article_cache.errors import ArticleCacheError, ErrorResponse
from article_cache.logger import get_logger

logger = get_logger(__name__)

GREETING = "hello world one two three"
UNKNOWN_ROUTE_MESSAGE = "This route doesn't exist"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
OriginHeader = Annotated[str | None, Header()]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with all routes registered.

    Args:
        settings: Settings to use instead of the environment-derived ones
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Article Cache API",
        description="Cache-aside edge service for articles backed by Redis and PostgREST",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["GET", "HEAD", "POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )

    @app.exception_handler(ArticleCacheError)
    async def article_cache_error_handler(request: Request, exc: ArticleCacheError) -> JSONResponse:
        logger.error("unhandled service error", path=request.url.path, code=exc.code, error=exc.message)
        return JSONResponse(
            exc.to_response().model_dump(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(RedisError)
    async def redis_error_handler(request: Request, exc: RedisError) -> JSONResponse:
        logger.error("cache store failure", path=request.url.path, error=str(exc))
        body = ErrorResponse(code="CACHE_UNAVAILABLE", message=f"Cache store failed: {exc}")
        return JSONResponse(body.model_dump(), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Plain text greeting."""
        return GREETING

    @app.options("/articles")
    async def articles_preflight(handler: ArticleHandlerDep, origin: OriginHeader = None) -> Response:
        """CORS preflight for the collection."""
        return await handler.preflight(origin)

    @app.get("/articles")
    async def list_articles(handler: ArticleHandlerDep, origin: OriginHeader = None) -> Response:
        """List every article, cache first."""
        return await handler.list_articles(origin)

    @app.post("/articles")
    async def create_article(request: CreateArticleRequest, handler: ArticleHandlerDep) -> Response:
        """Insert an article at the origin."""
        return await handler.create_article(request)

    @app.get("/articles/{article_id}")
    async def get_article(article_id: str, handler: ArticleHandlerDep) -> Response:
        """Fetch one article, cache first."""
        return await handler.get_article(article_id)

    @app.post("/revalidate", response_model=RevalidateResponse)
    async def revalidate(request: ChangeEventRequest, handler: WebhookHandlerDep) -> RevalidateResponse:
        """Change-event webhook called by the origin."""
        return await handler.revalidate(request)

    @app.get("/read-kv")
    async def read_kv(handler: DebugHandlerDep) -> Any:
        """Return the cached collection entry."""
        return await handler.read_kv()

    @app.get("/write-kv")
    async def write_kv(handler: DebugHandlerDep) -> list[dict[str, Any]]:
        """Seed the collection entry with sample data."""
        return await handler.write_kv()

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def unknown_route(path: str) -> JSONResponse:
        body = StatusMessageResponse(status=status.HTTP_404_NOT_FOUND, message=UNKNOWN_ROUTE_MESSAGE)
        return JSONResponse(body.model_dump(), status_code=status.HTTP_404_NOT_FOUND)

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "article_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
