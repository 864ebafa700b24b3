"""Dependency injection configuration for the FastAPI app.

Every collaborator is built once in the lifespan and kept on an explicit
``AppContext`` stored in ``app.state``. Handlers receive it through
``Depends``; nothing reads module globals at request time.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from article_cache.config import Settings, get_settings
from article_cache.handlers import ArticleHandler, DebugHandler, WebhookHandler
from article_cache.logger import configure_logging, get_logger
from article_cache.protocols import KeyValueStore, OriginStore
from article_cache.repositories import PostgrestOriginRepository, RedisKeyValueRepository
from article_cache.services import ArticleService, CacheAccessor, RevalidationService

logger = get_logger(__name__)


@dataclass(frozen=True)
class AppContext:
    """Everything a request handler may need, built once per process."""

    settings: Settings
    store: KeyValueStore
    origin: OriginStore
    cache: CacheAccessor
    article_handler: ArticleHandler
    webhook_handler: WebhookHandler
    debug_handler: DebugHandler

    @classmethod
    def create(cls, settings: Settings, store: KeyValueStore, origin: OriginStore) -> "AppContext":
        """Wire services and handlers around the given collaborators.

        Args:
            settings: Application settings
            store: Key-value cache backend
            origin: Authoritative data store

        Returns:
            A fully wired AppContext
        """
        cache = CacheAccessor(store)
        table = settings.articles_table
        return cls(
            settings=settings,
            store=store,
            origin=origin,
            cache=cache,
            article_handler=ArticleHandler(
                ArticleService(cache, origin, table),
                allow_origins=settings.cors_allow_origins,
            ),
            webhook_handler=WebhookHandler(RevalidationService(cache, origin, table)),
            debug_handler=DebugHandler(cache),
        )


def get_context(request: Request) -> AppContext:
    """Dependency injection for AppContext from app.state.

    Raises:
        RuntimeError: If the context is not initialized
    """
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("AppContext not initialized. Check lifespan setup.")
    return context


ContextDep = Annotated[AppContext, Depends(get_context)]


def get_article_handler(context: ContextDep) -> ArticleHandler:
    return context.article_handler


def get_webhook_handler(context: ContextDep) -> WebhookHandler:
    return context.webhook_handler


def get_debug_handler(context: ContextDep) -> DebugHandler:
    return context.debug_handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for the FastAPI app.

    Builds the Redis store and the PostgREST origin from settings, stores the
    wired AppContext in app.state, and closes both clients on shutdown.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    store = RedisKeyValueRepository.create(settings)
    origin = PostgrestOriginRepository.create(settings)
    app.state.context = AppContext.create(settings, store, origin)

    if await store.health_check():
        logger.info("redis connection successful", redis_url=settings.redis_url)
    else:
        logger.warning("redis unreachable at startup", redis_url=settings.redis_url)
    logger.info("article cache started", origin=settings.rest_url, table=settings.articles_table)

    yield

    await origin.close()
    await store.close()
    del app.state.context
    logger.info("article cache shut down")


ArticleHandlerDep = Annotated[ArticleHandler, Depends(get_article_handler)]
WebhookHandlerDep = Annotated[WebhookHandler, Depends(get_webhook_handler)]
DebugHandlerDep = Annotated[DebugHandler, Depends(get_debug_handler)]
