"""Handler layer for HTTP endpoints.

Handlers depend on services, not directly on repositories, and own every
HTTP concern: status codes, headers, response bodies.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .article_handler import CORS_HEADERS, ArticleHandler, cors_headers, result_to_response
from .debug_handler import DebugHandler
from .webhook_handler import WebhookHandler

__all__ = [
    "CORS_HEADERS",
    "cors_headers",
    "ArticleHandler",
    "DebugHandler",
    "WebhookHandler",
    "result_to_response",
]
