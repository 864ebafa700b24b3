"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract. Internal logic uses
entities from the entities package.
"""

from .requests import ChangeEventRequest, CreateArticleRequest
from .responses import (
    CreateArticleResponse,
    OriginErrorResponse,
    RevalidateResponse,
    StatusMessageResponse,
)

__all__ = [
    "ChangeEventRequest",
    "CreateArticleRequest",
    "CreateArticleResponse",
    "OriginErrorResponse",
    "RevalidateResponse",
    "StatusMessageResponse",
]
