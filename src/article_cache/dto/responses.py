"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class CreateArticleResponse(BaseModel):
    """Response DTO for a successful article insert."""

    success: bool = Field(True, description="Always true for this response")
    data: Any = Field(..., description="Rows as stored by the origin")


class OriginErrorResponse(BaseModel):
    """Response DTO for a failed origin call."""

    success: bool = Field(False, description="Always false for this response")
    error: dict[str, Any] = Field(..., description="Error payload reported by the origin")


class StatusMessageResponse(BaseModel):
    """Response DTO for plain status messages such as 404s."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable message")


class RevalidateResponse(BaseModel):
    """Response DTO acknowledging a change event."""

    received: bool = Field(True, description="Whether the event was accepted")
