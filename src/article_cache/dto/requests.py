"""Request DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from article_cache.entities import ChangeEvent, ChangeType


class CreateArticleRequest(BaseModel):
    """Request DTO for creating an article."""

    title: str = Field(..., description="Article title", min_length=1)
    content: str | None = Field(None, description="Article body")


class ChangeEventRequest(BaseModel):
    """Request DTO for the revalidation webhook.

    Mirrors the payload of a Supabase database webhook. ``record`` is
    required for INSERT and UPDATE, ``old_record`` for DELETE, and the
    required row must carry an ``id``. Other event types are accepted
    without a row.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="INSERT, UPDATE or DELETE; other types only refresh the collection")
    record: dict[str, Any] | None = Field(None, description="New state of the row")
    old_record: dict[str, Any] | None = Field(None, description="Prior state of the row")
    table: str | None = Field(None, description="Source table")
    schema_name: str | None = Field(None, alias="schema", description="Source schema")

    @model_validator(mode="after")
    def check_row(self) -> "ChangeEventRequest":
        if self.type not in {t.value for t in ChangeType}:
            return self
        if self.type == ChangeType.DELETE:
            field_name, row = "old_record", self.old_record
        else:
            field_name, row = "record", self.record

        if row is None:
            raise ValueError(f"{field_name} is required for {self.type} events")
        if row.get("id") is None:
            raise ValueError(f"{field_name} must contain an id")
        return self

    def to_entity(self) -> ChangeEvent:
        """Convert to the internal change event."""
        known = self.type in {t.value for t in ChangeType}
        return ChangeEvent(
            type=ChangeType(self.type) if known else self.type,
            record=self.record,
            old_record=self.old_record,
            table=self.table,
            schema=self.schema_name,
        )
