"""Change event domain entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

Record = dict[str, Any]


class ChangeType(str, Enum):
    """Kind of mutation reported by the origin store."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ChangeEvent:
    """A single origin mutation notification.

    Attributes:
        type: The kind of mutation; any other value (e.g. "TRUNCATE") is
            kept as a plain string and only refreshes the collection
        record: New state of the row (INSERT and UPDATE)
        old_record: Prior state of the row (DELETE)
        table: Source table, when the sender reports it
        schema: Source schema, when the sender reports it
    """

    type: ChangeType | str
    record: Record | None = None
    old_record: Record | None = None
    table: str | None = None
    schema: str | None = None

    @property
    def change_type(self) -> ChangeType | None:
        """The mutation kind, or None for types this service does not handle."""
        try:
            return ChangeType(self.type)
        except ValueError:
            return None

    @property
    def type_name(self) -> str:
        return self.type.value if isinstance(self.type, ChangeType) else str(self.type)

    @property
    def record_id(self) -> Any:
        """Id of the affected row."""
        change_type = self.change_type
        if change_type is None:
            raise ValueError(f"{self.type_name} events do not target a row")
        source = self.old_record if change_type is ChangeType.DELETE else self.record
        if source is None:
            raise ValueError(f"{change_type.value} event carries no row")
        return source["id"]
