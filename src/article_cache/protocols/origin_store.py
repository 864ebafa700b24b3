"""Origin store protocol.

The origin is the authoritative relational backend. Implementations raise
``OriginError`` for any failed query or insert.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OriginStore(Protocol):
    """Protocol for the authoritative data backend."""

    async def select_all(self, table: str) -> list[dict[str, Any]]:
        """Fetch every row of a table.

        Args:
            table: Table name

        Returns:
            All rows, in the order the origin returns them

        Raises:
            OriginError: If the query fails
        """
        ...

    async def select_by_id(self, table: str, record_id: Any) -> dict[str, Any] | None:
        """Fetch the row whose id matches.

        Args:
            table: Table name
            record_id: Value of the row's id column

        Returns:
            The row, or None if no row matches

        Raises:
            OriginError: If the query fails
        """
        ...

    async def insert(self, table: str, fields: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert one row.

        Args:
            table: Table name
            fields: Column values of the new row

        Returns:
            The inserted rows as stored by the origin

        Raises:
            OriginError: If the insert is rejected or fails
        """
        ...
