"""Cache lookup outcome."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Hit:
    """A cache entry was present and decoded.

    ``value`` may be any JSON value, including ``None`` or an empty list:
    a present-but-empty entry is still a hit.
    """

    value: Any


@dataclass(frozen=True)
class Absent:
    """No usable cache entry exists for the key."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()

CacheLookup = Hit | Absent
