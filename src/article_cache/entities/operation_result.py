"""Explicit success/failure outcome of a service operation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure categories a service operation can report."""

    NOT_FOUND = "not_found"
    ORIGIN = "origin"


@dataclass(frozen=True)
class Ok:
    """Successful outcome carrying the operation's value."""

    value: Any


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    Attributes:
        kind: Failure category, drives the HTTP status
        message: Human-readable summary
        detail: Payload reported by the failing collaborator, if any
    """

    kind: ErrorKind
    message: str
    detail: dict[str, Any] = field(default_factory=dict)


OperationResult = Ok | Err
