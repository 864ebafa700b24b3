"""Domain entities for internal representation.

These are pure frozen dataclasses used internally by services. They are NOT
used for API contracts - use DTOs from the dto package for that.
"""

from .cache_lookup import ABSENT, Absent, CacheLookup, Hit
from .change_event import ChangeEvent, ChangeType, Record
from .operation_result import Err, ErrorKind, OperationResult, Ok

__all__ = [
    "ABSENT",
    "Absent",
    "CacheLookup",
    "ChangeEvent",
    "ChangeType",
    "Err",
    "ErrorKind",
    "Hit",
    "OperationResult",
    "Ok",
    "Record",
]
