"""
Outcome types returned by the storage service.

Storage operations never raise for business-rule violations.  They
return either the requested value or a ``StorageError`` describing why
the operation was rejected; callers branch on ``isinstance``.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    UNIQUENESS = "uniqueness"
    INTEGRITY = "integrity"
    RELATION_NOT_FOUND = "relation_not_found"
    INVALID = "invalid"


@dataclass(frozen=True)
class StorageError:
    """A rejected storage operation.

    ``error`` is the human-readable message surfaced to API clients;
    ``kind`` classifies the rejection.
    """

    error: str
    kind: ErrorKind


@dataclass(frozen=True)
class Success:
    success: bool = True
