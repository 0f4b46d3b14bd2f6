"""Exceptions raised by table operations."""
from __future__ import annotations

from enum import Enum


class IngestionFailure(str, Enum):
    NOT_A_COLLECTION = "not_a_collection"
    ARITY_MISMATCH = "arity_mismatch"


class SortFailure(str, Enum):
    INVALID_INDEX = "invalid_index"
    NOT_SORTABLE = "not_sortable"


class TableError(Exception):
    """Base class for every error the engine raises."""


class IngestionError(TableError):
    def __init__(self, reason: IngestionFailure, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class SchemaError(TableError):
    """Raised when a sample record has no shape columns can be inferred from."""


class SortError(TableError):
    def __init__(self, reason: SortFailure, message: str) -> None:
        super().__init__(message)
        self.reason = reason
