"""Data models for columns, cells, and rows."""
from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from .formatters import Formatter, default_formatter

Accessor = Callable[[Any], Any]


class SemanticType(str, Enum):
    """Governs how a column's values compare and format by default."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DATE = "date"
    BOOLEAN = "boolean"


@dataclass
class Column:
    """Schema for one logical field.

    ``width`` is a presentation hint and the only attribute that may change
    once the column belongs to a table.
    """

    key: str
    header: str = ""
    semantic_type: SemanticType = SemanticType.TEXT
    width: int = 15
    sortable: bool = True
    searchable: bool = True
    formatter: Formatter = default_formatter
    accessor: Optional[Accessor] = None
    _attached: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.header:
            self.header = self.key

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "width" and self.__dict__.get("_attached", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r} of column {self.key!r}")
        super().__setattr__(name, value)

    def attach(self) -> None:
        object.__setattr__(self, "_attached", True)

    def format(self, value: Any) -> str:
        if self.formatter is None:
            return default_formatter(value)
        return self.formatter(value)


@dataclass(frozen=True)
class Cell:
    value: Any
    semantic_type: SemanticType = SemanticType.TEXT


@dataclass(frozen=True)
class Row:
    id: int
    cells: Tuple[Cell, ...]
    source: Any = field(default=None, compare=False)

    def value(self, column_index: int) -> Any:
        return self.cells[column_index].value
