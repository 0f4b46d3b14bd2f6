"""Type-aware ordering of cells and rows.

Every cell maps to a ``(rank, payload)`` sort key. Values that parse as their
column's semantic type get rank ``PARSED`` and a typed payload; values that do
not become ``UNPARSED`` and carry their text, which compares lexically and
orders after every parsed value. Keys of one column are therefore always
mutually comparable, and Python's stable sort does the rest.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_DATE_FORMATS
from .models import Cell, Row, SemanticType
from .utils import parse_bool, parse_date, parse_number, stringify

PARSED = 0
UNPARSED = 1

SortKey = Tuple[int, Any]


def value_sort_key(
    value: Any,
    semantic_type: SemanticType,
    date_formats: Iterable[str] = DEFAULT_DATE_FORMATS,
    lenient_dates: bool = False,
) -> SortKey:
    if semantic_type == SemanticType.TEXT:
        if isinstance(value, bool):
            value = "true" if value else "false"
        return (PARSED, stringify(value).casefold())
    if semantic_type in (SemanticType.INTEGER, SemanticType.FLOAT):
        number = parse_number(value)
        if number is not None:
            return (PARSED, number)
    elif semantic_type == SemanticType.BOOLEAN:
        flag = parse_bool(value)
        if flag is not None:
            return (PARSED, flag)
    elif semantic_type == SemanticType.DATE:
        moment = parse_date(value, date_formats, lenient_dates)
        if moment is not None:
            return (PARSED, moment)
    return (UNPARSED, stringify(value))


def cell_sort_key(
    cell: Cell,
    date_formats: Iterable[str] = DEFAULT_DATE_FORMATS,
    lenient_dates: bool = False,
) -> SortKey:
    return value_sort_key(cell.value, cell.semantic_type, date_formats, lenient_dates)


def compare_cells(
    a: Cell,
    b: Cell,
    date_formats: Iterable[str] = DEFAULT_DATE_FORMATS,
    lenient_dates: bool = False,
) -> int:
    """Three-way comparison of two cells using ``a``'s semantic type."""
    formats = list(date_formats)
    key_a = value_sort_key(a.value, a.semantic_type, formats, lenient_dates)
    key_b = value_sort_key(b.value, a.semantic_type, formats, lenient_dates)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sorted_positions(
    rows: Sequence[Row],
    column_index: int,
    descending: bool = False,
    date_formats: Optional[Iterable[str]] = None,
    lenient_dates: bool = False,
) -> List[int]:
    """Positions into ``rows`` in sorted order; equal keys keep their order."""
    formats = list(date_formats) if date_formats is not None else DEFAULT_DATE_FORMATS
    keys = [cell_sort_key(row.cells[column_index], formats, lenient_dates) for row in rows]
    positions = list(range(len(rows)))
    positions.sort(key=keys.__getitem__, reverse=descending)
    return positions
