"""Conversion of input records into rows of typed cells."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, List

from .models import Cell, Column, Row, SemanticType
from .schema import is_struct_like, public_fields
from .validation import infer_text_type

logger = logging.getLogger(__name__)

MISSING = object()
EMPTY_VALUE = ""


def is_collection(records: Any) -> bool:
    return isinstance(records, Sequence) and not isinstance(records, (str, bytes, bytearray))


def resolve_value(record: Any, key: str) -> Any:
    """Look ``key`` up on ``record``; returns ``MISSING`` when absent.

    Mappings need an exact key. Struct-like records are matched against
    their public field names, exactly first and then case-insensitively.
    """
    if isinstance(record, Mapping):
        return record.get(key, MISSING)
    if not is_struct_like(record):
        return MISSING
    names = public_fields(record)
    if key in names:
        return getattr(record, key)
    lowered = key.lower()
    for name in names:
        if name.lower() == lowered:
            return getattr(record, name)
    return MISSING


def build_row(row_id: int, record: Any, columns: Sequence[Column]) -> Row:
    cells: List[Cell] = []
    for column in columns:
        if column.accessor is not None:
            value = column.accessor(record)
        else:
            value = resolve_value(record, column.key)
            if value is MISSING:
                logger.debug("Row %d has no field %r; using empty value", row_id, column.key)
                value = EMPTY_VALUE
        cells.append(Cell(value=value, semantic_type=column.semantic_type))
    return Row(id=row_id, cells=tuple(cells), source=record)


def refine_text_columns(columns: List[Column], records: Sequence[Any], hit_ratio: float) -> None:
    """Promote TEXT columns whose string values look like another type."""
    for column in columns:
        if column.semantic_type != SemanticType.TEXT or column.accessor is not None:
            continue
        values = []
        for record in records:
            value = resolve_value(record, column.key)
            if isinstance(value, str):
                values.append(value)
        inferred = infer_text_type(values, hit_ratio)
        if inferred != SemanticType.TEXT:
            logger.debug("Column %r profiled as %s", column.key, inferred.value)
            column.semantic_type = inferred
