"""Headless data table engine: schema inference, sorting, filtering, paging."""
from __future__ import annotations

from .config import TableConfig, load_config
from .errors import (
    IngestionError,
    IngestionFailure,
    SchemaError,
    SortError,
    SortFailure,
    TableError,
)
from .models import Cell, Column, Row, SemanticType
from .schema import FieldOptions, infer_columns, parse_field_options
from .table import Table

__all__ = [
    "Cell",
    "Column",
    "FieldOptions",
    "IngestionError",
    "IngestionFailure",
    "Row",
    "SchemaError",
    "SemanticType",
    "SortError",
    "SortFailure",
    "Table",
    "TableConfig",
    "TableError",
    "infer_columns",
    "load_config",
    "parse_field_options",
]
