"""Column schema inference from sample records."""
from __future__ import annotations

import dataclasses
import logging
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from .config import TableConfig
from .errors import SchemaError
from .formatters import default_formatter, get_formatter
from .models import Column, SemanticType

logger = logging.getLogger(__name__)

OPTIONS_METADATA_KEY = "table"

_UNION_TYPES: Tuple[Any, ...] = (typing.Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES += (types.UnionType,)


@dataclass
class FieldOptions:
    """Per-field column configuration, parsed from ``header[,opt]*``.

    ``None`` means "not specified" so defaults apply.
    """

    header: Optional[str] = None
    sortable: Optional[bool] = None
    searchable: Optional[bool] = None
    width: Optional[int] = None
    format: Optional[str] = None


def parse_field_options(text: str) -> FieldOptions:
    options = FieldOptions()
    if not text:
        return options
    parts = text.split(",")
    header = parts[0].strip()
    if header:
        options.header = header
    for raw in parts[1:]:
        part = raw.strip()
        if part == "sortable":
            options.sortable = True
        elif part == "!sortable":
            options.sortable = False
        elif part == "searchable":
            options.searchable = True
        elif part == "!searchable":
            options.searchable = False
        elif part.startswith("width:"):
            try:
                options.width = int(part[len("width:"):])
            except ValueError:
                logger.debug("Ignoring malformed width option %r", part)
        elif part.startswith("format:"):
            options.format = part[len("format:"):].strip() or None
        elif part:
            logger.debug("Ignoring unknown field option %r", part)
    return options


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in _UNION_TYPES:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def semantic_type_for_annotation(annotation: Any) -> Optional[SemanticType]:
    """Map a declared type to a semantic type; ``None`` if it is not a class."""
    annotation = _unwrap_optional(annotation)
    if not isinstance(annotation, type):
        return None
    if issubclass(annotation, bool):
        return SemanticType.BOOLEAN
    if issubclass(annotation, int):
        return SemanticType.INTEGER
    if issubclass(annotation, (float, Decimal)):
        return SemanticType.FLOAT
    if issubclass(annotation, (date, datetime)):
        return SemanticType.DATE
    return SemanticType.TEXT


def semantic_type_for_value(value: Any) -> SemanticType:
    if value is None:
        return SemanticType.TEXT
    return semantic_type_for_annotation(type(value)) or SemanticType.TEXT


def _type_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        return {}


def is_struct_like(record: Any) -> bool:
    if isinstance(record, (str, bytes, bytearray, Mapping)) or record is None:
        return False
    if isinstance(record, type):
        return False
    if dataclasses.is_dataclass(record) or hasattr(record, "_fields"):
        return True
    return hasattr(record, "__dict__") or hasattr(type(record), "__slots__")


def public_fields(record: Any) -> List[str]:
    """Public field names of a struct-like record, in declaration order."""
    if dataclasses.is_dataclass(record):
        return [f.name for f in dataclasses.fields(record) if not f.name.startswith("_")]
    fields = getattr(record, "_fields", None)
    if isinstance(fields, tuple):
        return [name for name in fields if not name.startswith("_")]
    names: List[str] = []
    for klass in reversed(type(record).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith("_") and name not in names and hasattr(record, name):
                names.append(name)
    for name in getattr(record, "__dict__", {}):
        if not name.startswith("_") and name not in names:
            names.append(name)
    return names


def _field_options(record: Any, name: str) -> FieldOptions:
    if not dataclasses.is_dataclass(record):
        return FieldOptions()
    for item in dataclasses.fields(record):
        if item.name != name:
            continue
        raw = item.metadata.get(OPTIONS_METADATA_KEY)
        if isinstance(raw, FieldOptions):
            return raw
        if isinstance(raw, str):
            return parse_field_options(raw)
    return FieldOptions()


def build_column(
    key: str,
    semantic_type: SemanticType,
    options: Optional[FieldOptions] = None,
    config: Optional[TableConfig] = None,
) -> Column:
    config = config or TableConfig.default()
    options = options or FieldOptions()
    formatter = get_formatter(options.format) if options.format else default_formatter
    return Column(
        key=key,
        header=options.header or key,
        semantic_type=semantic_type,
        width=options.width if options.width is not None else config.widths.for_type(semantic_type),
        sortable=True if options.sortable is None else options.sortable,
        searchable=True if options.searchable is None else options.searchable,
        formatter=formatter,
    )


def _columns_from_struct(record: Any, config: TableConfig) -> List[Column]:
    hints = _type_hints(type(record))
    columns: List[Column] = []
    for name in public_fields(record):
        semantic_type = None
        if name in hints:
            semantic_type = semantic_type_for_annotation(hints[name])
        if semantic_type is None:
            semantic_type = semantic_type_for_value(getattr(record, name, None))
        columns.append(build_column(name, semantic_type, _field_options(record, name), config))
    return columns


def _columns_from_mapping(record: Mapping, config: TableConfig) -> List[Column]:
    columns: List[Column] = []
    for key, value in record.items():
        if not isinstance(key, str):
            raise SchemaError(f"cannot infer columns from mapping with non-string key {key!r}")
        columns.append(build_column(key, semantic_type_for_value(value), config=config))
    return columns


def infer_columns(sample: Any, config: Optional[TableConfig] = None) -> List[Column]:
    """Derive an ordered column list from one sample record.

    Struct-like records (dataclasses, named tuples, plain objects) yield one
    column per public field; string-keyed mappings one column per key.
    """
    config = config or TableConfig.default()
    if isinstance(sample, Mapping):
        return _columns_from_mapping(sample, config)
    if is_struct_like(sample):
        return _columns_from_struct(sample, config)
    raise SchemaError(f"cannot infer columns from type {type(sample).__name__}")
