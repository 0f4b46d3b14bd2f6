"""Configuration for schema defaults, date parsing, and validation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json

from .models import SemanticType


DEFAULT_DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y/%m/%d",
]


@dataclass
class ColumnWidths:
    text: int = 15
    integer: int = 8
    float: int = 10
    date: int = 12
    boolean: int = 8

    def for_type(self, semantic_type: SemanticType) -> int:
        return getattr(self, semantic_type.value)


@dataclass
class ValidationThresholds:
    min_coverage: float = 0.99
    min_type_integrity: float = 0.95
    min_row_completeness: float = 0.99
    type_hit_ratio: float = 0.6


@dataclass
class TableConfig:
    page_size: int = 10
    date_formats: List[str] = field(default_factory=lambda: list(DEFAULT_DATE_FORMATS))
    lenient_dates: bool = False
    infer_text_types: bool = False
    widths: ColumnWidths = field(default_factory=ColumnWidths)
    validation: ValidationThresholds = field(default_factory=ValidationThresholds)

    @staticmethod
    def default() -> "TableConfig":
        return TableConfig()


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Optional[str]) -> TableConfig:
    if not path:
        return TableConfig.default()
    with open(path, "r", encoding="utf-8") as handle:
        raw = json.load(handle)

    defaults = TableConfig.default()
    merged = _merge_dict(
        {
            "page_size": defaults.page_size,
            "date_formats": defaults.date_formats,
            "lenient_dates": defaults.lenient_dates,
            "infer_text_types": defaults.infer_text_types,
            "widths": defaults.widths.__dict__,
            "validation": defaults.validation.__dict__,
        },
        raw,
    )

    return TableConfig(
        page_size=max(1, int(merged.get("page_size", defaults.page_size))),
        date_formats=list(merged.get("date_formats") or defaults.date_formats),
        lenient_dates=bool(merged.get("lenient_dates", defaults.lenient_dates)),
        infer_text_types=bool(merged.get("infer_text_types", defaults.infer_text_types)),
        widths=ColumnWidths(**merged.get("widths", {})),
        validation=ValidationThresholds(**merged.get("validation", {})),
    )
