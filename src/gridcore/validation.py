"""Column-type profiling and table health scoring."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from .config import TableConfig, ValidationThresholds
from .models import SemanticType
from .utils import FALSE_WORDS, TRUE_WORDS, is_date, parse_bool, parse_date, parse_number

if TYPE_CHECKING:
    from .table import Table


@dataclass
class ValidationResult:
    coverage: float
    type_integrity: float
    row_completeness: float
    issues: List[str] = field(default_factory=list)
    unparsed_counts: List[int] = field(default_factory=list)


def infer_text_type(values: Sequence[str], hit_ratio: float = 0.6) -> SemanticType:
    """Guess the semantic type of a column of strings.

    Booleans need every value to be a boolean word. Numbers are checked
    before dates since short numbers like ``3.5`` also parse as dates.
    """
    present = [value.strip() for value in values if value and value.strip()]
    if not present:
        return SemanticType.TEXT
    words = TRUE_WORDS | FALSE_WORDS
    if all(value.lower() in words for value in present) and not all(
        value in ("0", "1") for value in present
    ):
        return SemanticType.BOOLEAN
    numbers = [parse_number(value) for value in present]
    number_hits = sum(1 for number in numbers if number is not None)
    total = len(present)
    if number_hits / total >= hit_ratio:
        if all(isinstance(number, int) for number in numbers if number is not None):
            return SemanticType.INTEGER
        return SemanticType.FLOAT
    date_hits = sum(1 for value in present if is_date(value))
    if date_hits / total >= hit_ratio:
        return SemanticType.DATE
    return SemanticType.TEXT


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parses_as(value: Any, semantic_type: SemanticType, config: TableConfig) -> bool:
    if semantic_type in (SemanticType.INTEGER, SemanticType.FLOAT):
        return parse_number(value) is not None
    if semantic_type == SemanticType.BOOLEAN:
        return parse_bool(value) is not None
    if semantic_type == SemanticType.DATE:
        return parse_date(value, config.date_formats, config.lenient_dates) is not None
    return True


def validate_table(table: "Table", thresholds: Optional[ValidationThresholds] = None) -> ValidationResult:
    thresholds = thresholds or table.config.validation
    rows = table.rows
    n_cols = len(table.columns)

    total_cells = len(rows) * n_cols
    non_empty_cells = 0
    checked = 0
    parsed = 0
    unparsed_counts = [0 for _ in range(n_cols)]
    completeness: List[float] = []

    for row in rows:
        filled = 0
        for idx, cell in enumerate(row.cells):
            if is_empty(cell.value):
                continue
            filled += 1
            if cell.semantic_type == SemanticType.TEXT:
                continue
            checked += 1
            if parses_as(cell.value, cell.semantic_type, table.config):
                parsed += 1
            else:
                unparsed_counts[idx] += 1
        non_empty_cells += filled
        completeness.append(filled / max(1, n_cols))

    coverage = non_empty_cells / total_cells if total_cells else 0.0
    type_integrity = parsed / checked if checked else 1.0
    row_completeness = sum(completeness) / len(completeness) if completeness else 0.0

    issues: List[str] = []
    if coverage < thresholds.min_coverage:
        issues.append("coverage_below_threshold")
    if type_integrity < thresholds.min_type_integrity:
        issues.append("type_integrity_below_threshold")
    if row_completeness < thresholds.min_row_completeness:
        issues.append("row_completeness_below_threshold")

    return ValidationResult(
        coverage=coverage,
        type_integrity=type_integrity,
        row_completeness=row_completeness,
        issues=issues,
        unparsed_counts=unparsed_counts,
    )
