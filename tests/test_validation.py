import pytest

from gridcore import Column, SemanticType, Table
from gridcore.config import ValidationThresholds
from gridcore.validation import infer_text_type, validate_table


def _columns():
    return [
        Column("name"),
        Column("qty", semantic_type=SemanticType.INTEGER),
        Column("when", semantic_type=SemanticType.DATE),
    ]


def test_clean_table_scores_perfectly() -> None:
    table = Table(_columns()).with_data(
        [
            {"name": "a", "qty": 1, "when": "2024-01-01"},
            {"name": "b", "qty": "2", "when": "01/02/2024"},
        ]
    )
    result = validate_table(table)
    assert result.coverage == 1.0
    assert result.type_integrity == 1.0
    assert result.row_completeness == 1.0
    assert result.issues == []
    assert result.unparsed_counts == [0, 0, 0]


def test_unparsed_and_missing_values_are_reported() -> None:
    table = Table(_columns()).with_data(
        [
            {"name": "a", "qty": "N/A", "when": "2024-01-01"},
            {"name": "b", "qty": 4},
        ]
    )
    result = validate_table(table)
    assert result.coverage == pytest.approx(5 / 6)
    assert result.type_integrity == pytest.approx(2 / 3)
    assert result.row_completeness == pytest.approx((1 + 2 / 3) / 2)
    assert result.unparsed_counts == [0, 1, 0]
    assert result.issues == [
        "coverage_below_threshold",
        "type_integrity_below_threshold",
        "row_completeness_below_threshold",
    ]


def test_custom_thresholds() -> None:
    table = Table(_columns()).with_data([{"name": "a", "qty": "x", "when": "2024-01-01"}])
    lax = ValidationThresholds(min_coverage=0.0, min_type_integrity=0.0, min_row_completeness=0.0)
    assert validate_table(table, lax).issues == []


def test_empty_table() -> None:
    result = validate_table(Table())
    assert result.coverage == 0.0
    assert result.type_integrity == 1.0
    assert result.unparsed_counts == []


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([], SemanticType.TEXT),
        (["", "  "], SemanticType.TEXT),
        (["yes", "no", "True"], SemanticType.BOOLEAN),
        (["1", "0", "1"], SemanticType.INTEGER),
        (["1", "2", "x"], SemanticType.INTEGER),
        (["1.5", "2", "$3.25"], SemanticType.FLOAT),
        (["2024-01-01", "Jan 5 2023"], SemanticType.DATE),
        (["red", "green", "3"], SemanticType.TEXT),
    ],
)
def test_infer_text_type(values, expected) -> None:
    assert infer_text_type(values) == expected
