from datetime import date

from gridcore import Column, SemanticType
from gridcore.sampledata import SAMPLE_TABLE_NAMES, SampleDataGenerator
from gridcore.utils import parse_date
from gridcore.validation import validate_table


def test_employee_table() -> None:
    table = SampleDataGenerator(seed=7, today=date(2025, 6, 30)).employee_table()
    assert table.total_row_count == 50
    assert table.page_size == 10
    assert table.get_total_pages() == 5
    assert table.column_names() == ["ID", "Name", "Department", "Salary", "Start Date", "Active"]
    assert table.get_cell_display_value(0, 3).startswith("$")
    assert table.get_cell_display_value(0, 5) in ("yes", "no")
    assert validate_table(table).type_integrity == 1.0

    table.sort_by_column(4)
    starts = [row.value(4) for row in table.rows]
    assert starts == sorted(starts)
    assert all(start <= "2025-06-30" for start in starts)


def test_product_table() -> None:
    table = SampleDataGenerator(seed=1).product_table()
    assert table.total_row_count == 100
    assert table.get_total_pages() == 7
    assert table.rows[0].value(0) == "SKU-0001"
    assert table.rows[16].value(1) == "Wireless Headphones v2"
    for row in table.rows:
        assert row.value(5) == (row.value(4) > 0)

    table.sort_by_column(3, descending=True)
    prices = [row.value(3) for row in table.rows]
    assert prices == sorted(prices, reverse=True)


def test_seed_makes_tables_reproducible() -> None:
    first = SampleDataGenerator(seed=3, today=date(2025, 1, 1)).employee_table()
    second = SampleDataGenerator(seed=3, today=date(2025, 1, 1)).employee_table()
    assert [row.cells for row in first.rows] == [row.cells for row in second.rows]


def test_financial_table() -> None:
    table = SampleDataGenerator(seed=5, today=date(2025, 3, 31)).financial_table()
    assert table.total_row_count == 8 * 30
    assert table.page_size == 20
    assert table.get_total_pages() == 12
    assert table.column_names() == ["Date", "Symbol", "Open", "High", "Low", "Close", "Volume"]
    assert table.rows[0].value(0) == "2025-03-31"
    assert table.rows[29].value(0) == "2025-03-02"
    assert len({row.value(1) for row in table.rows}) == 8
    for row in table.rows:
        opening, high, low, close, volume = (row.value(idx) for idx in range(2, 7))
        assert low <= opening <= high
        assert low <= close <= high
        assert 1_000_000 <= volume < 11_000_000

    table.sort_by_column(0)
    assert table.rows[0].value(0) == "2025-03-02"
    assert validate_table(table).type_integrity == 1.0


def test_custom_table() -> None:
    columns = [
        Column("label"),
        Column("count", semantic_type=SemanticType.INTEGER),
        Column("ratio", semantic_type=SemanticType.FLOAT),
        Column("seen", semantic_type=SemanticType.DATE),
        Column("flag", semantic_type=SemanticType.BOOLEAN),
    ]
    today = date(2025, 6, 30)
    table = SampleDataGenerator(seed=11, today=today).custom_table(12, columns)
    assert table.total_row_count == 12
    assert table.page_size == 15
    assert table.columns == columns
    for idx, row in enumerate(table.rows):
        assert row.value(0).endswith(f"-{idx + 1}")
        assert 1 <= row.value(1) <= 1000
        assert 0.0 <= row.value(2) < 1000.0
        seen = parse_date(row.value(3), ["%Y-%m-%d"]).date()
        assert (today - seen).days < 365 * 2
        assert isinstance(row.value(4), bool)
    assert validate_table(table).type_integrity == 1.0


def test_custom_table_without_rows() -> None:
    table = SampleDataGenerator(seed=1).custom_table(0, [Column("x")])
    assert table.rows == []
    assert table.get_total_pages() == 1


def test_sample_table_by_name() -> None:
    generator = SampleDataGenerator(seed=2, today=date(2025, 1, 1))
    assert SAMPLE_TABLE_NAMES == ("employees", "products", "financial")
    assert generator.sample_table("employees").total_row_count == 50
    assert generator.sample_table("products").total_row_count == 100
    assert generator.sample_table("financial").total_row_count == 240
    fallback = generator.sample_table("unknown")
    assert fallback.column_names() == generator.employee_table().column_names()
