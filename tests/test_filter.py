from dataclasses import FrozenInstanceError, dataclass

import pytest

from gridcore import Column, SemanticType, Table
from gridcore.formatters import currency_formatter


@dataclass
class Person:
    ID: int
    Name: str


def _people() -> Table:
    return Table(page_size=10).with_data(
        [Person(3, "Charlie"), Person(1, "alice"), Person(2, "Bob"), Person(4, "Bobby")]
    )


def test_empty_needle_returns_same_instance() -> None:
    table = _people()
    assert table.filter("") is table


def test_filter_is_case_insensitive_substring() -> None:
    result = _people().filter("BOB")
    assert [row.value(1) for row in result.rows] == ["Bob", "Bobby"]


def test_filter_result_is_subset_by_identity() -> None:
    table = _people()
    parent_ids = {id(row) for row in table.rows}
    for needle in ("a", "b", "zzz", "1"):
        result = table.filter(needle)
        assert {id(row) for row in result.rows} <= parent_ids
        for row in table.rows:
            text = " ".join(table.columns[i].format(cell.value) for i, cell in enumerate(row.cells))
            if needle.lower() not in text.lower():
                assert all(row is not kept for kept in result.rows)


def test_filter_follows_current_sort_order() -> None:
    table = _people()
    table.sort_by_column(0, descending=True)
    result = table.filter("b")
    assert [row.value(0) for row in result.rows] == [4, 2]
    assert [row.value(0) for row in result.natural_order] == [4, 2]
    assert result.sort_column_index == 0
    assert result.sort_descending is True


def test_clear_sort_on_filtered_table_keeps_it_filtered() -> None:
    table = _people()
    table.sort_by_column(1)
    result = table.filter("c")
    result.sort_by_column(0)
    result.clear_sort()
    assert [row.value(1) for row in result.rows] == ["alice", "Charlie"]


def test_filtered_table_is_independent() -> None:
    table = _people()
    result = table.filter("b")
    result.sort_by_column(0, descending=True)
    result.page_size = 1
    assert [row.value(0) for row in table.rows] == [3, 1, 2, 4]
    assert table.sort_column_index is None
    assert table.page_size == 10
    assert result.columns is table.columns


def test_filter_inherits_page_size() -> None:
    table = _people().with_page_size(3)
    assert table.filter("o").page_size == 3


def test_non_searchable_columns_are_ignored() -> None:
    columns = [Column("ID", semantic_type=SemanticType.INTEGER, searchable=False), Column("Name")]
    table = Table(columns).with_data([Person(11, "Ann"), Person(2, "Zed 1")])
    assert [row.value(1) for row in table.filter("1").rows] == ["Zed 1"]


def test_filter_matches_formatted_text() -> None:
    columns = [Column("price", semantic_type=SemanticType.FLOAT, formatter=currency_formatter)]
    table = Table(columns).with_data([{"price": 12.5}, {"price": 3.0}])
    assert [row.value(0) for row in table.filter("$12.50").rows] == [12.5]


@pytest.mark.parametrize("needle", ["nobody", "@@"])
def test_filter_without_matches_gives_empty_table(needle) -> None:
    result = _people().filter(needle)
    assert result.rows == []
    assert result.get_total_pages() == 1
    assert result.get_page(0) == []


def test_bob_and_alice_scenario() -> None:
    table = Table(page_size=10).with_data([{"ID": 2, "Name": "Bob"}, {"ID": 1, "Name": "Alice"}])
    assert [row.value(1) for row in table.get_page(0)] == ["Bob", "Alice"]

    table.sort_by_column(0, descending=False)
    assert table.get_page(0)[0].source["Name"] == "Alice"

    result = table.filter("Bob")
    assert len(result.rows) == 1
    assert result.rows[0].source["Name"] == "Bob"


def test_filtered_table_columns_cannot_drift_from_parent() -> None:
    table = _people()
    result = table.filter("bob")
    with pytest.raises(FrozenInstanceError):
        table.columns[1].searchable = False
    assert result.columns[1].searchable is True

    table.columns[1].width = 30
    assert result.columns[1].width == 30


def test_columns_are_editable_until_attached() -> None:
    column = Column("Name")
    column.searchable = False
    column.semantic_type = SemanticType.TEXT
    Table([column])
    with pytest.raises(FrozenInstanceError):
        column.header = "Renamed"
    assert column.header == "Name"
