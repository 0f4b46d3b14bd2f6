"""The table engine: ingestion, sorting, filtering, and pagination."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence

from .config import TableConfig
from .errors import IngestionError, IngestionFailure, SchemaError, SortError, SortFailure
from .ingestion import build_row, is_collection, refine_text_columns
from .models import Cell, Column, Row
from .pagination import clamp_page_size, page_bounds, total_pages
from .schema import infer_columns
from .sorting import sorted_positions

logger = logging.getLogger(__name__)


def _adopt_columns(columns: Sequence[Column]) -> None:
    seen = set()
    for column in columns:
        if column.key in seen:
            raise SchemaError(f"duplicate column key {column.key!r}")
        seen.add(column.key)
    for column in columns:
        column.attach()


class Table:
    """In-memory table with a retained natural order.

    Rows live in an arena; ``rows`` and ``natural_order`` are views through
    two index permutations over it, so sorting only reorders indices and
    ``clear_sort`` copies the natural permutation back.
    """

    def __init__(
        self,
        columns: Optional[Iterable[Column]] = None,
        page_size: Optional[int] = None,
        config: Optional[TableConfig] = None,
    ) -> None:
        self.config = config or TableConfig.default()
        self.columns: List[Column] = []
        self.sort_column_index: Optional[int] = None
        self.sort_descending = False
        self._page_size = clamp_page_size(self.config.page_size if page_size is None else page_size)
        self._arena: List[Row] = []
        self._order: List[int] = []
        self._natural: List[int] = []
        if columns:
            self.with_columns(columns)

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return (
            f"Table(columns={len(self.columns)}, rows={len(self._order)}, "
            f"sort={self.sort_column_index}{' desc' if self.sort_descending else ''}, "
            f"page_size={self._page_size})"
        )

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        self._page_size = clamp_page_size(value)

    @property
    def rows(self) -> List[Row]:
        return [self._arena[idx] for idx in self._order]

    @property
    def natural_order(self) -> List[Row]:
        return [self._arena[idx] for idx in self._natural]

    @property
    def total_row_count(self) -> int:
        return len(self._order)

    def with_columns(self, columns: Iterable[Column]) -> "Table":
        if self._arena:
            raise SchemaError("columns cannot be replaced once rows are ingested")
        columns = list(columns)
        _adopt_columns(columns)
        self.columns = columns
        return self

    def with_page_size(self, page_size: int) -> "Table":
        self.page_size = page_size
        return self

    def with_data(self, records: Sequence[Any]) -> "Table":
        self.set_data(records)
        return self

    def _reset_rows(self) -> None:
        self._arena = []
        self._order = []
        self._natural = []
        self.sort_column_index = None
        self.sort_descending = False

    def _append(self, row: Row) -> None:
        idx = len(self._arena)
        self._arena.append(row)
        self._order.append(idx)
        self._natural.append(idx)

    def set_data(self, records: Sequence[Any]) -> None:
        """Replace all rows with ``records``.

        Prior rows are dropped before the input is checked, so a rejected
        call leaves the table empty. Columns are inferred from the first
        record only when none are set.
        """
        self._reset_rows()
        if not is_collection(records):
            raise IngestionError(
                IngestionFailure.NOT_A_COLLECTION,
                f"records must be a sequence, got {type(records).__name__}",
            )
        if not self.columns and len(records) > 0:
            columns = infer_columns(records[0], self.config)
            if self.config.infer_text_types:
                refine_text_columns(columns, records, self.config.validation.type_hit_ratio)
            _adopt_columns(columns)
            self.columns = columns
        for row_id, record in enumerate(records):
            self._append(build_row(row_id, record, self.columns))
        logger.debug("Ingested %d rows across %d columns", len(self._arena), len(self.columns))

    def add_row(self, *values: Any) -> Row:
        if len(values) != len(self.columns):
            raise IngestionError(
                IngestionFailure.ARITY_MISMATCH,
                f"expected {len(self.columns)} values, got {len(values)}",
            )
        cells = tuple(
            Cell(value=value, semantic_type=column.semantic_type)
            for value, column in zip(values, self.columns)
        )
        row = Row(id=len(self._arena), cells=cells, source=values)
        self._append(row)
        return row

    def sort_by_column(self, column_index: int, descending: bool = False) -> None:
        if not 0 <= column_index < len(self.columns):
            raise SortError(SortFailure.INVALID_INDEX, f"invalid column index: {column_index}")
        column = self.columns[column_index]
        if not column.sortable:
            raise SortError(SortFailure.NOT_SORTABLE, f"column {column.header} is not sortable")

        positions = sorted_positions(
            self.rows,
            column_index,
            descending,
            self.config.date_formats,
            self.config.lenient_dates,
        )
        self._order = [self._order[pos] for pos in positions]
        self.sort_column_index = column_index
        self.sort_descending = descending
        logger.debug(
            "Sorted %d rows by %r (%s)",
            len(self._order),
            column.key,
            "descending" if descending else "ascending",
        )

    def clear_sort(self) -> None:
        self.sort_column_index = None
        self.sort_descending = False
        self._order = list(self._natural)

    def _row_matches(self, row: Row, needle: str) -> bool:
        for idx, column in enumerate(self.columns):
            if not column.searchable:
                continue
            if needle in column.format(row.cells[idx].value).casefold():
                return True
        return False

    def filter(self, needle: str) -> "Table":
        """Derive a table holding only the rows that contain ``needle``.

        An empty needle returns this very table. Otherwise the result shares
        the column list, keeps the current row order as its own natural
        order, and inherits sort descriptor and page size.
        """
        if not needle:
            return self
        lowered = needle.casefold()

        derived = Table(page_size=self._page_size, config=self.config)
        derived.columns = self.columns
        for row in self.rows:
            if self._row_matches(row, lowered):
                derived._append(row)
        derived.sort_column_index = self.sort_column_index
        derived.sort_descending = self.sort_descending
        logger.debug("Filter %r kept %d of %d rows", needle, len(derived), len(self))
        return derived

    def get_page(self, page_index: int) -> List[Row]:
        start, end = page_bounds(page_index, self._page_size, len(self._order))
        return [self._arena[idx] for idx in self._order[start:end]]

    def get_total_pages(self) -> int:
        return total_pages(len(self._order), self._page_size)

    def get_cell_display_value(self, row_index: int, column_index: int) -> str:
        if not 0 <= row_index < len(self._order):
            return ""
        if not 0 <= column_index < len(self.columns):
            return ""
        row = self._arena[self._order[row_index]]
        return self.columns[column_index].format(row.cells[column_index].value)

    def column_names(self) -> List[str]:
        return [column.header for column in self.columns]
