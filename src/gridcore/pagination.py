"""Page-window arithmetic."""
from __future__ import annotations

from typing import Tuple


def clamp_page_size(page_size: int) -> int:
    return max(1, int(page_size))


def page_bounds(page_index: int, page_size: int, total: int) -> Tuple[int, int]:
    """Half-open ``[start, end)`` slice for ``page_index``.

    Pages past the end, and negative pages, give an empty ``(total, total)``.
    """
    page_size = clamp_page_size(page_size)
    start = page_index * page_size
    if page_index < 0 or start >= total:
        return total, total
    return start, min(total, start + page_size)


def total_pages(total: int, page_size: int) -> int:
    if total <= 0:
        return 1
    page_size = clamp_page_size(page_size)
    return (total + page_size - 1) // page_size
