"""Fixed-size pages over windows ordered by grid position."""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Sequence, TypeVar

T = TypeVar("T")

WINDOWS_PER_PAGE = 9


def _grid_position(item: Any) -> int:
    return item.grid_position


@dataclass
class Page(Generic[T]):
    number: int
    total_pages: int
    items: List[T] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def sort_by_position(
    items: Sequence[T], key: Callable[[T], int] = _grid_position
) -> List[T]:
    return sorted(items, key=key)


def total_pages(count: int, page_size: int = WINDOWS_PER_PAGE) -> int:
    """Number of pages; an empty collection still has one page."""
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, pages: int) -> int:
    """Stale page numbers fall back to the first page instead of failing."""
    if page < 1 or page > pages:
        return 1
    return page


def split_pages(
    items: Sequence[T],
    page_size: int = WINDOWS_PER_PAGE,
    key: Callable[[T], int] = _grid_position,
) -> List[List[T]]:
    ordered = sort_by_position(items, key)
    pages = [ordered[i : i + page_size] for i in range(0, len(ordered), page_size)]
    return pages or [[]]


def current_page(
    items: Sequence[T],
    page: int,
    page_size: int = WINDOWS_PER_PAGE,
    key: Callable[[T], int] = _grid_position,
) -> Page[T]:
    """Items shown on ``page``, with navigation state.

    Args:
        items: Windows in any order
        page: Requested 1-based page, possibly stale
        page_size: Windows per page
        key: Grid position accessor

    Returns:
        The page, clamped to page 1 when ``page`` is out of range
    """
    ordered = sort_by_position(items, key)
    pages = total_pages(len(ordered), page_size)
    number = clamp_page(page, pages)
    start = (number - 1) * page_size
    return Page(number=number, total_pages=pages, items=ordered[start : start + page_size])
