"""
Client-side pagination over an already-filtered collection.

An empty collection has ``total_pages == 0`` and renders as a single
empty page 1. ``paginate`` clamps out-of-range page numbers; the
navigation methods on ``PageState`` instead ignore them.
"""

import logging
import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def total_pages_for(total_items: int, page_size: int) -> int:
    """ceil(total_items / page_size); 0 for an empty collection."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(total_items / page_size)


def clamp_page(page_number: int, total_pages: int) -> int:
    return min(max(1, page_number), max(1, total_pages))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One bounded slice of a collection plus page-count metadata."""
    items: list[T]
    page: int
    page_size: int
    total_pages: int
    total_items: int

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(collection: Sequence[T], page_number: int, page_size: int) -> Page[T]:
    """
    Slice page ``page_number`` (1-based) out of ``collection``.

    Page N covers elements ``[(N-1)*page_size, N*page_size)``.

    Raises:
        ValueError: If page_size < 1.
    """
    total_pages = total_pages_for(len(collection), page_size)
    page = clamp_page(page_number, total_pages)
    start = (page - 1) * page_size
    return Page(
        items=list(collection[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=len(collection),
    )


@dataclass
class PageState:
    """Current page and page size owned by a view session.

    Keeps ``1 <= current_page <= max(1, total_pages)`` for the item count
    it was last given.
    """
    current_page: int = 1
    items_per_page: int = 5

    def __post_init__(self) -> None:
        if self.items_per_page < 1:
            raise ValueError(f"items_per_page must be >= 1, got {self.items_per_page}")

    def total_pages(self, total_items: int) -> int:
        return total_pages_for(total_items, self.items_per_page)

    def go_to(self, requested: int, total_items: int) -> bool:
        """Move to ``requested`` if it is a valid page; otherwise do nothing.

        Returns:
            True if the current page changed or was re-selected.
        """
        total = self.total_pages(total_items)
        if not 1 <= requested <= total:
            logger.debug("Ignoring page request %d (valid: 1..%d)", requested, total)
            return False
        self.current_page = requested
        return True

    def next(self, total_items: int) -> bool:
        return self.go_to(self.current_page + 1, total_items)

    def previous(self, total_items: int) -> bool:
        return self.go_to(self.current_page - 1, total_items)

    def reset(self) -> None:
        self.current_page = 1

    def clamp(self, total_items: int) -> None:
        self.current_page = clamp_page(self.current_page, self.total_pages(total_items))

    def set_items_per_page(self, items_per_page: int, total_items: int) -> None:
        if items_per_page < 1:
            raise ValueError(f"items_per_page must be >= 1, got {items_per_page}")
        self.items_per_page = items_per_page
        self.clamp(total_items)
