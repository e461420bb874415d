"""Viewport heuristics shared by the list views."""

# (minimum width in px, items per page), widest first
PAGE_SIZE_BREAKPOINTS: tuple[tuple[int, int], ...] = (
    (3840, 15),
    (3160, 12),
    (2560, 10),
    (2000, 7),
    (1536, 6),
)
MIN_ITEMS_PER_PAGE = 5


def items_per_page_for_width(width: int) -> int:
    """Map a viewport width to the number of table rows that fit."""
    for min_width, items in PAGE_SIZE_BREAKPOINTS:
        if width >= min_width:
            return items
    return MIN_ITEMS_PER_PAGE
