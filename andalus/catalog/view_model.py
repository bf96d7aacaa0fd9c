"""Catalog view-model.

Derives the visible page of the product listing from the full catalog and
the listing's transient state (search text, sort key, page). State changes
go through a pure reducer so the listing behaviour can be exercised without
any rendering.
"""

import locale
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Sequence

from andalus.catalog.models import Product

ITEMS_PER_PAGE = 12
PAGER_WINDOW_SIZE = 7


class SortKey(str, Enum):
    """Listing sort options."""

    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_LOW_TO_HIGH = "priceLowToHigh"
    PRICE_HIGH_TO_LOW = "priceHighToLow"
    NAME_A_TO_Z = "nameAtoZ"
    NAME_Z_TO_A = "nameZtoA"


# ============================================================================
# State and Actions
# ============================================================================


@dataclass(frozen=True)
class CatalogViewState:
    """Transient listing state.

    Attributes:
        search_query: Free-text name filter.
        sort_key: Active ordering.
        page: Current page number (1-indexed).
    """

    search_query: str = ""
    sort_key: SortKey = SortKey.NEWEST
    page: int = 1

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "search_query": self.search_query,
            "sort_key": self.sort_key.value,
            "page": self.page,
        }


@dataclass(frozen=True)
class SetSearch:
    """Replace the search text."""

    query: str


@dataclass(frozen=True)
class SetSort:
    """Replace the sort key."""

    sort_key: SortKey


@dataclass(frozen=True)
class GoToPage:
    """Jump to a page number."""

    page: int


@dataclass(frozen=True)
class NextPage:
    """Advance one page, stopping at the last page."""

    total_pages: int


@dataclass(frozen=True)
class PreviousPage:
    """Go back one page, stopping at the first page."""


@dataclass(frozen=True)
class ClearFilters:
    """Reset search, sort and page."""


Action = SetSearch | SetSort | GoToPage | NextPage | PreviousPage | ClearFilters


def reduce(state: CatalogViewState, action: Action) -> CatalogViewState:
    """Apply an action to the listing state.

    Changing the search text or the sort key always returns to page 1.

    Args:
        state: Current state.
        action: Action to apply.

    Returns:
        New state.

    Raises:
        TypeError: If the action is not a known listing action.
    """
    if isinstance(action, SetSearch):
        return replace(state, search_query=action.query, page=1)
    if isinstance(action, SetSort):
        return replace(state, sort_key=SortKey(action.sort_key), page=1)
    if isinstance(action, GoToPage):
        return replace(state, page=max(1, action.page))
    if isinstance(action, NextPage):
        return replace(state, page=max(1, min(action.total_pages, state.page + 1)))
    if isinstance(action, PreviousPage):
        return replace(state, page=max(1, state.page - 1))
    if isinstance(action, ClearFilters):
        return CatalogViewState()
    raise TypeError(f"Unknown listing action: {action!r}")


# ============================================================================
# Filtering and Sorting
# ============================================================================


def filter_products(products: Sequence[Product], query: str) -> list[Product]:
    """Keep products whose name contains ``query``, ignoring case."""
    needle = query.lower()
    return [p for p in products if needle in p.name.lower()]


def _name_key(product: Product) -> str:
    """Collation key for the name orderings.

    Names differing only in case ("pen", "Pen") compare equal and keep
    their catalog order, since the sort is stable.
    """
    return locale.strxfrm(product.name.casefold())


def sort_products(products: Sequence[Product], sort_key: SortKey) -> list[Product]:
    """Order products for display.

    The price orderings compare ``sale or price``: the raw ``sale`` value
    when it is set, not the discounted price.

    Args:
        products: Products to order.
        sort_key: Ordering to apply.

    Returns:
        A new, stably sorted list.
    """
    if sort_key == SortKey.PRICE_LOW_TO_HIGH:
        return sorted(products, key=lambda p: p.price_sort_key)
    if sort_key == SortKey.PRICE_HIGH_TO_LOW:
        return sorted(products, key=lambda p: p.price_sort_key, reverse=True)
    if sort_key == SortKey.NAME_A_TO_Z:
        return sorted(products, key=_name_key)
    if sort_key == SortKey.NAME_Z_TO_A:
        return sorted(products, key=_name_key, reverse=True)
    if sort_key == SortKey.OLDEST:
        return sorted(products, key=lambda p: p.id)
    return sorted(products, key=lambda p: p.id, reverse=True)


# ============================================================================
# Pagination
# ============================================================================


@dataclass(frozen=True)
class PagerWindow:
    """Page buttons to display.

    Attributes:
        pages: Page numbers shown as buttons.
        show_last_page_link: Whether an ellipsis and a trailing last-page
            button follow the window.
        last_page: Total page count.
    """

    pages: list[int]
    show_last_page_link: bool
    last_page: int

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "pages": list(self.pages),
            "show_last_page_link": self.show_last_page_link,
            "last_page": self.last_page,
        }


def page_window(
    current: int, total_pages: int, size: int = PAGER_WINDOW_SIZE
) -> PagerWindow:
    """Compute the sliding window of page buttons.

    Up to ``size`` pages are shown, centred on ``current`` and clamped at
    both ends of the range.

    Args:
        current: Current page.
        total_pages: Number of pages.
        size: Window width.

    Returns:
        Pager window.
    """
    half = size // 2
    if total_pages <= size or current <= half + 1:
        start = 1
    elif current >= total_pages - half:
        start = total_pages - size + 1
    else:
        start = current - half

    pages = [n for n in range(start, start + size) if 1 <= n <= total_pages]
    return PagerWindow(
        pages=pages,
        show_last_page_link=total_pages > size and current < total_pages - half,
        last_page=total_pages,
    )


@dataclass(frozen=True)
class CatalogView:
    """Visible slice of the listing plus pagination metadata."""

    items: list[Product]
    total_items: int
    page: int
    page_size: int = ITEMS_PER_PAGE
    pager: PagerWindow = field(default_factory=lambda: PagerWindow([], False, 0))

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return math.ceil(self.total_items / self.page_size)

    @property
    def start_index(self) -> int:
        """1-based position of the first shown item."""
        return (self.page - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        """1-based position of the last shown item."""
        return min(self.page * self.page_size, self.total_items)

    @property
    def is_empty(self) -> bool:
        """No product matched the current search."""
        return self.total_items == 0

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1


def derive_view(
    products: Sequence[Product],
    state: CatalogViewState,
    page_size: int = ITEMS_PER_PAGE,
) -> CatalogView:
    """Filter, sort and paginate the catalog for the given state.

    Pages past the end are not rejected; they yield an empty slice.

    Args:
        products: Full catalog.
        state: Listing state.
        page_size: Items per page.

    Returns:
        Catalog view for the current page.
    """
    matching = sort_products(filter_products(products, state.search_query), state.sort_key)
    start = (state.page - 1) * page_size
    total_pages = math.ceil(len(matching) / page_size)

    return CatalogView(
        items=matching[start : start + page_size],
        total_items=len(matching),
        page=state.page,
        page_size=page_size,
        pager=page_window(state.page, total_pages),
    )
