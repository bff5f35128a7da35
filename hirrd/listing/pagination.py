"""
Client-side pagination helpers shared by the listing controller and the
GET /jobs endpoint.
"""

import math
from typing import Sequence, TypeVar

from hirrd.domain.models import PaginationView

T = TypeVar("T")


def total_pages(count: int, items_per_page: int) -> int:
    """Number of pages for `count` results; never less than 1."""
    if items_per_page < 1:
        raise ValueError("items_per_page must be a positive integer")
    return max(1, math.ceil(count / items_per_page))


def clamp_page(page: int, pages: int) -> int:
    return min(max(page, 1), pages)


def page_slice(items: Sequence[T], page: int, items_per_page: int) -> list[T]:
    """Items shown on `page` (1-based); empty when out of range."""
    if page < 1:
        return []
    start = (page - 1) * items_per_page
    return list(items[start : start + items_per_page])


def build_pagination(current_page: int, pages: int) -> PaginationView:
    """Numbered controls plus previous/next, hidden for a single page."""
    return PaginationView(
        current_page=current_page,
        total_pages=pages,
        pages=list(range(1, pages + 1)),
        has_previous=current_page > 1,
        has_next=current_page < pages,
        visible=pages > 1,
    )
