"""Page arithmetic for PostgREST range queries."""
import math
from typing import Tuple

from medshop.config import PRODUCTS_PER_PAGE


def page_bounds(page: int, per_page: int = PRODUCTS_PER_PAGE) -> Tuple[int, int]:
    """
    Inclusive row range for a 1-based page.

    Page 1 with 12 per page is (0, 11), page 2 is (12, 23).
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    start = (page - 1) * per_page
    return start, start + per_page - 1


def total_pages(count: int, per_page: int = PRODUCTS_PER_PAGE) -> int:
    """Number of pages needed for count rows, 0 when there are none."""
    if not count or count < 0:
        return 0
    return math.ceil(count / per_page)


def is_valid_page(page: int, pages: int) -> bool:
    return 0 < page <= pages
