# portfolio/utils/pagination.py
from __future__ import annotations

from typing import Any, List, Sequence, TypedDict

from werkzeug.exceptions import BadRequest


class PageMeta(TypedDict):
    """
    Offset pagination metadata for slice-paged listings.
    """
    page: int
    per_page: int
    total: int
    total_pages: int


def total_pages(total: int, per_page: int) -> int:
    return (total + per_page - 1) // per_page


def paginate_slice(
    items: Sequence[Any],
    *,
    page: int,
    per_page: int,
) -> tuple[list[Any], PageMeta]:
    """
    Slice one page out of an already filtered, in-memory result set.

    Pages are 1-based. A page past the end yields an empty slice, not an
    error, so a stale page number after a new search still answers.
    """
    if per_page <= 0:
        raise BadRequest("per_page must be greater than zero")
    if page <= 0:
        raise BadRequest("page must be greater than zero")

    start = (page - 1) * per_page
    window: List[Any] = list(items[start:start + per_page])

    return window, {
        "page": page,
        "per_page": per_page,
        "total": len(items),
        "total_pages": total_pages(len(items), per_page),
    }


def page_sizes(total: int, per_page: int) -> list[int]:
    """Sizes of every page for `total` items, e.g. 20 at 9 -> [9, 9, 2]."""
    return [
        min(per_page, total - start)
        for start in range(0, total, per_page)
    ]
