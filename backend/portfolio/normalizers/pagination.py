# portfolio/normalizers/pagination.py
from typing import Callable, Any, List, Optional, Dict

from portfolio.utils.pagination import PageMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Optional[Callable[[Any], Dict[str, Any]]] = None,
    *,
    meta: Optional[PageMeta] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Normalize list responses.

    `items` may already be dicts (filtered listings); pass `normalize_fn`
    only for ORM objects. `meta` is attached when the listing is paged.
    """
    normalized_items = [normalize_fn(item) for item in items] if normalize_fn else list(items)

    response: Dict[str, Any] = {
        "items": normalized_items,
    }

    if meta is not None:
        response["pagination"] = dict(meta)

    response.update(extra)
    return response
