# portfolio_builder/normalizers/pagination.py
from typing import Any, Callable, Dict, List, Optional

from portfolio_builder.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: Optional[CursorMeta] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    total: Optional[int] = None,
) -> Dict[str, Any]:
    """
    List response envelope: {"items": [...], "pagination": {...}}.

    Pass either cursor metadata (audit trail) or page/per_page
    (portfolio listings), never both.
    """
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in items],
    }

    if cursor is not None:
        response["pagination"] = {
            "has_more": cursor["has_more"],
            "next_cursor": cursor["next_cursor"],
        }
    elif page is not None and per_page is not None:
        response["pagination"] = {"page": page, "per_page": per_page}

        if total is not None:
            response["pagination"]["total"] = total
            response["pagination"]["total_pages"] = (total + per_page - 1) // per_page

    return response
