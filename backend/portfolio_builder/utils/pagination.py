# portfolio_builder/utils/pagination.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Tuple, Type, TypedDict

from flask import request
from sqlalchemy import and_, or_
from werkzeug.exceptions import BadRequest

MAX_PER_PAGE = 100


class CursorMeta(TypedDict):
    has_more: bool
    next_cursor: Optional[str]


def page_args(default_per_page: int = 10) -> Tuple[int, int]:
    """Read ?page= and ?per_page= from the request, clamped to sane bounds."""
    page = request.args.get("page", 1, type=int) or 1
    per_page = request.args.get("per_page", default_per_page, type=int) or default_per_page
    return max(page, 1), max(1, min(per_page, MAX_PER_PAGE))


def encode_cursor(created_at: datetime, row_id: Any) -> str:
    """Format: ISO8601|<id>"""
    if not isinstance(created_at, datetime) or row_id is None:
        raise ValueError("created_at and row_id are required to encode cursor")

    return f"{created_at.isoformat()}|{row_id}"


def decode_cursor(cursor: str) -> Tuple[datetime, str]:
    if not cursor or "|" not in cursor:
        raise BadRequest("Invalid cursor format")

    ts_str, row_id = cursor.split("|", 1)
    try:
        return datetime.fromisoformat(ts_str), row_id
    except ValueError as exc:
        raise BadRequest("Invalid cursor format") from exc


def paginate_cursor(
    query,
    *,
    model: Type[Any],
    cursor: Optional[str],
    limit: int,
) -> tuple[list[Any], CursorMeta]:
    """
    Newest-first keyset pagination over (created_at, id).

    Fetches limit + 1 rows to detect whether another page exists.
    """
    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")

    if cursor:
        cursor_ts, cursor_id = decode_cursor(cursor)
        query = query.filter(
            or_(
                model.created_at < cursor_ts,
                and_(model.created_at == cursor_ts, model.id < cursor_id),
            )
        )

    rows = (
        query.order_by(model.created_at.desc(), model.id.desc())
        .limit(limit + 1)
        .all()
    )

    has_more = len(rows) > limit
    items = rows[:limit]

    next_cursor = None
    if has_more and items:
        last = items[-1]
        next_cursor = encode_cursor(last.created_at, last.id)

    return items, {"has_more": has_more, "next_cursor": next_cursor}
