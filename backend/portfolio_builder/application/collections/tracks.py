from datetime import date
from typing import Any, Dict, List
from portfolio_builder.extensions import db
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.invariants.portfolio import assert_field_value
from portfolio_builder.domain.sections.registry import FieldKind
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.models.track import Track
from portfolio_builder.utils.audit import log_action
from portfolio_builder.utils.media import delete_file
from portfolio_builder.utils.order import apply_order, compact_order
from portfolio_builder.utils.transaction import transactional


TRACK_FIELDS = {
    "title": FieldKind.TEXT,
    "description": FieldKind.LONG_TEXT,
    "audio_url": FieldKind.URL,
    "thumbnail_url": FieldKind.URL,
    "composer_notes": FieldKind.LONG_TEXT,
    "lyrics": FieldKind.LONG_TEXT,
    "is_published": FieldKind.BOOLEAN,
}


def _apply_fields(track: Track, data: Dict[str, Any]) -> List[str]:
    changed = []

    for field, kind in TRACK_FIELDS.items():
        if field in data:
            assert_field_value(field, kind, data[field])
            if getattr(track, field) != data[field]:
                setattr(track, field, data[field])
                changed.append(field)

    if "duration" in data:
        duration = data["duration"]
        if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
            raise InvariantViolation("duration must be a non-negative number of seconds")
        if track.duration != duration:
            track.duration = duration
            changed.append("duration")

    if "release_date" in data:
        raw = data["release_date"]
        try:
            release_date = date.fromisoformat(raw) if raw else None
        except (TypeError, ValueError):
            raise InvariantViolation("release_date must be an ISO date (YYYY-MM-DD)")
        if track.release_date != release_date:
            track.release_date = release_date
            changed.append("release_date")

    return changed


def create_track(
    *,
    portfolio: Portfolio,
    actor_id: str,
    data: Dict[str, Any],
) -> Track:
    """Append a track to the end of the portfolio's track list."""
    if not data.get("title") or not data.get("audio_url"):
        raise InvariantViolation("Track title and audio_url are required")

    track = Track()
    track.portfolio_id = portfolio.id
    track.order = len(portfolio.tracks)

    _apply_fields(track, data)

    with transactional():
        db.session.add(track)
        db.session.flush()

        log_action(
            action="track.create",
            entity_type="track",
            entity_id=track.id,
            actor_id=actor_id,
            payload={"portfolio_id": portfolio.id, "order": track.order},
        )

    return track


def update_track(
    *,
    track: Track,
    actor_id: str,
    data: Dict[str, Any],
) -> Track:
    with transactional():
        changed_fields = _apply_fields(track, data)

        if changed_fields:
            log_action(
                action="track.update",
                entity_type="track",
                entity_id=track.id,
                actor_id=actor_id,
                payload={"fields": changed_fields},
            )

    return track


def delete_track(
    *,
    track: Track,
    actor_id: str,
) -> None:
    portfolio = track.portfolio
    media = [url for url in (track.audio_url, track.thumbnail_url) if url]

    with transactional():
        db.session.delete(track)
        db.session.flush()

        # Re-compact remaining tracks
        compact_order([t for t in portfolio.tracks if t is not track])

        log_action(
            action="track.delete",
            entity_type="track",
            entity_id=track.id,
            actor_id=actor_id,
            payload={"portfolio_id": portfolio.id},
        )

    for url in media:
        delete_file(url)


def reorder_tracks(
    *,
    portfolio: Portfolio,
    actor_id: str,
    ordered_ids: List[str],
) -> List[Track]:
    if not isinstance(ordered_ids, list):
        raise InvariantViolation("Expected a list of track ids")

    with transactional():
        tracks = apply_order(list(portfolio.tracks), ordered_ids)

        log_action(
            action="track.reorder",
            entity_type="portfolio",
            entity_id=portfolio.id,
            actor_id=actor_id,
            payload={"count": len(ordered_ids)},
        )

    return tracks
