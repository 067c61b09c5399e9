from typing import Any, Dict, List
from portfolio_builder.extensions import db
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.invariants.portfolio import assert_field_value
from portfolio_builder.domain.sections.registry import FieldKind
from portfolio_builder.models.gallery_item import GalleryItem
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.utils.audit import log_action
from portfolio_builder.utils.media import delete_file
from portfolio_builder.utils.order import apply_order, compact_order
from portfolio_builder.utils.transaction import transactional


ALLOWED_ITEM_TYPES = {"photo", "video"}

ITEM_FIELDS = {
    "title": FieldKind.TEXT,
    "description": FieldKind.LONG_TEXT,
    "image_url": FieldKind.URL,
}


def _apply_fields(item: GalleryItem, data: Dict[str, Any]) -> List[str]:
    if "type" in data and data["type"] not in ALLOWED_ITEM_TYPES:
        raise InvariantViolation("Invalid gallery item type")

    changed = []
    for field in (*ITEM_FIELDS, "type"):
        if field in data:
            if field in ITEM_FIELDS:
                assert_field_value(field, ITEM_FIELDS[field], data[field])
            if getattr(item, field) != data[field]:
                setattr(item, field, data[field])
                changed.append(field)
    return changed


def create_gallery_item(
    *,
    portfolio: Portfolio,
    actor_id: str,
    data: Dict[str, Any],
) -> GalleryItem:
    if not data.get("image_url"):
        raise InvariantViolation("Gallery item image_url is required")

    item = GalleryItem()
    item.portfolio_id = portfolio.id
    item.type = "photo"
    item.order = len(portfolio.gallery_items)  # append at the end

    _apply_fields(item, data)

    with transactional():
        db.session.add(item)
        db.session.flush()

        log_action(
            action="gallery.create",
            entity_type="gallery_item",
            entity_id=item.id,
            actor_id=actor_id,
            payload={"portfolio_id": portfolio.id, "order": item.order},
        )

    return item


def update_gallery_item(
    *,
    item: GalleryItem,
    actor_id: str,
    data: Dict[str, Any],
) -> GalleryItem:
    with transactional():
        changed_fields = _apply_fields(item, data)

        if changed_fields:
            log_action(
                action="gallery.update",
                entity_type="gallery_item",
                entity_id=item.id,
                actor_id=actor_id,
                payload={"fields": changed_fields},
            )

    return item


def delete_gallery_item(
    *,
    item: GalleryItem,
    actor_id: str,
) -> None:
    portfolio = item.portfolio
    image_url = item.image_url

    with transactional():
        db.session.delete(item)
        db.session.flush()

        compact_order([i for i in portfolio.gallery_items if i is not item])

        log_action(
            action="gallery.delete",
            entity_type="gallery_item",
            entity_id=item.id,
            actor_id=actor_id,
            payload={"portfolio_id": portfolio.id},
        )

    delete_file(image_url)


def reorder_gallery(
    *,
    portfolio: Portfolio,
    actor_id: str,
    ordered_ids: List[str],
) -> List[GalleryItem]:
    if not isinstance(ordered_ids, list):
        raise InvariantViolation("Expected a list of gallery item ids")

    with transactional():
        items = apply_order(list(portfolio.gallery_items), ordered_ids)

        log_action(
            action="gallery.reorder",
            entity_type="portfolio",
            entity_id=portfolio.id,
            actor_id=actor_id,
            payload={"count": len(ordered_ids)},
        )

    return items
