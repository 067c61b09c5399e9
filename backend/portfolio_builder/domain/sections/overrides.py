# portfolio_builder/domain/sections/overrides.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY, SectionRegistry

logger = logging.getLogger(__name__)

RESERVED_KEYS = frozenset({"enabled", "name", "title", "order"})

# Editor bookkeeping, kept in the blob but never exposed as view options
BOOKKEEPING_KEYS = frozenset({"user_manually_enabled", "user_manually_disabled"})

VIEW_TYPE_ALIASES = ("view_type", "viewType")


@dataclass(frozen=True)
class SectionOverride:
    """
    Sparse, per-portfolio customization of one section.

    None means "not set, inherit the default". False and 0 are real values.
    """
    enabled: Optional[bool] = None
    name: Optional[str] = None
    title: Optional[str] = None
    order: Optional[int] = None
    view_type: Optional[str] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def with_changes(self, **changes) -> "SectionOverride":
        return replace(self, **changes)

    def view_options(self) -> Dict[str, Any]:
        options = {
            key: value
            for key, value in self.extras.items()
            if key not in BOOKKEEPING_KEYS
        }
        if self.view_type is not None:
            options["view_type"] = self.view_type
        return options

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.extras)
        for key in ("enabled", "name", "title", "order", "view_type"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


# Maps section id -> override. Keys not in the registry are kept as-is.
SectionOverrides = Mapping[str, SectionOverride]


def _clean_label(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _clean_int(value: Any) -> Optional[int]:
    # bool is an int subclass; "order": true is not an order
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def parse_override(raw: Any) -> SectionOverride:
    if not isinstance(raw, Mapping):
        return SectionOverride()

    view_type = None
    for alias in VIEW_TYPE_ALIASES:
        if isinstance(raw.get(alias), str):
            view_type = raw[alias]
            break

    extras = {
        key: value
        for key, value in raw.items()
        if key not in RESERVED_KEYS and key not in VIEW_TYPE_ALIASES
    }

    enabled = raw.get("enabled")
    return SectionOverride(
        enabled=enabled if isinstance(enabled, bool) else None,
        name=_clean_label(raw.get("name")),
        title=_clean_label(raw.get("title")),
        order=_clean_int(raw.get("order")),
        view_type=view_type,
        extras=MappingProxyType(extras),
    )


def parse_overrides(
    raw: Any,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> Dict[str, SectionOverride]:
    """
    Parse a persisted sections_config blob.

    Accepts the mapping form, a JSON-encoded string of it, or the legacy
    list-of-ids form. A list names exactly the sections shown, in list
    order: every registry id missing from it is disabled. Anything else
    parses to an empty map.
    """
    if raw is None:
        return {}

    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning("Discarding unparseable sections_config blob")
            return {}

    if isinstance(raw, list):
        overrides = {
            section_id: SectionOverride(enabled=False)
            for section_id in registry.list_ids()
        }
        listed = [section_id for section_id in raw if isinstance(section_id, str)]
        for index, section_id in enumerate(listed):
            overrides[section_id] = SectionOverride(enabled=True, order=index)
        return overrides

    if isinstance(raw, Mapping):
        return {
            str(section_id): parse_override(value)
            for section_id, value in raw.items()
        }

    logger.warning("Discarding sections_config of type %s", type(raw).__name__)
    return {}


def dump_overrides(overrides: SectionOverrides) -> Dict[str, Dict[str, Any]]:
    return {section_id: override.to_dict() for section_id, override in overrides.items()}
