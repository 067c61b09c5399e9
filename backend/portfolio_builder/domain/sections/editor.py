# portfolio_builder/domain/sections/editor.py
"""
Pure edits on a portfolio's section override map.

Every function returns a new map and leaves its input untouched, so a
failed save never leaves a half-applied configuration behind. Persisting
the result is the caller's job.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping

from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.sections.overrides import (
    RESERVED_KEYS,
    VIEW_TYPE_ALIASES,
    SectionOverride,
    SectionOverrides,
)
from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY, HOME_SECTION_ID, SectionRegistry
from portfolio_builder.domain.sections.resolver import resolve, resolve_all

_UNSET: Any = object()


def _get(overrides: SectionOverrides, section_id: str) -> SectionOverride:
    return overrides.get(section_id) or SectionOverride()


def _require_known(section_id: str, registry: SectionRegistry) -> None:
    if section_id not in registry:
        raise InvariantViolation(f"Unknown section: {section_id}")


def reorder(
    overrides: SectionOverrides,
    moved_id: str,
    new_index: int,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> SectionOverrides:
    """
    Move an enabled section to new_index among the enabled sections.

    All enabled sections get contiguous orders 0..n-1 afterwards, so
    repeated moves never accumulate gaps or collisions. Disabled
    sections keep whatever order they had stored. Unknown or disabled
    ids are a stale drag from the UI: the input is returned unchanged.
    """
    sequence = [section.id for section in resolve(overrides, registry)]
    if moved_id not in sequence:
        return overrides

    sequence.remove(moved_id)
    index = max(0, min(new_index, len(sequence)))
    sequence.insert(index, moved_id)

    updated: Dict[str, SectionOverride] = dict(overrides)
    for position, section_id in enumerate(sequence):
        updated[section_id] = _get(overrides, section_id).with_changes(order=position)
    return updated


def set_section_enabled(
    overrides: SectionOverrides,
    section_id: str,
    enabled: bool,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> SectionOverrides:
    _require_known(section_id, registry)

    if section_id == HOME_SECTION_ID and not enabled:
        raise InvariantViolation(f"The {HOME_SECTION_ID} section cannot be disabled")

    current = next(
        section for section in resolve_all(overrides, registry) if section.id == section_id
    )
    override = _get(overrides, section_id)
    extras = dict(override.extras)

    # Explicit owner choice, as opposed to an inherited default
    if current.effective_enabled != enabled:
        extras["user_manually_enabled"] = enabled
        extras["user_manually_disabled"] = not enabled

    updated = dict(overrides)
    updated[section_id] = override.with_changes(
        enabled=enabled,
        extras=MappingProxyType(extras),
    )
    return updated


def set_section_labels(
    overrides: SectionOverrides,
    section_id: str,
    *,
    name: Any = _UNSET,
    title: Any = _UNSET,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> SectionOverrides:
    """Set or clear (None / blank) a section's editor name and display title."""
    _require_known(section_id, registry)

    changes = {}
    for key, value in (("name", name), ("title", title)):
        if value is _UNSET:
            continue
        if value is not None and not isinstance(value, str):
            raise InvariantViolation(f"Section {key} must be a string")
        changes[key] = value if value and value.strip() else None

    updated = dict(overrides)
    updated[section_id] = _get(overrides, section_id).with_changes(**changes)
    return updated


def set_view_options(
    overrides: SectionOverrides,
    section_id: str,
    options: Mapping[str, Any],
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> SectionOverrides:
    """Merge section-specific view options; a None value removes the key."""
    _require_known(section_id, registry)

    reserved = RESERVED_KEYS.intersection(options)
    if reserved:
        raise InvariantViolation(
            f"Not view options: {', '.join(sorted(reserved))}"
        )

    override = _get(overrides, section_id)
    extras = dict(override.extras)
    view_type = override.view_type

    for key, value in options.items():
        if key in VIEW_TYPE_ALIASES:
            if value is not None and not isinstance(value, str):
                raise InvariantViolation("view_type must be a string")
            view_type = value
        elif value is None:
            extras.pop(key, None)
        else:
            extras[key] = value

    updated = dict(overrides)
    updated[section_id] = override.with_changes(
        view_type=view_type,
        extras=MappingProxyType(extras),
    )
    return updated
