# portfolio_builder/domain/sections/resolver.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from portfolio_builder.domain.sections.overrides import SectionOverride, SectionOverrides
from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY, HOME_SECTION_ID, SectionRegistry

_EMPTY = SectionOverride()


@dataclass(frozen=True)
class ResolvedSection:
    id: str
    effective_name: str
    effective_title: str
    effective_enabled: bool
    effective_order: int
    effective_view_options: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.effective_name,
            "title": self.effective_title,
            "enabled": self.effective_enabled,
            "order": self.effective_order,
            "view_options": dict(self.effective_view_options),
        }


def resolve_all(
    overrides: SectionOverrides,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> List[ResolvedSection]:
    """
    Effective state of every registry section, enabled or not.

    Sorted by effective order; sorted() is stable so sections sharing an
    order keep registry order. Override ids unknown to the registry never
    appear in the result.
    """
    resolved = []
    for definition in registry:
        override = overrides.get(definition.id, _EMPTY)

        enabled = definition.default_enabled if override.enabled is None else override.enabled
        if definition.id == HOME_SECTION_ID:
            enabled = True

        name = definition.default_name if override.name is None else override.name
        title = name if override.title is None else override.title
        order = definition.default_order if override.order is None else override.order

        view_options = dict(definition.default_view_options)
        view_options.update(override.view_options())

        resolved.append(
            ResolvedSection(
                id=definition.id,
                effective_name=name,
                effective_title=title,
                effective_enabled=enabled,
                effective_order=order,
                effective_view_options=view_options,
            )
        )

    return sorted(resolved, key=lambda section: section.effective_order)


def resolve(
    overrides: SectionOverrides,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> List[ResolvedSection]:
    """Ordered list of the sections a portfolio page shows."""
    return [
        section
        for section in resolve_all(overrides, registry)
        if section.effective_enabled
    ]
