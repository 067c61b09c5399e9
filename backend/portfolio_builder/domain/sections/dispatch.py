# portfolio_builder/domain/sections/dispatch.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Sequence

from portfolio_builder.domain.sections.registry import (
    DEFAULT_REGISTRY,
    HOME_SECTION_ID,
    SectionRegistry,
)
from portfolio_builder.domain.sections.resolver import ResolvedSection

logger = logging.getLogger(__name__)

# renderer(content restricted to the section's fields, title, view options)
SectionRenderer = Callable[[Mapping[str, Any], str, Mapping[str, Any]], Dict[str, Any]]


class RenderSurface(str, Enum):
    PREVIEW = "preview"
    PUBLIC = "public"


class MissingRendererError(LookupError):
    """A resolved, enabled section has no renderer registered."""


def check_renderers(
    renderers: Mapping[str, SectionRenderer],
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> List[str]:
    """Return registry ids that have no renderer."""
    return [section_id for section_id in registry.list_ids() if section_id not in renderers]


def restrict_content(
    content: Mapping[str, Any],
    section_id: str,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> Dict[str, Any]:
    definition = registry.get_definition(section_id)
    if definition is None:
        return {}
    return {name: content.get(name) for name in definition.fields}


def render_sections(
    resolved: Sequence[ResolvedSection],
    content: Mapping[str, Any],
    renderers: Mapping[str, SectionRenderer],
    *,
    surface: RenderSurface = RenderSurface.PUBLIC,
    strict: bool = False,
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> List[Dict[str, Any]]:
    """
    Render resolved sections in order for the preview or public surface.

    Both surfaces produce identical section payloads; the preview only
    adds an "edit" block per section. A missing renderer raises in
    strict mode and is skipped (and logged) otherwise.
    """
    rendered = []
    for position, section in enumerate(resolved):
        renderer = renderers.get(section.id)
        if renderer is None:
            if strict:
                raise MissingRendererError(f"No renderer registered for section '{section.id}'")
            logger.error("No renderer registered for section %r, skipping", section.id)
            continue

        view_options = dict(section.effective_view_options)
        payload = {
            "id": section.id,
            "title": section.effective_title,
            "view_options": view_options,
            "content": renderer(
                restrict_content(content, section.id, registry),
                section.effective_title,
                view_options,
            ),
        }

        if surface is RenderSurface.PREVIEW:
            definition = registry.get_definition(section.id)
            payload["edit"] = {
                "name": section.effective_name,
                "position": position,
                "removable": section.id != HOME_SECTION_ID,
                "fields": {
                    name: kind.value for name, kind in definition.fields.items()
                } if definition else {},
            }

        rendered.append(payload)

    return rendered
