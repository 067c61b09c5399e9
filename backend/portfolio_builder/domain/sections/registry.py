# portfolio_builder/domain/sections/registry.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple


class FieldKind(str, Enum):
    TEXT = "text"
    LONG_TEXT = "long_text"
    URL = "url"
    BOOLEAN = "boolean"
    STRUCTURED_DATA = "structured_data"


class SectionId(str, Enum):
    """
    Closed set of section types a portfolio page can contain.

    Adding a section means adding a member here, a definition in
    DEFAULT_DEFINITIONS and a renderer in normalizers.sections.
    """
    HERO = "hero"
    ABOUT = "about"
    TRACKS = "tracks"
    GALLERY = "gallery"
    PRESS = "press"
    SKILLS = "skills"
    TESTIMONIALS = "testimonials"
    HOBBIES = "hobbies"
    KEY_PROJECTS = "key_projects"
    SPONSORS = "sponsors"
    RESUME = "resume"
    SOCIAL_LINKS = "social_links"
    CONTACT = "contact"
    FOOTER = "footer"


# Always enabled, never removable by the owner
HOME_SECTION_ID = SectionId.HERO.value

# Content assembled from related tables rather than portfolio columns
COLLECTION_FIELDS = frozenset({"tracks", "gallery_items"})


@dataclass(frozen=True)
class SectionDefinition:
    id: str
    default_name: str
    default_order: int
    default_enabled: bool
    fields: Mapping[str, FieldKind] = field(default_factory=dict)
    default_view_options: Mapping[str, object] = field(default_factory=dict)


class SectionRegistry:
    """
    Ordered, read-only catalog of section definitions.

    Iteration order is the declaration order and is the tie-break
    when two sections resolve to the same order value.
    """

    def __init__(self, definitions: Iterable[SectionDefinition]):
        by_id: Dict[str, SectionDefinition] = {}
        for definition in definitions:
            if definition.id in by_id:
                raise ValueError(f"Duplicate section id: {definition.id}")
            by_id[definition.id] = definition
        self._definitions = MappingProxyType(by_id)

    def get_definition(self, section_id: str) -> Optional[SectionDefinition]:
        return self._definitions.get(section_id)

    def list_ids(self) -> Tuple[str, ...]:
        return tuple(self._definitions)

    def __contains__(self, section_id: object) -> bool:
        return section_id in self._definitions

    def __iter__(self):
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def field_manifest(self) -> Dict[str, Dict[str, str]]:
        return {
            definition.id: {name: kind.value for name, kind in definition.fields.items()}
            for definition in self
        }

    def content_fields(self) -> Dict[str, FieldKind]:
        """Every patchable portfolio column, keyed by field name."""
        fields: Dict[str, FieldKind] = {}
        for definition in self:
            for name, kind in definition.fields.items():
                if name not in COLLECTION_FIELDS:
                    fields[name] = kind
        return fields


T, LT, U, B, S = (
    FieldKind.TEXT,
    FieldKind.LONG_TEXT,
    FieldKind.URL,
    FieldKind.BOOLEAN,
    FieldKind.STRUCTURED_DATA,
)

DEFAULT_DEFINITIONS = (
    SectionDefinition(
        "hero", "Hero", 0, True,
        {"hero_title": T, "hero_subtitle": T, "hero_image_url": U, "hero_cta_buttons": S},
    ),
    SectionDefinition(
        "about", "About Me", 1, True,
        {"artist_name": T, "about_text": LT, "profile_photo_url": U},
        {"view_type": "image-left"},
    ),
    SectionDefinition(
        "tracks", "Music Gallery", 2, True,
        {"tracks": S},
        {"view_type": "grid", "audio_player_mode": "bottom"},
    ),
    SectionDefinition(
        "gallery", "Photo Gallery", 3, True,
        {"gallery_items": S},
        {"view_type": "grid"},
    ),
    SectionDefinition("press", "Press", 4, True, {"press_json": S}, {"view_type": "featured"}),
    SectionDefinition("skills", "Skills", 5, True, {"skills_json": S}),
    SectionDefinition("testimonials", "Testimonials", 6, False, {"testimonials_json": S}),
    SectionDefinition("hobbies", "Hobbies", 7, True, {"hobbies_json": S}),
    SectionDefinition("key_projects", "Key Projects", 8, False, {"key_projects_json": S}),
    SectionDefinition("sponsors", "Sponsors", 9, False, {"sponsors_json": S}),
    SectionDefinition("resume", "Resume", 10, False, {"resume_url": U}),
    SectionDefinition(
        "social_links", "Social Links", 11, True,
        {
            "twitter_url": U,
            "instagram_url": U,
            "linkedin_url": U,
            "github_url": U,
            "website_url": U,
            "youtube_url": U,
        },
    ),
    SectionDefinition(
        "contact", "Contact", 12, True,
        {
            "contact_description": LT,
            "contact_email": T,
            "contact_phone": T,
            "contact_location": T,
        },
    ),
    SectionDefinition(
        "footer", "Footer", 13, True,
        {
            "footer_text": T,
            "footer_about_summary": LT,
            "footer_links_json": S,
            "footer_social_links_json": S,
            "footer_copyright_text": T,
            "footer_show_social_links": B,
            "footer_show_about_summary": B,
            "footer_show_links": B,
        },
    ),
)

DEFAULT_REGISTRY = SectionRegistry(DEFAULT_DEFINITIONS)


def get_definition(section_id: str) -> Optional[SectionDefinition]:
    return DEFAULT_REGISTRY.get_definition(section_id)


def list_ids() -> Tuple[str, ...]:
    return DEFAULT_REGISTRY.list_ids()
