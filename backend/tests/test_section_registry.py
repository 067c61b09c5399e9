import pytest

from portfolio_builder.domain.sections.registry import (
    COLLECTION_FIELDS,
    DEFAULT_REGISTRY,
    HOME_SECTION_ID,
    FieldKind,
    SectionDefinition,
    SectionId,
    SectionRegistry,
    get_definition,
    list_ids,
)


def test_registry_covers_every_section_id_in_declaration_order():
    assert list_ids() == tuple(section.value for section in SectionId)
    assert list_ids()[0] == HOME_SECTION_ID


def test_unknown_id_returns_none():
    assert get_definition("legacy_widget") is None
    assert "legacy_widget" not in DEFAULT_REGISTRY


def test_default_enabled_flags():
    disabled = {d.id for d in DEFAULT_REGISTRY if not d.default_enabled}
    assert disabled == {"testimonials", "key_projects", "sponsors", "resume"}


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError):
        SectionRegistry([
            SectionDefinition("hero", "Hero", 0, True),
            SectionDefinition("hero", "Hero again", 1, True),
        ])


def test_content_fields_exclude_collections():
    fields = DEFAULT_REGISTRY.content_fields()

    assert fields["hero_title"] is FieldKind.TEXT
    assert fields["footer_show_links"] is FieldKind.BOOLEAN
    assert not COLLECTION_FIELDS & set(fields)


def test_field_manifest_uses_plain_strings():
    manifest = DEFAULT_REGISTRY.field_manifest()

    assert manifest["about"] == {
        "artist_name": "text",
        "about_text": "long_text",
        "profile_photo_url": "url",
    }
    assert manifest["tracks"] == {"tracks": "structured_data"}


def test_definitions_are_read_only():
    definition = get_definition("about")

    with pytest.raises(AttributeError):
        definition.default_name = "Bio"
