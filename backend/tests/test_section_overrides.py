import json

from portfolio_builder.domain.sections.overrides import (
    SectionOverride,
    dump_overrides,
    parse_overrides,
)


def test_empty_and_missing_blobs():
    assert parse_overrides(None) == {}
    assert parse_overrides({}) == {}
    assert parse_overrides("not json") == {}
    assert parse_overrides(42) == {}


def test_false_is_a_value_not_absence():
    overrides = parse_overrides({"about": {"enabled": False, "order": 0}})

    assert overrides["about"].enabled is False
    assert overrides["about"].order == 0
    assert overrides["about"].title is None


def test_wrong_types_and_blank_labels_are_absent():
    override = parse_overrides({
        "about": {"enabled": "yes", "order": "3", "title": "   ", "name": ""}
    })["about"]

    assert override == SectionOverride(extras=override.extras)


def test_boolean_order_is_ignored():
    assert parse_overrides({"about": {"order": True}})["about"].order is None


def test_json_string_blob():
    raw = json.dumps({"about": {"title": "My Journey"}})

    assert parse_overrides(raw)["about"].title == "My Journey"


def test_legacy_list_blob_enables_in_list_order(small_registry):
    overrides = parse_overrides(["tracks", "hero", 7], small_registry)

    assert overrides == {
        "tracks": SectionOverride(enabled=True, order=0),
        "hero": SectionOverride(enabled=True, order=1),
        "about": SectionOverride(enabled=False),
        "testimonials": SectionOverride(enabled=False),
    }


def test_view_type_alias_and_extras():
    override = parse_overrides({
        "tracks": {
            "viewType": "list",
            "audio_player_mode": "inline",
            "user_manually_enabled": True,
        }
    })["tracks"]

    assert override.view_type == "list"
    assert override.view_options() == {"view_type": "list", "audio_player_mode": "inline"}


def test_dump_keeps_unknown_ids_and_bookkeeping():
    raw = {
        "legacy_widget": {"enabled": True, "order": 4},
        "about": {"title": "My Journey", "user_manually_disabled": False},
    }

    assert dump_overrides(parse_overrides(raw)) == raw


def test_dump_writes_canonical_view_type_key():
    dumped = dump_overrides(parse_overrides({"about": {"viewType": "centered"}}))

    assert dumped == {"about": {"view_type": "centered"}}
