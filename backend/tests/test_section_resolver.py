from portfolio_builder.domain.sections.overrides import parse_overrides
from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY
from portfolio_builder.domain.sections.resolver import resolve, resolve_all


def ids(sections):
    return [section.id for section in sections]


def test_defaults_only(small_registry):
    resolved = resolve({}, small_registry)

    assert ids(resolved) == ["hero", "about", "tracks"]
    assert all(section.effective_enabled for section in resolved)


def test_title_override_keeps_inherited_enabled(small_registry):
    resolved = resolve(parse_overrides({"about": {"title": "My Journey"}}), small_registry)
    about = resolved[1]

    assert about.id == "about"
    assert about.effective_title == "My Journey"
    assert about.effective_name == "About Me"
    assert about.effective_enabled is True


def test_retired_ids_are_dropped(small_registry):
    overrides = parse_overrides({"legacy_widget": {"enabled": True, "order": 0}})

    assert ids(resolve(overrides, small_registry)) == ["hero", "about", "tracks"]
    assert "legacy_widget" not in ids(resolve_all(overrides, small_registry))


def test_home_section_cannot_be_disabled(small_registry):
    resolved = resolve(parse_overrides({"hero": {"enabled": False}}), small_registry)

    assert ids(resolved) == ["hero", "about", "tracks"]
    assert resolved[0].effective_enabled is True


def test_title_falls_back_to_name_then_default(small_registry):
    overrides = parse_overrides({"about": {"name": "Bio"}})
    about = next(s for s in resolve(overrides, small_registry) if s.id == "about")
    tracks = next(s for s in resolve(overrides, small_registry) if s.id == "tracks")

    assert about.effective_title == "Bio"
    assert tracks.effective_title == "Music Gallery"


def test_order_ties_keep_registry_order(small_registry):
    overrides = parse_overrides({"tracks": {"order": 0}})

    assert ids(resolve(overrides, small_registry)) == ["hero", "tracks", "about"]


def test_enabling_a_default_disabled_section(small_registry):
    overrides = parse_overrides({"testimonials": {"enabled": True}})

    assert ids(resolve(overrides, small_registry)) == ["hero", "about", "tracks", "testimonials"]


def test_resolve_all_includes_disabled_sections(small_registry):
    everything = resolve_all({}, small_registry)

    assert ids(everything) == ["hero", "about", "tracks", "testimonials"]
    assert everything[-1].effective_enabled is False


def test_resolution_is_deterministic(small_registry):
    overrides = parse_overrides({"about": {"order": 5}, "tracks": {"title": "Songs"}})

    assert resolve(overrides, small_registry) == resolve(overrides, small_registry)


def test_view_options_merge_over_defaults():
    overrides = parse_overrides({"tracks": {"viewType": "list"}})
    tracks = next(s for s in resolve(overrides, DEFAULT_REGISTRY) if s.id == "tracks")

    assert tracks.effective_view_options == {"view_type": "list", "audio_player_mode": "bottom"}


def test_default_registry_page():
    assert ids(resolve({})) == [
        "hero", "about", "tracks", "gallery", "press", "skills",
        "hobbies", "social_links", "contact", "footer",
    ]


def test_legacy_list_shows_only_listed_sections():
    resolved = resolve(parse_overrides(["hero", "about"]))

    assert ids(resolved) == ["hero", "about"]


def test_legacy_list_keeps_home_section(small_registry):
    overrides = parse_overrides(["tracks", "about"], small_registry)

    assert ids(resolve(overrides, small_registry)) == ["hero", "tracks", "about"]
