import re
from typing import Any, Mapping
from urllib.parse import urlparse

from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY, FieldKind, SectionRegistry
from .exceptions import InvariantViolation

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
MAX_SLUG_LENGTH = 200
# Text and URL columns are sized to match
MAX_TEXT_LENGTH = 300
MAX_URL_LENGTH = 512

META_TEXT_LIMITS = {
    "name": 200,
    "theme_name": 100,
    "seo_title": 200,
    "seo_description": 500,
}


def assert_slug(slug: Any) -> None:
    if not isinstance(slug, str) or len(slug) > MAX_SLUG_LENGTH or not SLUG_PATTERN.match(slug):
        raise InvariantViolation(
            "Slug must be lowercase letters, digits and single hyphens"
        )


def _assert_url(field_name: str, value: str) -> None:
    # Stored media is served from relative /media/... URLs
    if value.startswith("/"):
        return
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvariantViolation(f"{field_name} must be an http(s) URL")


def assert_field_value(field_name: str, kind: FieldKind, value: Any) -> None:
    if value is None:
        return

    if kind is FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            raise InvariantViolation(f"{field_name} must be a boolean")
    elif kind is FieldKind.STRUCTURED_DATA:
        if not isinstance(value, (list, dict)):
            raise InvariantViolation(f"{field_name} must be a JSON array or object")
    else:
        if not isinstance(value, str):
            raise InvariantViolation(f"{field_name} must be a string")
        if kind is FieldKind.TEXT and len(value) > MAX_TEXT_LENGTH:
            raise InvariantViolation(
                f"{field_name} must be at most {MAX_TEXT_LENGTH} characters"
            )
        if kind is FieldKind.URL and value:
            if len(value) > MAX_URL_LENGTH:
                raise InvariantViolation(
                    f"{field_name} must be at most {MAX_URL_LENGTH} characters"
                )
            _assert_url(field_name, value)


def assert_content_patch(
    patch: Mapping[str, Any],
    registry: SectionRegistry = DEFAULT_REGISTRY,
) -> None:
    """
    Every key must be a patchable content field of some section and
    every value must match that field's kind.
    """
    fields = registry.content_fields()

    unknown = sorted(set(patch) - set(fields))
    if unknown:
        raise InvariantViolation(f"Unknown content fields: {', '.join(unknown)}")

    for field_name, value in patch.items():
        assert_field_value(field_name, fields[field_name], value)


def assert_meta(meta: Mapping[str, Any]) -> None:
    if "slug" in meta:
        assert_slug(meta["slug"])

    for field_name, limit in META_TEXT_LIMITS.items():
        value = meta.get(field_name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise InvariantViolation(f"{field_name} must be a string")
        if len(value) > limit:
            raise InvariantViolation(f"{field_name} must be at most {limit} characters")


def assert_portfolio(portfolio, publish=False):
    assert_slug(portfolio.slug)

    if not isinstance(portfolio.name, str) or not portfolio.name.strip():
        raise InvariantViolation("Portfolio name is required.")

    assert_meta({
        field_name: getattr(portfolio, field_name)
        for field_name in META_TEXT_LIMITS
    })

    if publish and not portfolio.hero_title and not portfolio.artist_name:
        raise InvariantViolation(
            "Cannot publish a portfolio without a hero title or artist name."
        )
