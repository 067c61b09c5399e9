from portfolio_builder.domain.sections.overrides import dump_overrides, parse_overrides
from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY


def normalize_portfolio_meta(portfolio):
    """Fields safe to show on the public page."""
    return {
        "name": portfolio.name,
        "slug": portfolio.slug,
        "username": portfolio.owner.username if portfolio.owner else None,
        "theme_name": portfolio.theme_name,
        "seo": {
            "title": portfolio.seo_title or portfolio.name,
            "description": portfolio.seo_description,
        },
    }


def normalize_portfolio_summary(portfolio):
    return {
        "id": portfolio.id,
        "name": portfolio.name,
        "slug": portfolio.slug,
        "status": portfolio.status,
        "is_default": portfolio.is_default,
        "theme_name": portfolio.theme_name,
        "updated_at": portfolio.updated_at.isoformat() if portfolio.updated_at else None,
    }


def normalize_portfolio(portfolio, registry=DEFAULT_REGISTRY):
    """Owner view: metadata, every content field and the stored section config."""
    data = normalize_portfolio_summary(portfolio)
    data["seo_title"] = portfolio.seo_title
    data["seo_description"] = portfolio.seo_description
    data["content"] = {
        name: getattr(portfolio, name) for name in registry.content_fields()
    }
    data["sections_config"] = dump_overrides(parse_overrides(portfolio.sections_config, registry))
    return data


def normalize_section_list(sections):
    """Editor sidebar: sections with their effective state, in page order."""
    return {
        "sections": [section.to_dict() for section in sections],
        "order": [section.id for section in sections if section.effective_enabled],
    }
