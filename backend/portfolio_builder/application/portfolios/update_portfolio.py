from typing import Any, Dict
from portfolio_builder.extensions import db
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.invariants.portfolio import (
    assert_content_patch,
    assert_meta,
    assert_portfolio,
)
from portfolio_builder.gateways.errors import raise_for_result
from portfolio_builder.gateways.portfolio_gateway import PortfolioGateway
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.utils.audit import log_action


ALLOWED_META_FIELDS = {"name", "slug", "theme_name", "seo_title", "seo_description"}


def update_portfolio(
    *,
    gateway: PortfolioGateway,
    portfolio: Portfolio,
    actor_id: str,
    data: Dict[str, Any],
) -> Portfolio:
    """
    Update portfolio metadata and section content fields.

    Design rules:
    - Metadata fields are whitelisted
    - Every other key must be a content field from the section registry
    - No silent no-op updates
    - Nothing is applied unless the whole payload is valid
    """
    if not data:
        raise InvariantViolation("No fields provided for update")

    if "sections_config" in data:
        raise InvariantViolation(
            "Section configuration is changed through the sections endpoints"
        )

    meta = {key: value for key, value in data.items() if key in ALLOWED_META_FIELDS}
    content_patch = {key: value for key, value in data.items() if key not in ALLOWED_META_FIELDS}

    assert_meta(meta)
    assert_content_patch(content_patch, gateway.registry)

    if "slug" in meta and meta["slug"] != portfolio.slug:
        clash = Portfolio.query.filter(
            Portfolio.user_id == portfolio.user_id,
            Portfolio.slug == meta["slug"],
            Portfolio.id != portfolio.id,
        ).first()
        if clash:
            raise InvariantViolation("A portfolio with this slug already exists")

    changed_meta = [field for field, value in meta.items() if getattr(portfolio, field) != value]

    try:
        for field in changed_meta:
            setattr(portfolio, field, meta[field])

        # 🔒 Domain invariant enforcement
        assert_portfolio(portfolio)
    except InvariantViolation:
        db.session.rollback()
        raise

    if changed_meta:
        log_action(
            action="portfolio.update_meta",
            entity_type="portfolio",
            entity_id=portfolio.id,
            actor_id=actor_id,
            payload={"fields": changed_meta},
        )

    # Commits the metadata changes together with the content patch
    raise_for_result(
        gateway.save_portfolio_config(
            portfolio.id,
            content_patch=content_patch,
            actor_id=actor_id,
        )
    )

    return portfolio
