from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from portfolio_builder.extensions import db
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.invariants.portfolio import assert_meta, assert_portfolio
from portfolio_builder.utils.audit import log_action
from portfolio_builder.utils.transaction import transactional


def create_portfolio(
    *,
    owner_id: str,
    data: Dict[str, Any],
) -> Portfolio:
    """
    Create a new portfolio in DRAFT state with an empty section config,
    so every section starts from its registry defaults.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug per owner
    - Invariant violations
    """

    name: str | None = data.get("name")
    slug: str | None = data.get("slug")

    if not name or not slug:
        raise InvariantViolation("Both name and slug are required")

    assert_meta(data)

    existing = Portfolio.query.filter_by(user_id=owner_id, slug=slug).first()
    if existing:
        raise InvariantViolation("A portfolio with this slug already exists")

    has_default = Portfolio.query.filter_by(user_id=owner_id, is_default=True).first()

    portfolio = Portfolio()
    portfolio.user_id = owner_id
    portfolio.name = name
    portfolio.slug = slug
    portfolio.status = "draft"
    portfolio.theme_name = data.get("theme_name")
    portfolio.sections_config = {}
    portfolio.is_default = has_default is None

    assert_portfolio(portfolio)

    try:
        with transactional():
            db.session.add(portfolio)
            db.session.flush()  # ensures portfolio.id is available

            log_action(
                action="portfolio.create",
                entity_type="portfolio",
                entity_id=portfolio.id,
                actor_id=owner_id,
                payload={
                    "name": portfolio.name,
                    "slug": portfolio.slug,
                },
            )

        return portfolio

    except IntegrityError as exc:
        # Raised by uq_portfolio_slug_per_user on a concurrent create
        raise InvariantViolation("A portfolio with this slug already exists") from exc
