# portfolio_builder/application/portfolios/publish_portfolio.py
from typing import Dict
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.utils.transaction import transactional
from portfolio_builder.utils.audit import log_action
from portfolio_builder.domain.invariants.portfolio import assert_portfolio
from portfolio_builder.domain.lifecycle.portfolio import assert_portfolio_transition


def publish_portfolio(
    *,
    portfolio: Portfolio,
    actor_id: str,
) -> Dict[str, str]:
    """
    Makes a portfolio visible at its public URL.

    Responsibilities:
    - transactional boundary
    - lifecycle transition enforcement
    - publish invariants
    - audit logging
    """
    with transactional():
        assert_portfolio_transition(from_status=portfolio.status, to_status="published")

        portfolio.status = "published"

        assert_portfolio(portfolio, publish=True)

        log_action(
            action="portfolio.publish",
            entity_type="portfolio",
            entity_id=portfolio.id,
            actor_id=actor_id,
        )

    return {"portfolio_id": portfolio.id, "status": portfolio.status}


def unpublish_portfolio(
    *,
    portfolio: Portfolio,
    actor_id: str,
) -> Dict[str, str]:
    """Takes a portfolio off its public URL; content and sections are kept."""
    with transactional():
        assert_portfolio_transition(from_status=portfolio.status, to_status="draft")

        portfolio.status = "draft"

        log_action(
            action="portfolio.unpublish",
            entity_type="portfolio",
            entity_id=portfolio.id,
            actor_id=actor_id,
        )

    return {"portfolio_id": portfolio.id, "status": portfolio.status}
