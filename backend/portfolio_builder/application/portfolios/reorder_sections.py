from typing import List
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.sections.editor import reorder
from portfolio_builder.domain.sections.resolver import ResolvedSection, resolve
from portfolio_builder.gateways.errors import raise_for_result
from portfolio_builder.gateways.portfolio_gateway import PortfolioGateway
from portfolio_builder.models.portfolio import Portfolio


def reorder_sections(
    *,
    gateway: PortfolioGateway,
    portfolio: Portfolio,
    actor_id: str,
    section_id: str,
    new_index: int,
) -> List[ResolvedSection]:
    """
    Drag-and-drop move of one enabled section.

    A move of an unknown or disabled section is a stale UI event and is
    not saved; the current sequence is returned as-is.
    """
    if isinstance(new_index, bool) or not isinstance(new_index, int):
        raise InvariantViolation("new_index must be an integer")

    overrides = gateway.load_overrides(portfolio)
    updated = reorder(overrides, section_id, new_index, gateway.registry)

    if updated is not overrides:
        raise_for_result(
            gateway.save_portfolio_config(portfolio.id, updated, actor_id=actor_id)
        )

    return resolve(updated, gateway.registry)
