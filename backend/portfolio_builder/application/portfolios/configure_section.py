from typing import Any, Dict, List
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.sections.editor import (
    set_section_enabled,
    set_section_labels,
    set_view_options,
)
from portfolio_builder.domain.sections.resolver import ResolvedSection, resolve_all
from portfolio_builder.gateways.errors import raise_for_result
from portfolio_builder.gateways.portfolio_gateway import PortfolioGateway
from portfolio_builder.models.portfolio import Portfolio

LABEL_KEYS = ("name", "title")


def configure_section(
    *,
    gateway: PortfolioGateway,
    portfolio: Portfolio,
    actor_id: str,
    section_id: str,
    data: Dict[str, Any],
) -> List[ResolvedSection]:
    """
    Apply an editor change to one section: enable/disable, name/title,
    and any section-specific view options (view_type, audio_player_mode...).

    All edits are computed on a copy of the override map and saved in one
    write; the stored map only changes if the save succeeds.
    """
    if section_id not in gateway.registry:
        raise InvariantViolation(f"Unknown section: {section_id}")

    if not data:
        raise InvariantViolation("No section changes provided")

    if "order" in data:
        raise InvariantViolation("Use the reorder endpoint to move sections")

    overrides = gateway.load_overrides(portfolio)

    if "enabled" in data:
        if not isinstance(data["enabled"], bool):
            raise InvariantViolation("enabled must be a boolean")
        overrides = set_section_enabled(overrides, section_id, data["enabled"], gateway.registry)

    labels = {key: data[key] for key in LABEL_KEYS if key in data}
    if labels:
        overrides = set_section_labels(overrides, section_id, registry=gateway.registry, **labels)

    view_options = {
        key: value for key, value in data.items()
        if key != "enabled" and key not in LABEL_KEYS
    }
    if view_options:
        overrides = set_view_options(overrides, section_id, view_options, gateway.registry)

    raise_for_result(
        gateway.save_portfolio_config(portfolio.id, overrides, actor_id=actor_id)
    )

    return resolve_all(overrides, gateway.registry)
