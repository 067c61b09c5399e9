from typing import Any, Dict
from portfolio_builder.domain.sections.dispatch import RenderSurface, render_sections
from portfolio_builder.domain.sections.resolver import resolve
from portfolio_builder.gateways.portfolio_gateway import PortfolioGateway
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.normalizers.portfolio import normalize_portfolio_meta
from portfolio_builder.normalizers.sections import SECTION_RENDERERS


def render_portfolio(
    *,
    gateway: PortfolioGateway,
    portfolio: Portfolio,
    surface: RenderSurface,
    strict: bool = False,
    renderers=SECTION_RENDERERS,
) -> Dict[str, Any]:
    """
    Build the page payload for the editor preview or the public page.

    Both surfaces go through the same resolve + render pipeline; only
    the preview carries edit affordances.
    """
    resolved = resolve(gateway.load_overrides(portfolio), gateway.registry)

    return {
        "portfolio": normalize_portfolio_meta(portfolio),
        "surface": surface.value,
        "sections": render_sections(
            resolved,
            gateway.load_content(portfolio),
            renderers,
            surface=surface,
            strict=strict,
            registry=gateway.registry,
        ),
    }
