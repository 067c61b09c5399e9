from typing import Set
from portfolio_builder.domain.invariants.exceptions import InvariantViolation

# Explicit allowed state transitions
ALLOWED_PORTFOLIO_TRANSITIONS: dict[str, Set[str]] = {
    "draft": {"published"},
    "published": {"draft"},
}

def assert_portfolio_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards portfolio lifecycle transitions.
    Single source of truth for status changes.
    """
    allowed = ALLOWED_PORTFOLIO_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise InvariantViolation(
            f"Illegal portfolio transition: {from_status} → {to_status}"
        )
