# portfolio_builder/gateways/portfolio_gateway.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_builder.domain.invariants.portfolio import assert_content_patch
from portfolio_builder.domain.sections.overrides import (
    SectionOverride,
    SectionOverrides,
    dump_overrides,
    parse_overrides,
)
from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY, SectionRegistry
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.models.user import User
from portfolio_builder.normalizers.gallery import normalize_gallery_item
from portfolio_builder.normalizers.track import normalize_track
from portfolio_builder.utils.audit import log_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    error: Optional[str] = None


class PortfolioGateway:
    """
    Loads and saves portfolios against the relational store.

    The session is handed in by the caller (the request-scoped
    Flask-SQLAlchemy session in the app, anything compatible in tests).
    """

    def __init__(self, session, registry: SectionRegistry = DEFAULT_REGISTRY):
        self.session = session
        self.registry = registry

    # ------------------------
    # Reads
    # ------------------------

    def load_portfolio(self, portfolio_id: str, *, owner_id: Optional[str] = None) -> Optional[Portfolio]:
        query = select(Portfolio).where(Portfolio.id == portfolio_id)
        if owner_id is not None:
            query = query.where(Portfolio.user_id == owner_id)
        return self.session.execute(query).scalar_one_or_none()

    def load_published(self, username: str, slug: str) -> Optional[Portfolio]:
        query = (
            select(Portfolio)
            .join(User, User.id == Portfolio.user_id)
            .where(
                User.username == username,
                User.is_active.is_(True),
                Portfolio.slug == slug,
                Portfolio.status == "published",
            )
        )
        return self.session.execute(query).scalar_one_or_none()

    def load_overrides(self, portfolio: Portfolio) -> Dict[str, SectionOverride]:
        return parse_overrides(portfolio.sections_config, self.registry)

    def load_content(self, portfolio: Portfolio) -> Dict[str, Any]:
        """Content columns plus the collection fields built from related rows."""
        content: Dict[str, Any] = {
            name: getattr(portfolio, name)
            for name in self.registry.content_fields()
        }
        content["tracks"] = [
            normalize_track(track) for track in portfolio.tracks if track.is_published
        ]
        content["gallery_items"] = [
            normalize_gallery_item(item) for item in portfolio.gallery_items
        ]
        return content

    # ------------------------
    # Writes
    # ------------------------

    def save_portfolio_config(
        self,
        portfolio_id: str,
        sections_config: Optional[SectionOverrides] = None,
        content_patch: Optional[Mapping[str, Any]] = None,
        *,
        actor_id: Optional[str] = None,
    ) -> SaveResult:
        """
        Overwrite the section override blob and/or patch content fields.

        The whole blob is replaced: concurrent editors resolve as last
        write wins. Invalid patches raise InvariantViolation before any
        I/O; storage failures are rolled back and reported as a failed
        SaveResult.
        """
        content_patch = dict(content_patch or {})
        assert_content_patch(content_patch, self.registry)

        try:
            portfolio = self.load_portfolio(portfolio_id)
            if portfolio is None:
                return SaveResult(ok=False, error="Portfolio not found")

            changed_fields = []

            if sections_config is not None:
                # Assign a fresh dict so the JSON column is marked dirty
                portfolio.sections_config = dump_overrides(sections_config)
                changed_fields.append("sections_config")

            for field_name, value in content_patch.items():
                if getattr(portfolio, field_name) != value:
                    setattr(portfolio, field_name, value)
                    changed_fields.append(field_name)

            if changed_fields:
                log_action(
                    action="portfolio.update",
                    entity_type="portfolio",
                    entity_id=portfolio.id,
                    payload={"fields": changed_fields},
                    actor_id=actor_id,
                )

            self.session.commit()

        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Saving portfolio %s failed", portfolio_id)
            return SaveResult(ok=False, error=str(exc.__class__.__name__))

        return SaveResult(ok=True)
