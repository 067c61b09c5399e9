from flask import g
from portfolio_builder.extensions import db
from portfolio_builder.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None,
    actor_id: Optional[str] = None
):
    if actor_id is None:
        user = getattr(g, "current_user", None)
        if user is None:
            return  # Skip logging outside an authenticated request
        actor_id = user.id

    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
