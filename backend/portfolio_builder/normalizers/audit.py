# portfolio_builder/normalizers/audit.py
from typing import Any, Dict

from portfolio_builder.models.audit_log import AuditLog


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    return {
        "id": log.id,
        "action": log.action,
        "entity_type": log.entity_type,
        "entity_id": log.entity_id,
        "payload": log.payload or {},
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }
