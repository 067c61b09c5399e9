from flask import g, jsonify, request
from flask_jwt_extended import jwt_required
from portfolio_builder.models.audit_log import AuditLog
from portfolio_builder.normalizers.audit import normalize_audit_log
from portfolio_builder.normalizers.pagination import normalize_pagination
from portfolio_builder.utils.decorators import user_required
from portfolio_builder.utils.pagination import MAX_PER_PAGE, paginate_cursor
from . import v1_bp


@v1_bp.route("/audit", methods=["GET"])
@jwt_required()
@user_required
def list_audit_logs():
    """The signed-in user's own change history, newest first."""
    limit = max(1, min(request.args.get("limit", 20, type=int) or 20, MAX_PER_PAGE))
    cursor = request.args.get("cursor")

    query = AuditLog.query.filter(AuditLog.actor_id == g.current_user.id)

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_cursor(query, model=AuditLog, cursor=cursor, limit=limit)

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
