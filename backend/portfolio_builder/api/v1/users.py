from flask import g, jsonify
from flask_jwt_extended import jwt_required
from portfolio_builder.utils.decorators import user_required
from . import v1_bp


@v1_bp.route("/users/me", methods=["GET"])
@jwt_required()
@user_required
def current_user_profile():
    user = g.current_user

    return jsonify({
        "id": user.id,
        "email": user.email,
        "username": user.username,
        "role": user.role,
        "is_active": user.is_active,
        "portfolios": [
            {"id": p.id, "slug": p.slug, "status": p.status, "is_default": p.is_default}
            for p in user.portfolios
        ],
    }), 200
