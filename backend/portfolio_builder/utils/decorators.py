from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity
from portfolio_builder.extensions import db
from portfolio_builder.models.user import User

def user_required(fn):
    """Loads the token's user into g.current_user. Use after @jwt_required()."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = db.session.get(User, get_jwt_identity())
        if not user:
            return jsonify({"error": "User not found"}), 401

        if not user.is_active:
            return jsonify({"error": "User account disabled"}), 403

        g.current_user = user
        return fn(*args, **kwargs)
    return wrapper

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if get_jwt().get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
