import re
from flask import request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
)
from sqlalchemy import or_
from portfolio_builder.extensions import db
from portfolio_builder.models.user import User
from portfolio_builder.utils.audit import log_action
from . import v1_bp

USERNAME_PATTERN = re.compile(r"^[a-z0-9_-]{3,64}$")
MIN_PASSWORD_LENGTH = 8


def _issue_tokens(user):
    claims = {"role": user.role}
    return {
        "access_token": create_access_token(identity=user.id, additional_claims=claims),
        "refresh_token": create_refresh_token(identity=user.id, additional_claims=claims),
    }


@v1_bp.route("/auth/register", methods=["POST"])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "Invalid request body"}), 400

    email = (data.get("email") or "").strip().lower()
    username = (data.get("username") or "").strip().lower()
    password = data.get("password") or ""

    if not email or "@" not in email:
        return jsonify({"error": "A valid email is required"}), 400

    if not USERNAME_PATTERN.match(username):
        return jsonify({"error": "Username must be 3-64 lowercase letters, digits, '-' or '_'"}), 400

    if len(password) < MIN_PASSWORD_LENGTH:
        return jsonify({"error": f"Password must be at least {MIN_PASSWORD_LENGTH} characters"}), 400

    existing = User.query.filter(
        or_(User.email == email, User.username == username)
    ).first()
    if existing:
        return jsonify({"error": "Email or username already registered"}), 409

    user = User()
    user.email = email
    user.username = username
    user.set_password(password)

    db.session.add(user)
    db.session.flush()

    log_action(
        action="user.register",
        entity_type="user",
        entity_id=user.id,
        actor_id=user.id,
        payload={"username": user.username},
    )
    db.session.commit()

    return jsonify({"id": user.id, **_issue_tokens(user)}), 201


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "Invalid request body"}), 400

    email = (data.get("email") or "").strip().lower()
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "Email and password required"}), 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    return jsonify(_issue_tokens(user)), 200


@v1_bp.route("/auth/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    access_token = create_access_token(
        identity=get_jwt_identity(),
        additional_claims={"role": get_jwt().get("role")},
    )
    return jsonify({"access_token": access_token}), 200
