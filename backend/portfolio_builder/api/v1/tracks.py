# portfolio_builder/api/v1/tracks.py
from flask import g, jsonify, request
from flask_jwt_extended import jwt_required
from portfolio_builder.application.collections.tracks import (
    create_track,
    delete_track,
    reorder_tracks,
    update_track,
)
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.models.track import Track
from portfolio_builder.normalizers.track import normalize_track
from portfolio_builder.utils.decorators import user_required
from .portfolios import get_owned_portfolio, portfolio_gateway
from . import v1_bp


def get_owned_track(track_id: str) -> Track:
    return (
        Track.query
        .join(Portfolio, Portfolio.id == Track.portfolio_id)
        .filter(Track.id == track_id, Portfolio.user_id == g.current_user.id)
        .first_or_404()
    )


@v1_bp.route("/portfolios/<portfolio_id>/tracks", methods=["GET"])
@jwt_required()
@user_required
def list_tracks(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)

    return jsonify({
        "items": [normalize_track(track, admin=True) for track in portfolio.tracks]
    })


@v1_bp.route("/portfolios/<portfolio_id>/tracks", methods=["POST"])
@jwt_required()
@user_required
def create_track_route(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    track = create_track(portfolio=portfolio, actor_id=g.current_user.id, data=data)

    return jsonify(normalize_track(track, admin=True)), 201


@v1_bp.route("/tracks/<track_id>", methods=["PUT"])
@jwt_required()
@user_required
def update_track_route(track_id):
    track = get_owned_track(track_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    update_track(track=track, actor_id=g.current_user.id, data=data)

    return jsonify(normalize_track(track, admin=True)), 200


@v1_bp.route("/tracks/<track_id>", methods=["DELETE"])
@jwt_required()
@user_required
def delete_track_route(track_id):
    track = get_owned_track(track_id)

    delete_track(track=track, actor_id=g.current_user.id)

    return jsonify({"message": "Track deleted successfully"}), 200


@v1_bp.route("/portfolios/<portfolio_id>/tracks/reorder", methods=["POST"])
@jwt_required()
@user_required
def reorder_tracks_route(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    tracks = reorder_tracks(
        portfolio=portfolio,
        actor_id=g.current_user.id,
        ordered_ids=data.get("ids"),
    )

    return jsonify({"items": [normalize_track(track, admin=True) for track in tracks]}), 200
