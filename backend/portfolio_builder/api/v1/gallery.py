# portfolio_builder/api/v1/gallery.py
from flask import g, jsonify, request
from flask_jwt_extended import jwt_required
from portfolio_builder.application.collections.gallery import (
    create_gallery_item,
    delete_gallery_item,
    reorder_gallery,
    update_gallery_item,
)
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.models.gallery_item import GalleryItem
from portfolio_builder.normalizers.gallery import normalize_gallery_item
from portfolio_builder.utils.decorators import user_required
from .portfolios import get_owned_portfolio, portfolio_gateway
from . import v1_bp


def get_owned_gallery_item(item_id: str) -> GalleryItem:
    return (
        GalleryItem.query
        .join(Portfolio, Portfolio.id == GalleryItem.portfolio_id)
        .filter(GalleryItem.id == item_id, Portfolio.user_id == g.current_user.id)
        .first_or_404()
    )


@v1_bp.route("/portfolios/<portfolio_id>/gallery", methods=["GET"])
@jwt_required()
@user_required
def list_gallery_items(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)

    return jsonify({
        "items": [normalize_gallery_item(item, admin=True) for item in portfolio.gallery_items]
    })


@v1_bp.route("/portfolios/<portfolio_id>/gallery", methods=["POST"])
@jwt_required()
@user_required
def create_gallery_item_route(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    item = create_gallery_item(portfolio=portfolio, actor_id=g.current_user.id, data=data)

    return jsonify(normalize_gallery_item(item, admin=True)), 201


@v1_bp.route("/gallery/<item_id>", methods=["PUT"])
@jwt_required()
@user_required
def update_gallery_item_route(item_id):
    item = get_owned_gallery_item(item_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    update_gallery_item(item=item, actor_id=g.current_user.id, data=data)

    return jsonify(normalize_gallery_item(item, admin=True)), 200


@v1_bp.route("/gallery/<item_id>", methods=["DELETE"])
@jwt_required()
@user_required
def delete_gallery_item_route(item_id):
    item = get_owned_gallery_item(item_id)

    delete_gallery_item(item=item, actor_id=g.current_user.id)

    return jsonify({"message": "Gallery item deleted successfully"}), 200


@v1_bp.route("/portfolios/<portfolio_id>/gallery/reorder", methods=["POST"])
@jwt_required()
@user_required
def reorder_gallery_route(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    items = reorder_gallery(
        portfolio=portfolio,
        actor_id=g.current_user.id,
        ordered_ids=data.get("ids"),
    )

    return jsonify({"items": [normalize_gallery_item(item, admin=True) for item in items]}), 200
