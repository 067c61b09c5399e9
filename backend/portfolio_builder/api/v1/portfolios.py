# portfolio_builder/api/v1/portfolios.py
from flask import abort, current_app, g, jsonify, request
from flask_jwt_extended import jwt_required
from portfolio_builder.application.portfolios.configure_section import configure_section
from portfolio_builder.application.portfolios.create_portfolio import create_portfolio
from portfolio_builder.application.portfolios.delete_portfolio import delete_portfolio
from portfolio_builder.application.portfolios.publish_portfolio import (
    publish_portfolio,
    unpublish_portfolio,
)
from portfolio_builder.application.portfolios.render_portfolio import render_portfolio
from portfolio_builder.application.portfolios.reorder_sections import reorder_sections
from portfolio_builder.application.portfolios.update_portfolio import update_portfolio
from portfolio_builder.domain.sections.dispatch import RenderSurface
from portfolio_builder.domain.sections.resolver import resolve_all
from portfolio_builder.extensions import db
from portfolio_builder.gateways.errors import raise_for_result
from portfolio_builder.gateways.portfolio_gateway import PortfolioGateway
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.normalizers.pagination import normalize_pagination
from portfolio_builder.normalizers.portfolio import (
    normalize_portfolio,
    normalize_portfolio_summary,
    normalize_section_list,
)
from portfolio_builder.utils.decorators import user_required
from portfolio_builder.utils.media import MEDIA_KINDS, delete_file, save_file
from portfolio_builder.utils.pagination import page_args
from . import v1_bp


def portfolio_gateway() -> PortfolioGateway:
    return PortfolioGateway(db.session)


def get_owned_portfolio(gateway: PortfolioGateway, portfolio_id: str) -> Portfolio:
    """Other owners' portfolios are reported as missing, not forbidden."""
    portfolio = gateway.load_portfolio(portfolio_id, owner_id=g.current_user.id)
    if portfolio is None:
        abort(404, description="Portfolio not found")
    return portfolio


# ------------------------
# Portfolios
# ------------------------

@v1_bp.route("/portfolios", methods=["GET"])
@jwt_required()
@user_required
def list_portfolios():
    page, per_page = page_args()

    query = Portfolio.query.filter_by(user_id=g.current_user.id)
    if status := request.args.get("status"):
        query = query.filter_by(status=status)

    pagination = query.order_by(Portfolio.created_at.desc()).paginate(
        page=page, per_page=per_page, error_out=False
    )

    return jsonify(
        normalize_pagination(
            pagination.items,
            normalize_portfolio_summary,
            page=page,
            per_page=per_page,
            total=pagination.total,
        )
    )


@v1_bp.route("/portfolios", methods=["POST"])
@jwt_required()
@user_required
def create_portfolio_route():
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    portfolio = create_portfolio(owner_id=g.current_user.id, data=data)

    return jsonify({
        "id": portfolio.id,
        "message": "Portfolio created successfully"
    }), 201


@v1_bp.route("/portfolios/<portfolio_id>", methods=["GET"])
@jwt_required()
@user_required
def get_portfolio(portfolio_id):
    gateway = portfolio_gateway()
    portfolio = get_owned_portfolio(gateway, portfolio_id)

    return jsonify(normalize_portfolio(portfolio, gateway.registry))


@v1_bp.route("/portfolios/<portfolio_id>", methods=["PATCH"])
@jwt_required()
@user_required
def update_portfolio_route(portfolio_id):
    gateway = portfolio_gateway()
    portfolio = get_owned_portfolio(gateway, portfolio_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    update_portfolio(
        gateway=gateway,
        portfolio=portfolio,
        actor_id=g.current_user.id,
        data=data,
    )

    return jsonify(normalize_portfolio(portfolio, gateway.registry)), 200


@v1_bp.route("/portfolios/<portfolio_id>", methods=["DELETE"])
@jwt_required()
@user_required
def delete_portfolio_route(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)

    delete_portfolio(portfolio=portfolio, actor_id=g.current_user.id)

    return jsonify({"message": "Portfolio deleted successfully"}), 200


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/portfolios/<portfolio_id>/sections", methods=["GET"])
@jwt_required()
@user_required
def list_sections(portfolio_id):
    gateway = portfolio_gateway()
    portfolio = get_owned_portfolio(gateway, portfolio_id)

    sections = resolve_all(gateway.load_overrides(portfolio), gateway.registry)
    return jsonify(normalize_section_list(sections))


@v1_bp.route("/portfolios/<portfolio_id>/sections/<section_id>", methods=["PUT"])
@jwt_required()
@user_required
def update_section(portfolio_id, section_id):
    gateway = portfolio_gateway()
    portfolio = get_owned_portfolio(gateway, portfolio_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    sections = configure_section(
        gateway=gateway,
        portfolio=portfolio,
        actor_id=g.current_user.id,
        section_id=section_id,
        data=data,
    )

    return jsonify(normalize_section_list(sections)), 200


@v1_bp.route("/portfolios/<portfolio_id>/sections/reorder", methods=["POST"])
@jwt_required()
@user_required
def reorder_sections_route(portfolio_id):
    gateway = portfolio_gateway()
    portfolio = get_owned_portfolio(gateway, portfolio_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    if not data.get("section_id") or "new_index" not in data:
        return jsonify({"error": "section_id and new_index are required"}), 400

    sections = reorder_sections(
        gateway=gateway,
        portfolio=portfolio,
        actor_id=g.current_user.id,
        section_id=data["section_id"],
        new_index=data["new_index"],
    )

    return jsonify(normalize_section_list(sections)), 200


# ------------------------
# Preview & lifecycle
# ------------------------

@v1_bp.route("/portfolios/<portfolio_id>/preview", methods=["GET"])
@jwt_required()
@user_required
def preview_portfolio(portfolio_id):
    gateway = portfolio_gateway()
    portfolio = get_owned_portfolio(gateway, portfolio_id)

    return jsonify(
        render_portfolio(
            gateway=gateway,
            portfolio=portfolio,
            surface=RenderSurface.PREVIEW,
            strict=current_app.config["SECTION_RENDER_STRICT"],
        )
    )


@v1_bp.route("/portfolios/<portfolio_id>/publish", methods=["POST"])
@jwt_required()
@user_required
def publish_portfolio_route(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)

    result = publish_portfolio(portfolio=portfolio, actor_id=g.current_user.id)

    return jsonify({"message": "Portfolio published", **result}), 200


@v1_bp.route("/portfolios/<portfolio_id>/unpublish", methods=["POST"])
@jwt_required()
@user_required
def unpublish_portfolio_route(portfolio_id):
    portfolio = get_owned_portfolio(portfolio_gateway(), portfolio_id)

    result = unpublish_portfolio(portfolio=portfolio, actor_id=g.current_user.id)

    return jsonify({"message": "Portfolio unpublished successfully", **result}), 200


# ------------------------
# Media
# ------------------------

@v1_bp.route("/portfolios/<portfolio_id>/media/<kind>", methods=["POST"])
@jwt_required()
@user_required
def upload_media(portfolio_id, kind):
    gateway = portfolio_gateway()
    portfolio = get_owned_portfolio(gateway, portfolio_id)

    if kind not in MEDIA_KINDS:
        return jsonify({"error": f"Unknown media kind: {kind}"}), 400

    file = request.files.get("file")
    if not file:
        return jsonify({"error": "No file provided"}), 400

    try:
        url = save_file(file, kind=kind, folder=portfolio.id)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    _, field_name = MEDIA_KINDS[kind]
    if field_name is None:
        # Track audio, thumbnails and gallery files are attached by their own endpoints
        return jsonify({"url": url}), 201

    previous_url = getattr(portfolio, field_name)

    result = gateway.save_portfolio_config(
        portfolio.id,
        content_patch={field_name: url},
        actor_id=g.current_user.id,
    )
    if not result.ok:
        delete_file(url)
        raise_for_result(result)

    if previous_url and previous_url != url:
        delete_file(previous_url)

    current_app.logger.info(f"Stored {kind} for portfolio {portfolio.id} at {url}")

    return jsonify({"url": url, "field": field_name}), 201
