# portfolio_builder/api/v1/public.py
from flask import abort, current_app, jsonify, request
from portfolio_builder.application.contact.submit_contact_message import submit_contact_message
from portfolio_builder.application.portfolios.render_portfolio import render_portfolio
from portfolio_builder.domain.sections.dispatch import RenderSurface
from .portfolios import portfolio_gateway
from . import v1_bp


def get_published_portfolio(gateway, username, slug):
    portfolio = gateway.load_published(username, slug)
    if portfolio is None:
        abort(404, description="Portfolio not found")
    return portfolio


@v1_bp.route("/public/<username>/<slug>", methods=["GET"])
def view_portfolio(username, slug):
    gateway = portfolio_gateway()
    portfolio = get_published_portfolio(gateway, username, slug)

    return jsonify(
        render_portfolio(
            gateway=gateway,
            portfolio=portfolio,
            surface=RenderSurface.PUBLIC,
            strict=current_app.config["SECTION_RENDER_STRICT"],
        )
    )


@v1_bp.route("/public/<username>/<slug>/contact", methods=["POST"])
def contact_portfolio_owner(username, slug):
    portfolio = get_published_portfolio(portfolio_gateway(), username, slug)
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    contact = submit_contact_message(
        portfolio=portfolio,
        relay=current_app.extensions["email_relay"],
        email=data.get("email"),
        message=data.get("message"),
    )

    return jsonify({
        "id": contact.id,
        "delivered": contact.delivered,
        "message": "Message received"
    }), 201
