from flask import jsonify, request
from flask_jwt_extended import jwt_required
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.normalizers.pagination import normalize_pagination
from portfolio_builder.normalizers.portfolio import normalize_portfolio_summary
from portfolio_builder.utils.decorators import roles_required
from portfolio_builder.utils.pagination import page_args
from . import v1_bp


def _admin_summary(portfolio):
    data = normalize_portfolio_summary(portfolio)
    data["owner"] = portfolio.owner.username if portfolio.owner else None
    return data


@v1_bp.route("/admin/portfolios", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_list_portfolios():
    page, per_page = page_args(default_per_page=20)

    query = Portfolio.query
    if status := request.args.get("status"):
        query = query.filter_by(status=status)

    pagination = query.order_by(Portfolio.created_at.desc()).paginate(
        page=page, per_page=per_page, error_out=False
    )

    return jsonify(
        normalize_pagination(
            pagination.items,
            _admin_summary,
            page=page,
            per_page=per_page,
            total=pagination.total,
        )
    )
