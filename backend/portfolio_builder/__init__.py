from flask import Flask, send_file, send_from_directory, current_app, abort
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .middleware.request_logging import request_logging
from .errors import register_error_handlers
from .domain.sections.dispatch import MissingRendererError, check_renderers
from .normalizers.sections import SECTION_RENDERERS
from .services.email_relay import EmailRelay
from .utils.media import media_path
from flask_swagger_ui import get_swaggerui_blueprint
import logging
import os


def configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)

    # Module loggers under portfolio_builder.* propagate to the app logger
    app.logger.setLevel(level)
    logging.getLogger("portfolio_builder").setLevel(level)


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    from . import models  # noqa: F401  registers every table on db.metadata

    app.extensions["email_relay"] = EmailRelay.from_config(app.config)

    # -------------------------------------------------
    # Section renderers must cover the whole registry
    # -------------------------------------------------
    missing = check_renderers(SECTION_RENDERERS)
    if missing:
        if app.config["SECTION_RENDER_STRICT"]:
            raise MissingRendererError(f"No renderer for sections: {', '.join(missing)}")
        app.logger.error(f"No renderer for sections: {', '.join(missing)}")

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    request_logging(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Stored media (PUBLIC)
    # -------------------------------------------------
    @app.route("/media/<path:filename>", methods=["GET"], endpoint="media")
    def serve_media(filename):
        file_path = media_path(f"/media/{filename}")
        if not file_path or not os.path.isfile(file_path):
            abort(404)

        return send_from_directory(os.path.dirname(file_path), os.path.basename(file_path))

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/portfolio.yaml", methods=["GET"], endpoint="openapi_portfolio")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "portfolio_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            abort(404)

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/portfolio.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Portfolio Builder API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
