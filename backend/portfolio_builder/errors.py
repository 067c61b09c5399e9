from flask import jsonify
from werkzeug.exceptions import HTTPException
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.sections.dispatch import MissingRendererError
from portfolio_builder.gateways.errors import PersistenceError
from portfolio_builder.utils.media import MediaStorageError

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(error):
        app.logger.error(f"Persistence failure: {error}")
        response = jsonify({
            "error": "PersistenceError",
            "message": "The change could not be saved, please retry"
        })
        response.status_code = 503
        return response

    @app.errorhandler(MediaStorageError)
    def handle_media_storage_error(error):
        response = jsonify({
            "error": "MediaStorageError",
            "message": str(error)
        })
        response.status_code = 503
        return response

    @app.errorhandler(MissingRendererError)
    def handle_missing_renderer(error):
        app.logger.error(f"Render failed: {error}")
        response = jsonify({
            "error": "MissingRendererError",
            "message": str(error)
        })
        response.status_code = 500
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name,
            "message": error.description
        })
        response.status_code = error.code
        return response
