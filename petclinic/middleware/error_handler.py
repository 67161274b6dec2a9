"""Error handling middleware with Sentry integration."""
import logging

import sentry_sdk
from flask import jsonify
from sentry_sdk.integrations.flask import FlaskIntegration

from petclinic.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


def init_error_handlers(app) -> None:
    """
    Initialize error handlers for the application.

    Args:
        app: Flask application instance
    """
    # Initialize Sentry if DSN is provided
    dsn = app.config.get("SENTRY_DSN")
    if dsn:
        sentry_sdk.init(
            dsn=dsn,
            integrations=[FlaskIntegration()],
            traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 0.1),
            environment=app.config.get("FLASK_ENV", "production"),
        )
        logger.info("Sentry error tracking initialized")

    @app.errorhandler(EntityNotFoundError)
    def entity_not_found(error):
        """Handle lookups of owners or pets that do not exist."""
        logger.info(f"Lookup failed: {error}")
        return jsonify({"status": "error", "message": str(error)}), 404

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({"status": "error", "message": "Resource not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return jsonify({"status": "error", "message": "Internal server error"}), 500

    @app.errorhandler(429)
    def rate_limit_error(error):
        """Handle rate limit errors."""
        return jsonify({
            "status": "error",
            "message": "Rate limit exceeded. Please try again later."
        }), 429
