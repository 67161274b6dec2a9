"""Flask application factory for the pet clinic pet forms."""
import logging
import sys

from flask import Flask
from flask_wtf import CSRFProtect

from petclinic.config.settings import get_config
from petclinic.infrastructure.service_container import ServiceContainer
from petclinic.middleware.error_handler import init_error_handlers
from petclinic.middleware.monitoring import register_metrics_middleware
from petclinic.middleware.rate_limiter import create_rate_limiter
from petclinic.views import health_blueprint, pets_blueprint

csrf = CSRFProtect()


def create_app(config_class=None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured Flask application
    """
    config = config_class or get_config()

    # Configure logging FIRST (needed for all subsequent operations)
    _configure_logging(config.DEBUG)
    _logger = logging.getLogger(__name__)

    try:
        config.validate()
    except ValueError as e:
        _logger.critical(f"Invalid configuration: {e}")
        raise

    app = Flask(__name__)
    app.config.from_object(config)

    csrf.init_app(app)
    app.register_blueprint(pets_blueprint)
    app.register_blueprint(health_blueprint)

    _initialize_middleware(app)

    # Repositories are created and seeded eagerly so the first request is fast
    container = ServiceContainer(config)
    container.get_pet_form_handler()
    app.config['service_container'] = container

    _logger.info(f"App routes registered: {[str(rule) for rule in app.url_map.iter_rules()]}")
    return app


def _configure_logging(debug: bool) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (rate limiting, monitoring, error handling).

    Args:
        app: Flask application instance
    """
    app.extensions['petclinic_limiter'] = create_rate_limiter(app)
    register_metrics_middleware(app)
    init_error_handlers(app)
