"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def create_rate_limiter(app) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Args:
        app: Flask application instance

    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED"):
        # No-op limiter if rate limiting is disabled
        return Limiter(
            app=app,
            key_func=get_remote_address,
            default_limits=[],
            storage_uri="memory://",
            enabled=False
        )

    storage_uri = app.config.get("RATELIMIT_STORAGE_URL", "memory://")
    try:
        return Limiter(
            app=app,
            key_func=get_remote_address,
            default_limits=[app.config.get("RATELIMIT_DEFAULT", "200 per minute")],
            storage_uri=storage_uri,
            strategy="fixed-window",
            headers_enabled=True
        )
    except Exception as e:
        logging.warning(f"Failed to initialize rate limiter with {storage_uri}: {e}, using memory storage")
        return Limiter(
            app=app,
            key_func=get_remote_address,
            default_limits=[app.config.get("RATELIMIT_DEFAULT", "200 per minute")],
            storage_uri="memory://"
        )
