"""Monitoring and metrics middleware using Prometheus."""
import logging
import time
from functools import wraps
from typing import Callable

from flask import request
from prometheus_client import Counter, Histogram, make_wsgi_app
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from petclinic.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Prometheus metrics
pet_form_submissions_total = Counter(
    'petclinic_pet_form_submissions_total',
    'Total number of pet form submissions',
    ['form', 'outcome']
)

http_requests_total = Counter(
    'petclinic_http_requests_total',
    'Total number of pet form requests',
    ['method', 'endpoint', 'status']
)

http_request_duration = Histogram(
    'petclinic_http_request_duration_seconds',
    'Time spent handling pet form requests',
    ['endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)


def register_metrics_middleware(app) -> None:
    """
    Expose Prometheus metrics at /metrics.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS"):
        return

    app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
        '/metrics': make_wsgi_app()
    })

    logger.info("Prometheus metrics enabled at /metrics")


def _status_code(response) -> int:
    if isinstance(response, tuple):
        return response[1]
    return getattr(response, "status_code", 200)


def _exception_status_code(error: Exception) -> int:
    # Status the registered error handlers answer with
    if isinstance(error, EntityNotFoundError):
        return 404
    if isinstance(error, HTTPException) and error.code is not None:
        return error.code
    return 500


def track_request(endpoint: str):
    """
    Decorator to track request count and latency.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            status = 500

            try:
                response = f(*args, **kwargs)
                status = _status_code(response)
                return response
            except Exception as e:
                status = _exception_status_code(e)
                raise
            finally:
                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=status
                ).inc()
                http_request_duration.labels(endpoint=endpoint).observe(
                    time.time() - start_time
                )
        return wrapper
    return decorator


def track_form_submission(form: str, saved: bool) -> None:
    """
    Track the outcome of a pet form submission.

    Args:
        form: "create" or "edit"
        saved: Whether the pet was saved or the form redisplayed
    """
    outcome = "saved" if saved else "rejected"
    pet_form_submissions_total.labels(form=form, outcome=outcome).inc()
