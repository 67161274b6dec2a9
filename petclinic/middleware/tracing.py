"""Trace span labelling for pet form requests."""
import logging
from functools import wraps
from typing import Callable

import sentry_sdk
from flask import current_app

logger = logging.getLogger(__name__)


def label_current_span(app_name: str, tag_name: str) -> bool:
    """
    Add the application labels to the active trace span.

    Args:
        app_name: Value for the ``_tag_appName`` label
        tag_name: Value for the ``_tag_Name`` label

    Returns:
        True if a span was labelled, False if no span is active
    """
    span = sentry_sdk.get_current_span()
    if span is None:
        logger.debug("No active span to label")
        return False

    span.set_tag("_tag_appName", app_name)
    span.set_tag("_tag_Name", tag_name)
    span.set_tag("_plugin", "stacktrace")
    return True


def traced(f: Callable) -> Callable:
    """Decorator labelling the current span when tracing labels are enabled."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        config = current_app.config
        if config.get("TRACING_LABELS_ENABLED"):
            label_current_span(config.get("TAG_APP_NAME"), config.get("TAG_NAME"))
        return f(*args, **kwargs)
    return wrapper
