"""
Global error handler.

Registered on the app for ``Exception`` so that every unhandled error is
answered with the standard JSON envelope.
"""
import logging

from werkzeug.exceptions import HTTPException

from .exceptions import TaskManagerError
from ..utils.response_helpers import build_error_response


logger = logging.getLogger(__name__)


def handle_exception(e):
    """Convert any exception raised by a view into a JSON error response."""
    if isinstance(e, HTTPException):
        return build_error_response(e.description, e.code, e.name.upper().replace(" ", "_"))

    if isinstance(e, TaskManagerError):
        logger.warning(f"{e.__class__.__name__}: {e.message}")
        return build_error_response(e.message, 400, e.code)

    logger.exception(f"Unhandled error: {str(e)}")
    return build_error_response("An unexpected error occurred.", 500, "INTERNAL_ERROR")
