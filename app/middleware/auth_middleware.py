"""
Authentication middleware for JWT token validation.
"""
from functools import wraps
from inspect import signature
import logging
import jwt

from flask import current_app, g, request

from ..utils.response_helpers import build_error_response


logger = logging.getLogger(__name__)


def _build_token_error_response():
    """Helper to build standardized token error response."""
    return build_error_response("Invalid token.", 401, "00012")


def _build_no_token_response():
    """Helper to build standardized no token provided response."""
    return build_error_response("Access denied. No token provided.", 401, "00006")


def user_auth(f):
    """Decorator to require a Bearer JSON Web Token carrying a ``user_id`` claim."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            logger.warning(f"No token on {request.method} {request.path}")
            return _build_no_token_response()

        auth_header_parts = auth_header.split(" ")
        if len(auth_header_parts) != 2 or not auth_header_parts[1]:
            return _build_no_token_response()

        token = auth_header_parts[1]
        try:
            payload = jwt.decode(
                token,
                current_app.config["SECRET_KEY"],
                algorithms=[current_app.config.get("JWT_ALGORITHM", "HS256")]
            )
        except jwt.ExpiredSignatureError:
            logger.warning(f"Expired token on {request.method} {request.path}")
            return _build_token_error_response()
        except jwt.InvalidTokenError:
            logger.warning(f"Invalid token on {request.method} {request.path}")
            return _build_token_error_response()

        user_id = payload.get("user_id")
        if not user_id:
            return _build_token_error_response()

        g.user_id = user_id

        func_signature = signature(f)
        if "user_id" in func_signature.parameters:
            kwargs["user_id"] = user_id

        return f(*args, **kwargs)

    return decorated_function
