from flask import Blueprint

from .route_table import RouteEntry, register_routes
from ..middleware import (
    login_validator,
    register_validator,
    user_auth,
    verify_email_validator
)


# resendEmailVerification, forgotPassword, verifyPasswordOtp and reset have no
# body validator attached
USER_AUTH_ROUTES = (
    RouteEntry("POST", "/users/signUp", "register", (register_validator,)),
    RouteEntry("POST", "/users/verifyEmail", "verify_email", (verify_email_validator,)),
    RouteEntry("POST", "/users/resendEmailVerification", "resend_email_verification"),
    RouteEntry("POST", "/users/login", "login", (login_validator,)),
    RouteEntry("POST", "/users/forgotPassword", "forgot_password"),
    RouteEntry("POST", "/users/verifyPasswordOtp", "verify_password_otp"),
    RouteEntry("POST", "/users/reset", "reset_password", (user_auth,)),
)


def register_user_auth_routes(router, controller):
    return register_routes(router, USER_AUTH_ROUTES, controller)


def init_app(controller):
    """Build the user auth blueprint around ``controller``."""
    user_auth_api = Blueprint("user_auth_api", __name__)
    return register_user_auth_routes(user_auth_api, controller)
