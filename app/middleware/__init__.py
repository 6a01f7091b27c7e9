"""
Middleware package for Flask request/response interceptors.
"""

from .auth_middleware import user_auth
from .validation_middleware import (
    FieldRule,
    validate_data,
    validate_body
)
from .user_validation import (
    register_validator,
    login_validator,
    update_validator,
    change_password_validator,
    verify_email_validator,
    resend_otp_validator,
    forgot_password_validator,
    reset_password_validator
)

__all__ = [
    'user_auth',
    'FieldRule',
    'validate_data',
    'validate_body',
    'register_validator',
    'login_validator',
    'update_validator',
    'change_password_validator',
    'verify_email_validator',
    'resend_otp_validator',
    'forgot_password_validator',
    'reset_password_validator'
]
