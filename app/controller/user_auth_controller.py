"""
User authentication controller seam.

Same contract as ``TaskController``: every handler answers 501 until a
deployment supplies a subclass backed by its auth service.
"""
import logging

from ..utils.response_helpers import build_error_response


logger = logging.getLogger(__name__)


class UserAuthController:
    def _not_implemented(self, handler):
        logger.warning(f"UserAuthController.{handler} has no implementation")
        return build_error_response(f"'{handler}' is not available.", 501, "NOT_IMPLEMENTED")

    def register(self):
        return self._not_implemented("register")

    def verify_email(self):
        return self._not_implemented("verify_email")

    def resend_email_verification(self):
        return self._not_implemented("resend_email_verification")

    def login(self):
        return self._not_implemented("login")

    def forgot_password(self):
        return self._not_implemented("forgot_password")

    def verify_password_otp(self):
        return self._not_implemented("verify_password_otp")

    def reset_password(self, user_id):
        return self._not_implemented("reset_password")
