"""
Request body validators for the user flows.

Each ``*_RULES`` tuple is the rule table for one request shape; the matching
``*_validator`` is the view decorator attached in the route tables.
"""
from .validation_middleware import FieldRule, validate_body


FULLNAME_MESSAGE = "FullName is required and must be at least 4 characters"
USERNAME_MESSAGE = "UserName is required and must be at least 3 characters"
EMAIL_MESSAGE = "Invalid email address"
PASSWORD_MESSAGE = "Password must be at least 8 characters"
PHONE_MESSAGE = "PhoneNumber must be in a valid format"
LOCATION_MESSAGE = "Location is required"
LOGIN_USERNAME_MESSAGE = "username is required"
PROFILE_PIC_MESSAGE = "ProfilePic is required"
OTP_MESSAGE = "otp is required and must be exactly 6 characters"

PASSWORD_MIN_LENGTH = 8
OTP_LENGTH = 6


def _email(optional=False):
    return FieldRule("email", EMAIL_MESSAGE, optional=optional, email=True, normalize_email=True)


def _password(field):
    return FieldRule(field, PASSWORD_MESSAGE, trim=True, min_length=PASSWORD_MIN_LENGTH)


def _phone(field):
    return FieldRule(field, PHONE_MESSAGE, optional=True, mobile_phone=True)


def _present(field, message):
    return FieldRule(field, message, optional=True, trim=True, not_empty=True)


REGISTER_RULES = (
    FieldRule("fullname", FULLNAME_MESSAGE, trim=True, not_empty=True, min_length=4),
    FieldRule("username", USERNAME_MESSAGE, trim=True, not_empty=True, min_length=3),
    _email(),
    _password("password_hash"),
    _phone("phone"),
    _phone("phone2"),
    _present("location", LOCATION_MESSAGE),
)

LOGIN_RULES = (
    _email(optional=True),
    _present("username", LOGIN_USERNAME_MESSAGE),
    _password("password_hash"),
)

UPDATE_RULES = (
    FieldRule("fullName", FULLNAME_MESSAGE, optional=True, trim=True, not_empty=True, min_length=4),
    _phone("phone"),
    _phone("phone2"),
    _present("location", LOCATION_MESSAGE),
    # TODO: settle how profile_pic is sent (URL or upload) and validate the format
    _present("profile_pic", PROFILE_PIC_MESSAGE),
)

# new_password and confirm_password are not compared with each other
CHANGE_PASSWORD_RULES = (
    _password("password_hash"),
    _password("new_password"),
    _password("confirm_password"),
)

VERIFY_EMAIL_RULES = (
    FieldRule("otp", OTP_MESSAGE, trim=True, not_empty=True, min_length=OTP_LENGTH, max_length=OTP_LENGTH),
)

RESEND_OTP_RULES = (
    _email(),
)

FORGOT_PASSWORD_RULES = (
    _email(),
)

RESET_PASSWORD_RULES = (
    _password("new_password"),
    _password("confirm_password"),
)


register_validator = validate_body(REGISTER_RULES)
login_validator = validate_body(LOGIN_RULES)
update_validator = validate_body(UPDATE_RULES)
change_password_validator = validate_body(CHANGE_PASSWORD_RULES)
verify_email_validator = validate_body(VERIFY_EMAIL_RULES)
resend_otp_validator = validate_body(RESEND_OTP_RULES)
forgot_password_validator = validate_body(FORGOT_PASSWORD_RULES)
reset_password_validator = validate_body(RESET_PASSWORD_RULES)
