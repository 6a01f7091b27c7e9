"""Validation helper functions for request data."""
import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberType
from validate_email_address import validate_email as validate_email_address


GMAIL_DOMAINS = {"gmail.com", "googlemail.com"}
OUTLOOK_DOMAINS = {
    "hotmail.at", "hotmail.be", "hotmail.ca", "hotmail.cl", "hotmail.co.il",
    "hotmail.co.nz", "hotmail.co.th", "hotmail.co.uk", "hotmail.com",
    "hotmail.com.ar", "hotmail.com.au", "hotmail.com.br", "hotmail.com.gr",
    "hotmail.com.mx", "hotmail.com.pe", "hotmail.com.tr", "hotmail.com.vn",
    "hotmail.cz", "hotmail.de", "hotmail.dk", "hotmail.es", "hotmail.fr",
    "hotmail.hu", "hotmail.id", "hotmail.ie", "hotmail.in", "hotmail.it",
    "hotmail.jp", "hotmail.kr", "hotmail.lv", "hotmail.my", "hotmail.ph",
    "hotmail.pt", "hotmail.sa", "hotmail.sg", "hotmail.sk", "live.be",
    "live.co.uk", "live.com", "live.com.ar", "live.com.mx", "live.de",
    "live.es", "live.eu", "live.fr", "live.it", "live.nl", "msn.com",
    "outlook.at", "outlook.be", "outlook.cl", "outlook.co.il",
    "outlook.co.nz", "outlook.co.th", "outlook.com", "outlook.com.ar",
    "outlook.com.au", "outlook.com.br", "outlook.com.gr", "outlook.com.pe",
    "outlook.com.tr", "outlook.com.vn", "outlook.cz", "outlook.de",
    "outlook.dk", "outlook.es", "outlook.fr", "outlook.hu", "outlook.id",
    "outlook.ie", "outlook.in", "outlook.it", "outlook.jp", "outlook.kr",
    "outlook.lv", "outlook.my", "outlook.ph", "outlook.pt", "outlook.sa",
    "outlook.sg", "outlook.sk", "passport.com",
}
YAHOO_DOMAINS = {
    "rocketmail.com", "yahoo.ca", "yahoo.co.uk", "yahoo.com", "yahoo.de",
    "yahoo.fr", "yahoo.in", "yahoo.it", "ymail.com",
}
ICLOUD_DOMAINS = {"icloud.com", "me.com", "mac.com"}

MOBILE_NUMBER_TYPES = {PhoneNumberType.MOBILE, PhoneNumberType.FIXED_LINE_OR_MOBILE}


def coerce_to_str(value):
    """
    Convert a JSON body value to the string the checks run against.

    Returns:
        str, or None if the value has no sensible string form
        (objects, arrays, booleans).
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def is_email(email):
    """
    Check email syntax.

    The address must match RFC 5322 addr-spec and its domain must contain a
    top-level part (``user@localhost`` is rejected). Surrounding whitespace
    is not part of an address.
    """
    if not email or email != email.strip() or not validate_email_address(email):
        return False
    domain = email.rsplit("@", 1)[1]
    return "." in domain and not domain.startswith(".") and not domain.endswith(".")


def canonicalize_email(email):
    """
    Normalize an email address to a comparable form.

    The whole address is lower-cased, then provider-specific aliases are
    folded:
    - Gmail: dots and ``+tag`` removed, googlemail.com becomes gmail.com
    - Outlook/Hotmail/Live and iCloud: ``+tag`` removed
    - Yahoo: ``-tag`` removed

    Example:
        >>> canonicalize_email("John.Doe+tasks@GoogleMail.com")
        'johndoe@gmail.com'
    """
    local, _, domain = email.lower().rpartition("@")
    if not local:
        return email.lower()

    if domain in GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in OUTLOOK_DOMAINS or domain in ICLOUD_DOMAINS:
        local = local.split("+", 1)[0]
    elif domain in YAHOO_DOMAINS:
        local = local.split("-", 1)[0]

    if not local:
        return email.lower()
    return f"{local}@{domain}"


def is_mobile_phone(value, regions=()):
    """
    Check whether ``value`` is a valid mobile phone number.

    Numbers written with a leading ``+`` are parsed as international numbers.
    Other numbers are tried against each region in ``regions`` (ISO 3166
    alpha-2 codes) and accepted if any region recognises them.
    """
    if not value:
        return False

    candidates = [None] if value.startswith("+") else list(regions)
    for region in candidates:
        try:
            number = phonenumbers.parse(value, region)
        except NumberParseException:
            continue
        if phonenumbers.is_valid_number(number) and phonenumbers.number_type(number) in MOBILE_NUMBER_TYPES:
            return True
    return False
