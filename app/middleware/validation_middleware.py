"""
Validation middleware for Flask request data validation.

A validator is a tuple of ``FieldRule``s. Each rule owns one body field and
one error message. ``validate_body`` turns a rule tuple into a view decorator
that rejects the request with a 400 when any rule fails.
"""
from dataclasses import dataclass
from functools import wraps
from typing import Iterable, List, Optional
import logging

from flask import current_app, request

from ..common.exceptions import FieldValidationError
from ..utils.response_helpers import build_error_response
from ..utils.validation_helpers import (
    canonicalize_email,
    coerce_to_str,
    is_email,
    is_mobile_phone
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """
    Declarative checks for a single body field.

    Checks run in this order: trim, not_empty, min_length/max_length,
    email, mobile_phone. The first failing check fails the rule; a rule adds
    at most one message to the outcome. When the rule passes, the trimmed or
    canonicalized value is written back into the body.
    """
    field: str
    message: str
    optional: bool = False
    trim: bool = False
    not_empty: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    email: bool = False
    mobile_phone: bool = False
    normalize_email: bool = False

    def applies_to(self, data: dict) -> bool:
        """Optional rules are skipped when the field is absent or null."""
        if not self.optional:
            return True
        # JSON null counts as absent: {"phone": null} is not checked
        return data.get(self.field) is not None

    def check(self, data: dict, phone_regions: Iterable[str] = ()):
        """
        Run the rule against ``data``.

        Returns:
            tuple: (passed, sanitized_value)
        """
        value = coerce_to_str(data.get(self.field))
        if value is None:
            return False, None

        if self.trim:
            value = value.strip()
        if self.not_empty and not value:
            return False, None
        if self.min_length is not None and len(value) < self.min_length:
            return False, None
        if self.max_length is not None and len(value) > self.max_length:
            return False, None
        if self.email and not is_email(value):
            return False, None
        if self.mobile_phone and not is_mobile_phone(value, phone_regions):
            return False, None

        if self.normalize_email:
            value = canonicalize_email(value)
        return True, value

    @property
    def sanitizes(self) -> bool:
        return self.trim or self.normalize_email


def _apply_rules(rules, data, phone_regions):
    failed = []
    sanitized = {}
    for rule in rules:
        if not rule.applies_to(data):
            continue
        passed, value = rule.check(data, phone_regions)
        if not passed:
            failed.append(rule)
        elif rule.sanitizes and rule.field in data:
            sanitized[rule.field] = value

    data.update(sanitized)
    return failed


def run_field_rules(rules, data, phone_regions=()) -> List[str]:
    """
    Evaluate every rule and return the validation outcome.

    All rules are evaluated before anything is reported. Messages keep the
    order in which rules are declared. Sanitized values of passing fields are
    written back into ``data``; failing fields are left untouched.
    """
    return [rule.message for rule in _apply_rules(rules, data, phone_regions)]


def validate_data(rules, data, phone_regions=()):
    """
    Validate ``data`` in place.

    Raises:
        FieldValidationError: if at least one rule fails
    """
    failed = _apply_rules(rules, data, phone_regions)
    if failed:
        raise FieldValidationError(
            [rule.message for rule in failed],
            details={"fields": [rule.field for rule in failed]}
        )
    return data


def validate_body(rules):
    """Decorator factory: validate the JSON body against ``rules`` before the view runs."""
    rules = tuple(rules)

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                data = {}

            phone_regions = current_app.config.get("PHONE_REGIONS", ())
            try:
                validate_data(rules, data, phone_regions)
            except FieldValidationError as e:
                logger.info(f"Validation failed on {request.method} {request.path}: {e.details.get('fields')}")
                return build_error_response(e.message, 400, e.code)

            return func(*args, **kwargs)
        return wrapper
    return decorator
