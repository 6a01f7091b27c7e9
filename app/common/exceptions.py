"""
Custom Exception Hierarchy for the Task Manager API
===================================================

Usage:
    from app.common.exceptions import FieldValidationError

    try:
        validate_data(REGISTER_RULES, data)
    except FieldValidationError as e:
        return build_error_response(e.message, 400, e.code)
"""
from typing import List


class TaskManagerError(Exception):
    """
    Base exception for all Task Manager API errors.

    Attributes:
        message: Human-readable error message
        code: Error code for API responses
        details: Additional error details
    """

    def __init__(self, message: str, code: str = "TM000", details: dict = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API response."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details
        }


class FieldValidationError(TaskManagerError):
    """One or more request body fields failed validation."""

    SEPARATOR = ", "

    def __init__(self, messages: List[str], details: dict = None):
        self.messages = list(messages)
        super().__init__(self.SEPARATOR.join(self.messages), code="VAL001", details=details)
