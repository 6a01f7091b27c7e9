"""
Common Module
==============

Shared utilities and configurations:
- Error handlers
- Exception hierarchy
- Logging configuration
"""

from .errors import handle_exception
from .exceptions import TaskManagerError, FieldValidationError
from .logging_config import setup_logging

__all__ = [
    'handle_exception',
    'TaskManagerError',
    'FieldValidationError',
    'setup_logging'
]
