"""
Utilities Package
=================

Modules:
- response_helpers: Response envelope builders
- validation_helpers: Email, phone and value coercion helpers
"""
