"""
Response helper functions.

Builder for the standard API error envelope:

    {"resultMessage": "<message>", "resultCode": "<code>"}
"""
from flask import jsonify


def build_error_response(message, status_code=400, result_code=None):
    """
    Build standardized error response.

    Args:
        message: Error message, already joined into one string
        status_code: HTTP status code (default 400)
        result_code: Application result code (defaults to the status code)

    Returns:
        tuple: (json_response, status_code)

    Example:
        return build_error_response(
            "Invalid email address, Password must be at least 8 characters",
            400,
            "VAL001"
        )
    """
    return jsonify({
        "resultMessage": message,
        "resultCode": result_code or str(status_code)
    }), status_code

