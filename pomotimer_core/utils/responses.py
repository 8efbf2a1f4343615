"""
Standardized API Response Utilities for Pomotimer

Provides consistent response formatting across the API.
"""

from typing import Any, Dict, Optional


def success_response(
    data: Any = None,
    message: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Dict with success response structure
    """
    response = {
        "success": True,
        "data": data,
    }
    if message:
        response["message"] = message
    return response


def error_response(
    error: str,
    data: Any = None
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        error: Error message
        data: Optional additional error data

    Returns:
        Dict with error response structure
    """
    response = {
        "success": False,
        "error": error,
    }
    if data is not None:
        response["data"] = data
    return response
