"""
Utilities module for Pomotimer Core

Provides:
- DateTime utilities
- Standardized API responses
"""

from .datetime import utc_now

from .responses import (
    success_response,
    error_response,
)

__all__ = [
    # DateTime
    "utc_now",
    # Responses
    "success_response",
    "error_response",
]
