"""
Authentication module for Pomotimer Core

Provides:
- JWT token issuing and validation
- FastAPI authentication dependency
- Password hashing utilities
"""

from .jwt import (
    TokenIssuer,
    TokenData,
    TokenType,
    get_token_issuer,
)

from .middleware import (
    get_current_user,
)

from .password import (
    hash_password,
    verify_password,
)

__all__ = [
    # JWT
    "TokenIssuer",
    "TokenData",
    "TokenType",
    "get_token_issuer",
    # Middleware
    "get_current_user",
    # Password
    "hash_password",
    "verify_password",
]
