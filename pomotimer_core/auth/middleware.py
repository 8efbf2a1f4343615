"""
FastAPI Authentication Dependencies for Pomotimer

Provides dependency injection functions for protecting routes.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .jwt import get_token_issuer, is_token_expired, TokenData, TokenIssuer, TokenType

log = logging.getLogger(__name__)

# HTTP Bearer token scheme
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> TokenData:
    """
    Get the current authenticated user from the JWT token.

    Usage:
        @app.get("/protected")
        async def protected_route(user: TokenData = Depends(get_current_user)):
            return {"user_id": user.id}

    Args:
        credentials: The HTTP Authorization credentials from the request
        issuer: Token issuer used to verify the token

    Returns:
        TokenData containing the user id

    Raises:
        HTTPException: 401 if no valid access token is provided
    """
    if credentials is None:
        log.warning("No authorization credentials provided")
        raise _unauthorized("Not authenticated")

    token_data = issuer.decode_token(credentials.credentials)

    if token_data is None:
        log.warning("Invalid token provided")
        raise _unauthorized("Invalid authentication token")

    if is_token_expired(token_data):
        log.warning(f"Expired token for user: {token_data.id}")
        raise _unauthorized("Token has expired")

    if token_data.type != TokenType.ACCESS:
        log.warning(f"Non-access token used for authentication: {token_data.type}")
        raise _unauthorized("Invalid token type")

    return token_data
