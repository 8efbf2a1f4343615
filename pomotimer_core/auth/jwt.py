"""
JWT Token Utilities for Pomotimer

Provides the TokenIssuer used to sign and verify access and refresh tokens.
"""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import BaseModel
from jose import jwt, JWTError

from ..config import get_jwt_settings

log = logging.getLogger(__name__)


class TokenType(str, Enum):
    """Token type enumeration"""
    ACCESS = "access"
    REFRESH = "refresh"


class TokenData(BaseModel):
    """Data contained in a JWT token"""
    id: str  # User id
    exp: datetime  # Expiration time
    iat: datetime  # Issued at time
    type: TokenType  # Token type (access or refresh)


class TokenIssuer:
    """
    Signs and verifies JWT tokens.

    Every token carries the caller's payload plus ``exp``, ``iat`` and
    ``type`` claims. User tokens put the user id under ``id``.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 30,
        refresh_token_expire_days: int = 7,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expires = timedelta(minutes=access_token_expire_minutes)
        self.refresh_token_expires = timedelta(days=refresh_token_expire_days)

    def sign(
        self,
        payload: Dict[str, Any],
        expires_delta: timedelta,
        token_type: TokenType = TokenType.ACCESS,
    ) -> str:
        """
        Sign a payload.

        Args:
            payload: Claims to embed in the token
            expires_delta: Lifetime of the token
            token_type: Whether this is an access or refresh token

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        claims = dict(payload)
        claims.update({
            "exp": now + expires_delta,
            "iat": now,
            "type": token_type.value,
        })
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Verify a token signature and expiry.

        Args:
            token: The JWT token string

        Returns:
            The decoded payload, or None if the token is invalid or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            log.warning(f"JWT decode error: {e}")
            return None

    def create_access_token(self, user_id: str) -> str:
        """Create an access token for a user."""
        token = self.sign({"id": user_id}, self.access_token_expires, TokenType.ACCESS)
        log.debug(f"Created access token for user: {user_id}")
        return token

    def create_refresh_token(self, user_id: str) -> str:
        """Create a refresh token for a user."""
        token = self.sign({"id": user_id}, self.refresh_token_expires, TokenType.REFRESH)
        log.debug(f"Created refresh token for user: {user_id}")
        return token

    def decode_token(self, token: str) -> Optional[TokenData]:
        """
        Decode and validate a JWT token into TokenData.

        Args:
            token: The JWT token string to decode

        Returns:
            TokenData if valid, None if invalid, expired or missing claims
        """
        payload = self.verify(token)
        if payload is None:
            return None

        try:
            return TokenData(
                id=payload["id"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                type=TokenType(payload["type"]),
            )
        except (KeyError, ValueError) as e:
            log.warning(f"Token is missing required claims: {e}")
            return None

    @property
    def access_token_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return int(self.access_token_expires.total_seconds())


def is_token_expired(token_data: TokenData) -> bool:
    """
    Check if a token is expired.

    Args:
        token_data: The decoded token data

    Returns:
        True if expired, False otherwise
    """
    return datetime.now(timezone.utc) > token_data.exp


@lru_cache()
def get_token_issuer() -> TokenIssuer:
    """Get the token issuer configured from the environment (cached)."""
    settings = get_jwt_settings()
    return TokenIssuer(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        refresh_token_expire_days=settings.REFRESH_TOKEN_EXPIRE_DAYS,
    )
