"""
Authentication Service

Business logic for registration, login and token issuance.
"""

import logging
from typing import Any, Callable, Dict, Tuple

from pomotimer_core.auth.jwt import TokenIssuer, TokenType
from pomotimer_core.auth.password import verify_password
from pomotimer_core.exceptions import AlreadyExistsError, NotFoundError, UnauthorizedError

from .user_service import UserService

log = logging.getLogger(__name__)


class AuthService:
    """
    Service for user authentication.

    Handles:
    - Registration of new accounts
    - Credential verification
    - Access/refresh token issuance and refresh
    """

    def __init__(
        self,
        users: UserService,
        tokens: TokenIssuer,
        verifier: Callable[[str, str], bool] = verify_password,
    ):
        self.users = users
        self.tokens = tokens
        self.verifier = verifier

    def register(self, dto) -> Dict[str, Any]:
        """
        Register a new user.

        Args:
            dto: Request with ``email`` and plain text ``password``

        Returns:
            Dict with ``user``, ``access_token`` and ``refresh_token``

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        existing = self.users.get_by_email(dto.email)
        if existing:
            log.warning(f"Registration failed: email already registered - {dto.email}")
            raise AlreadyExistsError("User already exists")

        user = self.users.create(dto)
        log.info(f"User {user.email} registered")
        return self._session_result(user)

    def login(self, dto) -> Dict[str, Any]:
        """
        Authenticate a user by email and password.

        Returns:
            Dict with ``user``, ``access_token`` and ``refresh_token``

        Raises:
            NotFoundError: If no user has this email
            UnauthorizedError: If the password does not match
        """
        user = self.users.get_by_email(dto.email)
        if not user:
            log.warning(f"Login failed: user not found - {dto.email}")
            raise NotFoundError("User not found")

        if not self.verifier(user.password, dto.password):
            log.warning(f"Login failed: invalid password - {dto.email}")
            raise UnauthorizedError("Invalid email or password")

        log.info(f"User {user.email} logged in successfully")
        return self._session_result(user)

    def get_new_tokens(self, refresh_token: str) -> Dict[str, Any]:
        """
        Exchange a refresh token for a new token pair.

        Raises:
            UnauthorizedError: If the token is invalid, expired or not a refresh token
            NotFoundError: If the token's user no longer exists
        """
        payload = self.tokens.verify(refresh_token)
        if not payload or payload.get('type') != TokenType.REFRESH.value or 'id' not in payload:
            raise UnauthorizedError("Invalid refresh token")

        user = self.users.get_by_id(payload['id'])
        if not user:
            raise NotFoundError("User not found")

        log.info(f"Tokens refreshed for user {user.email}")
        return self._session_result(user)

    def issue_tokens(self, user_id: str) -> Tuple[str, str]:
        """
        Create access and refresh tokens for a user.

        Returns:
            Tuple of (access_token, refresh_token)
        """
        access_token = self.tokens.create_access_token(user_id)
        refresh_token = self.tokens.create_refresh_token(user_id)
        return access_token, refresh_token

    def _session_result(self, user) -> Dict[str, Any]:
        access_token, refresh_token = self.issue_tokens(user.id)
        return {
            'user': user,
            'access_token': access_token,
            'refresh_token': refresh_token,
        }
