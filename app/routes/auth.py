"""
Authentication routes
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response

from pomotimer_core.auth import get_current_user, get_token_issuer, TokenData, TokenIssuer
from pomotimer_core.exceptions import UnauthorizedError
from pomotimer_core.utils import success_response

from app.config import get_settings
from app.dependencies import get_auth_service, get_pomodoro_settings_service, get_user_service
from app.schemas.auth import AuthRequest, AuthResponse, RefreshRequest, RegisterRequest
from app.schemas.users import ProfileResponse, UserResponse
from app.schemas.pomodoro_settings import PomodoroSettingsResponse
from app.services import AuthService, UserService, PomodoroSettingsService

log = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


def _set_refresh_cookie(response: Response, refresh_token: str, tokens: TokenIssuer) -> None:
    response.set_cookie(
        key=settings.REFRESH_TOKEN_COOKIE_NAME,
        value=refresh_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
        max_age=int(tokens.refresh_token_expires.total_seconds()),
    )


def _auth_response(result: Dict[str, Any], tokens: TokenIssuer) -> AuthResponse:
    return AuthResponse(
        access_token=result['access_token'],
        refresh_token=result['refresh_token'],
        expires_in=tokens.access_token_expires_in,
        user=UserResponse.model_validate(result['user']),
    )


@router.post("/register", response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    pomodoro: PomodoroSettingsService = Depends(get_pomodoro_settings_service),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """
    Create an account with default Pomodoro settings and return JWT tokens.
    """
    result = auth.register(request)
    pomodoro.create(result['user'].id)

    _set_refresh_cookie(response, result['refresh_token'], tokens)
    return _auth_response(result, tokens)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: AuthRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """
    Authenticate user and return JWT tokens.
    """
    result = auth.login(request)

    _set_refresh_cookie(response, result['refresh_token'], tokens)
    return _auth_response(result, tokens)


@router.post("/login/access-token", response_model=AuthResponse)
async def get_new_tokens(
    request: Request,
    response: Response,
    body: Optional[RefreshRequest] = None,
    auth: AuthService = Depends(get_auth_service),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """
    Exchange a refresh token (body or cookie) for a new token pair.
    """
    token = (body.refresh_token if body else None) or request.cookies.get(settings.REFRESH_TOKEN_COOKIE_NAME)
    if not token:
        log.warning("Token refresh attempted without a refresh token")
        raise UnauthorizedError("Refresh token not passed")

    result = auth.get_new_tokens(token)

    _set_refresh_cookie(response, result['refresh_token'], tokens)
    return _auth_response(result, tokens)


@router.get("/me", response_model=ProfileResponse)
async def get_current_user_info(
    current_user: TokenData = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    """
    Get current authenticated user profile.
    """
    profile = users.get_profile(current_user.id)
    pomodoro_settings = profile['pomodoro_settings']

    return ProfileResponse(
        user=UserResponse.model_validate(profile['user']),
        pomodoro_settings=(
            PomodoroSettingsResponse.model_validate(pomodoro_settings)
            if pomodoro_settings else None
        ),
    )


@router.post("/logout")
async def logout(response: Response):
    """
    Logout current user by clearing the refresh token cookie.

    Note: JWT tokens are stateless, issued access tokens stay valid until expiry.
    """
    response.delete_cookie(settings.REFRESH_TOKEN_COOKIE_NAME, path="/")
    return success_response(message="Logged out successfully")
