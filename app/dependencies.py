"""
FastAPI dependency providers that wire services to their collaborators
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from pomotimer_core.auth import TokenIssuer, get_token_issuer, verify_password
from pomotimer_core.db import get_db

from app.services import AuthService, UserService, PomodoroSettingsService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_auth_service(
    users: UserService = Depends(get_user_service),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(users, tokens, verifier=verify_password)


def get_pomodoro_settings_service(db: Session = Depends(get_db)) -> PomodoroSettingsService:
    return PomodoroSettingsService(db)
