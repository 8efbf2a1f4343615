"""
Pydantic schemas for the Pomotimer API
"""

from .auth import (
    AuthRequest,
    RegisterRequest,
    RefreshRequest,
    AuthResponse,
)

from .users import (
    UserResponse,
    ProfileResponse,
)

from .pomodoro_settings import (
    PomodoroSettingsUpdate,
    PomodoroSettingsResponse,
)

__all__ = [
    # Auth
    "AuthRequest",
    "RegisterRequest",
    "RefreshRequest",
    "AuthResponse",
    # Users
    "UserResponse",
    "ProfileResponse",
    # Pomodoro settings
    "PomodoroSettingsUpdate",
    "PomodoroSettingsResponse",
]
