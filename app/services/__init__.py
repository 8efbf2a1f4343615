"""
Pomotimer business logic layer
"""

from .auth_service import AuthService
from .user_service import UserService
from .pomodoro_settings_service import PomodoroSettingsService

__all__ = ["AuthService", "UserService", "PomodoroSettingsService"]
