"""
User schemas
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from .pomodoro_settings import PomodoroSettingsResponse


class UserResponse(BaseModel):
    """User response (without the password hash)"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileResponse(BaseModel):
    """Current user profile"""
    user: UserResponse
    pomodoro_settings: Optional[PomodoroSettingsResponse] = None
