"""
Pomodoro settings schemas
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PomodoroSettingsUpdate(BaseModel):
    """Partial settings update; only supplied fields are applied"""
    work_interval: Optional[int] = Field(None, ge=1, description="Work interval in minutes")
    break_interval: Optional[int] = Field(None, ge=1, description="Break interval in minutes")
    intervals_count: Optional[int] = Field(None, ge=1, description="Work intervals before a long break")


class PomodoroSettingsResponse(BaseModel):
    """Pomodoro settings record"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    work_interval: int
    break_interval: int
    intervals_count: int
