"""
Pomodoro settings routes
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from pomotimer_core.auth import get_current_user, TokenData

from app.dependencies import get_pomodoro_settings_service
from app.schemas.pomodoro_settings import PomodoroSettingsResponse, PomodoroSettingsUpdate
from app.services import PomodoroSettingsService

log = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=Optional[PomodoroSettingsResponse])
async def get_pomodoro_settings(
    current_user: TokenData = Depends(get_current_user),
    service: PomodoroSettingsService = Depends(get_pomodoro_settings_service),
):
    """
    Get the current user's Pomodoro settings, or null if none exist.
    """
    return service.get_pomodoro_settings_by_user_id(current_user.id)


@router.put("", response_model=PomodoroSettingsResponse)
async def update_pomodoro_settings(
    request: PomodoroSettingsUpdate,
    current_user: TokenData = Depends(get_current_user),
    service: PomodoroSettingsService = Depends(get_pomodoro_settings_service),
):
    """
    Update the current user's Pomodoro settings.
    """
    settings = service.update(current_user.id, request)
    log.info(f"Pomodoro settings updated by {current_user.id}")
    return settings
