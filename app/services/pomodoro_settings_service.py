"""
Pomodoro Settings Service

Business logic for the per-user Pomodoro timer configuration.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pomotimer_core.db import PomodoroSettings
from pomotimer_core.exceptions import AlreadyExistsError, NotFoundError

log = logging.getLogger(__name__)


class PomodoroSettingsService:
    """
    Service for Pomodoro settings.

    Each user owns at most one settings record, created with fixed defaults
    and updated in place afterwards.
    """

    DEFAULT_SETTINGS = {
        'work_interval': 50,
        'break_interval': 10,
        'intervals_count': 7,
    }

    def __init__(self, session: Session):
        self.session = session

    def create(self, user_id: str) -> PomodoroSettings:
        """
        Create the default settings record for a user.

        Args:
            user_id: Owner of the record

        Returns:
            Created PomodoroSettings object

        Raises:
            AlreadyExistsError: If the user already has a settings record
            IntegrityError: Any other constraint failure, such as an unknown user
        """
        settings = PomodoroSettings(user_id=user_id, **self.DEFAULT_SETTINGS)
        self.session.add(settings)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if self.get_by_user_id(user_id) is None:
                raise
            log.warning(f"Pomodoro settings insert rejected for user {user_id}: {e.orig}")
            raise AlreadyExistsError("Pomodoro settings already exist")

        log.info(f"Created default pomodoro settings for user {user_id}")
        return settings

    def get_by_user_id(self, user_id: str) -> Optional[PomodoroSettings]:
        """Get the settings record for a user, or None if there is none."""
        return self.session.query(PomodoroSettings).filter(
            PomodoroSettings.user_id == user_id
        ).first()

    def get_pomodoro_settings_by_user_id(self, user_id: str) -> Optional[PomodoroSettings]:
        """Alias of get_by_user_id."""
        return self.get_by_user_id(user_id)

    def update(self, user_id: str, dto) -> PomodoroSettings:
        """
        Apply a partial update to a user's settings.

        Args:
            user_id: Owner of the record
            dto: PomodoroSettingsUpdate; only explicitly set fields are applied

        Returns:
            The updated PomodoroSettings object

        Raises:
            NotFoundError: If the user has no settings record
        """
        settings = self.get_by_user_id(user_id)
        if not settings:
            raise NotFoundError("Pomodoro settings not found")

        data = dto.model_dump(exclude_unset=True, exclude_none=True)
        if data:
            self.session.query(PomodoroSettings).filter(
                PomodoroSettings.id == settings.id
            ).update(data, synchronize_session='fetch')
            self.session.commit()
            self.session.refresh(settings)
            log.info(f"Pomodoro settings for user {user_id} updated: {data}")

        return settings
