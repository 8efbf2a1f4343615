"""
User Service

Data access for user accounts. Owns password hashing before storage.
"""

import logging
from typing import Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pomotimer_core.db import User
from pomotimer_core.auth.password import hash_password
from pomotimer_core.exceptions import AlreadyExistsError, NotFoundError

log = logging.getLogger(__name__)


class UserService:
    """
    Service for user accounts.

    Handles:
    - User lookup by email or id
    - User creation (the plain password is hashed here)
    - Profile assembly
    """

    def __init__(self, session: Session):
        self.session = session

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-sensitive, as stored)."""
        return self.session.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by id."""
        return self.session.query(User).filter(User.id == user_id).first()

    def create(self, dto) -> User:
        """
        Create a new user.

        Args:
            dto: Request with ``email``, plain text ``password`` and an
                optional ``name``

        Returns:
            Created User object

        Raises:
            AlreadyExistsError: If the email was taken by a concurrent insert
        """
        user = User(
            email=dto.email,
            password=hash_password(dto.password),
            name=getattr(dto, 'name', None),
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if self.get_by_email(dto.email) is None:
                raise
            log.warning(f"User insert rejected for {dto.email}: {e.orig}")
            raise AlreadyExistsError("User already exists")
        log.info(f"Created user: {user.email}")
        return user

    def get_profile(self, user_id: str) -> Dict:
        """
        Get a user together with their Pomodoro settings.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = self.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        return {
            'user': user,
            'pomodoro_settings': user.pomodoro_settings,
        }
