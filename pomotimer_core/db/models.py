"""
SQLAlchemy Models for Pomotimer

Defines the database models shared by the Pomotimer service.
"""

import uuid

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
)
from sqlalchemy.orm import declarative_base, relationship

from ..utils.datetime import utc_now

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """User accounts"""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    pomodoro_settings = relationship(
        "PomodoroSettings",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )


class PomodoroSettings(Base):
    """Per-user Pomodoro timer configuration (one row per user)"""
    __tablename__ = 'user_pomodoro_settings'

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(
        String(36),
        ForeignKey('users.id', ondelete='CASCADE'),
        unique=True,
        nullable=False,
    )
    work_interval = Column(Integer, nullable=False, default=50)  # minutes
    break_interval = Column(Integer, nullable=False, default=10)  # minutes
    intervals_count = Column(Integer, nullable=False, default=7)  # cycles before long break
    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    user = relationship("User", back_populates="pomodoro_settings")
