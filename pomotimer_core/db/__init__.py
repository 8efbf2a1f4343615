"""
Database module for Pomotimer Core

Provides:
- SQLAlchemy models for all entities
- Session factory for database connections
- Base class for all models
"""

from .models import (
    Base,
    User,
    PomodoroSettings,
)

from .session import (
    get_engine,
    get_session,
    get_db,
    get_session_factory,
    init_db,
)

__all__ = [
    # Base
    "Base",
    # Models
    "User",
    "PomodoroSettings",
    # Session
    "get_engine",
    "get_session",
    "get_db",
    "get_session_factory",
    "init_db",
]
