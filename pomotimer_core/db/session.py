"""
Database Session Management for Pomotimer

Provides session factory and database initialization functions.
"""

import logging
from typing import Optional, Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine

from ..config import get_database_settings
from .models import Base

log = logging.getLogger(__name__)

# Module-level engine cache
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """
    Get or create the database engine from DATABASE_URL.

    Returns:
        SQLAlchemy Engine instance
    """
    global _engine

    if _engine is None:
        db_settings = get_database_settings()
        _engine = create_engine(
            db_settings.DATABASE_URL,
            echo=db_settings.DB_ECHO,
            pool_pre_ping=True,
        )
        log.info(f"Created database engine for: {db_settings.DATABASE_URL.split('@')[-1]}")

    return _engine


def get_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    """
    Get or create the session factory.

    Args:
        engine: Optional SQLAlchemy engine. If not provided, uses default engine.

    Returns:
        SQLAlchemy sessionmaker instance
    """
    global _session_factory

    if engine:
        # Create a new session factory for a specific engine
        return sessionmaker(bind=engine, autocommit=False, autoflush=False)

    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            autocommit=False,
            autoflush=False
        )

    return _session_factory


def get_session(engine: Optional[Engine] = None) -> Session:
    """
    Create a new database session.

    Args:
        engine: Optional SQLAlchemy engine. If not provided, uses default engine.

    Returns:
        SQLAlchemy Session instance

    Note:
        The caller is responsible for closing the session.
    """
    factory = get_session_factory(engine)
    return factory()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session.

    Yields a session and ensures it's closed after the request.

    Usage:
        @router.get("/items")
        async def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    session = get_session()
    try:
        yield session
    finally:
        session.close()


def init_db(engine: Optional[Engine] = None) -> Engine:
    """
    Initialize the database by creating all tables.

    Args:
        engine: Optional SQLAlchemy engine. If not provided, uses default engine.

    Returns:
        The SQLAlchemy Engine used for initialization
    """
    if engine is None:
        engine = get_engine()

    Base.metadata.create_all(engine)
    log.info("Database tables created successfully")

    return engine