import pytest
from pytest_mock import MockerFixture
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from pomotimer_core.auth import TokenIssuer
from pomotimer_core.db import User, get_session, init_db

TEST_JWT_SECRET = "pomotimer-test-secret"


@pytest.fixture(autouse=True)
def fast_bcrypt(mocker: MockerFixture) -> None:
    """Use the minimum bcrypt cost so hashing does not dominate test time."""
    mocker.patch("pomotimer_core.auth.password.BCRYPT_ROUNDS", 4)


@pytest.fixture()
def engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def fk_session() -> Session:
    """Session on an engine that enforces foreign keys, as PostgreSQL does."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    init_db(engine)
    session = get_session(engine)
    yield session
    session.close()
    engine.dispose()


@pytest.fixture()
def db_session(engine) -> Session:
    session = get_session(engine)
    yield session
    session.close()


@pytest.fixture()
def token_issuer() -> TokenIssuer:
    return TokenIssuer(secret_key=TEST_JWT_SECRET)


@pytest.fixture()
def stored_user(db_session: Session) -> User:
    """A user row without Pomodoro settings."""
    user = User(id="user-123", email="test@example.com", password="hashed_password", name="Test User")
    db_session.add(user)
    db_session.commit()
    return user
