"""
Tests for PomodoroSettingsService.
"""

import pytest
from pytest_mock import MockerFixture
from sqlalchemy.exc import IntegrityError

from pomotimer_core.db import PomodoroSettings, User
from pomotimer_core.exceptions import AlreadyExistsError, NotFoundError

from app.schemas.pomodoro_settings import PomodoroSettingsUpdate
from app.services import PomodoroSettingsService


@pytest.fixture()
def service(db_session) -> PomodoroSettingsService:
    return PomodoroSettingsService(db_session)


class TestCreate:

    def test_create_default_settings(self, service, stored_user):
        """Test a new record always carries the fixed defaults."""
        result = service.create("user-123")

        assert result.id
        assert result.user_id == "user-123"
        assert result.work_interval == 50
        assert result.break_interval == 10
        assert result.intervals_count == 7

    def test_create_twice_for_same_user(self, service, stored_user):
        """Test the one-record-per-user constraint rejects a second insert."""
        service.create("user-123")

        with pytest.raises(AlreadyExistsError, match="Pomodoro settings already exist"):
            service.create("user-123")

        # Session is usable after the rollback
        assert service.get_by_user_id("user-123").work_interval == 50

    def test_create_for_unknown_user_propagates(self, fk_session):
        """Test a foreign key failure is not reported as a duplicate."""
        service = PomodoroSettingsService(fk_session)

        with pytest.raises(IntegrityError):
            service.create("no-such-user")

        assert service.get_by_user_id("no-such-user") is None

    def test_create_twice_with_foreign_keys_enforced(self, fk_session):
        fk_session.add(User(id="user-123", email="test@example.com", password="hashed_password"))
        fk_session.commit()
        service = PomodoroSettingsService(fk_session)
        service.create("user-123")

        with pytest.raises(AlreadyExistsError):
            service.create("user-123")


class TestGet:

    def test_get_settings_for_user(self, service, stored_user):
        created = service.create("user-123")

        result = service.get_by_user_id("user-123")

        assert result.id == created.id

    def test_return_none_if_settings_not_found(self, service):
        assert service.get_by_user_id("non-existent-user") is None

    def test_get_pomodoro_settings_by_user_id(self, service, stored_user):
        created = service.create("user-123")

        result = service.get_pomodoro_settings_by_user_id("user-123")

        assert result.id == created.id


class TestUpdate:

    def test_update_pomodoro_settings(self, service, stored_user):
        service.create("user-123")
        dto = PomodoroSettingsUpdate(work_interval=45, break_interval=15, intervals_count=8)

        result = service.update("user-123", dto)

        assert (result.work_interval, result.break_interval, result.intervals_count) == (45, 15, 8)

    def test_update_merges_only_supplied_fields(self, service, stored_user):
        service.create("user-123")

        result = service.update("user-123", PomodoroSettingsUpdate(break_interval=5))

        assert result.work_interval == 50
        assert result.break_interval == 5
        assert result.intervals_count == 7

    def test_update_persists(self, service, db_session, stored_user):
        service.create("user-123")
        service.update("user-123", PomodoroSettingsUpdate(intervals_count=4))
        db_session.expire_all()

        assert service.get_by_user_id("user-123").intervals_count == 4

    def test_empty_update_leaves_record_unchanged(self, service, stored_user):
        service.create("user-123")

        result = service.update("user-123", PomodoroSettingsUpdate())

        assert (result.work_interval, result.break_interval, result.intervals_count) == (50, 10, 7)

    def test_update_missing_settings(self, service):
        with pytest.raises(NotFoundError, match="Pomodoro settings not found"):
            service.update("non-existent-user", PomodoroSettingsUpdate(work_interval=25))

    def test_update_is_keyed_on_record_id(self, mocker: MockerFixture):
        """Test the UPDATE filters on the record's id rather than its user id."""
        session = mocker.MagicMock()
        service = PomodoroSettingsService(session)
        existing = PomodoroSettings(
            id="settings-456", user_id="user-123",
            work_interval=50, break_interval=10, intervals_count=7,
        )
        mocker.patch.object(service, "get_by_user_id", return_value=existing)
        dto = PomodoroSettingsUpdate(work_interval=45, break_interval=15, intervals_count=8)

        result = service.update("user-123", dto)

        query = session.query.return_value
        criterion = query.filter.call_args.args[0]
        assert criterion.left.key == "id"
        assert criterion.right.value == "settings-456"
        query.filter.return_value.update.assert_called_once_with(
            {"work_interval": 45, "break_interval": 15, "intervals_count": 8},
            synchronize_session="fetch",
        )
        session.commit.assert_called_once()
        assert result is existing
