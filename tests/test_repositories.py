"""
Tests for the user, reservation and property repositories.
"""

from decimal import Decimal

import pytest

from db.errors import StorageError
from models.filters import FilterOptions
from models.property import Property
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from tests.conftest import PROPERTY_ROW, RecordingExecutor


class FailingExecutor(RecordingExecutor):
    def execute(self, sql, params=()):
        raise StorageError("connection refused")


class TestUserRepository:

    def test_get_by_email_is_case_insensitive(self):
        executor = RecordingExecutor(rows=[{"id": 1, "email": "ana@x.io"}])
        user = UserRepository(executor).get_by_email("ANA@x.io")

        sql, params = executor.calls[0]
        assert "LOWER(users.email) = LOWER($1)" in sql
        assert params == ["ANA@x.io"]
        assert user == {"id": 1, "email": "ana@x.io"}

    def test_get_by_id_missing(self, recording_executor):
        assert UserRepository(recording_executor).get_by_id(42) is None
        assert recording_executor.calls[0][1] == [42]

    def test_add_returns_inserted_row(self):
        executor = RecordingExecutor(rows=[{"id": 5, "name": "Ana", "email": "a@x.io", "password": "h"}])
        user = UserRepository(executor).add("Ana", "a@x.io", "h")

        sql, params = executor.calls[0]
        assert sql.strip().startswith("INSERT INTO users (name, email, password)")
        assert "RETURNING *" in sql
        assert params == ["Ana", "a@x.io", "h"]
        assert user["id"] == 5

    def test_storage_error_propagates(self):
        with pytest.raises(StorageError):
            UserRepository(FailingExecutor()).get_by_id(1)


class TestReservationRepository:

    def test_get_all_binds_guest_then_limit(self, recording_executor):
        ReservationRepository(recording_executor).get_all(9)
        sql, params = recording_executor.calls[0]
        assert params == [9, 10]
        assert "reservations.guest_id = $1" in sql
        assert "LIMIT $2" in sql

    def test_custom_limit(self, recording_executor):
        ReservationRepository(recording_executor).get_all(9, limit=3)
        assert recording_executor.calls[0][1] == [9, 3]


class TestPropertyRepository:

    def test_get_all_builds_filtered_query(self):
        executor = RecordingExecutor(rows=[{**PROPERTY_ROW, "average_rating": Decimal("4.2")}])
        options = FilterOptions(city="Van", min_price=100, min_rating=4)
        result = PropertyRepository(executor).get_all(options, limit=5)

        sql, params = executor.calls[0]
        assert params == ["%Van%", Decimal(10000), 4, 5]
        assert "WHERE properties.city LIKE $1" in sql
        assert result == [Property.from_row({**PROPERTY_ROW, "average_rating": Decimal("4.2")})]

    def test_get_all_without_options(self, recording_executor):
        assert PropertyRepository(recording_executor).get_all() == []
        sql, params = recording_executor.calls[0]
        assert "WHERE" not in sql
        assert params == [10]

    def test_get_all_propagates_storage_error(self):
        with pytest.raises(StorageError, match="connection refused"):
            PropertyRepository(FailingExecutor()).get_all(FilterOptions(owner_id=1))

    def test_add_binds_fourteen_columns_in_order(self):
        executor = RecordingExecutor(rows=[PROPERTY_ROW])
        new = Property.from_row({k: v for k, v in PROPERTY_ROW.items() if k != "id"})
        stored = PropertyRepository(executor).add(new)

        sql, params = executor.calls[0]
        assert "$14" in sql and "$15" not in sql
        assert params[0] == 3
        assert params[5] == 12500
        assert params[-1] == 3
        assert len(params) == 14
        assert stored.id == 7
