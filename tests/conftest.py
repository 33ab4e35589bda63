import pytest


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.description = None
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=None):
        self.conn.statements.append((query, params))
        if self.conn.error is not None:
            raise self.conn.error
        self._rows = list(self.conn.rows)
        self.description = [("col",)] if self.conn.rows else None

    def fetchall(self):
        return self._rows


class FakeConnection:
    def __init__(self, rows=None, error=None, rollback_error=None, closed=0):
        self.rows = rows or []
        self.error = error
        self.rollback_error = rollback_error
        self.closed = closed
        self.statements = []
        self.cursor_factories = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        if self.rollback_error is not None:
            raise self.rollback_error
        self.rollbacks += 1


class FakePool:
    def __init__(self, conn=None, getconn_error=None):
        self.conn = conn or FakeConnection()
        self.getconn_error = getconn_error
        self.borrowed = 0
        self.returned = 0
        self.discarded = 0
        self.closed = False

    def getconn(self):
        if self.getconn_error is not None:
            raise self.getconn_error
        self.borrowed += 1
        return self.conn

    def putconn(self, conn, close=False):
        self.returned += 1
        if close:
            self.discarded += 1

    def closeall(self):
        self.closed = True


class RecordingExecutor:
    """Stands in for StatementExecutor; returns canned rows."""

    def __init__(self, rows=None):
        self.rows = rows or []
        self.calls = []

    def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))
        return list(self.rows)

    def fetch_one(self, sql, params=()):
        rows = self.execute(sql, params)
        return rows[0] if rows else None

    def execute_script(self, sql):
        self.calls.append((sql, []))


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture
def recording_executor():
    return RecordingExecutor()


PROPERTY_ROW = {
    "id": 7,
    "owner_id": 3,
    "title": "Lake cabin",
    "description": "Quiet",
    "thumbnail_photo_url": "https://img/thumb.jpg",
    "cover_photo_url": "https://img/cover.jpg",
    "cost_per_night": 12500,
    "parking_spaces": 2,
    "number_of_bathrooms": 1,
    "number_of_bedrooms": 3,
    "country": "Canada",
    "street": "1 Shore Rd",
    "city": "Vancouver",
    "province": "BC",
    "post_code": "V5K",
    "active": True,
}
