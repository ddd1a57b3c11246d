import pytest
from fastapi.testclient import TestClient

from core import db
from main import app


def squash(sql):
    return " ".join(sql.split())


class RecordingDB:
    """
    Stand-in for core.db: records every statement and replays queued results.

    Queued exceptions are raised instead of returned.
    """

    def __init__(self):
        self.calls = []
        self.results = []

    def queue(self, *results):
        self.results.extend(results)

    def _next(self, default):
        if not self.results:
            return default
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch_all(self, sql, *args):
        self.calls.append((squash(sql), list(args)))
        return self._next([])

    async def fetch_one(self, sql, *args):
        self.calls.append((squash(sql), list(args)))
        return self._next(None)

    async def execute(self, sql, *args):
        self.calls.append((squash(sql), list(args)))
        return self._next("OK")

    @property
    def sql(self):
        return self.calls[-1][0]

    @property
    def args(self):
        return self.calls[-1][1]


@pytest.fixture
def fake_db(monkeypatch):
    fake = RecordingDB()
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "execute", fake.execute)
    return fake


@pytest.fixture
def client():
    # Server errors are asserted as 500 responses, not re-raised.
    return TestClient(app, raise_server_exceptions=False)
