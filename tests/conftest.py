from datetime import date, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from smartwaste.core.session import Session
from smartwaste.db.database import get_session, reset_session
from smartwaste.db.store import InventoryStore
from smartwaste.main import app

TODAY = date(2026, 3, 10)


def days_from_today(n: int) -> str:
    return (TODAY + timedelta(days=n)).isoformat()


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 10, 9, 30))


@pytest.fixture
def store(clock):
    return InventoryStore(clock=clock)


@pytest.fixture
def session(clock):
    return Session(clock=clock)


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_session()
