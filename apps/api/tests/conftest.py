"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shiftboard.core.database import Base, get_db
from shiftboard.main import app
from shiftboard.models.shift import Shift  # noqa: F401
from shiftboard.models.week import Week  # noqa: F401
from shiftboard.repositories.shifts import ShiftRepository
from shiftboard.repositories.weeks import WeekRepository
from shiftboard.services.clock import get_clock
from shiftboard.services.dates import week_bounds
from shiftboard.services.shifts import ShiftService

# Wednesday 2024-01-10, inside the week starting Monday 2024-01-08
FIXED_NOW = datetime(2024, 1, 10, 12, 0, 0)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service(db):
    return ShiftService(db, clock=fixed_clock)


@pytest.fixture
def add_shift(db):
    """Insert a shift directly, creating its week row if needed."""
    shifts = ShiftRepository(db)
    weeks = WeekRepository(db)

    def _add(name: str, day: date, start: time, end: time) -> Shift:
        bounds = week_bounds(day)
        week = weeks.find_one(bounds.start_date) or weeks.create(
            start_date=bounds.start_date, end_date=bounds.end_date, is_published=False
        )
        return shifts.create(name=name, date=day, start_time=start, end_time=end, week_id=week.week_id)

    return _add


@pytest.fixture
def client(engine):
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        session = TestSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
