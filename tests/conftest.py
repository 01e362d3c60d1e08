"""Pytest fixtures for the dashboard seed tests.

Uses a SQLite file database and the FastAPI TestClient. Overrides the
`get_engine` dependency so tests never touch a real database.
"""

import os

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test_dashboard.db")
# Point the app's own engine (used by the startup probe) at the test database
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

import pytest
from fastapi.testclient import TestClient

import dashboard_seed.database as database
from dashboard_seed.database import build_engine
from dashboard_seed.main import app
from dashboard_seed.models import Base
from dashboard_seed.schemas import FixtureSet


# Create test engine
engine = build_engine(TEST_DATABASE_URL)


@pytest.fixture(autouse=True)
def setup_database():
    """Drop the seed tables before and after each test; the seeder creates them."""
    Base.metadata.drop_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def test_engine():
    return engine


# Override get_engine dependency in the app
def _override_get_engine():
    return engine


app.dependency_overrides[database.get_engine] = _override_get_engine

# Tests call /seed repeatedly; disable the global rate limiter for the test run only.
try:
    app.state.limiter.enabled = False  # type: ignore[attr-defined]
except Exception:
    pass


@pytest.fixture()
def client():
    """FastAPI test client using the app with overridden dependencies."""
    with TestClient(app) as c:
        yield c


# Helper: build a small FixtureSet from plain dicts
@pytest.fixture()
def make_fixtures():
    def _make_fixtures(users=None, customers=None, invoices=None, revenue=None) -> FixtureSet:
        return FixtureSet.model_validate(
            {
                "users": users or [],
                "customers": customers or [],
                "invoices": invoices or [],
                "revenue": revenue or [],
            }
        )

    return _make_fixtures
