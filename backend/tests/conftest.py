"""Shared test configuration, pytest markers and fixtures."""

import os

# In-memory database for the whole run; must be set before config is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402

from api.router import limiter  # noqa: E402
from database.database import engine, init_db  # noqa: E402
from database.models import Base  # noqa: E402
from services import gemini_client  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the live Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture(autouse=True)
def _offline_gemini(monkeypatch, request):
    """Never reach the real Gemini API unless a test is marked integration."""
    if "integration" not in request.keywords:
        monkeypatch.setattr(gemini_client, "get_client", lambda: None)


@pytest.fixture(autouse=True)
def _reset_state():
    limiter.enabled = False
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)
    limiter.enabled = True
