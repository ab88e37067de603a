"""
pytest configuration and fixtures.
"""
import pytest

from app.config import Settings, get_settings
from app.database import STORE, _LOCKS
from app.main import app

API_KEY = "test-secret"
AUTH = {"x-api-key": API_KEY}


@pytest.fixture(autouse=True)
def fresh_app():
    """Seed records and a known API key for every test."""
    STORE.reset()
    _LOCKS.clear()
    app.dependency_overrides[get_settings] = lambda: Settings(api_key=API_KEY)
    yield
    app.dependency_overrides.clear()
