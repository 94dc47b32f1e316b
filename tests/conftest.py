"""
Pytest fixtures and configuration for flyme_oauth tests.

Provides:
- Strategy options and canned Flyme responses
- Registry isolation between tests
- FastAPI test client
"""

import json

import pytest
from fastapi.testclient import TestClient

from flyme_oauth.api.routes.auth import oauth_states
from flyme_oauth.auth.options import StrategyOptions
from flyme_oauth.auth.registry import StrategyRegistry
from flyme_oauth.main import app


@pytest.fixture
def options():
    """Minimal options without endpoint overrides."""
    return StrategyOptions(
        client_id="123-456-789",
        client_secret="shhh-its-a-secret",
        callback_url="https://www.example.net/auth/flyme/callback",
    )


@pytest.fixture(autouse=True)
def clean_registry():
    """Each test starts with an empty registry and no pending states."""
    StrategyRegistry.clear()
    oauth_states.clear()
    yield
    StrategyRegistry.clear()
    oauth_states.clear()


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    return TestClient(app)


# ============================================================
# Test Data Fixtures
# ============================================================

@pytest.fixture
def success_body():
    """Profile body as Flyme returns it for a valid token."""
    return json.dumps({
        "code": "200",
        "value": {"openId": "u1", "nickname": "Alice", "icon": "http://x/a.png"}
    })
