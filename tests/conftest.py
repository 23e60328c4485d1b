"""
Pytest fixtures for Survey Pareto tests. Settings cache is reset per test; API
tests use FastAPI's TestClient with dependency overrides instead of real env.
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear the cached settings before and after each test."""
    from survey_pareto.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    from survey_pareto.api_server.server import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI TestClient over the Survey Pareto app."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def sample_records() -> list[dict[str, str]]:
    """Three survey rows: one dominant driver, one balanced, one with nothing to score."""
    return [
        {"Timestamp": "2024-01-01", "Email": "ana@example.com", "Impact": "high", "Cost": "low"},
        {"Timestamp": "2024-01-02", "Email": "", "Name": "Luis", "Impact": "medium", "Frequency": "3", "Satisfaction": "2"},
        {"Timestamp": "2024-01-03", "Email": "", "Comments": "all good", "Impact": ""},
    ]
