from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tasks_api.main import create_app
from tasks_api.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    """Explicit settings so a stray .env or TASKS_API_* variable cannot leak in."""
    return Settings(_env_file=None, seed_tasks=True, legacy_status_codes=True)


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def store(app):
    return app.state.store


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
