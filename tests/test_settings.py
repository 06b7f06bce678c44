from __future__ import annotations

from tasks_api.settings import Settings


def test_defaults() -> None:
    s = Settings(_env_file=None)

    assert s.port == 8080
    assert s.seed_tasks is True
    assert s.legacy_status_codes is True


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TASKS_API_PORT", "9090")
    monkeypatch.setenv("TASKS_API_LEGACY_STATUS_CODES", "false")

    s = Settings(_env_file=None)

    assert s.port == 9090
    assert s.legacy_status_codes is False
