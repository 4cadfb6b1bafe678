# This file tests application wiring: settings, seeding and the health route.

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from student_registry_api.app.core.config import Settings
from student_registry_api.app.core.logging_config import setup_logging
from student_registry_api.app.main import create_app
from student_registry_api.app.services.storage_service import COURSES, STUDENTS, StorageService


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"]


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROJECT_NAME", "Registry Test")
    monkeypatch.setenv("COURSE_CAPACITY", "5")
    monkeypatch.setenv("SEED_ON_STARTUP", "no")

    cfg = Settings()

    assert cfg.project_name == "Registry Test"
    assert cfg.course_capacity == 5
    assert cfg.seed_on_startup is False


def test_app_builds_seeded_store_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SEED_ON_STARTUP", raising=False)
    app = create_app(app_settings=Settings())
    store = app.state.storage
    assert len(store.list(STUDENTS)) == 3
    assert len(store.list(COURSES)) == 3


def test_app_without_seed_starts_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEED_ON_STARTUP", "false")
    monkeypatch.setenv("COURSE_CAPACITY", "2")
    app = create_app(app_settings=Settings())

    with TestClient(app) as client:
        assert client.get("/students").json() == {"students": []}

    assert app.state.storage.course_capacity == 2


def test_apps_do_not_share_state() -> None:
    first = StorageService()
    first.seed()
    second = StorageService()
    second.seed()

    with TestClient(create_app(storage=first)) as client:
        client.delete("/students/1")

    assert first.get(STUDENTS, 1) is None
    assert second.get(STUDENTS, 1) is not None


def test_setup_logging_is_idempotent() -> None:
    before = list(logging.getLogger().handlers)
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    after = logging.getLogger().handlers
    if before:
        assert after == before
    else:
        assert len(after) == 1
