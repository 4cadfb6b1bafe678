"""
Shared test configuration.
Every test gets its own freshly reset and seeded store, and API tests
get a client bound to an application serving that store.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from student_registry_api.app.main import create_app  # noqa: E402
from student_registry_api.app.services.storage_service import StorageService  # noqa: E402


@pytest.fixture
def storage() -> StorageService:
    store = StorageService()
    store.reset()
    store.seed()
    return store


@pytest.fixture
def client(storage: StorageService) -> Iterator[TestClient]:
    with TestClient(create_app(storage=storage)) as test_client:
        yield test_client
