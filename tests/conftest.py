from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from coursegate.config import settings
from coursegate.main import app

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture()
def db_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    db_path = tmp_path / "coursegate.db"
    monkeypatch.setattr(settings, "database_path", str(db_path))
    monkeypatch.setattr(settings, "admin_token", ADMIN_TOKEN)
    monkeypatch.setattr(settings, "seed_demo_courses", False)
    monkeypatch.setattr(settings, "default_timezone", None)
    return db_path


@pytest.fixture()
def client(db_settings: Path) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def admin_headers() -> dict:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture()
def course_payload():
    return build_course_payload


def build_course_payload(**overrides) -> dict:
    payload = {
        "title": "Morning Energizing Flow",
        "description": "Gentle flowing movements.",
        "content": "Morning yoga practices...",
        "video": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "duration": 60,
        "languages": ["english", "hindi"],
        "batches": [
            {"batch_name": "Batch 1", "time": "07:00", "days": ["Monday", "Wednesday", "Friday"]},
            {"batch_name": "Batch 2", "time": "18:00", "days": ["Tuesday", "Thursday"]},
        ],
    }
    payload.update(overrides)
    return payload
