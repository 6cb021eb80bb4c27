import json

import pytest
from fastapi.testclient import TestClient

from examprep.api.app import create_app
from examprep.knowledge.db import close_db, get_session_factory, init_db

SUBJECTS = [
    {"code": "MATH", "name": "Mathematics", "totalQuestions": 10},
    {"code": "PHYS", "name": "Physics", "totalQuestions": 4},
    {"code": "EMPTY", "name": "Empty Bank", "totalQuestions": 0},
]


@pytest.fixture
def env(tmp_path, monkeypatch):
    subjects_file = tmp_path / "subjects.json"
    subjects_file.write_text(json.dumps(SUBJECTS), encoding="utf-8")
    monkeypatch.setenv("EXAMPREP_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("EXAMPREP_HISTORY_FILE", str(tmp_path / "data" / "exam_history.json"))
    monkeypatch.setenv("EXAMPREP_SUBJECTS_FILE", str(subjects_file))
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.sqlite3'}")
    close_db()
    yield tmp_path
    close_db()


@pytest.fixture
def db(env):
    init_db()
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(env):
    with TestClient(create_app()) as c:
        yield c
