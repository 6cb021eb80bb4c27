"""
examprep/config.py
Runtime settings (read from the environment / .env) and bundled JSON loading.
"""
import json
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_DIR = BASE_DIR / "data"
DEFAULT_SUBJECTS_FILE = BASE_DIR / "subjects.json"

# Name of the history log; also the file stem of the JSON store.
HISTORY_KEY = "exam_history"


def load_json(name: str, default=None):
    path = BASE_DIR / name
    fallback = {} if default is None else default
    if not path.exists():
        return fallback
    raw = path.read_text(encoding="utf-8").strip()
    if not raw:
        return fallback
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return fallback


def get_data_dir() -> Path:
    env_dir = os.getenv("EXAMPREP_DATA_DIR", "").strip()
    data_dir = Path(env_dir) if env_dir else DEFAULT_DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_history_path() -> Path:
    env_path = os.getenv("EXAMPREP_HISTORY_FILE", "").strip()
    if env_path:
        return Path(env_path)
    return get_data_dir() / f"{HISTORY_KEY}.json"


def get_subjects_path() -> Path:
    env_path = os.getenv("EXAMPREP_SUBJECTS_FILE", "").strip()
    return Path(env_path) if env_path else DEFAULT_SUBJECTS_FILE


def get_database_url() -> str:
    env_url = os.getenv("DATABASE_URL", "").strip()
    if env_url:
        return env_url
    return f"sqlite:///{get_data_dir() / 'examprep.sqlite3'}"


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
