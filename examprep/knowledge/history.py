"""
examprep/knowledge/history.py
File-based exam history: one JSON list of completed practice exams.

Records use the stored wire shape
    {"subjectId": "MATH", "answers": [{"questionId": 1}, ...], "completedAt": "..."}
and are only ever appended. Nothing here checks the subject against the
catalog; readers must tolerate stale or malformed entries.
"""
import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from examprep.config import get_history_path

logger = logging.getLogger(__name__)

_write_lock = threading.Lock()


def _read_history(path: Path) -> Optional[list]:
    """Stored records, or None when the file exists but is not a JSON list."""
    if not path.exists():
        return []
    try:
        raw = path.read_bytes().decode("utf-8").strip()
        if not raw:
            return []
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    return data if isinstance(data, list) else None


def load_exam_history(path: Optional[Path] = None) -> list:
    path = path or get_history_path()
    records = _read_history(path)
    if records is None:
        logger.debug(f"Unreadable exam history at {path}; treating as empty")
        return []
    return records


def save_exam_history(records: list, path: Optional[Path] = None) -> None:
    path = path or get_history_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8"
    )


def append_exam_record(
    subject_id: str,
    question_ids: Iterable[int],
    completed_at: Optional[str] = None,
    path: Optional[Path] = None,
) -> dict:
    record = {
        "subjectId": subject_id,
        "answers": [{"questionId": int(qid)} for qid in question_ids],
        "completedAt": completed_at or datetime.now(timezone.utc).isoformat(),
    }
    path = path or get_history_path()
    with _write_lock:
        records = _read_history(path)
        if records is None:
            logger.warning(f"Exam history at {path} is unreadable; replacing it with a new log")
            records = []
        records.append(record)
        save_exam_history(records, path)
    return record
