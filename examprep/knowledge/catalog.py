"""
examprep/knowledge/catalog.py
Subject catalog: the list of subjects with their question-bank sizes.

Stored in the `subjects` table and seeded from subjects.json the first time
the table is empty. Catalog order is the `position` column.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from jsonschema import ValidationError, validate
from sqlalchemy import func
from sqlalchemy.orm import Session

from examprep.config import get_subjects_path, load_json
from examprep.core.coverage import Subject
from examprep.knowledge.models import SubjectRecord

logger = logging.getLogger(__name__)

SUBJECT_CATALOG_SCHEMA = load_json("subject_catalog_schema.json")


class CatalogError(ValueError):
    pass


def _to_subject(row: SubjectRecord) -> Subject:
    return Subject(code=row.code, name=row.name, total_questions=row.total_questions)


def load_catalog_file(path: Optional[Path] = None) -> List[Subject]:
    path = path or get_subjects_path()
    if not path.exists():
        logger.warning(f"Subject catalog file not found: {path}")
        return []
    raw = path.read_text(encoding="utf-8").strip()
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Subject catalog {path} is not valid JSON: {exc}") from exc
    try:
        validate(instance=data, schema=SUBJECT_CATALOG_SCHEMA or {})
    except ValidationError as exc:
        raise CatalogError(f"Subject catalog {path} failed validation: {exc.message}") from exc
    return [
        Subject(code=item["code"], name=item["name"], total_questions=int(item["totalQuestions"]))
        for item in data
    ]


def seed_catalog(db: Session, subjects: List[Subject]) -> int:
    if db.query(SubjectRecord).count() > 0:
        return 0
    seen = set()
    added = 0
    for position, subject in enumerate(subjects):
        if subject.code in seen:
            logger.warning(f"Duplicate subject code in catalog seed skipped: {subject.code}")
            continue
        seen.add(subject.code)
        db.add(SubjectRecord(
            code=subject.code,
            name=subject.name,
            total_questions=subject.total_questions,
            position=position,
        ))
        added += 1
    db.commit()
    logger.info(f"Seeded subject catalog with {added} subjects")
    return added


def get_subjects(db: Session) -> List[Subject]:
    rows = (
        db.query(SubjectRecord)
        .order_by(SubjectRecord.position, SubjectRecord.code)
        .all()
    )
    return [_to_subject(row) for row in rows]


def get_subject(db: Session, code: str) -> Optional[Subject]:
    row = db.get(SubjectRecord, code)
    return _to_subject(row) if row is not None else None


def add_subject(db: Session, code: str, name: str, total_questions: int) -> Subject:
    if db.get(SubjectRecord, code) is not None:
        raise CatalogError(f"Subject already exists: {code}")
    last_position = db.query(func.max(SubjectRecord.position)).scalar()
    row = SubjectRecord(
        code=code,
        name=name,
        total_questions=total_questions,
        position=0 if last_position is None else last_position + 1,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return _to_subject(row)


def update_subject(
    db: Session,
    code: str,
    name: Optional[str] = None,
    total_questions: Optional[int] = None,
) -> Optional[Subject]:
    row = db.get(SubjectRecord, code)
    if row is None:
        return None
    if name is not None:
        row.name = name
    if total_questions is not None:
        row.total_questions = total_questions
    db.commit()
    db.refresh(row)
    return _to_subject(row)


def remove_subject(db: Session, code: str) -> bool:
    row = db.get(SubjectRecord, code)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    return True
