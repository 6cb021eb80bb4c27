"""
examprep/api/routes/history.py
Completed-exam history endpoints.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from examprep.api.schemas import ExamRecordCreate
from examprep.knowledge.catalog import get_subject
from examprep.knowledge.db import get_db
from examprep.knowledge.history import append_exam_record, load_exam_history

router = APIRouter()


@router.get("/history", response_model=List[Dict[str, Any]])
def get_history(subject_id: Optional[str] = None, limit: int = 50):
    # Raw records: stored entries may be malformed, so no response schema.
    records = [r for r in load_exam_history() if isinstance(r, dict)]
    if subject_id:
        records = [r for r in records if r.get("subjectId") == subject_id]
    limit = max(1, min(limit, 500))
    return records[-limit:][::-1]


@router.post("/history", status_code=status.HTTP_201_CREATED)
def record_exam(payload: ExamRecordCreate, db: Session = Depends(get_db)):
    if get_subject(db, payload.subject_id) is None:
        raise HTTPException(status_code=404, detail="Subject not found")
    return append_exam_record(
        payload.subject_id,
        [answer.question_id for answer in payload.answers],
        completed_at=payload.completed_at,
    )
