"""
examprep/api/routes/subjects.py
Subject catalog endpoints.
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from examprep.api.schemas import SubjectCreate, SubjectOut, SubjectPatch
from examprep.core.coverage import Subject
from examprep.knowledge import catalog
from examprep.knowledge.db import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


def _subject_out(subject: Subject) -> SubjectOut:
    return SubjectOut(
        code=subject.code,
        name=subject.name,
        total_questions=subject.total_questions,
    )


@router.get("/subjects", response_model=List[SubjectOut])
def list_subjects(db: Session = Depends(get_db)):
    return [_subject_out(s) for s in catalog.get_subjects(db)]


@router.post("/subjects", response_model=SubjectOut, status_code=status.HTTP_201_CREATED)
def create_subject(payload: SubjectCreate, db: Session = Depends(get_db)):
    code = payload.code.strip()
    try:
        subject = catalog.add_subject(db, code, payload.name.strip(), payload.total_questions)
    except catalog.CatalogError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    logger.info(f"Subject added: {subject.code} ({subject.total_questions} questions)")
    return _subject_out(subject)


@router.patch("/subjects/{code}", response_model=SubjectOut)
def patch_subject(code: str, patch: SubjectPatch, db: Session = Depends(get_db)):
    subject = catalog.update_subject(
        db,
        code,
        name=patch.name.strip() if patch.name is not None else None,
        total_questions=patch.total_questions,
    )
    if subject is None:
        raise HTTPException(status_code=404, detail="Subject not found")
    logger.info(f"Subject updated: {subject.code}")
    return _subject_out(subject)


@router.delete("/subjects/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subject(code: str, db: Session = Depends(get_db)):
    if not catalog.remove_subject(db, code):
        raise HTTPException(status_code=404, detail="Subject not found")
    logger.info(f"Subject removed: {code}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
