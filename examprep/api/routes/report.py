"""
examprep/api/routes/report.py
Report card endpoints: per-subject practice coverage.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from examprep.api.schemas import ReportCardResponse, SubjectStatsOut
from examprep.core.coverage import SubjectStats, aggregate, display_pct, find_stats
from examprep.knowledge.catalog import get_subjects
from examprep.knowledge.db import get_db
from examprep.knowledge.history import load_exam_history

router = APIRouter()


def _stats_out(row: SubjectStats) -> SubjectStatsOut:
    return SubjectStatsOut(
        **row.to_dict(),
        coverage_display=display_pct(row.coverage),
        complete=row.complete,
    )


@router.get("/report-card", response_model=ReportCardResponse)
def get_report_card(db: Session = Depends(get_db)):
    stats = aggregate(get_subjects(db), load_exam_history())
    return ReportCardResponse(
        total_subjects=len(stats),
        subjects=[_stats_out(row) for row in stats],
    )


@router.get("/report-card/{code}", response_model=SubjectStatsOut)
def get_subject_report(code: str, db: Session = Depends(get_db)):
    stats = aggregate(get_subjects(db), load_exam_history())
    row = find_stats(stats, code)
    if row is None:
        raise HTTPException(status_code=404, detail="Subject not found")
    return _stats_out(row)
