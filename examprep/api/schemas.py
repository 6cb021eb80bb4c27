"""
examprep/api/schemas.py
All Pydantic request/response models for the API layer.
No logic here — only data shapes.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


# --- Subjects ---

class SubjectOut(BaseModel):
    code: str
    name: str
    total_questions: int


class SubjectCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    total_questions: int = Field(..., ge=0)


class SubjectPatch(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    total_questions: Optional[int] = Field(None, ge=0)


# --- History ---

class ExamAnswer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_id: int = Field(..., alias="questionId")


class ExamRecordCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject_id: str = Field(..., alias="subjectId", min_length=1, max_length=64)
    answers: List[ExamAnswer] = Field(default_factory=list)
    completed_at: Optional[str] = Field(None, alias="completedAt")


# --- Report card ---

class SubjectStatsOut(BaseModel):
    code: str
    name: str
    total_questions_in_bank: int
    questions_answered_unique: int
    total_attempts: int
    coverage: float
    coverage_display: int
    complete: bool


class ReportCardResponse(BaseModel):
    total_subjects: int
    subjects: List[SubjectStatsOut]
