"""
examprep/core/coverage.py — Subject coverage report.
Folds the completed-exam history into one stats row per catalog subject.

The history comes straight from the store, so any record may be malformed.
Bad records are skipped by shape checks while folding; nothing here raises
for bad data.
"""
from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Set


@dataclass(frozen=True)
class Subject:
    code: str
    name: str
    total_questions: int


@dataclass(frozen=True)
class SubjectStats:
    code: str
    name: str
    total_questions_in_bank: int
    questions_answered_unique: int
    total_attempts: int
    coverage: float   # not clamped: can pass 100 if the bank shrank

    @property
    def complete(self) -> bool:
        return self.coverage >= 100

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SubjectTally:
    question_ids: Set[int] = field(default_factory=set)
    attempts: int = 0


def coverage_pct(unique: int, total: int) -> float:
    if total > 0:
        return unique / total * 100
    return 0.0


def display_pct(coverage: float) -> int:
    """Whole-percent label for a progress bar; halves round up."""
    return int(math.floor(coverage + 0.5))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _record_answers(record: Any) -> Optional[Sequence]:
    answers = record.get("answers")
    if isinstance(answers, (list, tuple)):
        return answers
    return None


def _question_id(answer: Any) -> Optional[int]:
    if not isinstance(answer, Mapping):
        return None
    question_id = answer.get("questionId")
    # bool is an int subclass, but True is not a question id
    if isinstance(question_id, bool):
        return None
    if isinstance(question_id, float) and question_id.is_integer():
        return int(question_id)
    if not isinstance(question_id, int):
        return None
    return question_id


def aggregate(subjects: Sequence[Subject], history: Sequence[Any]) -> List[SubjectStats]:
    if not _is_sequence(subjects):
        raise TypeError(f"subjects must be a sequence, got {type(subjects).__name__}")
    if not _is_sequence(history):
        raise TypeError(f"history must be a sequence, got {type(history).__name__}")

    tallies: Dict[str, SubjectTally] = {}
    for subject in subjects:
        tallies[subject.code] = SubjectTally()

    for record in history:
        if not isinstance(record, Mapping):
            continue
        subject_id = record.get("subjectId")
        if not isinstance(subject_id, str):
            continue
        tally = tallies.get(subject_id)
        if tally is None:
            # subject removed from the catalog (or never existed)
            continue
        answers = _record_answers(record)
        if answers is None:
            continue
        for answer in answers:
            question_id = _question_id(answer)
            if question_id is None:
                continue
            tally.question_ids.add(question_id)
            tally.attempts += 1

    stats = []
    for subject in subjects:
        tally = tallies[subject.code]
        unique = len(tally.question_ids)
        stats.append(SubjectStats(
            code=subject.code,
            name=subject.name,
            total_questions_in_bank=subject.total_questions,
            questions_answered_unique=unique,
            total_attempts=tally.attempts,
            coverage=coverage_pct(unique, subject.total_questions),
        ))
    return stats


def find_stats(stats: Sequence[SubjectStats], code: str) -> Optional[SubjectStats]:
    for row in stats:
        if row.code == code:
            return row
    return None
