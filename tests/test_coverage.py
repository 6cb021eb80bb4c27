import copy
import itertools

import pytest

from examprep.core.coverage import (
    Subject,
    SubjectStats,
    aggregate,
    coverage_pct,
    display_pct,
    find_stats,
)

CATALOG = [
    Subject(code="MATH", name="Mathematics", total_questions=10),
    Subject(code="PHYS", name="Physics", total_questions=4),
    Subject(code="X", name="No Bank", total_questions=0),
]


def _exam(subject_id, *question_ids):
    return {"subjectId": subject_id, "answers": [{"questionId": q} for q in question_ids]}


def test_math_example():
    stats = aggregate(
        [Subject(code="MATH", name="Mathematics", total_questions=10)],
        [_exam("MATH", 1, 2, 1)],
    )
    assert stats == [SubjectStats(
        code="MATH",
        name="Mathematics",
        total_questions_in_bank=10,
        questions_answered_unique=2,
        total_attempts=3,
        coverage=20.0,
    )]


def test_zero_bank_has_zero_coverage():
    stats = aggregate(
        [Subject(code="X", name="No Bank", total_questions=0)],
        [_exam("X", 1, 2, 3)],
    )
    assert stats[0].coverage == 0
    assert stats[0].questions_answered_unique == 3
    assert stats[0].total_attempts == 3


def test_empty_history_gives_zero_rows():
    stats = aggregate([Subject(code="A", name="A", total_questions=5)], [])
    assert len(stats) == 1
    row = stats[0]
    assert (row.code, row.questions_answered_unique, row.total_attempts, row.coverage) == ("A", 0, 0, 0)


def test_empty_catalog_gives_empty_result():
    assert aggregate([], [_exam("MATH", 1)]) == []


def test_one_row_per_subject_in_catalog_order():
    history = [_exam("PHYS", 1), _exam("MATH", 2)]
    stats = aggregate(CATALOG, history)
    assert [row.code for row in stats] == ["MATH", "PHYS", "X"]
    assert [row.name for row in stats] == ["Mathematics", "Physics", "No Bank"]

    reversed_catalog = list(reversed(CATALOG))
    assert [row.code for row in aggregate(reversed_catalog, history)] == ["X", "PHYS", "MATH"]


def test_unique_never_exceeds_attempts():
    history = [_exam("MATH", 1, 1, 1, 2), _exam("MATH", 2, 3), _exam("PHYS", 4, 4)]
    for row in aggregate(CATALOG, history):
        assert row.questions_answered_unique <= row.total_attempts


def test_duplicates_across_exams_count_as_attempts():
    stats = aggregate(CATALOG, [_exam("MATH", 1, 2), _exam("MATH", 2, 3)])
    math = find_stats(stats, "MATH")
    assert math.questions_answered_unique == 3
    assert math.total_attempts == 4
    assert math.coverage == pytest.approx(30.0)


def test_idempotent():
    history = [_exam("MATH", 1, 2), _exam("PHYS", 3)]
    assert aggregate(CATALOG, history) == aggregate(CATALOG, history)


def test_history_order_does_not_matter():
    history = [_exam("MATH", 1, 2), _exam("PHYS", 3), _exam("MATH", 2, 5), {"subjectId": "MATH"}]
    expected = aggregate(CATALOG, history)
    for perm in itertools.permutations(history):
        assert aggregate(CATALOG, list(perm)) == expected


def test_inputs_not_mutated():
    catalog = list(CATALOG)
    history = [_exam("MATH", 1, 2), {"subjectId": "MATH", "answers": None}]
    snapshot = copy.deepcopy(history)
    aggregate(catalog, history)
    assert history == snapshot
    assert catalog == CATALOG


@pytest.mark.parametrize("record", [
    {"subjectId": "MATH"},
    {"subjectId": "MATH", "answers": None},
    {"subjectId": "MATH", "answers": "1,2,3"},
    {"subjectId": "MATH", "answers": 7},
    {"subjectId": "MATH", "answers": {"questionId": 1}},
    {"answers": [{"questionId": 1}]},
    {"subjectId": ["MATH"], "answers": [{"questionId": 1}]},
    None,
    "MATH",
    42,
])
def test_malformed_record_contributes_nothing(record):
    history = [_exam("MATH", 1), record, _exam("MATH", 2)]
    math = find_stats(aggregate(CATALOG, history), "MATH")
    assert math.questions_answered_unique == 2
    assert math.total_attempts == 2


def test_malformed_answers_are_skipped():
    history = [{"subjectId": "MATH", "answers": [
        {"questionId": 1}, {}, {"questionId": "2"}, {"questionId": True}, None, 3, {"questionId": 4},
    ]}]
    math = find_stats(aggregate(CATALOG, history), "MATH")
    assert math.questions_answered_unique == 2
    assert math.total_attempts == 2


def test_integral_float_ids_count_as_ints():
    history = [{"subjectId": "MATH", "answers": [
        {"questionId": 1.0}, {"questionId": 1}, {"questionId": 2.5}, {"questionId": 3.0},
    ]}]
    math = find_stats(aggregate(CATALOG, history), "MATH")
    assert math.questions_answered_unique == 2
    assert math.total_attempts == 3


def test_unknown_subject_is_ignored():
    history = [_exam("HIST", 1, 2, 3), _exam("PHYS", 1)]
    stats = aggregate(CATALOG, history)
    assert [row.code for row in stats] == ["MATH", "PHYS", "X"]
    assert sum(row.total_attempts for row in stats) == 1


def test_coverage_not_clamped_when_bank_shrinks():
    stats = aggregate(
        [Subject(code="PHYS", name="Physics", total_questions=2)],
        [_exam("PHYS", 1, 2, 3, 4)],
    )
    assert stats[0].coverage == pytest.approx(200.0)
    assert stats[0].complete


def test_tuple_answers_accepted():
    history = [{"subjectId": "PHYS", "answers": ({"questionId": 1}, {"questionId": 2})}]
    phys = find_stats(aggregate(CATALOG, tuple(history)), "PHYS")
    assert phys.total_attempts == 2
    assert phys.coverage == pytest.approx(50.0)


@pytest.mark.parametrize("subjects, history", [
    (None, []),
    (CATALOG, None),
    ("MATH", []),
    (CATALOG, {"subjectId": "MATH"}),
])
def test_non_sequence_inputs_raise_type_error(subjects, history):
    with pytest.raises(TypeError):
        aggregate(subjects, history)


def test_coverage_pct():
    assert coverage_pct(2, 10) == pytest.approx(20.0)
    assert coverage_pct(5, 0) == 0
    assert coverage_pct(0, 3) == 0


def test_display_pct_rounds_halves_up():
    assert display_pct(0) == 0
    assert display_pct(12.5) == 13
    assert display_pct(33.333) == 33
    assert display_pct(66.666) == 67


def test_complete_and_to_dict():
    row = aggregate([Subject(code="A", name="A", total_questions=2)], [_exam("A", 1, 2)])[0]
    assert row.complete
    assert row.to_dict() == {
        "code": "A",
        "name": "A",
        "total_questions_in_bank": 2,
        "questions_answered_unique": 2,
        "total_attempts": 2,
        "coverage": 100.0,
    }


def test_find_stats_missing_code():
    assert find_stats(aggregate(CATALOG, []), "NOPE") is None
