"""Tests for pure grading functions and the ExamResult invariants."""
import pytest
from pydantic import ValidationError

from driving_theory.models.exam_result import ExamAnswerRecord, ExamResult, is_passed
from driving_theory.services.exam_service import (
    build_review, calculate_category_scores, calculate_score, get_incorrect_questions,
    grade_answers, is_answer_correct,
)

from conftest import make_question, make_result


class TestGrading:
    def test_score_counts_matching_answers(self, questions):
        """Score equals the number of positions where answer == question.answer."""
        sample = questions[:20]
        answers = {q.id: (q.answer if n % 3 else not q.answer) for n, q in enumerate(sample)}

        records = grade_answers(sample, answers)

        expected = sum(1 for q in sample if answers[q.id] == q.answer)
        assert calculate_score(records) == expected
        assert [r.question_id for r in records] == [q.id for q in sample]

    def test_unanswered_never_correct(self):
        q = make_question(1, answer=False)

        assert is_answer_correct(q, None) is False
        assert is_answer_correct(q, False) is True

    def test_incorrect_questions_include_unanswered(self):
        qs = [make_question(i, answer=True) for i in range(4)]
        answers = {"q0": True, "q1": False}

        incorrect = get_incorrect_questions(qs, answers)

        assert [q.id for q in incorrect] == ["q1", "q2", "q3"]

    def test_category_scores(self):
        qs = [
            make_question(1, True, "segnali"),
            make_question(2, True, "segnali"),
            make_question(3, False, "velocità"),
        ]
        answers = {"q1": True, "q2": False}

        scores = calculate_category_scores(qs, answers)

        assert scores == [
            {"category": "segnali", "total": 2, "correct": 1, "incorrect": 1, "unanswered": 0, "score": 50.0},
            {"category": "velocità", "total": 1, "correct": 0, "incorrect": 0, "unanswered": 1, "score": 0.0},
        ]

    def test_review_pairs_questions_and_records(self):
        qs = [make_question(1, True), make_question(2, False)]
        records = grade_answers(qs, {"q1": False})

        review = build_review(qs, records)

        assert review[0]["correct_answer"] is True
        assert review[0]["user_answer"] is False
        assert review[1]["user_answer"] is None
        assert not any(r["correct"] for r in review)


class TestPassThreshold:
    def test_boundary(self):
        """16/20 passes, 15/20 fails."""
        assert is_passed(16, 20) is True
        assert is_passed(15, 20) is False

    def test_other_sizes(self):
        assert is_passed(4, 5) is True
        assert is_passed(7, 9) is False
        assert is_passed(0, 0) is False


class TestExamResultInvariants:
    def test_valid_result(self):
        r = make_result(18)

        assert r.score == 18
        assert r.passed is True
        assert r.percentage == 90

    def test_score_mismatch_rejected(self):
        answers = [ExamAnswerRecord(question_id="q1", user_answer=True, correct=True)]

        with pytest.raises(ValidationError):
            ExamResult(score=0, total=1, passed=False, answers=answers, time_spent=10)

    def test_total_mismatch_rejected(self):
        answers = [ExamAnswerRecord(question_id="q1", user_answer=True, correct=True)]

        with pytest.raises(ValidationError):
            ExamResult(score=1, total=2, passed=False, answers=answers, time_spent=10)

    def test_passed_flag_mismatch_rejected(self):
        answers = [ExamAnswerRecord(question_id="q1", user_answer=True, correct=True)]

        with pytest.raises(ValidationError):
            ExamResult(score=1, total=1, passed=False, answers=answers, time_spent=10)

    def test_unanswered_record_cannot_be_correct(self):
        with pytest.raises(ValidationError):
            ExamAnswerRecord(question_id="q1", user_answer=None, correct=True)

    def test_result_is_frozen(self):
        r = make_result(10)

        with pytest.raises(ValidationError):
            r.score = 20
