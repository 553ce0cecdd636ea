"""
services/exam_service.py

Exam grading and result analysis.
Pure functions: no timer, no shared state, no side effects.
"""

from collections import defaultdict
from typing import Dict, List, Optional

from driving_theory.models.content import Question
from driving_theory.models.exam_result import ExamAnswerRecord, is_passed


def is_answer_correct(question: Question, user_answer: Optional[bool]) -> bool:
    """
    Compare one answer to the question's correct answer.

    An unanswered question (None) never counts as correct, even when the
    correct answer is False.
    """
    if user_answer is None:
        return False
    return user_answer == question.answer


def grade_answers(
    questions: List[Question],
    user_answers: Dict[str, bool],
) -> List[ExamAnswerRecord]:
    """
    Build one answer record per sampled question, in sample order.

    Args:
        questions:    Sampled questions of the attempt.
        user_answers: {question.id: True/False}. Missing keys are unanswered.
    """
    records: List[ExamAnswerRecord] = []
    for q in questions:
        user_ans = user_answers.get(q.id)
        records.append(
            ExamAnswerRecord(
                question_id=q.id,
                user_answer=user_ans,
                correct=is_answer_correct(q, user_ans),
            )
        )
    return records


def calculate_score(records: List[ExamAnswerRecord]) -> int:
    """Number of correct answer records."""
    return sum(1 for r in records if r.correct)


def get_incorrect_questions(
    questions: List[Question],
    user_answers: Dict[str, bool],
) -> List[Question]:
    """
    Return the questions graded incorrect, unanswered ones included.
    Original order is kept.
    """
    return [q for q in questions if not is_answer_correct(q, user_answers.get(q.id))]


def calculate_category_scores(
    questions: List[Question],
    user_answers: Dict[str, bool],
) -> List[Dict[str, object]]:
    """
    Per-category breakdown of an attempt.

    Returns:
        [{"category": str, "total": int, "correct": int,
          "incorrect": int, "unanswered": int, "score": float}, ...]
        sorted by category name. `score` is a percentage with one decimal.
    """
    buckets: Dict[str, Dict[str, int]] = defaultdict(
        lambda: {"total": 0, "correct": 0, "incorrect": 0, "unanswered": 0}
    )

    for q in questions:
        cat = q.category or "other"
        buckets[cat]["total"] += 1

        user_ans = user_answers.get(q.id)
        if user_ans is None:
            buckets[cat]["unanswered"] += 1
        elif user_ans == q.answer:
            buckets[cat]["correct"] += 1
        else:
            buckets[cat]["incorrect"] += 1

    result = []
    for cat in sorted(buckets):
        b = buckets[cat]
        score = round(b["correct"] / b["total"] * 100, 1) if b["total"] else 0.0
        result.append({"category": cat, **b, "score": score})
    return result


def build_review(
    questions: List[Question],
    records: List[ExamAnswerRecord],
) -> List[Dict[str, object]]:
    """Pair each graded record with its question for the post-exam review."""
    by_id = {q.id: q for q in questions}
    review = []
    for r in records:
        q = by_id.get(r.question_id)
        if q is None:
            continue
        review.append({
            "question_id": q.id,
            "text_it": q.text_it,
            "text_ar": q.text_ar,
            "correct_answer": q.answer,
            "user_answer": r.user_answer,
            "correct": r.correct,
            "explanation": q.explanation,
        })
    return review


__all__ = [
    "is_answer_correct",
    "grade_answers",
    "calculate_score",
    "get_incorrect_questions",
    "calculate_category_scores",
    "build_review",
    "is_passed",
]
