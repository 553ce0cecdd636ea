"""
services/readiness.py

Exam readiness score (0-100) and the progress summary built around it.

    lessons   up to 30  completed / total lessons
    exams     up to 50  mean score ratio of the last 3 exams
    mistakes  up to 20  20 with no mistakes, minus 2 per outstanding mistake
"""

import math
from typing import Literal, Sequence

from pydantic import BaseModel

from driving_theory.models.exam_result import ExamResult

LESSON_WEIGHT = 30
EXAM_WEIGHT = 50
MISTAKE_WEIGHT = 20
MISTAKE_PENALTY = 2
RECENT_EXAM_WINDOW = 3

ReadinessLevel = Literal["beginner", "intermediate", "advanced", "ready"]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def lesson_component(completed_lessons: int, total_lessons: int) -> float:
    return completed_lessons / max(total_lessons, 1) * LESSON_WEIGHT


def exam_component(exam_results: Sequence[ExamResult]) -> float:
    if not exam_results:
        return 0.0
    window = list(exam_results)[-RECENT_EXAM_WINDOW:]
    return sum(r.score / r.total for r in window) / len(window) * EXAM_WEIGHT


def mistake_component(mistake_count: int) -> float:
    if mistake_count == 0:
        return float(MISTAKE_WEIGHT)
    return float(max(0, MISTAKE_WEIGHT - mistake_count * MISTAKE_PENALTY))


def compute_readiness(
    completed_lessons: int,
    total_lessons: int,
    exam_results: Sequence[ExamResult],
    mistake_count: int,
) -> int:
    """
    Composite readiness score.

    Args:
        completed_lessons: Number of distinct lessons completed.
        total_lessons:     Size of the lesson catalog.
        exam_results:      Exam history, oldest first.
        mistake_count:     Outstanding mistakes.

    Returns:
        Integer in [0, 100]. The sum is rounded half up.
    """
    if completed_lessons < 0 or total_lessons < 0 or mistake_count < 0:
        raise ValueError("Counts must not be negative.")

    total = (
        lesson_component(completed_lessons, total_lessons)
        + exam_component(exam_results)
        + mistake_component(mistake_count)
    )
    return max(0, min(100, _round_half_up(total)))


def readiness_level(score: int) -> ReadinessLevel:
    if score < 30:
        return "beginner"
    if score < 60:
        return "intermediate"
    if score < 85:
        return "advanced"
    return "ready"


class ProgressSummary(BaseModel):
    completed_lessons: int
    total_lessons: int
    lesson_progress: int
    exam_count: int
    average_exam_score: int
    pass_rate: int
    mistake_count: int
    readiness: int
    level: ReadinessLevel


def summarize_progress(
    completed_lessons: int,
    total_lessons: int,
    exam_results: Sequence[ExamResult],
    mistake_count: int,
) -> ProgressSummary:
    """Figures for the progress page. Percentages are whole numbers."""
    results = list(exam_results)
    readiness = compute_readiness(completed_lessons, total_lessons, results, mistake_count)

    if results:
        average = _round_half_up(sum(r.score / r.total * 100 for r in results) / len(results))
        pass_rate = _round_half_up(sum(1 for r in results if r.passed) / len(results) * 100)
    else:
        average = pass_rate = 0

    return ProgressSummary(
        completed_lessons=completed_lessons,
        total_lessons=total_lessons,
        lesson_progress=_round_half_up(completed_lessons / max(total_lessons, 1) * 100),
        exam_count=len(results),
        average_exam_score=average,
        pass_rate=pass_rate,
        mistake_count=mistake_count,
        readiness=readiness,
        level=readiness_level(readiness),
    )
