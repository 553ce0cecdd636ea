"""
models/exam_result.py

Graded exam records. Both models are frozen: a result is created once when
an attempt finishes and never changes afterwards.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

# Minimum correct ratio for a pass. Compared on the raw ratio, not on a
# rounded percentage: 16/20 passes, 15/20 fails.
PASS_RATIO = 0.8


def is_passed(score: int, total: int) -> bool:
    """Return True when score/total reaches the pass ratio."""
    if total <= 0:
        return False
    return score / total >= PASS_RATIO


class ExamAnswerRecord(BaseModel):
    """
    One graded exam question.

    Attributes:
        question_id: Id of the sampled question.
        user_answer: The learner's final answer, or None if left unanswered.
        correct:     Whether the answer matched the question's answer.
                     Always False when user_answer is None.
    """

    question_id: str
    user_answer: Optional[bool] = None
    correct: bool

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unanswered_is_incorrect(self) -> "ExamAnswerRecord":
        if self.user_answer is None and self.correct:
            raise ValueError(f"Unanswered question {self.question_id} cannot be graded correct.")
        return self


class ExamResult(BaseModel):
    """
    A finished mock exam attempt, appended to the exam result log.

    Invariants (checked on construction):
        score  == number of correct answer records
        total  == number of answer records
        passed == score / total >= PASS_RATIO
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: str = Field(
        default="",
        description="Learner id; empty when no learner is signed in"
    )
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    score: int = Field(..., ge=0)
    total: int = Field(..., gt=0)
    passed: bool
    answers: List[ExamAnswerRecord]
    time_spent: int = Field(..., ge=0, description="Seconds used out of the exam duration")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_grading(self) -> "ExamResult":
        if self.total != len(self.answers):
            raise ValueError(f"total ({self.total}) does not match {len(self.answers)} answer records.")
        correct = sum(1 for a in self.answers if a.correct)
        if self.score != correct:
            raise ValueError(f"score ({self.score}) does not match {correct} correct answers.")
        if self.passed != is_passed(self.score, self.total):
            raise ValueError("passed flag disagrees with the pass ratio.")
        return self

    @property
    def ratio(self) -> float:
        return self.score / self.total

    @property
    def percentage(self) -> int:
        return round(self.ratio * 100)
