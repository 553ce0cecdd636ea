"""
models/session_state.py

State of a single mock exam attempt (the "answer sheet").
Pydantic BaseModel; no timer or UI code here.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class ExamPhase(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class ExamState(BaseModel):
    """
    Attributes:
        question_ids:      Sampled question ids, fixed for the attempt.
        current_index:     Question the learner is looking at (0-based).
        user_answers:      {question_id: True/False}. Missing key = unanswered.
        remaining_seconds: Countdown value.
        phase:             not_started / in_progress / finished.
    """

    question_ids: List[str] = Field(default_factory=list)
    current_index: int = Field(
        default=0,
        ge=0,
        description="Current question index (0-based)"
    )
    user_answers: Dict[str, bool] = Field(default_factory=dict)
    remaining_seconds: int = Field(default=0, ge=0)
    phase: ExamPhase = ExamPhase.NOT_STARTED

    @property
    def answered_count(self) -> int:
        return len(self.user_answers)

    @property
    def unanswered_count(self) -> int:
        return len(self.question_ids) - len(self.user_answers)
