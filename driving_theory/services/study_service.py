"""
services/study_service.py

Application state for one learner: the content catalog, completed lessons,
mistakes, exam history and the exam simulator, with the operations the
rendering layer calls. Create one instance and pass it to callers; there
is no module-level singleton.
"""

import logging
import random
import threading
from typing import Callable, Dict, List, Optional

from driving_theory.models.content import Question
from driving_theory.models.exam_result import ExamResult
from driving_theory.models.session_state import ExamState
from driving_theory.services import events
from driving_theory.services.content_repository import ContentRepository
from driving_theory.services.daily_plan import DailyPlan, build_daily_plan
from driving_theory.services.exam_log import ExamResultLog
from driving_theory.services.exam_service import (
    build_review, calculate_category_scores, get_incorrect_questions,
)
from driving_theory.services.exam_session import ExamSession
from driving_theory.services.mistake_tracker import MistakeTracker
from driving_theory.services.practice import (
    PracticeOutcome, SignQuiz, build_sign_quiz, check_practice_answer,
    draw_practice_questions, explain_question,
)
from driving_theory.services.readiness import ProgressSummary, compute_readiness, summarize_progress

logger = logging.getLogger(__name__)


class StudyService:
    def __init__(
        self,
        content: ContentRepository,
        user_id_provider: Callable[[], str] = lambda: "",
        rng: Optional[random.Random] = None,
        tick_interval: Optional[float] = 1.0,
    ) -> None:
        self.content = content
        self.mistakes = MistakeTracker()
        self.results = ExamResultLog()
        self.events = events.EventBus()
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._completed_lessons: Dict[str, None] = {}
        self.exam = ExamSession(
            load_questions=content.list_questions,
            mistakes=self.mistakes,
            results=self.results,
            user_id_provider=user_id_provider,
            rng=self._rng,
            tick_interval=tick_interval,
            on_finish=lambda result: self.events.emit(events.EXAM_FINISHED, result),
        )

    # ── exam ──────────────────────────────────────────────────────────────

    def start_exam(self) -> ExamState:
        state = self.exam.start()
        self.events.emit(events.EXAM_STARTED, state)
        return state

    def answer(self, question_id: str, value: bool) -> None:
        self.exam.answer(question_id, value)

    def navigate(self, target) -> int:
        return self.exam.navigate(target)

    def finish_exam(self) -> ExamResult:
        return self.exam.finish()

    def abandon_exam(self) -> None:
        self.exam.abandon()
        self.events.emit(events.EXAM_ABANDONED)

    def exam_state(self) -> ExamState:
        return self.exam.state

    def exam_history(self) -> List[ExamResult]:
        return self.results.all()

    def exam_report(self) -> Optional[dict]:
        """Review and per-category breakdown of the last finished attempt."""
        result = self.exam.result
        if result is None:
            return None
        questions = self.exam.questions
        answers = self.exam.answers()
        return {
            "result": result,
            "incorrect_count": len(get_incorrect_questions(questions, answers)),
            "unanswered_count": sum(1 for a in result.answers if a.user_answer is None),
            "category_scores": calculate_category_scores(questions, answers),
            "review": build_review(questions, result.answers),
        }

    # ── mistakes ──────────────────────────────────────────────────────────

    def record_mistake(self, question_id: str) -> bool:
        self.content.get_question(question_id)
        added = self.mistakes.record(question_id)
        if added:
            self.events.emit(events.MISTAKE_RECORDED, question_id)
        return added

    def clear_mistake(self, question_id: str) -> bool:
        removed = self.mistakes.clear(question_id)
        if removed:
            self.events.emit(events.MISTAKE_CLEARED, question_id)
        return removed

    def mistake_questions(self) -> List[Question]:
        """Questions to review, in catalog order."""
        return [q for q in self.content.list_questions() if q.id in self.mistakes]

    # ── practice ──────────────────────────────────────────────────────────

    def practice_questions(self, count: int = 10) -> List[Question]:
        return draw_practice_questions(self.content.list_questions(), self._rng, count)

    def answer_practice(self, question_id: str, value: bool) -> PracticeOutcome:
        question = self.content.get_question(question_id)
        outcome = check_practice_answer(question, value, self.mistakes)
        if outcome.mistake_recorded:
            self.events.emit(events.MISTAKE_RECORDED, question_id)
        return outcome

    def sign_quiz(self) -> SignQuiz:
        return build_sign_quiz(self.content.list_signs(), rng=self._rng)

    def explain(self, question_id: str) -> str:
        return explain_question(self.content.get_question(question_id))

    # ── lessons & progress ────────────────────────────────────────────────

    def complete_lesson(self, lesson_id: str) -> bool:
        self.content.get_lesson(lesson_id)
        with self._lock:
            if lesson_id in self._completed_lessons:
                return False
            self._completed_lessons[lesson_id] = None
        logger.info(f"Lesson completed: {lesson_id}")
        self.events.emit(events.LESSON_COMPLETED, lesson_id)
        return True

    def completed_lessons(self) -> List[str]:
        with self._lock:
            return list(self._completed_lessons)

    def _completed_count(self) -> int:
        # Lessons deleted from the catalog no longer count.
        known = {l.id for l in self.content.list_lessons()}
        return sum(1 for lesson_id in self.completed_lessons() if lesson_id in known)

    def get_readiness(self) -> int:
        return compute_readiness(
            self._completed_count(),
            len(self.content.list_lessons()),
            self.results.all(),
            self.mistakes.count(),
        )

    def get_progress(self) -> ProgressSummary:
        return summarize_progress(
            self._completed_count(),
            len(self.content.list_lessons()),
            self.results.all(),
            self.mistakes.count(),
        )

    def get_daily_plan(self) -> DailyPlan:
        return build_daily_plan(
            self._completed_count(),
            len(self.content.list_lessons()),
            self.content.list_signs(),
            self._rng,
        )

    def shutdown(self) -> None:
        self.exam.close()
        logger.info("Study service stopped")
