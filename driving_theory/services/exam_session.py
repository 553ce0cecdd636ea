"""
services/exam_session.py

Timed mock exam state machine: not_started -> in_progress -> finished,
and finished/in_progress -> (new attempt) via start().

Grading is deferred to finish(): answers have no effect on the mistake
tracker or the result log until then.
"""

import logging
import random
import threading
from typing import Callable, Dict, List, Optional

from driving_theory.exceptions import EmptyCatalogError, InvalidOperationError
from driving_theory.models.content import Question
from driving_theory.models.exam_result import ExamResult, is_passed
from driving_theory.models.session_state import ExamPhase, ExamState
from driving_theory.services.countdown import Countdown
from driving_theory.services.exam_log import ExamResultLog
from driving_theory.services.exam_service import calculate_score, grade_answers
from driving_theory.services.mistake_tracker import MistakeTracker

logger = logging.getLogger(__name__)

EXAM_QUESTION_COUNT = 20
EXAM_DURATION_SECONDS = 30 * 60

_DIRECTIONS = {"next": 1, "previous": -1, "prev": -1}


class ExamSession:
    """
    One exam simulator. Each start() begins a fresh attempt.

    Args:
        load_questions:   Returns the current question catalog.
        mistakes:         Tracker that receives every wrong answer on finish.
        results:          Log that receives the finished ExamResult.
        user_id_provider: Returns the learner id stamped on results.
        rng:              Random source for sampling (inject a seeded one in tests).
        tick_interval:    Seconds between countdown ticks. None disables the
                          background thread; call tick() manually instead.
        on_finish:        Called with the ExamResult after grading.
    """

    def __init__(
        self,
        load_questions: Callable[[], List[Question]],
        mistakes: MistakeTracker,
        results: ExamResultLog,
        user_id_provider: Callable[[], str] = lambda: "",
        rng: Optional[random.Random] = None,
        question_count: int = EXAM_QUESTION_COUNT,
        duration_seconds: int = EXAM_DURATION_SECONDS,
        tick_interval: Optional[float] = 1.0,
        on_finish: Optional[Callable[[ExamResult], None]] = None,
    ) -> None:
        self._load_questions = load_questions
        self._mistakes = mistakes
        self._results = results
        self._user_id_provider = user_id_provider
        self._rng = rng or random.Random()
        self.question_count = question_count
        self.duration_seconds = duration_seconds
        self._tick_interval = tick_interval
        self._on_finish = on_finish

        self._lock = threading.RLock()
        self._state = ExamState()
        self._questions: List[Question] = []
        self._countdown: Optional[Countdown] = None
        self._result: Optional[ExamResult] = None
        # Bumped on every start/abandon so a cancelled countdown can never
        # tick a newer attempt.
        self._attempt = 0

    # ── queries ───────────────────────────────────────────────────────────

    @property
    def phase(self) -> ExamPhase:
        return self._state.phase

    @property
    def state(self) -> ExamState:
        """Snapshot of the attempt state."""
        with self._lock:
            return self._state.model_copy(deep=True)

    @property
    def questions(self) -> List[Question]:
        with self._lock:
            return list(self._questions)

    @property
    def current_question(self) -> Optional[Question]:
        with self._lock:
            if not self._questions:
                return None
            return self._questions[self._state.current_index]

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def result(self) -> Optional[ExamResult]:
        """The graded result of the last finished attempt."""
        return self._result

    def answers(self) -> Dict[str, bool]:
        with self._lock:
            return dict(self._state.user_answers)

    @property
    def timer_running(self) -> bool:
        return self._countdown is not None and self._countdown.active

    # ── transitions ───────────────────────────────────────────────────────

    def start(self) -> ExamState:
        """
        Sample a new attempt and start the countdown.

        Any attempt still in progress is discarded without a result.

        Raises:
            EmptyCatalogError: the question catalog is empty.
        """
        catalog = list(self._load_questions())
        if not catalog:
            raise EmptyCatalogError("No questions available to start an exam.")

        with self._lock:
            if self._state.phase == ExamPhase.IN_PROGRESS:
                logger.info("Exam in progress discarded by a new start")
            self._stop_countdown()

            size = min(self.question_count, len(catalog))
            self._questions = self._rng.sample(catalog, size)
            self._result = None
            self._attempt += 1
            attempt = self._attempt
            self._state = ExamState(
                question_ids=[q.id for q in self._questions],
                current_index=0,
                user_answers={},
                remaining_seconds=self.duration_seconds,
                phase=ExamPhase.IN_PROGRESS,
            )
            if self._tick_interval is not None:
                self._countdown = Countdown(lambda: self._tick(attempt), self._tick_interval)
                self._countdown.start()

            logger.info(f"Exam started: {size} questions, {self.duration_seconds}s")
            return self._state.model_copy(deep=True)

    def answer(self, question_id: str, value: bool) -> None:
        """Set or overwrite the answer to one sampled question."""
        with self._lock:
            self._require_in_progress("answer")
            if question_id not in self._state.question_ids:
                raise InvalidOperationError(f"Question {question_id} is not part of this exam.")
            self._state.user_answers[question_id] = bool(value)
            logger.debug(f"Answer saved: {question_id}={value}")

    def navigate(self, target) -> int:
        """
        Move the current pointer.

        Args:
            target: "next" / "previous" (or "prev"), or an absolute index.
                    The result is clamped to the sample; no wraparound.

        Returns:
            The new current index.
        """
        with self._lock:
            self._require_in_progress("navigate")
            if isinstance(target, str):
                step = _DIRECTIONS.get(target.lower())
                if step is None:
                    raise InvalidOperationError(f"Unknown navigation direction: {target!r}")
                index = self._state.current_index + step
            elif isinstance(target, int) and not isinstance(target, bool):
                index = target
            else:
                raise InvalidOperationError(f"Invalid navigation target: {target!r}")

            index = max(0, min(index, len(self._questions) - 1))
            self._state.current_index = index
            return index

    def finish(self) -> ExamResult:
        """
        Grade the attempt, record mistakes and log the result.

        Calling finish() again after the attempt is finished returns the
        same result without side effects.
        """
        with self._lock:
            if self._state.phase == ExamPhase.FINISHED and self._result is not None:
                return self._result
            self._require_in_progress("finish")
            return self._finish_locked()

    def tick(self) -> bool:
        """
        Advance the countdown by one second.

        Returns False once the attempt is no longer in progress, which also
        stops the background countdown. Reaching zero finishes the exam.
        """
        return self._tick(self._attempt)

    def _tick(self, attempt: int) -> bool:
        with self._lock:
            if attempt != self._attempt or self._state.phase != ExamPhase.IN_PROGRESS:
                return False
            self._state.remaining_seconds = max(0, self._state.remaining_seconds - 1)
            if self._state.remaining_seconds == 0:
                logger.info("Exam time is up, finishing automatically")
                self._finish_locked()
                return False
            return True

    def abandon(self) -> None:
        """Leave the exam: discard any attempt and stop the timer."""
        with self._lock:
            if self._state.phase == ExamPhase.IN_PROGRESS:
                logger.info(f"Exam abandoned with {self._state.answered_count} answers")
            self._stop_countdown()
            self._attempt += 1
            self._state = ExamState()
            self._questions = []
            self._result = None

    def close(self) -> None:
        """Stop the timer without touching state (app teardown)."""
        with self._lock:
            countdown, self._countdown = self._countdown, None
            self._attempt += 1
        # Joined outside the lock: the tick thread may be waiting for it.
        if countdown is not None:
            countdown.cancel(wait=True)

    # ── internals ─────────────────────────────────────────────────────────

    def _require_in_progress(self, operation: str) -> None:
        if self._state.phase != ExamPhase.IN_PROGRESS:
            raise InvalidOperationError(
                f"Cannot {operation}: exam is {self._state.phase.value}."
            )

    def _stop_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _finish_locked(self) -> ExamResult:
        self._state.phase = ExamPhase.FINISHED
        self._stop_countdown()

        records = grade_answers(self._questions, self._state.user_answers)
        score = calculate_score(records)
        total = len(records)
        for r in records:
            if not r.correct:
                self._mistakes.record(r.question_id)

        result = ExamResult(
            user_id=self._user_id_provider() or "",
            score=score,
            total=total,
            passed=is_passed(score, total),
            answers=records,
            time_spent=self.duration_seconds - self._state.remaining_seconds,
        )
        self._results.append(result)
        self._result = result
        logger.info(
            f"Exam finished: score={score}/{total}, passed={result.passed}, "
            f"time_spent={result.time_spent}s"
        )

        if self._on_finish is not None:
            self._on_finish(result)
        return result
