"""Tests for the timed exam state machine."""
import random
import threading

import pytest

from driving_theory.exceptions import EmptyCatalogError, InvalidOperationError
from driving_theory.models.session_state import ExamPhase
from driving_theory.services.exam_log import ExamResultLog
from driving_theory.services.exam_session import (
    EXAM_DURATION_SECONDS, EXAM_QUESTION_COUNT, ExamSession,
)
from driving_theory.services.mistake_tracker import MistakeTracker

from conftest import answer_correctly, make_question


class TestStart:
    """Sampling and reset on start()."""

    def test_start_samples_twenty_distinct_questions(self, session, questions):
        """Catalog of 30 gives 20 unique questions drawn from it."""
        state = session.start()

        assert len(state.question_ids) == EXAM_QUESTION_COUNT
        assert len(set(state.question_ids)) == EXAM_QUESTION_COUNT
        assert set(state.question_ids) <= {q.id for q in questions}

    def test_start_resets_state(self, session):
        """Fresh attempt: pointer 0, no answers, full timer, in progress."""
        state = session.start()

        assert state.current_index == 0
        assert state.user_answers == {}
        assert state.remaining_seconds == EXAM_DURATION_SECONDS
        assert state.phase == ExamPhase.IN_PROGRESS

    def test_small_catalog_uses_all_questions(self, tracker, exam_log, rng):
        """Fewer than 20 questions: the whole catalog is sampled."""
        small = [make_question(i) for i in range(7)]
        s = ExamSession(lambda: small, tracker, exam_log, rng=rng, tick_interval=None)

        state = s.start()

        assert sorted(state.question_ids) == sorted(q.id for q in small)

    def test_empty_catalog_raises(self, tracker, exam_log):
        """No questions: EmptyCatalogError and no attempt."""
        s = ExamSession(lambda: [], tracker, exam_log, tick_interval=None)

        with pytest.raises(EmptyCatalogError):
            s.start()
        assert s.phase == ExamPhase.NOT_STARTED

    def test_seeded_rng_gives_same_sample(self, questions, tracker, exam_log):
        """Same seed, same sample and order."""
        a = ExamSession(lambda: questions, tracker, exam_log, rng=random.Random(7), tick_interval=None)
        b = ExamSession(lambda: questions, MistakeTracker(), ExamResultLog(), rng=random.Random(7), tick_interval=None)

        assert a.start().question_ids == b.start().question_ids

    def test_sample_fixed_during_attempt(self, session):
        """Navigating back and forth does not reshuffle."""
        ids = session.start().question_ids
        session.navigate(5)
        session.navigate(0)

        assert session.state.question_ids == ids

    def test_restart_discards_attempt_without_result(self, session, exam_log):
        """Starting again mid-attempt produces no ExamResult."""
        session.start()
        answer_correctly(session, 20)
        session.start()

        assert len(exam_log) == 0
        assert session.state.user_answers == {}


class TestAnswer:
    """answer() rules."""

    def test_answer_can_be_changed(self, session):
        """Last answer wins."""
        session.start()
        qid = session.questions[0].id

        session.answer(qid, True)
        session.answer(qid, False)

        assert session.answers() == {qid: False}

    def test_answer_unknown_question_rejected(self, session):
        """Question outside the sample is rejected and nothing changes."""
        session.start()
        sampled = set(session.state.question_ids)
        outside = next(f"q{i}" for i in range(30) if f"q{i}" not in sampled)

        with pytest.raises(InvalidOperationError):
            session.answer(outside, True)
        assert session.answers() == {}

    def test_answer_before_start_rejected(self, session):
        with pytest.raises(InvalidOperationError):
            session.answer("q1", True)

    def test_answer_after_finish_rejected(self, session):
        session.start()
        session.finish()

        with pytest.raises(InvalidOperationError):
            session.answer(session.questions[0].id, True)

    def test_answer_does_not_touch_mistakes(self, session, tracker):
        """Wrong answers are only recorded on finish."""
        session.start()
        q = session.questions[0]
        session.answer(q.id, not q.answer)

        assert tracker.count() == 0


class TestNavigate:
    """Pointer movement and clamping."""

    def test_next_and_previous(self, session):
        session.start()

        assert session.navigate("next") == 1
        assert session.navigate("next") == 2
        assert session.navigate("previous") == 1

    def test_clamped_at_bounds(self, session):
        """No wraparound at either end."""
        session.start()

        assert session.navigate("prev") == 0
        assert session.navigate(100) == 19
        assert session.navigate("next") == 19
        assert session.navigate(-4) == 0

    def test_unknown_direction_rejected(self, session):
        session.start()

        with pytest.raises(InvalidOperationError):
            session.navigate("sideways")
        assert session.state.current_index == 0

    def test_navigate_requires_in_progress(self, session):
        with pytest.raises(InvalidOperationError):
            session.navigate(1)

    def test_current_question_follows_pointer(self, session):
        session.start()
        session.navigate(3)

        assert session.current_question == session.questions[3]


class TestFinish:
    """Grading on finish()."""

    def test_scenario_sixteen_correct_with_two_unanswered(self, session, tracker, exam_log):
        """16 right, 2 wrong, 2 blank, 500 s left -> 16/20 passed, 1300 s, 4 mistakes."""
        session.start()
        answer_correctly(session, 16, skip=2)
        for _ in range(EXAM_DURATION_SECONDS - 500):
            session.tick()

        result = session.finish()

        assert result.score == 16
        assert result.total == 20
        assert result.passed is True
        assert result.time_spent == 1300
        assert tracker.count() == 4
        assert exam_log.all() == [result]

    def test_fifteen_correct_fails(self, session):
        session.start()
        answer_correctly(session, 15)

        result = session.finish()

        assert result.score == 15
        assert result.passed is False

    def test_unanswered_false_question_is_incorrect(self, tracker, exam_log, rng):
        """A blank answer never matches, even when the answer is False."""
        qs = [make_question(i, answer=False) for i in range(5)]
        s = ExamSession(lambda: qs, tracker, exam_log, rng=rng, tick_interval=None)
        s.start()

        result = s.finish()

        assert result.score == 0
        assert all(a.user_answer is None and not a.correct for a in result.answers)
        assert tracker.count() == 5

    def test_incorrect_recorded_correct_not_added(self, session, tracker):
        """Every wrong id lands in the tracker; right ones are not added."""
        session.start()
        answer_correctly(session, 10)

        result = session.finish()

        wrong = {a.question_id for a in result.answers if not a.correct}
        right = {a.question_id for a in result.answers if a.correct}
        assert set(tracker.ids()) == wrong
        assert not right & set(tracker.ids())

    def test_correct_answer_keeps_prior_mistake(self, session, tracker):
        """A question already in the tracker stays there after a correct exam answer."""
        session.start()
        q = session.questions[0]
        tracker.record(q.id)
        answer_correctly(session, 20)

        session.finish()

        assert tracker.contains(q.id)

    def test_result_stamped_with_learner(self, session):
        session.start()

        assert session.finish().user_id == "learner-1"

    def test_missing_learner_gives_empty_user_id(self, questions, tracker, exam_log, rng):
        s = ExamSession(lambda: questions, tracker, exam_log, user_id_provider=lambda: None,
                        rng=rng, tick_interval=None)
        s.start()

        assert s.finish().user_id == ""

    def test_second_finish_is_noop(self, session, exam_log):
        """finish() twice: one result, same object."""
        session.start()
        first = session.finish()
        second = session.finish()

        assert first is second
        assert len(exam_log) == 1

    def test_finish_before_start_rejected(self, session):
        with pytest.raises(InvalidOperationError):
            session.finish()

    def test_on_finish_callback(self, questions, tracker, exam_log, rng):
        seen = []
        s = ExamSession(lambda: questions, tracker, exam_log, rng=rng,
                        tick_interval=None, on_finish=seen.append)
        s.start()
        result = s.finish()

        assert seen == [result]

    def test_retake_after_finish(self, session, exam_log):
        """Finished -> start() begins a new attempt."""
        session.start()
        session.finish()
        state = session.start()

        assert state.phase == ExamPhase.IN_PROGRESS
        assert session.result is None
        assert len(exam_log) == 1


class TestTimer:
    """Countdown behaviour."""

    def test_tick_decrements(self, session):
        session.start()
        session.tick()
        session.tick()

        assert session.remaining_seconds == EXAM_DURATION_SECONDS - 2

    def test_expiry_finishes_exactly_once(self, questions, tracker, exam_log, rng):
        """Reaching zero grades once; later ticks do nothing."""
        finished = []
        s = ExamSession(lambda: questions, tracker, exam_log, rng=rng, duration_seconds=3,
                        tick_interval=None, on_finish=finished.append)
        s.start()

        assert s.tick() is True
        assert s.tick() is True
        assert s.tick() is False

        assert s.phase == ExamPhase.FINISHED
        assert len(finished) == 1
        assert finished[0].time_spent == 3

        assert s.tick() is False
        assert s.remaining_seconds == 0
        assert len(exam_log) == 1

    def test_finish_after_expiry_is_noop(self, questions, tracker, exam_log, rng):
        s = ExamSession(lambda: questions, tracker, exam_log, rng=rng, duration_seconds=1,
                        tick_interval=None)
        s.start()
        s.tick()

        s.finish()

        assert len(exam_log) == 1

    def test_tick_after_explicit_finish_stops(self, session):
        session.start()
        session.finish()
        left = session.remaining_seconds

        assert session.tick() is False
        assert session.remaining_seconds == left

    def test_abandon_discards_attempt(self, session, exam_log, tracker):
        session.start()
        answer_correctly(session, 5)

        session.abandon()

        assert session.phase == ExamPhase.NOT_STARTED
        assert session.tick() is False
        assert len(exam_log) == 0
        assert tracker.count() == 0

    def test_background_countdown_expires(self, questions, tracker, exam_log, rng):
        """Real thread with a tiny interval finishes the exam and stops."""
        done = threading.Event()
        s = ExamSession(lambda: questions, tracker, exam_log, rng=rng, duration_seconds=3,
                        tick_interval=0.01, on_finish=lambda r: done.set())
        s.start()

        assert done.wait(timeout=5)
        assert s.phase == ExamPhase.FINISHED
        assert len(exam_log) == 1
        assert s.timer_running is False

    def test_explicit_finish_cancels_countdown(self, questions, tracker, exam_log, rng):
        s = ExamSession(lambda: questions, tracker, exam_log, rng=rng, tick_interval=0.01)
        s.start()
        s.finish()
        s.close()

        assert s.timer_running is False
        assert len(exam_log) == 1
