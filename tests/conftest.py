"""Shared fixtures for the study core tests."""
import random

import pytest

from driving_theory.models.content import Lesson, Question, Sign
from driving_theory.models.exam_result import ExamAnswerRecord, ExamResult, is_passed
from driving_theory.services.content_repository import ContentRepository
from driving_theory.services.exam_log import ExamResultLog
from driving_theory.services.exam_session import ExamSession
from driving_theory.services.mistake_tracker import MistakeTracker


def make_question(i: int, answer: bool = True, category: str = "segnali", lesson_id=None) -> Question:
    return Question(
        id=f"q{i}",
        text_it=f"Domanda numero {i} sulla strada",
        text_ar=f"سؤال رقم {i}",
        answer=answer,
        explanation=f"Spiegazione {i}",
        category=category,
        lesson_id=lesson_id,
    )


def make_result(score: int, total: int = 20, user_id: str = "") -> ExamResult:
    answers = [
        ExamAnswerRecord(question_id=f"q{i}", user_answer=True, correct=i < score)
        for i in range(total)
    ]
    return ExamResult(
        user_id=user_id,
        score=score,
        total=total,
        passed=is_passed(score, total),
        answers=answers,
        time_spent=600,
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def questions():
    """30 questions, alternating correct answers, two categories."""
    return [
        make_question(i, answer=(i % 2 == 0), category="segnali" if i < 15 else "velocità")
        for i in range(30)
    ]


@pytest.fixture
def lessons():
    return [
        Lesson(id=str(i), title=f"درس {i}", title_it=f"Lezione {i}", order=i)
        for i in range(1, 5)
    ]


@pytest.fixture
def signs():
    return [
        Sign(id=f"s{i}", name=f"إشارة {i}", name_it=f"Segnale {i}", category="warning")
        for i in range(1, 7)
    ]


@pytest.fixture
def repository(questions, lessons, signs):
    return ContentRepository(lessons=lessons, signs=signs, questions=questions)


@pytest.fixture
def tracker():
    return MistakeTracker()


@pytest.fixture
def exam_log():
    return ExamResultLog()


@pytest.fixture
def session(questions, tracker, exam_log, rng):
    """Exam session without a background thread; tests call tick()."""
    return ExamSession(
        load_questions=lambda: questions,
        mistakes=tracker,
        results=exam_log,
        user_id_provider=lambda: "learner-1",
        rng=rng,
        tick_interval=None,
    )


def answer_correctly(session: ExamSession, how_many: int, skip: int = 0) -> None:
    """Answer the first `how_many` sampled questions right, leave `skip` unanswered, the rest wrong."""
    for n, q in enumerate(session.questions):
        if n < how_many:
            session.answer(q.id, q.answer)
        elif n < how_many + skip:
            continue
        else:
            session.answer(q.id, not q.answer)
