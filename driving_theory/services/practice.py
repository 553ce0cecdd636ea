"""
services/practice.py

Untimed practice modes: true/false drill, "understand the question" drill,
lesson question checks and the sign quiz.

Each question is graded on submission. A wrong answer is recorded as a
mistake; a right answer never clears an existing one.
"""

import logging
import random
from typing import List, Optional, Sequence

from pydantic import BaseModel

from driving_theory.exceptions import InvalidOperationError
from driving_theory.models.content import Question, Sign
from driving_theory.services.mistake_tracker import MistakeTracker

logger = logging.getLogger(__name__)

PRACTICE_QUESTION_COUNT = 10
SIGN_QUIZ_OPTIONS = 4
_KEYWORD_MIN_LENGTH = 4
_KEYWORD_LIMIT = 5


class PracticeOutcome(BaseModel):
    question_id: str
    user_answer: bool
    correct: bool
    correct_answer: bool
    explanation: str
    mistake_recorded: bool


class SignQuiz(BaseModel):
    target: Sign
    options: List[Sign]


def check_practice_answer(
    question: Question,
    user_answer: bool,
    mistakes: MistakeTracker,
) -> PracticeOutcome:
    """Grade one practice answer and record a mistake on mismatch."""
    correct = question.answer == user_answer
    recorded = False
    if not correct:
        recorded = mistakes.record(question.id)
    logger.debug(f"Practice answer {question.id}: correct={correct}")
    return PracticeOutcome(
        question_id=question.id,
        user_answer=user_answer,
        correct=correct,
        correct_answer=question.answer,
        explanation=question.explanation,
        mistake_recorded=recorded,
    )


def draw_practice_questions(
    questions: Sequence[Question],
    rng: Optional[random.Random] = None,
    count: int = PRACTICE_QUESTION_COUNT,
) -> List[Question]:
    """Random selection without replacement, at most `count` questions."""
    rng = rng or random.Random()
    pool = list(questions)
    return rng.sample(pool, min(count, len(pool)))


def build_sign_quiz(
    signs: Sequence[Sign],
    target: Optional[Sign] = None,
    rng: Optional[random.Random] = None,
    option_count: int = SIGN_QUIZ_OPTIONS,
) -> SignQuiz:
    """
    One "which sign is this?" round: the target plus random distractors,
    shuffled together.
    """
    rng = rng or random.Random()
    pool = list(signs)
    if not pool:
        raise InvalidOperationError("The sign catalog is empty.")
    if target is None:
        target = rng.choice(pool)

    others = [s for s in pool if s.id != target.id]
    distractors = rng.sample(others, min(option_count - 1, len(others)))
    options = [target, *distractors]
    rng.shuffle(options)
    return SignQuiz(target=target, options=options)


def check_sign_choice(quiz: SignQuiz, chosen_sign_id: str) -> bool:
    if all(o.id != chosen_sign_id for o in quiz.options):
        raise InvalidOperationError(f"Sign {chosen_sign_id} is not one of the options.")
    return chosen_sign_id == quiz.target.id


def key_words(text: str, limit: int = _KEYWORD_LIMIT) -> List[str]:
    words = [w for w in text.split() if len(w) >= _KEYWORD_MIN_LENGTH]
    return words[:limit]


def explain_question(question: Question) -> str:
    """Coach-style explanation text for a question."""
    answer = "True (Vero)" if question.answer else "False (Falso)"
    words = "\n".join(f"- {w}" for w in key_words(question.text_it))
    return (
        "Your coach explains:\n\n"
        f"Question in Italian:\n\"{question.text_it}\"\n\n"
        f"Translation:\n\"{question.text_ar}\"\n\n"
        f"Correct answer: {answer}\n\n"
        f"Explanation:\n{question.explanation}\n\n"
        f"Key words:\n{words}\n\n"
        "Tip:\nRead the Italian sentence slowly and link the words you "
        "already know to their meaning."
    )
