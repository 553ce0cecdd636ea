"""
services/daily_plan.py

Today's study targets. Recomputed on every call; the sign of the day is
re-rolled each time rather than cached per calendar day.
"""

import random
from typing import Optional, Sequence

from pydantic import BaseModel

from driving_theory.models.content import Sign

LESSONS_PER_DAY = 2
QUESTIONS_PER_DAY = 10


class DailyPlan(BaseModel):
    lessons_today: int
    questions_today: int
    sign_of_the_day: Optional[Sign] = None


def build_daily_plan(
    completed_lessons: int,
    total_lessons: int,
    signs: Sequence[Sign],
    rng: Optional[random.Random] = None,
) -> DailyPlan:
    rng = rng or random.Random()
    remaining = max(0, total_lessons - completed_lessons)
    return DailyPlan(
        lessons_today=min(LESSONS_PER_DAY, remaining),
        questions_today=QUESTIONS_PER_DAY,
        sign_of_the_day=rng.choice(list(signs)) if signs else None,
    )
