"""
models/content.py

Read-only content catalog models: lessons, sections, signs, questions and
glossary entries. Pydantic v2, frozen: the core never mutates content.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

Difficulty = Literal["easy", "medium", "hard"]
SignCategory = Literal["warning", "prohibition", "obligation", "information"]


class Section(BaseModel):
    """A group of lessons (e.g. traffic signals, road rules, safety)."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    icon: str = ""
    image_url: Optional[str] = None
    order: int = 0

    model_config = {"frozen": True}


class Lesson(BaseModel):
    """A single theory lesson."""

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, description="Lesson title (learner language)")
    title_it: str = Field(..., min_length=1, description="Italian title")
    category: str = ""
    section_id: Optional[str] = None
    content: str = ""
    example: str = ""
    image_url: Optional[str] = None
    order: int = 0

    model_config = {"frozen": True}


class Sign(BaseModel):
    """A traffic sign reference entry."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    name_it: str = Field(..., min_length=1)
    category: SignCategory
    description: str = ""
    real_example: str = ""
    image_emoji: str = ""
    image_url: Optional[str] = None

    model_config = {"frozen": True}


class GlossaryItem(BaseModel):
    id: str = Field(..., min_length=1)
    term_it: str = Field(..., min_length=1)
    term_ar: str = Field(..., min_length=1)
    example: str = ""
    category: str = ""

    model_config = {"frozen": True}


class Question(BaseModel):
    """
    True/false theory question.

    `answer` is the correct boolean (Vero = True, Falso = False).
    """

    id: str = Field(
        ...,
        min_length=1,
        description="Question identifier"
    )
    text_it: str = Field(
        ...,
        description="Prompt in Italian"
    )
    text_ar: str = Field(
        ...,
        description="Prompt in the learner's language"
    )
    answer: bool = Field(
        ...,
        description="Correct answer"
    )
    explanation: str = Field(
        default="",
        description="Why the answer is what it is"
    )
    category: str = Field(
        default="",
        description="Topic label used for the per-category breakdown"
    )
    difficulty: Difficulty = "medium"
    lesson_id: Optional[str] = None
    sign_id: Optional[str] = None
    image_url: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("text_it", "text_ar")
    @classmethod
    def validate_prompt_not_blank(cls, v: str) -> str:
        """A prompt made only of whitespace cannot be shown to a learner."""
        if not v.strip():
            raise ValueError("Question prompt must not be blank.")
        return v
