"""
services/content_repository.py

Read-only access to the seeded content catalog.
"""

from typing import Iterable, List, Optional

from driving_theory.exceptions import UnknownContentError
from driving_theory.models.content import GlossaryItem, Lesson, Question, Section, Sign


class ContentRepository:
    def __init__(
        self,
        lessons: Iterable[Lesson] = (),
        signs: Iterable[Sign] = (),
        questions: Iterable[Question] = (),
        sections: Iterable[Section] = (),
        glossary: Iterable[GlossaryItem] = (),
    ) -> None:
        self._lessons = sorted(lessons, key=lambda l: l.order)
        self._signs = list(signs)
        self._questions = list(questions)
        self._sections = sorted(sections, key=lambda s: s.order)
        self._glossary = list(glossary)

        ids = [q.id for q in self._questions]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate question ids in content catalog.")

    def list_lessons(self) -> List[Lesson]:
        return list(self._lessons)

    def list_signs(self) -> List[Sign]:
        return list(self._signs)

    def list_questions(self) -> List[Question]:
        return list(self._questions)

    def list_sections(self) -> List[Section]:
        return list(self._sections)

    def list_glossary(self) -> List[GlossaryItem]:
        return list(self._glossary)

    def find_question(self, question_id: str) -> Optional[Question]:
        return next((q for q in self._questions if q.id == question_id), None)

    def get_question(self, question_id: str) -> Question:
        q = self.find_question(question_id)
        if q is None:
            raise UnknownContentError(f"Question {question_id} not found.")
        return q

    def get_lesson(self, lesson_id: str) -> Lesson:
        lesson = next((l for l in self._lessons if l.id == lesson_id), None)
        if lesson is None:
            raise UnknownContentError(f"Lesson {lesson_id} not found.")
        return lesson

    def questions_for_lesson(self, lesson_id: str) -> List[Question]:
        return [q for q in self._questions if q.lesson_id == lesson_id]

    def lessons_in_section(self, section_id: str) -> List[Lesson]:
        return [l for l in self._lessons if l.section_id == section_id]
