"""
api/routes.py — FastAPI endpoints
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from api.session import LearnerSession
from driving_theory.exceptions import EmptyCatalogError, InvalidOperationError, UnknownContentError
from driving_theory.models.content import Question
from driving_theory.models.exam_result import ExamResult
from driving_theory.models.session_state import ExamPhase
from driving_theory.services.readiness import readiness_level
from driving_theory.services.study_service import StudyService

logger = logging.getLogger(__name__)

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class SaveAnswerBody(BaseModel):
    question_id: str
    answer: bool

class NavigateBody(BaseModel):
    index: Optional[int] = None
    direction: Optional[str] = None

class LearnerBody(BaseModel):
    user_id: str


# ── Helpers ──────────────────────────────────────────────────────────────────

def get_service(request: Request) -> StudyService:
    return request.app.state.service


def get_learner(request: Request) -> LearnerSession:
    return request.app.state.learner


def _question_to_dict(q: Question, reveal: bool = True) -> dict:
    d = {
        "id": q.id,
        "text_it": q.text_it,
        "text_ar": q.text_ar,
        "category": q.category,
        "difficulty": q.difficulty,
        "lesson_id": q.lesson_id,
        "sign_id": q.sign_id,
        "image_url": q.image_url,
    }
    if reveal:
        d["answer"] = q.answer
        d["explanation"] = q.explanation
    return d


def _result_to_dict(r: ExamResult) -> dict:
    d = r.model_dump(mode="json")
    d["percentage"] = r.percentage
    return d


def _bad_request(e: Exception) -> HTTPException:
    logger.warning(f"Rejected request: {e}")
    return HTTPException(status_code=400, detail=str(e))


def _not_found(e: Exception) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))


# ── Content ──────────────────────────────────────────────────────────────────

@router.get("/api/content-summary")
async def content_summary(service: StudyService = Depends(get_service)):
    c = service.content
    return {
        "lessons": len(c.list_lessons()),
        "signs": len(c.list_signs()),
        "questions": len(c.list_questions()),
        "sections": len(c.list_sections()),
        "glossary": len(c.list_glossary()),
    }


@router.get("/api/questions/{question_id}/explanation")
async def question_explanation(question_id: str, service: StudyService = Depends(get_service)):
    try:
        return {"question_id": question_id, "explanation": service.explain(question_id)}
    except UnknownContentError as e:
        raise _not_found(e)


@router.get("/api/lessons/{lesson_id}/questions")
async def lesson_questions(lesson_id: str, service: StudyService = Depends(get_service)):
    try:
        service.content.get_lesson(lesson_id)
    except UnknownContentError as e:
        raise _not_found(e)
    return [_question_to_dict(q) for q in service.content.questions_for_lesson(lesson_id)]


@router.post("/api/lessons/{lesson_id}/complete")
async def complete_lesson(lesson_id: str, service: StudyService = Depends(get_service)):
    try:
        added = service.complete_lesson(lesson_id)
    except UnknownContentError as e:
        raise _not_found(e)
    return {"ok": True, "newly_completed": added, "completed": service.completed_lessons()}


# ── Exam ─────────────────────────────────────────────────────────────────────

@router.post("/api/start-exam")
async def start_exam(service: StudyService = Depends(get_service)):
    try:
        state = service.start_exam()
    except EmptyCatalogError as e:
        raise _bad_request(e)
    return {"total": len(state.question_ids), "remaining_seconds": state.remaining_seconds, "ok": True}


@router.post("/api/abandon-exam")
async def abandon_exam(service: StudyService = Depends(get_service)):
    service.abandon_exam()
    return {"ok": True}


@router.get("/api/exam-state")
async def get_exam_state(service: StudyService = Depends(get_service)):
    state = service.exam_state()
    return {
        "phase": state.phase.value,
        "current_index": state.current_index,
        "user_answers": state.user_answers,
        "remaining_seconds": state.remaining_seconds,
        "total": len(state.question_ids),
        "answered_count": state.answered_count,
        "question_ids": state.question_ids,
    }


@router.get("/api/question/{index}")
async def get_question(index: int, service: StudyService = Depends(get_service)):
    questions = service.exam.questions
    if not questions or not (0 <= index < len(questions)):
        raise HTTPException(status_code=404, detail="Question not found.")

    state = service.exam_state()
    q = questions[index]
    d = _question_to_dict(q, reveal=state.phase == ExamPhase.FINISHED)
    d.update({
        "saved_answer": state.user_answers.get(q.id),
        "index": index,
        "total": len(questions),
    })
    return d


@router.post("/api/save-answer")
async def save_answer(body: SaveAnswerBody, service: StudyService = Depends(get_service)):
    try:
        service.answer(body.question_id, body.answer)
    except InvalidOperationError as e:
        raise _bad_request(e)
    return {"ok": True, "answered_count": service.exam_state().answered_count}


@router.post("/api/navigate")
async def navigate(body: NavigateBody, service: StudyService = Depends(get_service)):
    target: Union[int, str, None] = body.index if body.index is not None else body.direction
    if target is None:
        raise HTTPException(status_code=400, detail="Give an index or a direction.")
    try:
        idx = service.navigate(target)
    except InvalidOperationError as e:
        raise _bad_request(e)
    return {"index": idx, "ok": True}


@router.post("/api/submit-exam")
async def submit_exam(service: StudyService = Depends(get_service)):
    try:
        result = service.finish_exam()
    except InvalidOperationError as e:
        raise _bad_request(e)
    return {"score": result.score, "total": result.total, "passed": result.passed, "ok": True}


@router.get("/api/results")
async def get_results(service: StudyService = Depends(get_service)):
    report = service.exam_report()
    if report is None:
        raise HTTPException(status_code=404, detail="No finished exam.")
    result: ExamResult = report["result"]
    return {
        **_result_to_dict(result),
        "correct_count": result.score,
        "incorrect_count": report["incorrect_count"],
        "unanswered_count": report["unanswered_count"],
        "category_scores": report["category_scores"],
        "review": report["review"],
    }


@router.get("/api/exam-history")
async def exam_history(service: StudyService = Depends(get_service)):
    return [_result_to_dict(r) for r in service.exam_history()]


# ── Progress ─────────────────────────────────────────────────────────────────

@router.get("/api/readiness")
async def readiness(service: StudyService = Depends(get_service)):
    score = service.get_readiness()
    return {"score": score, "level": readiness_level(score)}


@router.get("/api/progress")
async def progress(service: StudyService = Depends(get_service)):
    return service.get_progress().model_dump()


@router.get("/api/daily-plan")
async def daily_plan(service: StudyService = Depends(get_service)):
    plan = service.get_daily_plan()
    sign = plan.sign_of_the_day
    return {
        "lessons_today": plan.lessons_today,
        "questions_today": plan.questions_today,
        "sign_of_the_day": sign.model_dump() if sign else None,
    }


# ── Mistakes ─────────────────────────────────────────────────────────────────

@router.get("/api/mistakes")
async def list_mistakes(service: StudyService = Depends(get_service)):
    questions = service.mistake_questions()
    return {"count": len(questions), "questions": [_question_to_dict(q) for q in questions]}


@router.post("/api/mistakes/{question_id}")
async def record_mistake(question_id: str, service: StudyService = Depends(get_service)):
    try:
        added = service.record_mistake(question_id)
    except UnknownContentError as e:
        raise _not_found(e)
    return {"ok": True, "added": added, "count": service.mistakes.count()}


@router.delete("/api/mistakes/{question_id}")
async def clear_mistake(question_id: str, service: StudyService = Depends(get_service)):
    removed = service.clear_mistake(question_id)
    return {"ok": True, "removed": removed, "count": service.mistakes.count()}


# ── Practice ─────────────────────────────────────────────────────────────────

@router.get("/api/practice/questions")
async def practice_questions(count: int = 10, service: StudyService = Depends(get_service)):
    if count <= 0:
        raise HTTPException(status_code=400, detail="count must be positive.")
    return [_question_to_dict(q, reveal=False) for q in service.practice_questions(count)]


@router.post("/api/practice/answer")
async def practice_answer(body: SaveAnswerBody, service: StudyService = Depends(get_service)):
    try:
        outcome = service.answer_practice(body.question_id, body.answer)
    except UnknownContentError as e:
        raise _not_found(e)
    return outcome.model_dump()


@router.get("/api/practice/sign-quiz")
async def sign_quiz(service: StudyService = Depends(get_service)):
    try:
        quiz = service.sign_quiz()
    except InvalidOperationError as e:
        raise _bad_request(e)
    return {
        "target_id": quiz.target.id,
        "image_emoji": quiz.target.image_emoji,
        "name_it": quiz.target.name_it,
        "options": [{"id": s.id, "name": s.name} for s in quiz.options],
    }


# ── Learner ──────────────────────────────────────────────────────────────────

@router.get("/api/learner")
async def get_current_learner(learner: LearnerSession = Depends(get_learner)):
    return {"user_id": learner.current_user_id()}


@router.post("/api/learner")
async def set_current_learner(body: LearnerBody, learner: LearnerSession = Depends(get_learner)):
    learner.set_user(body.user_id)
    return {"ok": True, "user_id": learner.current_user_id()}
