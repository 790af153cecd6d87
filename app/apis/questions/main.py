from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db.base import get_session
from app.core.db.schemas.auth import User
from app.core.db_services import InterviewSessionService
from app.modules.auth import current_active_user
from app.apis.sessions.schemas import QuestionRead
from .schemas import AddQuestionsRequest, NoteUpdate, QuestionEnvelope


router = APIRouter(prefix="/api/questions", tags=["questions"])

CurrentUser = Annotated[User, Depends(current_active_user)]


@router.post(
    "/add",
    response_model=list[QuestionRead],
    status_code=status.HTTP_201_CREATED,
)
async def add_questions_to_session(
    req: AddQuestionsRequest,
    user: CurrentUser,
    session: AsyncSession = Depends(get_session),
) -> list[QuestionRead]:
    """Append generated questions to one of the caller's sessions."""
    db = InterviewSessionService(session)
    record = await db.get_session_for_user(req.session_id, user.id)
    if not record:
        raise HTTPException(status_code=404, detail="Session not found")
    created = await db.add_questions(record, req.questions)
    return [QuestionRead.model_validate(q) for q in created]


@router.post("/{question_id:int}/pin", response_model=QuestionEnvelope)
async def toggle_pin_question(
    question_id: int,
    user: CurrentUser,
    session: AsyncSession = Depends(get_session),
) -> QuestionEnvelope:
    db = InterviewSessionService(session)
    question = await db.get_question_for_user(question_id, user.id)
    if not question:
        raise HTTPException(status_code=404, detail="Question not found")
    question = await db.toggle_pin(question)
    return QuestionEnvelope(question=QuestionRead.model_validate(question))


@router.post("/{question_id:int}/note", response_model=QuestionEnvelope)
async def update_question_note(
    question_id: int,
    req: NoteUpdate,
    user: CurrentUser,
    session: AsyncSession = Depends(get_session),
) -> QuestionEnvelope:
    db = InterviewSessionService(session)
    question = await db.get_question_for_user(question_id, user.id)
    if not question:
        raise HTTPException(status_code=404, detail="Question not found")
    question = await db.update_note(question, req.note)
    return QuestionEnvelope(question=QuestionRead.model_validate(question))
