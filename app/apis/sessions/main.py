from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db.base import get_session
from app.core.db.schemas.auth import User
from app.core.db.schemas.interview import InterviewSession
from app.core.db_services import InterviewSessionService
from app.core.logging import get_logger
from app.modules.auth import current_active_user
from .schemas import (
    MessageResponse,
    QuestionRead,
    SessionCreate,
    SessionEnvelope,
    SessionRead,
)


router = APIRouter(prefix="/api/sessions", tags=["sessions"])

logger = get_logger(__name__)

CurrentUser = Annotated[User, Depends(current_active_user)]


def _to_read(record: InterviewSession, *, pinned_first: bool = False) -> SessionRead:
    questions = list(record.questions or [])
    if pinned_first:
        questions.sort(key=lambda q: (not q.is_pinned, q.created_at, q.id))
    out = SessionRead.model_validate(record)
    out.questions = [QuestionRead.model_validate(q) for q in questions]
    return out


@router.post(
    "/create",
    response_model=SessionEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    req: SessionCreate,
    user: CurrentUser,
    session: AsyncSession = Depends(get_session),
) -> SessionEnvelope:
    """Create a session and its linked questions."""
    db = InterviewSessionService(session)
    record = await db.create_session(
        user_id=user.id,
        role=req.role,
        experience=req.experience,
        topics_to_focus=req.topics_to_focus,
        description=req.description,
        questions=req.questions,
    )
    logger.info(f"Session {record.id} created with {len(req.questions)} questions")
    return SessionEnvelope(session=_to_read(record))


@router.get("/my-sessions", response_model=list[SessionRead])
async def get_my_sessions(
    user: CurrentUser,
    session: AsyncSession = Depends(get_session),
) -> list[SessionRead]:
    db = InterviewSessionService(session)
    records = await db.list_sessions(user.id)
    return [_to_read(r) for r in records]


@router.get("/{session_id:int}", response_model=SessionEnvelope)
async def get_session_by_id(
    session_id: int,
    user: CurrentUser,
    session: AsyncSession = Depends(get_session),
) -> SessionEnvelope:
    """Session with its questions, pinned ones first."""
    db = InterviewSessionService(session)
    record = await db.get_session_for_user(session_id, user.id)
    if not record:
        raise HTTPException(status_code=404, detail="Session not found")
    return SessionEnvelope(session=_to_read(record, pinned_first=True))


@router.delete("/{session_id:int}", response_model=MessageResponse)
async def delete_session(
    session_id: int,
    user: CurrentUser,
    session: AsyncSession = Depends(get_session),
) -> MessageResponse:
    db = InterviewSessionService(session)
    record = await db.get_session(session_id)
    if not record:
        raise HTTPException(status_code=404, detail="Session not found")
    if record.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized to delete this session",
        )
    await db.delete_session(record)
    return MessageResponse(message="Session deleted successfully")
