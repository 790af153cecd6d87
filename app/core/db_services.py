"""Database service classes for interview sessions and their questions."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from app.core.db.schemas.interview import InterviewSession, Question
from app.modules.interview.models import QuestionAnswer


class InterviewSessionService:
    """Service for managing interview sessions and questions in the database."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_session(
        self,
        user_id: int,
        role: str,
        experience: str,
        topics_to_focus: str,
        description: Optional[str] = None,
        questions: Iterable[QuestionAnswer] = (),
    ) -> InterviewSession:
        """Create a session together with its initial questions."""
        record = InterviewSession(
            user_id=user_id,
            role=role,
            experience=experience,
            topics_to_focus=topics_to_focus,
            description=description,
        )
        record.questions = [
            Question(question=q.question, answer=q.answer) for q in questions
        ]

        self.session.add(record)
        await self.session.commit()
        return await self.get_session_for_user(record.id, user_id)

    async def list_sessions(self, user_id: int) -> Sequence[InterviewSession]:
        result = await self.session.execute(
            select(InterviewSession)
            .options(selectinload(InterviewSession.questions))
            .where(InterviewSession.user_id == user_id)
            .order_by(InterviewSession.created_at.desc(), InterviewSession.id.desc())
        )
        return result.scalars().all()

    async def get_session_for_user(
        self, session_id: int, user_id: int
    ) -> Optional[InterviewSession]:
        result = await self.session.execute(
            select(InterviewSession)
            .options(selectinload(InterviewSession.questions))
            .where(
                InterviewSession.id == session_id,
                InterviewSession.user_id == user_id,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_session(self, session_id: int) -> Optional[InterviewSession]:
        result = await self.session.execute(
            select(InterviewSession).where(InterviewSession.id == session_id)
        )
        return result.scalar_one_or_none()

    async def delete_session(self, record: InterviewSession) -> None:
        """Delete the session's questions first, then the session itself."""
        await self.session.execute(
            delete(Question).where(Question.session_id == record.id)
        )
        await self.session.delete(record)
        await self.session.commit()

    async def add_questions(
        self,
        record: InterviewSession,
        questions: Iterable[QuestionAnswer],
    ) -> list[Question]:
        created = [
            Question(session_id=record.id, question=q.question, answer=q.answer)
            for q in questions
        ]
        self.session.add_all(created)
        await self.session.commit()
        for q in created:
            await self.session.refresh(q)
        return created

    async def get_question_for_user(
        self, question_id: int, user_id: int
    ) -> Optional[Question]:
        result = await self.session.execute(
            select(Question)
            .join(InterviewSession, Question.session_id == InterviewSession.id)
            .where(Question.id == question_id, InterviewSession.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def toggle_pin(self, question: Question) -> Question:
        question.is_pinned = not question.is_pinned
        await self.session.commit()
        await self.session.refresh(question)
        return question

    async def update_note(self, question: Question, note: str) -> Question:
        question.note = note
        await self.session.commit()
        await self.session.refresh(question)
        return question
