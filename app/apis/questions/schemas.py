from __future__ import annotations

from pydantic import BaseModel, Field

from app.apis.sessions.schemas import CamelModel, QuestionRead
from app.modules.interview.models import QuestionAnswer


class AddQuestionsRequest(CamelModel):
    session_id: int
    questions: list[QuestionAnswer] = Field(..., min_length=1)


class NoteUpdate(BaseModel):
    note: str = ""


class QuestionEnvelope(BaseModel):
    success: bool = True
    question: QuestionRead
