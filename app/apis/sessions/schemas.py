from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.modules.interview.models import QuestionAnswer


class CamelModel(BaseModel):
    """Snake case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class QuestionRead(CamelModel):
    id: int
    session_id: int
    question: str
    answer: str
    note: Optional[str] = None
    is_pinned: bool
    created_at: datetime
    updated_at: datetime


class SessionCreate(CamelModel):
    role: str = Field(..., min_length=1)
    experience: Union[int, float, str]
    topics_to_focus: str = Field(..., min_length=1)
    description: Optional[str] = None
    questions: list[QuestionAnswer] = Field(default_factory=list)

    @field_validator("experience")
    @classmethod
    def _experience_as_text(cls, v: Union[int, float, str]) -> str:
        text = str(v).strip()
        if not text:
            raise ValueError("experience must not be empty")
        return text


class SessionRead(CamelModel):
    id: int
    user_id: int
    role: str
    experience: str
    topics_to_focus: str
    description: Optional[str] = None
    questions: list[QuestionRead] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class SessionEnvelope(BaseModel):
    success: bool = True
    session: SessionRead


class MessageResponse(BaseModel):
    message: str
