from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings


_MAX = settings.generation.prompt_field_max_length


class GenerateQuestionsRequest(BaseModel):
    """Every field is optional at the schema level; presence is checked by the
    handler so that a missing field is a 400, not a 422."""

    model_config = ConfigDict(populate_by_name=True)

    role: Optional[str] = Field(default=None, max_length=_MAX)
    experience: Optional[Union[int, float, Annotated[str, Field(max_length=_MAX)]]] = (
        Field(default=None)
    )
    topics_to_focus: Optional[str] = Field(
        default=None, alias="topicsToFocus", max_length=_MAX
    )
    number_of_questions: Optional[int] = Field(
        default=None, alias="numberOfQuestions", le=100
    )

    def is_complete(self) -> bool:
        # Zero or negative counts are treated like a missing count
        if not self.number_of_questions or self.number_of_questions < 1:
            return False
        return all([self.role, self.experience, self.topics_to_focus])


class GenerateExplanationRequest(BaseModel):
    question: Optional[str] = Field(default=None, max_length=_MAX)
