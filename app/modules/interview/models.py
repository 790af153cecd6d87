"""Pydantic models for generated interview content."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, TypeAdapter


class QuestionAnswer(BaseModel):
    """Single generated question with its answer."""

    question: str
    answer: str


class ConceptExplanation(BaseModel):
    title: str | None = None
    explanation: str


QuestionAnswerList = TypeAdapter(list[QuestionAnswer])


class QuestionsResult(BaseModel):
    """Outcome of decoding a questions completion.

    ``structured``: JSON that validates as a list of question/answer pairs.
    ``unvalidated``: JSON of some other shape, passed through untouched.
    ``raw``: not JSON at all; the text is wrapped under ``result``.
    """

    kind: Literal["structured", "unvalidated", "raw"]
    raw_text: str
    data: Any = None
    items: list[QuestionAnswer] = Field(default_factory=list)

    @property
    def body(self) -> Any:
        if self.kind == "raw":
            return {"result": self.raw_text}
        return self.data
