"""Interview content generation: prompt, call, normalize."""

from __future__ import annotations

from typing import Any, Protocol

from app.core.logging import get_logger
from app.modules.interview.errors import UpstreamEmptyError
from app.modules.interview.models import QuestionsResult
from app.modules.interview.normalizer import (
    decode_questions,
    explanation_body,
    extract_text,
)
from app.modules.interview.prompts import (
    build_concept_explanation_prompt,
    build_question_answer_prompt,
)


logger = get_logger(__name__)


class SupportsGenerate(Protocol):
    async def generate(self, prompt: str) -> Any: ...


class InterviewGenerator:
    """Runs the generation pipeline against an injected client."""

    def __init__(self, client: SupportsGenerate) -> None:
        self.client = client

    async def _complete(self, prompt: str) -> str:
        response = await self.client.generate(prompt)
        text = extract_text(response)
        if not text:
            raise UpstreamEmptyError()
        return text

    async def generate_questions(
        self,
        role: str,
        experience: int | str,
        topics_to_focus: str,
        number_of_questions: int,
    ) -> QuestionsResult:
        logger.info("Generating %s interview questions for %s", number_of_questions, role)
        prompt = build_question_answer_prompt(
            role, experience, topics_to_focus, number_of_questions
        )
        text = await self._complete(prompt)
        return decode_questions(text)

    async def generate_explanation(self, question: str) -> dict[str, str]:
        logger.info("Generating concept explanation")
        prompt = build_concept_explanation_prompt(question)
        text = await self._complete(prompt)
        return explanation_body(text)
