"""Turn provider responses into response bodies.

The model is asked for JSON but nothing guarantees it complies, so decoding is
optimistic: strict JSON first, then a plain-text fallback.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from app.core.logging import get_logger
from app.modules.interview.models import QuestionAnswerList, QuestionsResult


logger = get_logger(__name__)


def _field(obj: Any, name: str) -> Any:
    # Envelopes are SDK objects in production and plain dicts in fixtures
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_text(response: Any) -> str:
    """Concatenate the text parts of the first candidate; ``""`` when absent."""
    try:
        candidates = _field(response, "candidates")
        if not candidates:
            return ""
        parts = _field(_field(candidates[0], "content"), "parts")
        if not parts:
            return ""
        return "".join(
            text for text in (_field(p, "text") for p in parts) if isinstance(text, str)
        )
    except (TypeError, IndexError, KeyError, AttributeError):
        return ""


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be rendered back out
    raise ValueError(f"non-standard JSON constant {name}")


def decode_questions(text: str) -> QuestionsResult:
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.warning("Gemini response was not valid JSON, returning text")
        return QuestionsResult(kind="raw", raw_text=text)

    try:
        items = QuestionAnswerList.validate_python(data)
    except ValidationError:
        logger.warning("Gemini JSON did not match the question/answer shape")
        return QuestionsResult(kind="unvalidated", raw_text=text, data=data)

    return QuestionsResult(kind="structured", raw_text=text, data=data, items=items)


def explanation_body(text: str) -> dict[str, str]:
    # Explanations are prose; the JSON contract in the prompt is best effort only
    return {"explanation": text}


__all__ = ["extract_text", "decode_questions", "explanation_body"]
