from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.apis.deps import get_interview_generator
from app.core.db.schemas.auth import User
from app.core.logging import get_logger
from app.modules.auth import current_active_user
from app.modules.interview.errors import GenerationError
from app.modules.interview.generator import InterviewGenerator
from app.modules.interview.models import ConceptExplanation
from .schemas import GenerateExplanationRequest, GenerateQuestionsRequest


router = APIRouter(prefix="/api/ai", tags=["ai"])

logger = get_logger(__name__)

CurrentUser = Annotated[User, Depends(current_active_user)]
Generator = Annotated[InterviewGenerator, Depends(get_interview_generator)]

MISSING_FIELDS = "Missing required fields"


@router.post("/generate-questions", status_code=status.HTTP_200_OK)
async def generate_interview_questions(
    user: CurrentUser,
    generator: Generator,
    req: Optional[GenerateQuestionsRequest] = None,
) -> JSONResponse:
    """Generate question/answer pairs; non-JSON output comes back as ``{result}``."""
    if req is None or not req.is_complete():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)

    try:
        result = await generator.generate_questions(
            req.role,
            req.experience,
            req.topics_to_focus,
            req.number_of_questions,
        )
    except GenerationError as e:
        logger.exception(f"AI questions error for user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate questions: {e}",
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=result.body)


@router.post(
    "/generate-explanation",
    response_model=ConceptExplanation,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def generate_concept_explanation(
    user: CurrentUser,
    generator: Generator,
    req: Optional[GenerateExplanationRequest] = None,
) -> ConceptExplanation:
    if req is None or not req.question:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)

    try:
        body = await generator.generate_explanation(req.question)
    except GenerationError as e:
        logger.exception(f"AI explanation error for user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate explanation: {e}",
        )

    return ConceptExplanation(**body)
