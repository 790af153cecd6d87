from __future__ import annotations

from fastapi import Depends, Request

from app.core.config import settings
from app.modules.interview.client import GenerationClient, build_generation_client
from app.modules.interview.generator import InterviewGenerator


def get_generation_client(request: Request) -> GenerationClient:
    """Return the app-scoped generation client created during lifespan.

    Falls back to building one from settings when the app was started without
    running its lifespan (e.g. mounted as a sub-application).
    """
    client = getattr(request.app.state, "generation_client", None)
    if client is None:
        client = build_generation_client(settings.generation)
        request.app.state.generation_client = client
    return client


def get_interview_generator(
    client: GenerationClient = Depends(get_generation_client),
) -> InterviewGenerator:
    return InterviewGenerator(client)
