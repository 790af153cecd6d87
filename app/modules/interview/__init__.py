"""Interview module exports."""

from .client import GenerationClient, build_generation_client
from .errors import (
    GenerationError,
    UpstreamCallError,
    UpstreamEmptyError,
    UpstreamTimeoutError,
)
from .generator import InterviewGenerator

__all__ = [
    "GenerationClient",
    "build_generation_client",
    "GenerationError",
    "UpstreamCallError",
    "UpstreamEmptyError",
    "UpstreamTimeoutError",
    "InterviewGenerator",
]
