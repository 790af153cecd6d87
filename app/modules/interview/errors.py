"""Errors raised along the interview content generation path."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for failures talking to the generative model."""


class UpstreamCallError(GenerationError):
    """Network, authentication or provider-side failure during generation."""


class UpstreamTimeoutError(UpstreamCallError):
    """The provider did not answer within the configured timeout."""


class UpstreamEmptyError(GenerationError):
    """The provider answered but no text could be extracted."""

    def __init__(self, message: str = "Empty response from Gemini") -> None:
        super().__init__(message)


__all__ = [
    "GenerationError",
    "UpstreamCallError",
    "UpstreamTimeoutError",
    "UpstreamEmptyError",
]
