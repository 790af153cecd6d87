"""Thin async wrapper around the Gemini ``generate_content`` call.

The underlying ``google.genai`` client comes from pydantic-ai's
``GoogleProvider`` and is built lazily, so a missing API key only fails the
first request that actually needs the model.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from app.core.config import GenerationSettings
from app.core.logging import get_logger
from app.modules.interview.errors import (
    GenerationError,
    UpstreamCallError,
    UpstreamTimeoutError,
)


logger = get_logger(__name__)


def _build_google_client(api_key: str):
    """Build the google-genai client via the pydantic-ai provider (lazy import)."""
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=api_key)
    return provider.client


class GenerationClient:
    """Sends one prompt to a fixed model and returns the raw response envelope."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model_name: str,
        timeout_seconds: float = 60.0,
        max_retries: int = 1,
        retry_backoff_seconds: float = 1.0,
        client: Any = None,
    ) -> None:
        self.api_key = api_key
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds
        self.max_retries = max(0, int(max_retries))
        self.retry_backoff_seconds = max(0.0, float(retry_backoff_seconds))
        self._client = client

    def _get_client(self):
        if self._client is None:
            if not self.api_key:
                raise UpstreamCallError("GEMINI_API_KEY is not configured")
            try:
                self._client = _build_google_client(self.api_key)
            except Exception as exc:
                raise UpstreamCallError(str(exc)) from exc
        return self._client

    async def generate(self, prompt: str) -> Any:
        client = self._get_client()
        attempt = 0
        while True:
            try:
                return await asyncio.wait_for(
                    client.aio.models.generate_content(
                        model=self.model_name,
                        contents=prompt,
                    ),
                    timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError:
                if attempt >= self.max_retries:
                    raise UpstreamTimeoutError(
                        f"Gemini did not respond within {self.timeout_seconds:g}s"
                    ) from None
                delay = self.retry_backoff_seconds * (2**attempt)
                attempt += 1
                logger.warning(
                    "Gemini call timed out, retrying (%d/%d) in %.1fs",
                    attempt,
                    self.max_retries,
                    delay,
                )
                await asyncio.sleep(delay)
            except GenerationError:
                raise
            except Exception as exc:
                raise UpstreamCallError(str(exc)) from exc


def build_generation_client(gen_settings: GenerationSettings) -> GenerationClient:
    return GenerationClient(
        api_key=gen_settings.gemini_api_key,
        model_name=gen_settings.model_name,
        timeout_seconds=gen_settings.timeout_seconds,
        max_retries=gen_settings.max_retries,
        retry_backoff_seconds=gen_settings.retry_backoff_seconds,
    )


def log_missing_api_key(gen_settings: GenerationSettings) -> bool:
    """Log once at startup when no key is configured; returns True if present."""
    if not gen_settings.gemini_api_key:
        logger.error("GEMINI_API_KEY is missing; AI endpoints will fail until it is set")
        return False
    return True


__all__ = ["GenerationClient", "build_generation_client", "log_missing_api_key"]
