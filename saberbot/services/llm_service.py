from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class LLMServiceError(RuntimeError):
    pass


class _RetryableError(Exception):
    pass


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


def _extract_text(response_data: dict) -> str:
    candidates = response_data.get("candidates") or []
    if not candidates:
        raise LLMServiceError("Gemini returned no candidates")

    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    text_parts = [part["text"] for part in parts if part.get("text")]
    if not text_parts:
        raise LLMServiceError("Gemini response contained no text")
    return "".join(text_parts)


class GeminiClient:
    """Calls the Gemini ``generateContent`` REST endpoint with a single prompt."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        model: str,
        api_base: str = "https://generativelanguage.googleapis.com/v1beta",
        max_retries: int = 0,
        retry_backoff_seconds: float = 0.5,
    ) -> None:
        self._http_client = http_client
        self._api_key = api_key
        self.model = model
        self._url = f"{api_base.rstrip('/')}/models/{model}:generateContent"
        self._max_retries = max_retries
        self._retry_backoff_seconds = retry_backoff_seconds

    async def generate(self, prompt: str) -> str:
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        attempt = 0
        while True:
            try:
                return await self._post(payload)
            except _RetryableError as exc:
                if attempt >= self._max_retries:
                    raise LLMServiceError(str(exc)) from exc
                attempt += 1
                logger.warning(
                    "Gemini call failed (%s); retry %d/%d", exc, attempt, self._max_retries
                )
                await asyncio.sleep(self._retry_backoff_seconds * attempt)

    async def _post(self, payload: dict) -> str:
        try:
            response = await self._http_client.post(
                self._url,
                headers={"x-goog-api-key": self._api_key},
                json=payload,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            message = f"Gemini request failed with status {status_code}: {exc.response.text}"
            if status_code in RETRYABLE_STATUS_CODES:
                raise _RetryableError(message) from exc
            raise LLMServiceError(message) from exc
        except httpx.HTTPError as exc:
            raise _RetryableError(f"Gemini request failed: {exc.__class__.__name__}: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMServiceError("Gemini returned a non-JSON body") from exc
        return _extract_text(data)
