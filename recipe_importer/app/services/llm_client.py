"""Client for the generative text backend."""

import logging
from typing import Optional, Protocol

import httpx

from recipe_importer.app.core.config import Settings, get_settings
from recipe_importer.app.services.errors import BackendConfigurationError, ExtractionFailure

logger = logging.getLogger(__name__)


class CompletionBackend(Protocol):
    async def complete(self, prompt: str) -> str:  # pragma: no cover - interface
        ...


class ChatCompletionBackend:
    """OpenAI-compatible chat completions endpoint (Gemini by default)."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        if not self.settings.llm_api_key:
            logger.error("GEMINI_API_KEY is missing in environment variables")
            raise BackendConfigurationError()

    def _headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.llm_api_key}",
        }

    async def complete(self, prompt: str) -> str:
        payload = {
            "model": self.settings.llm_model_name,
            "temperature": 0.0,
            "response_format": {"type": "json_object"},
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.settings.llm_max_tokens,
            "stream": False,
        }
        timeout = httpx.Timeout(
            self.settings.llm_timeout_seconds, read=self.settings.llm_timeout_seconds, connect=10.0
        )
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.post(
                f"{self.settings.llm_base_url.rstrip('/')}/chat/completions",
                json=payload,
                headers=self._headers(),
            )
        resp.raise_for_status()
        data = resp.json()

        # Some proxies return an error envelope with a 200 status
        if isinstance(data, list) and data:
            data = data[0]
        if isinstance(data, dict) and "error" in data:
            error_info = data["error"] if isinstance(data["error"], dict) else {"message": str(data["error"])}
            error_type = error_info.get("type") or error_info.get("status") or "unknown_error"
            error_message = error_info.get("message", "Unknown error")
            logger.error("LLM backend returned error: type=%s, message=%s", error_type, error_message[:500])
            raise ValueError(f"LLM backend error ({error_type}): {error_message}")

        content = None
        if isinstance(data, dict) and data.get("choices"):
            choice = data["choices"][0]
            if isinstance(choice, dict):
                content = (choice.get("message") or {}).get("content")
        if not content or not isinstance(content, str):
            raise ValueError("LLM response missing assistant content")
        return content


async def extract_text(prompt: str, backend: CompletionBackend) -> str:
    """Single backend call, no retry. Any backend failure becomes ExtractionFailure."""
    try:
        text = await backend.complete(prompt)
    except httpx.TimeoutException as exc:
        logger.error("LLM backend timed out: %s", exc)
        raise ExtractionFailure() from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("LLM backend call failed")
        raise ExtractionFailure() from exc
    if not isinstance(text, str):
        raise ExtractionFailure("LLM backend returned no text. Please try again.")
    logger.info("LLM raw content (truncated): %s", text[:1000])
    return text
