from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx

from ..core.config import Settings

log = logging.getLogger(__name__)


class CompletionError(Exception):
    """The completion service could not produce a reply."""

    retryable = False


class CompletionTimeout(CompletionError):
    retryable = True


class CompletionClient:
    """Thin client for an OpenAI-compatible ``/chat/completions`` endpoint.

    Built once at startup from settings and handed to the endpoints that need
    it. ``transport`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> "CompletionClient":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        max_tokens: int | None = None,
        response_format: dict | None = None,
    ) -> str | None:
        url = f"{self.base_url}/chat/completions"
        headers = {"Authorization": f"Bearer {self.api_key}"}
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens:
            payload["max_tokens"] = max_tokens
        if response_format:
            payload["response_format"] = response_format
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(url, headers=headers, json=payload)
                r.raise_for_status()
                data = r.json()
        except httpx.TimeoutException as e:
            raise CompletionTimeout(f"completion timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise CompletionError(f"completion service returned {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise CompletionError(f"completion request failed: {e}") from e
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise CompletionError("malformed completion response") from e
