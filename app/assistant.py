from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger("assistiq.assistant")

SYSTEM_PROMPT = "You are a helpful customer-support assistant."
FALLBACK_REPLY = (
    "Thanks for your message! Our support team has received your ticket "
    "and will respond shortly."
)


class AssistantError(Exception):
    pass


class Assistant:
    """Thin client for an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 20.0,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def complete(self, message: str) -> str:
        if not self.api_key:
            raise AssistantError("OPENAI_API_KEY is not set")

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": message},
            ],
        }
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.post(
                    f"{self.base_url}/chat/completions",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            raise AssistantError(f"completion API returned {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise AssistantError(f"completion request failed: {e}") from e

        content: Optional[str] = None
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            pass
        if not isinstance(content, str) or not content.strip():
            raise AssistantError("completion response has no content")
        return content

    def reply(self, message: str) -> str:
        """Completion text for `message`, or FALLBACK_REPLY if anything goes wrong."""
        try:
            return self.complete(message)
        except Exception as e:
            logger.warning("Completion failed, using fallback reply: %s", e)
            return FALLBACK_REPLY
