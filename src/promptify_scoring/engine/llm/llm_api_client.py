"""
llm_api_client.py.
=================

Does: Send a player's instruction to an OpenAI-compatible chat completions
      endpoint (OpenRouter by default), with retries and backoff on rate limits,
      server errors and empty replies.
Returns: Generated text or None on failure.
Used by: The play loop and the demo CLI; never by the pure scorers.
"""

from __future__ import annotations

# ── Imports & Typing ─────────────────────────────────────────────────────────
import logging
import os
import random
import time
from typing import Any

import requests  # type: ignore[import-untyped]

# ── Logger ───────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

# ── Config (env-overridable) ─────────────────────────────────────────────────
LLM_API_URL = os.getenv("OPENROUTER_API_URL", "https://openrouter.ai/api/v1/chat/completions")
LLM_MODEL = os.getenv("OPENROUTER_MODEL", "google/gemini-2.5-flash")
LLM_MAX_TOKENS = int(os.getenv("OPENROUTER_MAX_TOKENS", "400"))
LLM_TEMPERATURE = float(os.getenv("OPENROUTER_TEMPERATURE", "0.7"))
LLM_TIMEOUT = float(os.getenv("OPENROUTER_TIMEOUT", "30"))  # seconds

# Backoff config
BACKOFF_BASE = 1.0  # base seconds added each attempt
BACKOFF_MIN = 1.2  # min multiplier
BACKOFF_SPREAD = 0.6  # random spread added to multiplier

# Single session for connection reuse
_session = requests.Session()

__all__ = [
    "OpenRouterGenerator",
    "has_api_key",
    "get_generator",
]


def _backoff_sleep(attempt: int) -> None:
    """Does: Sleep with exponential backoff + jitter based on attempt index.
    Args: attempt: 0-based attempt number.
    """
    sleep_s = (BACKOFF_BASE + attempt) * (BACKOFF_MIN + random.random() * BACKOFF_SPREAD)
    time.sleep(sleep_s)


def _message_content(data: Any) -> str:
    """Does: Pull choices[0].message.content from a chat completions body.
    Returns: The content string, or "" when the body has any other shape.
    """
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    choice = choices[0]
    message = choice.get("message") if isinstance(choice, dict) else None
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


# ── Client ───────────────────────────────────────────────────────────────────
class OpenRouterGenerator:
    """Does: Generate text for a player's instruction through OpenRouter.
    Args: model: str; temperature: float; max_tokens: int; retries: extra attempts.
    Returns: Instance usable for generate(); raises if API key is missing.
    """

    def __init__(
        self,
        model: str = LLM_MODEL,
        temperature: float = LLM_TEMPERATURE,
        max_tokens: int = LLM_MAX_TOKENS,
        retries: int = 2,
    ):
        api_key = os.getenv("OPENROUTER_API_KEY")
        if not api_key:
            raise RuntimeError("OPENROUTER_API_KEY missing")
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.retries = retries

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _payload(self, prompt: str) -> dict:
        return {
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    def generate(self, prompt: str, debug: bool = False) -> str | None:
        """Does: POST the instruction, retrying on 429/non-200/empty content.
        Args: prompt: player's instruction; debug: log each attempt.
        Returns: Assistant content string, or None after total failure.
        """
        prompt = (prompt or "").strip()
        if not prompt:
            return None

        payload = self._payload(prompt)
        for attempt in range(self.retries + 1):
            if attempt:
                _backoff_sleep(attempt - 1)
            try:
                if debug:
                    logger.info("[LLM QUERY] Attempt %d: %r", attempt + 1, prompt)

                response = _session.post(
                    LLM_API_URL, headers=self._headers(), json=payload, timeout=LLM_TIMEOUT
                )

                # Rate-limit handling
                if response.status_code == 429:
                    retry_after = float(response.headers.get("Retry-After", "0") or 0)
                    logger.warning("[RATE LIMITED] 429. Retry-After=%s", retry_after)
                    if attempt < self.retries:
                        time.sleep(retry_after if retry_after > 0 else 1.0)
                    continue

                if response.status_code != 200:
                    logger.warning("[LLM FAILURE] Status %s: %s", response.status_code, response.text)
                    continue

                data = response.json()
                content = _message_content(data)
                if content:
                    return content

                logger.warning("[LLM] Empty or malformed content in response: %s", data)

            except (requests.RequestException, ValueError) as e:
                logger.error("[EXCEPTION] LLM request failed on attempt %d: %s", attempt + 1, e)

        logger.warning("[TOTAL FAILURE] no generated text for %r", prompt)
        return None


# ── Public helpers ───────────────────────────────────────────────────────────
def has_api_key() -> bool:
    """Does: Check presence of OPENROUTER_API_KEY in environment."""
    return bool(os.getenv("OPENROUTER_API_KEY"))


def get_generator(debug: bool = False) -> OpenRouterGenerator | None:
    """Does: Factory returning OpenRouterGenerator if API key is present.
    Args: debug: if True, logs presence status.
    Returns: OpenRouterGenerator or None.
    """
    ok = has_api_key()
    if debug:
        logger.debug("OpenRouter API key present: %s", ok)
    return OpenRouterGenerator() if ok else None
