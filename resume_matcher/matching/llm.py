"""LLM client for match analysis.

Uses LiteLLM as an opaque text-completion backend.
"""

from __future__ import annotations

import os
import time
from typing import Any

from resume_matcher.matching.config import MatchingConfig, get_matching_config
from resume_matcher.utils.logging import get_logger

logger = get_logger(__name__)

# LiteLLM loads `.env` into the process environment in DEV mode.
os.environ.setdefault("LITELLM_MODE", "PRODUCTION")


class MatchAnalysisLLMError(Exception):
    """Exception raised when match analysis LLM calls fail."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class MatchAnalysisLLM:
    """Text-completion client for match analysis."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()

    def _get_model_name(self) -> str:
        """Return provider-qualified model name for LiteLLM routing."""
        if "/" in self.config.llm_model:
            return self.config.llm_model

        if self.config.llm_base_url and self.config.llm_provider == "openai":
            return f"openai/{self.config.llm_model}"

        if self.config.llm_provider == "openai":
            return self.config.llm_model

        return f"{self.config.llm_provider}/{self.config.llm_model}"

    def complete(self, *, prompt: str, system_prompt: str | None = None) -> str:
        """Return the model's text response to a prompt."""
        from litellm.exceptions import Timeout

        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        last_error: Exception | None = None
        for attempt in range(self.config.llm_max_retries + 1):
            try:
                response = self._call_completion(messages=messages)
                return self._parse_response(response)

            except MatchAnalysisLLMError:
                raise

            except Timeout as e:
                raise MatchAnalysisLLMError(
                    "LLM request timed out. "
                    f"Increase MATCHING_LLM_TIMEOUT (timeout={self.config.llm_timeout}s).",
                    e,
                ) from e

            except Exception as e:
                last_error = e
                if attempt < self.config.llm_max_retries:
                    delay = min(0.5 * (2**attempt), 8.0)
                    logger.warning(
                        "LLM call failed (attempt %s), retrying in %.1fs: %s",
                        attempt + 1,
                        delay,
                        e,
                    )
                    time.sleep(delay)
                    continue
                raise MatchAnalysisLLMError(
                    f"LLM call failed after retries: {e}", e
                ) from e

        raise MatchAnalysisLLMError(f"LLM call failed: {last_error}", last_error)

    def _call_completion(self, *, messages: list[dict[str, str]]):
        from litellm import completion

        kwargs: dict[str, Any] = {
            "model": self._get_model_name(),
            "messages": messages,
            "temperature": self.config.llm_temperature,
            "max_tokens": self.config.llm_max_tokens,
            "top_p": self.config.llm_top_p,
            "timeout": self.config.llm_timeout,
        }

        if self.config.llm_api_key:
            kwargs["api_key"] = self.config.llm_api_key

        if self.config.llm_base_url:
            kwargs["base_url"] = self.config.llm_base_url

        return completion(**kwargs)

    def _parse_response(self, response) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            raise MatchAnalysisLLMError("LLM returned no choices.")

        content = getattr(choices[0].message, "content", None)
        if content is None or not str(content).strip():
            raise MatchAnalysisLLMError("LLM returned no content.")

        return str(content).strip()
