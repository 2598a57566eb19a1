"""Configuration settings for skill matching and LLM analysis."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LLM_PROVIDERS = {"openai", "anthropic", "ollama", "azure"}


class MatchingConfig(BaseSettings):
    """Matching configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input settings
    history_path: Path = Field(
        default=Path("profiles/work_history.yaml"),
        description="Default path to the work history file (YAML/JSON)",
    )
    require_entry_skills: bool = Field(
        default=True,
        description="Reject work history entries that list no skills",
    )

    # Report settings
    rank_results: bool = Field(
        default=True,
        description="Sort match reports by match percentage (descending)",
    )

    # LLM analysis settings
    llm_provider: str = Field(
        default="openai",
        description="LLM provider: openai, anthropic, ollama, azure",
    )
    llm_model: str = Field(
        default="gpt-4o",
        description="Model ID used for match analysis",
    )
    llm_api_key: str | None = Field(
        default=None,
        description="API key for the LLM provider",
    )
    llm_base_url: str | None = Field(
        default=None,
        description="Base URL for OpenAI-compatible endpoints",
    )
    llm_temperature: Annotated[float, Field(ge=0.0, le=2.0)] = Field(
        default=0.7,
        description="Sampling temperature",
    )
    llm_max_tokens: Annotated[int, Field(gt=0)] = Field(
        default=1000,
        description="Maximum tokens in the analysis response",
    )
    llm_top_p: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=1.0,
        description="Nucleus sampling probability mass",
    )
    llm_timeout: Annotated[float, Field(gt=0.0)] = Field(
        default=60.0,
        description="Request timeout in seconds",
    )
    llm_max_retries: Annotated[int, Field(ge=0)] = Field(
        default=1,
        description="Retries for failed LLM calls",
    )

    @field_validator("llm_provider", mode="before")
    @classmethod
    def validate_llm_provider(cls, v: str) -> str:
        """Validate llm_provider."""
        if not isinstance(v, str):
            raise ValueError("llm_provider must be a string")
        value = v.lower().strip()
        if value not in VALID_LLM_PROVIDERS:
            raise ValueError(
                f"llm_provider must be one of: {', '.join(sorted(VALID_LLM_PROVIDERS))}"
            )
        return value


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
