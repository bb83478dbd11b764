"""Configuration models and YAML loader for resume-fit."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from resume_fit.llm import available_providers

DEFAULT_CONFIG_PATH = "config/settings.yaml"
CONFIG_ENV_VAR = "RESUME_FIT_CONFIG"


class CacheConfig(BaseModel):
    """Analysis result cache settings."""

    ttl_seconds: int = Field(default=3600, ge=1)
    key_prefix: str = "analysis:"
    redis_url: str | None = None
    fingerprint_chars: int = Field(default=500, ge=1)


class ProviderConfig(BaseModel):
    """Text-completion provider chain.

    primary is tried first; secondary only after primary fails or is
    unconfigured. Either may be null to disable it.
    """

    primary: str | None = "openrouter"
    secondary: str | None = "gemini"
    primary_model: str | None = None
    secondary_model: str | None = None
    timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("primary", "secondary")
    @classmethod
    def known_provider(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip().lower()
        if not v:
            return None
        if v not in available_providers():
            valid = ", ".join(available_providers())
            msg = f"Unknown LLM provider '{v}'. Available: {valid}"
            raise ValueError(msg)
        return v


class FetchConfig(BaseModel):
    """Job description URL fetching."""

    timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = "Mozilla/5.0 (compatible; resume-fit/0.1)"


class AnalysisConfig(BaseModel):
    """Prompt assembly limits."""

    prompt_text_chars: int = Field(default=2000, ge=100)


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    cache: CacheConfig = Field(default_factory=CacheConfig)
    providers: ProviderConfig = Field(default_factory=ProviderConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Settings":
        """Load settings from an explicit path, $RESUME_FIT_CONFIG, or the default path.

        An explicit path must exist. Otherwise a missing file yields defaults.
        REDIS_URL from the environment fills cache.redis_url when YAML leaves it unset.
        """
        if path is not None:
            settings = cls.from_yaml(path)
        else:
            candidate = Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))
            settings = cls.from_yaml(candidate) if candidate.exists() else cls()

        redis_url = os.environ.get("REDIS_URL")
        if redis_url and not settings.cache.redis_url:
            cache = settings.cache.model_copy(update={"redis_url": redis_url})
            settings = settings.model_copy(update={"cache": cache})
        return settings
