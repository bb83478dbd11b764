"""Abstract base class for text-completion providers and shared logic."""

import os
from abc import ABC, abstractmethod

SYSTEM_PROMPT = (
    "You are an expert career advisor analyzing resumes against job descriptions. "
    "Respond in JSON format."
)

DEFAULT_TIMEOUT_SECONDS = 30.0


class LLMProvider(ABC):
    """Base class that every text-completion provider must implement.

    Args:
        api_key: Credential for this instance. None reads ``env_var``.
        timeout: Per-request timeout in seconds.
    """

    def __init__(self, api_key: str | None = None, timeout: float | None = None) -> None:
        self._api_key = api_key
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Unique identifier for this provider (e.g. 'gemini')."""

    @abstractmethod
    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
    ) -> str:
        """Send a prompt to the model and return the raw response text.

        Args:
            prompt: The user prompt.
            model: Override the provider's default model. None uses default.
            system: Override the system prompt. None falls back to SYSTEM_PROMPT.

        Returns:
            Raw text response (expected to contain JSON).
        """

    @property
    @abstractmethod
    def default_model(self) -> str:
        """The default model ID used when no override is specified."""

    @property
    @abstractmethod
    def env_var(self) -> str | None:
        """Environment variable name for the API key, or None if not needed."""

    def _env_api_key(self) -> str | None:
        return os.environ.get(self.env_var) if self.env_var else None

    def api_key(self) -> str | None:
        """The explicit key if one was given, else the environment's."""
        return self._api_key or self._env_api_key()

    def is_configured(self) -> bool:
        """True when the provider has the credential it needs."""
        return self.env_var is None or bool(self.api_key())

    def _require_api_key(self) -> str:
        key = self.api_key()
        if not key:
            msg = f"{self.env_var} environment variable is required"
            raise ValueError(msg)
        return key
