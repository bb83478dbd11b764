"""Text-completion provider registry with lazy loading.

Usage:
    from resume_fit.llm import get_provider

    provider = get_provider("gemini", api_key="...")
    raw = provider.complete(prompt)
"""

from __future__ import annotations

import importlib

from resume_fit.llm.base import SYSTEM_PROMPT, LLMProvider

__all__ = ["SYSTEM_PROMPT", "LLMProvider", "available_providers", "get_provider"]

# Lazy registry: maps provider name → (module_path, class_name)
_REGISTRY: dict[str, tuple[str, str]] = {
    "anthropic": ("resume_fit.llm.anthropic", "AnthropicProvider"),
    "gemini": ("resume_fit.llm.gemini", "GeminiProvider"),
    "ollama": ("resume_fit.llm.ollama", "OllamaProvider"),
    "openai": ("resume_fit.llm.openai", "OpenAIProvider"),
    "openrouter": ("resume_fit.llm.openrouter", "OpenRouterProvider"),
}


def get_provider(
    name: str,
    *,
    api_key: str | None = None,
    timeout: float | None = None,
) -> LLMProvider:
    """Instantiate and return a provider by name.

    Args:
        name: Provider identifier (see available_providers()).
        api_key: Credential for this instance. None reads the provider's env var.
        timeout: Per-request timeout in seconds.

    Raises:
        ValueError: If the provider name is unknown.
    """
    if name not in _REGISTRY:
        valid = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown LLM provider '{name}'. Available: {valid}"
        raise ValueError(msg)

    module_path, class_name = _REGISTRY[name]
    module = importlib.import_module(module_path)
    cls = getattr(module, class_name)
    return cls(api_key=api_key, timeout=timeout)  # type: ignore[no-any-return]


def available_providers() -> list[str]:
    """Return sorted list of registered provider names."""
    return sorted(_REGISTRY)
