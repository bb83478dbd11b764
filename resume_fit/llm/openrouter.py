"""OpenRouter provider (OpenAI-compatible chat completions)."""

import logging

from resume_fit.llm.base import SYSTEM_PROMPT, LLMProvider

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(LLMProvider):
    """Chat-completion provider routed through OpenRouter, JSON response mode."""

    @property
    def provider_id(self) -> str:
        return "openrouter"

    @property
    def default_model(self) -> str:
        return "google/gemma-3-27b-it:free"

    @property
    def env_var(self) -> str:
        return "OPENROUTER_API_KEY"

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
    ) -> str:
        api_key = self._require_api_key()

        try:
            import openai
        except ImportError:
            msg = (
                "openai is required for OpenRouter. "
                "Install with: pip install 'resume-fit[openai]'"
            )
            raise ImportError(msg) from None

        client = openai.OpenAI(
            base_url=OPENROUTER_BASE_URL,
            api_key=api_key,
            timeout=self.timeout,
        )
        use_model = model or self.default_model
        use_system = system if system is not None else SYSTEM_PROMPT

        logger.info("Sending analysis prompt to OpenRouter (%s)...", use_model)
        response = client.chat.completions.create(
            model=use_model,
            messages=[
                {"role": "system", "content": use_system},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
        )

        return response.choices[0].message.content or ""
