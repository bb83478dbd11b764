"""Google Gemini provider (google-genai SDK)."""

import logging
import os

from resume_fit.llm.base import SYSTEM_PROMPT, LLMProvider

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Direct-generation provider using the Google Gemini API.

    Reads GEMINI_API_KEY, then GOOGLE_API_KEY, when no explicit key is given.
    """

    @property
    def provider_id(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return "gemini-2.5-flash"

    @property
    def env_var(self) -> str:
        return "GEMINI_API_KEY"

    def _env_api_key(self) -> str | None:
        return os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
    ) -> str:
        api_key = self._require_api_key()

        try:
            from google import genai
            from google.genai import types as genai_types
        except ImportError:
            msg = (
                "google-genai is required for Gemini. "
                "Install with: pip install 'resume-fit[gemini]'"
            )
            raise ImportError(msg) from None

        use_model = model or self.default_model
        use_system = system if system is not None else SYSTEM_PROMPT

        logger.info("Sending analysis prompt to Gemini (%s)...", use_model)
        client = genai.Client(
            api_key=api_key,
            http_options=genai_types.HttpOptions(timeout=int(self.timeout * 1000)),
        )
        response = client.models.generate_content(
            model=use_model,
            contents=prompt,
            config=genai_types.GenerateContentConfig(
                system_instruction=use_system,
            ),
        )

        return response.text or ""
