"""End-to-end resume vs job analysis.

Degradation chain for every call:
  1. cache hit                      -> return it
  2. primary provider (chat)        -> parse
  3. secondary provider (direct)    -> parse, with the caller's key if given
  4. heuristic scorer               -> always succeeds
The result is cached before it is returned. Provider and cache failures are
logged and never raised.
"""

import logging
from collections.abc import Sequence

from resume_fit.cache.store import CacheStore, MemoryCache, build_cache, fingerprint
from resume_fit.core.config import Settings
from resume_fit.core.errors import require_text
from resume_fit.core.schemas import AnalysisResult, JobDescription, ParsedResume
from resume_fit.llm import get_provider
from resume_fit.llm.base import LLMProvider
from resume_fit.pipeline.response_parser import parse_analysis_response
from resume_fit.pipeline.scorer import fallback_analysis

logger = logging.getLogger(__name__)

_NOT_PROVIDED = "Not provided"
_NOT_EXTRACTED = "Not extracted"

_RESPONSE_SCHEMA = """Respond in JSON format with:
{
  "overallScore": <0-100>,
  "skillsScore": <0-100>,
  "experienceScore": <0-100>,
  "keywordsScore": <0-100>,
  "matchedKeywords": ["keyword1", "keyword2"],
  "missingKeywords": ["keyword1", "keyword2"],
  "suggestions": [
    {
      "category": "skills|experience|keywords|formatting|other",
      "priority": "high|medium|low",
      "title": "Short title",
      "description": "Detailed suggestion",
      "action": "Specific action to take"
    }
  ]
}"""


def _joined(values: Sequence[str], sep: str = ", ") -> str:
    return sep.join(values) if values else _NOT_EXTRACTED


def build_analysis_prompt(
    resume: ParsedResume,
    job: JobDescription,
    text_chars: int = 2000,
) -> str:
    """Assemble the analysis prompt from both documents' key fields."""
    resume_section = (
        "RESUME:\n"
        f"Name: {resume.name or _NOT_PROVIDED}\n"
        f"Skills: {_joined(resume.skills)}\n"
        f"Keywords: {_joined(resume.keywords)}\n\n"
        "Full Text:\n"
        f"{resume.raw_text[:text_chars] or 'No text provided'}\n"
    )
    job_section = (
        "JOB DESCRIPTION:\n"
        f"Title: {job.title or _NOT_PROVIDED}\n"
        f"Company: {job.company or _NOT_PROVIDED}\n"
        f"Required Skills: {_joined(job.skills)}\n"
        f"Requirements: {_joined(job.requirements, '; ')}\n\n"
        "Full Text:\n"
        f"{job.raw_text[:text_chars] or 'No text provided'}\n"
    )
    return (
        "Analyze this resume against the job description and provide a detailed assessment.\n\n"
        f"{resume_section}\n{job_section}\n{_RESPONSE_SCHEMA}\n"
    )


class Analyzer:
    """Runs analyses against an explicit cache and provider chain.

    Usage::

        analyzer = Analyzer.from_settings(Settings.load())
        result = analyzer.analyze(resume, job)

    Args:
        settings: Cache TTL, prompt and provider settings.
        cache: Preferred cache. Used while is_available() is True.
        primary: Chat-completion provider tried first, or None.
        secondary: Provider tried after primary, or None.
        fallback_cache: In-process cache used when ``cache`` is unavailable.
    """

    def __init__(
        self,
        settings: Settings,
        cache: CacheStore,
        primary: LLMProvider | None = None,
        secondary: LLMProvider | None = None,
        fallback_cache: CacheStore | None = None,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._fallback_cache = fallback_cache or MemoryCache()
        self._primary = primary
        self._secondary = secondary

    @classmethod
    def from_settings(cls, settings: Settings) -> "Analyzer":
        """Build the cache and providers named in settings."""
        providers = settings.providers
        primary = (
            get_provider(providers.primary, timeout=providers.timeout_seconds)
            if providers.primary
            else None
        )
        secondary = (
            get_provider(providers.secondary, timeout=providers.timeout_seconds)
            if providers.secondary
            else None
        )
        return cls(settings, build_cache(settings.cache), primary=primary, secondary=secondary)

    @property
    def active_cache(self) -> CacheStore:
        return self._cache if self._cache.is_available() else self._fallback_cache

    def cache_key(self, resume: ParsedResume, job: JobDescription) -> str:
        cache_config = self._settings.cache
        return fingerprint(
            resume,
            job,
            prefix=cache_config.key_prefix,
            chars=cache_config.fingerprint_chars,
        )

    def analyze(
        self,
        resume: ParsedResume,
        job: JobDescription,
        user_provider_key: str | None = None,
    ) -> AnalysisResult:
        """Analyze a resume against a job, always returning a result.

        Args:
            resume: Extracted resume.
            job: Extracted job description.
            user_provider_key: Caller's own credential for the secondary provider.

        Raises:
            InputError: If either document has no text.
        """
        require_text(resume.raw_text, "Resume")
        require_text(job.raw_text, "Job description")

        cache = self.active_cache
        key = self.cache_key(resume, job)

        cached = cache.get(key)
        if cached is not None:
            logger.info("Cache hit for analysis %s", key)
            return cached

        prompt = build_analysis_prompt(resume, job, self._settings.analysis.prompt_text_chars)
        result = self._analyze_with_providers(prompt, user_provider_key)
        if result is None:
            logger.info("No usable provider response - using heuristic analysis")
            result = fallback_analysis(resume, job)

        cache.set(key, result, self._settings.cache.ttl_seconds)
        return result

    def _analyze_with_providers(
        self,
        prompt: str,
        user_provider_key: str | None,
    ) -> AnalysisResult | None:
        providers = self._settings.providers

        if self._primary is not None:
            result = self._try_provider(self._primary, prompt, providers.primary_model)
            if result is not None:
                return result

        secondary = self._secondary_for_call(user_provider_key)
        if secondary is not None:
            return self._try_provider(secondary, prompt, providers.secondary_model)
        return None

    def _secondary_for_call(self, user_provider_key: str | None) -> LLMProvider | None:
        """A one-off provider built with the caller's key, else the configured one."""
        if not user_provider_key:
            return self._secondary

        providers = self._settings.providers
        name = self._secondary.provider_id if self._secondary else providers.secondary or "gemini"
        try:
            return get_provider(
                name,
                api_key=user_provider_key,
                timeout=providers.timeout_seconds,
            )
        except ValueError:
            logger.warning("Cannot build provider '%s' for caller key", name, exc_info=True)
            return None

    def _try_provider(
        self,
        provider: LLMProvider,
        prompt: str,
        model: str | None,
    ) -> AnalysisResult | None:
        """Call one provider and parse its answer. None on any failure."""
        if not provider.is_configured():
            logger.debug("Provider '%s' not configured - skipping", provider.provider_id)
            return None

        try:
            raw = provider.complete(prompt, model=model)
        except Exception:
            logger.warning(
                "Provider '%s' failed - falling through",
                provider.provider_id,
                exc_info=True,
            )
            return None

        try:
            return parse_analysis_response(raw)
        except Exception:
            logger.warning(
                "Could not parse response from '%s' - falling through",
                provider.provider_id,
                exc_info=True,
            )
            return None
