"""Integration test: text in, AnalysisResult out, with stubbed providers."""

from pathlib import Path

import pytest

from resume_fit.api import analyze_resume_vs_job, extract_job_data, extract_resume_data
from resume_fit.cache.store import MemoryCache
from resume_fit.core.config import ProviderConfig, Settings
from resume_fit.core.schemas import SuggestionCategory
from resume_fit.llm.base import LLMProvider
from resume_fit.parsing.documents import extract_text
from resume_fit.pipeline.orchestrator import Analyzer
from resume_fit.pipeline.scorer import fallback_analysis, round_half_up

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

RESUME_TEXT = "John Doe\njohn@x.com\nSkills: Python, React"
JOB_TEXT = "Requirements: Python, React, AWS"

# ---------------------------------------------------------------------------
# Stub providers
# ---------------------------------------------------------------------------


class StubProvider(LLMProvider):
    def __init__(self, name: str, response: str | None = None, error: Exception | None = None) -> None:
        super().__init__()
        self._name = name
        self._response = response
        self._error = error
        self.calls = 0

    @property
    def provider_id(self) -> str:
        return self._name

    @property
    def default_model(self) -> str:
        return "stub"

    @property
    def env_var(self) -> str | None:
        return None

    def complete(self, prompt: str, model: str | None = None, *, system: str | None = None) -> str:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._response or ""


@pytest.fixture
def offline_analyzer() -> Analyzer:
    settings = Settings(providers=ProviderConfig(primary=None, secondary=None))
    return Analyzer.from_settings(settings)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestOfflinePipeline:
    def test_small_documents(self, offline_analyzer: Analyzer) -> None:
        resume = extract_resume_data(RESUME_TEXT)
        job = extract_job_data(JOB_TEXT)

        assert resume.name == "John Doe"
        assert resume.email == "john@x.com"
        assert resume.skills == ("Python", "React")
        assert job.skills == ("Python", "React", "AWS")

        result = analyze_resume_vs_job(resume, job, analyzer=offline_analyzer)
        score = result.score

        assert result.matched_keywords == ("python", "react")
        assert result.missing_keywords == ("requirements",)
        assert score.keywords == 67
        assert score.skills == 67
        assert score.experience == 50
        assert score.overall == round_half_up((score.skills + score.experience + score.keywords) / 3)
        assert score.overall == 61

        skills_suggestions = [
            s for s in result.suggestions if s.category is SuggestionCategory.SKILLS
        ]
        assert len(skills_suggestions) == 1
        assert skills_suggestions[0].description == "Consider adding: AWS"

    def test_deterministic_without_cache(self) -> None:
        settings = Settings(providers=ProviderConfig(primary=None, secondary=None))
        resume = extract_resume_data(RESUME_TEXT)
        job = extract_job_data(JOB_TEXT)

        first = Analyzer(settings, MemoryCache()).analyze(resume, job)
        second = Analyzer(settings, MemoryCache()).analyze(resume, job)

        assert first.score == second.score
        assert first.suggestions == second.suggestions

    def test_fixture_files(self, offline_analyzer: Analyzer) -> None:
        resume = extract_resume_data(extract_text(FIXTURES_DIR / "sample_resume.txt"))
        job = extract_job_data(extract_text(FIXTURES_DIR / "sample_job.txt"))

        assert resume.location == "Austin, TX"
        for skill in ("Python", "Django", "PostgreSQL", "Docker", "Kubernetes", "Redis"):
            assert skill in resume.skills
        assert "AWS" in job.skills
        assert "Experience with CI/CD pipelines" in [
            line.lstrip("- ") for line in job.requirements
        ]

        result = analyze_resume_vs_job(resume, job, analyzer=offline_analyzer)
        assert "python" in result.matched_keywords
        assert any("AWS" in s.description for s in result.suggestions)


class TestProviderFallthrough:
    def test_primary_error_secondary_garbage_equals_heuristic(self) -> None:
        primary = StubProvider("primary", error=ConnectionError("network down"))
        secondary = StubProvider("secondary", response="<html>Service Unavailable</html>")
        analyzer = Analyzer(Settings(), MemoryCache(), primary=primary, secondary=secondary)
        resume = extract_resume_data(RESUME_TEXT)
        job = extract_job_data(JOB_TEXT)

        result = analyzer.analyze(resume, job)
        expected = fallback_analysis(resume, job)

        assert primary.calls == 1
        assert secondary.calls == 1
        assert result.model_dump(exclude={"id", "created_at"}) == expected.model_dump(
            exclude={"id", "created_at"}
        )

    def test_provider_result_cached_across_calls(self) -> None:
        primary = StubProvider("primary", response='{"overallScore": 91, "skillsScore": 90}')
        analyzer = Analyzer(Settings(), MemoryCache(), primary=primary)
        resume = extract_resume_data(RESUME_TEXT)
        job = extract_job_data(JOB_TEXT)

        first = analyzer.analyze(resume, job)
        second = analyzer.analyze(resume, job)

        assert first.score.overall == 91
        assert first.score.experience == 50
        assert second == first
        assert primary.calls == 1
