"""Public operations: extract documents and analyze a resume against a job.

Usage:
    from resume_fit.api import analyze_resume_vs_job, extract_job_data, extract_resume_data

    resume = extract_resume_data(resume_text)
    job = extract_job_data(job_text, source_url="https://...")
    result = analyze_resume_vs_job(resume, job)
    payload = result.model_dump(mode="json", by_alias=True)
"""

import threading

from resume_fit.core.config import Settings
from resume_fit.core.errors import InputError, require_text
from resume_fit.core.schemas import AnalysisResult, JobDescription, ParsedResume
from resume_fit.parsing import extractor
from resume_fit.pipeline.orchestrator import Analyzer

__all__ = [
    "analyze_resume_vs_job",
    "analyze_with_user_key",
    "default_analyzer",
    "extract_job_data",
    "extract_resume_data",
]

_default_analyzer: Analyzer | None = None
_default_lock = threading.Lock()


def default_analyzer() -> Analyzer:
    """Process-wide Analyzer built from Settings.load() on first use."""
    global _default_analyzer
    with _default_lock:
        if _default_analyzer is None:
            _default_analyzer = Analyzer.from_settings(Settings.load())
        return _default_analyzer


def extract_resume_data(text: str) -> ParsedResume:
    """Extract structured resume fields from raw text.

    Raises:
        InputError: If text is empty.
    """
    return extractor.extract_resume_data(require_text(text, "Resume"))


def extract_job_data(text: str, source_url: str | None = None) -> JobDescription:
    """Extract structured job description fields from raw text.

    Raises:
        InputError: If text is empty.
    """
    return extractor.extract_job_data(require_text(text, "Job description"), source_url)


def analyze_resume_vs_job(
    resume: ParsedResume,
    job: JobDescription,
    *,
    analyzer: Analyzer | None = None,
) -> AnalysisResult:
    return (analyzer or default_analyzer()).analyze(resume, job)


def analyze_with_user_key(
    resume: ParsedResume,
    job: JobDescription,
    key: str,
    *,
    analyzer: Analyzer | None = None,
) -> AnalysisResult:
    """Same as analyze_resume_vs_job, using the caller's provider credential.

    Raises:
        InputError: If key is empty.
    """
    if not key or not key.strip():
        msg = "Provider API key is required"
        raise InputError(msg)
    return (analyzer or default_analyzer()).analyze(resume, job, user_provider_key=key.strip())
