"""Deterministic compatibility scoring without AI.

Score range: 0-100 per component. keywords and skills are the share of the
job's terms found in the resume (50 when the job has none). experience is a
fixed 50 since there is no structured experience matching without AI.
overall is the rounded mean of the three.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from resume_fit.core.schemas import (
    AnalysisResult,
    CompatibilityScore,
    JobDescription,
    ParsedResume,
    Suggestion,
    SuggestionCategory,
    SuggestionPriority,
)

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50
MAX_LISTED_TERMS = 5


@dataclass(frozen=True)
class ScoreBreakdown:
    """Scoring engine output before it is wrapped in an AnalysisResult."""

    score: CompatibilityScore
    suggestions: tuple[Suggestion, ...] = ()
    matched_keywords: tuple[str, ...] = ()
    missing_keywords: tuple[str, ...] = ()
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _split_terms(
    job_terms: Sequence[str], resume_terms: Sequence[str]
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Partition job terms into (matched, missing), case-insensitively, in job order.

    Job terms are deduplicated by lowercase form; the first spelling is kept.
    """
    resume_set = {t.lower() for t in resume_terms}
    matched: list[str] = []
    missing: list[str] = []
    seen: set[str] = set()
    for term in job_terms:
        key = term.lower()
        if key in seen:
            continue
        seen.add(key)
        (matched if key in resume_set else missing).append(term)
    return tuple(matched), tuple(missing)


def _coverage(matched: Sequence[str], missing: Sequence[str]) -> int:
    total = len(matched) + len(missing)
    if total == 0:
        return NEUTRAL_SCORE
    return round_half_up(100 * len(matched) / total)


def build_suggestions(
    missing_skills: Sequence[str], missing_keywords: Sequence[str]
) -> list[Suggestion]:
    """Skills suggestion (high) before keywords suggestion (medium); none if nothing is missing."""
    suggestions: list[Suggestion] = []
    if missing_skills:
        suggestions.append(
            Suggestion(
                category=SuggestionCategory.SKILLS,
                priority=SuggestionPriority.HIGH,
                title="Add Missing Skills",
                description=f"Consider adding: {', '.join(missing_skills[:MAX_LISTED_TERMS])}",
                action="Update your skills section",
            )
        )
    if missing_keywords:
        suggestions.append(
            Suggestion(
                category=SuggestionCategory.KEYWORDS,
                priority=SuggestionPriority.MEDIUM,
                title="Include Industry Keywords",
                description=f"Missing: {', '.join(missing_keywords[:MAX_LISTED_TERMS])}",
                action="Incorporate these terms naturally",
            )
        )
    return suggestions


def score_documents(resume: ParsedResume, job: JobDescription) -> ScoreBreakdown:
    """Compare a resume against a job by keyword and skill overlap.

    Keywords are compared and reported in lowercase token form. Skills keep
    the job's canonical vocabulary casing.
    """
    matched_keywords, missing_keywords = _split_terms(
        [k.lower() for k in job.keywords], resume.keywords
    )
    matched_skills, missing_skills = _split_terms(job.skills, resume.skills)

    keywords_score = _coverage(matched_keywords, missing_keywords)
    skills_score = _coverage(matched_skills, missing_skills)
    experience_score = NEUTRAL_SCORE
    overall = round_half_up((keywords_score + skills_score + experience_score) / 3)

    return ScoreBreakdown(
        score=CompatibilityScore(
            overall=overall,
            skills=skills_score,
            experience=experience_score,
            keywords=keywords_score,
        ),
        suggestions=tuple(build_suggestions(missing_skills, missing_keywords)),
        matched_keywords=matched_keywords,
        missing_keywords=missing_keywords,
        matched_skills=matched_skills,
        missing_skills=missing_skills,
    )


def fallback_analysis(resume: ParsedResume, job: JobDescription) -> AnalysisResult:
    """Heuristic AnalysisResult used when no provider produced a usable answer."""
    breakdown = score_documents(resume, job)
    logger.debug(
        "Fallback score %d (skills %d, keywords %d)",
        breakdown.score.overall,
        breakdown.score.skills,
        breakdown.score.keywords,
    )
    return AnalysisResult(
        score=breakdown.score,
        suggestions=breakdown.suggestions,
        matched_keywords=breakdown.matched_keywords,
        missing_keywords=breakdown.missing_keywords,
    )
