"""Core data models for resume/job matching.

Documents and results are frozen and hold tuples rather than lists, so a
result handed out by a cache cannot be changed in place by any caller.
"""

import time
import uuid
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MAX_SECTION_LINES = 15


def _dedupe_casefold(values: tuple[str, ...]) -> tuple[str, ...]:
    """Drop case-insensitive duplicates, keeping the first occurrence."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        key = value.lower()
        if key not in seen:
            seen.add(key)
            result.append(value)
    return tuple(result)


def new_analysis_id() -> str:
    return f"analysis_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def new_job_id() -> str:
    return f"job_{uuid.uuid4().hex}"


class _Model(BaseModel):
    """Base for models serialized with the camelCase names of the JSON contract."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Experience(_Model):
    company: str
    title: str
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    highlights: tuple[str, ...] = ()


class Education(_Model):
    institution: str
    degree: str
    field: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    gpa: str | None = None


class ParsedResume(_Model):
    """Structured signals pulled out of a resume's raw text."""

    raw_text: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    summary: str | None = None
    skills: tuple[str, ...] = ()
    experience: tuple[Experience, ...] = ()
    education: tuple[Education, ...] = ()
    keywords: tuple[str, ...] = ()

    @field_validator("skills", "keywords")
    @classmethod
    def no_duplicates(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _dedupe_casefold(v)


class JobDescription(_Model):
    """A job posting with its extracted requirements and signals.

    created_at is set at construction; the model is frozen so it never changes.
    """

    id: str = Field(default_factory=new_job_id)
    raw_text: str
    title: str | None = None
    company: str | None = None
    location: str | None = None
    source_url: str | None = None
    experience: str | None = None
    requirements: tuple[str, ...] = ()
    responsibilities: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("skills", "keywords")
    @classmethod
    def no_duplicates(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _dedupe_casefold(v)

    @field_validator("requirements", "responsibilities")
    @classmethod
    def cap_section(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return v[:MAX_SECTION_LINES]


class CompatibilityScore(_Model):
    """Sub-scores in [0, 100]. overall is the mean of the others on the fallback path."""

    overall: int = Field(ge=0, le=100)
    skills: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)


class SuggestionCategory(StrEnum):
    SKILLS = "skills"
    EXPERIENCE = "experience"
    KEYWORDS = "keywords"
    FORMATTING = "formatting"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: object) -> "SuggestionCategory":
        """Map a provider-supplied value to a category, defaulting to OTHER."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.OTHER


class SuggestionPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def coerce(cls, value: object) -> "SuggestionPriority":
        """Map a provider-supplied value to a priority, defaulting to MEDIUM."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.MEDIUM


class Suggestion(_Model):
    category: SuggestionCategory
    priority: SuggestionPriority
    title: str
    description: str
    action: str | None = None


class AnalysisResult(_Model):
    """Outcome of one resume-vs-job analysis.

    Serialize with ``model_dump(mode="json", by_alias=True)`` to get the
    camelCase JSON shape callers parse.
    """

    id: str = Field(default_factory=new_analysis_id)
    resume_id: str = ""
    job_description_id: str = ""
    score: CompatibilityScore
    suggestions: tuple[Suggestion, ...] = ()
    matched_keywords: tuple[str, ...] = ()
    missing_keywords: tuple[str, ...] = ()
    created_at: datetime = Field(default_factory=datetime.now)
