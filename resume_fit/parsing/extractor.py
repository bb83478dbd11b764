"""Heuristic extraction of structured fields from resume and job text.

Every function here is pure and total: no I/O, no exceptions for odd input.
Signals that cannot be found come back as None or an empty list.
"""

import re
from collections import Counter

from resume_fit.core.schemas import MAX_SECTION_LINES, JobDescription, ParsedResume
from resume_fit.parsing.vocabulary import SKILLS, STOP_WORDS

MAX_KEYWORDS = 20
MIN_KEYWORD_LENGTH = 4
MIN_SECTION_LINE_LENGTH = 10

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"(\+?1?[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_DIGIT_RUN_RE = re.compile(r"\d{3}")
_NON_LETTER_RE = re.compile(r"[^a-z\s]")

# "Austin, TX" first, then "Berlin, Germany".
_LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[A-Z][a-z]+,?\s*[A-Z]{2}"),
    re.compile(r"[A-Z][a-z]+,\s*[A-Z][a-z]+"),
)

_REQUIREMENT_MARKERS = ("requirement", "qualification", "must have")
_REQUIREMENT_EXITS = ("responsibilit", "about us", "benefits")
_RESPONSIBILITY_MARKERS = ("responsibilit", "what you", "you will")
_RESPONSIBILITY_EXITS = ("requirement", "qualification", "benefits")


def _non_empty_lines(text: str) -> list[str]:
    return [stripped for line in text.split("\n") if (stripped := line.strip())]


def extract_name(lines: list[str]) -> str | None:
    """The first of the top five lines that looks like a name."""
    for line in lines[:5]:
        if 2 < len(line) < 50 and "@" not in line and not _DIGIT_RUN_RE.search(line):
            return line
    return None


def extract_email(text: str) -> str | None:
    match = _EMAIL_RE.search(text)
    return match.group(0) if match else None


def extract_phone(text: str) -> str | None:
    # The optional country-code group can swallow a leading separator.
    match = _PHONE_RE.search(text)
    return match.group(0).strip() if match else None


def extract_location(lines: list[str]) -> str | None:
    """Scan the top ten lines for a "City, ST" or "City, Country" token."""
    for line in lines[:10]:
        for pattern in _LOCATION_PATTERNS:
            match = pattern.search(line)
            if match:
                return match.group(0)
    return None


def extract_skills(text: str) -> list[str]:
    """Vocabulary terms found in the text (case-insensitive substring), in vocabulary order."""
    lower = text.lower()
    found: list[str] = []
    for skill in SKILLS:
        if skill.lower() in lower and skill not in found:
            found.append(skill)
    return found


def extract_keywords(text: str) -> list[str]:
    """Top keywords by frequency.

    Tokens are lowercase letter runs of 4+ characters that are not stop words.
    Ties keep first-occurrence order: Counter preserves insertion order and
    most_common() sorts stably.
    """
    tokens = _NON_LETTER_RE.sub(" ", text.lower()).split()
    counts = Counter(
        token for token in tokens
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS
    )
    return [word for word, _ in counts.most_common(MAX_KEYWORDS)]


def _extract_section(
    text: str,
    markers: tuple[str, ...],
    exits: tuple[str, ...],
) -> list[str]:
    """Collect lines under a section header until an exit marker.

    The header line itself is skipped. A line matching both a marker and an
    exit counts as a header.
    """
    collected: list[str] = []
    in_section = False

    for line in text.split("\n"):
        lower = line.lower()
        if any(marker in lower for marker in markers):
            in_section = True
            continue
        if in_section and any(marker in lower for marker in exits):
            in_section = False
        stripped = line.strip()
        if in_section and len(stripped) > MIN_SECTION_LINE_LENGTH:
            collected.append(stripped)

    return collected[:MAX_SECTION_LINES]


def extract_requirements(text: str) -> list[str]:
    return _extract_section(text, _REQUIREMENT_MARKERS, _REQUIREMENT_EXITS)


def extract_responsibilities(text: str) -> list[str]:
    return _extract_section(text, _RESPONSIBILITY_MARKERS, _RESPONSIBILITY_EXITS)


def extract_resume_data(text: str) -> ParsedResume:
    """Build a ParsedResume from raw resume text."""
    lines = _non_empty_lines(text)
    return ParsedResume(
        raw_text=text,
        name=extract_name(lines),
        email=extract_email(text),
        phone=extract_phone(text),
        location=extract_location(lines),
        skills=extract_skills(text),
        keywords=extract_keywords(text),
    )


def extract_job_data(text: str, source_url: str | None = None) -> JobDescription:
    """Build a JobDescription from raw job posting text."""
    return JobDescription(
        raw_text=text,
        source_url=source_url,
        requirements=extract_requirements(text),
        responsibilities=extract_responsibilities(text),
        skills=extract_skills(text),
        keywords=extract_keywords(text),
    )
