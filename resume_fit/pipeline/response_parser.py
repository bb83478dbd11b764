"""Parse a provider's analysis response into an AnalysisResult.

Providers may wrap the JSON in prose or markdown fences. The first JSON
object in the text is decoded and validated field by field; any type
mismatch raises ValueError so the caller can fall back to heuristics.
"""

import json
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from resume_fit.core.schemas import (
    AnalysisResult,
    CompatibilityScore,
    Suggestion,
    SuggestionCategory,
    SuggestionPriority,
)
from resume_fit.pipeline.scorer import NEUTRAL_SCORE, round_half_up


class _SuggestionPayload(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    category: str | None = None
    priority: str | None = None
    title: str | None = None
    description: str | None = None
    action: str | None = None


class _AnalysisPayload(BaseModel):
    """Expected provider response shape. Every field is optional."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    overall_score: int | float | None = Field(default=None, alias="overallScore")
    skills_score: int | float | None = Field(default=None, alias="skillsScore")
    experience_score: int | float | None = Field(default=None, alias="experienceScore")
    keywords_score: int | float | None = Field(default=None, alias="keywordsScore")
    matched_keywords: list[str] | None = Field(default=None, alias="matchedKeywords")
    missing_keywords: list[str] | None = Field(default=None, alias="missingKeywords")
    suggestions: list[dict[str, Any]] | None = None


def find_json_object(text: str) -> dict[str, Any]:
    """Decode the first JSON object embedded in text.

    Raises:
        ValueError: If no object is found or it does not decode.
    """
    start = text.find("{")
    if start == -1:
        msg = "No JSON object found in provider response"
        raise ValueError(msg)

    try:
        data, _ = json.JSONDecoder().raw_decode(text, start)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse provider response as JSON: {e}"
        raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = "Provider response JSON is not an object"
        raise ValueError(msg)
    return data


def _clamp_score(value: int | float | None) -> int:
    # Clamp before rounding: inf and huge ints cannot go through float/floor.
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return NEUTRAL_SCORE
    return round_half_up(max(0, min(100, value)))


def _to_suggestion(item: dict[str, Any]) -> Suggestion:
    payload = _SuggestionPayload.model_validate(item)
    return Suggestion(
        category=SuggestionCategory.coerce(payload.category),
        priority=SuggestionPriority.coerce(payload.priority),
        title=payload.title or "Suggestion",
        description=payload.description or "",
        action=payload.action,
    )


def parse_analysis_response(raw_text: str) -> AnalysisResult:
    """Build an AnalysisResult from provider text.

    Absent scores default to 50 and are clamped to [0, 100]. Absent lists
    default to empty. Unknown suggestion categories/priorities map to
    "other"/"medium".

    Raises:
        ValueError: If no valid JSON object is found or a field has the wrong type.
    """
    data = find_json_object(raw_text)
    try:
        payload = _AnalysisPayload.model_validate(data)
        suggestions = [_to_suggestion(s) for s in payload.suggestions or []]
    except ValidationError as e:
        msg = f"Provider response has unexpected shape: {e}"
        raise ValueError(msg) from e

    return AnalysisResult(
        score=CompatibilityScore(
            overall=_clamp_score(payload.overall_score),
            skills=_clamp_score(payload.skills_score),
            experience=_clamp_score(payload.experience_score),
            keywords=_clamp_score(payload.keywords_score),
        ),
        suggestions=suggestions,
        matched_keywords=payload.matched_keywords or [],
        missing_keywords=payload.missing_keywords or [],
    )
