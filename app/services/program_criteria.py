"""Normalize raw program-generation input into GenerationCriteria.

Unknown goal/difficulty strings are treated as missing (defaulted), never
rejected. Only days_per_week can fail validation.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from app.core.constants import DEFAULT_DAYS_PER_WEEK, DEFAULT_DURATION_WEEKS
from app.core.enums import Difficulty, Goal
from app.core.exceptions import CriteriaValidationError
from app.schemas.program import GenerationCriteria, ProgramGenerateRequest


def _parse_int(value: Any) -> int | None:
    """Return value as int if it is an integer (or a string of digits), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _parse_choice(value: Any, enum_cls, default):
    if not isinstance(value, str):
        return default
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        return default


def _parse_tags(value: Any, lower: bool = True) -> tuple[str, ...]:
    """Collection (or single string) -> trimmed, de-duplicated tuple in first-seen order."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, Iterable):
        return ()
    seen: set[str] = set()
    tags: list[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        tag = item.strip().lower() if lower else item.strip()
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tuple(tags)


def normalize_days_per_week(value: Any) -> int:
    if value is None:
        return DEFAULT_DAYS_PER_WEEK
    days = _parse_int(value)
    if days is None or days < 1:
        raise CriteriaValidationError(
            f"days_per_week must be a positive integer, got {value!r}", field="days_per_week"
        )
    return days


def normalize_duration_weeks(value: Any) -> int:
    weeks = _parse_int(value)
    if weeks is None or weeks < 1:
        return DEFAULT_DURATION_WEEKS
    return weeks


def normalize_criteria(raw: ProgramGenerateRequest | Mapping[str, Any]) -> GenerationCriteria:
    """Validate and normalize raw request fields. Raises CriteriaValidationError."""
    if isinstance(raw, ProgramGenerateRequest):
        raw = raw.model_dump()
    return GenerationCriteria(
        goal=_parse_choice(raw.get("goal"), Goal, Goal.MAINTAIN),
        difficulty=_parse_choice(raw.get("difficulty"), Difficulty, Difficulty.INTERMEDIATE),
        duration_weeks=normalize_duration_weeks(raw.get("duration_weeks")),
        days_per_week=normalize_days_per_week(raw.get("days_per_week")),
        equipment=_parse_tags(raw.get("equipment")),
        location=_parse_tags(raw.get("location")),
        muscle_emphasis=_parse_tags(raw.get("muscle_emphasis")),
        excluded_keywords=_parse_tags(raw.get("excluded_keywords"), lower=False),
    )
