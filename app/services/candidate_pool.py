"""Candidate pool: filter the catalog snapshot for one request and bucket it by muscle group."""

from __future__ import annotations

from collections.abc import Sequence

from app.core.enums import Difficulty, MuscleGroup
from app.core.exceptions import NoCandidateExercises
from app.schemas.exercise import CatalogExercise
from app.schemas.program import GenerationCriteria

# Difficulty ceiling: which exercise levels a user of each level may get
DIFFICULTY_CEILING: dict[Difficulty, frozenset[str]] = {
    Difficulty.BEGINNER: frozenset({"beginner"}),
    Difficulty.INTERMEDIATE: frozenset({"beginner", "intermediate"}),
    Difficulty.ADVANCED: frozenset({"beginner", "intermediate", "advanced"}),
}


def _norm(value: str | None) -> str:
    return (value or "").strip().lower()


def allowed_difficulties(difficulty: Difficulty | str) -> frozenset[str]:
    """Levels allowed for a user; anything unrecognized gets the intermediate ceiling."""
    try:
        return DIFFICULTY_CEILING[Difficulty(difficulty)]
    except ValueError:
        return DIFFICULTY_CEILING[Difficulty.INTERMEDIATE]


def is_excluded(exercise: CatalogExercise, keywords: Sequence[str]) -> bool:
    """True if any keyword (case-insensitive) is a substring of the exercise's warnings."""
    if not exercise.warnings or not keywords:
        return False
    warnings = exercise.warnings.casefold()
    return any(k.casefold() in warnings for k in keywords if k)


def matches_criteria(exercise: CatalogExercise, criteria: GenerationCriteria) -> bool:
    """Conjunctive filter: equipment, location, goal tag, difficulty ceiling, exclusions."""
    if criteria.equipment and _norm(exercise.equipment) not in {_norm(e) for e in criteria.equipment}:
        return False
    if criteria.location and _norm(exercise.location) not in {_norm(loc) for loc in criteria.location}:
        return False
    # Goal tag is best-effort: untagged exercises suit every goal
    if exercise.goal and _norm(exercise.goal) != criteria.goal.value:
        return False
    if _norm(exercise.difficulty) not in allowed_difficulties(criteria.difficulty):
        return False
    return not is_excluded(exercise, criteria.excluded_keywords)


def build_candidate_pool(
    catalog: Sequence[CatalogExercise],
    criteria: GenerationCriteria,
) -> list[CatalogExercise]:
    """
    Filter the catalog for this request, keeping catalog order.
    With a muscle emphasis, emphasized exercises move to the front (stable partition).
    Raises NoCandidateExercises when nothing is left.
    """
    pool = [ex for ex in catalog if matches_criteria(ex, criteria)]
    if criteria.muscle_emphasis:
        emphasis = {_norm(m) for m in criteria.muscle_emphasis}
        front = [ex for ex in pool if _norm(ex.muscle_group) in emphasis]
        rest = [ex for ex in pool if _norm(ex.muscle_group) not in emphasis]
        pool = front + rest
    if not pool:
        raise NoCandidateExercises()
    return pool


class MuscleGroupIndex:
    """Pool bucketed by muscle-group tag, each bucket in pool order."""

    def __init__(self, pool: Sequence[CatalogExercise]):
        self._buckets: dict[str, list[CatalogExercise]] = {}
        for ex in pool:
            tag = _norm(ex.muscle_group) or MuscleGroup.OTHER.value
            self._buckets.setdefault(tag, []).append(ex)

    def __contains__(self, tag: str) -> bool:
        return _norm(tag) in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def tags(self) -> list[str]:
        """Bucket tags in order of first appearance in the pool."""
        return list(self._buckets)

    def get(self, tag: MuscleGroup | str) -> tuple[CatalogExercise, ...]:
        """Exact bucket for tag (no substitution)."""
        return tuple(self._buckets.get(_norm(tag), ()))

    def bucket_for(self, tag: MuscleGroup | str) -> tuple[CatalogExercise, ...]:
        """Bucket for tag, else the full_body bucket, else empty."""
        bucket = self._buckets.get(_norm(tag))
        if bucket:
            return tuple(bucket)
        return self.get(MuscleGroup.FULL_BODY)

    def flattened(self) -> list[CatalogExercise]:
        """All buckets concatenated in bucket order."""
        return [ex for bucket in self._buckets.values() for ex in bucket]
