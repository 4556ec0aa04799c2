"""Personalized program generation.

generate_program(criteria, catalog) is a pure function: it filters the catalog
snapshot, picks a weekly split, fills each cycle day with exercises and doses
them for the goal. Identical inputs always give identical templates (list
order and id membership only, no randomness).

Flow: criteria -> candidate pool -> muscle-group index -> split strategy ->
day allocation (+ parameters) -> template.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.core.constants import (
    MAX_EXERCISES_PER_DAY,
    MAX_PER_GROUP_DEFAULT,
    MAX_PER_GROUP_GAIN_MUSCLE,
    PADDING_DAY_CEILING,
    PADDING_MAX_EXTRA,
    PADDING_THRESHOLD,
)
from app.core.enums import Goal
from app.core.exceptions import EmptyProgram
from app.schemas.exercise import CatalogExercise
from app.schemas.program import GenerationCriteria, ProgramExerciseAssignment, ProgramTemplate
from app.services.candidate_pool import MuscleGroupIndex, build_candidate_pool
from app.services.split_strategy import SplitDay, SplitStrategy, select_split_strategy
from app.services.training_parameters import assign_training_parameters

logger = logging.getLogger(__name__)


def max_per_group(goal: Goal) -> int:
    return MAX_PER_GROUP_GAIN_MUSCLE if goal == Goal.GAIN_MUSCLE else MAX_PER_GROUP_DEFAULT


def select_day_exercises(
    groups: SplitDay,
    index: MuscleGroupIndex,
    goal: Goal,
) -> list[CatalogExercise]:
    """
    Pick the exercises for one training day.

    1. Up to max_per_group exercises from each group's bucket (full_body stands in
       for a missing group), skipping ones already on the day.
    2. Padding: with fewer than PADDING_THRESHOLD, add unused exercises from the
       whole pool until PADDING_MAX_EXTRA were added or the day holds PADDING_DAY_CEILING.
    3. Keep at most MAX_EXERCISES_PER_DAY, in insertion order.

    Exercises may repeat across days, never within one. Membership is by id.
    """
    cap = max_per_group(goal)
    selected: list[CatalogExercise] = []
    seen: set[int] = set()

    for group in groups:
        taken = 0
        for ex in index.bucket_for(group):
            if taken >= cap:
                break
            if ex.id in seen:
                continue
            selected.append(ex)
            seen.add(ex.id)
            taken += 1

    if len(selected) < PADDING_THRESHOLD:
        added = 0
        for ex in index.flattened():
            if added >= PADDING_MAX_EXTRA or len(selected) >= PADDING_DAY_CEILING:
                break
            if ex.id in seen:
                continue
            selected.append(ex)
            seen.add(ex.id)
            added += 1

    return selected[:MAX_EXERCISES_PER_DAY]


def allocate_days(
    strategy: SplitStrategy,
    index: MuscleGroupIndex,
    criteria: GenerationCriteria,
) -> list[list[ProgramExerciseAssignment]]:
    """
    One list of assignments per training day, day numbers starting at 1.
    Iterates the split's days, never more than days_per_week of them.
    """
    days: list[list[ProgramExerciseAssignment]] = []
    day_count = min(len(strategy), criteria.days_per_week)
    for day_number, groups in enumerate(strategy[:day_count], start=1):
        exercises = select_day_exercises(groups, index, criteria.goal)
        assignments = []
        for order, ex in enumerate(exercises):
            params = assign_training_parameters(ex.type, criteria.goal)
            assignments.append(
                ProgramExerciseAssignment(
                    exercise_id=ex.id,
                    day=day_number,
                    week=1,
                    order=order,
                    **params.model_dump(),
                )
            )
        logger.debug(
            "Day %d (%s): %d exercises",
            day_number,
            ", ".join(g.value for g in groups),
            len(assignments),
        )
        days.append(assignments)
    return days


def assemble_program(
    criteria: GenerationCriteria,
    days: Sequence[Sequence[ProgramExerciseAssignment]],
) -> ProgramTemplate:
    """Concatenate day assignments (day order, then order) into a template. Raises EmptyProgram."""
    exercises = tuple(a for day in days for a in day)
    if not exercises:
        raise EmptyProgram()
    return ProgramTemplate(
        goal=criteria.goal,
        difficulty=criteria.difficulty,
        duration_weeks=criteria.duration_weeks,
        days_per_week=criteria.days_per_week,
        total_duration_days=criteria.duration_weeks * 7,
        exercises=exercises,
    )


def generate_program(
    criteria: GenerationCriteria,
    catalog: Sequence[CatalogExercise],
) -> ProgramTemplate:
    """
    Build the week-1 program template for criteria from a catalog snapshot.

    catalog must be in a stable order (e.g. by id). Raises NoCandidateExercises
    when filtering leaves nothing, EmptyProgram when nothing could be allocated.
    """
    pool = build_candidate_pool(catalog, criteria)
    index = MuscleGroupIndex(pool)
    strategy = select_split_strategy(criteria.goal, criteria.days_per_week)
    days = allocate_days(strategy, index, criteria)
    template = assemble_program(criteria, days)
    logger.info(
        "Generated program: goal=%s difficulty=%s days_per_week=%d pool=%d assignments=%d",
        criteria.goal.value,
        criteria.difficulty.value,
        criteria.days_per_week,
        len(pool),
        len(template.exercises),
    )
    return template
