"""Catalog loading and program persistence around the (pure) generator."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.enums import Goal
from app.core.exceptions import CatalogUnavailable
from app.models.exercise import Exercise
from app.models.program import Program, ProgramExercise
from app.schemas.exercise import CatalogExercise
from app.schemas.program import ProgramExerciseAssignment, ProgramTemplate

logger = logging.getLogger(__name__)

GOAL_LABELS: dict[Goal, str] = {
    Goal.LOSE_WEIGHT: "Weight loss",
    Goal.GAIN_MUSCLE: "Muscle gain",
    Goal.MAINTAIN: "Maintenance",
    Goal.ENDURANCE: "Endurance",
    Goal.DEFINITION: "Definition",
}


async def load_exercise_catalog(db: AsyncSession) -> list[CatalogExercise]:
    """Full catalog snapshot ordered by id. Raises CatalogUnavailable on DB failure."""
    try:
        result = await db.execute(select(Exercise).order_by(Exercise.id))
        rows = result.scalars().all()
    except (SQLAlchemyError, OSError) as e:
        logger.exception("Loading exercise catalog failed: %s", e)
        raise CatalogUnavailable() from e
    return [CatalogExercise.model_validate(row) for row in rows]


def expand_template_weeks(template: ProgramTemplate) -> list[ProgramExerciseAssignment]:
    """Replicate the week-1 template for every week of the program (week-major order)."""
    return [
        a.model_copy(update={"week": week})
        for week in range(1, template.duration_weeks + 1)
        for a in template.exercises
    ]


def program_name(goal: Goal) -> str:
    return f"Personalized program ({GOAL_LABELS.get(goal, goal.value)})"


def program_description(duration_weeks: int) -> str:
    unit = "week" if duration_weeks == 1 else "weeks"
    return f"Automatically generated program lasting {duration_weeks} {unit}"


def _program_query():
    return select(Program).options(
        selectinload(Program.exercises).selectinload(ProgramExercise.exercise)
    )


async def get_program(db: AsyncSession, program_id: uuid.UUID) -> Program | None:
    result = await db.execute(_program_query().where(Program.id == program_id))
    return result.scalar_one_or_none()


async def list_programs(
    db: AsyncSession,
    goal: str | None = None,
    difficulty: str | None = None,
    max_duration_days: int | None = None,
    skip: int = 0,
    limit: int = 50,
) -> list[Program]:
    """Programs newest first, optionally filtered by goal, difficulty and max duration."""
    stmt = _program_query()
    if goal:
        stmt = stmt.where(Program.goal == goal)
    if difficulty:
        stmt = stmt.where(Program.difficulty == difficulty)
    if max_duration_days is not None:
        stmt = stmt.where(Program.duration_days <= max_duration_days)
    result = await db.execute(stmt.order_by(Program.created_at.desc()).offset(skip).limit(limit))
    return list(result.scalars().all())


async def save_program(db: AsyncSession, template: ProgramTemplate) -> Program:
    """Persist a generated template as a Program with every week materialized."""
    program = Program(
        name=program_name(template.goal),
        description=program_description(template.duration_weeks),
        goal=template.goal.value,
        difficulty=template.difficulty.value,
        duration_days=template.total_duration_days,
        days_per_week=template.days_per_week,
    )
    db.add(program)
    await db.flush()
    for a in expand_template_weeks(template):
        db.add(ProgramExercise(program_id=program.id, **a.model_dump()))
    await db.flush()
    logger.info("Program created: %s (%d weeks)", program.id, template.duration_weeks)
    result = await db.execute(
        _program_query().where(Program.id == program.id).execution_options(populate_existing=True)
    )
    return result.scalar_one()
