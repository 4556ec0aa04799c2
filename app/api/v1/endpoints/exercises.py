"""Exercise catalog endpoints (read-only)."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import MAX_EXERCISES_PAGE_SIZE
from app.db.session import get_db
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseRead

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    muscle_group: str | None = None,
    type: str | None = None,
    skip: int = 0,
    limit: int = Query(100, ge=1, le=MAX_EXERCISES_PAGE_SIZE),
):
    """List catalog exercises in id order, optionally by muscle group and type."""
    stmt = select(Exercise)
    if muscle_group:
        stmt = stmt.where(Exercise.muscle_group == muscle_group)
    if type:
        stmt = stmt.where(Exercise.type == type)
    result = await db.execute(stmt.order_by(Exercise.id).offset(skip).limit(limit))
    return list(result.scalars().all())


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a single exercise by id."""
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise
