"""Program generation and program schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import Difficulty, Goal
from app.schemas.exercise import ExerciseRef


# ── Generation input ─────────────────────────────────────────────────────

class ProgramGenerateRequest(BaseModel):
    """Raw generation request. Loosely typed: normalization decides defaults and errors."""

    goal: str | None = Field(None, description="lose_weight, gain_muscle, maintain, endurance or definition")
    difficulty: str | None = Field(None, description="beginner, intermediate or advanced")
    duration_weeks: Any = Field(None, description="Program length in weeks (default 4)")
    days_per_week: Any = Field(None, description="Training days per week (default 3)")
    equipment: list[str] | str | None = Field(None, description="Available equipment; empty means any")
    location: list[str] | str | None = Field(None, description="Where you train; empty means anywhere")
    muscle_emphasis: list[str] | str | None = Field(None, description="Muscle groups to prioritise")
    excluded_keywords: list[str] | str | None = Field(
        None, description="Injury keywords; exercises whose warnings mention one are skipped"
    )


class GenerationCriteria(BaseModel):
    """Normalized, immutable criteria for one generation request."""

    model_config = ConfigDict(frozen=True)

    goal: Goal = Goal.MAINTAIN
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    duration_weeks: int = Field(4, ge=1)
    days_per_week: int = Field(3, ge=1)
    equipment: tuple[str, ...] = ()
    location: tuple[str, ...] = ()
    muscle_emphasis: tuple[str, ...] = ()
    excluded_keywords: tuple[str, ...] = ()


# ── Generation output ────────────────────────────────────────────────────

class TrainingParameters(BaseModel):
    """Dosage for one exercise: sets/reps/rest, a duration, or nothing."""

    model_config = ConfigDict(frozen=True)

    sets: int | None = None
    reps: int | None = None
    rest_seconds: int | None = None
    duration_minutes: int | None = None
    notes: str | None = None


class ProgramExerciseAssignment(BaseModel):
    """One exercise on one cycle day of the week-1 template."""

    model_config = ConfigDict(frozen=True)

    exercise_id: int
    day: int = Field(..., ge=1)
    week: int = 1
    order: int = Field(..., ge=0)
    sets: int | None = None
    reps: int | None = None
    rest_seconds: int | None = None
    duration_minutes: int | None = None
    notes: str | None = None


class ProgramTemplate(BaseModel):
    """Week-1 schedule; the store replicates it across duration_weeks."""

    model_config = ConfigDict(frozen=True)

    goal: Goal
    difficulty: Difficulty
    duration_weeks: int
    days_per_week: int
    total_duration_days: int
    exercises: tuple[ProgramExerciseAssignment, ...]


# ── Persisted programs ───────────────────────────────────────────────────

class ProgramExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    exercise_id: int
    day: int
    week: int
    order: int
    sets: int | None = None
    reps: int | None = None
    rest_seconds: int | None = None
    duration_minutes: int | None = None
    notes: str | None = None
    exercise: ExerciseRef | None = None


class ProgramRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    goal: str
    difficulty: str
    duration_days: int
    days_per_week: int
    created_at: datetime
    exercises: list[ProgramExerciseRead] = []
