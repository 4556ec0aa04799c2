"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.exercise import Exercise
from app.models.program import Program, ProgramExercise

__all__ = [
    "Exercise",
    "Program",
    "ProgramExercise",
]
