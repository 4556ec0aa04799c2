"""Exercise schemas."""

from pydantic import BaseModel, ConfigDict


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    instructions: str | None = None
    type: str
    muscle_group: str | None = None
    equipment: str | None = None
    location: str | None = None
    difficulty: str
    goal: str | None = None
    warnings: str | None = None
    calories_per_min: float | None = None


class CatalogExercise(BaseModel):
    """Immutable catalog snapshot entry handed to the program generator."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str = ""
    muscle_group: str | None = None
    equipment: str | None = None
    location: str | None = None
    difficulty: str | None = None  # unknown or missing never passes the difficulty filter
    type: str = "strength"
    goal: str | None = None  # optional goal tag; absence never filters
    warnings: str | None = None


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in program responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: str
    muscle_group: str | None = None
