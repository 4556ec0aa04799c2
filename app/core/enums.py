"""Shared enums for models, schemas and program generation."""

from enum import Enum


class Goal(str, Enum):
    """User's training objective."""

    LOSE_WEIGHT = "lose_weight"
    GAIN_MUSCLE = "gain_muscle"
    MAINTAIN = "maintain"
    ENDURANCE = "endurance"
    DEFINITION = "definition"


class Difficulty(str, Enum):
    """Experience level, ordered beginner < intermediate < advanced."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExerciseType(str, Enum):
    """How an exercise is dosed in a program."""

    STRENGTH = "strength"  # sets x reps
    CARDIO = "cardio"  # minutes
    FLEXIBILITY = "flexibility"  # minutes


class MuscleGroup(str, Enum):
    """Muscle-group tags used by the catalog and the split table."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CORE = "core"
    FULL_BODY = "full_body"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    BALANCE = "balance"
    OTHER = "other"  # bucket for exercises without a group

