"""Per-exercise dosage from exercise type and training goal.

Strength work gets sets x reps with rest; cardio and flexibility get a
duration. Other types get no dosage (body-weight / skill work, unspecified).
"""

from __future__ import annotations

from app.core.enums import ExerciseType, Goal
from app.schemas.program import TrainingParameters

STRENGTH_BY_GOAL: dict[Goal, TrainingParameters] = {
    Goal.GAIN_MUSCLE: TrainingParameters(sets=4, reps=8, rest_seconds=90, notes="for muscle mass"),
    Goal.ENDURANCE: TrainingParameters(sets=3, reps=15, rest_seconds=60, notes="for endurance"),
    Goal.DEFINITION: TrainingParameters(sets=3, reps=12, rest_seconds=45, notes="for definition"),
}
# maintain, lose_weight
STRENGTH_BALANCED = TrainingParameters(sets=3, reps=10, rest_seconds=60, notes="balanced program")

CARDIO_MINUTES_LOSE_WEIGHT = 30
CARDIO_MINUTES_DEFAULT = 20
FLEXIBILITY_MINUTES = 15

NO_PARAMETERS = TrainingParameters()


def assign_training_parameters(exercise_type: ExerciseType | str, goal: Goal) -> TrainingParameters:
    """Dosage for an exercise of exercise_type when training for goal."""
    goal = Goal(goal)
    kind = (exercise_type or "").strip().lower()
    if kind == ExerciseType.STRENGTH:
        return STRENGTH_BY_GOAL.get(goal, STRENGTH_BALANCED)
    if kind == ExerciseType.CARDIO:
        minutes = CARDIO_MINUTES_LOSE_WEIGHT if goal == Goal.LOSE_WEIGHT else CARDIO_MINUTES_DEFAULT
        return TrainingParameters(duration_minutes=minutes, notes="cardio for endurance")
    if kind == ExerciseType.FLEXIBILITY:
        return TrainingParameters(duration_minutes=FLEXIBILITY_MINUTES, notes="stretching for flexibility")
    return NO_PARAMETERS
