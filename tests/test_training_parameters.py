"""Tests for goal-conditioned exercise dosage."""

import pytest

from app.core.enums import ExerciseType, Goal
from app.services.training_parameters import assign_training_parameters


@pytest.mark.parametrize(
    "goal, sets, reps, rest, notes",
    [
        (Goal.GAIN_MUSCLE, 4, 8, 90, "for muscle mass"),
        (Goal.ENDURANCE, 3, 15, 60, "for endurance"),
        (Goal.DEFINITION, 3, 12, 45, "for definition"),
        (Goal.MAINTAIN, 3, 10, 60, "balanced program"),
        (Goal.LOSE_WEIGHT, 3, 10, 60, "balanced program"),
    ],
)
def test_strength(goal, sets, reps, rest, notes):
    params = assign_training_parameters(ExerciseType.STRENGTH, goal)
    assert (params.sets, params.reps, params.rest_seconds, params.notes) == (sets, reps, rest, notes)
    assert params.duration_minutes is None


@pytest.mark.parametrize("goal, minutes", [(Goal.LOSE_WEIGHT, 30), (Goal.GAIN_MUSCLE, 20), (Goal.ENDURANCE, 20)])
def test_cardio(goal, minutes):
    params = assign_training_parameters("cardio", goal)
    assert params.duration_minutes == minutes
    assert params.notes == "cardio for endurance"
    assert params.sets is None and params.reps is None and params.rest_seconds is None


@pytest.mark.parametrize("goal", list(Goal))
def test_flexibility(goal):
    params = assign_training_parameters("flexibility", goal)
    assert params.duration_minutes == 15
    assert params.notes == "stretching for flexibility"


@pytest.mark.parametrize("kind", ["balance", "plyometric", "", None])
def test_other_types_get_no_parameters(kind):
    params = assign_training_parameters(kind, Goal.MAINTAIN)
    assert params.model_dump() == {
        "sets": None,
        "reps": None,
        "rest_seconds": None,
        "duration_minutes": None,
        "notes": None,
    }


def test_goal_accepts_plain_string():
    assert assign_training_parameters("strength", "gain_muscle").sets == 4
