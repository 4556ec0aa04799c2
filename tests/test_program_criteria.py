"""Tests for criteria normalization."""

import pydantic
import pytest

from app.core.enums import Difficulty, Goal
from app.core.exceptions import CriteriaValidationError
from app.schemas.program import ProgramGenerateRequest
from app.services.program_criteria import normalize_criteria


class TestDefaults:
    def test_empty_request_uses_defaults(self):
        criteria = normalize_criteria({})
        assert criteria.goal == Goal.MAINTAIN
        assert criteria.difficulty == Difficulty.INTERMEDIATE
        assert criteria.days_per_week == 3
        assert criteria.duration_weeks == 4
        assert criteria.equipment == ()
        assert criteria.location == ()
        assert criteria.muscle_emphasis == ()
        assert criteria.excluded_keywords == ()

    def test_unknown_goal_and_difficulty_are_treated_as_missing(self):
        criteria = normalize_criteria({"goal": "bulk", "difficulty": "expert"})
        assert criteria.goal == Goal.MAINTAIN
        assert criteria.difficulty == Difficulty.INTERMEDIATE

    def test_goal_and_difficulty_are_case_insensitive(self):
        criteria = normalize_criteria({"goal": " Gain_Muscle ", "difficulty": "ADVANCED"})
        assert criteria.goal == Goal.GAIN_MUSCLE
        assert criteria.difficulty == Difficulty.ADVANCED

    @pytest.mark.parametrize("weeks", [0, -2, "soon", None, 1.5])
    def test_bad_duration_defaults_to_four_weeks(self, weeks):
        assert normalize_criteria({"duration_weeks": weeks}).duration_weeks == 4

    def test_duration_weeks_kept_when_valid(self):
        assert normalize_criteria({"duration_weeks": "6"}).duration_weeks == 6


class TestDaysPerWeek:
    @pytest.mark.parametrize("days, expected", [(2, 2), (5, 5), ("4", 4), (7, 7), (3.0, 3)])
    def test_accepts_positive_integers(self, days, expected):
        assert normalize_criteria({"days_per_week": days}).days_per_week == expected

    @pytest.mark.parametrize("days", [0, -1, "three", 2.5, True, [3]])
    def test_rejects_non_positive_or_non_integer(self, days):
        with pytest.raises(CriteriaValidationError) as exc_info:
            normalize_criteria({"days_per_week": days})
        assert exc_info.value.error_code == "VALIDATION_ERROR_DAYS_PER_WEEK"
        assert exc_info.value.status_code == 422


class TestTags:
    def test_single_string_becomes_one_tag(self):
        assert normalize_criteria({"equipment": "Barbell"}).equipment == ("barbell",)

    def test_duplicates_and_blanks_dropped_in_first_seen_order(self):
        criteria = normalize_criteria({"location": ["gym", " ", "home", "GYM"]})
        assert criteria.location == ("gym", "home")

    def test_excluded_keywords_keep_their_case(self):
        criteria = normalize_criteria({"excluded_keywords": ["Knee", "knee"]})
        assert criteria.excluded_keywords == ("Knee", "knee")

    def test_from_request_model(self):
        request = ProgramGenerateRequest(
            goal="endurance",
            days_per_week=4,
            equipment=["none"],
            muscle_emphasis=["cardio"],
        )
        criteria = normalize_criteria(request)
        assert criteria.goal == Goal.ENDURANCE
        assert criteria.days_per_week == 4
        assert criteria.equipment == ("none",)
        assert criteria.muscle_emphasis == ("cardio",)


def test_criteria_are_immutable():
    criteria = normalize_criteria({})
    with pytest.raises(pydantic.ValidationError):
        criteria.days_per_week = 5
