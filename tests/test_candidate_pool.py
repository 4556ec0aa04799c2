"""Tests for candidate pool filtering and muscle-group indexing."""

import pytest

from app.core.enums import Difficulty, Goal
from app.core.exceptions import NoCandidateExercises
from app.schemas.exercise import CatalogExercise
from app.schemas.program import GenerationCriteria
from app.services.candidate_pool import MuscleGroupIndex, allowed_difficulties, build_candidate_pool


def ids(exercises):
    return [ex.id for ex in exercises]


class TestFilters:
    def test_no_filters_keep_catalog_order(self, full_catalog):
        pool = build_candidate_pool(full_catalog, GenerationCriteria(difficulty=Difficulty.ADVANCED))
        assert ids(pool) == ids(full_catalog)

    def test_equipment_filter(self, make_exercise):
        catalog = [make_exercise(equipment="barbell"), make_exercise(equipment="dumbbells"), make_exercise(equipment="Barbell")]
        pool = build_candidate_pool(catalog, GenerationCriteria(equipment=("barbell",)))
        assert ids(pool) == [1, 3]

    def test_location_filter_drops_exercises_without_location(self, make_exercise):
        catalog = [make_exercise(location="home"), make_exercise(location="gym"), make_exercise()]
        pool = build_candidate_pool(catalog, GenerationCriteria(location=("home", "outdoor")))
        assert ids(pool) == [1]

    @pytest.mark.parametrize(
        "level, expected",
        [
            (Difficulty.BEGINNER, [1]),
            (Difficulty.INTERMEDIATE, [1, 2]),
            (Difficulty.ADVANCED, [1, 2, 3]),
        ],
    )
    def test_difficulty_ceiling(self, make_exercise, level, expected):
        catalog = [
            make_exercise(difficulty="beginner"),
            make_exercise(difficulty="intermediate"),
            make_exercise(difficulty="advanced"),
        ]
        assert ids(build_candidate_pool(catalog, GenerationCriteria(difficulty=level))) == expected

    def test_unrecognized_difficulty_uses_intermediate_ceiling(self):
        assert allowed_difficulties("expert") == allowed_difficulties(Difficulty.INTERMEDIATE)

    def test_exercise_without_known_difficulty_never_passes(self, make_exercise):
        catalog = [
            CatalogExercise(id=1, name="Untagged", muscle_group="chest"),
            make_exercise(id=2, difficulty="expert"),
            make_exercise(id=3, difficulty="beginner"),
        ]
        pool = build_candidate_pool(catalog, GenerationCriteria(difficulty=Difficulty.ADVANCED))
        assert ids(pool) == [3]

    def test_goal_tag_is_best_effort(self, make_exercise):
        catalog = [make_exercise(goal="gain_muscle"), make_exercise(goal="endurance"), make_exercise()]
        pool = build_candidate_pool(catalog, GenerationCriteria(goal=Goal.GAIN_MUSCLE))
        assert ids(pool) == [1, 3]

    def test_excluded_keywords_match_warnings_case_insensitively(self, make_exercise):
        catalog = [
            make_exercise(warnings="Knee pain? Reduce depth."),
            make_exercise(warnings="Lower BACK stress"),
            make_exercise(warnings=None),
            make_exercise(warnings="Good for beginners"),
        ]
        pool = build_candidate_pool(catalog, GenerationCriteria(excluded_keywords=("knee", "Back")))
        assert ids(pool) == [3, 4]

    def test_empty_catalog_raises(self):
        with pytest.raises(NoCandidateExercises):
            build_candidate_pool([], GenerationCriteria())

    def test_nothing_matching_raises(self, full_catalog):
        with pytest.raises(NoCandidateExercises):
            build_candidate_pool(full_catalog, GenerationCriteria(equipment=("kettlebell",)))


class TestMuscleEmphasis:
    def test_stable_partition_moves_emphasized_groups_to_front(self, make_exercise):
        catalog = [
            make_exercise("chest"),
            make_exercise("legs"),
            make_exercise("back"),
            make_exercise("legs"),
            make_exercise("core"),
        ]
        pool = build_candidate_pool(catalog, GenerationCriteria(muscle_emphasis=("legs", "core")))
        assert ids(pool) == [2, 4, 5, 1, 3]

    def test_emphasis_on_absent_group_keeps_order(self, make_exercise):
        catalog = [make_exercise("chest"), make_exercise("back")]
        pool = build_candidate_pool(catalog, GenerationCriteria(muscle_emphasis=("arms",)))
        assert ids(pool) == [1, 2]


class TestMuscleGroupIndex:
    def test_buckets_follow_pool_order(self, make_exercise):
        pool = [make_exercise("back"), make_exercise("chest"), make_exercise("back"), make_exercise(None)]
        index = MuscleGroupIndex(pool)
        assert index.tags() == ["back", "chest", "other"]
        assert ids(index.get("back")) == [1, 3]
        assert ids(index.get("other")) == [4]
        assert "chest" in index
        assert len(index) == 3

    def test_missing_group_falls_back_to_full_body(self, make_exercise):
        index = MuscleGroupIndex([make_exercise("chest"), make_exercise("full_body")])
        assert ids(index.bucket_for("shoulders")) == [2]
        assert ids(index.bucket_for("chest")) == [1]

    def test_missing_group_without_full_body_is_empty(self, make_exercise):
        index = MuscleGroupIndex([make_exercise("chest")])
        assert index.bucket_for("triceps") == ()

    def test_flattened_concatenates_buckets(self, make_exercise):
        pool = [make_exercise("back"), make_exercise("chest"), make_exercise("back")]
        assert ids(MuscleGroupIndex(pool).flattened()) == [1, 3, 2]
