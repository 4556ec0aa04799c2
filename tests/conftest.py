"""Shared fixtures: exercise factory, sample catalogs and an in-memory session."""

import itertools
import uuid
from datetime import datetime, timezone

import pytest

from app.models import Program, ProgramExercise
from app.schemas.exercise import CatalogExercise


class FakeResult:
    def __init__(self, rows):
        self._rows = list(rows)

    def scalars(self):
        return self

    def all(self):
        return self._rows

    def scalar_one(self):
        return self._rows[0]

    def scalar_one_or_none(self):
        return self._rows[0] if self._rows else None


class FakeSession:
    """
    AsyncSession stand-in.

    execute() answers from `results` in order (one row list per call), then
    falls back to the programs added so far (re-selecting a flushed program).
    flush() assigns ids and timestamps and links entries to their program.
    """

    def __init__(self, results=(), error=None):
        self.results = list(results)
        self.error = error
        self.added = []
        self.statements = []

    def add(self, obj):
        self.added.append(obj)

    async def flush(self):
        programs = {p.id: p for p in self.added if isinstance(p, Program) and p.id is not None}
        for obj in self.added:
            if obj.id is None:
                obj.id = uuid.uuid4()
            if isinstance(obj, Program):
                if obj.created_at is None:
                    obj.created_at = datetime.now(timezone.utc)
                programs[obj.id] = obj
            elif isinstance(obj, ProgramExercise) and obj.program is None:
                obj.program = programs[obj.program_id]

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self.error is not None:
            raise self.error
        if self.results:
            return FakeResult(self.results.pop(0))
        return FakeResult(p for p in self.added if isinstance(p, Program))

    async def commit(self):
        pass

    async def rollback(self):
        pass


@pytest.fixture
def fake_session():
    """Factory: fake_session(results=[[row, ...], ...], error=None)."""
    return FakeSession


@pytest.fixture
def make_exercise():
    """Factory for catalog exercises with sequential ids (catalog order = id order)."""
    counter = itertools.count(1)

    def _make(muscle_group="chest", type="strength", equipment="barbell", difficulty="beginner", **kwargs):
        exercise_id = kwargs.pop("id", None) or next(counter)
        return CatalogExercise(
            id=exercise_id,
            name=kwargs.pop("name", f"Exercise {exercise_id}"),
            muscle_group=muscle_group,
            type=type,
            equipment=equipment,
            difficulty=difficulty,
            **kwargs,
        )

    return _make


@pytest.fixture
def scenario_catalog():
    """E1 chest, E2 back, E3 legs (barbell, intermediate), E4 core (bodyweight, beginner)."""
    return [
        CatalogExercise(id=1, name="E1", muscle_group="chest", type="strength", equipment="barbell", difficulty="intermediate"),
        CatalogExercise(id=2, name="E2", muscle_group="back", type="strength", equipment="barbell", difficulty="intermediate"),
        CatalogExercise(id=3, name="E3", muscle_group="legs", type="strength", equipment="barbell", difficulty="intermediate"),
        CatalogExercise(id=4, name="E4", muscle_group="core", type="strength", equipment="bodyweight", difficulty="beginner"),
    ]


@pytest.fixture
def full_catalog(make_exercise):
    """A varied catalog covering every split tag, several levels, locations and warnings."""
    rows = [
        ("chest", "strength", "barbell", "intermediate", "gym", "Not for shoulder injuries"),
        ("chest", "strength", "bodyweight", "beginner", "home", "Avoid if wrist pain"),
        ("chest", "strength", "dumbbells", "intermediate", "gym", None),
        ("back", "strength", "bodyweight", "advanced", "home", "Not for beginners"),
        ("back", "strength", "barbell", "intermediate", "gym", "Lower back stress"),
        ("back", "strength", "machine", "beginner", "gym", None),
        ("legs", "strength", "barbell", "advanced", "gym", "Back injuries if done wrong"),
        ("legs", "strength", "bodyweight", "beginner", "home", "Knee pain? reduce depth"),
        ("legs", "strength", "barbell", "intermediate", "gym", None),
        ("shoulders", "strength", "barbell", "intermediate", "gym", "Lower back issues"),
        ("shoulders", "strength", "dumbbells", "beginner", "gym", "Shoulder impingement"),
        ("arms", "strength", "dumbbells", "beginner", "gym", "Elbow pain"),
        ("biceps", "strength", "dumbbells", "beginner", "gym", None),
        ("triceps", "strength", "bodyweight", "intermediate", "home", "Shoulder pain"),
        ("core", "strength", "bodyweight", "beginner", "home", "Lower back pain"),
        ("core", "strength", "bodyweight", "beginner", "home", "Neck pain"),
        ("cardio", "cardio", "none", "beginner", "outdoor", "Knee or joint issues"),
        ("cardio", "cardio", "none", "beginner", "outdoor", None),
        ("full_body", "cardio", "none", "intermediate", "home", "Knee or ankle issues"),
        ("full_body", "strength", "dumbbells", "intermediate", "gym", None),
        ("flexibility", "flexibility", "none", "beginner", "home", "Never stretch cold muscles"),
        ("balance", "flexibility", "none", "beginner", "home", None),
    ]
    return [
        make_exercise(
            muscle_group=group, type=kind, equipment=equipment, difficulty=level, location=location, warnings=warnings
        )
        for group, kind, equipment, level, location, warnings in rows
    ]
