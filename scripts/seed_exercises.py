"""Seed the exercise catalog with a starter set (upsert by name).

Usage: python scripts/seed_exercises.py
"""

import asyncio
import logging
import os
import sys

# Add parent directory to path so we can import app modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from app.db.session import async_session_maker, engine
from app.models.exercise import Exercise

logger = logging.getLogger("seed_exercises")

STARTER_EXERCISES: list[dict] = [
    # Chest
    {"name": "Push-ups", "type": "strength", "muscle_group": "chest", "equipment": "bodyweight",
     "location": "home", "difficulty": "beginner", "calories_per_min": 8,
     "warnings": "Avoid if you have wrist pain. Place hands slightly wider than shoulders."},
    {"name": "Bench Press", "type": "strength", "muscle_group": "chest", "equipment": "barbell",
     "location": "gym", "difficulty": "intermediate", "calories_per_min": 7,
     "warnings": "NOT for shoulder injuries. Start with light weight. Always use safety bars or a spotter."},
    {"name": "Dumbbell Flyes", "type": "strength", "muscle_group": "chest", "equipment": "dumbbells",
     "location": "gym", "difficulty": "intermediate", "calories_per_min": 6,
     "warnings": "Avoid if shoulder issues. Start very light. Overstretching can cause injury."},
    {"name": "Incline Dumbbell Press", "type": "strength", "muscle_group": "chest", "equipment": "dumbbells",
     "location": "gym", "difficulty": "intermediate", "calories_per_min": 7,
     "warnings": "Shoulder-friendly alternative to incline barbell press. Start with lighter weight."},
    # Back
    {"name": "Pull-ups", "type": "strength", "muscle_group": "back", "equipment": "bodyweight",
     "location": "home", "difficulty": "advanced", "calories_per_min": 10,
     "warnings": "NOT for beginners. Build strength with negatives first. Wrist pain? Try different grips."},
    {"name": "Bent-over Row", "type": "strength", "muscle_group": "back", "equipment": "barbell",
     "location": "gym", "difficulty": "intermediate", "calories_per_min": 7,
     "warnings": "Lower back stress. If pain occurs, reduce weight or switch to chest-supported row."},
    {"name": "Lat Pulldown", "type": "strength", "muscle_group": "back", "equipment": "machine",
     "location": "gym", "difficulty": "beginner", "calories_per_min": 6,
     "warnings": "Good for building up to pull-ups. Focus on form over weight."},
    # Legs
    {"name": "Deadlift", "type": "strength", "muscle_group": "legs", "equipment": "barbell",
     "location": "gym", "difficulty": "advanced", "calories_per_min": 9,
     "warnings": "Proper form is essential. Get coaching before heavy weights. Back injuries if done wrong."},
    {"name": "Squats", "type": "strength", "muscle_group": "legs", "equipment": "bodyweight",
     "location": "home", "difficulty": "beginner", "calories_per_min": 9,
     "warnings": "Knee pain? Ensure proper form or reduce depth."},
    {"name": "Barbell Squat", "type": "strength", "muscle_group": "legs", "equipment": "barbell",
     "location": "gym", "difficulty": "intermediate", "calories_per_min": 8,
     "warnings": "Use a squat rack with safety pins. Start light."},
    {"name": "Lunges", "type": "strength", "muscle_group": "legs", "equipment": "bodyweight",
     "location": "home", "difficulty": "beginner", "calories_per_min": 7,
     "warnings": "Knee issues? Reduce range or do reverse lunges. Balance problems? Hold onto support."},
    # Arms
    {"name": "Bicep Curls", "type": "strength", "muscle_group": "arms", "equipment": "dumbbells",
     "location": "gym", "difficulty": "beginner", "calories_per_min": 5,
     "warnings": "Elbow pain? Reduce weight. Don't hyperextend at the bottom."},
    {"name": "Tricep Dips", "type": "strength", "muscle_group": "arms", "equipment": "bodyweight",
     "location": "home", "difficulty": "intermediate", "calories_per_min": 7,
     "warnings": "Shoulder pain? Modify or skip. Can do on a bench for an easier version."},
    # Shoulders
    {"name": "Overhead Press", "type": "strength", "muscle_group": "shoulders", "equipment": "barbell",
     "location": "gym", "difficulty": "intermediate", "calories_per_min": 7,
     "warnings": "Lower back issues? Use the seated version. Start conservatively."},
    {"name": "Lateral Raises", "type": "strength", "muscle_group": "shoulders", "equipment": "dumbbells",
     "location": "gym", "difficulty": "beginner", "calories_per_min": 5,
     "warnings": "Shoulder impingement? Avoid or modify."},
    # Core
    {"name": "Plank", "type": "strength", "muscle_group": "core", "equipment": "bodyweight",
     "location": "home", "difficulty": "beginner", "calories_per_min": 4,
     "warnings": "Lower back pain? Stop. Build core strength first with easier variations."},
    {"name": "Crunches", "type": "strength", "muscle_group": "core", "equipment": "bodyweight",
     "location": "home", "difficulty": "beginner", "calories_per_min": 6,
     "warnings": "Neck pain? Support head lightly. Lower back issues? Consider alternatives."},
    # Cardio / flexibility
    {"name": "Running", "type": "cardio", "muscle_group": "cardio", "equipment": "none",
     "location": "outdoor", "difficulty": "beginner", "calories_per_min": 10,
     "warnings": "Knee or joint issues? Consider elliptical or cycling. Start gradually."},
    {"name": "Cycling", "type": "cardio", "muscle_group": "cardio", "equipment": "none",
     "location": "outdoor", "difficulty": "beginner", "calories_per_min": 8},
    {"name": "Jump Rope", "type": "cardio", "muscle_group": "full_body", "equipment": "none",
     "location": "home", "difficulty": "intermediate", "calories_per_min": 12,
     "warnings": "Knee or ankle issues? Low impact alternative recommended. Avoid hard surfaces."},
    {"name": "Stretching", "type": "flexibility", "muscle_group": "flexibility", "equipment": "none",
     "location": "home", "difficulty": "beginner", "calories_per_min": 2,
     "warnings": "Never stretch cold muscles. Pain means stop."},
]


async def seed(exercises: list[dict]) -> tuple[int, int]:
    """Insert new exercises, update existing ones (matched by name). Returns (created, updated)."""
    created = 0
    updated = 0
    async with async_session_maker() as session:
        async with session.begin():
            for data in exercises:
                result = await session.execute(select(Exercise).where(Exercise.name == data["name"]))
                existing = result.scalar_one_or_none()
                if existing:
                    for k, v in data.items():
                        setattr(existing, k, v)
                    updated += 1
                else:
                    session.add(Exercise(**data))
                    created += 1
    return created, updated


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        created, updated = await seed(STARTER_EXERCISES)
    finally:
        await engine.dispose()
    logger.info("Seed complete: created=%d updated=%d total=%d", created, updated, created + updated)


if __name__ == "__main__":
    asyncio.run(main())
