"""Insert the default exercise catalogue (skips names that already exist)."""

import asyncio
import os
import sys

# Add parent directory to path so we can import gymlog modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from gymlog.core.enums import ExerciseCategory
from gymlog.db.session import async_session_maker, engine
from gymlog.models.exercise import Exercise

DEFAULT_EXERCISES = [
    ("Bench Press", ExerciseCategory.PUSH, "Chest"),
    ("Incline Dumbbell Press", ExerciseCategory.PUSH, "Upper Chest"),
    ("Overhead Press", ExerciseCategory.PUSH, "Shoulders"),
    ("Lateral Raise", ExerciseCategory.PUSH, "Side Delts"),
    ("Tricep Extension", ExerciseCategory.PUSH, "Triceps"),
    ("Deadlift", ExerciseCategory.PULL, "Posterior Chain"),
    ("Pull Up", ExerciseCategory.PULL, "Lats"),
    ("Barbell Row", ExerciseCategory.PULL, "Upper Back"),
    ("Bicep Curl", ExerciseCategory.PULL, "Biceps"),
    ("Face Pull", ExerciseCategory.PULL, "Rear Delts"),
    ("Squat", ExerciseCategory.LEGS, "Quadriceps"),
    ("Romanian Deadlift", ExerciseCategory.LEGS, "Hamstrings"),
    ("Leg Press", ExerciseCategory.LEGS, "Quadriceps"),
    ("Leg Curl", ExerciseCategory.LEGS, "Hamstrings"),
    ("Calf Raise", ExerciseCategory.LEGS, "Calves"),
]


async def main():
    async with async_session_maker() as session:
        existing = set((await session.execute(select(Exercise.name))).scalars().all())
        added = 0
        for name, category, target in DEFAULT_EXERCISES:
            if name in existing:
                print(f"Skipping '{name}' (already exists)")
                continue
            session.add(Exercise(name=name, category=category, target_muscle=target))
            added += 1
        await session.commit()
        print(f"Added {added} exercises.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
