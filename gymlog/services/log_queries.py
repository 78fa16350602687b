"""Data store queries for exercises and workout logs."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gymlog.core.enums import ExerciseCategory
from gymlog.models.exercise import Exercise
from gymlog.models.workout_log import WorkoutLog
from gymlog.schemas.workout_log import WorkoutLogCreate


async def list_exercises(
    db: AsyncSession, category: ExerciseCategory | None = None
) -> Sequence[Exercise]:
    """All exercises by name, optionally limited to one category tab."""
    stmt = select(Exercise)
    if category is not None:
        stmt = stmt.where(Exercise.category == category)
    result = await db.execute(stmt.order_by(Exercise.name.asc()))
    return result.scalars().all()


async def get_exercise(db: AsyncSession, exercise_id: int) -> Exercise | None:
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    return result.scalar_one_or_none()


def _logs_for(exercise_id: int):
    return (
        select(WorkoutLog)
        .where(WorkoutLog.exercise_id == exercise_id)
        .options(selectinload(WorkoutLog.exercise))
    )


async def list_logs_by_weight(db: AsyncSession, exercise_id: int) -> Sequence[WorkoutLog]:
    """Logs for one exercise, heaviest first (personal best is the first row)."""
    result = await db.execute(_logs_for(exercise_id).order_by(WorkoutLog.weight.desc()))
    return result.scalars().all()


async def list_logs_chronological(db: AsyncSession, exercise_id: int) -> Sequence[WorkoutLog]:
    """Logs for one exercise, oldest first."""
    result = await db.execute(
        _logs_for(exercise_id).order_by(WorkoutLog.created_at.asc(), WorkoutLog.id.asc())
    )
    return result.scalars().all()


async def list_history_logs(db: AsyncSession) -> Sequence[WorkoutLog]:
    """Every log with its exercise name, newest first."""
    result = await db.execute(
        select(WorkoutLog)
        .options(selectinload(WorkoutLog.exercise))
        .order_by(WorkoutLog.created_at.desc(), WorkoutLog.id.desc())
    )
    return result.scalars().all()


async def insert_logs(
    db: AsyncSession, exercise: Exercise, rows: Sequence[WorkoutLogCreate]
) -> list[WorkoutLog]:
    """Insert all rows in one flush. The request session commits them together or not at all."""
    logs = [WorkoutLog(exercise=exercise, weight=row.weight, reps=row.reps) for row in rows]
    db.add_all(logs)
    await db.flush()
    for log in logs:
        await db.refresh(log, attribute_names=["id", "created_at"])
    return logs
