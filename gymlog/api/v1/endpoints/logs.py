"""Finish an exercise: save the filled-in sets and flag a new personal record."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.deps import get_exercise_or_404
from gymlog.db.session import get_db
from gymlog.models.exercise import Exercise
from gymlog.schemas.workout_log import (
    FinishExerciseRequest,
    FinishExerciseResponse,
    WorkoutLogRead,
)
from gymlog.services.log_queries import insert_logs, list_logs_by_weight
from gymlog.services.session_stats import detect_new_pr, personal_best
from gymlog.services.set_entry import NoValidSetsError, valid_sets

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/{exercise_id}/logs", response_model=FinishExerciseResponse, status_code=201)
async def finish_exercise(
    payload: FinishExerciseRequest,
    exercise: Exercise = Depends(get_exercise_or_404),
    db: AsyncSession = Depends(get_db),
):
    """
    Save every row that has both weight and reps, all in one insert.
    Rows missing either value are dropped; if none is complete nothing is saved (400).
    is_new_pr compares the heaviest new set with the best before this insert.
    """
    try:
        rows = valid_sets(exercise.id, payload.sets)
    except NoValidSetsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    previous = personal_best(
        WorkoutLogRead.model_validate(r) for r in await list_logs_by_weight(db, exercise.id)
    )
    session_max = max(row.weight for row in rows)
    is_new_pr = detect_new_pr((row.weight for row in rows), previous)

    logs = await insert_logs(db, exercise, rows)
    logger.info("Saved %d sets for %s", len(logs), exercise.name)

    message = None
    if is_new_pr:
        message = f"NEW PR! You lifted {session_max:g}kg!"
        logger.info("New PR on %s: %s kg (previous %s kg)", exercise.name, session_max, previous)

    return FinishExerciseResponse(
        exercise_id=exercise.id,
        logs=[WorkoutLogRead.model_validate(log) for log in logs],
        session_max_weight=session_max,
        previous_best=previous,
        is_new_pr=is_new_pr,
        message=message,
    )
