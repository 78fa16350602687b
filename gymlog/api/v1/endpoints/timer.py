"""Rest timer between sets."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.deps import get_rest_timer
from gymlog.core.constants import DEFAULT_REST_SECONDS, EXERCISES_LOAD_ERROR
from gymlog.db.session import get_db
from gymlog.schemas.timer import RestTimerStatus
from gymlog.services.log_queries import get_exercise
from gymlog.services.rest_timer import RestTimer, suggested_rest_seconds

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=RestTimerStatus)
async def timer_status(timer: RestTimer = Depends(get_rest_timer)):
    """Current countdown. vibrate is set once, on the first poll after the timer ran out."""
    return timer.status()


@router.post("/toggle", response_model=RestTimerStatus)
async def toggle_timer(
    exercise_id: int | None = None,
    timer: RestTimer = Depends(get_rest_timer),
    db: AsyncSession = Depends(get_db),
):
    """Start the rest countdown (length from the exercise's target muscle) or stop it if running."""
    duration = DEFAULT_REST_SECONDS
    if exercise_id is not None:
        try:
            exercise = await get_exercise(db, exercise_id)
        except SQLAlchemyError:
            logger.exception("Loading exercise %s for the rest timer failed", exercise_id)
            raise HTTPException(status_code=503, detail=EXERCISES_LOAD_ERROR)
        if exercise:
            duration = suggested_rest_seconds(exercise.target_muscle)
    timer.toggle(duration)
    return timer.status()
