"""Progress chart data: best estimated 1RM per day for one exercise."""

from __future__ import annotations

import logging
from datetime import tzinfo

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.deps import get_exercise_or_404, get_viewer_timezone
from gymlog.core.constants import PROGRESS_LOAD_ERROR
from gymlog.db.session import get_db
from gymlog.models.exercise import Exercise
from gymlog.schemas.stats import ProgressSeries
from gymlog.schemas.workout_log import WorkoutLogRead
from gymlog.services.log_queries import list_logs_chronological
from gymlog.services.progress import InsufficientDataError, progress_series

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{exercise_id}/progress", response_model=ProgressSeries)
async def get_progress(
    exercise: Exercise = Depends(get_exercise_or_404),
    tz: tzinfo = Depends(get_viewer_timezone),
    db: AsyncSession = Depends(get_db),
):
    """
    One point per training day (oldest first). With fewer than two days
    sufficient_data is false and a hint message replaces the points.
    """
    try:
        rows = await list_logs_chronological(db, exercise.id)
    except SQLAlchemyError:
        logger.exception("Loading progress for exercise %s failed", exercise.id)
        raise HTTPException(status_code=503, detail=PROGRESS_LOAD_ERROR)

    try:
        points = progress_series([WorkoutLogRead.model_validate(r) for r in rows], tz)
    except InsufficientDataError as e:
        return ProgressSeries(exercise_id=exercise.id, sufficient_data=False, message=str(e))
    return ProgressSeries(exercise_id=exercise.id, sufficient_data=True, points=points)
