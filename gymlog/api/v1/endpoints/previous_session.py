"""Previous session context - what you did last time for an exercise (progressive overload)."""

from __future__ import annotations

import logging
from datetime import tzinfo

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.deps import get_exercise_or_404, get_viewer_timezone
from gymlog.core.constants import HISTORY_LOAD_ERROR
from gymlog.db.session import get_db
from gymlog.models.exercise import Exercise
from gymlog.schemas.stats import SessionSnapshot
from gymlog.schemas.workout_log import WorkoutLogRead
from gymlog.services.log_queries import list_logs_by_weight
from gymlog.services.session_stats import session_snapshot

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{exercise_id}/last-session", response_model=SessionSnapshot)
async def get_last_session(
    exercise: Exercise = Depends(get_exercise_or_404),
    tz: tzinfo = Depends(get_viewer_timezone),
    db: AsyncSession = Depends(get_db),
):
    """
    Sets from the most recent day this exercise was logged, plus the all-time best weight.
    Empty snapshot (no date, personal_best 0) when there is no history yet.
    """
    try:
        rows = await list_logs_by_weight(db, exercise.id)
    except SQLAlchemyError:
        logger.exception("Loading history for exercise %s failed", exercise.id)
        raise HTTPException(status_code=503, detail=HISTORY_LOAD_ERROR)
    return session_snapshot([WorkoutLogRead.model_validate(r) for r in rows], tz)
