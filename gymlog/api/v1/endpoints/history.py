"""Workout history grouped by week and day."""

from __future__ import annotations

import logging
from datetime import tzinfo

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.deps import get_viewer_timezone
from gymlog.core.constants import HISTORY_LOAD_ERROR
from gymlog.db.session import get_db
from gymlog.schemas.history import WeekGroup
from gymlog.schemas.workout_log import WorkoutLogRead
from gymlog.services.history import group_by_week
from gymlog.services.log_queries import list_history_logs

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[WeekGroup])
async def get_history(
    tz: tzinfo = Depends(get_viewer_timezone),
    db: AsyncSession = Depends(get_db),
):
    """
    Every logged set, bucketed into Monday-start weeks (newest week seen first)
    and weekdays (Monday..Sunday), each day tagged LEGS / PUSH / PULL / WORKOUT.
    """
    try:
        rows = await list_history_logs(db)
    except SQLAlchemyError:
        logger.exception("History fetch failed")
        raise HTTPException(status_code=503, detail=HISTORY_LOAD_ERROR)
    return group_by_week([WorkoutLogRead.model_validate(r) for r in rows], tz)
