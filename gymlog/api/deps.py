"""Shared endpoint dependencies."""

import logging
from datetime import tzinfo

from fastapi import Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.config import get_settings
from gymlog.core.constants import EXERCISES_LOAD_ERROR
from gymlog.db.session import get_db
from gymlog.models.exercise import Exercise
from gymlog.services.calendar import resolve_timezone
from gymlog.services.log_queries import get_exercise
from gymlog.services.rest_timer import RestTimer

logger = logging.getLogger(__name__)


def get_viewer_timezone(
    tz: str | None = Query(None, description="IANA time zone of the viewer, e.g. Europe/London"),
) -> tzinfo:
    """Time zone used for calendar days; falls back to the configured default."""
    try:
        return resolve_timezone(tz or get_settings().timezone)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def get_exercise_or_404(exercise_id: int, db: AsyncSession = Depends(get_db)) -> Exercise:
    try:
        exercise = await get_exercise(db, exercise_id)
    except SQLAlchemyError:
        logger.exception("Loading exercise %s failed", exercise_id)
        raise HTTPException(status_code=503, detail=EXERCISES_LOAD_ERROR)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


def get_rest_timer(request: Request) -> RestTimer:
    return request.app.state.rest_timer
