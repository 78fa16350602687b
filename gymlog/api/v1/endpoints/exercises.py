"""Exercise endpoints (read only; exercises are seeded out-of-band)."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.deps import get_exercise_or_404
from gymlog.core.constants import EXERCISES_LOAD_ERROR
from gymlog.core.enums import ExerciseCategory
from gymlog.db.session import get_db
from gymlog.models.exercise import Exercise
from gymlog.schemas.exercise import ExerciseDetail, ExerciseRead
from gymlog.services.log_queries import list_exercises
from gymlog.services.rest_timer import suggested_rest_seconds

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def get_exercises(
    category: ExerciseCategory | None = None,
    db: AsyncSession = Depends(get_db),
):
    """List exercises ordered by name; pass category to get one tab (Push / Pull / Legs)."""
    try:
        return list(await list_exercises(db, category))
    except SQLAlchemyError:
        logger.exception("Listing exercises failed")
        raise HTTPException(status_code=503, detail=EXERCISES_LOAD_ERROR)


@router.get("/{exercise_id}", response_model=ExerciseDetail)
async def get_exercise_detail(exercise: Exercise = Depends(get_exercise_or_404)):
    """One exercise with the rest period suggested for its target muscle."""
    return ExerciseDetail(
        id=exercise.id,
        name=exercise.name,
        category=exercise.category,
        target_muscle=exercise.target_muscle,
        suggested_rest_seconds=suggested_rest_seconds(exercise.target_muscle),
    )
