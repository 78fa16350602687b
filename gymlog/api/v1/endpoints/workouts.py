"""Finish the workout: guard against leaving with unsaved sets."""

from fastapi import APIRouter, HTTPException

from gymlog.core.constants import UNSAVED_SETS_MESSAGE
from gymlog.schemas.workout_log import FinishWorkoutRequest, FinishWorkoutResponse
from gymlog.services.set_entry import has_unsaved_data

router = APIRouter()


@router.post("/finish", response_model=FinishWorkoutResponse)
async def finish_workout(payload: FinishWorkoutRequest):
    """
    Rows still typed into the set editor are discarded on leaving. Unless confirm
    is true that needs the user's OK first (409); otherwise go to History.
    """
    if has_unsaved_data(payload.sets) and not payload.confirm:
        raise HTTPException(status_code=409, detail=UNSAVED_SETS_MESSAGE)
    discarded = sum(1 for row in payload.sets if row.weight is not None or row.reps is not None)
    return FinishWorkoutResponse(discarded_rows=discarded, next_view="history")
