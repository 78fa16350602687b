"""Derived per-exercise stats: last session, personal best, progress chart."""

import datetime as dt

from pydantic import BaseModel

from gymlog.schemas.workout_log import WorkoutLogRead


class SessionSnapshot(BaseModel):
    """Most recent day's sets for an exercise plus its all-time best weight."""

    session_date: dt.date | None = None
    date_label: str = ""  # e.g. "Mon Jan 08 2024"
    logs: list[WorkoutLogRead] = []
    personal_best: float = 0


class ProgressPoint(BaseModel):
    date: dt.date
    label: str  # Short display date, e.g. "Jan 8"
    estimated_one_rep_max: int


class ProgressSeries(BaseModel):
    exercise_id: int
    sufficient_data: bool
    points: list[ProgressPoint] = []
    message: str | None = None
