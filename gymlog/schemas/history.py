"""History view schemas: week -> day -> exercise -> set."""

import datetime as dt

from pydantic import BaseModel

from gymlog.core.enums import SplitTag
from gymlog.schemas.workout_log import WorkoutLogRead


class ExerciseSets(BaseModel):
    name: str
    sets: list[WorkoutLogRead] = []


class DayGroup(BaseModel):
    name: str  # Weekday name, e.g. "Monday"
    date: str  # Display date, e.g. "Jan 8"
    split: SplitTag = SplitTag.WORKOUT
    logs: list[WorkoutLogRead] = []
    exercises: list[ExerciseSets] = []


class WeekGroup(BaseModel):
    week_label: str  # Monday of the week, e.g. "Jan 8"
    week_start: dt.date
    days: list[DayGroup] = []
