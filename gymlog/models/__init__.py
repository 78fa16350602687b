"""ORM models - import all so Base.metadata is complete for migrations."""

from gymlog.models.exercise import Exercise
from gymlog.models.workout_log import WorkoutLog

__all__ = [
    "Exercise",
    "WorkoutLog",
]
