"""Progress chart: best estimated one-rep max per training day."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date, tzinfo

from gymlog.core.constants import EPLEY_REPS_DIVISOR, INSUFFICIENT_PROGRESS_MESSAGE, MIN_PROGRESS_DAYS
from gymlog.schemas.stats import ProgressPoint
from gymlog.schemas.workout_log import WorkoutLogRead
from gymlog.services.calendar import local_date, short_date


class InsufficientDataError(ValueError):
    """Raised when there are too few training days for a meaningful chart."""

    def __init__(self, days: int):
        super().__init__(INSUFFICIENT_PROGRESS_MESSAGE)
        self.days = days


def estimate_one_rep_max(weight: float, reps: int) -> int:
    """Epley estimate weight * (1 + reps / 30), rounded to the nearest kg (halves up)."""
    return math.floor(float(weight) * (1 + reps / EPLEY_REPS_DIVISOR) + 0.5)


def progress_series(logs: Iterable[WorkoutLogRead], tz: tzinfo) -> list[ProgressPoint]:
    """
    One point per calendar day holding the day's best estimated 1RM.
    `logs` must be oldest first; points keep the order each day first appears.
    """
    best_by_day: dict[date, int] = {}
    for log in logs:
        if log.created_at is None:
            continue
        day = local_date(log.created_at, tz)
        one_rm = estimate_one_rep_max(log.weight, log.reps)
        if day not in best_by_day or one_rm > best_by_day[day]:
            best_by_day[day] = one_rm

    if len(best_by_day) < MIN_PROGRESS_DAYS:
        raise InsufficientDataError(len(best_by_day))
    return [
        ProgressPoint(date=day, label=short_date(day), estimated_one_rep_max=value)
        for day, value in best_by_day.items()
    ]
