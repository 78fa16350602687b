"""Last session and personal best for one exercise."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, tzinfo

from gymlog.schemas.stats import SessionSnapshot
from gymlog.schemas.workout_log import WorkoutLogRead
from gymlog.services.calendar import local_date, long_date, to_local


def personal_best(logs: Iterable[WorkoutLogRead]) -> float:
    """Heaviest weight ever logged; 0 when there are no logs."""
    return max((float(log.weight) for log in logs), default=0)


def last_session(
    logs: Sequence[WorkoutLogRead], tz: tzinfo
) -> tuple[date | None, list[WorkoutLogRead]]:
    """
    Sets from the most recent calendar day, oldest first.
    The day is taken from the newest log; every log on that local date is included.
    """
    dated = [log for log in logs if log.created_at is not None]
    if not dated:
        return None, []
    newest_first = sorted(dated, key=lambda log: to_local(log.created_at, tz), reverse=True)
    last_day = local_date(newest_first[0].created_at, tz)
    session = [log for log in newest_first if local_date(log.created_at, tz) == last_day]
    session.reverse()
    return last_day, session


def session_snapshot(logs: Sequence[WorkoutLogRead], tz: tzinfo) -> SessionSnapshot:
    day, session = last_session(logs, tz)
    return SessionSnapshot(
        session_date=day,
        date_label=long_date(day) if day else "",
        logs=session,
        personal_best=personal_best(logs),
    )


def detect_new_pr(weights: Iterable[float], best: float) -> bool:
    """True when the heaviest of the new sets beats the previous personal best."""
    return max(weights, default=0) > best
