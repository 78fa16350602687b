"""History view: group flat logs into week -> day -> exercise buckets and tag each day's split."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, tzinfo

from gymlog.core.constants import DAY_ORDER, SPLIT_KEYWORDS, UNKNOWN_EXERCISE_NAME
from gymlog.core.enums import SplitTag
from gymlog.schemas.history import DayGroup, ExerciseSets, WeekGroup
from gymlog.schemas.workout_log import WorkoutLogRead
from gymlog.services.calendar import local_date, short_date, week_start, weekday_name


def classify_split(logs: Iterable[WorkoutLogRead]) -> SplitTag:
    """
    Tag a day by keyword search over its exercise names.
    Rules are checked in order (LEGS, PUSH, PULL) and the first hit wins,
    so a day with both squats and bench press is LEGS.
    """
    names = " ".join((log.exercise_name or "").lower() for log in logs)
    for tag, keywords in SPLIT_KEYWORDS:
        if any(keyword in names for keyword in keywords):
            return tag
    return SplitTag.WORKOUT


def group_by_exercise(logs: Iterable[WorkoutLogRead]) -> list[ExerciseSets]:
    """Sets of a day bucketed by exercise name, in first-seen order."""
    by_name: dict[str, list[WorkoutLogRead]] = {}
    for log in logs:
        by_name.setdefault(log.exercise_name or UNKNOWN_EXERCISE_NAME, []).append(log)
    return [ExerciseSets(name=name, sets=sets) for name, sets in by_name.items()]


def group_by_week(logs: Sequence[WorkoutLogRead], tz: tzinfo) -> list[WeekGroup]:
    """
    Bucket logs into Monday-start weeks and then weekdays.

    Weeks are keyed by their Monday's short label and come out in the order
    their key is first met in `logs` (newest first when fed the history query),
    not sorted by date. Days inside a week follow Monday..Sunday; a day's logs
    keep encounter order. Logs without a timestamp are skipped.
    """
    weeks: dict[str, dict[str, dict]] = {}
    week_starts: dict[str, date] = {}

    for log in logs:
        if log.created_at is None:
            continue
        day = local_date(log.created_at, tz)
        monday = week_start(day)
        week_key = short_date(monday)
        day_name = weekday_name(day)

        week_starts.setdefault(week_key, monday)
        days = weeks.setdefault(week_key, {})
        if day_name not in days:
            days[day_name] = {"name": day_name, "date": short_date(day), "logs": []}
        days[day_name]["logs"].append(log)

    result: list[WeekGroup] = []
    for week_key, days in weeks.items():
        ordered = [days[name] for name in DAY_ORDER if name in days]
        result.append(
            WeekGroup(
                week_label=week_key,
                week_start=week_starts[week_key],
                days=[
                    DayGroup(
                        name=d["name"],
                        date=d["date"],
                        split=classify_split(d["logs"]),
                        logs=d["logs"],
                        exercises=group_by_exercise(d["logs"]),
                    )
                    for d in ordered
                ],
            )
        )
    return result
