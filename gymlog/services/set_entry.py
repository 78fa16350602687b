"""Set editor rules: which rows get saved and when leaving needs confirmation."""

from collections.abc import Iterable

from gymlog.core.constants import NO_VALID_SETS_MESSAGE
from gymlog.schemas.workout_log import SetRow, WorkoutLogCreate


class NoValidSetsError(ValueError):
    """Finishing an exercise without a single complete (weight and reps) row."""

    def __init__(self):
        super().__init__(NO_VALID_SETS_MESSAGE)


def is_complete(row: SetRow) -> bool:
    return row.weight is not None and row.reps is not None


def has_unsaved_data(rows: Iterable[SetRow]) -> bool:
    """Any row with weight or reps typed in counts as unsaved work."""
    return any(row.weight is not None or row.reps is not None for row in rows)


def valid_sets(exercise_id: int, rows: Iterable[SetRow]) -> list[WorkoutLogCreate]:
    """Complete rows as insertable logs; raises NoValidSetsError when there are none."""
    sets = [
        WorkoutLogCreate(exercise_id=exercise_id, weight=row.weight, reps=row.reps)
        for row in rows
        if is_complete(row)
    ]
    if not sets:
        raise NoValidSetsError()
    return sets
