import pytest

from gymlog.schemas.workout_log import SetRow
from gymlog.services.set_entry import NoValidSetsError, has_unsaved_data, valid_sets


def test_only_complete_rows_are_saved():
    rows = [
        SetRow(weight=100, reps=5),
        SetRow(weight=105),
        SetRow(reps=8),
        SetRow(),
        SetRow(weight=0, reps=12),
    ]
    sets = valid_sets(7, rows)
    assert [(s.exercise_id, s.weight, s.reps) for s in sets] == [(7, 100, 5), (7, 0, 12)]


def test_no_complete_row_is_rejected():
    with pytest.raises(NoValidSetsError) as exc:
        valid_sets(1, [SetRow(weight=100), SetRow()])
    assert str(exc.value) == "Please enter at least one set!"


def test_has_unsaved_data():
    assert not has_unsaved_data([SetRow()])
    assert not has_unsaved_data([])
    assert has_unsaved_data([SetRow(), SetRow(reps=5)])
    assert has_unsaved_data([SetRow(weight=60)])
