from zoneinfo import ZoneInfo
from datetime import date, timezone

from conftest import make_log, utc

from gymlog.core.enums import SplitTag
from gymlog.services.history import classify_split, group_by_exercise, group_by_week


def test_days_follow_monday_to_sunday_whatever_the_input_order():
    logs = [
        make_log("Squat", 100, 5, utc(2024, 1, 14)),  # Sunday
        make_log("Bench Press", 80, 5, utc(2024, 1, 10)),  # Wednesday
        make_log("Deadlift", 140, 3, utc(2024, 1, 8)),  # Monday
    ]
    weeks = group_by_week(logs, timezone.utc)
    assert len(weeks) == 1
    assert weeks[0].week_label == "Jan 8"
    assert weeks[0].week_start == date(2024, 1, 8)
    assert [d.name for d in weeks[0].days] == ["Monday", "Wednesday", "Sunday"]
    assert [d.date for d in weeks[0].days] == ["Jan 8", "Jan 10", "Jan 14"]


def test_sunday_belongs_to_the_week_that_started_six_days_earlier():
    weeks = group_by_week([make_log("Squat", 100, 5, utc(2024, 3, 3))], timezone.utc)
    assert weeks[0].week_label == "Feb 26"
    assert weeks[0].days[0].name == "Sunday"


def test_weeks_come_out_in_first_seen_order():
    logs = [
        make_log("Squat", 100, 5, utc(2024, 1, 16)),
        make_log("Squat", 100, 5, utc(2024, 1, 9)),
        make_log("Squat", 100, 5, utc(2024, 1, 15)),
        make_log("Squat", 100, 5, utc(2024, 1, 22)),
    ]
    weeks = group_by_week(logs, timezone.utc)
    assert [w.week_label for w in weeks] == ["Jan 15", "Jan 8", "Jan 22"]


def test_every_timestamped_log_lands_in_exactly_one_bucket():
    logs = [
        make_log("Squat", 100, 5, utc(2024, 1, 9, 8), log_id=1),
        make_log("Squat", 105, 5, utc(2024, 1, 9, 9), log_id=2),
        make_log("Bench Press", 80, 8, None, log_id=3),
        make_log("Row", 60, 10, utc(2024, 1, 2), log_id=4),
        make_log("Curl", 15, 12, utc(2024, 1, 20), log_id=5),
    ]
    weeks = group_by_week(logs, timezone.utc)
    bucketed = [log.id for w in weeks for d in w.days for log in d.logs]
    assert sorted(bucketed) == [1, 2, 4, 5]


def test_logs_within_a_day_keep_encounter_order():
    logs = [
        make_log("Squat", 100, 5, utc(2024, 1, 9, 18), log_id=1),
        make_log("Squat", 90, 5, utc(2024, 1, 9, 17), log_id=2),
        make_log("Squat", 80, 5, utc(2024, 1, 9, 16), log_id=3),
    ]
    day = group_by_week(logs, timezone.utc)[0].days[0]
    assert [log.id for log in day.logs] == [1, 2, 3]


def test_day_is_decided_in_the_viewer_time_zone():
    # 02:00 UTC on Monday Jan 8 is still Sunday evening in New York
    log = make_log("Squat", 100, 5, utc(2024, 1, 8, 2))
    weeks = group_by_week([log], ZoneInfo("America/New_York"))
    assert weeks[0].week_label == "Jan 1"
    assert weeks[0].days[0].name == "Sunday"
    assert weeks[0].days[0].date == "Jan 7"


def test_day_carries_split_and_per_exercise_sets():
    logs = [
        make_log("Bench Press", 80, 5, utc(2024, 1, 9, 10), log_id=1),
        make_log("Tricep Extension", 20, 12, utc(2024, 1, 9, 11), log_id=2),
        make_log("Bench Press", 85, 3, utc(2024, 1, 9, 12), log_id=3),
    ]
    day = group_by_week(logs, timezone.utc)[0].days[0]
    assert day.split == SplitTag.PUSH
    assert [(e.name, [s.id for s in e.sets]) for e in day.exercises] == [
        ("Bench Press", [1, 3]),
        ("Tricep Extension", [2]),
    ]


def test_group_by_exercise_names_missing_exercise():
    groups = group_by_exercise([make_log(None, 50, 5, utc(2024, 1, 9))])
    assert groups[0].name == "Unknown Exercise"


def test_legs_wins_over_push_when_both_present():
    logs = [make_log("Squat", 100, 5, utc(2024, 1, 9)), make_log("Bench Press", 80, 5, utc(2024, 1, 9))]
    assert classify_split(logs) == SplitTag.LEGS


def test_split_keywords():
    def tag(*names):
        return classify_split([make_log(n, 10, 10, utc(2024, 1, 9)) for n in names])

    assert tag("Leg Press") == SplitTag.LEGS
    assert tag("Overhead Press") == SplitTag.PUSH
    assert tag("Tricep Extension") == SplitTag.PUSH
    assert tag("Deadlift") == SplitTag.PULL
    assert tag("Barbell Row", "Bicep Curl") == SplitTag.PULL
    assert tag("Pull Up") == SplitTag.PULL
    assert tag("Plank") == SplitTag.WORKOUT
    assert tag(None) == SplitTag.WORKOUT
    assert classify_split([]) == SplitTag.WORKOUT


def test_split_matching_ignores_case():
    assert classify_split([make_log("FRONT SQUAT", 100, 5, utc(2024, 1, 9))]) == SplitTag.LEGS
