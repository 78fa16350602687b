"""Application constants."""

from gymlog.core.enums import SplitTag

# History view: days of a week are always shown in this order
DAY_ORDER = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
UNKNOWN_EXERCISE_NAME = "Unknown Exercise"

# Split tagging: checked in order, first match wins
SPLIT_KEYWORDS: tuple[tuple[SplitTag, tuple[str, ...]], ...] = (
    (SplitTag.LEGS, ("squat", "leg")),
    (SplitTag.PUSH, ("bench", "press", "extension")),
    (SplitTag.PULL, ("deadlift", "row", "curl", "pull")),
)

# Rest timer
LARGE_MUSCLE_KEYWORDS = ("chest", "pec", "lat", "back", "quad", "leg", "chain")
LARGE_MUSCLE_REST_SECONDS = 180
DEFAULT_REST_SECONDS = 120
REST_OVER_VIBRATION_PATTERN = (200, 100, 200, 100, 400)  # ms on/off

# Progress chart
MIN_PROGRESS_DAYS = 2
EPLEY_REPS_DIVISOR = 30

# User-facing messages
NO_VALID_SETS_MESSAGE = "Please enter at least one set!"
UNSAVED_SETS_MESSAGE = "Unsaved sets! Finish anyway?"
INSUFFICIENT_PROGRESS_MESSAGE = "Log more workouts to see a chart!"
NO_HISTORY_MESSAGE = "No history found. Go log a set!"
EXERCISES_LOAD_ERROR = "Error loading exercises. Please try again."
HISTORY_LOAD_ERROR = "Error loading history. Please try again."
PROGRESS_LOAD_ERROR = "Error loading progress. Please try again."
