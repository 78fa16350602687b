"""Shared enums for models and API."""

from enum import Enum


class ExerciseCategory(str, Enum):
    """Category tab an exercise is listed under."""

    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"


class SplitTag(str, Enum):
    """Label shown on a history day, derived from the exercises done that day."""

    LEGS = "LEGS"
    PUSH = "PUSH"
    PULL = "PULL"
    WORKOUT = "WORKOUT"  # Fallback when no keyword matches
