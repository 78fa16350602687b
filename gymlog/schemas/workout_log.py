"""WorkoutLog schemas and the set-entry payloads of the logging view."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in log responses (id + name only)."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class WorkoutLogCreate(BaseModel):
    exercise_id: int
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=0)


class WorkoutLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int | None = None
    exercise_id: int | None = None
    weight: float
    reps: int
    created_at: datetime | None = None
    exercise: ExerciseRef | None = None

    @property
    def exercise_name(self) -> str | None:
        return self.exercise.name if self.exercise else None


class SetRow(BaseModel):
    """One input row of the set editor. Empty fields are None."""

    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)


class FinishExerciseRequest(BaseModel):
    sets: list[SetRow] = []


class FinishExerciseResponse(BaseModel):
    exercise_id: int
    logs: list[WorkoutLogRead]
    session_max_weight: float
    previous_best: float
    is_new_pr: bool
    message: str | None = None


class FinishWorkoutRequest(BaseModel):
    sets: list[SetRow] = []
    confirm: bool = False


class FinishWorkoutResponse(BaseModel):
    discarded_rows: int
    next_view: str
