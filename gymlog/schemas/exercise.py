"""Exercise schemas."""

from pydantic import BaseModel, ConfigDict, Field

from gymlog.core.enums import ExerciseCategory


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: ExerciseCategory
    target_muscle: str | None = Field(None, max_length=255)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: int


class ExerciseDetail(ExerciseRead):
    """Exercise plus the rest period suggested for its target muscle."""

    suggested_rest_seconds: int
