"""Exercise model - reference data the user picks from when logging."""

from __future__ import annotations

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gymlog.core.enums import ExerciseCategory
from gymlog.db.base import Base


class Exercise(Base):
    """Exercise definition: name, Push/Pull/Legs category and free-text target muscle."""

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[ExerciseCategory] = mapped_column(
        Enum(ExerciseCategory, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    target_muscle: Mapped[str | None] = mapped_column(String(255), nullable=True)

    logs: Mapped[list["WorkoutLog"]] = relationship(
        "WorkoutLog", back_populates="exercise", cascade="all, delete-orphan"
    )
