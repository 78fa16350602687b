"""WorkoutLog model - one logged set."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gymlog.db.base import Base


class WorkoutLog(Base):
    """One set (weight x reps) for an exercise. Written once, never updated."""

    __tablename__ = "workout_logs"
    __table_args__ = (
        Index("ix_workout_logs_exercise_id", "exercise_id"),
        Index("ix_workout_logs_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    exercise_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    weight: Mapped[float] = mapped_column(Numeric(8, 2), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    # Nullable for rows imported without a timestamp; those never show up in history
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=True
    )

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="logs")
