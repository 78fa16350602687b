"""Initial schema: exercises, workout_logs.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

exercise_category = sa.Enum("Push", "Pull", "Legs", name="exercisecategory")


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", exercise_category, nullable=False),
        sa.Column("target_muscle", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercises")),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=False)
    op.create_index(op.f("ix_exercises_category"), "exercises", ["category"], unique=False)

    op.create_table(
        "workout_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=8, scale=2), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(
            ["exercise_id"],
            ["exercises.id"],
            name=op.f("fk_workout_logs_exercise_id_exercises"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_logs")),
    )
    op.create_index("ix_workout_logs_exercise_id", "workout_logs", ["exercise_id"], unique=False)
    op.create_index("ix_workout_logs_created_at", "workout_logs", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_workout_logs_created_at", table_name="workout_logs")
    op.drop_index("ix_workout_logs_exercise_id", table_name="workout_logs")
    op.drop_table("workout_logs")
    op.drop_index(op.f("ix_exercises_category"), table_name="exercises")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
    exercise_category.drop(op.get_bind(), checkfirst=True)
