"""SQLAlchemy declarative base with the constraint naming used by the migrations."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base for the exercises and workout_logs tables."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
