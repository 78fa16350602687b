import os
from datetime import datetime, timezone

os.environ.setdefault("DATABASE_DSN", "sqlite+aiosqlite://")
os.environ.setdefault("TIMEZONE", "UTC")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gymlog.core.enums import ExerciseCategory
from gymlog.db.base import Base
from gymlog.db.session import get_db
from gymlog.main import app
from gymlog.models import Exercise, WorkoutLog
from gymlog.schemas.workout_log import ExerciseRef, WorkoutLogRead
from gymlog.services.rest_timer import RestTimer


def utc(year, month, day, hour=12, minute=0):
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def make_log(name, weight, reps, created_at, log_id=None, exercise_id=1):
    return WorkoutLogRead(
        id=log_id,
        exercise_id=exercise_id,
        weight=weight,
        reps=reps,
        created_at=created_at,
        exercise=ExerciseRef(id=exercise_id, name=name) if name is not None else None,
    )


@pytest_asyncio.fixture
async def session_maker():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.state.rest_timer = RestTimer(tick_seconds=0.01)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.state.rest_timer.stop()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def exercises(session_maker):
    """Bench Press (Push, Chest), Bicep Curl (Pull, Biceps), Squat (Legs, Quadriceps)."""
    async with session_maker() as session:
        rows = [
            Exercise(name="Squat", category=ExerciseCategory.LEGS, target_muscle="Quadriceps"),
            Exercise(name="Bench Press", category=ExerciseCategory.PUSH, target_muscle="Chest"),
            Exercise(name="Bicep Curl", category=ExerciseCategory.PULL, target_muscle="Biceps"),
        ]
        session.add_all(rows)
        await session.commit()
        return {e.name: e.id for e in rows}


@pytest.fixture
def add_logs(session_maker):
    async def _add(exercise_id, *sets):
        async with session_maker() as session:
            session.add_all(
                WorkoutLog(exercise_id=exercise_id, weight=w, reps=r, created_at=at) for w, r, at in sets
            )
            await session.commit()

    return _add
