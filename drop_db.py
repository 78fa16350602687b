"""Drop the exercises and workout_logs tables and the Alembic version marker."""

import asyncio
import os
import sys

sys.path.append(os.getcwd())

from sqlalchemy import text

from gymlog.db.session import engine
from gymlog.models import Exercise, WorkoutLog


async def drop_tables():
    tables = [WorkoutLog.__table__, Exercise.__table__]  # children first
    async with engine.begin() as conn:
        for table in tables:
            print(f"Dropping '{table.name}'...")
            await conn.run_sync(lambda sync_conn, t=table: t.drop(sync_conn, checkfirst=True))
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        if engine.dialect.name == "postgresql":
            await conn.execute(text("DROP TYPE IF EXISTS exercisecategory"))
    print("Done.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(drop_tables())
