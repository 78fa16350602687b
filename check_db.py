import asyncio
import os
import sys

from sqlalchemy import text

sys.path.append(os.getcwd())

from gymlog.db.session import async_session_maker, engine


async def check_data():
    async with async_session_maker() as session:
        tables = ["exercises", "workout_logs"]
        print(f"Checking tables: {tables}")
        for table in tables:
            try:
                result = await session.execute(text(f"SELECT count(*) FROM {table}"))
                count = result.scalar()
                print(f"Table '{table}' row count: {count}")

                if count > 0:
                    sample = await session.execute(text(f"SELECT id FROM {table} ORDER BY id LIMIT 1"))
                    print(f"  Sample ID from {table}: {sample.scalar()}")
            except Exception as e:
                print(f"Error querying {table}: {e}")

        latest = await session.execute(text("SELECT max(created_at) FROM workout_logs"))
        print(f"Latest log: {latest.scalar()}")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(check_data())
