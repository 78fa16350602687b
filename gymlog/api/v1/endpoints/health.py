"""Liveness and readiness probes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.config import get_settings
from gymlog.db.session import get_db
from gymlog.models import Exercise

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    settings = get_settings()
    return {"status": "ok", "app": settings.app_name, "environment": settings.environment}


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Ready once the exercise catalogue can be read; reports how many exercises are seeded."""
    try:
        count = (await db.execute(select(func.count(Exercise.id)))).scalar_one()
    except SQLAlchemyError:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "error", "database": "unavailable"})
    return {"status": "ok", "database": "connected", "exercises": count}
