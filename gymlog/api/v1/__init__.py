"""API v1 router aggregation."""

from fastapi import APIRouter

from gymlog.api.v1.endpoints import (
    exercises,
    health,
    history,
    logs,
    navigation,
    previous_session,
    progress,
    timer,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(previous_session.router, prefix="/exercises", tags=["previous-session"])
api_router.include_router(progress.router, prefix="/exercises", tags=["progress"])
api_router.include_router(logs.router, prefix="/exercises", tags=["logs"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
api_router.include_router(timer.router, prefix="/timer", tags=["timer"])
api_router.include_router(navigation.router, prefix="/navigation", tags=["navigation"])
