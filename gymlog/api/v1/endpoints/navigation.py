"""Bottom navigation: the two views of the app."""

from fastapi import APIRouter

router = APIRouter()

VIEWS = [
    {"key": "log", "label": "Log", "path": "/", "default": True},
    {"key": "history", "label": "History", "path": "/history", "default": False},
]


@router.get("")
async def navigation():
    return {"views": VIEWS}
