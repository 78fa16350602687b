"""Rest timer schemas."""

from pydantic import BaseModel


class RestTimerStatus(BaseModel):
    active: bool
    remaining: int
    duration: int
    display: str  # m:ss
    vibrate: list[int] | None = None  # Pattern to play once, set only right after expiry
