"""Rest timer: suggested rest per target muscle and a single start/stop countdown."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from gymlog.core.constants import (
    DEFAULT_REST_SECONDS,
    LARGE_MUSCLE_KEYWORDS,
    LARGE_MUSCLE_REST_SECONDS,
    REST_OVER_VIBRATION_PATTERN,
)
from gymlog.schemas.timer import RestTimerStatus

logger = logging.getLogger(__name__)


def is_large_muscle(target_muscle: str | None) -> bool:
    target = (target_muscle or "").lower()
    return any(keyword in target for keyword in LARGE_MUSCLE_KEYWORDS)


def suggested_rest_seconds(target_muscle: str | None) -> int:
    """3 minutes for big muscle groups (chest, back, quads...), 2 minutes otherwise."""
    return LARGE_MUSCLE_REST_SECONDS if is_large_muscle(target_muscle) else DEFAULT_REST_SECONDS


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins}:{secs:02d}"


class RestTimer:
    """
    Countdown that decrements once per tick until zero.

    toggle() starts it when idle and cancels it when running, so there is never
    more than one countdown. Reaching zero queues the vibration pattern once;
    the next status() call hands it out and clears it.
    """

    def __init__(
        self,
        tick_seconds: float = 1.0,
        on_expire: Callable[[list[int]], None] | None = None,
    ):
        self._tick = tick_seconds
        self._on_expire = on_expire
        self._task: asyncio.Task | None = None
        self._pending_vibration: list[int] | None = None
        self.duration = DEFAULT_REST_SECONDS
        self.remaining = 0

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def toggle(self, duration: int) -> bool:
        """Start with duration if idle, else stop. Returns whether the timer is now running."""
        if self.active:
            self.stop()
            return False
        self.start(duration)
        return True

    def start(self, duration: int) -> None:
        self.stop()
        self.duration = duration
        self.remaining = duration
        self._pending_vibration = None
        self._task = asyncio.get_running_loop().create_task(self._countdown())
        logger.info("Rest timer started: %ss", duration)

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.info("Rest timer stopped with %ss left", self.remaining)
        self._task = None

    async def _countdown(self) -> None:
        while self.remaining > 0:
            await asyncio.sleep(self._tick)
            self.remaining -= 1
        self._expire()

    def _expire(self) -> None:
        pattern = list(REST_OVER_VIBRATION_PATTERN)
        self._pending_vibration = pattern
        logger.info("Rest timer finished after %ss", self.duration)
        if self._on_expire is not None:
            self._on_expire(pattern)

    def status(self) -> RestTimerStatus:
        vibrate, self._pending_vibration = self._pending_vibration, None
        return RestTimerStatus(
            active=self.active,
            remaining=self.remaining,
            duration=self.duration,
            display=format_time(self.remaining),
            vibrate=vibrate,
        )
