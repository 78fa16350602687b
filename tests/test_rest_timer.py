import asyncio

import pytest

from gymlog.services.rest_timer import RestTimer, format_time, suggested_rest_seconds


def test_suggested_rest_seconds():
    assert suggested_rest_seconds("Quadriceps") == 180
    assert suggested_rest_seconds("Biceps") == 120
    assert suggested_rest_seconds("Upper Chest") == 180
    assert suggested_rest_seconds("Lats") == 180
    assert suggested_rest_seconds("Posterior Chain") == 180
    assert suggested_rest_seconds("Side Delts") == 120
    assert suggested_rest_seconds("") == 120
    assert suggested_rest_seconds(None) == 120


def test_format_time():
    assert format_time(180) == "3:00"
    assert format_time(65) == "1:05"
    assert format_time(9) == "0:09"
    assert format_time(0) == "0:00"


@pytest.mark.asyncio
async def test_countdown_expires_and_vibrates_once():
    fired = []
    timer = RestTimer(tick_seconds=0.01, on_expire=fired.append)
    assert timer.toggle(3) is True
    assert timer.active
    await asyncio.sleep(0.2)

    status = timer.status()
    assert not status.active
    assert status.remaining == 0
    assert status.vibrate == [200, 100, 200, 100, 400]
    assert timer.status().vibrate is None
    assert fired == [[200, 100, 200, 100, 400]]


@pytest.mark.asyncio
async def test_toggle_while_running_cancels_instead_of_stacking():
    fired = []
    timer = RestTimer(tick_seconds=0.05, on_expire=fired.append)
    timer.toggle(100)
    await asyncio.sleep(0.12)
    assert timer.toggle(100) is False
    left = timer.remaining
    assert not timer.active
    assert 0 < left < 100

    await asyncio.sleep(0.15)
    assert timer.remaining == left
    assert fired == []
    assert timer.status().vibrate is None


@pytest.mark.asyncio
async def test_restart_resets_the_countdown():
    timer = RestTimer(tick_seconds=0.05)
    timer.toggle(120)
    await asyncio.sleep(0.12)
    timer.toggle(120)
    timer.toggle(180)
    status = timer.status()
    assert status.active
    assert status.duration == 180
    assert status.remaining == 180
    assert status.display == "3:00"
    timer.stop()
