import asyncio

import pytest

from reqkit.domain.ticks import wait_for_next_tick


@pytest.mark.asyncio
async def test_resolves_with_none():
    assert await wait_for_next_tick() is None


@pytest.mark.asyncio
async def test_pending_callbacks_run_first():
    events: list[str] = []
    loop = asyncio.get_running_loop()
    loop.call_soon(events.append, "callback")

    await wait_for_next_tick()
    events.append("resumed")

    assert events == ["callback", "resumed"]


@pytest.mark.asyncio
async def test_lets_other_tasks_progress():
    events: list[str] = []

    async def other() -> None:
        events.append("other")

    task = asyncio.create_task(other())
    await wait_for_next_tick()
    assert events == ["other"]
    await task
