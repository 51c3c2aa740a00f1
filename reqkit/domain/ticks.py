from __future__ import annotations

import asyncio

__all__ = ["wait_for_next_tick"]


async def wait_for_next_tick() -> None:
    """Yield to the event loop once so already-scheduled callbacks can run."""
    await asyncio.sleep(0)
