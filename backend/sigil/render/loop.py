"""Cooperative animation loop and resize debouncing on the asyncio event loop.

One task draws a frame, yields to the host, and resumes; nothing runs on
worker threads.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.perf_counter() * 1000.0


class AnimationLoop:
    """Calls ``tick(now_ms)`` every ``interval_ms`` until stopped."""

    def __init__(self, tick: Callable[[float], Any], interval_ms: float = 16.0,
                 clock: Clock = monotonic_ms) -> None:
        self.tick = tick
        self.interval_ms = interval_ms
        self.clock = clock
        self.frames = 0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop on the running event loop (no-op if already running)."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Animation loop started (%.0fms interval)", self.interval_ms)

    async def _run(self) -> None:
        while True:
            try:
                self.tick(self.clock())
            except Exception:
                logger.exception("Frame %d failed", self.frames)
            self.frames += 1
            await asyncio.sleep(self.interval_ms / 1000.0)

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
            logger.info("Animation loop stopped after %d frames", self.frames)


class Debouncer:
    """Runs ``callback`` once the calls stop for ``delay_ms``.

    Without a running event loop the callback fires immediately.
    """

    def __init__(self, callback: Callable[..., Any], delay_ms: float = 100.0) -> None:
        self.callback = callback
        self.delay_ms = delay_ms
        self._handle: asyncio.TimerHandle | None = None

    def __call__(self, *args: Any) -> None:
        self.cancel()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.callback(*args)
            return
        self._handle = loop.call_later(self.delay_ms / 1000.0, self._fire, args)

    def _fire(self, args: tuple[Any, ...]) -> None:
        self._handle = None
        self.callback(*args)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
