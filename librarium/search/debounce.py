"""
Restartable debounce timer for the asyncio event loop.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DebounceScheduler:
    """
    Coalesces rapid calls into one invocation after a quiet period.

    Each ``schedule()`` disarms the previously armed timer, so only the
    callback from the last call within the window ever runs.
    """

    def __init__(self):
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        """True while a timer is armed and has not fired yet."""
        return self._task is not None

    def schedule(self, fn: Callable[[], None], delay: float) -> None:
        """Arm a new timer that calls ``fn`` once after ``delay`` seconds."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._fire(fn, delay))

    def cancel(self) -> None:
        """Disarm the pending timer without invoking its callback."""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def wait(self) -> None:
        """Wait until the currently armed timer fires or is cancelled."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})

    async def _fire(self, fn: Callable[[], None], delay: float) -> None:
        await asyncio.sleep(delay)
        # Disarm before calling so fn may re-schedule or cancel freely
        self._task = None
        try:
            fn()
        except Exception as e:
            logger.error(f"Debounced callback failed: {e}")
