"""Cancellable periodic quote refresh."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 60.0


class QuotePoller:
    """
    Runs an async refresh immediately and then every ``interval_seconds``.

    Cancellation takes effect at the task's next await (the upstream call or
    the sleep), so a cancelled refresh never reaches the point where it
    installs its result. ``restart()`` therefore cannot race a stale poll.
    A failing refresh is logged and the loop keeps going.
    """

    def __init__(
        self,
        refresh: Callable[[], Awaitable[object]],
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    ):
        self._refresh = refresh
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def interval_seconds(self) -> float:
        return self._interval

    def start(self) -> None:
        """Start polling on the running event loop. No-op if already running."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="quote-poller")

    def cancel(self) -> Optional[asyncio.Task]:
        """Request cancellation and forget the task. Returns it for awaiting."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
        return task

    async def stop(self) -> None:
        """Cancel the polling task and wait until it has exited."""
        task = self.cancel()
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            pass

    def restart(self) -> None:
        """Cancel the current poll and start a fresh one (refreshes immediately)."""
        self.cancel()
        self.start()

    async def _run(self) -> None:
        while True:
            try:
                await self._refresh()
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Scheduled quote refresh failed")
            await asyncio.sleep(self._interval)
