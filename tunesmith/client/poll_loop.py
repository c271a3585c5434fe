"""
Cancellable status poll loop.

One PollLoop instance watches at most one task at a time. ``start`` polls
immediately and then on a fixed interval; a tick is skipped while the
previous request is still running. The loop ends on its own once a final
status is seen or a poll fails, and the owner can end it with ``stop``.

Dependencies: asyncio, logging
System role: Client-side scheduler for the poll path
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from tunesmith.models.generation import GenerationStatusResponse, TrackStatusItem

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 8.0

ERROR_STATUS = "ERROR"

FetchStatus = Callable[[str], Awaitable[GenerationStatusResponse]]
OnUpdate = Callable[["PollUpdate"], Any]


@dataclass
class PollUpdate:
    """Snapshot delivered to the loop owner after every poll."""

    task_id: str
    status: str
    tracks: list[TrackStatusItem] = field(default_factory=list)
    error: str | None = None
    is_final: bool = False

    @property
    def is_error(self) -> bool:
        return self.status == ERROR_STATUS


class PollLoop:
    """Explicit start/stop handle around periodic status polling."""

    def __init__(
        self,
        fetch_status: FetchStatus,
        on_update: OnUpdate | None = None,
        interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        """
        Initialize poll loop.

        Args:
            fetch_status: Coroutine function returning one status snapshot
            on_update: Callback (sync or async) receiving every PollUpdate
            interval: Seconds between ticks
        """
        self._fetch_status = fetch_status
        self._on_update = on_update
        self.interval = interval
        self._task: asyncio.Task | None = None
        self._finished: asyncio.Event | None = None
        self.last_update: PollUpdate | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, task_id: str) -> None:
        """Stop any current watch and start polling ``task_id``."""
        self.stop()
        self.last_update = None
        self._finished = asyncio.Event()
        self._task = asyncio.get_running_loop().create_task(
            self._run(task_id, self._finished),
            name=f"poll-{task_id}",
        )

    def stop(self) -> None:
        """Cancel polling; safe to call when idle."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> PollUpdate | None:
        """Wait until the loop ends and return the last update."""
        task = self._task
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise
        return self.last_update

    async def _run(self, task_id: str, finished: asyncio.Event) -> None:
        in_flight: asyncio.Task | None = None
        try:
            while not finished.is_set():
                if in_flight is None or in_flight.done():
                    in_flight = asyncio.create_task(self._poll_once(task_id, finished))
                else:
                    logger.debug("Skipping poll tick; request in flight", extra={"task_id": task_id})
                try:
                    await asyncio.wait_for(finished.wait(), timeout=self.interval)
                except asyncio.TimeoutError:
                    pass
            if in_flight is not None:
                await in_flight
        finally:
            if in_flight is not None and not in_flight.done():
                in_flight.cancel()

    async def _poll_once(self, task_id: str, finished: asyncio.Event) -> None:
        try:
            snapshot = await self._fetch_status(task_id)
        except Exception as e:
            logger.warning("Status poll failed", extra={"task_id": task_id, "error": str(e)})
            update = PollUpdate(task_id=task_id, status=ERROR_STATUS, error=str(e) or type(e).__name__)
            await self._emit(update)
            finished.set()
            return

        update = PollUpdate(
            task_id=task_id,
            status=snapshot.status,
            tracks=list(snapshot.tracks),
            error=snapshot.error,
            is_final=snapshot.is_final,
        )
        await self._emit(update)
        if snapshot.is_final:
            finished.set()

    async def _emit(self, update: PollUpdate) -> None:
        self.last_update = update
        if self._on_update is None:
            return
        try:
            outcome = self._on_update(update)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception:
            logger.exception("Poll update callback failed", extra={"task_id": update.task_id})
