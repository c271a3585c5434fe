"""
In-process pool for detached background work.

Webhook handlers must answer before the provider's timeout, so anything
slow runs as an asyncio task spawned here. The pool keeps a strong
reference to every task until it finishes, logs failures, and lets the
application drain in-flight work on shutdown instead of dropping it.

Dependencies: asyncio, logging
System role: Fire-and-forget execution with shutdown drain
"""

import asyncio
import logging
from typing import Any, Coroutine

logger = logging.getLogger(__name__)


class BackgroundWorkerPool:
    """Tracks detached asyncio tasks for the lifetime of the application."""

    def __init__(self, name: str = "background") -> None:
        self._name = name
        self._tasks: set[asyncio.Task] = set()
        self._accepting = True

    @property
    def pending(self) -> int:
        """Number of tasks still running."""
        return len(self._tasks)

    def spawn(self, coro: Coroutine[Any, Any, Any], *, name: str | None = None) -> asyncio.Task | None:
        """
        Schedule ``coro`` without awaiting it.

        Must be called from a running event loop. After ``drain`` has started
        new work is refused and the coroutine is closed unrun.

        Args:
            coro: Coroutine to run
            name: Optional task name for logs

        Returns:
            asyncio.Task | None: The scheduled task, or None if refused
        """
        if not self._accepting:
            logger.warning(
                "Worker pool is draining; refusing new task",
                extra={"pool": self._name, "task_name": name},
            )
            coro.close()
            return None

        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning(
                "Background task cancelled",
                extra={"pool": self._name, "task_name": task.get_name()},
            )
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Background task failed",
                exc_info=exc,
                extra={"pool": self._name, "task_name": task.get_name()},
            )

    async def drain(self, timeout: float | None = None) -> int:
        """
        Stop accepting work and wait for in-flight tasks.

        Tasks still running after ``timeout`` seconds are cancelled.

        Args:
            timeout: Seconds to wait (None waits indefinitely)

        Returns:
            int: Number of tasks that had to be cancelled
        """
        self._accepting = False
        if not self._tasks:
            return 0

        logger.info(
            "Draining background tasks",
            extra={"pool": self._name, "pending": len(self._tasks)},
        )
        _, still_running = await asyncio.wait(set(self._tasks), timeout=timeout)
        for task in still_running:
            task.cancel()
        if still_running:
            await asyncio.gather(*still_running, return_exceptions=True)
            logger.warning(
                "Cancelled background tasks after drain timeout",
                extra={"pool": self._name, "cancelled": len(still_running)},
            )
        return len(still_running)
