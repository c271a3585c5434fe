"""
Command line watcher for one generation task.

Polls a running Tunesmith API until the task reaches a final status and
prints one line per update.

Dependencies: argparse, python-dotenv, tunesmith.client, tunesmith.configs
System role: Operator tool driving PollLoop
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from dotenv import load_dotenv

from tunesmith.client.poll_loop import PollLoop, PollUpdate
from tunesmith.client.status_client import StatusClient
from tunesmith.configs import get_settings


def format_update(update: PollUpdate) -> str:
    """One display line for a poll update."""
    line = f"[{update.task_id}] {update.status}"
    ready = sum(1 for track in update.tracks if track.audio_url)
    if update.tracks:
        line += f" ({ready}/{len(update.tracks)} tracks ready)"
    if update.error:
        line += f": {update.error}"
    return line


async def watch(task_id: str, base_url: str, interval: float | None = None) -> PollUpdate | None:
    """
    Poll ``task_id`` until it is final or a poll fails.

    Args:
        task_id: Provider task id
        base_url: Tunesmith API root, e.g. ``http://localhost:8082``
        interval: Seconds between polls (defaults to WORKER_POLL_INTERVAL_SECONDS)

    Returns:
        PollUpdate | None: The last update seen
    """
    if interval is None:
        interval = get_settings().workers.poll_interval_seconds
    client = StatusClient(base_url)
    loop = PollLoop(client.get_status, on_update=lambda update: print(format_update(update)), interval=interval)
    loop.start(task_id)
    try:
        return await loop.wait()
    finally:
        loop.stop()


def _cli(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Watch a Tunesmith generation until it finishes")
    parser.add_argument("task_id", help="Provider task id to watch")
    parser.add_argument(
        "--base-url",
        default="http://localhost:8082",
        help="Tunesmith API root (default: %(default)s)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between polls",
    )
    args = parser.parse_args(argv)

    last = asyncio.run(watch(args.task_id, args.base_url, args.interval))
    if last is None or last.is_error or last.status == "FAILED":
        return 1
    return 0


def main() -> None:
    raise SystemExit(_cli())


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
