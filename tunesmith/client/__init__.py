"""Client-side helpers for driving status polling against the Tunesmith API."""

from tunesmith.client.poll_loop import PollLoop, PollUpdate
from tunesmith.client.status_client import StatusClient, StatusRequestError

__all__ = ["PollLoop", "PollUpdate", "StatusClient", "StatusRequestError"]
