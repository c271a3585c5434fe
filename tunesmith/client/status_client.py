"""
HTTP client for the Tunesmith status endpoint.

Dependencies: httpx, tunesmith.models
System role: Client transport used by PollLoop
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from tunesmith.models.generation import GenerationStatusResponse


class StatusRequestError(RuntimeError):
    """Raised when the status endpoint answered with an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_message(payload: Any, fallback: str) -> str:
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, dict) and isinstance(detail.get("error"), str):
        return detail["error"]
    if isinstance(detail, str) and detail:
        return detail
    return fallback


@dataclass(slots=True)
class StatusClient:
    """Fetches normalized generation status from a Tunesmith deployment."""

    base_url: str
    timeout: float = 15.0
    transport: httpx.AsyncBaseTransport | None = None

    async def get_status(self, task_id: str) -> GenerationStatusResponse:
        """
        Fetch one status snapshot.

        Raises:
            StatusRequestError: Non-2xx answer from the API
            httpx.HTTPError: Transport failure
        """
        async with httpx.AsyncClient(
            base_url=self.base_url.rstrip("/"),
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            response = await client.get("/api/v1/generate/status", params={"taskId": task_id})

        if not response.is_success:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            raise StatusRequestError(
                _error_message(payload, "Failed to fetch status"),
                status_code=response.status_code,
            )
        return GenerationStatusResponse.model_validate(response.json())
