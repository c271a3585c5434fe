"""
Async HTTP client for the kie.ai music generation API.

Wraps the endpoints this service needs: generation record lookups for
polling, cover record lookups for callback correlation and the lyrics
endpoints. Every request carries the bearer credential; a missing
credential is reported as a ConfigurationError before any I/O happens.

Dependencies: httpx, tunesmith.core.exceptions
System role: Outbound provider boundary
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from tunesmith.core.exceptions import ConfigurationError, ProviderError, ProviderTransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.kie.ai/api/v1"


@dataclass(slots=True)
class ProviderResponse:
    """Decoded provider reply: HTTP status plus JSON body (``{}`` if undecodable)."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def api_code(self) -> int | None:
        code = self.body.get("code")
        return code if isinstance(code, int) else None

    @property
    def data(self) -> Any:
        return self.body.get("data")

    @property
    def is_error(self) -> bool:
        """Error when the HTTP status is not 2xx or ``code`` is present and not 200."""
        if not 200 <= self.status_code < 300:
            return True
        return self.api_code is not None and self.api_code != 200

    @property
    def error_message(self) -> str:
        msg = self.body.get("msg")
        if isinstance(msg, str) and msg:
            return msg
        return f"Provider request failed with status {self.status_code}"

    def raise_for_error(self) -> None:
        """Raise ProviderError when this response is an error."""
        if self.is_error:
            raise ProviderError(
                self.error_message,
                status_code=self.status_code,
                api_code=self.api_code,
            )


@dataclass(slots=True)
class KieClient:
    """HTTPX based client for the kie.ai API."""

    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    transport: httpx.AsyncBaseTransport | None = None

    async def get_generation_record(self, task_id: str) -> ProviderResponse:
        """Fetch the status record of a music generation task (no error raising)."""
        return await self._request(
            "GET",
            "/generate/record-info",
            params={"taskId": task_id},
        )

    async def get_cover_record(self, task_id: str) -> ProviderResponse:
        """Fetch the record of a cover generation sub-task."""
        return await self._request(
            "GET",
            "/suno/cover/record-info",
            params={"taskId": task_id},
        )

    async def get_cover_parent_task_id(self, cover_task_id: str) -> str | None:
        """
        Resolve a cover sub-task id to the task id of its parent generation.

        Args:
            cover_task_id: Sub-task id received in the cover callback

        Returns:
            str | None: ``data.parentTaskId`` when present and a string
        """
        response = await self.get_cover_record(cover_task_id)
        data = response.data
        if not isinstance(data, Mapping):
            return None
        parent = data.get("parentTaskId")
        return parent if isinstance(parent, str) and parent else None

    async def generate_lyrics(self, prompt: str, callback_url: str) -> ProviderResponse:
        """Submit a lyrics generation request."""
        return await self._request(
            "POST",
            "/lyrics",
            json={"prompt": prompt, "callBackUrl": callback_url},
        )

    async def get_timestamped_lyrics(self, task_id: str, audio_id: str) -> ProviderResponse:
        """Fetch word-level timestamped lyrics for one generated track."""
        return await self._request(
            "POST",
            "/generate/get-timestamped-lyrics",
            json={"taskId": task_id, "audioId": audio_id},
        )

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise ConfigurationError("KIE_API_KEY")
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> ProviderResponse:
        headers = self._headers()
        url = f"{self.base_url.rstrip('/')}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, params=params, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(
                "Provider request failed",
                extra={"method": method, "path": path, "error": str(exc)},
            )
            raise ProviderTransportError(f"Provider unreachable: {exc}") from exc

        return ProviderResponse(status_code=response.status_code, body=self._decode_json(response))

    @staticmethod
    def _decode_json(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}
