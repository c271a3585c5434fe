"""
Single-attempt binary downloader.

Fetches a remote resource (cover images) with optional bearer
authorization. No retries: any transport error or non-2xx status is a
failure, and callers decide whether to skip or abort.

Dependencies: httpx
System role: Remote artifact retrieval for the cover callback worker
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from tunesmith.core.exceptions import ArtifactFetchError


@dataclass(slots=True)
class ArtifactFetcher:
    """Downloads a URL into memory."""

    timeout: float = 30.0
    max_bytes: int | None = None
    transport: httpx.AsyncBaseTransport | None = None

    async def fetch(self, url: str, auth_token: str | None = None) -> bytes:
        """
        Download ``url`` and return the full body.

        Args:
            url: Absolute http(s) URL
            auth_token: Bearer token attached as ``Authorization`` when given

        Returns:
            bytes: Response body

        Raises:
            ArtifactFetchError: On transport failure, non-2xx status or a
                body larger than ``max_bytes``
        """
        headers = {"Authorization": f"Bearer {auth_token}"} if auth_token else {}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                async with client.stream("GET", url, headers=headers) as response:
                    if not response.is_success:
                        raise ArtifactFetchError(
                            "Artifact download returned an error status",
                            url=url,
                            status_code=response.status_code,
                        )
                    chunks: list[bytes] = []
                    received = 0
                    async for chunk in response.aiter_bytes():
                        received += len(chunk)
                        if self.max_bytes is not None and received > self.max_bytes:
                            raise ArtifactFetchError(
                                "Artifact exceeds size limit",
                                url=url,
                                details={"max_bytes": self.max_bytes},
                            )
                        chunks.append(chunk)
        except httpx.HTTPError as exc:
            raise ArtifactFetchError(f"Artifact download failed: {exc}", url=url) from exc

        return b"".join(chunks)
