"""
Lyrics service.

Submits lyrics generation requests and fetches timestamped lyrics for
generated tracks.

Dependencies: tunesmith.boundary.provider
System role: Lyrics orchestration
"""

from typing import Any

from tunesmith.boundary.provider.kie_client import KieClient
from tunesmith.core.exceptions import ConfigurationError, PromptTooLongError, ProviderError, ValidationError

MAX_PROMPT_WORDS = 200


def count_words(text: str) -> int:
    """Number of whitespace-separated words."""
    return len(text.split())


class LyricsService:
    """Lyrics orchestrator over the provider client."""

    def __init__(self, client: KieClient, callback_url: str) -> None:
        """
        Initialize lyrics service.

        Args:
            client: Provider API client
            callback_url: URL the provider calls when lyrics are ready
        """
        self.client = client
        self.callback_url = callback_url

    def _require_credential(self) -> None:
        if not self.client.api_key:
            raise ConfigurationError("KIE_API_KEY")

    async def generate(self, prompt: str) -> str:
        """
        Submit a lyrics prompt.

        Args:
            prompt: Prompt text (trimmed, at most 200 words)

        Returns:
            str: Provider task id

        Raises:
            ValidationError: Empty or overlong prompt
            ProviderError: Provider rejected the request or returned no taskId
        """
        self._require_credential()
        prompt = (prompt or "").strip()
        if not prompt:
            raise ValidationError("Prompt is required", field="prompt")
        words = count_words(prompt)
        if words > MAX_PROMPT_WORDS:
            raise PromptTooLongError(MAX_PROMPT_WORDS, words)

        response = await self.client.generate_lyrics(prompt, self.callback_url)
        response.raise_for_error()

        data = response.data
        task_id = data.get("taskId") if isinstance(data, dict) else None
        if not isinstance(task_id, str) or not task_id:
            raise ProviderError("No taskId in response", status_code=502, api_code=response.api_code)
        return task_id

    async def get_timestamped(self, task_id: str, audio_id: str) -> Any:
        """
        Fetch timestamped lyrics for one track.

        Args:
            task_id: Provider task id of the generation
            audio_id: Provider id of the track

        Returns:
            Provider ``data`` payload (``{}`` when absent)
        """
        self._require_credential()
        task_id = (task_id or "").strip()
        audio_id = (audio_id or "").strip()
        missing = [name for name, value in (("taskId", task_id), ("audioId", audio_id)) if not value]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}", field=missing[0])

        response = await self.client.get_timestamped_lyrics(task_id, audio_id)
        response.raise_for_error()
        return response.data if response.data is not None else {}
