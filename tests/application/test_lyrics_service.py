"""
Test suite for LyricsService.

System role: Verification of lyrics request validation and provider mapping
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tunesmith.application.services.lyrics_service import MAX_PROMPT_WORDS, LyricsService, count_words
from tunesmith.boundary.provider.kie_client import ProviderResponse
from tunesmith.core.exceptions import ConfigurationError, PromptTooLongError, ProviderError, ValidationError


@pytest.fixture
def mock_client() -> MagicMock:
    """Provider client accepting lyrics requests."""
    client = MagicMock()
    client.api_key = "key-1"
    client.generate_lyrics = AsyncMock(
        return_value=ProviderResponse(200, {"code": 200, "data": {"taskId": "ly-1"}})
    )
    client.get_timestamped_lyrics = AsyncMock(
        return_value=ProviderResponse(200, {"code": 200, "data": {"alignedWords": [{"word": "hi"}]}})
    )
    return client


@pytest.fixture
def lyrics_service(mock_client) -> LyricsService:
    """Provide LyricsService with mocked client."""
    return LyricsService(client=mock_client, callback_url="https://me/lyrics-callback")


class TestCountWords:
    """Test suite for count_words()."""

    def test_counts_whitespace_separated_words(self) -> None:
        assert count_words("  one two\nthree\tfour ") == 4
        assert count_words("") == 0


class TestGenerateLyrics:
    """Test suite for LyricsService.generate()."""

    @pytest.mark.asyncio
    async def test_returns_task_id(self, lyrics_service, mock_client) -> None:
        # Act
        task_id = await lyrics_service.generate("  a song about rain  ")

        # Assert
        assert task_id == "ly-1"
        mock_client.generate_lyrics.assert_awaited_once_with("a song about rain", "https://me/lyrics-callback")

    @pytest.mark.asyncio
    async def test_exactly_max_words_is_accepted(self, lyrics_service) -> None:
        assert await lyrics_service.generate(" ".join(["w"] * MAX_PROMPT_WORDS)) == "ly-1"

    @pytest.mark.asyncio
    async def test_too_many_words_raises(self, lyrics_service, mock_client) -> None:
        with pytest.raises(PromptTooLongError) as exc_info:
            await lyrics_service.generate(" ".join(["w"] * (MAX_PROMPT_WORDS + 1)))

        assert exc_info.value.details["word_count"] == MAX_PROMPT_WORDS + 1
        mock_client.generate_lyrics.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_prompt_raises(self, lyrics_service) -> None:
        with pytest.raises(ValidationError):
            await lyrics_service.generate("   ")

    @pytest.mark.asyncio
    async def test_missing_key_raises(self, mock_client) -> None:
        mock_client.api_key = ""

        with pytest.raises(ConfigurationError):
            await LyricsService(mock_client, "https://me/cb").generate("song")

    @pytest.mark.asyncio
    async def test_missing_task_id_is_bad_gateway(self, lyrics_service, mock_client) -> None:
        mock_client.generate_lyrics.return_value = ProviderResponse(200, {"code": 200, "data": {}})

        with pytest.raises(ProviderError) as exc_info:
            await lyrics_service.generate("song")

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, lyrics_service, mock_client) -> None:
        mock_client.generate_lyrics.return_value = ProviderResponse(200, {"code": 429, "msg": "Insufficient credits"})

        with pytest.raises(ProviderError, match="Insufficient credits"):
            await lyrics_service.generate("song")


class TestTimestampedLyrics:
    """Test suite for LyricsService.get_timestamped()."""

    @pytest.mark.asyncio
    async def test_returns_provider_data(self, lyrics_service, mock_client) -> None:
        data = await lyrics_service.get_timestamped("t-1", "a-1")

        assert data == {"alignedWords": [{"word": "hi"}]}
        mock_client.get_timestamped_lyrics.assert_awaited_once_with("t-1", "a-1")

    @pytest.mark.asyncio
    async def test_missing_ids_raise(self, lyrics_service) -> None:
        with pytest.raises(ValidationError, match="taskId, audioId"):
            await lyrics_service.get_timestamped("", " ")
