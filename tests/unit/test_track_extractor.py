"""
Test suite for track list extraction.

System role: Verification of response-shape tolerance
"""

import pytest

from tunesmith.core.track_extractor import (
    TRACK_LIST_PATHS,
    ExtractedTrack,
    extract_error_message,
    extract_status_token,
    extract_tracks,
    find_track_array,
)


class TestExtractTracks:
    """Test suite for extract_tracks()."""

    def test_should_read_suno_data(self, success_body) -> None:
        # Act
        tracks = extract_tracks(success_body)

        # Assert
        assert tracks == [
            ExtractedTrack(position=1, title="Morning", id="a1", audio_url="https://cdn.example/a1.mp3"),
            ExtractedTrack(position=2, title="Evening", id="a2", audio_url="https://cdn.example/a2.mp3"),
        ]

    def test_first_non_empty_path_wins(self) -> None:
        body = {
            "data": {
                "response": {"sunoData": [], "suno_data": [{"id": "snake"}], "data": [{"id": "inner"}]},
                "tracks": [{"id": "outer"}],
            },
            "tracks": [{"id": "top"}],
        }

        assert [t.id for t in extract_tracks(body)] == ["snake"]

    def test_should_fall_back_to_top_level_tracks(self) -> None:
        body = {"data": {"tracks": None}, "tracks": [{"id": "t1", "audio_url": "https://x/t1.mp3"}]}

        tracks = extract_tracks(body)

        assert len(tracks) == 1
        assert tracks[0].audio_url == "https://x/t1.mp3"

    def test_should_default_titles_by_position(self) -> None:
        body = {"data": {"tracks": [{"id": "x"}, {"id": "y", "title": 7}]}}

        assert [t.title for t in extract_tracks(body)] == ["Track 1", "Track 2"]

    def test_null_entries_keep_their_array_position(self) -> None:
        body = {"tracks": [None, {"id": "a"}, None, {"id": "b"}]}

        tracks = extract_tracks(body)

        assert [(t.position, t.id) for t in tracks] == [(1, None), (2, "a"), (3, None), (4, "b")]
        assert tracks[0].title == "Track 1"
        assert tracks[0].audio_url is None

    def test_all_null_array_falls_through_to_next_path(self) -> None:
        body = {"data": {"tracks": [None, None]}, "tracks": [{"id": "top"}]}

        assert [(t.position, t.id) for t in extract_tracks(body)] == [(1, "top")]

    def test_should_read_top_level_suno_data(self) -> None:
        body = {
            "status": "PENDING",
            "sunoData": [{"id": "t1", "status": "complete", "audioUrl": "https://x/a.mp3", "title": "A"}],
        }

        assert extract_tracks(body) == [
            ExtractedTrack(position=1, title="A", id="t1", audio_url="https://x/a.mp3", status="complete")
        ]

    @pytest.mark.parametrize("path", TRACK_LIST_PATHS, ids=lambda p: ".".join(p))
    def test_every_supported_path_yields_the_same_tracks(self, path) -> None:
        # Arrange
        track_list = [
            {"id": "a1", "title": "Morning", "audioUrl": "https://cdn.example/a1.mp3", "status": "SUCCESS"},
            None,
            {"id": "a3", "audio_url": "https://cdn.example/a3.mp3"},
        ]
        body: dict = {}
        node = body
        for key in path[:-1]:
            node = node.setdefault(key, {})
        node[path[-1]] = track_list

        # Act
        tracks = extract_tracks(body)

        # Assert
        assert tracks == [
            ExtractedTrack(
                position=1, title="Morning", id="a1", audio_url="https://cdn.example/a1.mp3", status="SUCCESS"
            ),
            ExtractedTrack(position=2, title="Track 2"),
            ExtractedTrack(position=3, title="Track 3", id="a3", audio_url="https://cdn.example/a3.mp3"),
        ]

    def test_non_string_fields_become_absent(self) -> None:
        body = {"tracks": [{"id": 12, "audioUrl": ["x"], "status": None}]}

        track = extract_tracks(body)[0]

        assert track.id is None
        assert track.audio_url is None
        assert track.status is None

    def test_unknown_shapes_yield_empty_list(self) -> None:
        assert extract_tracks(None) == []
        assert extract_tracks("nope") == []
        assert extract_tracks({"data": "string"}) == []
        assert find_track_array({"tracks": [None, None]}) == []


class TestExtractStatusToken:
    """Test suite for extract_status_token()."""

    def test_prefers_data_status(self) -> None:
        body = {"status": "TOP", "data": {"status": "DATA", "response": {"status": "RESP"}}}

        assert extract_status_token(body) == "DATA"

    def test_falls_back_to_response_then_top_level(self) -> None:
        assert extract_status_token({"status": "TOP", "data": {"response": {"status": "RESP"}}}) == "RESP"
        assert extract_status_token({"status": "TOP"}) == "TOP"

    def test_missing_status_is_none(self) -> None:
        assert extract_status_token({}) is None


class TestExtractErrorMessage:
    """Test suite for extract_error_message()."""

    def test_reads_error_message_keys_in_order(self) -> None:
        assert extract_error_message({"data": {"errorMessage": "boom", "msg": "m"}}) == "boom"
        assert extract_error_message({"data": {"msg": "m", "error": "e"}}) == "m"
        assert extract_error_message({"data": {"error": "e"}}) == "e"

    def test_missing_data_is_none(self) -> None:
        assert extract_error_message({"msg": "top-level"}) is None
