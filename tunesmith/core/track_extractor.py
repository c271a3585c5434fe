"""
Track list extraction from provider responses.

The provider has used several field paths for the same track array over
time. The candidate paths live in ``TRACK_LIST_PATHS`` and are tried in
order; supporting a new response shape means adding one entry there.

Dependencies: None (pure domain layer)
System role: Response-shape tolerance for the status endpoint
"""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

TRACK_LIST_PATHS: tuple[tuple[str, ...], ...] = (
    ("data", "response", "sunoData"),
    ("data", "response", "suno_data"),
    ("data", "response", "data"),
    ("data", "tracks"),
    ("tracks",),
    ("sunoData",),
    ("suno_data",),
)

STATUS_PATHS: tuple[tuple[str, ...], ...] = (
    ("data", "status"),
    ("data", "response", "status"),
    ("status",),
)

ERROR_MESSAGE_KEYS = ("errorMessage", "error_message", "msg", "error")


@dataclass(frozen=True)
class ExtractedTrack:
    """One normalized track entry; ``position`` is 1-based array order."""

    position: int
    title: str
    id: str | None = None
    audio_url: str | None = None
    status: str | None = None


def _resolve(body: Any, path: Sequence[str]) -> Any:
    node = body
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def find_track_array(body: Any) -> list[Any]:
    """
    Return the first raw track array holding at least one entry, or an empty list.

    Null entries are kept so that positions follow the raw array index; an
    array of only nulls counts as empty.
    """
    for path in TRACK_LIST_PATHS:
        candidate = _resolve(body, path)
        if isinstance(candidate, list) and any(entry is not None for entry in candidate):
            return candidate
    return []


def extract_tracks(body: Any) -> list[ExtractedTrack]:
    """
    Extract and normalize the track list from a provider response body.

    Args:
        body: Decoded JSON body of unknown shape

    Returns:
        list[ExtractedTrack]: Tracks in provider order (empty when none found)
    """
    tracks: list[ExtractedTrack] = []
    for position, raw in enumerate(find_track_array(body), start=1):
        item = raw if isinstance(raw, Mapping) else {}
        title = _str_or_none(item.get("title"))
        tracks.append(
            ExtractedTrack(
                position=position,
                title=title if title is not None else f"Track {position}",
                id=_str_or_none(item.get("id")),
                audio_url=_str_or_none(item.get("audioUrl", item.get("audio_url"))),
                status=_str_or_none(item.get("status", item.get("Status"))),
            )
        )
    return tracks


def extract_status_token(body: Any) -> Any:
    """Return the first status token present along ``STATUS_PATHS``."""
    for path in STATUS_PATHS:
        value = _resolve(body, path)
        if value is not None:
            return value
    return None


def extract_error_message(body: Any) -> str | None:
    """Return a provider-reported error message from ``body['data']``, if any."""
    data = _resolve(body, ("data",))
    if not isinstance(data, Mapping):
        return None
    for key in ERROR_MESSAGE_KEYS:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return None
