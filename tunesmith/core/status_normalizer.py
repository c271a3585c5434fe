"""
Provider status normalization.

The provider reports job progress with a loose vocabulary that differs
between endpoints (``COMPLETED``, ``SUCCESS``, ``complete``, ...) and
sometimes populates track media before the aggregate status flips. This
module collapses all of it into a three-state ``JobState``.

Dependencies: None (pure domain layer)
System role: Canonical job-state machine for poll and callback paths
"""

import enum
import logging
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)


class JobState(str, enum.Enum):
    """
    Canonical generation job states.

    PENDING: Not final yet; keep polling
    SUCCESS: Provider finished and tracks are usable
    FAILED: Provider gave up; no tracks will be produced
    """

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


SUCCESS_TOKENS = frozenset({"COMPLETED", "SUCCESS"})
SUCCESS_TOKENS_CASELESS = frozenset({"complete", "success"})

FAILED_STATUSES = frozenset(
    {
        "ERROR",
        "CREATE_TASK_FAILED",
        "GENERATE_AUDIO_FAILED",
        "CALLBACK_EXCEPTION",
        "SENSITIVE_WORD_ERROR",
    }
)


def is_success_token(token: Any) -> bool:
    """Whether a raw status token means success under any provider spelling."""
    if not isinstance(token, str):
        return False
    return token in SUCCESS_TOKENS or token.lower() in SUCCESS_TOKENS_CASELESS


def is_failure_token(token: Any) -> bool:
    """Whether a raw status token is one of the provider failure states."""
    return isinstance(token, str) and token in FAILED_STATUSES


def _item_status(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("status", item.get("Status"))
    return getattr(item, "status", None)


def _item_has_media(item: Any) -> bool:
    if isinstance(item, Mapping):
        url = item.get("audioUrl", item.get("audio_url"))
    else:
        url = getattr(item, "audio_url", None)
    return isinstance(url, str) and len(url) > 0


def normalize_status(raw_status: Any, items: Iterable[Any] = ()) -> JobState:
    """
    Map a raw provider status (plus optional per-item statuses) to a JobState.

    Items may be raw provider dicts (``audioUrl``/``status`` keys) or
    ``ExtractedTrack`` instances. Unknown or missing tokens map to PENDING.

    Args:
        raw_status: Aggregate status token, any type
        items: Per-track payloads used by the media-before-status fallback

    Returns:
        JobState: Canonical state
    """
    if is_success_token(raw_status):
        return JobState.SUCCESS
    if is_failure_token(raw_status):
        return JobState.FAILED

    items = list(items)
    if items and any(_item_has_media(item) for item in items):
        if any(is_success_token(_item_status(item)) for item in items):
            logger.warning(
                "Promoted job status to SUCCESS from per-track statuses",
                extra={"raw_status": str(raw_status), "item_count": len(items)},
            )
            return JobState.SUCCESS

    return JobState.PENDING


def is_final(state: JobState) -> bool:
    """A job is final once it reached SUCCESS or FAILED."""
    return state in (JobState.SUCCESS, JobState.FAILED)
