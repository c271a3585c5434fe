"""
Correlation IDs scoped with contextvars.

asyncio tasks copy the context they are created in, so a cover worker
spawned while serving a webhook keeps logging under that webhook's ID even
after the request context has been cleared.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar
import uuid

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    """Fresh random correlation ID."""
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    Args:
        correlation_id: Caller-supplied ID; a new one is generated when empty

    Returns:
        str: The bound ID
    """
    value = (correlation_id or "").strip() or new_correlation_id()
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID, or an empty string outside any request."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set("")
