"""
Cover callback schemas.

Dependencies: pydantic
System role: Webhook contract for cover generation callbacks
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class CoverCallbackData(BaseModel):
    """``data`` object of a cover callback."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    task_id: str | None = Field(default=None, alias="taskId")
    images: list[Any] | None = None


class CoverCallbackPayload(BaseModel):
    """Inbound cover callback body: ``{code, msg?, data: {taskId, images}}``."""

    model_config = ConfigDict(extra="ignore")

    code: int | None = None
    msg: str | None = None
    data: CoverCallbackData | None = None


class CallbackAck(BaseModel):
    """Acknowledgment returned to the provider regardless of outcome."""

    status: Literal["received"] = "received"
