"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    code: int | None = Field(default=None, description="Provider error code, if any")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")
