"""
Service error handling for API endpoints.

Provides a decorator that maps the service exception hierarchy onto
HTTPExceptions with a uniform ``{"error": ..., "code": ...}`` detail.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from tunesmith.core.exceptions import (
    ConfigurationError,
    PromptTooLongError,
    ProviderError,
    ProviderTransportError,
    ValidationError,
)
from tunesmith.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def _detail(message: str, code: int | None = None) -> dict[str, Any]:
    return ErrorResponse(error=message, code=code).model_dump(exclude={"details"})


def handle_service_errors(func: F) -> F:
    """
    Decorator translating service errors into HTTPExceptions.

    Mapping:
    - ConfigurationError -> 500
    - PromptTooLongError -> 422, other ValidationError -> 400
    - ProviderTransportError -> 502
    - ProviderError -> provider HTTP status when it is >= 400, else 502
    - ValueError "does not exist" -> 404
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ConfigurationError as e:
            logger.error("Service misconfigured", extra={"error": e.message})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=_detail(e.message),
            )

        except PromptTooLongError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=_detail(e.message),
            )

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": e.message})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=_detail(e.message),
            )

        except ProviderTransportError as e:
            logger.warning("Provider unreachable", extra={"error": e.message})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=_detail(e.message),
            )

        except ProviderError as e:
            status_code = e.status_code if e.status_code and e.status_code >= 400 else status.HTTP_502_BAD_GATEWAY
            logger.warning(
                "Provider returned an error",
                extra={"error": e.message, "status_code": e.status_code, "api_code": e.api_code},
            )
            raise HTTPException(status_code=status_code, detail=_detail(e.message, e.api_code))

        except ValueError as e:
            msg = str(e).lower()
            if "not found" in msg or "does not exist" in msg:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_detail(str(e)))
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_detail(str(e)))

    return wrapper  # type: ignore
