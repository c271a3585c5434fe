"""
Cover callback webhook endpoint.

Routes: POST /cover-callback

The provider retries deliveries that are not answered within 15 seconds,
so this endpoint only reads the body and hands it to the gate; all
downloads happen in a detached worker.

Dependencies: tunesmith.application.services
System role: Webhook ingestion HTTP API
"""

from fastapi import APIRouter, Depends, Request

from tunesmith.api.deps import get_cover_callback_service
from tunesmith.application.services import CoverCallbackService
from tunesmith.models.callback import CallbackAck

router = APIRouter(tags=["callbacks"])


@router.post("/cover-callback", response_model=CallbackAck)
async def cover_callback(
    request: Request,
    callback_service: CoverCallbackService = Depends(get_cover_callback_service),
) -> CallbackAck:
    """Acknowledge a cover generation callback; processing continues in the background."""
    raw_body = await request.body()
    return callback_service.accept(raw_body)
