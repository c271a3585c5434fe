"""
Generation API endpoints.

Routes: GET /generate/status, POST /generations, GET /generations/{task_id}

Dependencies: tunesmith.application.services, tunesmith.models
System role: Poll-path HTTP API
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from tunesmith.api.deps import get_generation_service, get_status_service
from tunesmith.application.services import GenerationService, StatusService
from tunesmith.models.generation import GenerationResponse, GenerationStatusResponse

from .router_utils import handle_service_errors

router = APIRouter(tags=["generations"])


class RegisterGenerationRequest(BaseModel):
    """Provider task accepted for a generation request."""

    model_config = ConfigDict(populate_by_name=True)

    task_id: str = Field(alias="taskId")
    prompt: str | None = None


@router.get("/generate/status", response_model=GenerationStatusResponse)
@handle_service_errors
async def get_generation_status(
    task_id: str | None = Query(default=None, alias="taskId"),
    status_service: StatusService = Depends(get_status_service),
) -> GenerationStatusResponse:
    """
    Poll the provider for a generation task.

    Returns the canonical status (PENDING, SUCCESS, FAILED) with the
    extracted tracks. Once the task succeeded with tracks they are saved;
    repeating the call updates the same rows.

    Raises:
        HTTPException(500): Provider credential not configured
        HTTPException(400): taskId missing
        HTTPException(4xx/5xx): Provider error, with ``{error, code}`` detail
    """
    return await status_service.get_status(task_id)


@router.post("/generations", response_model=GenerationResponse, status_code=201)
@handle_service_errors
async def register_generation(
    request: RegisterGenerationRequest,
    generation_service: GenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """Record a generation task accepted by the provider."""
    generation = await generation_service.register(request.task_id, request.prompt)
    return GenerationResponse(
        id=generation.id,
        task_id=generation.task_id,
        prompt=generation.prompt,
        cover_task_id=generation.cover_task_id,
        cover_images=generation.cover_images,
        tracks=[],
        created_at=generation.created_at,
        updated_at=generation.updated_at,
    )


@router.get("/generations/{task_id}", response_model=GenerationResponse)
@handle_service_errors
async def get_generation(
    task_id: str,
    generation_service: GenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """
    Get the current generation for a provider task id.

    Raises:
        HTTPException(404): No generation for task_id
    """
    generation = await generation_service.get_current(task_id)
    return GenerationResponse.model_validate(generation)
