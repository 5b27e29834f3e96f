from fastapi import APIRouter, Depends, Response, status

from getres_lens.api.dependencies import get_context
from getres_lens.api.schemas import HealthResponse, ReadinessResponse
from getres_lens.core.context import LensContext

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    lens: LensContext = Depends(get_context),
) -> ReadinessResponse:
    """Readiness probe: checks that the resource source answers."""
    if await lens.source.ping():
        return ReadinessResponse(status="ok", source="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", source="down")
