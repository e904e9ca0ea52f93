"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from dsvflow import __version__
from dsvflow.api.dependencies import get_app_settings
from dsvflow.application.dto.responses import HealthResponse
from dsvflow.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Service status, uptime and the storage backend in use."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        storage_backend=settings.storage.backend,
    )
