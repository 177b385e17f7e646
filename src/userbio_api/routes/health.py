"""Health check and service info routes."""

from fastapi import APIRouter, Depends
from userbio.services.bio_generator import BioGenerator
from userbio.services.user_store import UserStore
from userbio_api.config import Settings
from userbio_api.models.health import HealthCheckResponse, InfoResponse
from userbio_api.services import get_app_settings, get_bio_generator, get_user_store

router = APIRouter(tags=["health"])
info_router = APIRouter(tags=["health"])


@info_router.get("/", response_model=InfoResponse)
async def service_info(
    settings: Settings = Depends(get_app_settings),
    store: UserStore = Depends(get_user_store),
) -> InfoResponse:
    """Report service status, store connection state and the endpoint map."""
    return InfoResponse(
        version=settings.app_version,
        port=settings.api_port,
        environment=settings.environment,
        database="Connected" if store.connected else "Disconnected",
        store=store.backend,
    )


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    bio_generator: BioGenerator | None = Depends(get_bio_generator),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status and version information
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        bio_enrichment=bio_generator is not None,
    )
