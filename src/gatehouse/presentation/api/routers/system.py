"""Unversioned service endpoints: liveness and discovery."""

from fastapi import APIRouter

from gatehouse.presentation.api.dependencies import SettingsDep

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

router = APIRouter()


@router.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Liveness probe; does not touch the database."""
    return {
        "status": "healthy",
        "version": API_VERSION,
        "api_versions": ["v1"],
    }


@router.get("/", tags=["Info"])
async def service_info(settings: SettingsDep) -> dict:
    """Name, version and the public endpoint map."""
    return {
        "name": f"{settings.app_name} API",
        "version": API_VERSION,
        "docs": "/docs" if settings.api_debug else None,
        "api_base": API_V1_PREFIX,
        "endpoints": {
            "health": "/health",
            "login": f"{API_V1_PREFIX}/auth/login",
            "signup": f"{API_V1_PREFIX}/auth/signup",
        },
    }
