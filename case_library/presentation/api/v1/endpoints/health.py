"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from case_library.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "storeMode": "remote" if settings.uses_remote_store else "local",
        # Catalog reads go through the sync client; /store always uses the database
        "catalogStore": "remote" if settings.uses_remote_store else "in-memory",
        "protocolStore": "database",
    }
