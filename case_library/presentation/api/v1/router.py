"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from case_library.presentation.api.v1.endpoints.health import router as health_router
from case_library.presentation.api.v1.endpoints.store import router as store_router
from case_library.presentation.api.v1.endpoints.catalog import router as catalog_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(store_router)
router.include_router(catalog_router)
