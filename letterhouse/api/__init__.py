"""API router initialization."""

from fastapi import APIRouter

from .catalog import router as catalog_router
from .countdown import router as countdown_router
from .health import router as health_router
from .houses import router as houses_router
from .layout import router as layout_router
from .windows import router as windows_router

router = APIRouter()

# Include all sub-routers
router.include_router(health_router, prefix="/health", tags=["health"])
router.include_router(catalog_router, prefix="/catalog", tags=["catalog"])
router.include_router(houses_router, prefix="/houses", tags=["houses"])
router.include_router(windows_router, prefix="/houses", tags=["windows"])
router.include_router(layout_router, prefix="/houses", tags=["layout"])
router.include_router(countdown_router, prefix="/houses", tags=["countdown"])
