from fastapi import APIRouter

from air_quality_proxy.api.v1.air_quality import air_quality_router

# Create main router
router = APIRouter(prefix="/api/v1")

# Include all sub-routers
router.include_router(air_quality_router)
