from fastapi import APIRouter
from dtogen.api.routes_health import router as health_router
from dtogen.api.routes_convert import router as convert_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(convert_router, tags=["convert"])
