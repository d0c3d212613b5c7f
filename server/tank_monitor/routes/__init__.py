from fastapi import APIRouter

from tank_monitor.routes.api import router as info_router
from tank_monitor.routes.params import router as params_router
from tank_monitor.routes.water_level import router as water_level_router

api_router = APIRouter()
api_router.include_router(info_router)
api_router.include_router(water_level_router)
api_router.include_router(params_router)

__all__ = ["api_router"]
