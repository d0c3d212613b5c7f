"""Service info and health routes"""
from fastapi import APIRouter, Depends

from tank_monitor import __version__
from tank_monitor.models.schemas import ApiInfoResponse, HealthResponse, format_timestamp
from tank_monitor.routes.dependencies import get_services
from tank_monitor.services.container import ServiceContainer
from tank_monitor.services.storage import utc_now

router = APIRouter()


@router.get("/", response_model=ApiInfoResponse)
async def home():
    """API info endpoint"""
    return {
        "message": "Water Tank Monitor",
        "version": __version__,
        "ingest": "POST /api/waterLevel",
        "history": "GET /api/waterLevel?limit=N",
        "current": "GET /api/waterLevel/current",
        "params": "GET|POST /api/params",
        "status": "running"
    }


@router.get("/health", response_model=HealthResponse)
def health(services: ServiceContainer = Depends(get_services)):
    """Health check endpoint"""
    stats = services.store.stats()
    return {
        "status": "ok",
        "timestamp": format_timestamp(utc_now()),
        "reading_count": stats.size,
        "capacity": stats.capacity,
        "total_appended": stats.appended,
        "total_evicted": stats.evicted
    }
