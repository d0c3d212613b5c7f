"""Exception handlers for rejected operations"""
from fastapi import Request
from fastapi.responses import JSONResponse

from tank_monitor.config.logger import logger
from tank_monitor.services.errors import TankMonitorError


async def tank_monitor_error_handler(request: Request, exc: TankMonitorError) -> JSONResponse:
    """Invalid readings and parameters are client errors"""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.message})
