"""Request logging middleware"""
from fastapi import Request

from tank_monitor.config.logger import logger


async def log_requests(request: Request, call_next):
    """Log all HTTP requests (only errors)"""
    # Log only errors (4xx, 5xx) to reduce spam from polling dashboards
    response = await call_next(request)
    if response.status_code >= 400:
        logger.warning(f"{request.method} {request.url.path} - Status: {response.status_code}")
    return response
