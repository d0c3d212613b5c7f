"""Water level routes (sensor ingestion and dashboard history)

Handlers are plain functions so FastAPI runs them on its thread pool.
"""
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from tank_monitor.models.schemas import (
    CurrentLevelResponse,
    ErrorResponse,
    ReadingResponse,
    StatusResponse,
    WaterLevelIn,
)
from tank_monitor.routes.dependencies import get_ingestion_service, get_query_service
from tank_monitor.services.ingestion import IngestionService
from tank_monitor.services.query import QueryService

router = APIRouter(prefix="/api/waterLevel", tags=["water level"])


@router.post("", response_model=StatusResponse, responses={400: {"model": ErrorResponse}})
def receive_water_level(
    payload: Any = Body(default=None),
    ingestion: IngestionService = Depends(get_ingestion_service),
):
    """Receive a water level reading from the tank sensor"""
    ingestion.ingest(WaterLevelIn.from_payload(payload).water_level)
    return {"status": "success"}


@router.get("", response_model=List[ReadingResponse])
def get_water_level_history(
    limit: Optional[int] = Query(default=None, ge=0),
    query: QueryService = Depends(get_query_service),
):
    """Get the most recent readings, oldest first (all of them without a limit)"""
    return [ReadingResponse.from_reading(reading) for reading in query.window(limit)]


@router.get("/current", response_model=CurrentLevelResponse)
def get_current_water_level(query: QueryService = Depends(get_query_service)):
    """Get the most recent reading, or nulls when nothing has been received"""
    return CurrentLevelResponse.from_reading(query.latest())
