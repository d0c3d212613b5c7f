"""Ingestion of water level readings from the tank sensor"""
from typing import Any

from tank_monitor.config.logger import logger
from tank_monitor.models.telemetry import Reading
from tank_monitor.services.errors import InvalidReading
from tank_monitor.services.storage import TimeSeriesStore
from tank_monitor.services.validation import parse_finite


class IngestionService:
    """Validates one reading at a time and appends it to the store.

    No batching, deduplication or rate limiting: eviction in the store is
    what bounds memory.
    """

    def __init__(self, store: TimeSeriesStore):
        self._store = store

    def ingest(self, water_level: Any) -> Reading:
        if water_level is None:
            raise InvalidReading("Water level data missing", field="waterLevel")
        value = parse_finite(water_level, "waterLevel", InvalidReading)

        reading = self._store.append(value)
        logger.info(f"Received water level: {reading.water_level}%")
        return reading
