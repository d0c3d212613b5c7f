"""Process-wide service wiring"""
from typing import Optional

from tank_monitor.config.settings import MAX_READINGS
from tank_monitor.models.telemetry import Parameters
from tank_monitor.services.ingestion import IngestionService
from tank_monitor.services.parameters import ParameterStore
from tank_monitor.services.query import QueryService
from tank_monitor.services.storage import TimeSeriesStore, utc_now


class ServiceContainer:
    """Owns the two stores and the services built on top of them"""

    def __init__(
        self,
        capacity: int = MAX_READINGS,
        parameters: Optional[Parameters] = None,
        clock=utc_now,
    ):
        self.parameters = ParameterStore(parameters)
        self.store = TimeSeriesStore(self.parameters, capacity=capacity, clock=clock)
        self.query = QueryService(self.store)
        self.ingestion = IngestionService(self.store)
