from tank_monitor.services.container import ServiceContainer
from tank_monitor.services.errors import InvalidParameter, InvalidReading, TankMonitorError
from tank_monitor.services.ingestion import IngestionService
from tank_monitor.services.parameters import ParameterStore
from tank_monitor.services.query import QueryService
from tank_monitor.services.storage import TimeSeriesStore

__all__ = [
    "IngestionService",
    "InvalidParameter",
    "InvalidReading",
    "ParameterStore",
    "QueryService",
    "ServiceContainer",
    "TankMonitorError",
    "TimeSeriesStore",
]
