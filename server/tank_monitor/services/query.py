"""Read-side views over the stored readings"""
from typing import List, Optional

from tank_monitor.models.telemetry import Reading
from tank_monitor.services.storage import TimeSeriesStore


class QueryService:
    def __init__(self, store: TimeSeriesStore):
        self._store = store

    def latest(self) -> Optional[Reading]:
        """Most recent reading; None means no data has arrived yet"""
        return self._store.latest()

    def window(self, limit: Optional[int] = None) -> List[Reading]:
        """Most recent `limit` readings, oldest first.

        A missing limit, or one larger than the number of stored readings,
        returns the whole window.
        """
        return self._store.suffix(limit)

    def full_window(self) -> List[Reading]:
        return self._store.suffix()

    def count(self) -> int:
        return len(self._store)
