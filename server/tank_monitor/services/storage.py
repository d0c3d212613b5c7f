"""Storage service for water level readings (in-memory only, no persistence)"""
import threading
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from tank_monitor.config.settings import MAX_READINGS
from tank_monitor.models.telemetry import Reading, StoreStats
from tank_monitor.services.errors import InvalidReading
from tank_monitor.services.parameters import ParameterStore
from tank_monitor.services.validation import parse_finite


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimeSeriesStore:
    """Fixed-capacity ring of readings, oldest evicted first.

    Slots are addressed as (start + i) % capacity for i in [0, size). Appends
    serialize on a lock, write the slot and then publish a new immutable
    (start, size, appended) state. Readers never lock: they copy the slots
    named by one published state and check each reading's sequence number,
    retrying if an append overwrote a slot while they were copying.
    """

    def __init__(
        self,
        parameters: ParameterStore,
        capacity: int = MAX_READINGS,
        clock: Callable[[], datetime] = utc_now,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._parameters = parameters
        self._capacity = capacity
        self._clock = clock
        self._slots: List[Optional[Reading]] = [None] * capacity
        self._state = (0, 0, 0)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._state[1]

    def append(self, water_level: Any) -> Reading:
        """Store a reading stamped with the current time and setpoint"""
        value = parse_finite(water_level, "waterLevel", InvalidReading)

        with self._lock:
            start, size, appended = self._state
            timestamp = self._clock()
            if size:
                # Wall clock may step back; the window must stay ordered
                newest = self._slots[(start + size - 1) % self._capacity]
                if timestamp < newest.timestamp:
                    timestamp = newest.timestamp

            reading = Reading(
                timestamp=timestamp,
                water_level=value,
                setpoint=self._parameters.get().setpoint,
                sequence=appended,
            )

            if size < self._capacity:
                self._slots[(start + size) % self._capacity] = reading
                size += 1
            else:
                self._slots[start] = reading
                start = (start + 1) % self._capacity
            self._state = (start, size, appended + 1)

        return reading

    def latest(self) -> Optional[Reading]:
        """Most recent reading, or None while the window is empty"""
        while True:
            start, size, appended = self._state
            if not size:
                return None
            reading = self._slots[(start + size - 1) % self._capacity]
            if reading.sequence == appended - 1:
                return reading

    def suffix(self, n: Optional[int] = None) -> List[Reading]:
        """Up to the last `n` readings, oldest first; all of them when `n` is None"""
        if n is not None and (isinstance(n, bool) or not isinstance(n, int) or n < 0):
            raise ValueError(f"n must be a non-negative integer, got {n!r}")

        while True:
            start, size, appended = self._state
            count = size if n is None else min(n, size)
            if not count:
                return []
            first = (start + size - count) % self._capacity
            end = first + count
            if end <= self._capacity:
                readings = self._slots[first:end]
            else:
                readings = self._slots[first:] + self._slots[:end - self._capacity]

            first_sequence = appended - count
            if all(r.sequence == first_sequence + i for i, r in enumerate(readings)):
                return readings

    def stats(self) -> StoreStats:
        _, size, appended = self._state
        return StoreStats(
            size=size,
            capacity=self._capacity,
            appended=appended,
            evicted=appended - size,
        )
