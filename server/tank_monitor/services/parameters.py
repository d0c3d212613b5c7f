"""PID parameter store"""
import threading
from typing import Any, Mapping, Optional

from tank_monitor.config.logger import logger
from tank_monitor.models.telemetry import PARAMETER_FIELDS, Parameters
from tank_monitor.services.errors import InvalidParameter
from tank_monitor.services.validation import parse_finite


class ParameterStore:
    """Holds the current setpoint and gains as one immutable record.

    Readers get the record without locking; writers validate the whole
    update first and then swap in a new record under the lock.
    """

    def __init__(self, initial: Optional[Parameters] = None):
        self._lock = threading.Lock()
        self._current = initial if initial is not None else Parameters()

    def get(self) -> Parameters:
        return self._current

    def set(self, partial: Mapping[str, Any]) -> Parameters:
        """Apply the fields present in `partial`, leaving the others unchanged"""
        changes = {}
        for name, value in partial.items():
            if name not in PARAMETER_FIELDS:
                raise InvalidParameter(f"Unknown parameter: {name}", field=name)
            changes[name] = parse_finite(value, name, InvalidParameter)

        with self._lock:
            if changes:
                self._current = self._current.model_copy(update=changes)
            current = self._current

        if changes:
            logger.info(f"Updated PID parameters: {current.model_dump()}")
        return current
