"""Number coercion shared by ingestion and parameter updates"""
import math
import re
from numbers import Real
from typing import Any, Type

from tank_monitor.services.errors import TankMonitorError

# Plain decimal notation only; float() would also take "1_0", "nan" or "inf"
NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_finite(value: Any, field: str, error: Type[TankMonitorError]) -> float:
    """Coerce a JSON value to a finite float or raise `error`.

    Accepts ints, floats and decimal strings (devices sometimes send "42.5").
    Rejects None, booleans, NaN and infinities.
    """
    if value is None:
        raise error(f"{field} is missing", field=field)
    if isinstance(value, bool):
        raise error(f"{field} must be a number, got {value!r}", field=field)
    if not isinstance(value, (Real, str)):
        raise error(f"{field} must be a number, got {type(value).__name__}", field=field)

    if isinstance(value, str):
        value = value.strip()
        if not NUMBER_RE.fullmatch(value):
            raise error(f"{field} must be a number, got {value!r}", field=field)
    try:
        number = float(value)
    except OverflowError:
        raise error(f"{field} must be a number, got {value!r}", field=field) from None

    if not math.isfinite(number):
        raise error(f"{field} must be a finite number, got {value!r}", field=field)
    return number
