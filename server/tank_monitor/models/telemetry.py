"""Domain values held by the stores"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from tank_monitor.config.settings import (
    DEFAULT_KD,
    DEFAULT_KI,
    DEFAULT_KP,
    DEFAULT_SETPOINT,
)

PARAMETER_FIELDS = ("setpoint", "kp", "ki", "kd")


class Reading(BaseModel):
    """One water level sample and the setpoint in effect when it was captured"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    timestamp: datetime
    water_level: float
    setpoint: float
    sequence: int


class Parameters(BaseModel):
    """PID setpoint and gains consumed by the tank controller"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    setpoint: float = DEFAULT_SETPOINT
    kp: float = DEFAULT_KP
    ki: float = DEFAULT_KI
    kd: float = DEFAULT_KD


class StoreStats(BaseModel):
    """Counters describing the retained window"""
    model_config = ConfigDict(frozen=True)

    size: int
    capacity: int
    appended: int
    evicted: int
