"""Request and response schemas"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from tank_monitor.models.telemetry import Parameters, Reading


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class WaterLevelIn(BaseModel):
    """Reading posted by the tank sensor.

    The value is left untyped so that missing or non-numeric input is
    rejected by the ingestion service as an invalid reading.
    """
    model_config = ConfigDict(populate_by_name=True)

    water_level: Any = Field(default=None, alias="waterLevel")

    @classmethod
    def from_payload(cls, payload: Any) -> "WaterLevelIn":
        """An empty body, an array or plain text carries no reading"""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)


class StatusResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str


class ReadingResponse(BaseModel):
    """Schema for one stored reading"""
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str
    water_level: float = Field(alias="waterLevel")
    setpoint: float

    @classmethod
    def from_reading(cls, reading: Reading) -> "ReadingResponse":
        return cls(
            timestamp=format_timestamp(reading.timestamp),
            water_level=reading.water_level,
            setpoint=reading.setpoint,
        )


class CurrentLevelResponse(BaseModel):
    """Schema for the most recent reading; all fields are null before the first one"""
    model_config = ConfigDict(populate_by_name=True)

    water_level: Optional[float] = Field(default=None, alias="waterLevel")
    timestamp: Optional[str] = None
    setpoint: Optional[float] = None

    @classmethod
    def from_reading(cls, reading: Optional[Reading]) -> "CurrentLevelResponse":
        if reading is None:
            return cls()
        return cls(
            water_level=reading.water_level,
            timestamp=format_timestamp(reading.timestamp),
            setpoint=reading.setpoint,
        )


class ParametersUpdate(BaseModel):
    """Partial parameter update; only the fields present in the body are applied"""
    setpoint: Any = None
    kp: Any = None
    ki: Any = None
    kd: Any = None

    def present_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ParametersResponse(BaseModel):
    setpoint: float
    kp: float
    ki: float
    kd: float

    @classmethod
    def from_parameters(cls, parameters: Parameters) -> "ParametersResponse":
        return cls(**parameters.model_dump())


class HealthResponse(BaseModel):
    """Schema for health check"""
    status: str
    timestamp: str
    reading_count: int
    capacity: int
    total_appended: int
    total_evicted: int


class ApiInfoResponse(BaseModel):
    """Schema for API info"""
    message: str
    version: str
    ingest: str
    history: str
    current: str
    params: str
    status: str
