"""Errors raised by the stores when caller input is rejected"""
from typing import Optional


class TankMonitorError(ValueError):
    """Base class for rejected operations; the stores are left unchanged"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidReading(TankMonitorError):
    """Missing or non-numeric water level"""


class InvalidParameter(TankMonitorError):
    """Unknown parameter name or non-numeric parameter value"""
