"""Shared fixtures"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tank_monitor.app import create_app
from tank_monitor.services.parameters import ParameterStore
from tank_monitor.services.storage import TimeSeriesStore


class FakeClock:
    """Returns `start`, then advances by `step` on every call"""

    def __init__(self, start=None, step=timedelta(seconds=5)):
        self.now = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def parameter_store():
    return ParameterStore()


@pytest.fixture
def store(parameter_store, clock):
    return TimeSeriesStore(parameter_store, capacity=3, clock=clock)


@pytest.fixture
def app():
    return create_app(capacity=3)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
