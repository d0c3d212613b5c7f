import re

import pytest
from pydantic import ValidationError

from tank_monitor.app import create_app
from tank_monitor.models.telemetry import Parameters

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def post_levels(client, *values):
    for value in values:
        response = client.post("/api/waterLevel", json={"waterLevel": value})
        assert response.status_code == 200
        assert response.json() == {"status": "success"}


def test_home(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_current_before_any_reading(client):
    response = client.get("/api/waterLevel/current")

    assert response.status_code == 200
    assert response.json() == {"waterLevel": None, "timestamp": None, "setpoint": None}


def test_history_before_any_reading(client):
    response = client.get("/api/waterLevel")

    assert response.status_code == 200
    assert response.json() == []


def test_ingest_and_read_current(client):
    post_levels(client, 42.5)

    body = client.get("/api/waterLevel/current").json()
    assert body["waterLevel"] == 42.5
    assert body["setpoint"] == 50.0
    assert TIMESTAMP_RE.match(body["timestamp"])


def test_history_evicts_oldest(client):
    post_levels(client, 10.0, 20.0, 30.0, 40.0)

    history = client.get("/api/waterLevel").json()
    assert [point["waterLevel"] for point in history] == [20.0, 30.0, 40.0]
    assert set(history[0]) == {"timestamp", "waterLevel", "setpoint"}
    assert client.get("/api/waterLevel/current").json()["waterLevel"] == 40.0


def test_history_limit(client):
    post_levels(client, 1.0, 2.0, 3.0)

    assert [p["waterLevel"] for p in client.get("/api/waterLevel", params={"limit": 2}).json()] == [2.0, 3.0]
    assert client.get("/api/waterLevel", params={"limit": 0}).json() == []
    assert len(client.get("/api/waterLevel", params={"limit": 50}).json()) == 3


def test_history_rejects_negative_limit(client):
    assert client.get("/api/waterLevel", params={"limit": -1}).status_code == 422
    assert client.get("/api/waterLevel", params={"limit": "abc"}).status_code == 422


def test_ingest_missing_value(client):
    response = client.post("/api/waterLevel", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Water level data missing"}
    assert client.get("/api/waterLevel").json() == []


def test_ingest_without_body(client):
    response = client.post("/api/waterLevel")

    assert response.status_code == 400
    assert response.json() == {"error": "Water level data missing"}
    assert client.get("/api/waterLevel").json() == []


def test_ingest_body_that_is_not_an_object(client):
    as_array = client.post("/api/waterLevel", json=[1])
    as_text = client.post("/api/waterLevel", content="42", headers={"Content-Type": "text/plain"})

    for response in (as_array, as_text):
        assert response.status_code == 400
        assert response.json() == {"error": "Water level data missing"}
    assert client.get("/api/waterLevel").json() == []


def test_ingest_non_numeric_value(client):
    post_levels(client, 5.0)

    response = client.post("/api/waterLevel", json={"waterLevel": "full"})

    assert response.status_code == 400
    assert "waterLevel" in response.json()["error"]
    assert [p["waterLevel"] for p in client.get("/api/waterLevel").json()] == [5.0]


def test_get_default_params(client):
    response = client.get("/api/params")

    assert response.status_code == 200
    assert response.json() == {"setpoint": 50.0, "kp": 2.0, "ki": 0.1, "kd": 0.5}


def test_update_setpoint_only(client):
    response = client.post("/api/params", json={"setpoint": 75})

    expected = {"setpoint": 75.0, "kp": 2.0, "ki": 0.1, "kd": 0.5}
    assert response.status_code == 200
    assert response.json() == expected
    assert client.get("/api/params").json() == expected


def test_readings_record_setpoint_in_effect(client):
    post_levels(client, 10.0)
    client.post("/api/params", json={"setpoint": 80})
    post_levels(client, 11.0)

    assert [p["setpoint"] for p in client.get("/api/waterLevel").json()] == [50.0, 80.0]


def test_invalid_param_changes_nothing(client):
    response = client.post("/api/params", json={"kp": 3.0, "ki": "not-a-number"})

    assert response.status_code == 400
    assert "ki" in response.json()["error"]
    assert client.get("/api/params").json() == {"setpoint": 50.0, "kp": 2.0, "ki": 0.1, "kd": 0.5}


def test_unknown_param_fields_are_ignored(client):
    response = client.post("/api/params", json={"kd": 0.9, "mode": "auto"})

    assert response.status_code == 200
    assert response.json()["kd"] == 0.9


def test_empty_params_update(client):
    response = client.post("/api/params", json={})

    assert response.status_code == 200
    assert response.json() == {"setpoint": 50.0, "kp": 2.0, "ki": 0.1, "kd": 0.5}


def test_health(client):
    post_levels(client, 1.0, 2.0, 3.0, 4.0, 5.0)

    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["reading_count"] == 3
    assert body["capacity"] == 3
    assert body["total_appended"] == 5
    assert body["total_evicted"] == 2
    assert TIMESTAMP_RE.match(body["timestamp"])


def test_apps_do_not_share_state(client):
    post_levels(client, 1.0)
    other = create_app(capacity=10, parameters=Parameters(setpoint=20.0))

    assert other.state.services.query.count() == 0
    assert other.state.services.parameters.get().setpoint == 20.0


def test_ingest_rejects_underscored_number(client):
    response = client.post("/api/waterLevel", json={"waterLevel": "1_0"})

    assert response.status_code == 400
    assert client.get("/api/waterLevel").json() == []


def test_app_rejects_non_finite_initial_parameters():
    with pytest.raises(ValidationError):
        create_app(parameters=Parameters(setpoint=float("nan")))
