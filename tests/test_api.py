import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "rules": "3"}


def test_rules(client):
    r = client.get("/rules")
    assert r.json() == {"rules": ["base rate", "age factor", "accident history"]}


def test_premium(client, monkeypatch):
    monkeypatch.delenv("RATING_CURRENCY", raising=False)
    r = client.post(
        "/premium",
        json={"age": 17, "vehicle_make": "Ferrari", "vehicle_model": "488", "accidents_in_last_five_years": 2},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["vehicle_category"] == "sports"
    assert body["base_rate"] == 1800.0
    assert body["total"] == 4200.0
    assert body["currency"] == "USD"
    assert [a["amount"] for a in body["adjustments"]] == [1800.0, 600.0]


def test_premium_defaults_accidents_to_zero(client):
    r = client.post("/premium", json={"age": 30, "vehicle_make": "Toyota", "vehicle_model": "Camry"})
    body = r.json()
    assert body["total"] == 1000.0
    assert len(body["adjustments"]) == 1
    assert body["warnings"]


@pytest.mark.parametrize(
    "payload",
    [
        {"age": -1, "vehicle_make": "Toyota", "vehicle_model": "Camry"},
        {"age": 30, "vehicle_make": "", "vehicle_model": "Camry"},
        {"age": 30, "vehicle_make": "Toyota", "vehicle_model": "Camry", "accidents_in_last_five_years": -2},
        {"vehicle_make": "Toyota", "vehicle_model": "Camry"},
    ],
)
def test_invalid_profile_rejected(client, payload):
    assert client.post("/premium", json=payload).status_code == 422


def test_lambda_handler_wraps_app(monkeypatch):
    monkeypatch.setenv("PRELOAD_ENGINE", "false")
    from mangum import Mangum

    from src.api import lambda_handler

    assert isinstance(lambda_handler.handler, Mangum)


def test_logging_configured_on_startup_not_import(monkeypatch):
    from src.api import app as app_module

    calls = []
    monkeypatch.setattr(app_module, "configure_logging", lambda: calls.append("configured"))
    assert calls == []
    with TestClient(app_module.app):
        pass
    assert calls == ["configured"]
