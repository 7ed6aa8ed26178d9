# File: tests/test_health.py

from fastapi.testclient import TestClient

from socialweb.main import app

client = TestClient(app)


def test_health_endpoint():
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
