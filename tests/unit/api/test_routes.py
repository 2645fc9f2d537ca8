"""Tests for the HTTP surface using FastAPI's TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from rtnutil.api.app import create_app
from rtnutil.core.config import APIConfig, AppSettings
from rtnutil.core.types import ErrorKind
from rtnutil.engine import checksum
from rtnutil.models.results import ValidationResult


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready(self, client):
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    def test_not_ready_when_engine_rejects_known_good_rtn(self, client, monkeypatch):
        monkeypatch.setattr(
            checksum,
            "validate",
            lambda rtn: ValidationResult(rtn=rtn, error=ErrorKind.CHECKSUM_MISMATCH),
        )
        response = client.get("/ready")
        assert response.status_code == 503
        assert response.json() == {"status": "unavailable", "error": "checksum mismatch"}


class TestValidateEndpoint:
    def test_valid_rtn(self, client):
        response = client.post("/rtn/validate", json={"rtn": "021200025"})
        assert response.status_code == 200
        assert response.json() == {"rtn": "021200025", "valid": True, "error": None}

    def test_rejected_rtn_is_still_200(self, client):
        response = client.post("/rtn/validate", json={"rtn": "123456789"})
        assert response.status_code == 200
        assert response.json()["error"] == "checksum mismatch"
        assert response.json()["valid"] is False

    def test_whitespace_not_stripped(self, client):
        response = client.post("/rtn/validate", json={"rtn": " 322286188"})
        assert response.json()["error"] == "incorrect length"

    def test_missing_body_field_is_422(self, client):
        assert client.post("/rtn/validate", json={}).status_code == 422


class TestMissingDigitEndpoint:
    def test_recovers_digit(self, client):
        response = client.post("/rtn/missing-digit", json={"rtn": "03110064X"})
        assert response.status_code == 200
        assert response.json() == {
            "rtn": "03110064X",
            "digit": 9,
            "repaired": "031100649",
            "error": None,
        }

    def test_reports_no_missing_digits(self, client):
        response = client.post("/rtn/missing-digit", json={"rtn": "322286188"})
        assert response.json()["error"] == "no missing digits"
        assert response.json()["digit"] is None


def test_app_uses_configured_title():
    app = create_app(AppSettings(api=APIConfig(title="Routing Checks")))
    assert app.title == "Routing Checks"


def test_app_title_follows_api_env(monkeypatch):
    monkeypatch.setenv("RTNUTIL_API_TITLE", "Routing Checks")
    assert create_app().title == "Routing Checks"
