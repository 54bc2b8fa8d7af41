# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the REST API."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient  # noqa: E402

from grid_stress.api import check_dependency  # noqa: E402
from grid_stress.api.routes import get_scorer  # noqa: E402
from grid_stress.api.server import create_app  # noqa: E402
from grid_stress.scoring.engine import StressScorer  # noqa: E402

HEAT_WAVE_BODY = {
    "temperature": 102,
    "humidity": 45,
    "hour": 17,
    "dayOfWeek": 2,
    "windSpeed": 3,
    "cloudCover": 10,
    "evAdoption": "high",
}


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app())


class TestCheckDependency:
    def test_present(self):
        check_dependency("json", "pip install json")

    def test_missing(self):
        with pytest.raises(ImportError, match="requires 'nonexistent_pkg_xyz'"):
            check_dependency("nonexistent_pkg_xyz", "pip install nonexistent_pkg_xyz")


class TestEndpoints:
    def test_health(self, client: TestClient):
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"

    def test_score_camel_case(self, client: TestClient):
        resp = client.post("/api/v1/score", json=HEAT_WAVE_BODY)
        assert resp.status_code == 200
        data = resp.json()
        assert data["score"] == 86
        assert data["label"] == "Critical"
        assert data["color"] == "#ef4444"
        assert data["breakdown"]["ev_charging"] == 15

    def test_score_snake_case(self, client: TestClient):
        body = {
            "temperature": 102,
            "humidity": 45,
            "hour": 17,
            "day_of_week": 2,
            "wind_speed": 3,
            "cloud_cover": 10,
            "ev_adoption": "high",
        }
        resp = client.post("/api/v1/score", json=body)
        assert resp.status_code == 200
        assert resp.json()["score"] == 86

    def test_score_defaults(self, client: TestClient):
        resp = client.post("/api/v1/score", json={})
        assert resp.status_code == 200
        assert 0 <= resp.json()["score"] <= 100

    def test_unknown_ev_adoption_is_neutral(self, client: TestClient):
        unknown = client.post(
            "/api/v1/score", json={**HEAT_WAVE_BODY, "evAdoption": "extreme"}
        ).json()
        medium = client.post(
            "/api/v1/score", json={**HEAT_WAVE_BODY, "evAdoption": "medium"}
        ).json()
        assert unknown["score"] == medium["score"]

    def test_score_rejects_non_numeric(self, client: TestClient):
        resp = client.post("/api/v1/score", json={"temperature": "hot"})
        assert resp.status_code == 422

    def test_forecast(self, client: TestClient):
        resp = client.post("/api/v1/forecast", json=HEAT_WAVE_BODY)
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["scores"]) == 24
        assert len(data["labels"]) == 24
        assert data["peak_hour"] == 17
        assert data["peak_score"] == 86
        assert data["stress_windows"] == [[14, 20]]

    @pytest.mark.parametrize("score, label", [
        (0, "Low"), (29, "Low"), (30, "Moderate"), (60, "High"), (80, "Critical"),
    ])
    def test_level(self, client: TestClient, score: int, label: str):
        resp = client.get(f"/api/v1/level/{score}")
        assert resp.status_code == 200
        assert resp.json()["label"] == label

    def test_level_rejects_text(self, client: TestClient):
        assert client.get("/api/v1/level/abc").status_code == 422

    def test_scenarios(self, client: TestClient):
        resp = client.get("/api/v1/scenarios")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 6
        assert {s["name"] for s in data} >= {"heat_wave", "windy_weekend"}

    def test_scenario_by_name(self, client: TestClient):
        resp = client.get("/api/v1/scenarios/heat_wave")
        assert resp.status_code == 200
        data = resp.json()
        assert data["score"] == 86
        assert data["label"] == "Critical"
        assert data["conditions"]["evAdoption"] == "high"

    def test_unknown_scenario(self, client: TestClient):
        resp = client.get("/api/v1/scenarios/bogus")
        assert resp.status_code == 404
        assert "Unknown scenario" in resp.json()["detail"]

    def test_advisories(self, client: TestClient):
        resp = client.post("/api/v1/advisories", json=HEAT_WAVE_BODY)
        assert resp.status_code == 200
        data = resp.json()
        assert data["score"] == 86
        assert data["advisories"][0]["title"] == "Critical Grid Stress Expected"
        assert [a["rank"] for a in data["advisories"]] == [1, 2, 3, 4]


class _FixedScorer(StressScorer):
    def score(self, conditions) -> int:
        return 42


class TestDependencyOverride:
    def test_scorer_override(self):
        app = create_app()
        app.dependency_overrides[get_scorer] = _FixedScorer
        client = TestClient(app)
        resp = client.get("/api/v1/scenarios/heat_wave")
        assert resp.json()["score"] == 42
