"""Integration tests for the plan generation endpoint."""
from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from fitplan.models.enums import WEEK
from fitplan.services.fallback_planner import REST_DAY_FOCUS
from fitplan.services.plan_generator import PlanGenerator

from conftest import SAMPLE_AI_PLAN


def _payload(**overrides: Any) -> dict[str, Any]:
    body = {
        "age": 28,
        "gender": "female",
        "dietPreference": "high-protein",
        "goal": "muscle-gain",
        "experience": "intermediate",
        "activityLevel": "sedentary",
        "availableDays": ["Monday", "Wednesday"],
        "equipment": ["dumbbells", "bench"],
        "healthNotes": "",
    }
    body.update(overrides)
    return body


def test_generate_plan_success(test_client: TestClient, stub_anthropic):
    calls = stub_anthropic()

    response = test_client.post("/generate-plan", json=_payload())

    assert response.status_code == 200
    data = response.json()
    assert data["weeklyPlan"] == SAMPLE_AI_PLAN["weeklyPlan"]
    assert data["introduction"] == SAMPLE_AI_PLAN["introduction"]
    assert "Available Days: Monday, Wednesday" in calls[0]["messages"][0]["content"]


def test_ai_failure_returns_fallback_with_500(test_client: TestClient, stub_anthropic):
    stub_anthropic(RuntimeError("connection reset"))

    response = test_client.post("/generate-plan", json=_payload())

    assert response.status_code == 500
    data = response.json()
    assert "unavailable" in data["introduction"]
    plan = data["weeklyPlan"]
    assert list(plan) == [day.value for day in WEEK]
    assert plan["Monday"]["focus"] == "Upper Body"
    assert plan["Wednesday"]["focus"] == "Lower Body"
    assert len(plan["Monday"]["exercises"]) == 4
    assert plan["Monday"]["exercises"][0]["details"] == "2 sets of 10-12 reps"
    rest_days = [day for day, entry in plan.items() if entry["focus"] == REST_DAY_FOCUS]
    assert len(rest_days) == 5
    for day in rest_days:
        assert plan[day]["exercises"] == [
            {"name": "Light walk or stretching", "details": "20 minutes", "alternative": "N/A"}
        ]


def test_malformed_ai_text_routes_to_fallback(test_client: TestClient, stub_anthropic):
    stub_anthropic("I'm sorry, I can't produce a plan right now.")

    response = test_client.post("/generate-plan", json=_payload())

    assert response.status_code == 500
    data = response.json()
    assert data["weeklyPlan"]
    assert "unavailable" in data["introduction"]


def test_unexpected_generator_error_routes_to_fallback(
    monkeypatch: pytest.MonkeyPatch, test_client: TestClient, stub_anthropic
):
    stub_anthropic()

    async def broken(self, profile):
        raise KeyError("boom")

    monkeypatch.setattr(PlanGenerator, "generate_plan", broken)

    response = test_client.post("/generate-plan", json=_payload())

    assert response.status_code == 500
    assert len(response.json()["weeklyPlan"]) == 7


def test_ai_response_without_braces_matches_network_failure(test_client: TestClient, stub_anthropic):
    stub_anthropic("no json at all")
    malformed = test_client.post("/generate-plan", json=_payload(availableDays=["Friday"]))

    stub_anthropic(ConnectionError("unreachable"))
    failed = test_client.post("/generate-plan", json=_payload(availableDays=["Friday"]))

    assert malformed.status_code == failed.status_code == 500
    assert malformed.json()["introduction"] == failed.json()["introduction"]
    assert malformed.json()["weeklyPlan"]["Sunday"] == failed.json()["weeklyPlan"]["Sunday"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"availableDays": []},
        {"availableDays": ["Monday", "Monday"]},
        {"availableDays": ["Funday"]},
        {"age": 0},
        {"age": -5},
    ],
)
def test_invalid_profiles_are_rejected(test_client: TestClient, stub_anthropic, overrides):
    calls = stub_anthropic()

    response = test_client.post("/generate-plan", json=_payload(**overrides))

    assert response.status_code == 422
    assert "detail" in response.json()
    assert calls == []


def test_large_age_is_accepted(test_client: TestClient, stub_anthropic):
    stub_anthropic()

    response = test_client.post("/generate-plan", json=_payload(age=121))

    assert response.status_code == 200


def test_missing_goal_is_rejected(test_client: TestClient):
    body = _payload()
    body.pop("goal")

    response = test_client.post("/generate-plan", json=body)

    assert response.status_code == 422


def test_health_endpoints(test_client: TestClient):
    assert test_client.get("/health").json() == {"status": "ok"}

    status = test_client.get("/api/health/status").json()
    assert status["status"] == "online"
    assert status["ai_configured"] is True


def test_cors_headers_present(test_client: TestClient):
    response = test_client.options(
        "/generate-plan",
        headers={
            "Origin": "http://localhost:5500",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers
