"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import json
import os
import random
from types import SimpleNamespace
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

os.environ["ANTHROPIC_API_KEY"] = os.environ.get("ANTHROPIC_API_KEY") or "test-anthropic-key"

from fitplan.logging_config import configure_logging

configure_logging()

from fitplan.main import app
from fitplan.models.schemas import PlanRequest
from fitplan.services.plan_generator import get_plan_generator


SAMPLE_AI_PLAN: Dict[str, Any] = {
    "introduction": "Great to have you on board! This plan is built around your goal.",
    "dietaryRecommendations": {
        "summary": "Moderate calorie deficit with high protein intake.",
        "calorieTarget": "2000-2200 kcal",
        "macroSplit": {"protein": "40%", "carbs": "35%", "fat": "25%"},
        "mealExamples": {
            "breakfast": "Greek yogurt with berries",
            "lunch": "Grilled chicken salad",
            "dinner": "Salmon with roasted vegetables",
        },
    },
    "weeklyPlan": {
        "Monday": {
            "focus": "Hypertrophy: Upper Body",
            "warmUp": "5 min rowing",
            "exercises": [
                {"name": "Bench Press", "details": "4x8", "alternative": "Push-ups"}
            ],
            "coolDown": "Chest stretch",
        },
        "Tuesday": {
            "focus": "Rest Day",
            "warmUp": "N/A",
            "exercises": [],
            "coolDown": "N/A",
        },
    },
}


@pytest.fixture(scope="session")
def test_client() -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(app)


@pytest.fixture
def make_profile() -> Callable[..., PlanRequest]:
    """Build a validated profile with sensible defaults; keywords override fields."""

    def _make(**overrides: Any) -> PlanRequest:
        data: Dict[str, Any] = {
            "age": 30,
            "gender": "female",
            "dietPreference": "balanced",
            "goal": "weight-loss",
            "activityLevel": "moderately-active",
            "experience": "beginner",
            "availableDays": ["Monday", "Wednesday", "Friday"],
            "equipment": ["dumbbells"],
            "healthNotes": None,
        }
        data.update(overrides)
        return PlanRequest.model_validate(data)

    return _make


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def stub_anthropic(monkeypatch: pytest.MonkeyPatch):
    """
    Replace the Anthropic client with a stub.

    Call the returned function with either the reply text or an exception to
    raise; it returns the list that records each ``messages.create`` call.
    """

    def _install(reply: str | BaseException | None = None) -> list[dict[str, Any]]:
        calls: list[dict[str, Any]] = []
        text = json.dumps(SAMPLE_AI_PLAN) if reply is None else reply

        class DummyMessages:
            async def create(self, **kwargs):
                calls.append(kwargs)
                if isinstance(text, BaseException):
                    raise text
                return SimpleNamespace(content=[SimpleNamespace(text=text)])

        class DummyAnthropic:
            def __init__(self, **kwargs):
                self.options = kwargs
                self.messages = DummyMessages()

        monkeypatch.setattr("fitplan.services.plan_generator.AsyncAnthropic", DummyAnthropic)
        get_plan_generator.cache_clear()
        return calls

    yield _install
    get_plan_generator.cache_clear()
