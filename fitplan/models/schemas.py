"""Pydantic models describing API payloads."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fitplan.models.enums import WEEK, DayOfWeek


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlanRequest(CamelModel):
    """User profile submitted by the plan form."""

    age: int = Field(gt=0)
    gender: str | None = None
    diet_preference: str = Field(default="balanced")
    goal: str
    activity_level: str | None = None
    experience: str | None = None
    available_days: list[DayOfWeek] = Field(min_length=1)
    equipment: list[str] = Field(default_factory=list)
    health_notes: str | None = None

    @field_validator("available_days")
    @classmethod
    def days_must_be_unique(cls, value: list[DayOfWeek]) -> list[DayOfWeek]:
        if len(set(value)) != len(value):
            raise ValueError("availableDays must not contain duplicate days")
        return value

    def active_days(self) -> list[DayOfWeek]:
        """Available days in week order."""

        chosen = set(self.available_days)
        return [day for day in WEEK if day in chosen]

    def rest_days(self) -> list[DayOfWeek]:
        chosen = set(self.available_days)
        return [day for day in WEEK if day not in chosen]


class ExerciseEntry(BaseModel):
    """A single exercise prescription within a day."""

    name: str
    details: str
    alternative: str = "N/A"


class DayPlan(CamelModel):
    focus: str
    warm_up: str = "N/A"
    exercises: list[ExerciseEntry]
    cool_down: str = "N/A"


WeeklyPlan = dict[DayOfWeek, DayPlan]


class FallbackPlanResponse(CamelModel):
    """Degraded-service body returned alongside HTTP 500."""

    introduction: str
    weekly_plan: WeeklyPlan


class GeneratedPlan(CamelModel):
    """Plan payload produced by the AI model; unknown keys are kept."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    # Only the day plan is checked; everything else is passed through untouched.
    introduction: Any = None
    dietary_recommendations: Any = None
    weekly_plan: dict[str, Any]

    @field_validator("weekly_plan")
    @classmethod
    def weekly_plan_not_empty(cls, value: dict[str, Any]) -> dict[str, Any]:
        if not value:
            raise ValueError("weeklyPlan must contain at least one day")
        return value
