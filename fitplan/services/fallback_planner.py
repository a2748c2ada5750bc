"""Rule-based weekly plan generation used when the AI service is unavailable."""
from __future__ import annotations

import logging
import random
from types import MappingProxyType
from typing import Mapping

from fitplan.models.enums import WEEK, ActivityLevel, DayOfWeek, ExperienceLevel, WorkoutCategory
from fitplan.models.exercise_catalog import exercises_for
from fitplan.models.schemas import (
    DayPlan,
    ExerciseEntry,
    FallbackPlanResponse,
    PlanRequest,
    WeeklyPlan,
)
from fitplan.services.category_sequencer import build_sequence, category_for_index


logger = logging.getLogger(__name__)

FALLBACK_INTRODUCTION = (
    "The AI service is currently unavailable. "
    "Here is a standard fallback plan based on your experience level."
)

REST_DAY_FOCUS = "Rest Day"
ACTIVE_WARM_UP = "5 minutes of light cardio (jogging in place)."
ACTIVE_COOL_DOWN = "5 minutes of full-body stretching."

DEFAULT_SETS_REPS = "3 sets of 10-12 reps"
SETS_REPS_BY_ACTIVITY: Mapping[ActivityLevel, str] = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: "2 sets of 10-12 reps",
        ActivityLevel.LIGHTLY_ACTIVE: "3 sets of 10-12 reps",
        ActivityLevel.MODERATELY_ACTIVE: "3 sets of 12-15 reps",
        ActivityLevel.VERY_ACTIVE: "4 sets of 12-15 reps",
    }
)

DEFAULT_EXERCISE_COUNT = 3
EXERCISES_PER_EXPERIENCE: Mapping[ExperienceLevel, int] = MappingProxyType(
    {
        ExperienceLevel.BEGINNER: 3,
        ExperienceLevel.INTERMEDIATE: 4,
        ExperienceLevel.ADVANCED: 5,
    }
)


def sets_reps_for(activity_level: str | None) -> str:
    """Sets/reps annotation for an activity level, with a default for unknown levels."""

    level = ActivityLevel.parse(activity_level)
    if level is None:
        return DEFAULT_SETS_REPS
    return SETS_REPS_BY_ACTIVITY.get(level, DEFAULT_SETS_REPS)


def exercise_count_for(experience: str | None) -> int:
    level = ExperienceLevel.parse(experience)
    if level is None:
        return DEFAULT_EXERCISE_COUNT
    return EXERCISES_PER_EXPERIENCE[level]


def rest_day_plan() -> DayPlan:
    """The fixed light-recovery suggestion assigned to every rest day."""

    return DayPlan(
        focus=REST_DAY_FOCUS,
        warm_up="N/A",
        exercises=[
            ExerciseEntry(name="Light walk or stretching", details="20 minutes", alternative="N/A")
        ],
        cool_down="N/A",
    )


class FallbackPlanBuilder:
    """Builds a seven-day plan by rotating through fixed workout categories."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def select_exercises(self, category: WorkoutCategory, count: int) -> list[str]:
        """Sample up to ``count`` distinct exercises from a category."""

        available = exercises_for(category)
        if not available or count <= 0:
            return []
        return self.rng.sample(available, min(count, len(available)))

    def build(self, profile: PlanRequest) -> WeeklyPlan:
        """
        Assign a workout or rest day to every day of the week.

        Active days take categories from the rotation in week order, one step
        per active day; days the user did not mark available become rest days.

        Args:
            profile: Validated user profile

        Returns:
            Mapping of all seven days (Sunday first) to their day plan
        """
        sequence = build_sequence(profile.activity_level, profile.diet_preference)
        details = sets_reps_for(profile.activity_level)
        count = exercise_count_for(profile.experience)

        assigned: dict[DayOfWeek, DayPlan] = {}
        for index, day in enumerate(profile.active_days()):
            category = category_for_index(sequence, index)
            assigned[day] = DayPlan(
                focus=category.value,
                warm_up=ACTIVE_WARM_UP,
                exercises=[
                    ExerciseEntry(name=name, details=details)
                    for name in self.select_exercises(category, count)
                ],
                cool_down=ACTIVE_COOL_DOWN,
            )

        plan: WeeklyPlan = {
            day: assigned[day] if day in assigned else rest_day_plan() for day in WEEK
        }

        logger.debug(
            "Built fallback plan | active=%d rest=%d sequence_length=%d",
            len(assigned),
            len(plan) - len(assigned),
            len(sequence),
        )
        return plan

    def build_response(self, profile: PlanRequest) -> FallbackPlanResponse:
        """Wrap the fallback plan with the degraded-service introduction."""

        return FallbackPlanResponse(
            introduction=FALLBACK_INTRODUCTION,
            weekly_plan=self.build(profile),
        )
