"""Static exercise tables consumed by the fallback planner."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from fitplan.models.enums import WorkoutCategory


EXERCISE_CATALOG: Mapping[WorkoutCategory, tuple[str, ...]] = MappingProxyType(
    {
        WorkoutCategory.UPPER_BODY: (
            "Push-ups",
            "Pull-ups",
            "Dumbbell Rows",
            "Overhead Press",
            "Bicep Curls",
            "Tricep Dips",
        ),
        WorkoutCategory.LOWER_BODY: (
            "Squats",
            "Lunges",
            "Deadlifts",
            "Glute Bridges",
            "Calf Raises",
            "Leg Press",
        ),
        WorkoutCategory.CARDIO: (
            "Running",
            "Cycling",
            "Jumping Jacks",
            "Burpees",
            "High Knees",
            "Swimming",
        ),
        WorkoutCategory.CORE: (
            "Plank",
            "Crunches",
            "Leg Raises",
            "Russian Twists",
            "Bicycle Crunches",
        ),
        WorkoutCategory.FULL_BODY: (
            "Kettlebell Swings",
            "Thrusters",
            "Clean and Jerk",
            "Mountain Climbers",
        ),
    }
)


def exercises_for(category: WorkoutCategory | str) -> tuple[str, ...]:
    """
    Return the exercise names for a category.

    Unknown categories yield an empty tuple; callers treat that as
    "no exercises available" rather than an error.
    """
    try:
        key = WorkoutCategory(category)
    except ValueError:
        return ()
    return EXERCISE_CATALOG.get(key, ())
