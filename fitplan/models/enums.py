"""Enumerations shared by the request schemas and the fallback planner.

All enums are string-based so they serialise straight into JSON payloads
and prompt text.
"""
from __future__ import annotations

import re
from enum import StrEnum


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_tag(value: str | None) -> str:
    """Fold free-form tags like ``HighProtein`` or ``high_protein`` to ``high-protein``."""

    if not value:
        return ""
    hyphenated = _CAMEL_BOUNDARY.sub("-", value.strip())
    return re.sub(r"[\s_-]+", "-", hyphenated).lower()


class DayOfWeek(StrEnum):
    """Days of the week in display order (Sunday first)."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


WEEK: tuple[DayOfWeek, ...] = tuple(DayOfWeek)


class WorkoutCategory(StrEnum):
    """Workout focus groupings; the value doubles as the day's focus label."""

    UPPER_BODY = "Upper Body"
    LOWER_BODY = "Lower Body"
    CARDIO = "Cardio"
    CORE = "Core"
    FULL_BODY = "Full Body"


class ActivityLevel(StrEnum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly-active"
    MODERATELY_ACTIVE = "moderately-active"
    VERY_ACTIVE = "very-active"

    @classmethod
    def parse(cls, value: str | None) -> ActivityLevel | None:
        """Return the matching level, or None for anything unrecognised."""

        try:
            return cls(normalize_tag(value))
        except ValueError:
            return None


class DietPreference(StrEnum):
    """Diet tags that influence the workout split. Other diets are accepted as-is."""

    HIGH_PROTEIN = "high-protein"
    LOW_CARB = "low-carb"

    @classmethod
    def parse(cls, value: str | None) -> DietPreference | None:
        try:
            return cls(normalize_tag(value))
        except ValueError:
            return None


class ExperienceLevel(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: str | None) -> ExperienceLevel | None:
        try:
            return cls(normalize_tag(value))
        except ValueError:
            return None
