"""Workout split selection for the fallback planner."""
from __future__ import annotations

from typing import Sequence

from fitplan.models.enums import ActivityLevel, DietPreference, WorkoutCategory


UPPER = WorkoutCategory.UPPER_BODY
LOWER = WorkoutCategory.LOWER_BODY
CARDIO = WorkoutCategory.CARDIO
CORE = WorkoutCategory.CORE
FULL = WorkoutCategory.FULL_BODY

# Full-body and cardio heavy for people just getting started.
BEGINNER_SEQUENCE: tuple[WorkoutCategory, ...] = (FULL, CARDIO, CORE, LOWER, UPPER, CARDIO)
SPLIT_SEQUENCE: tuple[WorkoutCategory, ...] = (UPPER, LOWER, CARDIO, CORE, UPPER, LOWER, CARDIO)

_BEGINNER_LEVELS = frozenset({ActivityLevel.SEDENTARY, ActivityLevel.LIGHTLY_ACTIVE})


def build_sequence(
    activity_level: str | None,
    diet_preference: str | None,
) -> tuple[WorkoutCategory, ...]:
    """
    Build the ordered category rotation for a profile.

    Sedentary and lightly active users get the beginner rotation, everyone
    else the specialised split. A high-protein diet front-loads strength work
    and a low-carb diet adds an extra cardio session.

    Args:
        activity_level: Free-form activity tag (unknown values use the split)
        diet_preference: Free-form diet tag (unknown values change nothing)

    Returns:
        Non-empty tuple of categories, consumed cyclically by the planner
    """
    level = ActivityLevel.parse(activity_level)
    sequence = list(BEGINNER_SEQUENCE if level in _BEGINNER_LEVELS else SPLIT_SEQUENCE)

    diet = DietPreference.parse(diet_preference)
    if diet is DietPreference.HIGH_PROTEIN:
        sequence[:0] = [UPPER, LOWER]
    elif diet is DietPreference.LOW_CARB:
        sequence.append(CARDIO)

    return tuple(sequence)


def category_for_index(sequence: Sequence[WorkoutCategory], index: int) -> WorkoutCategory:
    """Return the category for the ``index``-th active day, wrapping around."""

    if not sequence:
        raise ValueError("category sequence must not be empty")
    return sequence[index % len(sequence)]
