"""API endpoint for weekly workout plan generation."""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from fitplan.models.schemas import FallbackPlanResponse, PlanRequest
from fitplan.services.fallback_planner import FallbackPlanBuilder
from fitplan.services.plan_generator import PlanGenerationError, get_plan_generator


logger = logging.getLogger(__name__)

router = APIRouter(tags=["plans"])


@router.post(
    "/generate-plan",
    responses={
        500: {
            "model": FallbackPlanResponse,
            "description": "AI generation failed. The body is a complete, renderable fallback plan.",
        },
    },
)
async def generate_plan(profile: PlanRequest):
    """
    Generate a weekly workout plan for the submitted profile.

    Tries Claude first. When the AI call fails or its answer cannot be parsed,
    a rule-based plan is returned instead with status 500. Clients must treat
    the 500 body as a valid plan to display, not as an error object.

    Returns:
        dict: AI plan (200) or FallbackPlanResponse (500)
    """
    logger.info(
        "Handling plan request | goal=%s days=%s activity=%s diet=%s",
        profile.goal,
        ",".join(day.value for day in profile.active_days()),
        profile.activity_level or "unspecified",
        profile.diet_preference,
    )

    try:
        generator = get_plan_generator()
        return await generator.generate_plan(profile)
    except PlanGenerationError as e:
        logger.warning("AI plan generation failed, serving fallback: %s", e)
    except Exception:
        logger.exception("Unexpected error during AI plan generation, serving fallback")

    fallback = FallbackPlanBuilder().build_response(profile)
    return JSONResponse(
        status_code=500,
        content=fallback.model_dump(mode="json", by_alias=True),
    )
