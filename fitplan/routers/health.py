"""Router exposing basic system endpoints."""
from __future__ import annotations

from fastapi import APIRouter

from fitplan.config import get_settings


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/status")
async def get_status() -> dict[str, str | bool]:
    """
    Report service status and whether AI generation is configured.

    When ``ai_configured`` is false every plan request is answered by the
    fallback generator.
    """
    return {
        "status": "online",
        "ai_configured": get_settings().ai_configured,
    }
