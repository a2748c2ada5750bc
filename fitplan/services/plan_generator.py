"""Claude AI-powered weekly plan generation."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from anthropic import AsyncAnthropic
from pydantic import ValidationError

from fitplan.config import get_settings
from fitplan.models.enums import WEEK
from fitplan.models.schemas import GeneratedPlan, PlanRequest


logger = logging.getLogger(__name__)


class PlanGenerationError(Exception):
    """Base class for failures that should route a request to the fallback plan."""


class AIServiceError(PlanGenerationError):
    """The AI provider could not be reached or rejected the request."""


class MalformedPlanError(PlanGenerationError):
    """The AI provider answered, but not with a usable JSON plan."""


class PlanGenerator:
    """Generates weekly plans by prompting Claude with the user's profile."""

    def __init__(self) -> None:
        settings = get_settings()
        self.model = settings.anthropic_model
        self.max_tokens = settings.ai_max_tokens
        self.temperature = settings.ai_temperature
        self.client: AsyncAnthropic | None = None
        if settings.anthropic_api_key:
            # Single attempt; any failure goes straight to the fallback plan.
            self.client = AsyncAnthropic(
                api_key=settings.anthropic_api_key,
                max_retries=0,
                timeout=settings.ai_request_timeout_seconds,
            )

        prompt_config = self._load_prompt_config(settings.prompt_config_path)
        self.system_prompt: str | None = prompt_config.get("system")
        self.template: str = prompt_config["template"]

    async def generate_plan(self, profile: PlanRequest) -> dict[str, Any]:
        """
        Ask the model for a weekly plan and return the parsed payload.

        Args:
            profile: Validated user profile

        Returns:
            JSON-compatible plan with ``weeklyPlan`` and any extra keys the model added

        Raises:
            AIServiceError: Provider unavailable, misconfigured or returned an error
            MalformedPlanError: Response text held no valid plan object
        """
        if self.client is None:
            raise AIServiceError("ANTHROPIC_API_KEY is not configured")

        request_payload: dict[str, Any] = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": self.build_prompt(profile)}],
        }
        if self.system_prompt:
            request_payload["system"] = self.system_prompt

        logger.info(
            "Requesting AI plan | model=%s goal=%s days=%d",
            self.model,
            profile.goal,
            len(profile.available_days),
        )
        try:
            response = await self.client.messages.create(**request_payload)
        except Exception as exc:
            logger.warning("Claude plan request failed: %s", exc)
            raise AIServiceError(f"AI request failed: {exc}") from exc

        text = self._response_text(response)
        plan = self._parse_response(text)
        logger.info("AI plan generated | days=%d", len(plan.get("weeklyPlan", {})))
        return plan

    def build_prompt(self, profile: PlanRequest) -> str:
        """Render the prompt template with every profile field."""

        return self.template.format(
            age=profile.age,
            gender=profile.gender or "Not specified",
            goal=profile.goal,
            experience=profile.experience or "Not specified",
            activity_level=profile.activity_level or "Not specified",
            diet_preference=profile.diet_preference,
            available_days=", ".join(day.value for day in profile.active_days()),
            equipment=", ".join(profile.equipment) or "None",
            health_notes=profile.health_notes or "None",
            week=", ".join(day.value for day in WEEK),
        )

    @staticmethod
    def _response_text(response: Any) -> str:
        for block in getattr(response, "content", None) or []:
            text = getattr(block, "text", None)
            if text:
                return text
        raise AIServiceError("AI response contained no text content")

    @staticmethod
    def _parse_response(response_text: str) -> dict[str, Any]:
        """Extract and validate the JSON plan embedded in the model's reply."""

        start = response_text.find("{")
        end = response_text.rfind("}") + 1
        if start < 0 or end <= start:
            raise MalformedPlanError("AI response did not contain a JSON object")

        try:
            # raw_decode stops at the end of the first complete object.
            payload, _ = json.JSONDecoder().raw_decode(response_text[start:end])
        except json.JSONDecodeError as exc:
            raise MalformedPlanError(f"AI response JSON could not be parsed: {exc}") from exc

        try:
            plan = GeneratedPlan.model_validate(payload)
        except ValidationError as exc:
            raise MalformedPlanError(f"AI response did not match the plan shape: {exc}") from exc

        return plan.model_dump(by_alias=True, exclude_unset=True)

    @staticmethod
    def _load_prompt_config(path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)


@lru_cache()
def get_plan_generator() -> PlanGenerator:
    """Return a process-wide generator so the client and prompt are built once."""

    return PlanGenerator()
