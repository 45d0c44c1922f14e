"""Plan and quote generation with static fallbacks."""

import logging
import random
from dataclasses import dataclass

from ..errors import FitnessCoachError, PlanProviderError
from ..models.plan import FitnessPlan
from ..models.user_profile import UserProfile
from .fallback import fallback_plan, fallback_quote
from .plan_provider import PlanProvider, TextClient
from .prompts import QUOTE_PROMPT, build_plan_prompt

logger = logging.getLogger(__name__)

_SURROUNDING_QUOTES = "\"'"


@dataclass
class GenerationResult:
    """A plan plus whether it came from the fallback branch."""

    plan: FitnessPlan
    used_fallback: bool
    error: str | None = None


class PlanGenerator:
    """Builds the prompt, calls the provider, degrades to the static plan."""

    def __init__(self, provider: PlanProvider):
        self.provider = provider

    async def execute(self, profile: UserProfile) -> GenerationResult:
        """Generate a plan for a profile. Never raises for upstream failures."""
        prompt = build_plan_prompt(profile)

        try:
            plan = await self.provider.generate(prompt)
        except PlanProviderError as e:
            # Availability over correctness: serve the static plan.
            logger.warning("Plan generation failed, using fallback plan: %s", e)
            return GenerationResult(plan=fallback_plan(), used_fallback=True, error=str(e))

        logger.info("Generated plan for %s (%d days, %d meals)",
                    plan.user_data.name, len(plan.workout_plan), len(plan.diet_plan))
        return GenerationResult(plan=plan, used_fallback=False)

    async def generate(self, profile: UserProfile) -> FitnessPlan:
        """Generate a plan, returning only the plan."""
        result = await self.execute(profile)
        return result.plan


class QuoteGenerator:
    """Fetches a short motivational quote, or picks a static one."""

    def __init__(self, text_client: TextClient, rng: random.Random | None = None):
        self.text_client = text_client
        self.rng = rng

    async def generate(self) -> str:
        try:
            text = await self.text_client.generate(QUOTE_PROMPT)
        except FitnessCoachError as e:
            logger.warning("Quote generation failed, using fallback quote: %s", e)
            return fallback_quote(self.rng)

        quote = text.strip()
        # Drop one leading and one trailing quote mark
        if quote[:1] in _SURROUNDING_QUOTES:
            quote = quote[1:]
        if quote[-1:] in _SURROUNDING_QUOTES:
            quote = quote[:-1]
        return quote
