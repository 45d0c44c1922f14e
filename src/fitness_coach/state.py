"""Application state for the current plan."""

import logging

from .agents.executor import GenerationResult, PlanGenerator
from .db.repositories import PlanStore
from .models.plan import FitnessPlan
from .models.user_profile import UserProfile

logger = logging.getLogger(__name__)


class PlanSession:
    """The current plan, held in memory and mirrored to a PlanStore.

    ``load`` reads storage once at startup; ``submit`` generates and saves;
    ``regenerate`` clears memory and storage so a new form can be filled.
    """

    def __init__(self, store: PlanStore, generator: PlanGenerator | None = None):
        self.store = store
        self.generator = generator
        self.plan: FitnessPlan | None = None

    @property
    def has_plan(self) -> bool:
        return self.plan is not None

    async def load(self) -> FitnessPlan | None:
        """Restore the saved plan, if any."""
        self.plan = await self.store.load()
        return self.plan

    async def save(self, plan: FitnessPlan) -> None:
        """Make ``plan`` current and persist it."""
        self.plan = plan
        await self.store.save(plan)

    async def submit(self, profile: UserProfile) -> GenerationResult:
        """Generate a plan for a submitted profile and keep it."""
        if self.generator is None:
            raise RuntimeError("PlanSession has no generator configured")

        result = await self.generator.execute(profile)
        await self.save(result.plan)
        return result

    async def regenerate(self) -> None:
        """Drop the current plan from memory and storage."""
        self.plan = None
        await self.store.clear()
        logger.info("Cleared saved plan")
