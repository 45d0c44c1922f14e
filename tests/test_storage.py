"""Tests for plan persistence."""

import pytest

from fitness_coach.agents import PlanGenerator, PlanProvider, fallback_plan
from fitness_coach.db import PLAN_STORAGE_KEY, LocalStorageRepository, PlanStore, init_db
from fitness_coach.models import FitnessPlan
from fitness_coach.state import PlanSession


@pytest.fixture
async def storage(temp_db_path):
    await init_db(temp_db_path)
    return LocalStorageRepository(temp_db_path)


class TestLocalStorageRepository:
    """Tests for the key/value table."""

    async def test_set_get_remove(self, storage):
        assert await storage.get_item("k") is None

        await storage.set_item("k", "one")
        await storage.set_item("k", "two")
        assert await storage.get_item("k") == "two"

        await storage.remove_item("k")
        assert await storage.get_item("k") is None


class TestPlanStore:
    """Tests for PlanStore."""

    async def test_round_trip(self, storage, sample_plan_dict):
        """A saved plan loads back equal to the original."""
        store = PlanStore(storage)
        plan = FitnessPlan.from_dict(sample_plan_dict)

        await store.save(plan)

        assert await storage.get_item(PLAN_STORAGE_KEY) is not None
        assert await store.load() == plan

    async def test_empty(self, storage):
        assert await PlanStore(storage).load() is None

    async def test_unreadable_entry_removed(self, storage):
        """Corrupt data is discarded rather than raised."""
        await storage.set_item(PLAN_STORAGE_KEY, "{not json")
        store = PlanStore(storage)

        assert await store.load() is None
        assert await storage.get_item(PLAN_STORAGE_KEY) is None

    async def test_wrong_shape_removed(self, storage):
        await storage.set_item(PLAN_STORAGE_KEY, '{"workoutPlan": 5}')

        assert await PlanStore(storage).load() is None
        assert await storage.get_item(PLAN_STORAGE_KEY) is None


class TestPlanSession:
    """Tests for PlanSession."""

    async def test_submit_saves_plan(self, storage, sample_user_profile, fake_text_client):
        session = PlanSession(PlanStore(storage), PlanGenerator(PlanProvider(fake_text_client)))
        result = await session.submit(sample_user_profile)

        assert session.plan == result.plan
        restored = PlanSession(PlanStore(storage))
        assert await restored.load() == result.plan

    async def test_fallback_is_saved(self, storage, sample_user_profile, failing_text_client):
        session = PlanSession(PlanStore(storage), PlanGenerator(PlanProvider(failing_text_client)))
        result = await session.submit(sample_user_profile)

        assert result.used_fallback
        assert await PlanStore(storage).load() == fallback_plan()

    async def test_regenerate_clears(self, storage, sample_plan_dict):
        session = PlanSession(PlanStore(storage))
        await session.save(FitnessPlan.from_dict(sample_plan_dict))
        assert session.has_plan

        await session.regenerate()

        assert not session.has_plan
        assert await session.load() is None

    async def test_submit_without_generator(self, storage, sample_user_profile):
        with pytest.raises(RuntimeError):
            await PlanSession(PlanStore(storage)).submit(sample_user_profile)
