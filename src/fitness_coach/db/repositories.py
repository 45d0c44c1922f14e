"""Data access layer for fitness-coach."""

import json
import logging
from pathlib import Path

import aiosqlite

from ..models.plan import FitnessPlan
from .engine import get_db_path

logger = logging.getLogger(__name__)

PLAN_STORAGE_KEY = "fitnessPlan"


class LocalStorageRepository:
    """String key/value store with localStorage semantics."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get_item(self, key: str) -> str | None:
        """Get the value stored under a key."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT value FROM local_storage WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            return row[0] if row else None

    async def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO local_storage (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )
            await db.commit()

    async def remove_item(self, key: str) -> None:
        """Remove a key if present."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM local_storage WHERE key = ?", (key,))
            await db.commit()


class PlanStore:
    """Persists the last plan under the fixed ``fitnessPlan`` key."""

    def __init__(self, storage: LocalStorageRepository | None = None, key: str = PLAN_STORAGE_KEY):
        self.storage = storage or LocalStorageRepository()
        self.key = key

    async def save(self, plan: FitnessPlan) -> None:
        """Serialize and store a plan."""
        await self.storage.set_item(self.key, json.dumps(plan.to_dict()))

    async def load(self) -> FitnessPlan | None:
        """Read the stored plan.

        An unreadable entry is removed and treated as absent.
        """
        raw = await self.storage.get_item(self.key)
        if raw is None:
            return None

        try:
            return FitnessPlan.from_dict(json.loads(raw))
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning("Discarding unreadable saved plan: %s", e)
            await self.storage.remove_item(self.key)
            return None

    async def clear(self) -> None:
        """Forget the stored plan."""
        await self.storage.remove_item(self.key)
