"""Database layer for fitness-coach."""

from .engine import get_db_path, init_db
from .repositories import PLAN_STORAGE_KEY, LocalStorageRepository, PlanStore

__all__ = [
    "LocalStorageRepository",
    "PLAN_STORAGE_KEY",
    "PlanStore",
    "get_db_path",
    "init_db",
]
