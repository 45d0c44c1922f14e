"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_settings


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_settings().data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "fitness_coach.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Key/value mirror of the browser's localStorage
        await db.execute("""
            CREATE TABLE IF NOT EXISTS local_storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.commit()
