"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the fitness-coach data directory and database.

    The database holds the locally saved plan.
    """
    data_dir = get_settings().data_dir
    echo_info(f"Initializing fitness-coach in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("fitness-coach is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Set GOOGLE_GEMINI_API_KEY (and ELEVENLABS_API_KEY for narration)")
    click.echo("  2. Generate a plan:   fitness-coach generate")
    click.echo("  3. Or use the web UI: fitness-coach serve")
