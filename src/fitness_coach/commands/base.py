"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import get_settings
from ..db import PlanStore, get_db_path
from ..factory import create_plan_generator
from ..state import PlanSession


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'fitness-coach init' first."
        )
        ctx.exit(1)


async def open_session(with_generator: bool = False) -> PlanSession:
    """Create the plan session and restore the saved plan."""
    generator = create_plan_generator(get_settings()) if with_generator else None
    session = PlanSession(PlanStore(), generator)
    await session.load()
    return session


async def require_plan(ctx: click.Context) -> PlanSession:
    """Open the session, exiting if there is no saved plan."""
    session = await open_session()
    if not session.has_plan:
        echo_error("No saved plan. Run 'fitness-coach generate' first.")
        ctx.exit(1)
    return session


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)
