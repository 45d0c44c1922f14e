"""Regenerate command: forget the saved plan."""

import click

from .base import async_command, echo_info, echo_success, ensure_initialized, open_session


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@async_command
async def regenerate(ctx, yes: bool):
    """Discard the saved plan so a new one can be generated."""
    ensure_initialized(ctx)

    session = await open_session()
    if not session.has_plan:
        echo_info("No saved plan to discard")
        return

    if not yes and not click.confirm("Discard the saved plan?", default=False):
        return

    await session.regenerate()
    echo_success("Saved plan discarded. Run 'fitness-coach generate' for a new one.")
