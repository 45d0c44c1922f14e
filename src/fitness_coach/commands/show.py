"""Show the saved plan."""

import json

import click

from .base import async_command, ensure_initialized, require_plan


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the stored JSON instead")
@click.pass_context
@async_command
async def show(ctx, as_json: bool):
    """Show the saved plan."""
    ensure_initialized(ctx)
    session = await require_plan(ctx)

    if as_json:
        click.echo(json.dumps(session.plan.to_dict(), indent=2))
    else:
        click.echo(session.plan.get_summary())
