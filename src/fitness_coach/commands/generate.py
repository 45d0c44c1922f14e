"""Generate plan command."""

import json

import click

from ..clients import ProfileQuestionnaire
from ..models.user_profile import UserProfile
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    open_session,
)


@click.command()
@click.option(
    "--profile",
    "profile_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read the profile from a JSON file instead of asking",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Replace an existing saved plan without asking",
)
@click.pass_context
@async_command
async def generate(ctx, profile_file: str | None, force: bool):
    """Generate a personalized workout and diet plan.

    Without --profile you are asked for your details interactively. The JSON
    file uses the same camelCase keys as the web form.

    Examples:

        # Answer the questionnaire
        fitness-coach generate

        # Use a saved profile
        fitness-coach generate --profile me.json
    """
    ensure_initialized(ctx)

    session = await open_session(with_generator=True)
    if session.has_plan and not force:
        if not click.confirm("A saved plan exists. Replace it?", default=False):
            echo_info("Keeping the saved plan")
            return

    if profile_file:
        try:
            with open(profile_file) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            echo_error(f"Invalid profile file: {e}")
            ctx.exit(1)
        if not isinstance(data, dict):
            echo_error("Profile file must contain a JSON object")
            ctx.exit(1)
        profile = UserProfile.from_dict(data)
    else:
        profile = await ProfileQuestionnaire().collect_profile()

    click.echo()
    click.echo(profile.get_summary())
    click.echo()
    echo_info("Generating your plan...")

    result = await session.submit(profile)

    if result.used_fallback:
        echo_warning(f"Plan generation failed ({result.error}); using the default plan")
    else:
        echo_success("Plan generated")

    click.echo()
    click.echo(result.plan.get_summary())
    click.echo()
    echo_info("Export it with: fitness-coach export")
