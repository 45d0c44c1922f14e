"""Narrate a plan section with text-to-speech."""

import asyncio
from pathlib import Path

import click

from ..config import get_settings
from ..errors import SpeechSynthesisError
from ..factory import create_speech_service
from ..services.audio import AudioSlot, SubprocessPlayback
from ..services.speech import DIET, WORKOUT
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, require_plan


@click.command()
@click.argument("section", type=click.Choice([WORKOUT, DIET]))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Where to write the MP3 (default: <section>_narration.mp3)",
)
@click.option("--play", is_flag=True, help="Play the narration once it is ready")
@click.pass_context
@async_command
async def narrate(ctx, section: str, output: str | None, play: bool):
    """Read the workout or diet plan aloud.

    Needs ELEVENLABS_API_KEY. Only the first few days or meals are narrated.

    Examples:

        fitness-coach narrate workout --play
        fitness-coach narrate diet -o diet.mp3
    """
    ensure_initialized(ctx)
    session = await require_plan(ctx)

    data = session.plan.workout_plan if section == WORKOUT else session.plan.diet_plan
    service = create_speech_service(get_settings())

    echo_info(f"Synthesizing {section} narration...")
    try:
        audio = await service.narrate(section, data)
    except SpeechSynthesisError as e:
        echo_error(f"Failed to generate speech: {e}")
        ctx.exit(1)

    path = Path(output or f"{section}_narration.mp3")
    path.write_bytes(audio)
    echo_success(f"Saved narration to {path}")

    if play:
        slot = AudioSlot()
        try:
            handle = slot.replace(SubprocessPlayback(path))
        except RuntimeError as e:
            echo_error(str(e))
            ctx.exit(1)
        echo_info("Playing... press Ctrl+C to stop")
        try:
            await asyncio.to_thread(handle.wait)
        finally:
            slot.stop()
