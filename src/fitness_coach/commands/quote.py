"""Motivational quote command."""

import click

from ..config import get_settings
from ..factory import create_quote_generator
from .base import async_command


@click.command()
@async_command
async def quote():
    """Print a short motivational fitness quote."""
    text = await create_quote_generator(get_settings()).generate()
    click.echo(click.style(f'"{text}"', fg="green"))
