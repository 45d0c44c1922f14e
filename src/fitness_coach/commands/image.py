"""Image lookup command."""

import click

from ..config import get_settings
from ..factory import create_image_service
from ..models.plan import ImageCategory
from .base import async_command, echo_success, echo_warning


@click.command()
@click.argument("name")
@click.option(
    "--type",
    "-t",
    "category",
    type=click.Choice([c.value for c in ImageCategory]),
    default=ImageCategory.EXERCISE.value,
    help="Whether NAME is an exercise or a food",
)
@async_command
async def image(name: str, category: str):
    """Get an illustrative image URL for an exercise or food.

    Examples:

        fitness-coach image "Push-ups"
        fitness-coach image "Greek yogurt" --type food
    """
    service = create_image_service(get_settings())
    result = await service.generate(name, category)

    if result.success:
        echo_success(f"Generated by {result.service}")
    else:
        echo_warning(f"Using placeholder ({result.error})")
    click.echo(result.image_url)
