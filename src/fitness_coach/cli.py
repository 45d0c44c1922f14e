"""CLI entry point for fitness-coach."""

import click

from . import __version__
from .commands import export, generate, image, init, narrate, quote, regenerate, serve, show
from .config import configure_logging, get_settings


@click.group()
@click.version_option(version=__version__, prog_name="fitness-coach")
def main():
    """fitness-coach: AI-powered workout and diet plans.

    Fill in a short profile and get a 7-day workout plan, a daily meal
    plan, tips and a motivational line, generated by Gemini.

    Example usage:

        # Initialize the data directory
        fitness-coach init

        # Generate and view a plan
        fitness-coach generate
        fitness-coach show

        # Export or listen to it
        fitness-coach export
        fitness-coach narrate workout --play
    """
    configure_logging(get_settings().log_level)


# Register commands
main.add_command(init)
main.add_command(generate)
main.add_command(show)
main.add_command(regenerate)
main.add_command(export)
main.add_command(narrate)
main.add_command(image)
main.add_command(quote)
main.add_command(serve)


if __name__ == "__main__":
    main()
