"""Export the saved plan as a PDF."""

import click

from ..services.pdf_export import render_plan_pdf
from .base import async_command, echo_success, ensure_initialized, require_plan


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file (default: <Name>_Fitness_Plan.pdf)",
)
@click.pass_context
@async_command
async def export(ctx, output: str | None):
    """Export the saved plan to a paginated PDF.

    Examples:

        # Write Jane_Doe_Fitness_Plan.pdf in the current directory
        fitness-coach export

        # Choose the file name
        fitness-coach export -o plan.pdf
    """
    ensure_initialized(ctx)
    session = await require_plan(ctx)

    content = render_plan_pdf(session.plan)
    output = output or session.plan.file_name
    with open(output, "wb") as f:
        f.write(content)
    echo_success(f"Exported to {output}")
