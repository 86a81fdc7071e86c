"""
Barcode repair CLI tool.

Repairs EAN-13 barcodes that contain one unreadable digit marked with 'X'.
Without arguments, repairs the demo barcodes from settings.

Usage:
    poetry run fix-barcode
    poetry run fix-barcode 40063X1333931 40063813339X1
    poetry run fix-barcode 40063X1333931 --format json --no-pause
    python -m eanfix.cli 40063X1333931
"""

import sys

import click
import structlog

from eanfix.config import get_settings
from eanfix.logging_config import configure_logging
from eanfix.models import RepairResult, repair_barcode

logger = structlog.get_logger(__name__)


def format_result(result: RepairResult) -> str:
    """Render a repair result as a single line of text."""
    if result.ok:
        return f"Fixed Barcode: {result.fixed_code}"
    return f"Error: {result.error}"


@click.command()
@click.argument("barcodes", nargs=-1)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--pause/--no-pause",
    default=True,
    help="Wait for a keypress before exiting (default: pause)",
)
def main(barcodes: tuple[str, ...], output_format: str, pause: bool):
    """Repair barcodes with a single broken digit."""
    settings = get_settings()
    configure_logging(settings)

    codes = list(barcodes) or settings.demo_barcodes
    logger.debug("Repairing barcodes", count=len(codes))

    failed = 0
    for code in codes:
        result = repair_barcode(code)
        if not result.ok:
            failed += 1

        if output_format == "json":
            click.echo(result.model_dump_json())
        else:
            click.echo(format_result(result))

    if pause:
        click.pause()

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
