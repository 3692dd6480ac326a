"""
CLI tool to render and decode EAN-13 scanlines.

A scanline is written as text, one character per bit: "1" for a dark module
and "0" for a light one.

Usage:
    python -m tools.scan.main render 5901234123457
    python -m tools.scan.main render 5901234123457 --module-width 2 > row.txt
    python -m tools.scan.main decode --file row.txt
    python -m tools.scan.main decode 000000000101000110100100110...
"""

import sys
from pathlib import Path

import click
import structlog

from src.barcode import BitRow, EAN13Reader, encode_ean13
from src.config import configure_logging, get_settings

logger = structlog.get_logger(__name__)


@click.group()
def cli():
    """Render and decode EAN-13 scanlines."""
    configure_logging(get_settings())


@cli.command()
@click.argument("code")
@click.option(
    "--module-width",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Bits per module",
)
@click.option(
    "--quiet-zone",
    default=None,
    type=click.IntRange(min=0),
    help="Light modules on each side (default: from settings)",
)
def render(code: str, module_width: int, quiet_zone: int | None):
    """Print the ideal scanline for a 13-digit CODE."""
    try:
        row = encode_ean13(code, module_width=module_width, quiet_zone=quiet_zone)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="CODE") from e

    click.echo(row.to_string())


@cli.command()
@click.argument("bits", required=False)
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the scanline from a text file",
)
def decode(bits: str | None, file_path: Path | None):
    """Decode a scanline given as BITS, a file, or standard input."""
    if bits is None:
        bits = file_path.read_text(encoding="utf-8") if file_path else sys.stdin.read()

    try:
        row = BitRow.from_string(bits)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="BITS") from e

    reader = EAN13Reader()
    code = reader.decode_row(row)

    if code is None:
        logger.info("No EAN-13 symbol found", row_size=row.size)
        click.echo("Error: no EAN-13 symbol found", err=True)
        sys.exit(1)

    logger.info("Decoded scanline", code=code, row_size=row.size)
    click.echo(code)


if __name__ == "__main__":
    cli()
