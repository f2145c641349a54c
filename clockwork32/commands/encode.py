"""CLI command for encoding binary data to Clockwork Base32 text.

Examples
--------
  clockwork32 encode photo.jpg -o photo.txt
  printf 'Hello, world!' | clockwork32 encode
  clockwork32 encode --wrap 76 archive.tar.gz
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional
import logging

import click

from clockwork32.codec import encode_stream
from clockwork32.config import Config


_LOGGER = logging.getLogger(__name__)


def _write_encoded(source: BinaryIO, dst: BinaryIO, wrap: int) -> int:
    written = encode_stream(source, dst, wrap=wrap)
    if written:
        dst.write(b"\n")
        written += 1
    return written


@click.command(name="encode")
@click.argument("source", type=click.File("rb"), default="-", required=False)
@click.option(
    "output",
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Write encoded text to this file instead of stdout",
)
@click.option(
    "wrap",
    "--wrap",
    type=click.IntRange(min=0),
    default=Config.DEFAULT_WRAP,
    show_default=True,
    help="Wrap encoded lines after this many symbols (0 disables wrapping)",
)
def encode(source: BinaryIO, output: Optional[Path], wrap: int) -> None:
    """Encode SOURCE (a file, or '-' for stdin) as Clockwork Base32 text."""

    try:
        if output is None:
            dst = click.get_binary_stream("stdout")
            written = _write_encoded(source, dst, wrap)
            dst.flush()
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            with output.open("wb") as f:
                written = _write_encoded(source, f, wrap)
        _LOGGER.info("Wrote %d encoded byte(s) to %s", written, output or "<stdout>")
    except OSError as e:
        raise click.ClickException(f"Encoding failed: {e}")
