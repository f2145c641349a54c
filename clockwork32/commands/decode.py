"""CLI command for decoding Clockwork Base32 text back to binary data.

Whitespace such as line wrapping is skipped unless ``--strict`` is given.
Nothing is written when the input contains an invalid symbol.

Examples
--------
  clockwork32 decode photo.txt -o photo.jpg
  echo 91JPRV3F5GG7EVVJDHJ22 | clockwork32 decode
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional
import logging

import click

from clockwork32.codec import decode_stream
from clockwork32.errors import InvalidSymbolError


_LOGGER = logging.getLogger(__name__)


@click.command(name="decode")
@click.argument("source", type=click.File("rb"), default="-", required=False)
@click.option(
    "output",
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Write decoded bytes to this file instead of stdout",
)
@click.option(
    "strict",
    "--strict",
    is_flag=True,
    help="Treat whitespace as an invalid symbol instead of skipping it",
)
def decode(source: BinaryIO, output: Optional[Path], strict: bool) -> None:
    """Decode Clockwork Base32 text from SOURCE (a file, or '-' for stdin)."""

    buf = BytesIO()
    try:
        decode_stream(source, buf, ignore_whitespace=not strict)
    except InvalidSymbolError as e:
        raise click.ClickException(f"{e} at position {e.position}")

    data = buf.getvalue()
    try:
        if output is None:
            dst = click.get_binary_stream("stdout")
            dst.write(data)
            dst.flush()
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(data)
    except OSError as e:
        raise click.ClickException(f"Decoding failed: {e}")
    _LOGGER.info("Wrote %d decoded byte(s) to %s", len(data), output or "<stdout>")
