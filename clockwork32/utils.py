"""Shared helpers for feeding file streams into the transducers.

The transducers consume plain iterables of byte values; these helpers turn a
binary file object into such an iterable while reading it in fixed-size
chunks.
"""

from __future__ import annotations

from typing import BinaryIO, Iterable, Iterator

from clockwork32.config import Config


def read_chunks(stream: BinaryIO, chunk_size: int | None = None) -> Iterator[bytes]:
    """Yield successive chunks of ``stream`` until EOF.

    Parameters
    ----------
    stream:
        Binary file object opened for reading.
    chunk_size:
        Bytes read per iteration (default: ``Config.DEFAULT_CHUNK_SIZE``).
    """

    size = Config.DEFAULT_CHUNK_SIZE if chunk_size is None else chunk_size
    if size <= 0:
        raise ValueError("chunk_size must be > 0")
    while True:
        chunk = stream.read(size)
        if not chunk:
            break
        yield chunk


def iter_stream_bytes(stream: BinaryIO, chunk_size: int | None = None) -> Iterator[int]:
    """Yield the byte values of ``stream`` one at a time."""

    for chunk in read_chunks(stream, chunk_size):
        yield from chunk


_ASCII_WHITESPACE = frozenset(b" \t\n\r\v\f")


def strip_whitespace(data: Iterable[int]) -> Iterator[int]:
    """Yield byte values from ``data`` skipping ASCII whitespace."""

    for b in data:
        if b not in _ASCII_WHITESPACE:
            yield b
