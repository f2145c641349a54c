"""High-level encode/decode entry points.

These functions allocate (or append to) a destination and drive the bit
transducers in :mod:`clockwork32.coding.bits` to exhaustion.

Public API:
- encode, encode_to_bytes, append_encoded, encode_stream
- decode, decode_to_str, append_decoded, decode_stream
- capacity_hint_for_encode, capacity_hint_for_decode

Examples
--------
>>> from clockwork32.codec import encode, decode
>>> encode(b"Hello, world!")
'91JPRV3F5GG7EVVJDHJ22'
>>> decode("91jprv3f5gg7evvjdhj22")
b'Hello, world!'
"""

from __future__ import annotations

from typing import BinaryIO, Iterable
import logging

from clockwork32.alphabet import ENCODE_SYMBOLS, ENCODE_SYMBOLS_ASCII, SYMBOL_BITS
from clockwork32.coding.bits import BYTE_BITS, FiveBitGroups, OctetAssembler
from clockwork32.config import Config
from clockwork32.errors import InvalidSymbolError
from clockwork32.utils import iter_stream_bytes, strip_whitespace


_LOGGER = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview
EncodeInput = BytesLike | str | Iterable[int]
DecodeInput = BytesLike | str | Iterable[int] | Iterable[str]


# Capacity hints ---------------------------------------------------------------
def capacity_hint_for_decode(input_len: int) -> int:
    """Return the number of bytes decoded from ``input_len`` symbols."""

    if input_len < 0:
        raise ValueError("input_len must be >= 0")
    return input_len * SYMBOL_BITS // BYTE_BITS


def capacity_hint_for_encode(input_len: int) -> int:
    """Return the number of symbols produced for ``input_len`` bytes."""

    if input_len < 0:
        raise ValueError("input_len must be >= 0")
    return (input_len * BYTE_BITS + SYMBOL_BITS - 1) // SYMBOL_BITS


def _as_octets(data: EncodeInput) -> Iterable[int]:
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


# Encoding ---------------------------------------------------------------------
def encode(data: EncodeInput) -> str:
    """Encode ``data`` and return the symbol text.

    ``str`` input is encoded as UTF-8 first. Encoding never fails for byte
    input.
    """

    return "".join(ENCODE_SYMBOLS[v] for v in FiveBitGroups(_as_octets(data)))


def encode_to_bytes(data: EncodeInput) -> bytes:
    """Encode ``data`` and return the symbol text as ASCII bytes."""

    return bytes(ENCODE_SYMBOLS_ASCII[v] for v in FiveBitGroups(_as_octets(data)))


def append_encoded(dest: bytearray, data: EncodeInput) -> int:
    """Append the ASCII symbols for ``data`` to ``dest``; return how many."""

    start = len(dest)
    for v in FiveBitGroups(_as_octets(data)):
        dest.append(ENCODE_SYMBOLS_ASCII[v])
    return len(dest) - start


# Decoding ---------------------------------------------------------------------
def append_decoded(dest: bytearray, data: DecodeInput) -> int:
    """Append the bytes decoded from ``data`` to ``dest``; return how many.

    Raises ``InvalidSymbolError`` at the first unit outside the alphabet. In
    that case ``dest`` keeps the bytes decoded before the failing symbol;
    callers that do not want a partial prefix must discard it themselves.
    """

    start = len(dest)
    assembler = OctetAssembler(data)
    try:
        for octet in assembler:
            dest.append(octet)
    except InvalidSymbolError as e:
        _LOGGER.debug(
            "Decode aborted at position %s (%r) after %d byte(s)",
            e.position,
            e.char,
            len(dest) - start,
        )
        raise
    return len(dest) - start


def decode(data: DecodeInput) -> bytes:
    """Decode symbol text ``data`` and return the bytes.

    Case-insensitive; ``O`` reads as 0 and ``I``/``L`` as 1. A trailing
    partial byte is discarded without validation.

    Raises
    ------
    InvalidSymbolError
        If ``data`` contains a unit outside the alphabet (including ``U``).
    """

    dest = bytearray()
    append_decoded(dest, data)
    return bytes(dest)


def decode_to_str(data: DecodeInput, encoding: str | None = None, errors: str = "strict") -> str:
    """Decode ``data`` and return the result as text.

    ``encoding`` defaults to ``Config.DEFAULT_TEXT_ENCODING`` (latin-1), which
    maps each decoded byte to one character, so any valid symbol input
    converts. Pass another codec such as ``"utf-8"`` for encoded text; its
    ``UnicodeDecodeError`` is then the caller's to handle.
    """

    return decode(data).decode(encoding or Config.DEFAULT_TEXT_ENCODING, errors)


# Streams ----------------------------------------------------------------------
def encode_stream(
    src: BinaryIO,
    dst: BinaryIO,
    *,
    chunk_size: int | None = None,
    wrap: int | None = None,
) -> int:
    """Encode the binary stream ``src`` into ``dst`` and return bytes written.

    Parameters
    ----------
    chunk_size:
        Read/write granularity (default: ``Config.DEFAULT_CHUNK_SIZE``).
    wrap:
        Insert a newline after every ``wrap`` symbols; 0 disables wrapping
        (default: ``Config.DEFAULT_WRAP``). No newline follows the last line.
    """

    size = Config.DEFAULT_CHUNK_SIZE if chunk_size is None else chunk_size
    width = Config.DEFAULT_WRAP if wrap is None else wrap
    if width < 0:
        raise ValueError("wrap must be >= 0")

    written = 0
    symbols = 0
    buf = bytearray()
    for v in FiveBitGroups(iter_stream_bytes(src, size)):
        if width and symbols and symbols % width == 0:
            buf.append(0x0A)
        buf.append(ENCODE_SYMBOLS_ASCII[v])
        symbols += 1
        if len(buf) >= size:
            dst.write(buf)
            written += len(buf)
            buf.clear()
    if buf:
        dst.write(buf)
        written += len(buf)
    _LOGGER.debug("Encoded %d symbol(s), wrote %d byte(s)", symbols, written)
    return written


def decode_stream(
    src: BinaryIO,
    dst: BinaryIO,
    *,
    chunk_size: int | None = None,
    ignore_whitespace: bool = True,
) -> int:
    """Decode the symbol stream ``src`` into ``dst`` and return bytes written.

    With ``ignore_whitespace`` ASCII whitespace (e.g. line wrapping) is skipped
    before lookup; error positions then count symbols only. On
    ``InvalidSymbolError`` the bytes decoded so far have already been
    written to ``dst``.
    """

    size = Config.DEFAULT_CHUNK_SIZE if chunk_size is None else chunk_size
    units = iter_stream_bytes(src, size)
    if ignore_whitespace:
        units = strip_whitespace(units)

    written = 0
    buf = bytearray()
    try:
        for octet in OctetAssembler(units):
            buf.append(octet)
            if len(buf) >= size:
                dst.write(buf)
                written += len(buf)
                buf.clear()
    finally:
        if buf:
            dst.write(buf)
            written += len(buf)
    _LOGGER.debug("Decoded %d byte(s)", written)
    return written


__all__ = [
    "capacity_hint_for_decode",
    "capacity_hint_for_encode",
    "encode",
    "encode_to_bytes",
    "append_encoded",
    "encode_stream",
    "decode",
    "decode_to_str",
    "append_decoded",
    "decode_stream",
]
