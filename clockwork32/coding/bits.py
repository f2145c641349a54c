"""Bit regrouping transducers between 8-bit bytes and 5-bit symbols.

``FiveBitGroups`` slices a byte stream into 5-bit symbol values, most
significant bit first, zero-padding the final group. ``OctetAssembler``
reassembles decoded symbol characters into bytes and silently drops a trailing
partial byte (1-7 bits) without checking its value.

Both are pull-based iterators: they read from their input only as far as
needed to produce the next value, so they can be driven over generators and
file streams as well as in-memory buffers. Each instance serves one encode or
decode pass and cannot be restarted.

Example
-------
>>> list(FiveBitGroups(b"f"))
[12, 24]
>>> bytes(OctetAssembler("CR0"))
b'f'
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from clockwork32.alphabet import DECODE_TABLE, RESERVED_SYMBOLS, SYMBOL_BITS, SYMBOL_MASK
from clockwork32.errors import InvalidSymbolError

BYTE_BITS: int = 8


class FiveBitGroups(Iterator[int]):
    """Iterator of 5-bit symbol values for a sequence of bytes.

    Parameters
    ----------
    data:
        Iterable of ints in ``range(256)`` (``bytes``, ``bytearray``,
        ``memoryview`` or any generator of byte values).

    Notes
    -----
    The carry holds ``bit_count`` not-yet-emitted bits, right-aligned. After
    the input is exhausted a non-empty carry is flushed as one final symbol
    with its bits left-aligned and the low-order bits zero.
    """

    def __init__(self, data: Iterable[int]) -> None:
        self._input: Iterator[int] = iter(data)
        self._buffer: int = 0
        self._bit_count: int = 0
        self._exhausted: bool = False

    @property
    def bit_count(self) -> int:
        """Number of input bits consumed but not yet emitted."""

        return self._bit_count

    def __iter__(self) -> "FiveBitGroups":
        return self

    def __next__(self) -> int:
        while self._bit_count < SYMBOL_BITS:
            if self._exhausted:
                break
            octet = next(self._input, None)
            if octet is None:
                self._exhausted = True
                break
            if not 0 <= octet <= 0xFF:
                raise ValueError(f"byte must be in range(0, 256), got {octet}")
            self._buffer = (self._buffer << BYTE_BITS) | octet
            self._bit_count += BYTE_BITS

        if self._bit_count >= SYMBOL_BITS:
            self._bit_count -= SYMBOL_BITS
            value = self._buffer >> self._bit_count
            self._buffer &= (1 << self._bit_count) - 1
            return value

        if self._bit_count:
            # Final partial group: left-align and zero-fill.
            value = (self._buffer << (SYMBOL_BITS - self._bit_count)) & SYMBOL_MASK
            self._buffer = 0
            self._bit_count = 0
            return value

        raise StopIteration


class OctetAssembler(Iterator[int]):
    """Iterator of decoded byte values for a sequence of symbol characters.

    Parameters
    ----------
    symbols:
        Iterable of byte values or one-character strings.
    table:
        Byte -> symbol value lookup, ``None`` marking invalid entries.

    Raises
    ------
    InvalidSymbolError
        From ``__next__`` as soon as an input unit fails the lookup. Bytes
        already produced stay with the caller; the iterator is finished
        afterwards.
    """

    def __init__(
        self,
        symbols: Iterable[int | str],
        table: tuple[Optional[int], ...] = DECODE_TABLE,
    ) -> None:
        self._input: Iterator[int | str] = iter(symbols)
        self._table = table
        self._buffer: int = 0
        self._bit_count: int = 0
        self._position: int = 0
        self._done: bool = False

    @property
    def bit_count(self) -> int:
        """Number of decoded bits buffered towards the next byte (0-7)."""

        return self._bit_count

    @property
    def position(self) -> int:
        """Number of input units consumed so far."""

        return self._position

    def __iter__(self) -> "OctetAssembler":
        return self

    def __next__(self) -> int:
        if self._done:
            raise StopIteration
        for unit in self._input:
            if isinstance(unit, str):
                if len(unit) != 1:
                    self._done = True
                    raise ValueError(f"expected a single character, got {unit!r}")
                cp = ord(unit)
            elif 0 <= unit <= 0xFF:
                cp = unit
            else:
                self._done = True
                raise ValueError(f"byte must be in range(0, 256), got {unit}")
            value = self._table[cp] if cp <= 0xFF else None
            if value is None:
                self._done = True
                raise InvalidSymbolError(cp, self._position, reserved=cp in RESERVED_SYMBOLS)
            self._position += 1
            self._buffer = (self._buffer << SYMBOL_BITS) | value
            self._bit_count += SYMBOL_BITS
            if self._bit_count >= BYTE_BITS:
                self._bit_count -= BYTE_BITS
                octet = self._buffer >> self._bit_count
                self._buffer &= (1 << self._bit_count) - 1
                return octet
        # Leftover bits are dropped unchecked.
        self._done = True
        self._buffer = 0
        self._bit_count = 0
        raise StopIteration


__all__ = ["BYTE_BITS", "FiveBitGroups", "OctetAssembler"]
