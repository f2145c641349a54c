"""Symbol alphabet and lookup tables for Clockwork Base32.

Each 5-bit value (0-31) is rendered as one character of
``0123456789ABCDEFGHJKMNPQRSTVWXYZ``. The letters I, L, O and U are left out
of the output alphabet: I, L and O are folded to 1, 1 and 0 on decode since
they are easily confused with those digits, and U is reserved. Decoding is
case-insensitive.

Examples
--------
>>> from clockwork32.alphabet import CLOCKWORK_ALPHABET, char_to_symbol, symbol_to_char
>>> CLOCKWORK_ALPHABET.size
32
>>> symbol_to_char(18)
'J'
>>> char_to_symbol("j"), char_to_symbol("O"), char_to_symbol("l")
(18, 0, 1)
>>> char_to_symbol("U") is None
True
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Optional
import math


@dataclass(frozen=True)
class Alphabet:
    """A 32-symbol output alphabet plus its decode-time aliases.

    Parameters
    ----------
    symbols:
        Output characters ordered by symbol value.
    name:
        Human-friendly name, e.g., "Clockwork-32".
    folds:
        Extra ``(character, value)`` pairs accepted on decode.
    reserved:
        Characters that never decode, even though they are letters.
    case_insensitive:
        Whether lowercase forms of ``symbols`` and ``folds`` decode too.
    """

    symbols: tuple[str, ...]
    name: str
    folds: tuple[tuple[str, int], ...] = ()
    reserved: tuple[str, ...] = ()
    case_insensitive: bool = True

    @property
    def size(self) -> int:
        """Number of output symbols."""

        return len(self.symbols)

    @property
    def bits_per_symbol(self) -> int:
        return int(math.log2(self.size))

    def is_valid_char(self, char: str) -> bool:
        """Return True if ``char`` decodes to a symbol value."""

        if len(char) != 1 or ord(char) > 0xFF:
            return False
        return self.decode_table[ord(char)] is not None

    @cached_property
    def decode_table(self) -> tuple[Optional[int], ...]:
        """Return the 256-entry byte -> symbol value table (``None`` = invalid)."""

        table: list[Optional[int]] = [None] * 256
        pairs = [(ch, value) for value, ch in enumerate(self.symbols)]
        pairs.extend(self.folds)
        for ch, value in pairs:
            table[ord(ch)] = value
            if self.case_insensitive:
                table[ord(ch.lower())] = value
                table[ord(ch.upper())] = value
        for ch in self.reserved:
            table[ord(ch.lower())] = None
            table[ord(ch.upper())] = None
        return tuple(table)


CLOCKWORK_ALPHABET = Alphabet(
    symbols=tuple("0123456789ABCDEFGHJKMNPQRSTVWXYZ"),
    name="Clockwork-32",
    folds=(("O", 0), ("I", 1), ("L", 1)),
    reserved=("U",),
)

SYMBOL_BITS: int = CLOCKWORK_ALPHABET.bits_per_symbol
SYMBOL_MASK: int = (1 << SYMBOL_BITS) - 1

ENCODE_SYMBOLS: str = "".join(CLOCKWORK_ALPHABET.symbols)
ENCODE_SYMBOLS_ASCII: bytes = ENCODE_SYMBOLS.encode("ascii")
DECODE_TABLE: tuple[Optional[int], ...] = CLOCKWORK_ALPHABET.decode_table
RESERVED_SYMBOLS: frozenset[int] = frozenset(
    ord(c) for r in CLOCKWORK_ALPHABET.reserved for c in (r.lower(), r.upper())
)


def symbol_to_char(value: int) -> str:
    """Return the output character for a 5-bit symbol value."""

    if not 0 <= value <= SYMBOL_MASK:
        raise ValueError(f"symbol value must be in range(0, 32), got {value}")
    return ENCODE_SYMBOLS[value]


def _code_point(unit: int | str) -> int:
    if isinstance(unit, str):
        if len(unit) != 1:
            raise ValueError(f"expected a single character, got {unit!r}")
        return ord(unit)
    return unit


def char_to_symbol(unit: int | str) -> Optional[int]:
    """Return the symbol value for a byte value or character, or ``None``."""

    cp = _code_point(unit)
    if not 0 <= cp <= 0xFF:
        return None
    return DECODE_TABLE[cp]


def is_reserved(unit: int | str) -> bool:
    """Return True for the reserved ``U``/``u`` symbols."""

    return _code_point(unit) in RESERVED_SYMBOLS


__all__ = [
    "Alphabet",
    "CLOCKWORK_ALPHABET",
    "SYMBOL_BITS",
    "SYMBOL_MASK",
    "ENCODE_SYMBOLS",
    "ENCODE_SYMBOLS_ASCII",
    "DECODE_TABLE",
    "RESERVED_SYMBOLS",
    "symbol_to_char",
    "char_to_symbol",
    "is_reserved",
]
