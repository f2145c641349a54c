"""Error types raised by the codec."""

from __future__ import annotations

from typing import Optional


class InvalidSymbolError(ValueError):
    """Raised when a decode input unit has no mapping in the symbol table.

    Parameters
    ----------
    value:
        Code point of the offending input unit (a byte value for bytes input).
    position:
        Zero-based index of the unit in the decode input, when known.
    reserved:
        True for the reserved ``U``/``u`` symbols.
    """

    def __init__(self, value: int, position: Optional[int] = None, *, reserved: bool = False) -> None:
        self.value: int = value
        self.char: str = chr(value) if 0 <= value <= 0x10FFFF else repr(value)
        self.position: Optional[int] = position
        self.reserved: bool = reserved
        super().__init__(f"invalid symbol value {self.char}")


__all__ = ["InvalidSymbolError"]
