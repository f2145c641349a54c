"""Bit-level transducers between bytes and 5-bit symbols.

Public API:
- FiveBitGroups
- OctetAssembler
"""

from __future__ import annotations

from clockwork32.coding.bits import BYTE_BITS, FiveBitGroups, OctetAssembler

__all__ = [
    "BYTE_BITS",
    "FiveBitGroups",
    "OctetAssembler",
]
