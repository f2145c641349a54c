"""
clockwork32: Clockwork Base32 encoding and decoding.

Converts arbitrary bytes to and from a 32-symbol, typo-tolerant text alphabet
(``0123456789ABCDEFGHJKMNPQRSTVWXYZ``), 5 bits per symbol, without padding.
"""

__all__ = [
    "Alphabet",
    "CLOCKWORK_ALPHABET",
    "Config",
    "get_config",
    "InvalidSymbolError",
    "FiveBitGroups",
    "OctetAssembler",
    "symbol_to_char",
    "char_to_symbol",
    "encode",
    "encode_to_bytes",
    "append_encoded",
    "encode_stream",
    "decode",
    "decode_to_str",
    "append_decoded",
    "decode_stream",
    "capacity_hint_for_decode",
    "capacity_hint_for_encode",
    "__version__",
]

__version__ = "0.1.0"

from clockwork32.alphabet import Alphabet, CLOCKWORK_ALPHABET, symbol_to_char, char_to_symbol
from clockwork32.config import Config, get_config
from clockwork32.errors import InvalidSymbolError
from clockwork32.coding import FiveBitGroups, OctetAssembler
from clockwork32.codec import (
    encode,
    encode_to_bytes,
    append_encoded,
    encode_stream,
    decode,
    decode_to_str,
    append_decoded,
    decode_stream,
    capacity_hint_for_decode,
    capacity_hint_for_encode,
)
