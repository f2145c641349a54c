from io import BytesIO

import pytest
from hypothesis import assume, given, settings, strategies as st

from clockwork32.alphabet import ENCODE_SYMBOLS
from clockwork32.codec import decode, decode_stream, decode_to_str, encode, encode_stream
from clockwork32.errors import InvalidSymbolError

pytestmark = pytest.mark.property

symbol_text = st.text(alphabet=ENCODE_SYMBOLS)
invalid_chars = st.characters(
    exclude_characters=ENCODE_SYMBOLS + ENCODE_SYMBOLS.lower() + "OoIiLl"
)


@given(st.binary())
def test_round_trip(data: bytes) -> None:
    assert decode(encode(data)) == data


@given(st.binary())
def test_encode_length_law(data: bytes) -> None:
    assert len(encode(data)) == (8 * len(data) + 4) // 5


@given(symbol_text)
def test_decode_length_law(text: str) -> None:
    assert len(decode(text)) == 5 * len(text) // 8


@given(st.binary())
def test_encoded_output_uses_alphabet(data: bytes) -> None:
    assert set(encode(data)) <= set(ENCODE_SYMBOLS)


@given(symbol_text)
def test_case_insensitive(text: str) -> None:
    assert decode(text.lower()) == decode(text)
    assert decode(text.swapcase()) == decode(text)


@given(st.binary())
def test_look_alike_folding(data: bytes) -> None:
    text = encode(data)
    assert decode(text.replace("0", "O")) == data
    assert decode(text.replace("0", "o")) == data
    assert decode(text.replace("1", "I")) == data
    assert decode(text.replace("1", "L")) == data
    assert decode(text.replace("1", "i").replace("0", "o")) == data


@given(symbol_text, st.sampled_from(ENCODE_SYMBOLS))
def test_tail_leniency(text: str, extra: str) -> None:
    """A trailing symbol that cannot complete a byte is ignored."""

    assume((5 * len(text)) % 8 + 5 < 8)
    assert decode(text + extra) == decode(text)


@given(symbol_text, invalid_chars, symbol_text)
def test_invalid_symbol_rejected(head: str, bad: str, tail: str) -> None:
    with pytest.raises(InvalidSymbolError) as exc:
        decode(head + bad + tail)
    assert exc.value.position == len(head)


@given(symbol_text, st.sampled_from("Uu"), symbol_text)
def test_reserved_u_rejected(head: str, bad: str, tail: str) -> None:
    with pytest.raises(InvalidSymbolError) as exc:
        decode(head + bad + tail)
    assert exc.value.reserved is True


@given(symbol_text)
def test_decode_to_str_total_on_valid_symbols(text: str) -> None:
    assert decode_to_str(text).encode("latin-1") == decode(text)


@given(st.binary(), st.integers(min_value=1, max_value=16), st.integers(min_value=0, max_value=12))
@settings(max_examples=50)
def test_stream_round_trip(data: bytes, chunk_size: int, wrap: int) -> None:
    encoded = BytesIO()
    written = encode_stream(BytesIO(data), encoded, chunk_size=chunk_size, wrap=wrap)
    assert written == len(encoded.getvalue())
    if not wrap:
        assert encoded.getvalue() == encode(data).encode("ascii")
    encoded.seek(0)
    decoded = BytesIO()
    assert decode_stream(encoded, decoded, chunk_size=chunk_size) == len(data)
    assert decoded.getvalue() == data
