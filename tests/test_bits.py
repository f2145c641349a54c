import pytest

from clockwork32.coding import FiveBitGroups, OctetAssembler
from clockwork32.errors import InvalidSymbolError


def _counting(items, consumed: list):
    for item in items:
        consumed.append(item)
        yield item


def test_five_bit_groups_msb_first():
    groups = list(FiveBitGroups([0b1101_0011, 0b1011_1001, 0b1000_0001]))
    assert groups == [0b11010, 0b01110, 0b11100, 0b11000, 0b00010]


def test_five_bit_groups_empty_input():
    assert list(FiveBitGroups(b"")) == []


def test_five_bit_groups_zero_pads_tail():
    it = FiveBitGroups(b"\xff")
    assert next(it) == 0b11111
    assert it.bit_count == 3
    assert next(it) == 0b11100
    assert it.bit_count == 0
    with pytest.raises(StopIteration):
        next(it)


def test_five_bit_groups_no_extra_symbol_on_boundary():
    """Five bytes are exactly eight symbols, with no trailing group."""

    assert len(list(FiveBitGroups(b"\x00" * 5))) == 8
    assert list(FiveBitGroups(b"\xff" * 5)) == [31] * 8


@pytest.mark.parametrize("n", range(0, 21))
def test_five_bit_groups_length(n: int):
    assert len(list(FiveBitGroups(bytes(range(n))))) == (8 * n + 4) // 5


def test_five_bit_groups_pulls_lazily():
    consumed: list[int] = []
    it = FiveBitGroups(_counting(b"foobar", consumed))
    assert next(it) == 12
    assert consumed == [ord("f")]
    next(it)
    assert consumed == [ord("f"), ord("o")]
    # Six carried bits already complete the third group.
    next(it)
    assert consumed == [ord("f"), ord("o")]


def test_five_bit_groups_values_in_range():
    assert all(0 <= v < 32 for v in FiveBitGroups(bytes(range(256))))


def test_five_bit_groups_not_restartable():
    it = FiveBitGroups(b"ab")
    assert len(list(it)) == 4
    assert list(it) == []


def test_five_bit_groups_rejects_non_bytes():
    with pytest.raises(ValueError):
        list(FiveBitGroups([1, 256]))


def test_octet_assembler_basic():
    it = OctetAssembler("CR")
    assert next(it) == ord("f")
    assert it.bit_count == 2
    assert it.position == 2
    with pytest.raises(StopIteration):
        next(it)
    assert it.bit_count == 0


def test_octet_assembler_accepts_bytes_and_chars():
    assert bytes(OctetAssembler(b"CSQPYRK1E8")) == b"foobar"
    assert bytes(OctetAssembler(iter("CSQPYRK1E8"))) == b"foobar"


def test_octet_assembler_bit_count_bounded():
    it = OctetAssembler("Z" * 40)
    for _ in it:
        assert 0 <= it.bit_count <= 7


def test_octet_assembler_drops_tail_unchecked():
    """Leftover bits are discarded even when non-zero."""

    assert bytes(OctetAssembler("C")) == b""
    assert bytes(OctetAssembler("CR")) == b"f"
    assert bytes(OctetAssembler("CZ")) == bytes([0b01100111])
    assert bytes(OctetAssembler("CRZ")) == b"f"


def test_octet_assembler_stops_at_invalid_symbol():
    consumed: list[str] = []
    it = OctetAssembler(_counting("AAU0000", consumed))
    with pytest.raises(InvalidSymbolError) as exc:
        list(it)
    assert consumed == ["A", "A", "U"]
    assert exc.value.position == 2
    assert exc.value.reserved is True


def test_octet_assembler_finished_after_error():
    it = OctetAssembler("91JPRV3F!5GG")
    out = []
    with pytest.raises(InvalidSymbolError):
        for octet in it:
            out.append(octet)
    assert bytes(out) == b"Hello"
    with pytest.raises(StopIteration):
        next(it)


def test_octet_assembler_custom_table():
    table = tuple(0 if b == ord("x") else None for b in range(256))
    assert bytes(OctetAssembler("xxxxxxxx", table=table)) == b"\x00" * 5
    with pytest.raises(InvalidSymbolError):
        list(OctetAssembler("0", table=table))


@pytest.mark.parametrize("unit", [-1, 256, 1 << 40])
def test_octet_assembler_rejects_non_byte_ints(unit: int):
    it = OctetAssembler([ord("C"), unit])
    with pytest.raises(ValueError, match="range\\(0, 256\\)") as exc:
        list(it)
    assert not isinstance(exc.value, InvalidSymbolError)
    with pytest.raises(StopIteration):
        next(it)


def test_octet_assembler_rejects_multi_char_units():
    with pytest.raises(ValueError, match="single character"):
        list(OctetAssembler(["CR"]))


def test_octet_assembler_non_latin1_char_is_invalid_symbol():
    with pytest.raises(InvalidSymbolError) as exc:
        list(OctetAssembler(["C", "Ж"]))
    assert exc.value.char == "Ж"
    assert exc.value.position == 1
