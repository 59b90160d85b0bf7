import pytest

from core.domain.base import U64_MAX, Base
from core.domain.errors import NumeralParseError, ParseErrorKind, UnknownBaseError


@pytest.mark.parametrize("text", ["0xff", "ff", "0XFF", "FF", "  0xFf  "])
def test_hex_parse_case_and_prefix(text):
    assert Base.HEX.parse(text) == 255


def test_hex_parse_zero():
    assert Base.HEX.parse("0") == 0
    assert Base.HEX.parse("0x00") == 0


def test_hex_parse_max_value():
    assert Base.HEX.parse("0xffffffffffffffff") == U64_MAX


@pytest.mark.parametrize(
    "text",
    ["0b101010001101", "0B101010001101", "0b1010_1000_1101", "1010_1000_1101", "101010001101"],
)
def test_bin_parse_prefix_and_underscores(text):
    assert Base.BIN.parse(text) == 2701


def test_dec_parse():
    assert Base.DEC.parse("101") == 101
    assert Base.DEC.parse("012") == 12


@pytest.mark.parametrize(
    "base, text, expected",
    [
        (Base.HEX, "ffu", 255),
        (Base.HEX, "0x10u", 16),
        (Base.DEC, "12u", 12),
        (Base.BIN, "0b11u", 3),
    ],
)
def test_unsigned_suffix_is_dropped(base, text, expected):
    assert base.parse(text) == expected


@pytest.mark.parametrize(
    "base, text",
    [
        (Base.HEX, "0xgk"),
        (Base.HEX, "-0xgk"),
        (Base.HEX, "0x0x1"),
        (Base.BIN, "0b12"),
        (Base.BIN, "012"),
        (Base.DEC, "-012"),
        (Base.DEC, "+12"),
        (Base.DEC, "0d012"),
        (Base.DEC, "1_000"),
        (Base.DEC, " 12"),
    ],
)
def test_invalid_digits(base, text):
    with pytest.raises(NumeralParseError) as excinfo:
        base.parse(text)
    assert excinfo.value.kind is ParseErrorKind.INVALID_DIGIT
    assert excinfo.value.base is base


@pytest.mark.parametrize(
    "base, text",
    [(Base.HEX, ""), (Base.HEX, "0x"), (Base.BIN, "0b"), (Base.BIN, "__"), (Base.DEC, ""), (Base.DEC, "u")],
)
def test_empty_numerals(base, text):
    with pytest.raises(NumeralParseError) as excinfo:
        base.parse(text)
    assert excinfo.value.kind is ParseErrorKind.EMPTY


@pytest.mark.parametrize(
    "base, text",
    [
        (Base.HEX, "0x10000000000000000"),
        (Base.DEC, "18446744073709551616"),
        (Base.BIN, "1" + "0" * 64),
    ],
)
def test_overflow(base, text):
    with pytest.raises(NumeralParseError) as excinfo:
        base.parse(text)
    assert excinfo.value.kind is ParseErrorKind.OVERFLOW
    assert "64 bits" in str(excinfo.value)


def test_dec_parse_max_value():
    assert Base.DEC.parse("18446744073709551615") == U64_MAX


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0"), (1, "1"), (2, "10"), (4, "100"), (15, "1111"), (16, "0001_0000"), (2701, "1010_1000_1101")],
)
def test_bin_format(value, expected):
    assert Base.BIN.format_value(value) == expected


def test_bin_format_max_value():
    assert Base.BIN.format_value(U64_MAX) == "_".join(["1111"] * 16)


def test_hex_and_dec_format():
    assert Base.HEX.format_value(255) == "0xff"
    assert Base.HEX.format_value(0) == "0x0"
    assert Base.DEC.format_value(255) == "255"


@pytest.mark.parametrize("value", [-1, U64_MAX + 1])
def test_format_out_of_range(value):
    with pytest.raises(ValueError):
        Base.DEC.format_value(value)


@pytest.mark.parametrize("base", list(Base))
@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 2701, 2**32, U64_MAX])
def test_format_then_parse(base, value):
    assert base.parse(base.format_value(value)) == value


def test_labels():
    assert [b.label() for b in Base] == ["hex", "dec", "bin"]


def test_from_name():
    assert Base.from_name("dec") is Base.DEC
    with pytest.raises(UnknownBaseError) as excinfo:
        Base.from_name("HEX")
    assert excinfo.value.name == "HEX"


@pytest.mark.parametrize("base, digit", [(Base.HEX, "0"), (Base.DEC, "0"), (Base.BIN, "0")])
def test_long_run_of_leading_zeros(base, digit):
    assert base.parse(digit * 5000 + "1") == 1


def test_long_decimal_with_leading_zeros():
    assert Base.DEC.parse("0" * 5000 + "12") == 12


@pytest.mark.parametrize("base, digit", [(Base.HEX, "f"), (Base.DEC, "9"), (Base.BIN, "1")])
def test_long_numeral_overflows(base, digit):
    with pytest.raises(NumeralParseError) as excinfo:
        base.parse(digit * 5000)
    assert excinfo.value.kind is ParseErrorKind.OVERFLOW


def test_all_zeros():
    assert Base.DEC.parse("0" * 5000) == 0
