import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftformat.spec import Conversion, Flag, FormatError, FormatSpec, Length, parse_spec


@pytest.mark.parametrize(
    "char, expected",
    [
        ("c", Conversion.CHAR),
        ("s", Conversion.STRING),
        ("p", Conversion.POINTER),
        ("d", Conversion.SIGNED),
        ("i", Conversion.SIGNED),
        ("o", Conversion.OCTAL),
        ("u", Conversion.UNSIGNED),
        ("X", Conversion.HEX_UPPER),
        ("x", Conversion.HEX_LOWER),
        ("f", Conversion.FLOAT),
        ("%", Conversion.PERCENT),
    ],
)
def test_plain_conversion(char, expected):
    text = "%" + char
    spec = parse_spec(text, 0)
    assert spec.conversion is expected
    assert spec.span == len(text)
    assert spec.width == 0
    assert spec.precision is None
    assert spec.length is Length.NONE


def test_all_flags():
    spec = parse_spec("%-+ 0#d", 0)
    for flag in Flag:
        assert spec.has(flag)
    assert spec.flags == Flag.MINUS | Flag.PLUS | Flag.SPACE | Flag.ZERO | Flag.HASH


def test_missing_flag_not_reported():
    spec = parse_spec("%+d", 0)
    assert spec.has(Flag.PLUS)
    assert not spec.has(Flag.MINUS)
    assert not spec.has(Flag.PLUS | Flag.MINUS)


def test_width_and_precision():
    spec = parse_spec("%12.5d", 0)
    assert spec.width == 12
    assert spec.precision == 5
    assert spec.span == len("%12.5d")


def test_dot_without_digits_means_zero_precision():
    spec = parse_spec("%.d", 0)
    assert spec.precision == 0
    assert spec.conversion is Conversion.SIGNED


def test_later_width_replaces_earlier_and_flags_may_follow():
    spec = parse_spec("%5-10d", 0)
    assert spec.width == 10
    assert spec.has(Flag.MINUS)
    assert spec.span == len("%5-10d")


def test_later_precision_replaces_earlier():
    spec = parse_spec("%.3.7s", 0)
    assert spec.precision == 7


@pytest.mark.parametrize(
    "text, expected",
    [
        ("%hd", Length.H),
        ("%hhd", Length.HH),
        ("%ld", Length.L),
        ("%lld", Length.LL),
        ("%lhd", Length.L),
        ("%hhhd", Length.H),
        ("%llhd", Length.LL),
        ("%hlld", Length.LL),
    ],
)
def test_length_priority(text, expected):
    spec = parse_spec(text, 0)
    assert spec.length is expected
    assert spec.span == len(text)


def test_long_double_modifier():
    spec = parse_spec("%Lf", 0)
    assert spec.long_double
    assert spec.length is Length.NONE
    assert spec.conversion is Conversion.FLOAT


def test_unknown_conversion_is_not_consumed():
    spec = parse_spec("%5k", 0)
    assert spec.conversion is None
    assert spec.width == 5
    assert spec.span == len("%5")


def test_percent_at_end_of_text():
    spec = parse_spec("abc%", 3)
    assert spec.conversion is None
    assert spec.span == len("%")


def test_start_offset():
    spec = parse_spec("ab%5dxy", 2)
    assert spec.width == 5
    assert spec.span == len("%5d")


@pytest.mark.parametrize("text, start", [("abc", 0), ("%d", 2), ("%d", -1), ("", 0)])
def test_bad_start_raises(text, start):
    with pytest.raises(FormatError):
        parse_spec(text, start)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_spec("x", 0)


def test_default_spec_has_no_flags():
    spec = FormatSpec()
    assert spec.flags == Flag(0)
    assert spec.length is Length.NONE
    assert not spec.long_double


@given(
    flags=st.lists(st.sampled_from("-+ 0#"), max_size=6),
    width=st.one_of(st.none(), st.integers(min_value=1, max_value=10**6)),
    precision=st.one_of(st.none(), st.integers(min_value=0, max_value=10**4)),
    conv=st.sampled_from("csdiouxXpf%"),
    prefix=st.text(alphabet="abc ", max_size=5),
)
def test_round_trip(flags, width, precision, conv, prefix):
    text = prefix + "%" + "".join(flags)
    if width is not None:
        text += str(width)
    if precision is not None:
        text += "." + str(precision)
    text += conv + "tail"
    spec = parse_spec(text, len(prefix))
    assert spec.width == (width or 0)
    assert spec.precision == precision
    assert spec.conversion is Conversion(conv)
    assert text[len(prefix) + spec.span:] == "tail"
    for char in "-+ 0#":
        flag = {"-": Flag.MINUS, "+": Flag.PLUS, " ": Flag.SPACE, "0": Flag.ZERO, "#": Flag.HASH}[char]
        assert spec.has(flag) == (char in flags)