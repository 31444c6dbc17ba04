import pytest
from hypothesis import given
from hypothesis import strategies as st

from threshold_recovery.errors import InvalidDigit, InvalidRadix
from threshold_recovery.radix import decode, encode


def test_decode_examples():
    assert decode("4", 10) == 4
    assert decode("111", 2) == 7
    assert decode("213", 4) == 39
    assert decode("ff", 16) == 255
    assert decode("FF", 16) == 255
    assert decode("zz", 36) == 35 * 36 + 35
    assert decode("", 10) == 0


def test_decode_big_values():
    assert decode("13444211440455345511", 6) == 995085094601491
    assert decode("aed7015a346d635", 15) == 320923294898495900
    assert decode("45153788322a1255483", 12) == 117852986202006511971


@pytest.mark.parametrize(
    "digits, radix, bad, position",
    [
        ("129", 2, "2", 1),
        ("12a", 10, "a", 2),
        ("g", 16, "g", 0),
        ("1_0", 10, "_", 1),
        (" 1", 10, " ", 0),
        ("-1", 10, "-", 0),
        ("+1", 10, "+", 0),
        ("1.5", 10, ".", 1),
    ],
)
def test_decode_rejects_invalid_digits(digits, radix, bad, position):
    with pytest.raises(InvalidDigit) as exc:
        decode(digits, radix)
    assert exc.value.char == bad
    assert exc.value.position == position
    assert exc.value.radix == radix


@pytest.mark.parametrize("radix", [0, 1, 37, -2])
def test_radix_range(radix):
    with pytest.raises(InvalidRadix):
        decode("0", radix)
    with pytest.raises(InvalidRadix):
        encode(0, radix)


@given(value=st.integers(min_value=0, max_value=10**80), radix=st.integers(min_value=2, max_value=36))
def test_round_trip(value, radix):
    text = encode(value, radix)
    assert decode(text, radix) == value
    assert decode(text.upper(), radix) == value
    assert int(text, radix) == value


def test_encode_rejects_negative():
    with pytest.raises(ValueError):
        encode(-1, 10)
