import numpy as np
import pytest

from extended import ExtendedNumber, Infinity
from extended.errors import UnsupportedKindError


def extended_int8(value):
    return ExtendedNumber(value, kind=np.int8)


NUMBERS = [extended_int8(v) for v in (Infinity.NEG, -42, 0, 42, Infinity.POS)]
INCREMENTED = [extended_int8(v) for v in (Infinity.NEG, -41, 1, 43, Infinity.POS)]
DECREMENTED = [extended_int8(v) for v in (Infinity.NEG, -43, -1, 41, Infinity.POS)]


@pytest.mark.parametrize("i", range(len(NUMBERS)))
def test_plus_minus_and_bool(i):
    a = NUMBERS[i]
    b = NUMBERS[len(NUMBERS) - i - 1]

    assert a == +a
    assert +a is not a
    assert a == -b
    assert -a == b
    if i == len(NUMBERS) // 2:
        assert not a
    else:
        assert a


@pytest.mark.parametrize("i", range(len(NUMBERS)))
def test_increment(i):
    number = NUMBERS[i].copy()
    original = number.post_increment()

    assert original == NUMBERS[i]
    assert number == INCREMENTED[i]

    other = NUMBERS[i].copy()
    assert other.increment() is other
    assert other == INCREMENTED[i]


@pytest.mark.parametrize("i", range(len(NUMBERS)))
def test_decrement(i):
    number = NUMBERS[i].copy()
    original = number.post_decrement()

    assert original == NUMBERS[i]
    assert number == DECREMENTED[i]

    other = NUMBERS[i].copy()
    assert other.decrement() is other
    assert other == DECREMENTED[i]


@pytest.mark.filterwarnings("error")
@pytest.mark.parametrize("sign", [Infinity.POS, Infinity.NEG])
def test_increment_leaves_infinity_unchanged(sign):
    number = ExtendedNumber(sign, kind=np.int8)
    for _ in range(300):
        number.increment()
    for _ in range(300):
        number.post_decrement()

    assert not number.is_finite()
    assert number.infinity_sign() is sign
    assert number == ExtendedNumber(sign, kind=np.int8)
    assert str(number) == sign.value
    assert ExtendedNumber(Infinity.NEG, kind=np.int8) <= number
    assert number <= ExtendedNumber(Infinity.POS, kind=np.int8)


def test_negation_requires_signed_kind():
    with pytest.raises(UnsupportedKindError):
        -ExtendedNumber(np.uint8(3))
    with pytest.raises(UnsupportedKindError):
        -ExtendedNumber(Infinity.POS, kind=np.uint32)


def test_negation_of_python_kinds():
    assert -ExtendedNumber(2.5) == ExtendedNumber(-2.5)
    assert (-ExtendedNumber(Infinity.POS, kind=float)).infinity_sign() is Infinity.NEG


def test_abs():
    assert abs(ExtendedNumber(-5)) == ExtendedNumber(5)
    assert abs(ExtendedNumber(Infinity.NEG)) == ExtendedNumber(Infinity.POS)
    assert abs(ExtendedNumber(Infinity.POS, kind=np.uint8)).kind is np.uint8
