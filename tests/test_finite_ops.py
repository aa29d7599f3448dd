import itertools

import numpy as np
import pytest

from extended import ExtendedNumber, Infinity
from extended.errors import DivisionByZeroError, NotFiniteError, UnsupportedKindError

NUMBERS = [ExtendedNumber(np.uint32(value)) for value in range(40)]


def test_bitwise_not_commutes():
    for number in NUMBERS:
        assert (~number).value() == ~(number.value())
        assert (~number).kind is np.uint32


def test_binary_finite_operators_commute():
    for num_1, num_2 in itertools.product(NUMBERS, repeat=2):
        if num_2 != 0:
            assert (num_1 % num_2).value() == num_1.value() % num_2.value()
        assert (num_1 & num_2).value() == (num_1.value() & num_2.value())
        assert (num_1 | num_2).value() == (num_1.value() | num_2.value())
        assert (num_1 ^ num_2).value() == (num_1.value() ^ num_2.value())
        if num_2 < 32:
            assert (num_1 << num_2).value() == (num_1.value() << num_2.value())
            assert (num_1 >> num_2).value() == (num_1.value() >> num_2.value())


def test_modulo_uses_the_kind_remainder():
    assert (ExtendedNumber(-7) % ExtendedNumber(3)).value() == -7 % 3
    assert (ExtendedNumber(7.5) % 2.0).value() == 1.5


def test_modulo_by_zero():
    with pytest.raises(DivisionByZeroError):
        ExtendedNumber(5) % ExtendedNumber(0)


@pytest.mark.parametrize(
    "operation",
    [
        lambda a, b: a % b,
        lambda a, b: a & b,
        lambda a, b: a | b,
        lambda a, b: a ^ b,
        lambda a, b: a << b,
        lambda a, b: a >> b,
    ],
)
@pytest.mark.parametrize(
    "left, right",
    [
        (ExtendedNumber(Infinity.POS), ExtendedNumber(3)),
        (ExtendedNumber(3), ExtendedNumber(Infinity.NEG)),
        (ExtendedNumber(Infinity.NEG), ExtendedNumber(Infinity.POS)),
    ],
)
def test_finite_only_operators_reject_infinity(operation, left, right):
    with pytest.raises(NotFiniteError):
        operation(left, right)


def test_bitwise_not_rejects_infinity():
    with pytest.raises(NotFiniteError):
        ~ExtendedNumber(Infinity.POS, kind=np.uint32)


def test_bitwise_requires_an_integral_kind():
    with pytest.raises(UnsupportedKindError):
        ExtendedNumber(1.0) & ExtendedNumber(2.0)
    with pytest.raises(UnsupportedKindError):
        ~ExtendedNumber(1.0)


def test_in_place_bitwise_operators():
    number = ExtendedNumber(0b1100)
    number &= 0b1010
    assert number.value() == 0b1000
    number |= 0b0001
    assert number.value() == 0b1001
    number ^= 0b1111
    assert number.value() == 0b0110
    number <<= 2
    assert number.value() == 0b11000
    number >>= 3
    assert number.value() == 0b11
    number %= 2
    assert number.value() == 1


def test_reflected_bitwise_operators():
    assert (0b1100 & ExtendedNumber(0b1010)).value() == 0b1000
    assert (1 << ExtendedNumber(4)).value() == 16
    assert (17 % ExtendedNumber(5)).value() == 2
