import itertools

import numpy as np
import pytest

from extended import ExtendedNumber, Infinity

ORDERED = [
    ExtendedNumber(Infinity.NEG, kind=int),
    ExtendedNumber(-42),
    ExtendedNumber(),
    ExtendedNumber(42),
    ExtendedNumber(Infinity.POS, kind=int),
]


@pytest.mark.parametrize("i", range(len(ORDERED)))
@pytest.mark.parametrize("j", range(len(ORDERED)))
def test_comparison_operators(i, j):
    a = ORDERED[i]
    b = ORDERED[j]

    if i == j:
        assert a == b
        assert not (a != b)
        assert not (a < b)
        assert a <= b
        assert not (a > b)
        assert a >= b
    elif i < j:
        assert not (a == b)
        assert a != b
        assert a < b
        assert a <= b
        assert not (a > b)
        assert not (a >= b)
    else:
        assert not (a == b)
        assert a != b
        assert not (a < b)
        assert not (a <= b)
        assert a > b
        assert a >= b


def test_ordering_is_a_strict_total_order():
    values = ORDERED + [ExtendedNumber(-1), ExtendedNumber(7), ExtendedNumber(42)]

    for a, b in itertools.product(values, repeat=2):
        assert [a < b, a == b, a > b].count(True) == 1

    for a, b, c in itertools.product(values, repeat=3):
        if a <= b and b <= c:
            assert a <= c


def test_finite_values_sit_between_the_infinities():
    pos_inf = ExtendedNumber(Infinity.POS)
    neg_inf = ExtendedNumber(Infinity.NEG)

    for payload in (-(10**100), -1, 0, 1, 10**100):
        number = ExtendedNumber(payload)
        assert neg_inf < number < pos_inf
    assert neg_inf < pos_inf


def test_compares_with_bare_numbers_and_sentinels():
    assert ExtendedNumber(3) == 3
    assert ExtendedNumber(3) < 4
    assert 4 > ExtendedNumber(3)
    assert ExtendedNumber(Infinity.POS) > 10**100
    assert ExtendedNumber(Infinity.POS) == Infinity.POS
    assert Infinity.NEG == ExtendedNumber(Infinity.NEG)
    assert ExtendedNumber(5) != Infinity.POS
    assert ExtendedNumber(Infinity.NEG) < Infinity.POS


def test_compares_across_kinds():
    assert ExtendedNumber(np.int8(3)) == ExtendedNumber(3.0)
    assert ExtendedNumber(np.uint8(200)) > ExtendedNumber(np.int8(-1))
    assert ExtendedNumber(Infinity.POS, kind=np.uint8) == ExtendedNumber(
        Infinity.POS, kind=float
    )


def test_unrelated_types_are_not_comparable():
    assert ExtendedNumber(3) != "3"
    with pytest.raises(TypeError):
        ExtendedNumber(3) < "3"


def test_infinite_equality_ignores_the_stored_payload():
    incremented = ExtendedNumber(Infinity.POS)
    incremented.increment()

    assert incremented == ExtendedNumber(Infinity.POS)
