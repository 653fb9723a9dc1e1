import random

import pytest

from edwardsff.algorithms import power, tonelli_shanks_sqrt
from edwardsff.bigint import Bigint

P = 97


class F97:
    """Prime field of order 97 for exercising the generic algorithms."""

    __slots__ = ("v",)
    s = 5
    t_minus_1_over_2 = 1

    def __init__(self, value=0):
        self.v = value % P

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def is_zero(self):
        return self.v == 0

    def __mul__(self, other):
        return F97(self.v * other.v)

    def squared(self):
        return self * self

    def __neg__(self):
        return F97(-self.v)

    def __eq__(self, other):
        return isinstance(other, F97) and self.v == other.v

    def __hash__(self):
        return hash(self.v)

    def __repr__(self):
        return f"F97({self.v})"


F97.nqr_to_t = F97(28)


def test_power_matches_repeated_multiplication():
    x = F97(random.randrange(1, P))
    x_i = F97.one()
    for i in range(3000):
        assert power(x, i) == x_i
        assert power(x, [i]) == x_i
        x_i = x_i * x


def test_power_with_bigint_exponent():
    assert power(F97(3), Bigint(96, 1)) == F97.one()
    assert power(F97(3), Bigint(0, 2)) == F97.one()


def test_power_multi_word_exponent():
    assert power(F97(3), [0, 1]) == power(F97(3), 1 << 64)


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(F97(3), -1)
    with pytest.raises(ValueError):
        power(F97(3), [1 << 64])


def test_sqrt_of_every_square():
    for a in range(1, P):
        square = F97(a) * F97(a)
        root = tonelli_shanks_sqrt(square)
        assert root * root == square
        assert root in (F97(a), -F97(a))


def test_sqrt_of_zero():
    assert tonelli_shanks_sqrt(F97.zero()) == F97.zero()


def test_sqrt_of_non_residue_raises():
    with pytest.raises(ValueError):
        tonelli_shanks_sqrt(F97(5))