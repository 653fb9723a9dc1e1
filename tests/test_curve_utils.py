from dataclasses import dataclass

import pytest

from edwardsff.bigint import Bigint
from edwardsff.curve_utils import scalar_mul

MODULUS = 1009


@dataclass(frozen=True)
class Cyclic:
    """Additive group of integers modulo a prime."""

    value: int

    @classmethod
    def zero(cls):
        return cls(0)

    def dbl(self):
        return Cyclic((2 * self.value) % MODULUS)

    def __add__(self, other):
        return Cyclic((self.value + other.value) % MODULUS)


@dataclass(frozen=True)
class Counter:
    """Integers without reduction, so k * 1 must come back as k."""

    value: int

    @classmethod
    def zero(cls):
        return cls(0)

    def dbl(self):
        return Counter(self.value + self.value)

    def __add__(self, other):
        return Counter(self.value + other.value)


@pytest.mark.parametrize("k", [0, 1, 2, 3, 17, 255, 256, 123456789])
def test_scalar_mul_of_unit_gives_scalar(k):
    assert scalar_mul(Counter(1), k) == Counter(k)


def test_small_scalars():
    g = Cyclic(7)
    assert scalar_mul(g, 0) == Cyclic.zero()
    assert scalar_mul(g, 1) == g
    assert scalar_mul(g, 2) == g.dbl()


@pytest.mark.parametrize("a,b", [(3, 5), (100, 908), (1 << 40, 77), (0, 12)])
def test_distributes_over_addition(a, b):
    g = Cyclic(11)
    assert scalar_mul(g, a + b) == scalar_mul(g, a) + scalar_mul(g, b)


def test_group_order_annihilates():
    assert scalar_mul(Cyclic(11), MODULUS) == Cyclic.zero()


def test_bigint_scalar_matches_int():
    g = Cyclic(42)
    assert scalar_mul(g, Bigint(987654321, 2)) == scalar_mul(g, 987654321)


def test_negative_scalar_rejected():
    with pytest.raises(ValueError):
        scalar_mul(Cyclic(1), -3)