"""The group G2: points of the twisted Edwards curve over Fq3.

The twist is a'*x^2 + y^2 = 1 + d'*x^2*y^2 with a' = a*u and d' = d*u,
where u generates Fq3 over Fq. Points are held in inverted coordinates
(X : Y : Z), which stand for the affine point (Z/X, Z/Y). The identity
is (1 : 0 : 0).
"""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from typing import Any, ClassVar

from .bigint import Bigint
from .curve_utils import scalar_mul
from .edwards_params import (
    G2_FIXED_BASE_EXP_WINDOW_TABLE,
    G2_ONE_XY,
    G2_WNAF_WINDOW_TABLE,
    G2_ZERO_XY,
    TWIST_MUL_BY_A_C0,
    TWIST_MUL_BY_D_C0,
    TWIST_MUL_BY_D_C1,
    TWIST_MUL_BY_D_C2,
    TWIST_MUL_BY_Q_Y,
    TWIST_MUL_BY_Q_Z,
    EdwardsFq,
    EdwardsFq3,
    EdwardsFr,
    PrimeFieldElement,
)
from .field_utils import batch_invert


def _fq3(value: Any) -> EdwardsFq3:
    return value if isinstance(value, EdwardsFq3) else EdwardsFq3(value, 0, 0)


def _scalar_value(scalar: Any) -> int:
    if isinstance(scalar, PrimeFieldElement):
        return scalar.as_int()
    return operator.index(scalar)


def _format_fq3(value: EdwardsFq3) -> str:
    return f"{value.c2}*z^2 + {value.c1}*z + {value.c0}"


class EdwardsG2:
    """A point of G2 in inverted coordinates."""

    __slots__ = ("X", "Y", "Z")

    wnaf_window_table: ClassVar[tuple[int, ...]] = G2_WNAF_WINDOW_TABLE
    fixed_base_exp_window_table: ClassVar[tuple[int, ...]] = G2_FIXED_BASE_EXP_WINDOW_TABLE
    base_field: ClassVar[type] = EdwardsFq
    twist_field: ClassVar[type] = EdwardsFq3
    scalar_field: ClassVar[type] = EdwardsFr

    def __init__(self, x: Any, y: Any) -> None:
        """Build the point from affine coordinates (x, y)."""
        x = _fq3(x)
        y = _fq3(y)
        self.X = y
        self.Y = x
        self.Z = x * y

    @classmethod
    def from_coordinates(cls, X: Any, Y: Any, Z: Any) -> EdwardsG2:
        """Build a point directly from inverted coordinates."""
        point = object.__new__(cls)
        point.X = _fq3(X)
        point.Y = _fq3(Y)
        point.Z = _fq3(Z)
        return point

    @staticmethod
    def mul_by_a(elt: EdwardsFq3) -> EdwardsFq3:
        """Multiply by the twist coefficient a' = a*u (a is one)."""
        return EdwardsFq3(TWIST_MUL_BY_A_C0 * elt.c2, elt.c0, elt.c1)

    @staticmethod
    def mul_by_d(elt: EdwardsFq3) -> EdwardsFq3:
        """Multiply by the twist coefficient d' = d*u."""
        return EdwardsFq3(
            TWIST_MUL_BY_D_C0 * elt.c2,
            TWIST_MUL_BY_D_C1 * elt.c0,
            TWIST_MUL_BY_D_C2 * elt.c1,
        )

    @classmethod
    def zero(cls) -> EdwardsG2:
        return cls(*G2_ZERO_XY)

    @classmethod
    def one(cls) -> EdwardsG2:
        return cls(*G2_ONE_XY)

    @classmethod
    def random_element(cls) -> EdwardsG2:
        return EdwardsFr.random_element() * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return EdwardsFq3.ceil_size_in_bits() + 1

    @classmethod
    def order(cls) -> Bigint:
        return EdwardsFr.field_char()

    @classmethod
    def field_char(cls) -> Bigint:
        return EdwardsFq.field_char()

    def copy(self) -> EdwardsG2:
        return self.from_coordinates(self.X, self.Y, self.Z)

    def to_affine_coordinates(self) -> tuple[EdwardsFq3, EdwardsFq3]:
        """The affine (x, y) of the point; the identity gives (0, 1)."""
        if self.is_zero():
            return EdwardsFq3.zero(), EdwardsFq3.one()
        t_x = self.Y * self.Z
        t_y = self.X * self.Z
        t_z_inv = (self.X * self.Y).inverse()
        return t_x * t_z_inv, t_y * t_z_inv

    def to_special(self) -> None:
        """Scale the coordinates in place so that Z is one."""
        if self.Z.is_zero():
            return
        z_inv = self.Z.inverse()
        self.X = self.X * z_inv
        self.Y = self.Y * z_inv
        self.Z = EdwardsFq3.one()

    def is_special(self) -> bool:
        return self.is_zero() or self.Z == EdwardsFq3.one()

    def is_zero(self) -> bool:
        return self.Y.is_zero() and self.Z.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsG2):
            return NotImplemented
        if self.is_zero():
            return other.is_zero()
        if other.is_zero():
            return False
        if self.X * other.Z != other.X * self.Z:
            return False
        return self.Y * other.Z == other.Y * self.Z

    __hash__ = None  # mutable

    def __add__(self, other: Any) -> EdwardsG2:
        if not isinstance(other, EdwardsG2):
            return NotImplemented
        if self.is_zero():
            return other.copy()
        if other.is_zero():
            return self.copy()
        return self.add(other)

    def __neg__(self) -> EdwardsG2:
        return self.from_coordinates(-self.X, self.Y, self.Z)

    def __sub__(self, other: Any) -> EdwardsG2:
        if not isinstance(other, EdwardsG2):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, scalar: Any) -> EdwardsG2:
        try:
            k = _scalar_value(scalar)
        except TypeError:
            return NotImplemented
        return scalar_mul(self, k)

    def _add_with(self, other: EdwardsG2, a: EdwardsFq3) -> EdwardsG2:
        b = self.mul_by_d(a.squared())
        c = self.X * other.X
        d = self.Y * other.Y
        e = c * d
        h = c - self.mul_by_a(d)
        i = (self.X + self.Y) * (other.X + other.Y) - c - d
        return self.from_coordinates((e + b) * h, (e - b) * i, a * h * i)

    def add(self, other: EdwardsG2) -> EdwardsG2:
        """Addition formula; does not handle the identity or points of order 2 and 4."""
        return self._add_with(other, self.Z * other.Z)

    def mixed_add(self, other: EdwardsG2) -> EdwardsG2:
        """Addition where other has Z equal to one."""
        if self.is_zero():
            return other.copy()
        if other.is_zero():
            return self.copy()
        return self._add_with(other, self.Z)

    def dbl(self) -> EdwardsG2:
        if self.is_zero():
            return self.copy()
        a = self.X.squared()
        b = self.Y.squared()
        u = self.mul_by_a(b)
        c = a + u
        d = a - u
        e = (self.X + self.Y).squared() - a - b
        d_zz = self.mul_by_d(self.Z.squared())
        return self.from_coordinates(c * d, e * (c - d_zz - d_zz), d * e)

    def mul_by_q(self) -> EdwardsG2:
        """Apply the q-power Frobenius endomorphism of the twist."""
        return self.from_coordinates(
            self.X.frobenius_map(1),
            TWIST_MUL_BY_Q_Y * self.Y.frobenius_map(1),
            TWIST_MUL_BY_Q_Z * self.Z.frobenius_map(1),
        )

    def is_well_formed(self) -> bool:
        """Check the curve equation z^2 (a' y^2 + x^2 - d' z^2) = x^2 y^2."""
        if self.is_zero():
            return True
        x2 = self.X.squared()
        y2 = self.Y.squared()
        z2 = self.Z.squared()
        return z2 * (self.mul_by_a(y2) + x2 - self.mul_by_d(z2)) == x2 * y2

    @classmethod
    def batch_to_special_all_non_zeros(cls, points: MutableSequence[EdwardsG2]) -> None:
        """Make every point special in place with one field inversion."""
        z_inverses = batch_invert([p.Z for p in points])
        one = EdwardsFq3.one()
        for point, z_inv in zip(points, z_inverses):
            point.X = point.X * z_inv
            point.Y = point.Y * z_inv
            point.Z = one

    def __str__(self) -> str:
        if self.is_zero():
            return "O"
        x, y = self.to_affine_coordinates()
        return f"({_format_fq3(x)} , {_format_fq3(y)})"

    def __repr__(self) -> str:
        return f"EdwardsG2.from_coordinates({self.X!r}, {self.Y!r}, {self.Z!r})"