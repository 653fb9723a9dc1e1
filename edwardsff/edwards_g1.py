"""The group G1: points of the Edwards curve x^2 + y^2 = 1 + d*x^2*y^2 over Fq.

Points are held in inverted coordinates (X : Y : Z), which stand for the
affine point (Z/X, Z/Y). The identity is (1 : 0 : 0).
"""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from typing import Any, ClassVar

from .bigint import Bigint
from .curve_utils import scalar_mul
from .edwards_params import (
    COEFF_D,
    G1_FIXED_BASE_EXP_WINDOW_TABLE,
    G1_ONE_XY,
    G1_WNAF_WINDOW_TABLE,
    G1_ZERO_XY,
    EdwardsFq,
    EdwardsFr,
    PrimeFieldElement,
)
from .field_utils import batch_invert


def _fq(value: Any) -> EdwardsFq:
    return value if isinstance(value, EdwardsFq) else EdwardsFq(value)


def _scalar_value(scalar: Any) -> int:
    if isinstance(scalar, PrimeFieldElement):
        return scalar.as_int()
    return operator.index(scalar)


class EdwardsG1:
    """A point of G1 in inverted coordinates."""

    __slots__ = ("X", "Y", "Z")

    wnaf_window_table: ClassVar[tuple[int, ...]] = G1_WNAF_WINDOW_TABLE
    fixed_base_exp_window_table: ClassVar[tuple[int, ...]] = G1_FIXED_BASE_EXP_WINDOW_TABLE
    base_field: ClassVar[type] = EdwardsFq
    scalar_field: ClassVar[type] = EdwardsFr

    def __init__(self, x: Any, y: Any) -> None:
        """Build the point from affine coordinates (x, y)."""
        x = _fq(x)
        y = _fq(y)
        self.X = y
        self.Y = x
        self.Z = x * y

    @classmethod
    def from_coordinates(cls, X: Any, Y: Any, Z: Any) -> EdwardsG1:
        """Build a point directly from inverted coordinates."""
        point = object.__new__(cls)
        point.X = _fq(X)
        point.Y = _fq(Y)
        point.Z = _fq(Z)
        return point

    @classmethod
    def zero(cls) -> EdwardsG1:
        return cls(*G1_ZERO_XY)

    @classmethod
    def one(cls) -> EdwardsG1:
        return cls(*G1_ONE_XY)

    @classmethod
    def random_element(cls) -> EdwardsG1:
        return EdwardsFr.random_element() * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return EdwardsFq.ceil_size_in_bits() + 1

    @classmethod
    def order(cls) -> Bigint:
        return EdwardsFr.field_char()

    @classmethod
    def field_char(cls) -> Bigint:
        return EdwardsFq.field_char()

    def copy(self) -> EdwardsG1:
        return self.from_coordinates(self.X, self.Y, self.Z)

    def to_affine_coordinates(self) -> tuple[EdwardsFq, EdwardsFq]:
        """The affine (x, y) of the point; the identity gives (0, 1)."""
        if self.is_zero():
            return EdwardsFq.zero(), EdwardsFq.one()
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
        self.Z = EdwardsFq.one()

    def is_special(self) -> bool:
        return self.is_zero() or self.Z == EdwardsFq.one()

    def is_zero(self) -> bool:
        return self.Y.is_zero() and self.Z.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsG1):
            return NotImplemented
        if self.is_zero():
            return other.is_zero()
        if other.is_zero():
            return False
        if self.X * other.Z != other.X * self.Z:
            return False
        return self.Y * other.Z == other.Y * self.Z

    __hash__ = None  # mutable

    def __add__(self, other: Any) -> EdwardsG1:
        if not isinstance(other, EdwardsG1):
            return NotImplemented
        if self.is_zero():
            return other.copy()
        if other.is_zero():
            return self.copy()
        return self.add(other)

    def __neg__(self) -> EdwardsG1:
        return self.from_coordinates(-self.X, self.Y, self.Z)

    def __sub__(self, other: Any) -> EdwardsG1:
        if not isinstance(other, EdwardsG1):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, scalar: Any) -> EdwardsG1:
        try:
            k = _scalar_value(scalar)
        except TypeError:
            return NotImplemented
        return scalar_mul(self, k)

    def add(self, other: EdwardsG1) -> EdwardsG1:
        """Addition formula; does not handle the identity or points of order 2 and 4."""
        a = self.Z * other.Z
        b = COEFF_D * a.squared()
        c = self.X * other.X
        d = self.Y * other.Y
        e = c * d
        h = c - d
        i = (self.X + self.Y) * (other.X + other.Y) - c - d
        return self.from_coordinates((e + b) * h, (e - b) * i, a * h * i)

    def mixed_add(self, other: EdwardsG1) -> EdwardsG1:
        """Addition where other has Z equal to one."""
        if self.is_zero():
            return other.copy()
        if other.is_zero():
            return self.copy()
        a = self.Z
        b = COEFF_D * a.squared()
        c = self.X * other.X
        d = self.Y * other.Y
        e = c * d
        h = c - d
        i = (self.X + self.Y) * (other.X + other.Y) - c - d
        return self.from_coordinates((e + b) * h, (e - b) * i, a * h * i)

    def dbl(self) -> EdwardsG1:
        if self.is_zero():
            return self.copy()
        a = self.X.squared()
        b = self.Y.squared()
        c = a + b
        d = a - b
        e = (self.X + self.Y).squared() - c
        d_zz = COEFF_D * self.Z.squared()
        return self.from_coordinates(c * d, e * (c - d_zz - d_zz), d * e)

    def is_well_formed(self) -> bool:
        """Check the curve equation z^2 (y^2 + x^2 - d z^2) = x^2 y^2."""
        if self.is_zero():
            return True
        x2 = self.X.squared()
        y2 = self.Y.squared()
        z2 = self.Z.squared()
        return z2 * (y2 + x2 - COEFF_D * z2) == x2 * y2

    @classmethod
    def batch_to_special_all_non_zeros(cls, points: MutableSequence[EdwardsG1]) -> None:
        """Make every point special in place with one field inversion."""
        z_inverses = batch_invert([p.Z for p in points])
        one = EdwardsFq.one()
        for point, z_inv in zip(points, z_inverses):
            point.X = point.X * z_inv
            point.Y = point.Y * z_inv
            point.Z = one

    def __str__(self) -> str:
        if self.is_zero():
            return "O"
        x, y = self.to_affine_coordinates()
        return f"({x} , {y})"

    def __repr__(self) -> str:
        return f"EdwardsG1.from_coordinates({self.X}, {self.Y}, {self.Z})"