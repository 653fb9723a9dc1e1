"""The reduced ate pairing for the Edwards curve, the pairing of choice.

The Miller loop runs over the bits of the ate loop count. G2 points are
walked in extended projective coordinates (X : Y : Z : T) with T*Z = X*Y
on the twist, and each step records the conic coefficients of the function
it adds; the conics are then evaluated at a G1 point.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .edwards_g1 import EdwardsG1
from .edwards_g2 import EdwardsG2
from .edwards_params import ATE_LOOP_COUNT, EdwardsFq, EdwardsFq3, EdwardsFq6
from .edwards_tate import final_exponentiation

# Bits of the loop count from the one after the most significant down to the least.
_LOOP_BITS: tuple[bool, ...] = tuple(bit == "1" for bit in bin(int(ATE_LOOP_COUNT))[3:])


@dataclass(frozen=True)
class Fq3ConicCoefficients:
    """Coefficients of a conic c_ZZ*Z^2 + c_XY*X*Y + c_XZ*X*Z over Fq3."""

    c_ZZ: EdwardsFq3
    c_XY: EdwardsFq3
    c_XZ: EdwardsFq3


@dataclass(frozen=True)
class AteG1Precomp:
    """Values of a G1 point that the ate Miller loop evaluates conics at."""

    P_XY: EdwardsFq
    P_XZ: EdwardsFq
    P_ZZplusYZ: EdwardsFq


@dataclass
class _ExtendedG2:
    X: EdwardsFq3
    Y: EdwardsFq3
    Z: EdwardsFq3
    T: EdwardsFq3


def _doubling_step(current: _ExtendedG2) -> Fq3ConicCoefficients:
    X, Y, Z, T = current.X, current.Y, current.Z, current.T
    mul_by_a = EdwardsG2.mul_by_a
    A = X.squared()
    B = Y.squared()
    C = Z.squared()
    D = (X + Y).squared()
    E = (Y + Z).squared()
    F = D - (A + B)
    G = E - (B + C)
    H = mul_by_a(A)
    I = H + B
    J = C - I
    K = J + C

    c_zz = Y * (T - X)
    c_xy = C - mul_by_a(A) - B
    c_xz = mul_by_a(X * T) - B
    cc = Fq3ConicCoefficients(
        c_ZZ=c_zz + c_zz,
        c_XY=c_xy + c_xy + G,
        c_XZ=c_xz + c_xz,
    )

    current.X = F * K
    current.Y = I * (B - H)
    current.Z = I * K
    current.T = F * (B - H)
    return cc


def _mixed_addition_step(base: _ExtendedG2, current: _ExtendedG2) -> Fq3ConicCoefficients:
    """Addition step where the base point has Z equal to one."""
    X1, Y1, Z1, T1 = current.X, current.Y, current.Z, current.T
    X2, Y2, T2 = base.X, base.Y, base.T
    mul_by_a = EdwardsG2.mul_by_a

    A = X1 * X2
    B = Y1 * Y2
    C = Z1 * T2
    E = T1 + C
    F = (X1 - Y1) * (X2 + Y2) + B - A
    G = B + mul_by_a(A)
    H = T1 - C
    I = T1 * T2

    cc = Fq3ConicCoefficients(
        c_ZZ=mul_by_a((T1 - X1) * (T2 + X2) - I + A),
        c_XY=X1 - X2 * Z1 + F,
        c_XZ=(Y1 - T1) * (Y2 + T2) - B + I - H,
    )
    current.X = E * F
    current.Y = G * H
    current.Z = F * G
    current.T = E * H
    return cc


def ate_precompute_g1(P: EdwardsG1) -> AteG1Precomp:
    """Compute x*y, x and 1 + y from the affine (x, y) of P."""
    x, y = P.to_affine_coordinates()
    return AteG1Precomp(P_XY=x * y, P_XZ=x, P_ZZplusYZ=EdwardsFq.one() + y)


def ate_precompute_g2(Q: EdwardsG2) -> list[Fq3ConicCoefficients]:
    """Record the conic coefficients of every Miller loop step for Q."""
    x, y = Q.to_affine_coordinates()
    q_ext = _ExtendedG2(X=x, Y=y, Z=EdwardsFq3.one(), T=x * y)
    r = _ExtendedG2(q_ext.X, q_ext.Y, q_ext.Z, q_ext.T)

    result = []
    for bit in _LOOP_BITS:
        result.append(_doubling_step(r))
        if bit:
            result.append(_mixed_addition_step(q_ext, r))
    return result


def _doubling_value(prec_P: AteG1Precomp, cc: Fq3ConicCoefficients) -> EdwardsFq6:
    return EdwardsFq6(
        prec_P.P_XY * cc.c_XY + prec_P.P_XZ * cc.c_XZ,
        prec_P.P_ZZplusYZ * cc.c_ZZ,
    )


def _addition_value(prec_P: AteG1Precomp, cc: Fq3ConicCoefficients) -> EdwardsFq6:
    return EdwardsFq6(
        prec_P.P_ZZplusYZ * cc.c_ZZ,
        prec_P.P_XY * cc.c_XY + prec_P.P_XZ * cc.c_XZ,
    )


def _take(coefficients: Iterator[Fq3ConicCoefficients]) -> Fq3ConicCoefficients:
    try:
        return next(coefficients)
    except StopIteration:
        raise ValueError("G2 precomputation is too short for the Miller loop") from None


def ate_miller_loop(
    prec_P: AteG1Precomp, prec_Q: Sequence[Fq3ConicCoefficients]
) -> EdwardsFq6:
    """Evaluate the recorded conics of Q at P and accumulate them."""
    coefficients = iter(prec_Q)
    f = EdwardsFq6.one()
    for bit in _LOOP_BITS:
        f = f.squared() * _doubling_value(prec_P, _take(coefficients))
        if bit:
            f = f * _addition_value(prec_P, _take(coefficients))
    return f


def ate_double_miller_loop(
    prec_P1: AteG1Precomp,
    prec_Q1: Sequence[Fq3ConicCoefficients],
    prec_P2: AteG1Precomp,
    prec_Q2: Sequence[Fq3ConicCoefficients],
) -> EdwardsFq6:
    """The product of two Miller loops, sharing the squarings."""
    first = iter(prec_Q1)
    second = iter(prec_Q2)
    f = EdwardsFq6.one()
    for bit in _LOOP_BITS:
        g1 = _doubling_value(prec_P1, _take(first))
        g2 = _doubling_value(prec_P2, _take(second))
        f = f.squared() * g1 * g2
        if bit:
            g1 = _addition_value(prec_P1, _take(first))
            g2 = _addition_value(prec_P2, _take(second))
            f = f * g1 * g2
    return f


def ate_pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
    """The ate Miller loop value of P and Q, before final exponentiation."""
    return ate_miller_loop(ate_precompute_g1(P), ate_precompute_g2(Q))


def ate_reduced_pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
    """The reduced ate pairing of P and Q, an element of GT."""
    return final_exponentiation(ate_pairing(P, Q))


def precompute_g1(P: EdwardsG1) -> AteG1Precomp:
    return ate_precompute_g1(P)


def precompute_g2(Q: EdwardsG2) -> list[Fq3ConicCoefficients]:
    return ate_precompute_g2(Q)


def miller_loop(
    prec_P: AteG1Precomp, prec_Q: Sequence[Fq3ConicCoefficients]
) -> EdwardsFq6:
    return ate_miller_loop(prec_P, prec_Q)


def double_miller_loop(
    prec_P1: AteG1Precomp,
    prec_Q1: Sequence[Fq3ConicCoefficients],
    prec_P2: AteG1Precomp,
    prec_Q2: Sequence[Fq3ConicCoefficients],
) -> EdwardsFq6:
    return ate_double_miller_loop(prec_P1, prec_Q1, prec_P2, prec_Q2)


def pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
    return ate_pairing(P, Q)


def reduced_pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
    return ate_reduced_pairing(P, Q)