"""Final exponentiation and the reduced Tate pairing for the Edwards curve.

The Miller loop runs over the bits of the scalar field modulus r. G1 points
are walked in extended projective coordinates (X : Y : Z : T) with
T*Z = X*Y, and each step records the conic coefficients of the function
it adds.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .edwards_g1 import EdwardsG1
from .edwards_g2 import EdwardsG2
from .edwards_params import (
    FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0,
    FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG,
    FINAL_EXPONENT_LAST_CHUNK_W1,
    MODULUS_R,
    EdwardsFq,
    EdwardsFq3,
    EdwardsFq6,
)

# Bits of r from the one after the most significant down to the least.
_LOOP_BITS: tuple[bool, ...] = tuple(bit == "1" for bit in bin(MODULUS_R)[3:])


@dataclass(frozen=True)
class FqConicCoefficients:
    """Coefficients of a conic c_ZZ*Z^2 + c_XY*X*Y + c_XZ*X*Z over Fq."""

    c_ZZ: EdwardsFq
    c_XY: EdwardsFq
    c_XZ: EdwardsFq


@dataclass(frozen=True)
class TateG2Precomp:
    """Values of a G2 point that the Tate Miller loop evaluates conics at."""

    y0: EdwardsFq3
    eta: EdwardsFq3


@dataclass
class _ExtendedG1:
    X: EdwardsFq
    Y: EdwardsFq
    Z: EdwardsFq
    T: EdwardsFq


def final_exponentiation_last_chunk(elt: EdwardsFq6, elt_inv: EdwardsFq6) -> EdwardsFq6:
    """Raise to w1*q + w0, the hard part of the final exponent."""
    elt_q = elt.frobenius_map(1)
    w1_part = elt_q.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_W1)
    if FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG:
        w0_part = elt_inv.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0)
    else:
        w0_part = elt.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0)
    return w1_part * w0_part


def final_exponentiation_first_chunk(elt: EdwardsFq6, elt_inv: EdwardsFq6) -> EdwardsFq6:
    """Raise to (q^3 - 1)*(q + 1), the easy part of the final exponent."""
    elt_q3 = elt.frobenius_map(3)
    elt_q3_over_elt = elt_q3 * elt_inv
    alpha = elt_q3_over_elt.frobenius_map(1)
    return alpha * elt_q3_over_elt


def final_exponentiation(elt: EdwardsFq6) -> EdwardsFq6:
    """Map a Miller loop result into the target group GT."""
    elt_inv = elt.inverse()
    elt_to_first_chunk = final_exponentiation_first_chunk(elt, elt_inv)
    elt_inv_to_first_chunk = final_exponentiation_first_chunk(elt_inv, elt)
    return final_exponentiation_last_chunk(elt_to_first_chunk, elt_inv_to_first_chunk)


def tate_precompute_g2(Q: EdwardsG2) -> TateG2Precomp:
    """Compute y0 = y and eta = (1 + y) / (u * x) from the affine (x, y) of Q."""
    x, y = Q.to_affine_coordinates()
    one = EdwardsFq3.one()
    return TateG2Precomp(
        y0=y,
        eta=(one + y) * EdwardsFq6.mul_by_non_residue(x).inverse(),
    )


def _doubling_step(current: _ExtendedG1) -> FqConicCoefficients:
    X, Y, Z, T = current.X, current.Y, current.Z, current.T
    A = X.squared()
    B = Y.squared()
    C = Z.squared()
    D = (X + Y).squared()
    E = (Y + Z).squared()
    F = D - (A + B)
    G = E - (B + C)
    H = A  # the curve coefficient a is one
    I = H + B
    J = C - I
    K = J + C

    c_zz = Y * (T - X)
    c_xz = X * T - B
    cc = FqConicCoefficients(c_ZZ=c_zz + c_zz, c_XY=J + J + G, c_XZ=c_xz + c_xz)

    current.X = F * K
    current.Y = I * (B - H)
    current.Z = I * K
    current.T = F * (B - H)
    return cc


def _full_addition_step(base: _ExtendedG1, current: _ExtendedG1) -> FqConicCoefficients:
    X1, Y1, Z1, T1 = current.X, current.Y, current.Z, current.T
    X2, Y2, Z2, T2 = base.X, base.Y, base.Z, base.T

    A = X1 * X2
    B = Y1 * Y2
    C = Z1 * T2
    D = T1 * Z2
    E = D + C
    F = (X1 - Y1) * (X2 + Y2) + B - A
    G = B + A
    H = D - C
    I = T1 * T2

    cc = FqConicCoefficients(
        c_ZZ=(T1 - X1) * (T2 + X2) - I + A,
        c_XY=X1 * Z2 - X2 * Z1 + F,
        c_XZ=(Y1 - T1) * (Y2 + T2) - B + I - H,
    )
    current.X = E * F
    current.Y = G * H
    current.Z = F * G
    current.T = E * H
    return cc


def _mixed_addition_step(base: _ExtendedG1, current: _ExtendedG1) -> FqConicCoefficients:
    """Addition step where the base point has Z equal to one."""
    X1, Y1, Z1, T1 = current.X, current.Y, current.Z, current.T
    X2, Y2, T2 = base.X, base.Y, base.T

    A = X1 * X2
    B = Y1 * Y2
    C = Z1 * T2
    D = T1
    E = D + C
    F = (X1 - Y1) * (X2 + Y2) + B - A
    G = B + A
    H = D - C
    I = T1 * T2

    cc = FqConicCoefficients(
        c_ZZ=(T1 - X1) * (T2 + X2) - I + A,
        c_XY=X1 - X2 * Z1 + F,
        c_XZ=(Y1 - T1) * (Y2 + T2) - B + I - H,
    )
    current.X = E * F
    current.Y = G * H
    current.Z = F * G
    current.T = E * H
    return cc


def tate_precompute_g1(P: EdwardsG1) -> list[FqConicCoefficients]:
    """Record the conic coefficients of every Miller loop step for P."""
    x, y = P.to_affine_coordinates()
    p_ext = _ExtendedG1(X=x, Y=y, Z=EdwardsFq.one(), T=x * y)
    r = _ExtendedG1(p_ext.X, p_ext.Y, p_ext.Z, p_ext.T)

    result = []
    for bit in _LOOP_BITS:
        result.append(_doubling_step(r))
        if bit:
            result.append(_mixed_addition_step(p_ext, r))
    return result


def _conic_at_q(cc: FqConicCoefficients, prec_Q: TateG2Precomp) -> EdwardsFq6:
    return EdwardsFq6(
        EdwardsFq3(cc.c_XZ, 0, 0) + prec_Q.y0 * cc.c_XY,
        prec_Q.eta * cc.c_ZZ,
    )


def _take(coefficients: Iterator[FqConicCoefficients]) -> FqConicCoefficients:
    try:
        return next(coefficients)
    except StopIteration:
        raise ValueError("G1 precomputation is too short for the Miller loop") from None


def tate_miller_loop(
    prec_P: Sequence[FqConicCoefficients], prec_Q: TateG2Precomp
) -> EdwardsFq6:
    """Evaluate the recorded conics at Q and accumulate them."""
    coefficients = iter(prec_P)
    f = EdwardsFq6.one()
    for bit in _LOOP_BITS:
        f = f.squared() * _conic_at_q(_take(coefficients), prec_Q)
        if bit:
            f = f * _conic_at_q(_take(coefficients), prec_Q)
    return f


def tate_pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
    """The Tate Miller loop value of P and Q, before final exponentiation."""
    return tate_miller_loop(tate_precompute_g1(P), tate_precompute_g2(Q))


def tate_reduced_pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
    """The reduced Tate pairing of P and Q, an element of GT."""
    return final_exponentiation(tate_pairing(P, Q))