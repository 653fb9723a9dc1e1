"""Square-and-multiply exponentiation and Tonelli-Shanks square roots."""

from __future__ import annotations

import operator
from typing import Any

from .bigint import LIMB_BITS

_WORD_MASK = (1 << LIMB_BITS) - 1


def _exponent_value(exponent: Any) -> int:
    """Turn an int, a Bigint or a little-endian list of 64-bit words into an int."""
    if isinstance(exponent, (list, tuple)):
        value = 0
        for shift, word in enumerate(exponent):
            word = operator.index(word)
            if word < 0 or word > _WORD_MASK:
                raise ValueError(f"exponent word out of range: {word}")
            value |= word << (LIMB_BITS * shift)
        return value
    value = operator.index(exponent)
    if value < 0:
        raise ValueError("exponent cannot be negative")
    return value


def power(base: Any, exponent: Any) -> Any:
    """Raise a field element to a non-negative power by repeated squaring.

    The exponent may be an int, a Bigint, or a sequence of 64-bit words
    with the least significant word first.
    """
    e = _exponent_value(exponent)
    result = type(base).one()
    for bit in bin(e)[2:]:
        result = result * result
        if bit == "1":
            result = result * base
    return result


def tonelli_shanks_sqrt(value: Any) -> Any:
    """Square root in a field that provides s, t_minus_1_over_2 and nqr_to_t.

    Raises ValueError if the value is not a quadratic residue.
    """
    field = type(value)
    if value.is_zero():
        return field.zero()

    one = field.one()
    v = field.s
    z = field.nqr_to_t
    w = power(value, field.t_minus_1_over_2)
    x = value * w
    b = x * w  # value^t

    check = b
    for _ in range(v - 1):
        check = check.squared()
    if check != one:
        raise ValueError("value is not a quadratic residue")

    while b != one:
        m = 0
        b2m = b
        while b2m != one:
            b2m = b2m.squared()
            m += 1
        w = z
        for _ in range(v - m - 1):
            w = w.squared()
        z = w.squared()
        b = b * z
        x = x * w
        v = m
    return x