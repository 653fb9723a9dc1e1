"""Helpers over field elements: roots of unity, bit packing, batch inversion.

Prime fields are expected to offer ``field(int)``, ``field.zero()``,
``field.one()``, ``field.field_char()`` and ``element.as_int()``.
"""

from __future__ import annotations

import enum
import itertools
import math
from collections.abc import Sequence
from typing import Any


class FieldType(enum.IntEnum):
    """Whether a field's group of interest is multiplicative or additive."""

    MULTIPLICATIVE = 1
    ADDITIVE = 2


def _ceil_size_in_bits(field: Any) -> int:
    return int(field.field_char()).bit_length()


def _floor_size_in_bits(field: Any) -> int:
    return _ceil_size_in_bits(field) - 1


def _bits_of(value: int, count: int) -> list[bool]:
    return [bool((value >> i) & 1) for i in range(count)]


def _value_of(bits: Sequence[bool]) -> int:
    return sum(1 << i for i, bit in enumerate(bits) if bit)


def batch_invert(values: Sequence[Any]) -> list[Any]:
    """Invert every element with a single field inversion."""
    if not values:
        return []
    if any(v.is_zero() for v in values):
        raise ZeroDivisionError("cannot invert zero")
    one = type(values[0]).one()
    prefix = list(itertools.accumulate(values[:-1], lambda acc, v: acc * v, initial=one))
    acc_inverse = (prefix[-1] * values[-1]).inverse()
    result = [None] * len(values)
    for i in reversed(range(len(values))):
        result[i] = acc_inverse * prefix[i]
        acc_inverse = acc_inverse * values[i]
    return result


def get_root_of_unity(field: Any, n: int) -> Any:
    """Return a root of unity of order n, a power of two.

    For ``complex`` the principal n-th root is returned for any positive n.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    if field is complex:
        return complex(math.cos(2 * math.pi / n), math.sin(2 * math.pi / n))
    if n & (n - 1):
        raise ValueError("expected n to be a power of two")
    logn = n.bit_length() - 1
    if logn > field.s:
        raise ValueError("expected log2(n) <= field.s")
    omega = field.root_of_unity
    for _ in range(field.s - logn):
        omega = omega * omega
    return omega


def coset_shift(field: Any) -> Any:
    """The square of the field's multiplicative generator."""
    return field.multiplicative_generator.squared()


def _chunks_to_elements(field: Any, value: int, total_bits: int, chunk_bits: int) -> list[Any]:
    count = -(-total_bits // chunk_bits)
    mask = (1 << chunk_bits) - 1
    return [field((value >> (i * chunk_bits)) & mask) for i in range(count)]


def pack_int_vector_into_field_element_vector(field: Any, values: Sequence[int], w: int) -> list[Any]:
    """Pack the low w bits of each word into elements of floor-size bits."""
    if w <= 0:
        raise ValueError("word width must be positive")
    chunk_bits = _floor_size_in_bits(field)
    word_mask = (1 << w) - 1
    stream = 0
    for index, word in enumerate(values):
        stream |= (word & word_mask) << (index * w)
    return _chunks_to_elements(field, stream, len(values) * w, chunk_bits)


def pack_bit_vector_into_field_element_vector(
    field: Any, bits: Sequence[bool], chunk_bits: int | None = None
) -> list[Any]:
    """Pack bits, least significant first, into elements of chunk_bits each."""
    floor_bits = _floor_size_in_bits(field)
    if chunk_bits is None:
        chunk_bits = floor_bits
    if not 0 < chunk_bits <= floor_bits:
        raise ValueError(f"chunk_bits must be in 1..{floor_bits}")
    return _chunks_to_elements(field, _value_of(bits), len(bits), chunk_bits)


def convert_bit_vector_to_field_element_vector(field: Any, bits: Sequence[bool]) -> list[Any]:
    """Map each bit to the field's one or zero."""
    return [field.one() if bit else field.zero() for bit in bits]


def convert_field_element_vector_to_bit_vector(values: Sequence[Any]) -> list[bool]:
    """Concatenate the bit vectors of all elements."""
    return [bit for value in values for bit in convert_field_element_to_bit_vector(value)]


def convert_field_element_to_bit_vector(element: Any, bitcount: int | None = None) -> list[bool]:
    """Bits of the element, least significant first.

    Without bitcount the length is the bit size of the field modulus;
    with it the vector is cut or padded with False to that length.
    """
    bits = _bits_of(element.as_int(), _ceil_size_in_bits(type(element)))
    if bitcount is None:
        return bits
    if bitcount < 0:
        raise ValueError("bitcount cannot be negative")
    return bits[:bitcount] + [False] * (bitcount - len(bits))


def convert_bit_vector_to_field_element(field: Any, bits: Sequence[bool]) -> Any:
    """Read bits, least significant first, as a field element."""
    if len(bits) > _ceil_size_in_bits(field):
        raise ValueError("bit vector is longer than the field size")
    return field(_value_of(bits) % int(field.field_char()))