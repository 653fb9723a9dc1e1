"""Fixed-width unsigned integers made of 64-bit limbs."""

from __future__ import annotations

import functools
import operator
import secrets

LIMB_BITS = 64
_LIMB_MASK = (1 << LIMB_BITS) - 1


@functools.total_ordering
class Bigint:
    """An unsigned integer held in a fixed number of 64-bit limbs.

    The value is checked to fit in ``limbs * 64`` bits. Instances are
    mutable through :meth:`clear` and :meth:`randomize`.
    """

    __slots__ = ("_value", "_limbs")

    def __init__(self, value: int | str = 0, limbs: int = 1) -> None:
        if limbs < 1:
            raise ValueError("a bigint needs at least one limb")
        if isinstance(value, str):
            if not (value.isascii() and value.isdigit()):
                raise ValueError(f"not a decimal integer: {value!r}")
            number = int(value)
        else:
            number = operator.index(value)
        if number < 0:
            raise ValueError("a bigint cannot be negative")
        if number.bit_length() > limbs * LIMB_BITS:
            raise ValueError(f"{number} does not fit in {limbs} limbs")
        self._value = number
        self._limbs = limbs

    @classmethod
    def one(cls, limbs: int = 1) -> Bigint:
        """Return the value 1 with the given number of limbs."""
        return cls(1, limbs)

    @property
    def limbs(self) -> int:
        """Number of 64-bit limbs."""
        return self._limbs

    @property
    def data(self) -> tuple[int, ...]:
        """The limbs, least significant first."""
        return tuple(
            (self._value >> (LIMB_BITS * i)) & _LIMB_MASK for i in range(self._limbs)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bigint):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Bigint) -> bool:
        if not isinstance(other, Bigint):
            return NotImplemented
        return self._value < other._value

    __hash__ = None  # mutable

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Bigint({self._value}, limbs={self._limbs})"

    def hex(self) -> str:
        """Lower-case hexadecimal digits without a prefix."""
        return format(self._value, "x")

    def clear(self) -> None:
        """Set the value to zero."""
        self._value = 0

    def is_zero(self) -> bool:
        return self._value == 0

    def is_even(self) -> bool:
        return self._value & 1 == 0

    def max_bits(self) -> int:
        """Number of bits this bigint can represent."""
        return self._limbs * LIMB_BITS

    def num_bits(self) -> int:
        """Position of the most significant set bit, or 0 for zero."""
        return self._value.bit_length()

    def as_ulong(self) -> int:
        """The least significant limb."""
        return self._value & _LIMB_MASK

    def test_bit(self, bitno: int) -> bool:
        if bitno < 0:
            raise ValueError("bit index cannot be negative")
        if bitno >= self.max_bits():
            return False
        return bool((self._value >> bitno) & 1)

    def randomize(self) -> Bigint:
        """Fill every limb with random bits and return self."""
        self._value = secrets.randbits(self.max_bits())
        return self