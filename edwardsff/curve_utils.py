"""Generic scalar multiplication for curve groups.

A group type must offer ``zero()``, ``dbl()`` and ``+``.
"""

from __future__ import annotations

import operator
from typing import Any


def scalar_mul(base: Any, scalar: Any) -> Any:
    """Multiply a group element by a non-negative int or Bigint by double-and-add."""
    k = operator.index(scalar)
    if k < 0:
        raise ValueError("scalar cannot be negative")
    result = type(base).zero()
    found_one = False
    for bit in bin(k)[2:]:
        if found_one:
            result = result.dbl()
        if bit == "1":
            found_one = True
            result = result + base
    return result