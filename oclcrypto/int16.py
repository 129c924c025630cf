"""Branch-free mask, comparison and min/max helpers on signed 16-bit integers.

Inputs are reduced to signed 16-bit values first; masks are -1 (all ones)
for true and 0 for false.
"""

from __future__ import annotations

from typing import Tuple


def _wrap(x: int) -> int:
    x &= 0xFFFF
    return x - 0x10000 if x & 0x8000 else x


def negative_mask(x: int) -> int:
    """-1 if ``x`` is negative, else 0."""
    return _wrap(x) >> 15


def nonzero_mask(x: int) -> int:
    """-1 if ``x`` is nonzero, else 0."""
    x = _wrap(x)
    return negative_mask(x) | negative_mask(_wrap(-x))


def zero_mask(x: int) -> int:
    """-1 if ``x`` is zero, else 0."""
    return ~nonzero_mask(x)


def positive_mask(x: int) -> int:
    """-1 if ``x`` is strictly positive, else 0."""
    x = _wrap(x)
    z = _wrap(-x)
    z ^= x & z
    return negative_mask(z)


def unequal_mask(x: int, y: int) -> int:
    """-1 if ``x`` and ``y`` differ, else 0."""
    return nonzero_mask(_wrap(x) ^ _wrap(y))


def equal_mask(x: int, y: int) -> int:
    """-1 if ``x`` equals ``y``, else 0."""
    return ~unequal_mask(x, y)


def smaller_mask(x: int, y: int) -> int:
    """-1 if ``x`` is less than ``y``, else 0."""
    x, y = _wrap(x), _wrap(y)
    xy = x ^ y
    z = _wrap(x - y)
    z ^= xy & (z ^ x)
    return negative_mask(z)


def _swap_mask(x: int, y: int) -> int:
    xy = y ^ x
    z = _wrap(y - x)
    z ^= xy & (z ^ y)
    return negative_mask(z) & xy


def int16_min(x: int, y: int) -> int:
    """The smaller of ``x`` and ``y``."""
    x, y = _wrap(x), _wrap(y)
    return x ^ _swap_mask(x, y)


def int16_max(x: int, y: int) -> int:
    """The larger of ``x`` and ``y``."""
    x, y = _wrap(x), _wrap(y)
    return y ^ _swap_mask(x, y)


def minmax(a: int, b: int) -> Tuple[int, int]:
    """Return ``(min(a, b), max(a, b))``."""
    a, b = _wrap(a), _wrap(b)
    z = _swap_mask(a, b)
    return a ^ z, b ^ z