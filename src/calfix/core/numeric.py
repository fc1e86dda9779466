"""
calfix.core.numeric
-------------------
Numeric kernel shared by every calendar formula.

All helpers accept ints, Fractions and floats. Exact inputs (int, Fraction)
stay exact; floats go through the tolerant comparisons below, which absorb
the last representable bit at the magnitudes the timeline supports.

Mixed radix follows Reingold & Dershowitz, *Calendrical Calculations*,
listings 1.41 and 1.42.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Callable, List, Sequence, Union

from .errors import CalendarError, ContractViolation, ErrorKind

Number = Union[int, float, Fraction]

# Largest magnitude (in days) for which a float day count still resolves
# sub-second time: 2**34 days leaves 2**-18 days (~0.33 s) of spacing.
EFFECTIVE_MAX: float = float(2 ** 34)
EFFECTIVE_MIN: float = -EFFECTIVE_MAX
EFFECTIVE_EPSILON: float = 2.0 ** -18
EQ_SCALE: float = EFFECTIVE_MAX


def _is_exact(x: Number) -> bool:
    return isinstance(x, (int, Fraction))


def _div(x: Number, y: Number) -> Number:
    if _is_exact(x) and _is_exact(y):
        return Fraction(x) / y
    return x / y


# ============================================================
# Comparisons
# ============================================================

def approx_eq(x: Number, y: Number) -> bool:
    """Equality tolerant of the last representable bit. Never use for ordering."""
    if x == y:
        return True
    if x != 0 and y != 0 and (x < 0) != (y < 0):
        return False
    diff = abs(x - y)
    return diff < abs(x) / EQ_SCALE or diff < EFFECTIVE_EPSILON


def approx_floor(x: Number) -> int:
    """floor(x), except a float a hair below an integer rounds up to it."""
    if _is_exact(x):
        return math.floor(x)
    c = math.ceil(x)
    if approx_eq(x, c):
        return c
    return math.floor(x)


# ============================================================
# Modulus family
# ============================================================

def modulus(x: Number, y: Number) -> Number:
    """
    Signed modulus: the result takes the sign of y.

    y == 0 is a contract violation, as is a NaN or vanishing float divisor.
    """
    if _is_exact(y):
        if y == 0:
            raise ContractViolation("modulus by zero")
        if _is_exact(x):
            return x % y
    else:
        if math.isnan(y) or approx_eq(y, 0.0):
            raise ContractViolation(f"modulus by {y!r}")
    if isinstance(x, float) and math.isnan(x):
        raise ContractViolation("modulus of NaN")
    return x - y * math.floor(x / y)


def adjusted_remainder(x: Number, b: Number) -> Number:
    """Like modulus(x, b) but maps 0 onto b, so results range over 1..b."""
    m = modulus(x, b)
    return b if m == 0 else m


def interval_modulus(x: Number, a: Number, b: Number) -> Number:
    """Wraps x into [a, b) (or (b, a] when b < a). Identity when a == b."""
    if a == b:
        return x
    return a + modulus(x - a, b - a)


def gcd(x: int, y: int) -> int:
    while y != 0:
        x, y = y, modulus(x, y)
    return x


def lcm(x: int, y: int) -> int:
    g = gcd(x, y)
    if g == 0:
        raise CalendarError(ErrorKind.DIVISION_BY_ZERO, "lcm(0, 0)")
    return (x * y) // g


# ============================================================
# Mixed radix
# ============================================================

def _product(b: Sequence[Number], start: int, stop: int) -> Number:
    """b[start] * ... * b[stop - 1]; 1 when the range is empty."""
    return math.prod(b[start:stop]) if stop > start else 1


def validate_mixed_radix(a: Sequence[Number], b: Sequence[Number]) -> None:
    if len(a) != len(b) + 1:
        raise CalendarError(
            ErrorKind.MIXED_RADIX_WRONG_SIZE,
            f"expected {len(b) + 1} components for {len(b)} radices, got {len(a)}",
        )
    if any(r == 0 for r in b):
        raise CalendarError(ErrorKind.MIXED_RADIX_ZERO_BASE, f"radices {list(b)}")


def from_mixed_radix(a: Sequence[Number], b: Sequence[Number], k: int) -> Number:
    """
    Collapse components a[0..n] with radices b[0..n-1] into one scalar
    expressed in units of component k.

    Example: from_mixed_radix([h, m, s], [60, 60], 0) is hours as a real.
    """
    validate_mixed_radix(a, b)
    n = len(b)
    whole = sum(a[i] * _product(b, i, k) for i in range(0, k + 1))
    frac = sum(_div(a[i], _product(b, k, i)) for i in range(k + 1, n + 1))
    return whole + frac


def to_mixed_radix(x: Number, b: Sequence[Number], k: int) -> List[Number]:
    """Inverse of from_mixed_radix: split x (in units of component k) into n+1 components."""
    n = len(b)
    validate_mixed_radix([0] * (n + 1), b)
    if isinstance(x, float) and not math.isfinite(x):
        raise CalendarError(ErrorKind.ENCOUNTERED_NAN, f"to_mixed_radix({x!r})")

    out: List[Number] = []
    for i in range(n + 1):
        if i == 0:
            out.append(approx_floor(_div(x, _product(b, 0, k))))
        elif i < k:
            out.append(modulus(approx_floor(_div(x, _product(b, i, k))), b[i - 1]))
        elif i < n:
            out.append(modulus(approx_floor(x * _product(b, k, i)), b[i - 1]))
        else:
            out.append(_last_component(x * _product(b, k, n), b[n - 1]))
    return out


def _last_component(q: Number, radix: Number) -> Number:
    m = modulus(q, radix)
    if _is_exact(m):
        return m
    if approx_eq(m, float(radix)) or approx_eq(m, 0.0):
        return 0
    if approx_eq(m - math.floor(m), 1.0):
        return math.ceil(m)
    if not math.isfinite(m):
        raise CalendarError(ErrorKind.IMPOSSIBLE_RESULT, f"component {m!r}")
    return m


# ============================================================
# Bounded linear search
# ============================================================

def search_min(p: Callable[[int], bool], k: int) -> int:
    """Smallest i >= k with p(i)."""
    i = k
    while not p(i):
        i += 1
    return i


def search_max(p: Callable[[int], bool], k: int) -> int:
    """Scan upward from k - 1 while p holds; returns the first i where it fails."""
    i = k - 1
    while p(i):
        i += 1
    return i
