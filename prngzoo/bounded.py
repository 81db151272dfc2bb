"""Uniform integers in [lower, upper) and uniform floats.

Bounded integers use Lemire's multiply-and-reject method: one 64-bit draw is
multiplied by the range and the high word of the 128-bit product is the
result. A draw is rejected only when the low word falls below 2^64 mod range,
so the result is exactly uniform with O(1) expected draws.
"""

from __future__ import annotations

import operator

from .bit_helpers import MASK64, log2_ceiling, umul128

U32_MAX = (1 << 32) - 1
U64_MAX = MASK64
I32_MAX = (1 << 31) - 1
I64_MAX = (1 << 63) - 1

_DOUBLE_UNIT = 1.0 / (1 << 53)
_FLOAT_UNIT = 1.0 / (1 << 24)


def _check_bounds(lower: int, upper: int, limit: int) -> tuple:
    try:
        lower, upper = operator.index(lower), operator.index(upper)
    except TypeError:
        raise ValueError("bounds must be integers") from None
    if lower < 0 or upper < 0:
        raise ValueError("lower or upper bound is negative")
    if lower > limit or upper > limit:
        raise ValueError(f"bounds must not exceed {limit}")
    if lower > upper:
        raise ValueError("lower bound is greater than upper bound")
    return lower, upper


def lemire(engine, words, span: int) -> int:
    """Uniform integer in [0, span) for 0 < span < 2^64."""
    hi, lo = umul128(words.next_u64(engine), span)
    if lo < span:
        threshold = ((MASK64 + 1) - span) % span
        while lo < threshold:
            hi, lo = umul128(words.next_u64(engine), span)
    return hi


def masked(engine, words, span: int) -> int:
    """Uniform integer in [0, span) by taking the top bits and rejecting overshoot."""
    if span == 1:
        return 0
    shift = 64 - log2_ceiling(span)
    while True:
        r = words.next_u64(engine) >> shift
        if r < span:
            return r


def next_ulong(engine, words, lower: int, upper: int, use_masked: bool = False) -> int:
    lower, upper = _check_bounds(lower, upper, U64_MAX)
    if lower == upper:
        return lower
    span = upper - lower
    draw = masked if use_masked else lemire
    return lower + draw(engine, words, span)


def next_uint(engine, words, lower: int, upper: int, use_masked: bool = False) -> int:
    _check_bounds(lower, upper, U32_MAX)
    return next_ulong(engine, words, lower, upper, use_masked)


def next_long(engine, words, lower: int, upper: int) -> int:
    _check_bounds(lower, upper, I64_MAX)
    result = next_ulong(engine, words, lower, upper)
    if result > I64_MAX:
        return result >> 1
    return result


def next_int(engine, words, lower: int, upper: int) -> int:
    _check_bounds(lower, upper, I32_MAX)
    result = next_uint(engine, words, lower, upper)
    if result > I32_MAX:
        return result >> 1
    return result


def next_double(engine, words) -> float:
    """Top 53 bits of one 64-bit draw, in [0, 1)."""
    return (words.next_u64(engine) >> 11) * _DOUBLE_UNIT


def next_double_range(engine, words, lower: float, upper: float) -> float:
    """Uniform float in [lower, upper)."""
    if lower > upper:
        raise ValueError("lower bound is greater than upper bound")
    return lower + next_double(engine, words) * (upper - lower)


def next_float(engine, words) -> float:
    """Top 24 bits of one 32-bit draw, in [0, 1)."""
    return (words.next_u32(engine) >> 8) * _FLOAT_UNIT
