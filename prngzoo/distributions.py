"""Continuous distributions built on ``Generator.next_double``.

Every function takes the generator as first argument and never touches engine
state directly. The standard normal partner of each Box-Muller pair is kept
in ``gen._cached_normal`` and handed out by the next call for free.
"""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi
_SMALL_CHI_SQUARE = 16


def _open_unit(gen) -> float:
    """Uniform in (0, 1]."""
    return 1.0 - gen.next_double()


def standard_normal(gen) -> float:
    cached = gen._cached_normal
    if cached is not None:
        gen._cached_normal = None
        return cached

    r = math.sqrt(-2.0 * math.log(_open_unit(gen)))
    theta = TWO_PI * gen.next_double()
    gen._cached_normal = r * math.sin(theta)
    return r * math.cos(theta)


def gaussian(gen, mean: float = 0.0, std_dev: float = 1.0) -> float:
    if std_dev < 0:
        raise ValueError("std_dev must be non-negative")
    return mean + std_dev * standard_normal(gen)


def exponential(gen, scale: float = 1.0) -> float:
    if scale <= 0:
        raise ValueError("scale must be positive")
    return -math.log(_open_unit(gen)) * scale


def gamma(gen, shape: float, scale: float = 1.0) -> float:
    """Marsaglia-Tsang squeeze; shapes below 1 are boosted by U^(1/shape)."""
    if shape <= 0 or scale <= 0:
        raise ValueError("shape and scale must be positive")

    if shape < 1.0:
        boost = _open_unit(gen) ** (1.0 / shape)
        return gamma(gen, shape + 1.0, scale) * boost

    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    while True:
        x = standard_normal(gen)
        v = 1.0 + c * x
        if v <= 0.0:
            continue
        v = v * v * v
        u = _open_unit(gen)
        x2 = x * x
        if u < 1.0 - 0.0331 * x2 * x2:
            return d * v * scale
        if math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
            return d * v * scale


def beta(gen, a: float, b: float) -> float:
    if a <= 0 or b <= 0:
        raise ValueError("a and b must be positive")
    while True:
        x = gamma(gen, a)
        y = gamma(gen, b)
        if x + y > 0.0:
            return x / (x + y)


def chi_square(gen, k: float) -> float:
    if k <= 0:
        raise ValueError("degrees of freedom must be positive")
    if float(k).is_integer() and k <= _SMALL_CHI_SQUARE:
        total = 0.0
        for _ in range(int(k)):
            z = standard_normal(gen)
            total += z * z
        return total
    # rate 0.5
    return gamma(gen, 0.5 * k, 2.0)


def laplace(gen, location: float = 0.0, scale: float = 1.0) -> float:
    if scale <= 0:
        raise ValueError("scale must be positive")
    u = gen.next_double() - 0.5
    while u == -0.5:
        u = gen.next_double() - 0.5
    return location - scale * math.copysign(1.0, u) * math.log(1.0 - 2.0 * abs(u))


def triangular(gen, lower: float, upper: float, mode: float) -> float:
    if lower > upper:
        raise ValueError("lower bound is greater than upper bound")
    if not (lower <= mode <= upper):
        raise ValueError("mode must lie in [lower, upper]")
    if lower == upper:
        return lower

    width = upper - lower
    u = gen.next_double()
    if u < (mode - lower) / width:
        return lower + math.sqrt(u * width * (mode - lower))
    return upper - math.sqrt((1.0 - u) * width * (upper - mode))
