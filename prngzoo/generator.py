"""Public generator facade: one engine plus every derived operation."""

from __future__ import annotations

from typing import Optional

from . import bounded, distributions, sequence
from .engine import Engine
from .words import words_for


class Generator:
    """
    Wraps an engine and exposes the basic, bounded, distribution and sequence
    API. Not thread-safe: use one instance per thread (see streams.split_streams).
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.words = words_for(engine)
        self._cached_normal: Optional[float] = None

    # ---- identity & seeding ------------------------------------------------
    def algorithm_name(self) -> str:
        return self.engine.algorithm_name()

    def set_seed(self, *seed) -> None:
        self.engine.set_seed(*seed)
        self._cached_normal = None

    def reseed(self, entropy=None) -> None:
        self.engine.reseed(entropy)
        self._cached_normal = None

    # ---- basic -------------------------------------------------------------
    def next_bool(self) -> bool:
        return self.words.next_bool(self.engine)

    def next_byte(self, lower: Optional[int] = None, upper: Optional[int] = None) -> int:
        if lower is None and upper is None:
            return self.words.next_byte(self.engine)
        lower = 0 if lower is None else lower
        upper = 0xFF if upper is None else upper
        if upper > 0xFF:
            raise ValueError("byte bounds must not exceed 255")
        return bounded.next_uint(self.engine, self.words, lower, upper)

    def next_bytes(self, length: int) -> bytes:
        return self.words.next_bytes(self.engine, length)

    def fill(self, buffer) -> None:
        self.words.fill(self.engine, buffer)

    def next_u32(self) -> int:
        return self.words.next_u32(self.engine)

    def next_u64(self) -> int:
        return self.words.next_u64(self.engine)

    def next_i32(self) -> int:
        return self.words.next_i32(self.engine)

    def next_i64(self) -> int:
        return self.words.next_i64(self.engine)

    # ---- bounded -----------------------------------------------------------
    def next_uint(self, lower: int, upper: int, masked: bool = False) -> int:
        return bounded.next_uint(self.engine, self.words, lower, upper, masked)

    def next_ulong(self, lower: int, upper: int, masked: bool = False) -> int:
        return bounded.next_ulong(self.engine, self.words, lower, upper, masked)

    def next_int(self, lower: int, upper: int) -> int:
        return bounded.next_int(self.engine, self.words, lower, upper)

    def next_long(self, lower: int, upper: int) -> int:
        return bounded.next_long(self.engine, self.words, lower, upper)

    def next_double(self, lower: Optional[float] = None, upper: Optional[float] = None) -> float:
        if lower is None and upper is None:
            return bounded.next_double(self.engine, self.words)
        if lower is None or upper is None:
            raise ValueError("give both bounds or neither")
        return bounded.next_double_range(self.engine, self.words, lower, upper)

    def next_float(self) -> float:
        return bounded.next_float(self.engine, self.words)

    # ---- distributions -----------------------------------------------------
    def next_gaussian(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        return distributions.gaussian(self, mean, std_dev)

    def next_exponential(self, scale: float = 1.0) -> float:
        return distributions.exponential(self, scale)

    def next_gamma(self, shape: float, scale: float = 1.0) -> float:
        return distributions.gamma(self, shape, scale)

    def next_beta(self, a: float, b: float) -> float:
        return distributions.beta(self, a, b)

    def next_chi_square(self, k: float) -> float:
        return distributions.chi_square(self, k)

    def next_laplace(self, location: float = 0.0, scale: float = 1.0) -> float:
        return distributions.laplace(self, location, scale)

    def next_triangular(self, lower: float, upper: float, mode: float) -> float:
        return distributions.triangular(self, lower, upper, mode)

    # ---- sequences ---------------------------------------------------------
    def choice(self, items, select: Optional[int] = None, replace: bool = True):
        return sequence.choice(self, items, select, replace)

    def sample(self, items, select: int) -> list:
        return sequence.sample(self, items, select)

    def shuffle(self, items) -> list:
        return sequence.shuffle(self, items)

    def shuffle_in_place(self, items) -> None:
        sequence.shuffle_in_place(self, items)

    async def choice_async(self, items, select=None, replace=True, cancel=None):
        return await sequence.choice_async(self, items, select, replace, cancel)

    async def sample_async(self, items, select, cancel=None):
        return await sequence.sample_async(self, items, select, cancel)

    async def shuffle_async(self, items, cancel=None):
        return await sequence.shuffle_async(self, items, cancel)

    async def shuffle_in_place_async(self, items, cancel=None):
        return await sequence.shuffle_in_place_async(self, items, cancel)

    def __repr__(self) -> str:
        return f"Generator({self.engine!r})"

    def __str__(self) -> str:
        return self.algorithm_name()
