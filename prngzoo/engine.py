"""Engine contract shared by every generator family.

An engine owns a fixed-length ``uint64`` state vector and a jitted step kernel
``step(state) -> word``. 32-bit families keep every state word in the low half
of its slot, so one array type serves all kernels.
"""

from __future__ import annotations

import copy
import logging
import operator
from typing import Optional, Sequence

import numpy as np
from numba import njit

from .entropy import OsEntropy

log = logging.getLogger(__name__)

# discarded advances after seeding for families with weak early output
INITIAL_ROLL = 20


# ─────────────────────────────────────────────────────────────────────────────
#  Kernel factories
# ─────────────────────────────────────────────────────────────────────────────
def make_bulk(step):
    """Jitted ``bulk(state, n) -> uint64[n]`` running `step` n times."""
    @njit(nogil=True)
    def bulk(state, n):
        out = np.empty(n, dtype=np.uint64)
        for i in range(n):
            out[i] = step(state)
        return out
    return bulk


def make_poly_jump(step):
    """
    Jitted GF(2) jump for two-word linear engines: applies the characteristic
    polynomial (lo, hi) to the state by summing the states selected by its bits.
    """
    @njit(nogil=True)
    def jump(state, lo, hi):
        t0 = np.uint64(0)
        t1 = np.uint64(0)
        for i in range(2):
            poly = lo if i == 0 else hi
            for b in range(64):
                if (poly >> np.uint64(b)) & np.uint64(1):
                    t0 ^= state[0]
                    t1 ^= state[1]
                step(state)
        state[0] = t0
        state[1] = t1
    return jump


# ─────────────────────────────────────────────────────────────────────────────
#  Engine base
# ─────────────────────────────────────────────────────────────────────────────
class Engine:
    """
    Base class of all generator families.

    Subclasses set the class attributes below, a ``_step`` / ``_bulk`` kernel
    pair and ``_load_seed``; everything else (argument validation, reseeding,
    snapshots) lives here.
    """
    name: str = ""
    word_bits: int = 64
    state_size: int = 1
    seed_widths: tuple = (64,)
    min_seeds: Optional[int] = None     # defaults to len(seed_widths)
    reseed_count: Optional[int] = None  # words drawn by reseed(), defaults to len(seed_widths)
    default_seed: Optional[tuple] = None
    nonzero_seed: bool = False

    _step = None
    _bulk = None

    def __init__(self, *seed):
        self._state = np.zeros(self.state_size, dtype=np.uint64)
        if seed:
            self.set_seed(*seed)
        else:
            self.set_seed(*self._default_words())

    # ---- seeding -----------------------------------------------------------
    def _default_words(self):
        return self.default_seed

    def set_seed(self, *seed) -> None:
        """Reset the state from explicit seed words (varargs or one sequence)."""
        if len(seed) == 1 and isinstance(seed[0], (list, tuple, np.ndarray)):
            seed = tuple(seed[0])
        if not seed or any(s is None for s in seed):
            raise ValueError(f"{self.name}: seed can't be None or empty")

        needed = self.min_seeds if self.min_seeds is not None else len(self.seed_widths)
        if len(seed) < needed:
            raise ValueError(f"{self.name}: seed needs at least {needed} numbers, got {len(seed)}")
        if len(seed) > len(self.seed_widths):
            raise ValueError(f"{self.name}: seed takes at most {len(self.seed_widths)} numbers, got {len(seed)}")

        words = []
        for i, (s, bits) in enumerate(zip(seed, self.seed_widths)):
            w = operator.index(s)
            if w < 0 or w >> bits:
                raise ValueError(f"{self.name}: seed[{i}]={w} is not a {bits}-bit unsigned integer")
            words.append(w)

        if self.nonzero_seed and not any(words):
            raise ValueError(f"{self.name}: all-zero seed is an absorbing state")

        self._load_seed(tuple(words))
        log.debug("%s seeded with %d word(s)", self.name, len(words))

    def _load_seed(self, words: tuple) -> None:
        raise NotImplementedError

    def reseed(self, entropy=None) -> None:
        """Seed from an entropy source (one request, sized to the seed widths)."""
        source = entropy if entropy is not None else OsEntropy()
        count = self.reseed_count if self.reseed_count is not None else len(self.seed_widths)
        widths = self.seed_widths[:count]
        size = sum(widths) // 8

        raw = bytes(source.get_nonzero_bytes(size))
        if len(raw) != size:
            raise ValueError(f"{self.name}: entropy source returned {len(raw)} bytes, expected {size}")

        words, offset = [], 0
        for bits in widths:
            n = bits // 8
            words.append(int.from_bytes(raw[offset:offset + n], "little"))
            offset += n
        log.debug("%s reseeding from %d entropy bytes", self.name, size)
        self.set_seed(*words)

    def _roll(self, n: int = INITIAL_ROLL) -> None:
        self._bulk(self._state, n)

    # ---- output ------------------------------------------------------------
    def advance(self) -> int:
        """Advance the state once and return the native-width output word."""
        return self._step(self._state)

    def random_raw(self, n: int) -> np.ndarray:
        """`n` consecutive native words as a uint64 array."""
        if n < 0:
            raise ValueError("n must be non-negative")
        return self._bulk(self._state, int(n))

    # ---- misc --------------------------------------------------------------
    def algorithm_name(self) -> str:
        return self.name

    @property
    def state(self) -> tuple:
        return tuple(int(x) for x in self._state)

    def copy(self) -> "Engine":
        return copy.deepcopy(self)

    def jump_stream(self) -> None:
        """Advance to the start of the next non-overlapping stream."""
        raise NotImplementedError(f"{self.name} has no stream jump")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.name


def load_words(state: np.ndarray, words: Sequence[int]) -> None:
    for i, w in enumerate(words):
        state[i] = np.uint64(w)
