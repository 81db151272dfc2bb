import numpy as np
from numba import njit
from numba import uint64

from .bit_helpers import M32, rotl32, rotl64
from .engine import Engine, INITIAL_ROLL, load_words, make_bulk

# ─────────────────────────────────────────────────────────────────────────────
#  Small Fast Chaotic: state = [a, b, c, counter]
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64[::1]), nogil=True)
def sfc32_next(state):
    a = state[0]
    b = state[1]
    c = state[2]
    result = (a + b + state[3]) & M32
    state[3] = (state[3] + np.uint64(1)) & M32
    state[0] = b ^ (b >> np.uint64(9))
    state[1] = (c + (c << np.uint64(3))) & M32
    state[2] = (rotl32(c, np.uint64(21)) + result) & M32
    return result


@njit(uint64(uint64[::1]), nogil=True)
def sfc64_next(state):
    a = state[0]
    b = state[1]
    c = state[2]
    result = a + b + state[3]
    state[3] += np.uint64(1)
    state[0] = b ^ (b >> np.uint64(11))
    state[1] = c + (c << np.uint64(3))
    state[2] = rotl64(c, np.uint64(24)) + result
    return result


class _Sfc(Engine):
    """Seed is three state words and an optional counter (default 1)."""
    state_size = 4
    min_seeds = 3
    reseed_count = 3

    def _load_seed(self, words):
        counter = words[3] if len(words) > 3 else 1
        load_words(self._state, words[:3] + (counter,))
        self._roll(INITIAL_ROLL)

    @property
    def counter(self) -> int:
        return int(self._state[3])


class SFC32(_Sfc):
    name = "SFC 32-bit"
    word_bits = 32
    seed_widths = (32, 32, 32, 32)
    default_seed = (0, 0, 0)
    _step = staticmethod(sfc32_next)
    _bulk = staticmethod(make_bulk(sfc32_next))


class SFC64(_Sfc):
    name = "SFC 64-bit"
    seed_widths = (64, 64, 64, 64)
    default_seed = (0, 0, 0)
    _step = staticmethod(sfc64_next)
    _bulk = staticmethod(make_bulk(sfc64_next))
