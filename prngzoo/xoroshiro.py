import numpy as np
from numba import njit, types
from numba import uint64

from .bit_helpers import rotl64
from .engine import Engine, load_words, make_bulk
from .splitmix import splitmix64_words

# ─────────────────────────────────────────────────────────────────────────────
#  Xoroshiro1024: 16-word ring, slot [16] holds the ring pointer
# ─────────────────────────────────────────────────────────────────────────────
_RING = 16
_STAR = np.uint64(0x9E3779B97F4A7C13)


@njit(types.UniTuple(uint64, 2)(uint64[::1]), nogil=True, inline='always', no_cpython_wrapper=True)
def _xoroshiro1024_advance(state):
    """Moves the ring pointer and updates two slots; returns (s0, s15) before the update."""
    q = np.int64(state[16])
    p = (q + 1) & 15
    s0 = state[p]
    s15 = state[q]
    out15 = s15
    s15 ^= s0
    state[q] = rotl64(s0, np.uint64(25)) ^ s15 ^ (s15 << np.uint64(27))
    state[p] = rotl64(s15, np.uint64(36))
    state[16] = np.uint64(p)
    return s0, out15


@njit(uint64(uint64[::1]), nogil=True)
def xoroshiro1024star_next(state):
    s0, _ = _xoroshiro1024_advance(state)
    return s0 * _STAR


@njit(uint64(uint64[::1]), nogil=True)
def xoroshiro1024starstar_next(state):
    s0, _ = _xoroshiro1024_advance(state)
    return rotl64(s0 * np.uint64(5), np.uint64(7)) * np.uint64(9)


@njit(uint64(uint64[::1]), nogil=True)
def xoroshiro1024plusplus_next(state):
    s0, s15 = _xoroshiro1024_advance(state)
    return rotl64(s0 + s15, np.uint64(23)) + s15


class _Xoroshiro1024(Engine):
    state_size = _RING + 1
    seed_widths = (64,) * _RING
    default_seed = splitmix64_words(0, _RING)
    nonzero_seed = True

    def _load_seed(self, words):
        load_words(self._state, words)
        self._state[_RING] = np.uint64(0)


class Xoroshiro1024Star(_Xoroshiro1024):
    name = "Xoroshiro 1024*"
    _step = staticmethod(xoroshiro1024star_next)
    _bulk = staticmethod(make_bulk(xoroshiro1024star_next))


class Xoroshiro1024StarStar(_Xoroshiro1024):
    name = "Xoroshiro 1024**"
    _step = staticmethod(xoroshiro1024starstar_next)
    _bulk = staticmethod(make_bulk(xoroshiro1024starstar_next))


class Xoroshiro1024PlusPlus(_Xoroshiro1024):
    name = "Xoroshiro 1024++"
    _step = staticmethod(xoroshiro1024plusplus_next)
    _bulk = staticmethod(make_bulk(xoroshiro1024plusplus_next))
