import numpy as np
from numba import njit
from numba import uint64, void

from .bit_helpers import M32, rotl32
from .engine import Engine, INITIAL_ROLL, load_words, make_bulk

# ─────────────────────────────────────────────────────────────────────────────
#  Tyche / Tyche-i: ChaCha quarter round over state = [a, b, c, d]
# ─────────────────────────────────────────────────────────────────────────────
_TYCHE_C = 2654435769
_TYCHE_D = 1367130551


@njit(void(uint64[::1]), nogil=True)
def tyche_mix(state):
    a = state[0]
    b = state[1]
    c = state[2]
    d = state[3]
    a = (a + b) & M32; d = rotl32(d ^ a, np.uint64(16))
    c = (c + d) & M32; b = rotl32(b ^ c, np.uint64(12))
    a = (a + b) & M32; d = rotl32(d ^ a, np.uint64(8))
    c = (c + d) & M32; b = rotl32(b ^ c, np.uint64(7))
    state[0] = a
    state[1] = b
    state[2] = c
    state[3] = d


@njit(void(uint64[::1]), nogil=True)
def tychei_mix(state):
    """Algebraic inverse of tyche_mix."""
    a = state[0]
    b = state[1]
    c = state[2]
    d = state[3]
    b = rotl32(b, np.uint64(25)) ^ c; c = (c - d) & M32
    d = rotl32(d, np.uint64(24)) ^ a; a = (a - b) & M32
    b = rotl32(b, np.uint64(20)) ^ c; c = (c - d) & M32
    d = rotl32(d, np.uint64(16)) ^ a; a = (a - b) & M32
    state[0] = a
    state[1] = b
    state[2] = c
    state[3] = d


@njit(uint64(uint64[::1]), nogil=True)
def tyche_next(state):
    tyche_mix(state)
    return state[1]


@njit(uint64(uint64[::1]), nogil=True)
def tychei_next(state):
    tychei_mix(state)
    return state[0]


class Tyche(Engine):
    """Seed is (seed, idx): a 64-bit seed split across a and b, idx a 32-bit stream key."""
    name = "Tyche"
    word_bits = 32
    state_size = 4
    seed_widths = (64, 32)
    min_seeds = 1
    default_seed = (0, 0)
    _step = staticmethod(tyche_next)
    _bulk = staticmethod(make_bulk(tyche_next))

    def _load_seed(self, words):
        seed = words[0]
        idx = words[1] if len(words) > 1 else 0
        load_words(self._state, (seed >> 32, seed & 0xFFFFFFFF, _TYCHE_C, idx ^ _TYCHE_D))
        self._roll(INITIAL_ROLL)


class Tychei(Tyche):
    name = "Tyche-i"
    default_seed = (0xFEEDFACECAFEF00D, 0)
    _step = staticmethod(tychei_next)
    _bulk = staticmethod(make_bulk(tychei_next))
