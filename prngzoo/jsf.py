import numpy as np
from numba import njit
from numba import uint64

from .bit_helpers import M32, rotl32, rotl64
from .engine import Engine, INITIAL_ROLL, load_words, make_bulk

# ─────────────────────────────────────────────────────────────────────────────
#  Jenkins Small Fast: state = [a, b, c, d]
# ─────────────────────────────────────────────────────────────────────────────
_JSF_A = 0xF1EA5EED


@njit(uint64(uint64[::1]), nogil=True)
def jsf32_next(state):
    a = state[0]
    b = state[1]
    c = state[2]
    d = state[3]
    e = (a - rotl32(b, np.uint64(27))) & M32
    a = b ^ rotl32(c, np.uint64(17))
    b = (c + d) & M32
    c = (d + e) & M32
    d = (e + a) & M32
    state[0] = a
    state[1] = b
    state[2] = c
    state[3] = d
    return d


@njit(uint64(uint64[::1]), nogil=True)
def jsf64_next(state):
    a = state[0]
    b = state[1]
    c = state[2]
    d = state[3]
    e = a - rotl64(b, np.uint64(7))
    a = b ^ rotl64(c, np.uint64(13))
    b = c + rotl64(d, np.uint64(37))
    c = d + e
    d = e + a
    state[0] = a
    state[1] = b
    state[2] = c
    state[3] = d
    return d


class _Jsf(Engine):
    state_size = 4
    default_seed = (0,)

    def _load_seed(self, words):
        s = words[0]
        load_words(self._state, (_JSF_A, s, s, s))
        self._roll(INITIAL_ROLL)


class JSF32(_Jsf):
    name = "JSF 32-bit"
    word_bits = 32
    seed_widths = (32,)
    _step = staticmethod(jsf32_next)
    _bulk = staticmethod(make_bulk(jsf32_next))


class JSF64(_Jsf):
    name = "JSF 64-bit"
    seed_widths = (64,)
    _step = staticmethod(jsf64_next)
    _bulk = staticmethod(make_bulk(jsf64_next))
