import numpy as np
from numba import njit
from numba import uint64

from .bit_helpers import rotl64
from .engine import Engine, INITIAL_ROLL, load_words, make_bulk

# ─────────────────────────────────────────────────────────────────────────────
#  gjrand 64-bit: state = [a, b, c, d], d is a Weyl counter
# ─────────────────────────────────────────────────────────────────────────────
_WEYL = np.uint64(0x55AA96A5)


@njit(uint64(uint64[::1]), nogil=True)
def gjrand64_next(state):
    a = state[0]
    b = state[1]
    c = state[2]
    d = state[3]

    b += c
    a = rotl64(a, np.uint64(32))
    c ^= b
    d += _WEYL
    a += b
    c = rotl64(c, np.uint64(23))
    b ^= a
    a += c
    b = rotl64(b, np.uint64(19))
    c += a
    b += d

    state[0] = a
    state[1] = b
    state[2] = c
    state[3] = d
    return a


class GJrand64(Engine):
    name = "Gjrand"
    state_size = 4
    seed_widths = (64, 64, 64, 64)
    default_seed = (0xCAFEF00DBEEF5EED, 0, 0, 0)
    _step = staticmethod(gjrand64_next)
    _bulk = staticmethod(make_bulk(gjrand64_next))

    def _load_seed(self, words):
        load_words(self._state, words)
        self._roll(INITIAL_ROLL)
