import numpy as np
from numba import njit
from numba import uint64

from .engine import Engine, load_words, make_bulk

# ─────────────────────────────────────────────────────────────────────────────
#  Middle Square Weyl Sequence: two interleaved generators
#  state = [x1, w1, s1, x2, w2, s2]
# ─────────────────────────────────────────────────────────────────────────────
MSWS_S1 = 0xB5AD4ECEDA1CE2A9
MSWS_S2 = 0x278C5A4D8419FE6B


@njit(uint64(uint64[::1]), nogil=True)
def msws64_next(state):
    _32 = np.uint64(32)

    w1 = state[1] + state[2]
    x1 = state[0] * state[0] + w1
    out = x1
    x1 = (x1 >> _32) | (x1 << _32)

    w2 = state[4] + state[5]
    x2 = state[3] * state[3] + w2
    x2 = (x2 >> _32) | (x2 << _32)

    state[0] = x1
    state[1] = w1
    state[3] = x2
    state[4] = w2
    return out ^ x2


class MiddleSquareWeylSequence64(Engine):
    name = "Middle Square Weyl Sequence 64-bit"
    state_size = 6
    seed_widths = (64, 64)
    default_seed = (0, 1)
    _step = staticmethod(msws64_next)
    _bulk = staticmethod(make_bulk(msws64_next))

    def _load_seed(self, words):
        s1, s2 = words
        load_words(self._state, (s1, s1, MSWS_S1, s2, s2, MSWS_S2))
