import hashlib

import numpy as np
from numba import njit
from numba import uint64

from .bit_helpers import MASK64
from .engine import Engine, make_bulk

# ─────────────────────────────────────────────────────────────────────────────
#  SplitMix64 core: 1-word state → jitted step
# ─────────────────────────────────────────────────────────────────────────────
GOLDEN_GAMMA = np.uint64(0x9E3779B97F4A7C15)
_MIX1 = np.uint64(0xBF58476D1CE4E5B9)
_MIX2 = np.uint64(0x94D049BB133111EB)


@njit(uint64(uint64[::1]), nogil=True)
def splitmix64_next(state):
    """
    In-place update of a 1-element uint64[::1].
    Returns next 64-bit unsigned integer.
    """
    state[0] += GOLDEN_GAMMA
    z = state[0]
    z = (z ^ (z >> np.uint64(30))) * _MIX1
    z = (z ^ (z >> np.uint64(27))) * _MIX2
    return z ^ (z >> np.uint64(31))


class SplitMix64(Engine):
    name = "SplitMix64"
    state_size = 1
    seed_widths = (64,)
    default_seed = (0,)

    _step = staticmethod(splitmix64_next)
    _bulk = staticmethod(make_bulk(splitmix64_next))

    def _load_seed(self, words):
        self._state[0] = np.uint64(words[0])


# ─────────────────────────────────────────────────────────────────────────────
#  Python-int seed expansion → used by the outer functions
# ─────────────────────────────────────────────────────────────────────────────
def splitmix64_py(x: int) -> int:
    z = (x + 0x9E3779B97F4A7C15) & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return (z ^ (z >> 31)) & MASK64


def splitmix64_words(seed: int, count: int) -> tuple:
    """`count` consecutive SplitMix64 outputs starting from `seed`."""
    x = int(seed) & MASK64
    out = []
    for _ in range(count):
        out.append(splitmix64_py(x))
        x = (x + 0x9E3779B97F4A7C15) & MASK64
    return tuple(out)


def tag_to_u64(tag) -> int:
    h = hashlib.blake2b(digest_size=8)
    if isinstance(tag, (int, np.integer)):
        h.update(b'i'); h.update(int(tag).to_bytes(8, 'little', signed=False))
    else:
        b = str(tag).encode('utf-8')
        h.update(b's'); h.update(len(b).to_bytes(4, 'little')); h.update(b)
    return int.from_bytes(h.digest(), 'little')


def derive_seed_words(master_seed: int, tags, count: int, bits: int = 64) -> tuple:
    """
    Deterministic, non-zero seed words for the sub-task named by `tags`
    (e.g. ("worker", 3)), derived from one master seed.
    """
    if count <= 0:
        raise ValueError("count must be positive")
    x = int(master_seed) & MASK64
    for t in tags:
        x ^= tag_to_u64(t)
        x = splitmix64_py(x); x = splitmix64_py(x)
    mask = (1 << bits) - 1
    words = []
    for w in splitmix64_words(x, count * ((bits + 63) // 64)):
        words.append(w)
    if bits > 64:
        per = bits // 64
        words = [sum(words[i * per + j] << (64 * j) for j in range(per)) for i in range(count)]
    words = [w & mask for w in words]
    if not any(words):
        words[-1] = 1
    return tuple(words)
