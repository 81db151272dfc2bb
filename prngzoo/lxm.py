"""LXM generators: an LCG and a xor-based generator combined by a Lea mix.

Both sub-generators advance independently; the output mixes their *old*
states. Jumps move only the LCG, which keeps the XBG sequence intact and
yields non-overlapping streams.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit
from numba import uint64

from .bit_helpers import M32, lcg_advance, lea32, lea64, rotl32, rotl64
from .engine import Engine, load_words, make_bulk

log = logging.getLogger(__name__)

LXM_M32 = 0xADB4A92D
LXM_M32P = 0x65640001   # M32^(2^16)
LXM_C32P = 0x046B0000   # sum_{i<2^16} M32^i
LXM_M64 = 0xD1342543DE82EF95
LXM_M64P = 0x8D23804C00000001   # M64^(2^32)
LXM_C64P = 0x16691C9700000000   # sum_{i<2^32} M64^i

_M32 = np.uint64(LXM_M32)
_M64 = np.uint64(LXM_M64)


# ─────────────────────────────────────────────────────────────────────────────
#  Kernels: state = [a (odd LCG addend), s (LCG state), x0, x1]
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64[::1]), nogil=True)
def l32x64mix_next(state):
    a = state[0]
    s = state[1]
    x0 = state[2]
    x1 = state[3]

    z = lea32((s + x0) & M32)
    state[1] = (_M32 * s + a) & M32

    # xoroshiro64
    x1 ^= x0
    state[2] = rotl32(x0, np.uint64(26)) ^ x1 ^ ((x1 << np.uint64(9)) & M32)
    state[3] = rotl32(x1, np.uint64(13))
    return z


@njit(uint64(uint64[::1]), nogil=True)
def l64x128mix_next(state):
    a = state[0]
    s = state[1]
    x0 = state[2]
    x1 = state[3]

    z = lea64(s + x0)
    state[1] = _M64 * s + a

    # xoroshiro128
    x1 ^= x0
    state[2] = rotl64(x0, np.uint64(24)) ^ x1 ^ (x1 << np.uint64(16))
    state[3] = rotl64(x1, np.uint64(37))
    return z


class _Lxm(Engine):
    """
    Seed is (a, s, x0, x1): `a` is forced odd for a full-period LCG and
    (x0, x1) must not both be zero.
    """
    state_size = 4
    default_seed = (0, 0, 1, 1)

    _lcg_mult = 0
    _long_mult = 0
    _long_add = 0
    long_jump_steps = 0

    @property
    def _mask(self) -> int:
        return (1 << self.word_bits) - 1

    def _load_seed(self, words):
        if words[2] == 0 and words[3] == 0:
            raise ValueError(f"{self.name}: xor-based state (seed[2], seed[3]) can't be all zero")
        load_words(self._state, (words[0] | 1,) + words[1:])

    def _lcg(self):
        return int(self._state[0]), int(self._state[1])

    def jump(self) -> None:
        """Advance the LCG by one cycle; the XBG state is unchanged."""
        a, s = self._lcg()
        self._state[1] = np.uint64((self._lcg_mult * s + a) & self._mask)

    def long_jump(self) -> None:
        """Advance the LCG by 2^16 (32-bit LCG) or 2^32 (64-bit LCG) cycles."""
        a, s = self._lcg()
        self._state[1] = np.uint64((self._long_mult * s + self._long_add * a) & self._mask)
        log.debug("%s long jump", self.name)

    def jump_lcg(self, delta: int) -> None:
        """Advance the LCG by an arbitrary number of cycles."""
        a, s = self._lcg()
        self._state[1] = np.uint64(lcg_advance(s, delta, self._lcg_mult, a, self._mask))

    def jump_stream(self) -> None:
        self.long_jump()


class L32X64Mix(_Lxm):
    name = "L32X64Mix"
    word_bits = 32
    seed_widths = (32, 32, 32, 32)
    _lcg_mult = LXM_M32
    _long_mult = LXM_M32P
    _long_add = LXM_C32P
    long_jump_steps = 1 << 16
    _step = staticmethod(l32x64mix_next)
    _bulk = staticmethod(make_bulk(l32x64mix_next))


class L64X128Mix(_Lxm):
    name = "L64X128Mix"
    seed_widths = (64, 64, 64, 64)
    _lcg_mult = LXM_M64
    _long_mult = LXM_M64P
    _long_add = LXM_C64P
    long_jump_steps = 1 << 32
    _step = staticmethod(l64x128mix_next)
    _bulk = staticmethod(make_bulk(l64x128mix_next))

    def reseed(self, entropy=None) -> None:
        raise NotImplementedError(f"{self.name} has no entropy sizing strategy; use set_seed()")
