import numpy as np
from numba import njit
from numba import uint64

from .bit_helpers import M32, rotl32, rotl64
from .engine import Engine, load_words, make_bulk
from .splitmix import splitmix64_words

# ─────────────────────────────────────────────────────────────────────────────
#  Romu: each step reads only the previous state words and returns one of them
# ─────────────────────────────────────────────────────────────────────────────
_ROMU64 = np.uint64(15241094284759029579)
_ROMU32 = np.uint64(3323815723)


@njit(uint64(uint64[::1]), nogil=True)
def romu_duo_next(state):
    xp = state[0]
    yp = state[1]
    state[0] = _ROMU64 * yp
    state[1] = rotl64(yp, np.uint64(36)) + rotl64(yp, np.uint64(15)) - xp
    return xp


@njit(uint64(uint64[::1]), nogil=True)
def romu_duo_jr_next(state):
    xp = state[0]
    yp = state[1]
    state[0] = _ROMU64 * yp
    state[1] = rotl64(yp - xp, np.uint64(27))
    return xp


@njit(uint64(uint64[::1]), nogil=True)
def romu_trio_next(state):
    xp = state[0]
    yp = state[1]
    zp = state[2]
    state[0] = _ROMU64 * zp
    state[1] = rotl64(yp - xp, np.uint64(12))
    state[2] = rotl64(zp - yp, np.uint64(44))
    return xp


@njit(uint64(uint64[::1]), nogil=True)
def romu_trio32_next(state):
    xp = state[0]
    yp = state[1]
    zp = state[2]
    state[0] = (_ROMU32 * zp) & M32
    state[1] = rotl32((yp - xp) & M32, np.uint64(6))
    state[2] = rotl32((zp - yp) & M32, np.uint64(22))
    return xp


@njit(uint64(uint64[::1]), nogil=True)
def romu_quad_next(state):
    wp = state[0]
    xp = state[1]
    yp = state[2]
    zp = state[3]
    state[0] = _ROMU64 * zp
    state[1] = zp + rotl64(wp, np.uint64(52))
    state[2] = yp - xp
    state[3] = rotl64(yp + wp, np.uint64(19))
    return xp


class _Romu(Engine):
    nonzero_seed = True

    def _load_seed(self, words):
        load_words(self._state, words)


class RomuDuo(_Romu):
    name = "Romu Duo 64-bit"
    state_size = 2
    seed_widths = (64, 64)
    default_seed = splitmix64_words(0, 2)
    _step = staticmethod(romu_duo_next)
    _bulk = staticmethod(make_bulk(romu_duo_next))


class RomuDuoJr(_Romu):
    name = "Romu Duo Jr 64-bit"
    state_size = 2
    seed_widths = (64, 64)
    default_seed = splitmix64_words(0, 2)
    _step = staticmethod(romu_duo_jr_next)
    _bulk = staticmethod(make_bulk(romu_duo_jr_next))


class RomuTrio(_Romu):
    name = "Romu Trio 64-bit"
    state_size = 3
    seed_widths = (64, 64, 64)
    default_seed = splitmix64_words(0, 3)
    _step = staticmethod(romu_trio_next)
    _bulk = staticmethod(make_bulk(romu_trio_next))


class RomuTrio32(_Romu):
    name = "Romu Trio 32-bit"
    word_bits = 32
    state_size = 3
    seed_widths = (32, 32, 32)
    default_seed = tuple(w & 0xFFFFFFFF for w in splitmix64_words(0, 3))
    _step = staticmethod(romu_trio32_next)
    _bulk = staticmethod(make_bulk(romu_trio32_next))


class RomuQuad(_Romu):
    name = "Romu Quad 64-bit"
    state_size = 4
    seed_widths = (64, 64, 64, 64)
    default_seed = splitmix64_words(0, 4)
    _step = staticmethod(romu_quad_next)
    _bulk = staticmethod(make_bulk(romu_quad_next))
