"""Two-word GF(2)-linear engines with nonlinear output: Seiran and Shioi.

Jumps apply the characteristic polynomial of the state transition, which
costs 128 steps regardless of distance.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit
from numba import uint64, void

from .bit_helpers import rotl64, rotr64
from .engine import Engine, load_words, make_bulk, make_poly_jump
from .splitmix import splitmix64_words

log = logging.getLogger(__name__)

SEIRAN_JUMP32 = (0x40165CBAE9CA6DEB, 0x688E6BFC19485AB1)
SEIRAN_JUMP64 = (0xF4DF34E424CA5C56, 0x2FE2DE5C2E12F601)
SEIRAN_JUMP96 = (0x185F4DF8B7634607, 0x95A98C7025F908B2)

SHIOI_JUMP32 = (0x8003A4B944F009D0, 0x7FFE925EEBD5615B)
SHIOI_JUMP64 = (0x3, 0x0)
SHIOI_JUMP96 = (0x8003A4B944F009D1, 0x7FFE925EEBD5615B)

_29 = np.uint64(29)
_9 = np.uint64(9)
_SHIOI_MULT = np.uint64(0xD2B74407B1CE6E93)
_ASR19_FILL = np.uint64(0xFFFFE00000000000)


# ─────────────────────────────────────────────────────────────────────────────
#  Seiran
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64[::1]), nogil=True)
def seiran_next(state):
    s0 = state[0]
    s1 = state[1]
    result = rotl64((s0 + s1) * np.uint64(9), _29) + s0
    state[0] = s0 ^ rotl64(s1, _29)
    state[1] = s0 ^ (s1 << _9)
    return result


@njit(void(uint64[::1]), nogil=True)
def seiran_previous(state):
    """
    Exact inverse of one seiran_next step.
    With u = rotl(s1, 29): s0' ^ s1' = u ^ (rotr(u, 29) << 9). The map
    u -> rotr(u, 29) << 9 is nilpotent, so the fixed-point iteration is exact.
    """
    y = state[0] ^ state[1]
    u = y
    for _ in range(64):
        u = y ^ (rotr64(u, _29) << _9)
    s1 = rotr64(u, _29)
    state[0] = state[1] ^ (s1 << _9)
    state[1] = s1


seiran_jump = make_poly_jump(seiran_next)


# ─────────────────────────────────────────────────────────────────────────────
#  Shioi
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64), nogil=True, inline='always')
def asr19(x):
    """Arithmetic (sign-filling) right shift by 19 of a 64-bit word."""
    r = x >> np.uint64(19)
    if x >> np.uint64(63):
        r |= _ASR19_FILL
    return r


@njit(uint64(uint64[::1]), nogil=True)
def shioi_next(state):
    s0 = state[0]
    s1 = state[1]
    result = rotl64(s0 * _SHIOI_MULT, _29) + s1
    state[0] = s1
    state[1] = (s0 << np.uint64(2)) ^ asr19(s0) ^ s1
    return result


@njit(void(uint64[::1]), nogil=True)
def shioi_jump64(state):
    # closed form of the polynomial 0b11: state ^ next(state)
    s0 = state[0]
    s1 = state[1]
    state[0] = s0 ^ s1
    state[1] = (s0 << np.uint64(2)) ^ asr19(s0)


shioi_jump = make_poly_jump(shioi_next)


# ─────────────────────────────────────────────────────────────────────────────
#  Engines
# ─────────────────────────────────────────────────────────────────────────────
class _Lfsr(Engine):
    state_size = 2
    seed_widths = (64, 64)
    default_seed = splitmix64_words(0, 2)
    nonzero_seed = True

    _jump = None

    def _load_seed(self, words):
        load_words(self._state, words)

    def jump_polynomial(self, lo: int, hi: int) -> None:
        """Apply the 128-bit jump polynomial hi:lo to the state."""
        self._jump(self._state, np.uint64(lo), np.uint64(hi))
        log.debug("%s polynomial jump (%#x, %#x)", self.name, lo, hi)

    def jump32(self) -> None:
        """Advance by 2^32 steps."""
        self.jump_polynomial(*self._jumps[0])

    def jump64(self) -> None:
        """Advance by 2^64 steps."""
        self.jump_polynomial(*self._jumps[1])

    def jump96(self) -> None:
        """Advance by 2^96 steps."""
        self.jump_polynomial(*self._jumps[2])

    def jump_stream(self) -> None:
        self.jump64()


class Seiran(_Lfsr):
    name = "Seiran"
    _jumps = (SEIRAN_JUMP32, SEIRAN_JUMP64, SEIRAN_JUMP96)
    _step = staticmethod(seiran_next)
    _bulk = staticmethod(make_bulk(seiran_next))
    _jump = staticmethod(seiran_jump)

    def previous(self) -> None:
        """Step the state back by one advance."""
        seiran_previous(self._state)


class Shioi(_Lfsr):
    name = "Shioi"
    _jumps = (SHIOI_JUMP32, SHIOI_JUMP64, SHIOI_JUMP96)
    _step = staticmethod(shioi_next)
    _bulk = staticmethod(make_bulk(shioi_next))
    _jump = staticmethod(shioi_jump)

    def jump64(self) -> None:
        shioi_jump64(self._state)
