"""PCG family: an LCG (or MCG) step followed by an output permutation.

64-bit state variants output the permutation of the *old* state; the 128-bit
variants step first and permute the new state, as the reference pcg64 does.
Every variant can jump ahead (or back) by an arbitrary delta in O(log delta).
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit
from numba import uint64

from .bit_helpers import MASK64, M32, add128, lcg_advance, mul128, rotr32, rotr64
from .engine import Engine, make_bulk

log = logging.getLogger(__name__)

PCG64_MULT = 6364136223846793005
PCG64_DEFAULT_INC = 1442695040888963407
PCG32_MULT = 747796405
PCG32_DEFAULT_INC = 2891336453
PCG128_MULT = (2549297995355413924 << 64) | 4865540595714422341
PCG128_DEFAULT_INC = (6364136223846793005 << 64) | 1442695040888963407

_M64 = np.uint64(PCG64_MULT)
_M32 = np.uint64(PCG32_MULT)
_M128_HI = np.uint64(PCG128_MULT >> 64)
_M128_LO = np.uint64(PCG128_MULT & MASK64)
_RXS32 = np.uint64(277803737)
_RXS64 = np.uint64(12605985483714917081)


# ─────────────────────────────────────────────────────────────────────────────
#  Output permutations (64-bit state → 32-bit word)
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64), nogil=True, inline='always', no_cpython_wrapper=True)
def _xsh_rr_64_32(old):
    xorshifted = (((old >> np.uint64(18)) ^ old) >> np.uint64(27)) & M32
    return rotr32(xorshifted, old >> np.uint64(59))


@njit(uint64(uint64), nogil=True, inline='always', no_cpython_wrapper=True)
def _xsh_rs_64_32(old):
    return (((old >> np.uint64(22)) ^ old) >> ((old >> np.uint64(61)) + np.uint64(22))) & M32


@njit(uint64(uint64), nogil=True, inline='always', no_cpython_wrapper=True)
def _xsl_rr_64_32(old):
    return rotr32(((old >> np.uint64(32)) ^ old) & M32, old >> np.uint64(59))


# ─────────────────────────────────────────────────────────────────────────────
#  LCG kernels: state = [s, inc]
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64[::1]), nogil=True)
def pcg_xsh_rr_32_next(state):
    old = state[0]
    state[0] = old * _M64 + state[1]
    return _xsh_rr_64_32(old)


@njit(uint64(uint64[::1]), nogil=True)
def pcg_xsh_rs_32_next(state):
    old = state[0]
    state[0] = old * _M64 + state[1]
    return _xsh_rs_64_32(old)


@njit(uint64(uint64[::1]), nogil=True)
def pcg_xsl_rr_32_next(state):
    old = state[0]
    state[0] = old * _M64 + state[1]
    return _xsl_rr_64_32(old)


@njit(uint64(uint64[::1]), nogil=True)
def pcg_rxs_m_xs_32_next(state):
    # 32-bit LCG
    old = state[0]
    state[0] = (old * _M32 + state[1]) & M32
    word = (((old >> ((old >> np.uint64(28)) + np.uint64(4))) ^ old) * _RXS32) & M32
    return (word >> np.uint64(22)) ^ word


@njit(uint64(uint64[::1]), nogil=True)
def pcg_rxs_m_xs_64_next(state):
    old = state[0]
    state[0] = old * _M64 + state[1]
    word = ((old >> ((old >> np.uint64(59)) + np.uint64(5))) ^ old) * _RXS64
    return (word >> np.uint64(43)) ^ word


@njit(uint64(uint64[::1]), nogil=True)
def pcg_xsl_rr_rr_64_next(state):
    old = state[0]
    state[0] = old * _M64 + state[1]
    high = old >> np.uint64(32)
    low = old & M32
    newlow = rotr32(high ^ low, old >> np.uint64(59))
    newhigh = rotr32(high, newlow & np.uint64(31))
    return (newhigh << np.uint64(32)) | newlow


# ─────────────────────────────────────────────────────────────────────────────
#  128-bit LCG kernels: state = [s_hi, s_lo, inc_hi, inc_lo]
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64[::1]), nogil=True, inline='always', no_cpython_wrapper=True)
def _step128(state):
    hi, lo = mul128(state[0], state[1], _M128_HI, _M128_LO)
    hi, lo = add128(hi, lo, state[2], state[3])
    state[0] = hi
    state[1] = lo
    return hi


@njit(uint64(uint64[::1]), nogil=True)
def pcg_xsh_rr_64_next(state):
    hi = _step128(state)
    lo = state[1]
    # v = (s >> 35) ^ s, output = low 64 bits of v >> 58
    v_hi = hi ^ (hi >> np.uint64(35))
    v_lo = lo ^ ((lo >> np.uint64(35)) | (hi << np.uint64(29)))
    return rotr64((v_lo >> np.uint64(58)) | (v_hi << np.uint64(6)), hi >> np.uint64(58))


@njit(uint64(uint64[::1]), nogil=True)
def pcg_xsl_rr_64_next(state):
    hi = _step128(state)
    return rotr64(hi ^ state[1], hi >> np.uint64(58))


# ─────────────────────────────────────────────────────────────────────────────
#  MCG kernels: state = [s], s odd
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64[::1]), nogil=True)
def pcg_mcg_xsh_rr_32_next(state):
    old = state[0]
    state[0] = old * _M64
    return _xsh_rr_64_32(old)


@njit(uint64(uint64[::1]), nogil=True)
def pcg_mcg_xsh_rs_32_next(state):
    old = state[0]
    state[0] = old * _M64
    return _xsh_rs_64_32(old)


@njit(uint64(uint64[::1]), nogil=True)
def pcg_mcg_xsl_rr_32_next(state):
    old = state[0]
    state[0] = old * _M64
    return _xsl_rr_64_32(old)


# ─────────────────────────────────────────────────────────────────────────────
#  Engines
# ─────────────────────────────────────────────────────────────────────────────
class _PcgBase(Engine):
    lcg_bits = 64
    multiplier = PCG64_MULT

    @property
    def _mask(self) -> int:
        return (1 << self.lcg_bits) - 1

    def _get_lcg(self) -> tuple:
        return int(self._state[0]), int(self._state[1])

    def _put_lcg(self, s: int, inc: int) -> None:
        self._state[0] = np.uint64(s)
        self._state[1] = np.uint64(inc)

    @property
    def increment(self) -> int:
        return self._get_lcg()[1]

    def jump(self, delta: int) -> None:
        """Advance by `delta` steps; negative deltas step backwards."""
        s, inc = self._get_lcg()
        self._put_lcg(lcg_advance(s, delta, self.multiplier, inc, self._mask), inc)
        log.debug("%s jumped by %d", self.name, delta)

    def jump_stream(self) -> None:
        self.jump(1 << (self.lcg_bits // 2))


class _PcgLcg(_PcgBase):
    """Seed is (initstate, initseq); the stream selector maps to inc = 2*seq + 1."""
    state_size = 2
    seed_widths = (64, 64)
    min_seeds = 1
    default_seed = (0, PCG64_DEFAULT_INC >> 1)

    def _load_seed(self, words):
        mask = self._mask
        seq = words[1] if len(words) > 1 else self.default_seed[1]
        inc = ((seq << 1) | 1) & mask
        s = inc
        s = (s + words[0]) & mask
        s = (s * self.multiplier + inc) & mask
        self._put_lcg(s, inc)


class PcgXshRr32(_PcgLcg):
    name = "PCG XSH-RR 32-bit"
    word_bits = 32
    _step = staticmethod(pcg_xsh_rr_32_next)
    _bulk = staticmethod(make_bulk(pcg_xsh_rr_32_next))


class PcgXshRs32(_PcgLcg):
    name = "PCG XSH-RS 32-bit"
    word_bits = 32
    _step = staticmethod(pcg_xsh_rs_32_next)
    _bulk = staticmethod(make_bulk(pcg_xsh_rs_32_next))


class PcgXslRr32(_PcgLcg):
    name = "PCG XSL-RR 32-bit"
    word_bits = 32
    _step = staticmethod(pcg_xsl_rr_32_next)
    _bulk = staticmethod(make_bulk(pcg_xsl_rr_32_next))


class PcgRxsMXs32(_PcgLcg):
    name = "PCG RXS-M-XS 32-bit"
    word_bits = 32
    lcg_bits = 32
    multiplier = PCG32_MULT
    seed_widths = (32, 32)
    default_seed = (0, PCG32_DEFAULT_INC >> 1)
    _step = staticmethod(pcg_rxs_m_xs_32_next)
    _bulk = staticmethod(make_bulk(pcg_rxs_m_xs_32_next))


class PcgRxsMXs64(_PcgLcg):
    name = "PCG RXS-M-XS 64-bit"
    _step = staticmethod(pcg_rxs_m_xs_64_next)
    _bulk = staticmethod(make_bulk(pcg_rxs_m_xs_64_next))


class PcgXslRrRr64(_PcgLcg):
    name = "PCG XSL-RR-RR 64-bit"
    _step = staticmethod(pcg_xsl_rr_rr_64_next)
    _bulk = staticmethod(make_bulk(pcg_xsl_rr_rr_64_next))


class _Pcg128(_PcgLcg):
    lcg_bits = 128
    multiplier = PCG128_MULT
    state_size = 4
    seed_widths = (128, 128)
    default_seed = (0, PCG128_DEFAULT_INC >> 1)

    def _get_lcg(self) -> tuple:
        st = self.state
        return (st[0] << 64) | st[1], (st[2] << 64) | st[3]

    def _put_lcg(self, s: int, inc: int) -> None:
        self._state[0] = np.uint64(s >> 64)
        self._state[1] = np.uint64(s & MASK64)
        self._state[2] = np.uint64(inc >> 64)
        self._state[3] = np.uint64(inc & MASK64)


class PcgXshRr64(_Pcg128):
    name = "PCG XSH-RR 64-bit"
    _step = staticmethod(pcg_xsh_rr_64_next)
    _bulk = staticmethod(make_bulk(pcg_xsh_rr_64_next))


class PcgXslRr64(_Pcg128):
    name = "PCG XSL-RR 64-bit"
    _step = staticmethod(pcg_xsl_rr_64_next)
    _bulk = staticmethod(make_bulk(pcg_xsl_rr_64_next))


class _PcgMcg(_PcgBase):
    """Multiplicative variants: no increment, state forced to 3 mod 4."""
    word_bits = 32
    state_size = 1
    seed_widths = (64,)
    default_seed = (0,)

    def _get_lcg(self) -> tuple:
        return int(self._state[0]), 0

    def _put_lcg(self, s: int, inc: int) -> None:
        self._state[0] = np.uint64(s)

    def _load_seed(self, words):
        self._put_lcg(words[0] | 3, 0)

    def jump_stream(self) -> None:
        # period is 2^62
        self.jump(1 << 31)


class PcgMcgXshRr32(_PcgMcg):
    name = "PCG MCG-XSH-RR 32-bit"
    _step = staticmethod(pcg_mcg_xsh_rr_32_next)
    _bulk = staticmethod(make_bulk(pcg_mcg_xsh_rr_32_next))


class PcgMcgXshRs32(_PcgMcg):
    name = "PCG MCG-XSH-RS 32-bit"
    _step = staticmethod(pcg_mcg_xsh_rs_32_next)
    _bulk = staticmethod(make_bulk(pcg_mcg_xsh_rs_32_next))


class PcgMcgXslRr32(_PcgMcg):
    name = "PCG MCG-XSL-RR 32-bit"
    _step = staticmethod(pcg_mcg_xsl_rr_32_next)
    _bulk = staticmethod(make_bulk(pcg_mcg_xsl_rr_32_next))

