import numpy as np
from numba import njit, types
from numba import int64, uint64

# ─────────────────────────────────────────────────────────────────────────────
#  Word constants shared by the jitted kernels
# ─────────────────────────────────────────────────────────────────────────────
# numba promotes uint64 (op) int64 to float64, so every literal that touches a
# state word is a np.uint64.
ZERO = np.uint64(0)
ONE = np.uint64(1)
M32 = np.uint64(0xFFFFFFFF)
M64 = np.uint64(0xFFFFFFFFFFFFFFFF)
_31 = np.uint64(31)
_32 = np.uint64(32)
_63 = np.uint64(63)
_64 = np.uint64(64)

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1


# ─────────────────────────────────────────────────────────────────────────────
#  Rotations (32-bit variants keep their operand in the low half of a uint64)
# ─────────────────────────────────────────────────────────────────────────────
@njit(uint64(uint64, uint64), nogil=True, inline='always')
def rotl64(x, k):
    k &= _63
    return (x << k) | (x >> ((_64 - k) & _63))


@njit(uint64(uint64, uint64), nogil=True, inline='always')
def rotr64(x, k):
    k &= _63
    return (x >> k) | (x << ((_64 - k) & _63))


@njit(uint64(uint64, uint64), nogil=True, inline='always')
def rotl32(x, k):
    k &= _31
    x &= M32
    return ((x << k) | (x >> ((_32 - k) & _31))) & M32


@njit(uint64(uint64, uint64), nogil=True, inline='always')
def rotr32(x, k):
    k &= _31
    x &= M32
    return ((x >> k) | (x << ((_32 - k) & _31))) & M32


# ─────────────────────────────────────────────────────────────────────────────
#  128-bit arithmetic on (hi, lo) pairs
# ─────────────────────────────────────────────────────────────────────────────
@njit(types.UniTuple(uint64, 2)(uint64, uint64), nogil=True, inline='always')
def umul128(a, b):
    """
    Full 64x64 -> 128 product of two unsigned words.
    Returns (hi, lo).
    """
    a_lo = a & M32
    a_hi = a >> _32
    b_lo = b & M32
    b_hi = b >> _32

    p0 = a_lo * b_lo
    p1 = a_lo * b_hi
    p2 = a_hi * b_lo
    p3 = a_hi * b_hi

    carry = ((p0 >> _32) + (p1 & M32) + (p2 & M32)) >> _32
    hi = p3 + (p1 >> _32) + (p2 >> _32) + carry
    return hi, a * b


@njit(types.UniTuple(uint64, 2)(uint64, uint64, uint64, uint64), nogil=True, inline='always')
def mul128(a_hi, a_lo, b_hi, b_lo):
    hi, lo = umul128(a_lo, b_lo)
    hi += a_hi * b_lo + a_lo * b_hi
    return hi, lo


@njit(types.UniTuple(uint64, 2)(uint64, uint64, uint64, uint64), nogil=True, inline='always')
def add128(a_hi, a_lo, b_hi, b_lo):
    lo = a_lo + b_lo
    hi = a_hi + b_hi
    if lo < a_lo:
        hi += ONE
    return hi, lo


# ─────────────────────────────────────────────────────────────────────────────
#  Bit counting
# ─────────────────────────────────────────────────────────────────────────────
_P1 = np.uint64(0x5555555555555555)
_P2 = np.uint64(0x3333333333333333)
_P4 = np.uint64(0x0F0F0F0F0F0F0F0F)
_H01 = np.uint64(0x0101010101010101)


@njit(int64(uint64), nogil=True)
def popcount64(x):
    x = x - ((x >> ONE) & _P1)
    x = (x & _P2) + ((x >> np.uint64(2)) & _P2)
    x = (x + (x >> np.uint64(4))) & _P4
    return np.int64((x * _H01) >> np.uint64(56))


@njit(int64(uint64), nogil=True)
def log2_floor(x):
    if x == ZERO:
        raise ValueError("log2 of zero is undefined")
    r = 0
    while x > ONE:
        x >>= ONE
        r += 1
    return r


@njit(int64(uint64), nogil=True)
def log2_ceiling(x):
    r = log2_floor(x)
    if x & (x - ONE) != ZERO:
        r += 1
    return r


# ─────────────────────────────────────────────────────────────────────────────
#  Doug Lea's avalanche mixers (LXM output functions)
# ─────────────────────────────────────────────────────────────────────────────
_LEA32 = np.uint64(0xD36D884B)
_LEA64 = np.uint64(0xDABA0B6EB09322E3)
_16 = np.uint64(16)


@njit(uint64(uint64), nogil=True, inline='always')
def lea32(x):
    x &= M32
    x = ((x ^ (x >> _16)) * _LEA32) & M32
    x = ((x ^ (x >> _16)) * _LEA32) & M32
    return x ^ (x >> _16)


@njit(uint64(uint64), nogil=True, inline='always')
def lea64(x):
    x = (x ^ (x >> _32)) * _LEA64
    x = (x ^ (x >> _32)) * _LEA64
    return x ^ (x >> _32)


# ─────────────────────────────────────────────────────────────────────────────
#  Python-int helpers → used on the cold paths (seeding, jumps)
# ─────────────────────────────────────────────────────────────────────────────
def lcg_advance(state: int, delta: int, mult: int, plus: int, mask: int) -> int:
    """
    Advance x -> mult*x + plus by `delta` steps in O(log delta) (Brown, 1994).
    `delta` is taken modulo the period 2^bits, so negative values step back.
    """
    delta &= mask
    acc_mult, acc_plus = 1, 0
    cur_mult, cur_plus = mult & mask, plus & mask
    while delta > 0:
        if delta & 1:
            acc_mult = (acc_mult * cur_mult) & mask
            acc_plus = (acc_plus * cur_mult + cur_plus) & mask
        cur_plus = ((cur_mult + 1) * cur_plus) & mask
        cur_mult = (cur_mult * cur_mult) & mask
        delta >>= 1
    return (acc_mult * state + acc_plus) & mask


def to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned bit pattern as two's complement."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        return value - (1 << bits)
    return value
