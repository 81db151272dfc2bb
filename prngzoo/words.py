"""Word-width adaptation: derived outputs from a 32- or 64-bit native word.

The adapters are stateless; every method takes the engine it draws from, so one
adapter instance serves every engine of the same width.
"""

from __future__ import annotations

from .bit_helpers import to_signed


def _byte_view(buffer) -> memoryview:
    if buffer is None:
        raise ValueError("buffer can't be None")
    view = memoryview(buffer)
    if view.readonly:
        raise ValueError("buffer is read-only")
    if not view.c_contiguous:
        raise ValueError("buffer must be contiguous")
    if view.nbytes == 0:
        raise ValueError("buffer can't be empty")
    return view.cast("B")


class _Words:
    bits = 0
    _le = ""

    def next_i32(self, engine) -> int:
        return to_signed(self.next_u32(engine), 32)

    def next_i64(self, engine) -> int:
        return to_signed(self.next_u64(engine), 64)

    def fill(self, engine, buffer) -> None:
        """
        Overwrite `buffer` with little-endian native words. A trailing partial
        word still costs one advance; only its low bytes are written.
        """
        view = _byte_view(buffer)
        size = self.bits // 8
        n = view.nbytes
        raw = engine.random_raw(-(-n // size))
        view[:] = raw.astype(self._le).tobytes()[:n]

    def next_bytes(self, engine, length: int) -> bytes:
        if length <= 0:
            raise ValueError("length must be positive")
        out = bytearray(length)
        self.fill(engine, out)
        return bytes(out)


class Words32(_Words):
    bits = 32
    _le = "<u4"

    def next_bool(self, engine) -> bool:
        return (engine.advance() >> 31) == 0

    def next_byte(self, engine) -> int:
        return engine.advance() >> 24

    def next_u32(self, engine) -> int:
        return engine.advance()

    def next_u64(self, engine) -> int:
        hi = engine.advance()
        return (hi << 32) | engine.advance()


class Words64(_Words):
    bits = 64
    _le = "<u8"

    def next_bool(self, engine) -> bool:
        return (engine.advance() >> 63) == 0

    def next_byte(self, engine) -> int:
        return engine.advance() >> 56

    def next_u32(self, engine) -> int:
        return engine.advance() >> 32

    def next_u64(self, engine) -> int:
        return engine.advance()


WORDS32 = Words32()
WORDS64 = Words64()


def words_for(engine) -> _Words:
    if engine.word_bits == 32:
        return WORDS32
    if engine.word_bits == 64:
        return WORDS64
    raise ValueError(f"unsupported word width {engine.word_bits}")

