"""Entropy sources handed to ``Engine.reseed``.

Any object exposing ``get_nonzero_bytes(n) -> bytes`` can be injected; the
library itself only ships the OS-backed one.
"""

from __future__ import annotations

import os


class OsEntropy:
    """Cryptographically strong bytes from the operating system, zeros removed."""

    def get_nonzero_bytes(self, n: int) -> bytes:
        if n <= 0:
            raise ValueError("requested entropy size must be positive")
        out = bytearray()
        while len(out) < n:
            out.extend(b for b in os.urandom(n - len(out)) if b)
        return bytes(out)
