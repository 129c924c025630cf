"""AES-256 based seed expander producing a bounded stream of bytes."""

from __future__ import annotations

from .aes import AES, AES_BLOCKBYTES

SEED_LEN = 32
DIVERSIFIER_LEN = 8
_CTR_MASK = 0xFFFFFFFF


class SeedExpander:
    """Expand a 32-byte seed and 8-byte diversifier into up to ``maxlen`` bytes."""

    def __init__(self, seed: bytes, diversifier: bytes, maxlen: int) -> None:
        seed = bytes(seed)
        diversifier = bytes(diversifier)
        if len(seed) != SEED_LEN:
            raise ValueError(f"seed must be {SEED_LEN} bytes, got {len(seed)}")
        if len(diversifier) != DIVERSIFIER_LEN:
            raise ValueError(f"diversifier must be {DIVERSIFIER_LEN} bytes, got {len(diversifier)}")
        if maxlen < 0:
            raise ValueError("maxlen must be non-negative")
        self.length_remaining = maxlen
        self._cipher = AES(seed)
        self._prefix = diversifier + (maxlen & _CTR_MASK).to_bytes(4, "big")
        self._counter = 0
        self._buffer = bytes(AES_BLOCKBYTES)
        self._pos = AES_BLOCKBYTES

    def _refill(self) -> None:
        block = self._prefix + self._counter.to_bytes(4, "big")
        self._buffer = self._cipher.ecb(block)
        self._pos = 0
        self._counter = (self._counter + 1) & _CTR_MASK

    def read(self, n: int) -> bytes:
        """Return the next ``n`` bytes of the stream.

        Raises ValueError if ``n`` is not strictly less than the bytes remaining.
        """
        if n < 0:
            raise ValueError("byte count must be non-negative")
        if n >= self.length_remaining:
            raise ValueError(
                f"requested {n} bytes but only fewer than {self.length_remaining} may be read"
            )
        self.length_remaining -= n
        out = bytearray()
        while n > 0:
            available = AES_BLOCKBYTES - self._pos
            if n <= available:
                out += self._buffer[self._pos:self._pos + n]
                self._pos += n
                break
            out += self._buffer[self._pos:]
            n -= available
            self._refill()
        return bytes(out)