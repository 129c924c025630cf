"""SHA-256 with an incremental block API and a one-shot helper."""

from __future__ import annotations

from .sha256_core import BLOCK_BYTES, IV_256, compress

DIGEST_BYTES = 32
_MASK64 = (1 << 64) - 1
_LENGTH_OFFSET = BLOCK_BYTES - 8


class Sha256:
    """Incremental SHA-256.

    Whole 64-byte blocks are fed with :meth:`update_blocks`; any remaining
    bytes go to :meth:`finalize`, which returns the digest and ends the state.
    """

    def __init__(self) -> None:
        self._state = IV_256
        self._count = 0
        self._finalized = False

    def _check_open(self) -> None:
        if self._finalized:
            raise ValueError("hash state has already been finalized")

    def update_blocks(self, data: bytes) -> "Sha256":
        """Absorb ``data``, whose length must be a multiple of 64 bytes."""
        self._check_open()
        data = bytes(data)
        if len(data) % BLOCK_BYTES:
            raise ValueError(
                f"block input length must be a multiple of {BLOCK_BYTES} bytes, got {len(data)}"
            )
        self._state = compress(self._state, data)
        self._count += len(data)
        return self

    def finalize(self, data: bytes = b"") -> bytes:
        """Absorb the last ``data`` of any length and return the 32-byte digest."""
        self._check_open()
        data = bytes(data)
        total = self._count + len(data)
        state = compress(self._state, data)

        tail = data[len(data) - len(data) % BLOCK_BYTES:]
        padded = tail + b"\x80"
        target = _LENGTH_OFFSET if len(tail) < _LENGTH_OFFSET else BLOCK_BYTES + _LENGTH_OFFSET
        padded += bytes(target - len(padded))
        padded += ((total * 8) & _MASK64).to_bytes(8, "big")
        state = compress(state, padded)

        self._state = state
        self._count = total
        self._finalized = True
        return state[:DIGEST_BYTES]

    def copy(self) -> "Sha256":
        """Return an independent copy of this state."""
        self._check_open()
        clone = Sha256()
        clone._state = self._state
        clone._count = self._count
        return clone


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return Sha256().finalize(data)