"""AES-256 CTR_DRBG as used for generating NIST known-answer tests."""

from __future__ import annotations

from typing import Optional

from .aes import AES

SEED_BYTES = 48
_KEY_BYTES = 32
_V_BYTES = 16
_V_MASK = (1 << 128) - 1


def _increment(v: bytes) -> bytes:
    return ((int.from_bytes(v, "big") + 1) & _V_MASK).to_bytes(_V_BYTES, "big")


class NistKatDrbg:
    """Deterministic random byte generator seeded with 48 bytes of entropy."""

    def __init__(
        self,
        entropy_input: bytes,
        personalization: Optional[bytes] = None,
        security_strength: int = 256,
    ) -> None:
        if security_strength != 256:
            raise ValueError("only a security strength of 256 is supported")
        seed_material = bytes(entropy_input)
        if len(seed_material) != SEED_BYTES:
            raise ValueError(f"entropy input must be {SEED_BYTES} bytes, got {len(seed_material)}")
        if personalization is not None:
            personalization = bytes(personalization)
            if len(personalization) != SEED_BYTES:
                raise ValueError(
                    f"personalization string must be {SEED_BYTES} bytes, got {len(personalization)}"
                )
            seed_material = bytes(a ^ b for a, b in zip(seed_material, personalization))
        self._key = bytes(_KEY_BYTES)
        self._v = bytes(_V_BYTES)
        self._update(seed_material)
        self.reseed_counter = 1

    def _update(self, provided_data: Optional[bytes]) -> None:
        cipher = AES(self._key)
        blocks = bytearray()
        v = self._v
        for _ in range(3):
            v = _increment(v)
            blocks += cipher.ecb(v)
        if provided_data is not None:
            blocks = bytearray(a ^ b for a, b in zip(blocks, provided_data))
        self._key = bytes(blocks[:_KEY_BYTES])
        self._v = bytes(blocks[_KEY_BYTES:])

    def random_bytes(self, n: int) -> bytes:
        """Return ``n`` pseudo-random bytes and advance the generator."""
        if n < 0:
            raise ValueError("byte count must be non-negative")
        cipher = AES(self._key)
        out = bytearray()
        while len(out) < n:
            self._v = _increment(self._v)
            out += cipher.ecb(self._v)
        self._update(None)
        self.reseed_counter += 1
        return bytes(out[:n])