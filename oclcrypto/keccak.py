"""Keccak-f[1600] permutation and an incremental sponge built on it."""

from __future__ import annotations

import struct
from typing import Iterable, List

_MASK64 = (1 << 64) - 1
_STATE_BYTES = 200
_LANES = 25

# Rotation offsets for each lane, indexed by x + 5 * y.
_RHO = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)


def _round_constants(rounds: int = 24) -> tuple:
    """Derive the iota round constants from the Keccak LFSR."""
    constants = []
    lfsr = 1
    for _ in range(rounds):
        value = 0
        for j in range(7):
            if lfsr & 1:
                value |= 1 << ((1 << j) - 1)
            lfsr = ((lfsr << 1) ^ 0x71) & 0xFF if lfsr & 0x80 else (lfsr << 1) & 0xFF
        constants.append(value)
    return tuple(constants)


_ROUND_CONSTANTS = _round_constants()


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def keccak_f1600(state: Iterable[int]) -> List[int]:
    """Apply the 24-round Keccak-f[1600] permutation to 25 lanes.

    Returns a new list of 25 unsigned 64-bit lanes.
    """
    a = list(state)
    if len(a) != _LANES:
        raise ValueError(f"Keccak state must have {_LANES} lanes, got {len(a)}")
    if any(not 0 <= lane <= _MASK64 for lane in a):
        raise ValueError("Keccak lanes must be unsigned 64-bit integers")

    for rc in _ROUND_CONSTANTS:
        # theta
        c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ _rotl(c[(x + 1) % 5], 1) for x in range(5)]
        a = [lane ^ d[i % 5] for i, lane in enumerate(a)]

        # rho and pi
        b = [0] * _LANES
        for i, lane in enumerate(a):
            x, y = i % 5, i // 5
            b[y + 5 * ((2 * x + 3 * y) % 5)] = _rotl(lane, _RHO[i])

        # chi
        a = [
            b[i] ^ (~b[5 * (i // 5) + (i % 5 + 1) % 5] & b[5 * (i // 5) + (i % 5 + 2) % 5])
            for i in range(_LANES)
        ]

        # iota
        a[0] ^= rc

    return a


class KeccakSponge:
    """Incremental Keccak sponge: absorb, finalize with a domain byte, squeeze."""

    def __init__(self, rate: int) -> None:
        if rate % 8 != 0 or not 8 <= rate < _STATE_BYTES:
            raise ValueError(f"rate must be a multiple of 8 in [8, {_STATE_BYTES}), got {rate}")
        self.rate = rate
        self._state = bytearray(_STATE_BYTES)
        self._pos = 0
        self._available = 0
        self._squeezing = False

    def _permute(self) -> None:
        lanes = struct.unpack("<25Q", self._state)
        self._state[:] = struct.pack("<25Q", *keccak_f1600(lanes))

    def _xor_into(self, offset: int, chunk: bytes) -> None:
        end = offset + len(chunk)
        mixed = int.from_bytes(self._state[offset:end], "little") ^ int.from_bytes(chunk, "little")
        self._state[offset:end] = mixed.to_bytes(len(chunk), "little")

    def absorb(self, data: bytes) -> "KeccakSponge":
        """Absorb more input; may be called any number of times before finalize."""
        if self._squeezing:
            raise ValueError("cannot absorb after the sponge has been finalized")
        view = memoryview(bytes(data))
        while view:
            take = min(len(view), self.rate - self._pos)
            self._xor_into(self._pos, view[:take].tobytes())
            self._pos += take
            view = view[take:]
            if self._pos == self.rate:
                self._permute()
                self._pos = 0
        return self

    def finalize(self, domain: int) -> "KeccakSponge":
        """Pad with the domain-separation byte and switch to squeezing."""
        if self._squeezing:
            raise ValueError("sponge has already been finalized")
        if not 0 <= domain <= 0xFF:
            raise ValueError("domain byte must be in range 0..255")
        self._state[self._pos] ^= domain
        self._state[self.rate - 1] ^= 0x80
        self._pos = 0
        self._available = 0
        self._squeezing = True
        return self

    def squeeze(self, outlen: int) -> bytes:
        """Return the next ``outlen`` output bytes; may be called repeatedly."""
        if not self._squeezing:
            raise ValueError("sponge must be finalized before squeezing")
        if outlen < 0:
            raise ValueError("output length must be non-negative")
        out = bytearray()
        if self._available:
            start = self.rate - self._available
            take = min(outlen, self._available)
            out += self._state[start:start + take]
            self._available -= take
        while len(out) < outlen:
            self._permute()
            take = min(outlen - len(out), self.rate)
            out += self._state[:take]
            self._available = self.rate - take
        return bytes(out)

    def copy(self) -> "KeccakSponge":
        """Return an independent copy of this sponge."""
        clone = KeccakSponge(self.rate)
        clone._state[:] = self._state
        clone._pos = self._pos
        clone._available = self._available
        clone._squeezing = self._squeezing
        return clone