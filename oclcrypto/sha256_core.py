"""SHA-256 compression function over whole 64-byte blocks."""

from __future__ import annotations

import struct

BLOCK_BYTES = 64
STATE_BYTES = 32

IV_256 = bytes.fromhex(
    "6a09e667bb67ae853c6ef372a54ff53a510e527f9b05688c1f83d9ab5be0cd19"
)

_MASK32 = 0xFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(x: int, c: int) -> int:
    return ((x >> c) | (x << (32 - c))) & _MASK32


def _compress_block(h: tuple, block: bytes) -> tuple:
    w = list(struct.unpack(">16I", block))
    for t in range(16, 64):
        s0 = _rotr(w[t - 15], 7) ^ _rotr(w[t - 15], 18) ^ (w[t - 15] >> 3)
        s1 = _rotr(w[t - 2], 17) ^ _rotr(w[t - 2], 19) ^ (w[t - 2] >> 10)
        w.append((w[t - 16] + s0 + w[t - 7] + s1) & _MASK32)

    a, b, c, d, e, f, g, hh = h
    for k, wt in zip(_K, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        t1 = (hh + big_s1 + ch + k + wt) & _MASK32
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & _MASK32
        hh, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK32, c, b, a, (t1 + t2) & _MASK32

    return tuple((x + y) & _MASK32 for x, y in zip(h, (a, b, c, d, e, f, g, hh)))


def compress(state: bytes, data: bytes) -> bytes:
    """Run the SHA-256 compression over every whole 64-byte block of ``data``.

    ``state`` is the 32-byte big-endian chaining value; the new chaining
    value is returned. Trailing bytes that do not fill a block are ignored.
    """
    state = bytes(state)
    if len(state) != STATE_BYTES:
        raise ValueError(f"SHA-256 state must be {STATE_BYTES} bytes, got {len(state)}")
    data = bytes(data)
    h = struct.unpack(">8I", state)
    whole = len(data) - len(data) % BLOCK_BYTES
    for offset in range(0, whole, BLOCK_BYTES):
        h = _compress_block(h, data[offset:offset + BLOCK_BYTES])
    return struct.pack(">8I", *h)