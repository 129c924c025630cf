"""AES block cipher (128/192/256-bit keys) with ECB and CTR modes."""

from __future__ import annotations

from typing import List, Tuple

AES128_KEYBYTES = 16
AES192_KEYBYTES = 24
AES256_KEYBYTES = 32
AESCTR_NONCEBYTES = 12
AES_BLOCKBYTES = 16

_ROUNDS_BY_KEYLEN = {
    AES128_KEYBYTES: 10,
    AES192_KEYBYTES: 12,
    AES256_KEYBYTES: 14,
}


def _xtime(a: int) -> int:
    a <<= 1
    if a & 0x100:
        a ^= 0x11B
    return a


def _gf_mul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _gf_inverse(a: int) -> int:
    # a^254 is the multiplicative inverse in GF(2^8); 0 maps to 0.
    result = 1
    base = a
    exponent = 254
    while exponent:
        if exponent & 1:
            result = _gf_mul(result, base)
        base = _gf_mul(base, base)
        exponent >>= 1
    return result if a else 0


def _rotl8(x: int, shift: int) -> int:
    return ((x << shift) | (x >> (8 - shift))) & 0xFF


def _build_sbox() -> Tuple[int, ...]:
    table = []
    for value in range(256):
        inv = _gf_inverse(value)
        table.append(
            inv ^ _rotl8(inv, 1) ^ _rotl8(inv, 2) ^ _rotl8(inv, 3) ^ _rotl8(inv, 4) ^ 0x63
        )
    return tuple(table)


_SBOX = _build_sbox()
_MUL2 = tuple(_xtime(v) for v in range(256))
_MUL3 = tuple(_xtime(v) ^ v for v in range(256))
_RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)


def _expand_key(key: bytes, rounds: int) -> List[bytes]:
    nk = len(key) // 4
    words = [list(key[4 * i:4 * i + 4]) for i in range(nk)]
    for i in range(nk, 4 * (rounds + 1)):
        temp = list(words[i - 1])
        if i % nk == 0:
            temp = temp[1:] + temp[:1]
            temp = [_SBOX[b] for b in temp]
            temp[0] ^= _RCON[i // nk - 1]
        elif nk > 6 and i % nk == 4:
            temp = [_SBOX[b] for b in temp]
        words.append([a ^ b for a, b in zip(words[i - nk], temp)])
    return [
        bytes(b for word in words[4 * r:4 * r + 4] for b in word)
        for r in range(rounds + 1)
    ]


def _add_round_key(state: List[int], round_key: bytes) -> List[int]:
    return [s ^ k for s, k in zip(state, round_key)]


def _sub_shift(state: List[int]) -> List[int]:
    # SubBytes followed by ShiftRows; byte (row r, column c) lives at r + 4c.
    return [_SBOX[state[r + 4 * ((c + r) % 4)]] for c in range(4) for r in range(4)]


def _mix_columns(state: List[int]) -> List[int]:
    out: List[int] = []
    for c in range(4):
        a0, a1, a2, a3 = state[4 * c:4 * c + 4]
        out += (
            _MUL2[a0] ^ _MUL3[a1] ^ a2 ^ a3,
            a0 ^ _MUL2[a1] ^ _MUL3[a2] ^ a3,
            a0 ^ a1 ^ _MUL2[a2] ^ _MUL3[a3],
            _MUL3[a0] ^ a1 ^ a2 ^ _MUL2[a3],
        )
    return out


class AES:
    """AES encryption under a 16-, 24- or 32-byte key."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        try:
            self.rounds = _ROUNDS_BY_KEYLEN[len(key)]
        except KeyError:
            raise ValueError(
                f"AES key must be 16, 24 or 32 bytes, got {len(key)}"
            ) from None
        self.key_size = len(key)
        self._round_keys = _expand_key(key, self.rounds)

    def _encrypt_block(self, block: bytes) -> bytes:
        state = _add_round_key(list(block), self._round_keys[0])
        for round_key in self._round_keys[1:-1]:
            state = _add_round_key(_mix_columns(_sub_shift(state)), round_key)
        state = _add_round_key(_sub_shift(state), self._round_keys[-1])
        return bytes(state)

    def ecb(self, data: bytes) -> bytes:
        """Encrypt whole 16-byte blocks independently."""
        data = bytes(data)
        if len(data) % AES_BLOCKBYTES:
            raise ValueError("ECB input length must be a multiple of 16 bytes")
        return b"".join(
            self._encrypt_block(data[i:i + AES_BLOCKBYTES])
            for i in range(0, len(data), AES_BLOCKBYTES)
        )

    def ctr(self, outlen: int, nonce: bytes) -> bytes:
        """Return ``outlen`` keystream bytes for a 12-byte nonce.

        Each block is the nonce followed by a 32-bit big-endian counter
        that starts at zero and wraps modulo 2**32.
        """
        nonce = bytes(nonce)
        if len(nonce) != AESCTR_NONCEBYTES:
            raise ValueError(f"CTR nonce must be {AESCTR_NONCEBYTES} bytes, got {len(nonce)}")
        if outlen < 0:
            raise ValueError("output length must be non-negative")
        nblocks = -(-outlen // AES_BLOCKBYTES)
        stream = b"".join(
            self._encrypt_block(nonce + (counter & 0xFFFFFFFF).to_bytes(4, "big"))
            for counter in range(nblocks)
        )
        return stream[:outlen]


def aes256ctr(outlen: int, nonce: bytes, key: bytes) -> bytes:
    """AES-256 CTR keystream of ``outlen`` bytes under a 32-byte key."""
    key = bytes(key)
    if len(key) != AES256_KEYBYTES:
        raise ValueError(f"AES-256 key must be {AES256_KEYBYTES} bytes, got {len(key)}")
    return AES(key).ctr(outlen, nonce)