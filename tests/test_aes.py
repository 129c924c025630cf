import pytest
from hypothesis import given, settings, strategies as st

from oclcrypto.aes import AES, aes256ctr

PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")
VECTOR_128 = bytes(range(16))
VECTOR_192 = bytes(range(24))
VECTOR_256 = bytes(range(32))
NONCE = bytes(range(100, 112))


def test_fips197_aes128():
    assert AES(VECTOR_128).ecb(PLAINTEXT) == bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")


def test_fips197_aes192():
    assert AES(VECTOR_192).ecb(PLAINTEXT) == bytes.fromhex("dda97ca4864cdfe06eaf70a0ec0d7191")


def test_fips197_aes256():
    assert AES(VECTOR_256).ecb(PLAINTEXT) == bytes.fromhex("8ea2b7ca516745bfeafc49904b496089")


@pytest.mark.parametrize("size,rounds", [(16, 10), (24, 12), (32, 14)])
def test_round_count(size, rounds):
    assert AES(bytes(size)).rounds == rounds


def test_ecb_blocks_are_independent():
    cipher = AES(VECTOR_256)
    blocks = [bytes([i]) * 16 for i in range(5)]
    joined = cipher.ecb(b"".join(blocks))
    assert joined == b"".join(cipher.ecb(b) for b in blocks)


def test_ecb_empty():
    assert AES(VECTOR_128).ecb(b"") == b""


def test_ecb_rejects_partial_block():
    with pytest.raises(ValueError):
        AES(VECTOR_128).ecb(bytes(17))


@pytest.mark.parametrize("size", [0, 8, 15, 17, 33])
def test_bad_key_length(size):
    with pytest.raises(ValueError):
        AES(bytes(size))


def test_ctr_matches_ecb_of_counter_blocks():
    cipher = AES(VECTOR_256)
    counters = b"".join(NONCE + i.to_bytes(4, "big") for i in range(4))
    assert cipher.ctr(64, NONCE) == cipher.ecb(counters)


def test_ctr_partial_length():
    cipher = AES(VECTOR_128)
    stream = cipher.ctr(37, NONCE)
    assert len(stream) == 37
    assert stream == cipher.ctr(48, NONCE)[:37]


def test_ctr_zero_length():
    assert AES(VECTOR_128).ctr(0, NONCE) == b""


def test_ctr_rejects_bad_nonce():
    with pytest.raises(ValueError):
        AES(VECTOR_128).ctr(16, bytes(16))


def test_ctr_rejects_negative_length():
    with pytest.raises(ValueError):
        AES(VECTOR_128).ctr(-1, NONCE)


def test_aes256ctr_matches_class():
    assert aes256ctr(100, NONCE, VECTOR_256) == AES(VECTOR_256).ctr(100, NONCE)


def test_aes256ctr_requires_256_bit_key():
    with pytest.raises(ValueError):
        aes256ctr(16, NONCE, VECTOR_128)


def test_different_nonces_give_different_streams():
    other = bytes(12)
    assert aes256ctr(32, NONCE, VECTOR_256) != aes256ctr(32, other, VECTOR_256)


@settings(max_examples=20, deadline=None)
@given(short=st.integers(min_value=0, max_value=80), extra=st.integers(min_value=0, max_value=40))
def test_ctr_prefix_property(short, extra):
    cipher = AES(VECTOR_192)
    assert cipher.ctr(short + extra, NONCE)[:short] == cipher.ctr(short, NONCE)