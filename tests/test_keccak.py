import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from oclcrypto.keccak import KeccakSponge, keccak_f1600

SHA3_DOMAIN = 0x06
SHAKE_DOMAIN = 0x1F


def _sha3(rate, data, digest_len):
    return KeccakSponge(rate).absorb(data).finalize(SHA3_DOMAIN).squeeze(digest_len)


def _shake(rate, data, outlen):
    return KeccakSponge(rate).absorb(data).finalize(SHAKE_DOMAIN).squeeze(outlen)


def test_permutation_of_zero_state_first_lane():
    out = keccak_f1600([0] * 25)
    assert out[0] == 0xF1258F7940E1DDE7


def test_permutation_returns_new_list_and_keeps_input():
    state = [0] * 25
    out = keccak_f1600(state)
    assert state == [0] * 25
    assert len(out) == 25
    assert all(0 <= lane < 2**64 for lane in out)


def test_permutation_rejects_wrong_length():
    with pytest.raises(ValueError):
        keccak_f1600([0] * 24)


def test_permutation_rejects_out_of_range_lane():
    with pytest.raises(ValueError):
        keccak_f1600([2**64] + [0] * 24)


@pytest.mark.parametrize("length", [0, 1, 71, 72, 73, 103, 104, 135, 136, 137, 300])
def test_sha3_variants_match_hashlib(length):
    data = bytes(i % 251 for i in range(length))
    assert _sha3(136, data, 32) == hashlib.sha3_256(data).digest()
    assert _sha3(104, data, 48) == hashlib.sha3_384(data).digest()
    assert _sha3(72, data, 64) == hashlib.sha3_512(data).digest()


@pytest.mark.parametrize("outlen", [0, 1, 135, 136, 137, 167, 168, 169, 500])
def test_shake_matches_hashlib(outlen):
    data = b"keccak sponge input"
    assert _shake(168, data, outlen) == hashlib.shake_128(data).digest(outlen)
    assert _shake(136, data, outlen) == hashlib.shake_256(data).digest(outlen)


@settings(max_examples=40)
@given(st.binary(max_size=400), st.lists(st.integers(min_value=0, max_value=400), max_size=5))
def test_chunked_absorb_equals_single_absorb(data, cuts):
    points = sorted({min(c, len(data)) for c in cuts})
    sponge = KeccakSponge(168)
    prev = 0
    for p in points + [len(data)]:
        sponge.absorb(data[prev:p])
        prev = p
    sponge.finalize(SHAKE_DOMAIN)
    assert sponge.squeeze(200) == hashlib.shake_128(data).digest(200)


@settings(max_examples=40)
@given(st.lists(st.integers(min_value=0, max_value=300), min_size=1, max_size=6))
def test_chunked_squeeze_equals_single_squeeze(sizes):
    sponge = KeccakSponge(136).absorb(b"abc").finalize(SHAKE_DOMAIN)
    out = b"".join(sponge.squeeze(n) for n in sizes)
    assert out == hashlib.shake_256(b"abc").digest(sum(sizes))


def test_copy_is_independent():
    sponge = KeccakSponge(136).absorb(b"prefix")
    clone = sponge.copy()
    sponge.absorb(b"-one")
    clone.absorb(b"-two")
    assert sponge.finalize(SHA3_DOMAIN).squeeze(32) == hashlib.sha3_256(b"prefix-one").digest()
    assert clone.finalize(SHA3_DOMAIN).squeeze(32) == hashlib.sha3_256(b"prefix-two").digest()


def test_copy_during_squeeze_continues_identically():
    sponge = KeccakSponge(168).absorb(b"xyz").finalize(SHAKE_DOMAIN)
    sponge.squeeze(50)
    clone = sponge.copy()
    assert sponge.squeeze(300) == clone.squeeze(300)


def test_absorb_after_finalize_raises():
    sponge = KeccakSponge(136).finalize(SHA3_DOMAIN)
    with pytest.raises(ValueError):
        sponge.absorb(b"late")


def test_squeeze_before_finalize_raises():
    with pytest.raises(ValueError):
        KeccakSponge(136).squeeze(10)


def test_double_finalize_raises():
    sponge = KeccakSponge(136).finalize(SHA3_DOMAIN)
    with pytest.raises(ValueError):
        sponge.finalize(SHA3_DOMAIN)


def test_negative_squeeze_raises():
    sponge = KeccakSponge(136).finalize(SHAKE_DOMAIN)
    with pytest.raises(ValueError):
        sponge.squeeze(-1)


@pytest.mark.parametrize("rate", [0, 7, 12, 200, 208])
def test_invalid_rate_raises(rate):
    with pytest.raises(ValueError):
        KeccakSponge(rate)


@pytest.mark.parametrize("domain", [-1, 256])
def test_invalid_domain_raises(domain):
    with pytest.raises(ValueError):
        KeccakSponge(136).finalize(domain)