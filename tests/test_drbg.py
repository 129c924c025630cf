import pytest
from hypothesis import given, strategies as st

from oclcrypto.drbg import NistKatDrbg

ENTROPY = bytes(range(48))


def test_known_answer_first_kat_seed():
    drbg = NistKatDrbg(ENTROPY)
    expected = bytes.fromhex(
        "061550234D158C5EC95595FE04EF7A25767F2E24CC2BC479D09D86DC9ABCFDE7"
        "056A8C266F9EF97ED08541DBD2E1FFA1"
    )
    assert drbg.random_bytes(48) == expected


@given(st.binary(min_size=48, max_size=48), st.integers(0, 100))
def test_deterministic_for_same_seed(entropy, n):
    a = NistKatDrbg(entropy).random_bytes(n)
    b = NistKatDrbg(entropy).random_bytes(n)
    assert a == b
    assert len(a) == n


def test_prefix_of_single_call_is_consistent():
    long = NistKatDrbg(ENTROPY).random_bytes(40)
    short = NistKatDrbg(ENTROPY).random_bytes(20)
    assert long[:20] == short


def test_successive_calls_differ():
    drbg = NistKatDrbg(ENTROPY)
    first = drbg.random_bytes(32)
    second = drbg.random_bytes(32)
    assert first != second
    assert drbg.reseed_counter == 3


def test_zero_length_call_still_advances_state():
    fresh = NistKatDrbg(ENTROPY).random_bytes(16)
    drbg = NistKatDrbg(ENTROPY)
    assert drbg.random_bytes(0) == b""
    assert drbg.random_bytes(16) != fresh


def test_zero_personalization_equals_none():
    plain = NistKatDrbg(ENTROPY).random_bytes(32)
    zeroed = NistKatDrbg(ENTROPY, bytes(48)).random_bytes(32)
    assert plain == zeroed


def test_personalization_is_xored_into_entropy():
    personalization = bytes([0x5A] * 48)
    mixed = bytes(a ^ b for a, b in zip(ENTROPY, personalization))
    assert (
        NistKatDrbg(ENTROPY, personalization).random_bytes(32)
        == NistKatDrbg(mixed).random_bytes(32)
    )


def test_rejects_wrong_security_strength():
    with pytest.raises(ValueError):
        NistKatDrbg(ENTROPY, None, 128)


def test_rejects_wrong_entropy_length():
    with pytest.raises(ValueError):
        NistKatDrbg(bytes(47))


def test_rejects_wrong_personalization_length():
    with pytest.raises(ValueError):
        NistKatDrbg(ENTROPY, bytes(10))


def test_rejects_negative_count():
    with pytest.raises(ValueError):
        NistKatDrbg(ENTROPY).random_bytes(-1)