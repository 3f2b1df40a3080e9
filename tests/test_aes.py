import pytest
from hypothesis import given, strategies as st

from specrypt.aes import (
    KeyExpansionError,
    _expand,
    aes128_decrypt,
    aes128_encrypt,
    aes128_encrypt_block,
    aes_ctr_key_block,
    key_expansion,
    xor_block,
)

FIPS_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")


def test_kat_block1():
    msg = bytes.fromhex("6bc1bee22e409f96e93d7e117393172a")
    expected = bytes.fromhex("3ad77bb40d7a3660a89ecaf32466ef97")
    assert aes128_encrypt_block(FIPS_KEY, msg) == expected


def test_kat_block2():
    msg = bytes.fromhex("53696e676c6520626c6f636b206d7367")
    kat_key = bytes.fromhex("ae6852f8121067cc4bf7a5765577f39e")
    expected = bytes.fromhex("615f09fb353f613ba28ff3a30c64752d")
    assert aes128_encrypt_block(kat_key, msg) == expected


def test_kat1_counter_mode():
    msg = bytes.fromhex("6bc1bee22e409f96e93d7e117393172a")
    nonce = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9fafb")
    expected = bytes.fromhex("874d6191b620e3261bef6864990db6ce")
    ciphertext = aes128_encrypt(FIPS_KEY, nonce, 0xFCFDFEFF, msg)
    assert ciphertext == expected
    assert aes128_decrypt(FIPS_KEY, nonce, 0xFCFDFEFF, ciphertext) == msg


def test_kat2_counter_mode():
    msg = bytes(range(32))
    kat_key = bytes.fromhex("7E24067817FAE0D743D6CE1F32539163")
    nonce = bytes.fromhex("006CB6DBC0543B59DA48D90B")
    expected = bytes.fromhex(
        "5104A106168A72D9790D41EE8EDAD388EB2E1EFC46DA57C8FCE630DF9141BE28"
    )
    ciphertext = aes128_encrypt(kat_key, nonce, 1, msg)
    assert ciphertext == expected
    assert aes128_decrypt(kat_key, nonce, 1, ciphertext) == msg


@given(
    st.binary(min_size=16, max_size=16),
    st.binary(min_size=12, max_size=12),
    st.integers(min_value=0, max_value=0xFFFFFFFF),
    st.binary(max_size=80),
)
def test_enc_dec_roundtrip(kat_key, nonce, counter, msg):
    ciphertext = aes128_encrypt(kat_key, nonce, counter, msg)
    assert len(ciphertext) == len(msg)
    assert aes128_decrypt(kat_key, nonce, counter, ciphertext) == msg


def test_partial_block_is_prefix_of_full_block():
    nonce = bytes(12)
    full = aes128_encrypt(FIPS_KEY, nonce, 5, bytes(16))
    partial = aes128_encrypt(FIPS_KEY, nonce, 5, bytes(7))
    assert partial == full[:7]


def test_counter_wraps_around():
    nonce = bytes(12)
    ciphertext = aes128_encrypt(FIPS_KEY, nonce, 0xFFFFFFFF, bytes(32))
    assert ciphertext[16:] == aes_ctr_key_block(FIPS_KEY, nonce, 0)


def test_ctr_key_block_is_encrypted_counter_block():
    nonce = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9fafb")
    block = aes_ctr_key_block(FIPS_KEY, nonce, 0xFCFDFEFF)
    assert block == aes128_encrypt_block(FIPS_KEY, nonce + bytes.fromhex("fcfdfeff"))


def test_key_expansion_fips197():
    schedule = key_expansion(FIPS_KEY)
    assert len(schedule) == 176
    assert schedule[:16] == FIPS_KEY
    assert schedule[16:20] == bytes.fromhex("a0fafe17")
    assert schedule[160:] == bytes.fromhex("d014f9a8c9ee2589e13f0cc8b6630ca6")


def test_key_expansion_out_of_range_index():
    with pytest.raises(KeyExpansionError):
        _expand(FIPS_KEY, 4, 10, 200, 4, 41)


def test_xor_block():
    a = bytes(range(16))
    assert xor_block(a, a) == bytes(16)
    assert xor_block(a, bytes([0xFF] * 16)) == bytes(0xFF - i for i in range(16))


@pytest.mark.parametrize(
    "call",
    [
        lambda: aes128_encrypt_block(bytes(15), bytes(16)),
        lambda: aes128_encrypt_block(bytes(16), bytes(17)),
        lambda: aes_ctr_key_block(bytes(16), bytes(11), 0),
        lambda: aes_ctr_key_block(bytes(16), bytes(12), 1 << 32),
        lambda: xor_block(bytes(16), bytes(3)),
        lambda: key_expansion(bytes(32)),
    ],
)
def test_invalid_lengths_rejected(call):
    with pytest.raises(ValueError):
        call()