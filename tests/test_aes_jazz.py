import pytest

from specrypt.aes_jazz import (
    RCON,
    aes,
    aesenc,
    aesenclast,
    aeskeygenassist,
    key_combine,
    keys_expand,
    mixcolumns,
)

KEY = 0x3C4FCF098815F7ABA6D2AE2816157E2B


def test_aeskeygenassist():
    assert aeskeygenassist(KEY, RCON[1]) == 0x01EB848BEB848A013424B5E524B5E434


def test_key_combine():
    lhs, _ = key_combine(KEY, aeskeygenassist(KEY, RCON[1]), 0)
    assert lhs == 0x05766C2A3939A323B12C548817FEFAA0


def test_mixcolumns():
    assert mixcolumns(0x627A6F6644B109C82B18330A81C3B3E5) == 0x7B5B54657374566563746F725D53475D


def test_aesenc():
    rkey = 0x48692853686179295B477565726F6E5D
    state = 0x7B5B54657374566563746F725D53475D
    assert aesenc(state, rkey) == 0xA8311C2F9FDBA3C58B104B58DED7E595


def test_aes():
    msg = 0x340737E0A29831318D305A88A8F64332
    assert aes(KEY, msg) == 0x320B6A19978511DCFB09DC021D842539


def test_keys_expand_matches_fips197_schedule():
    rkeys = keys_expand(KEY)
    assert len(rkeys) == 11
    assert rkeys[0] == KEY
    last = int.from_bytes(bytes.fromhex("d014f9a8c9ee2589e13f0cc8b6630ca6"), "little")
    assert rkeys[10] == last


def test_aesenclast_zero_round_key_is_xor_free():
    state = 0x7B5B54657374566563746F725D53475D
    rkey = 0x48692853686179295B477565726F6E5D
    assert aesenclast(state, rkey) == aesenclast(state, 0) ^ rkey


@pytest.mark.parametrize("key, inp", [(-1, 0), (1 << 128, 0), (0, 1 << 128)])
def test_aes_rejects_out_of_range_values(key, inp):
    with pytest.raises(ValueError):
        aes(key, inp)