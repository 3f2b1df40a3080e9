import pytest
from hypothesis import given, strategies as st

from specrypt.bls_field import (
    P,
    expand_message_xmd,
    fp2_add,
    fp2_hash_to_field,
    fp2_inv,
    fp2_is_square,
    fp2_mul,
    fp2_neg,
    fp2_sgn0,
    fp2_sqrt,
    fp2_sub,
    fp_hash_to_field,
    fp_inv,
    fp_is_square,
    fp_sgn0,
    fp_sqrt,
)

Q128 = b"q128_" + b"q" * 128
EXPANDER_DST = b"QUUX-V01-CS02-with-expander-SHA256-128"
G1_DST = b"QUUX-V01-CS02-with-BLS12381G1_XMD:SHA-256_SSWU_RO_"
G2_DST = b"QUUX-V01-CS02-with-BLS12381G2_XMD:SHA-256_SSWU_RO_"

field = st.integers(min_value=0, max_value=P - 1)


def _hex(x: int) -> str:
    return x.to_bytes(48, "big").hex()


@pytest.mark.parametrize(
    "msg, length, expected",
    [
        (b"", 0x20, "68a985b87eb6b46952128911f2a4412bbc302a9d759667f87f7a21d803f07235"),
        (
            b"abcdef0123456789",
            0x20,
            "eff31487c770a893cfb36f912fbfcbff40d5661771ca4b2cb4eafe524333f5c1",
        ),
        (Q128, 0x20, "b23a1d2b4d97b2ef7785562a7e8bac7eed54ed6e97e29aa51bfe3f12ddad1ff9"),
        (
            b"",
            0x80,
            "af84c27ccfd45d41914fdff5df25293e221afc53d8ad2ac06d5e3e29485dadbee0d121587713a3e0dd4d5e69e93eb7cd4f5df4"
            "cd103e188cf60cb02edc3edf18eda8576c412b18ffb658e3dd6ec849469b979d444cf7b26911a08e63cf31f9dcc541708d3491184472"
            "c2c29bb749d4286b004ceb5ee6b9a7fa5b646c993f0ced",
        ),
        (
            b"abcdef0123456789",
            0x80,
            "ef904a29bffc4cf9ee82832451c946ac3c8f8058ae97d8d629831a74c6572bd9ebd0df635cd1f208e2038e760c4994984ce73f"
            "0d55ea9f22af83ba4734569d4bc95e18350f740c07eef653cbb9f87910d833751825f0ebefa1abe5420bb52be14cf489b37fe1a72f7d"
            "e2d10be453b2c9d9eb20c7e3f6edc5a60629178d9478df",
        ),
    ],
)
def test_expand_message(msg, length, expected):
    assert expand_message_xmd(msg, EXPANDER_DST, length).hex() == expected


def test_expand_message_too_long():
    with pytest.raises(ValueError):
        expand_message_xmd(b"", EXPANDER_DST, 255 * 32 + 1)


@pytest.mark.parametrize(
    "msg, expected",
    [
        (
            b"",
            [
                "0ba14bd907ad64a016293ee7c2d276b8eae71f25a4b941eece7b0d89f17f75cb3ae5438a614fb61d6835ad59f29c564f",
                "019b9bd7979f12657976de2884c7cce192b82c177c80e0ec604436a7f538d231552f0d96d9f7babe5fa3b19b3ff25ac9",
            ],
        ),
        (
            b"abcdef0123456789",
            [
                "062d1865eb80ebfa73dcfc45db1ad4266b9f3a93219976a3790ab8d52d3e5f1e62f3b01795e36834b17b70e7b76246d4",
                "0cdc3e2f271f29c4ff75020857ce6c5d36008c9b48385ea2f2bf6f96f428a3deb798aa033cd482d1cdc8b30178b08e3a",
            ],
        ),
        (
            Q128,
            [
                "010476f6a060453c0b1ad0b628f3e57c23039ee16eea5e71bb87c3b5419b1255dc0e5883322e563b84a29543823c0e86",
                "0b1a912064fb0554b180e07af7e787f1f883a0470759c03c1b6509eb8ce980d1670305ae7b928226bb58fdc0a419f46e",
            ],
        ),
    ],
)
def test_fp_hash_to_field(msg, expected):
    assert [_hex(x) for x in fp_hash_to_field(msg, G1_DST, 2)] == expected


@pytest.mark.parametrize(
    "msg, expected",
    [
        (
            b"",
            [
                (
                    "03dbc2cce174e91ba93cbb08f26b917f98194a2ea08d1cce75b2b9cc9f21689d80bd79b594a613d0a68eb807dfdc1cf8",
                    "05a2acec64114845711a54199ea339abd125ba38253b70a92c876df10598bd1986b739cad67961eb94f7076511b3b39a",
                ),
                (
                    "02f99798e8a5acdeed60d7e18e9120521ba1f47ec090984662846bc825de191b5b7641148c0dbc237726a334473eee94",
                    "145a81e418d4010cc027a68f14391b30074e89e60ee7a22f87217b2f6eb0c4b94c9115b436e6fa4607e95a98de30a435",
                ),
            ],
        ),
        (
            b"abcdef0123456789",
            [
                (
                    "0313d9325081b415bfd4e5364efaef392ecf69b087496973b229303e1816d2080971470f7da112c4eb43053130b785e1",
                    "062f84cb21ed89406890c051a0e8b9cf6c575cf6e8e18ecf63ba86826b0ae02548d83b483b79e48512b82a6c0686df8f",
                ),
                (
                    "1739123845406baa7be5c5dc74492051b6d42504de008c635f3535bb831d478a341420e67dcc7b46b2e8cba5379cca97",
                    "01897665d9cb5db16a27657760bbea7951f67ad68f8d55f7113f24ba6ddd82caef240a9bfa627972279974894701d975",
                ),
            ],
        ),
        (
            Q128,
            [
                (
                    "025820cefc7d06fd38de7d8e370e0da8a52498be9b53cba9927b2ef5c6de1e12e12f188bbc7bc923864883c57e49e253",
                    "034147b77ce337a52e5948f66db0bab47a8d038e712123bb381899b6ab5ad20f02805601e6104c29df18c254b8618c7b",
                ),
                (
                    "0930315cae1f9a6017c3f0c8f2314baa130e1cf13f6532bff0a8a1790cd70af918088c3db94bda214e896e1543629795",
                    "10c4df2cacf67ea3cb3108b00d4cbd0b3968031ebc8eac4b1ebcefe84d6b715fde66bef0219951ece29d1facc8a520ef",
                ),
            ],
        ),
    ],
)
def test_fp2_hash_to_field(msg, expected):
    result = fp2_hash_to_field(msg, G2_DST, 2)
    assert [(_hex(a), _hex(b)) for a, b in result] == expected


def test_fp_sgn0():
    assert fp_sgn0(0x243171) is True
    assert fp_sgn0(0x2431710293859032) is False


def test_fp2_sgn0():
    assert fp2_sgn0((0x24E31F71, 0x243D17EE10293859032)) is True
    assert fp2_sgn0((0, 0x598325BC69)) is True
    assert fp2_sgn0((0, 0x9879A032B6)) is False


def test_fp_square():
    assert fp_is_square(4) is True


def test_fp_sqrt():
    k = fp_sqrt(256)
    assert k * k % P == 256


def test_fp2_is_square():
    x = (54, 34)
    y = fp2_mul(x, x)
    assert fp2_is_square(y) is True
    assert fp2_is_square(x) is False


def test_fp2_sqrt():
    x = (P - 54, 34)
    y = fp2_mul(x, x)
    k = fp2_sqrt(y)
    assert fp2_mul(k, k) == y


def test_fp_inv_small():
    assert fp_inv(2) * 2 % P == 1
    assert fp_inv(0) == 0


def test_fp2_inv_zero():
    assert fp2_inv((0, 0)) == (0, 0)


def test_fp2_mul_i_squared():
    assert fp2_mul((0, 1), (0, 1)) == (P - 1, 0)


@given(field, field)
def test_fp2_inv_roundtrip(a, b):
    x = (a, b)
    if x == (0, 0):
        assert fp2_inv(x) == (0, 0)
    else:
        assert fp2_mul(x, fp2_inv(x)) == (1, 0)


@given(field, field, field, field)
def test_fp2_add_sub_neg(a, b, c, d):
    x, y = (a, b), (c, d)
    assert fp2_sub(fp2_add(x, y), y) == x
    assert fp2_add(x, fp2_neg(x)) == (0, 0)


@given(field)
def test_fp_sqrt_of_square(a):
    s = fp_sqrt(a * a)
    assert s in (a % P, -a % P)
    assert fp_is_square(a * a)


@given(field, field)
def test_fp2_sqrt_of_square(a, b):
    y = fp2_mul((a, b), (a, b))
    assert fp2_is_square(y)
    k = fp2_sqrt(y)
    assert fp2_mul(k, k) == y