"""AES-128 on 128-bit integers, modelled on the AES-NI instruction sequence."""

from __future__ import annotations

SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d8311504c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f8453d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa851a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d197360814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df8ca1890dbfe6426841992d0fb054bb16"
)

RCON = bytes.fromhex("8d01020408102040801b366cd8ab4d")

_U128_MAX = (1 << 128) - 1


def _check_u128(name: str, value: int) -> None:
    if not 0 <= value <= _U128_MAX:
        raise ValueError(f"{name} must be an unsigned 128-bit integer")


def _index_u32(s: int, i: int) -> int:
    return (s >> (32 * i)) & 0xFFFFFFFF


def _index_u8(s: int, i: int) -> int:
    return (s >> (8 * i)) & 0xFF


def _rebuild_u32(s0: int, s1: int, s2: int, s3: int) -> int:
    return s0 | (s1 << 8) | (s2 << 16) | (s3 << 24)


def _rebuild_u128(s0: int, s1: int, s2: int, s3: int) -> int:
    return s0 | (s1 << 32) | (s2 << 64) | (s3 << 96)


def _subword(v: int) -> int:
    return _rebuild_u32(*(SBOX[_index_u8(v, i)] for i in range(4)))


def _rotword(v: int) -> int:
    return _rebuild_u32(_index_u8(v, 1), _index_u8(v, 2), _index_u8(v, 3), _index_u8(v, 0))


def _vpshufd1(s: int, o: int, i: int) -> int:
    return _index_u32(s >> (32 * ((o >> (2 * i)) % 4)), 0)


def _vpshufd(s: int, o: int) -> int:
    return _rebuild_u128(*(_vpshufd1(s, o, i) for i in range(4)))


def _vshufps(s1: int, s2: int, o: int) -> int:
    return _rebuild_u128(
        _vpshufd1(s1, o, 0), _vpshufd1(s1, o, 1), _vpshufd1(s2, o, 2), _vpshufd1(s2, o, 3)
    )


def key_combine(rkey: int, temp1: int, temp2: int) -> tuple[int, int]:
    """Fold a keygen-assist result into the previous round key."""
    temp1 = _vpshufd(temp1, 0xFF)
    temp2 = _vshufps(temp2, rkey, 16)
    rkey ^= temp2
    temp2 = _vshufps(temp2, rkey, 140)
    rkey ^= temp2
    rkey ^= temp1
    return rkey, temp2


def aeskeygenassist(v1: int, v2: int) -> int:
    """Compute the AESKEYGENASSIST result for a state and a round constant."""
    y0 = _subword(_index_u32(v1, 1))
    y1 = _rotword(y0) ^ v2
    y2 = _subword(_index_u32(v1, 3))
    y3 = _rotword(y2) ^ v2
    return _rebuild_u128(y0, y1, y2, y3)


def _key_expand(rcon: int, rkey: int, temp2: int) -> tuple[int, int]:
    return key_combine(rkey, aeskeygenassist(rkey, rcon), temp2)


def keys_expand(key: int) -> list[int]:
    """Return the eleven AES-128 round keys for a key."""
    _check_u128("key", key)
    rkeys = [key]
    temp2 = 0
    for rcon in RCON[1:11]:
        key, temp2 = _key_expand(rcon, key, temp2)
        rkeys.append(key)
    return rkeys


def _subbytes(s: int) -> int:
    return _rebuild_u128(*(_subword(_index_u32(s, i)) for i in range(4)))


def _matrix_index(s: int, i: int, j: int) -> int:
    return _index_u8(_index_u32(s, j), i)


def _shiftrows(s: int) -> int:
    return _rebuild_u128(
        *(
            _rebuild_u32(*(_matrix_index(s, row, (col + row) % 4) for row in range(4)))
            for col in range(4)
        )
    )


def _xtime(x: int) -> int:
    return ((x << 1) & 0xFF) ^ (0x1B if x & 0x80 else 0)


def _mixcolumn(c: int, state: int) -> int:
    s0, s1, s2, s3 = (_matrix_index(state, row, c) for row in range(4))
    tmp = s0 ^ s1 ^ s2 ^ s3
    return _rebuild_u32(
        s0 ^ tmp ^ _xtime(s0 ^ s1),
        s1 ^ tmp ^ _xtime(s1 ^ s2),
        s2 ^ tmp ^ _xtime(s2 ^ s3),
        s3 ^ tmp ^ _xtime(s3 ^ s0),
    )


def mixcolumns(state: int) -> int:
    """Apply MixColumns to a 128-bit state."""
    return _rebuild_u128(*(_mixcolumn(c, state) for c in range(4)))


def aesenc(state: int, rkey: int) -> int:
    """One full AES round, as AESENC computes it."""
    return mixcolumns(_subbytes(_shiftrows(state))) ^ rkey


def aesenclast(state: int, rkey: int) -> int:
    """The final AES round, without MixColumns."""
    return _subbytes(_shiftrows(state)) ^ rkey


def _aes_rounds(rkeys: list[int], inp: int) -> int:
    state = inp ^ rkeys[0]
    for rkey in rkeys[1:10]:
        state = aesenc(state, rkey)
    return aesenclast(state, rkeys[10])


def aes(key: int, inp: int) -> int:
    """Encrypt a 128-bit block with AES-128; both are little-endian integers."""
    _check_u128("input", inp)
    return _aes_rounds(keys_expand(key), inp)