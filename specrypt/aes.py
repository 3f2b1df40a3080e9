"""AES-128 block cipher and counter mode over byte strings."""

from __future__ import annotations

BLOCK_SIZE = 16
NONCE_SIZE = 12
KEY_SIZE = 16

KEY_LENGTH = 4
ROUNDS = 10
KEY_SCHEDULE_LENGTH = 176
ITERATIONS = 40

_COUNTER_MASK = 0xFFFFFFFF

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


class KeyExpansionError(ValueError):
    """Raised when the key schedule is asked for a word beyond its last round."""


def _require_length(name: str, data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(data)}")
    return data


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _sub_bytes(state: bytes) -> bytes:
    return bytes(SBOX[b] for b in state)


def _shift_rows(state: bytes) -> bytes:
    # Byte (row, column) lives at index row + 4 * column.
    return bytes(
        state[row + 4 * ((col + row) % 4)] for col in range(4) for row in range(4)
    )


def _xtime(x: int) -> int:
    return ((x << 1) & 0xFF) ^ (0x1B if x & 0x80 else 0)


def _mix_column(column: bytes) -> bytes:
    s0, s1, s2, s3 = column
    tmp = s0 ^ s1 ^ s2 ^ s3
    return bytes(
        (
            s0 ^ tmp ^ _xtime(s0 ^ s1),
            s1 ^ tmp ^ _xtime(s1 ^ s2),
            s2 ^ tmp ^ _xtime(s2 ^ s3),
            s3 ^ tmp ^ _xtime(s3 ^ s0),
        )
    )


def _mix_columns(state: bytes) -> bytes:
    return b"".join(_mix_column(state[c : c + 4]) for c in range(0, BLOCK_SIZE, 4))


def _aes_enc(state: bytes, round_key: bytes) -> bytes:
    return _xor(_mix_columns(_shift_rows(_sub_bytes(state))), round_key)


def _aes_enc_last(state: bytes, round_key: bytes) -> bytes:
    return _xor(_shift_rows(_sub_bytes(state)), round_key)


def _block_cipher(block: bytes, schedule: bytes, nr: int) -> bytes:
    state = _xor(block, schedule[:BLOCK_SIZE])
    middle = schedule[BLOCK_SIZE : nr * BLOCK_SIZE]
    for offset in range(0, len(middle), BLOCK_SIZE):
        state = _aes_enc(state, middle[offset : offset + BLOCK_SIZE])
    return _aes_enc_last(state, schedule[nr * BLOCK_SIZE : (nr + 1) * BLOCK_SIZE])


def _sub_word(word: bytes) -> bytes:
    return bytes(SBOX[b] for b in word)


def _rotate_word(word: bytes) -> bytes:
    return word[1:] + word[:1]


def _keygen_assist(word: bytes, rcon: int) -> bytes:
    k = _sub_word(_rotate_word(word))
    return bytes((k[0] ^ rcon,)) + k[1:]


def _expansion_word(w0: bytes, w1: bytes, i: int, nk: int, nr: int) -> bytes:
    if i >= 4 * (nr + 1):
        raise KeyExpansionError(f"key expansion index {i} is out of range")
    k = w1
    if i % nk == 0:
        k = _keygen_assist(k, RCON[i // nk])
    elif nk > 6 and i % nk == 4:
        k = _sub_word(k)
    return _xor(k, w0)


def _expand(
    key: bytes,
    nk: int,
    nr: int,
    schedule_length: int,
    word_size: int,
    iterations: int,
) -> bytes:
    schedule = bytearray(schedule_length)
    schedule[: len(key)] = key
    for i in range(word_size, word_size + iterations):
        w0 = bytes(schedule[4 * (i - word_size) : 4 * (i - word_size) + 4])
        w1 = bytes(schedule[4 * i - 4 : 4 * i])
        schedule[4 * i : 4 * i + 4] = _expansion_word(w0, w1, i, nk, nr)
    return bytes(schedule)


def key_expansion(key: bytes) -> bytes:
    """Return the 176-byte AES-128 key schedule for a 16-byte key."""
    key = _require_length("key", key, KEY_SIZE)
    return _expand(key, KEY_LENGTH, ROUNDS, KEY_SCHEDULE_LENGTH, KEY_LENGTH, ITERATIONS)


def aes128_encrypt_block(key: bytes, block: bytes) -> bytes:
    """Encrypt one 16-byte block with AES-128."""
    block = _require_length("block", block, BLOCK_SIZE)
    return _block_cipher(block, key_expansion(key), ROUNDS)


def aes_ctr_key_block(key: bytes, nonce: bytes, counter: int) -> bytes:
    """Return the keystream block for a nonce and a 32-bit counter."""
    nonce = _require_length("nonce", nonce, NONCE_SIZE)
    if not 0 <= counter <= _COUNTER_MASK:
        raise ValueError("counter must fit in 32 bits")
    return aes128_encrypt_block(key, nonce + counter.to_bytes(4, "big"))


def xor_block(block: bytes, key_block: bytes) -> bytes:
    """XOR two 16-byte blocks."""
    block = _require_length("block", block, BLOCK_SIZE)
    key_block = _require_length("key block", key_block, BLOCK_SIZE)
    return _xor(block, key_block)


def _counter_mode(key: bytes, nonce: bytes, counter: int, data: bytes) -> bytes:
    data = bytes(data)
    out = bytearray()
    for offset in range(0, len(data), BLOCK_SIZE):
        chunk = data[offset : offset + BLOCK_SIZE]
        out += _xor(chunk, aes_ctr_key_block(key, nonce, counter))
        counter = (counter + 1) & _COUNTER_MASK
    return bytes(out)


def aes128_encrypt(key: bytes, nonce: bytes, counter: int, msg: bytes) -> bytes:
    """Encrypt a message of any length with AES-128 in counter mode."""
    return _counter_mode(key, nonce, counter, msg)


def aes128_decrypt(key: bytes, nonce: bytes, counter: int, ciphertext: bytes) -> bytes:
    """Decrypt a message produced by aes128_encrypt."""
    return _counter_mode(key, nonce, counter, ciphertext)