# specrypt

Small, readable reference implementations of several cryptographic
algorithms, written in plain Python with no dependencies beyond the standard
library. The code aims to be clear and easy to check against the
specifications. It is not built for speed, and it is **not** hardened against
side channels. Do not use it to protect real secrets.

## Contents

### `specrypt.aes`: AES-128 on byte strings

- `aes128_encrypt_block(key, block)`: encrypt one 16-byte block with a
  16-byte key.
- `key_expansion(key)`: the 176-byte AES-128 key schedule.
- `aes_ctr_key_block(key, nonce, counter)`: the keystream block for a
  12-byte nonce and a 32-bit counter (nonce followed by the big-endian
  counter, encrypted).
- `aes128_encrypt(key, nonce, counter, msg)` and
  `aes128_decrypt(key, nonce, counter, ciphertext)`: counter mode for messages
  of any length. The counter starts at the given value, rises by one per block
  and wraps around at 2**32.
- `xor_block(block, key_block)`: XOR of two 16-byte blocks.

Inputs of the wrong length, and counters outside 32 bits, raise `ValueError`.
`KeyExpansionError` (a `ValueError`) is raised if the key schedule is asked
for a word past its last round.

### `specrypt.aes_jazz`: AES-128 on 128-bit integers

The same cipher written the way the AES-NI instructions see it. Keys, blocks
and states are unsigned 128-bit integers whose least significant byte is the
first byte of the block.

- `aes(key, inp)`: encrypt one block.
- `keys_expand(key)`: the list of eleven round keys.
- `aeskeygenassist(v1, v2)`, `key_combine(rkey, temp1, temp2)`: the key
  schedule steps.
- `aesenc(state, rkey)`, `aesenclast(state, rkey)`, `mixcolumns(state)`: the
  round functions.

Values outside the 128-bit range passed to `aes` or `keys_expand` raise
`ValueError`.

### `specrypt.bip340`: Schnorr signatures on secp256k1

- `pubkey_gen(seckey)`: the 32-byte x-only public key.
- `sign(msg, seckey, aux_rand)`: a 64-byte signature over a 32-byte message.
  The new signature is checked with `verify` before it is returned.
- `verify(msg, pubkey, sig)`: returns `None` for a valid signature and raises
  `Bip340Error` otherwise.
- Curve helpers: `point_add`, `point_mul`, `point_mul_base`, `lift_x`,
  `has_even_y`. Points are `(x, y)` tuples of integers and `None` stands for
  the point at infinity.
- Hashing and encoding helpers: `tagged_hash`, `hash_aux`, `hash_nonce`,
  `hash_challenge`, `bytes_from_point`, `bytes_from_scalar`,
  `scalar_from_bytes`, `scalar_from_bytes_strict`,
  `seckey_scalar_from_bytes`, `fieldelem_from_bytes`. The strict decoders
  return `None` for out-of-range values.

`Bip340Error` is a `ValueError` with a `kind` attribute holding an
`ErrorKind`: `INVALID_SECRET_KEY`, `INVALID_NONCE_GENERATED`,
`INVALID_PUBLIC_KEY`, `INVALID_X_COORDINATE` or `INVALID_SIGNATURE`.

### BLS12-381 hash-to-field and map-to-curve

Elements of Fp are integers reduced modulo `specrypt.bls_field.P`; elements
of Fp2 are pairs `(c0, c1)` meaning `c0 + c1 * i`.

- `specrypt.bls_field`: `expand_message_xmd` (SHA-256),
  `fp_hash_to_field`, `fp2_hash_to_field`, Fp2 arithmetic (`fp2_add`,
  `fp2_sub`, `fp2_neg`, `fp2_mul`, `fp2_inv`), `fp_inv`, and the square-root,
  square-test and sign functions `fp_sqrt`, `fp_is_square`, `fp_sgn0`,
  `fp2_sqrt`, `fp2_is_square`, `fp2_sgn0`.
- `specrypt.bls_svdw`: the Shallue–van de Woestijne maps
  `g1_map_to_curve_svdw` and `g2_map_to_curve_svdw`, with the curve equations
  `g1_curve_func` and `g2_curve_func`.
- `specrypt.bls_sswu_g1`: the simplified SWU map for G1:
  `g1_simple_swu_iso`, the 11-isogeny `g1_isogeny_map`, and both together in
  `g1_map_to_curve_sswu`.
- `specrypt.bls_sswu_g2`: the same for G2 with its 3-isogeny:
  `g2_simple_swu_iso`, `g2_isogeny_map`, `g2_map_to_curve_sswu`.

The maps return points as `(x, y, at_infinity)`.

## What is not included

- There is no group arithmetic on the BLS12-381 curves: no point addition,
  scalar multiplication or cofactor clearing. The maps give points on the
  curve, but not necessarily in the prime-order subgroup, so the package does
  not offer complete `hash_to_curve` or `encode_to_curve` functions.
- AES is offered as a block cipher and in counter mode only; there is no
  authenticated encryption mode and no decryption of single blocks.
- The package is a library only; it installs no command-line tools.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

AES-128 in counter mode:

```python
from specrypt.aes import aes128_encrypt, aes128_decrypt

key = bytes(16)
nonce = bytes(12)
ciphertext = aes128_encrypt(key, nonce, 1, b"attack at dawn")
assert aes128_decrypt(key, nonce, 1, ciphertext) == b"attack at dawn"
```

BIP-340 signatures:

```python
from specrypt.bip340 import pubkey_gen, sign, verify

seckey = bytes(31) + b"\x03"
msg = bytes(32)
aux_rand = bytes(32)
pubkey = pubkey_gen(seckey)
signature = sign(msg, seckey, aux_rand)
verify(msg, pubkey, signature)  # raises Bip340Error when the signature is invalid
```

Hashing a message to Fp and mapping it to G1:

```python
from specrypt.bls_field import fp_hash_to_field
from specrypt.bls_sswu_g1 import g1_map_to_curve_sswu

dst = b"QUUX-V01-CS02-with-BLS12381G1_XMD:SHA-256_SSWU_RO_"
u0, u1 = fp_hash_to_field(b"abc", dst, 2)
x, y, at_infinity = g1_map_to_curve_sswu(u0)
```