"""Base and quadratic extension field arithmetic for BLS12-381, and hashing to them.

Elements of Fp are plain integers reduced modulo ``P``; elements of Fp2 are
pairs ``(c0, c1)`` standing for ``c0 + c1 * i`` with ``i * i == -1``.
"""

from __future__ import annotations

import hashlib

P = int(
    "1a0111ea397fe69a4b1ba7b6434bacd764774b84f38512bf"
    "6730d2a0f6b0f6241eabfffeb153ffffb9feffffffffaaab",
    16,
)

Fp2 = tuple[int, int]

B_IN_BYTES = 32
S_IN_BYTES = 64
L = 64

_P_MINUS_1_HALF = (P - 1) // 2
_P_PLUS_1_QUARTER = (P + 1) // 4
_P_MINUS_3_QUARTER = (P - 3) // 4

FP2_ZERO: Fp2 = (0, 0)
FP2_ONE: Fp2 = (1, 0)


def fp_inv(x: int) -> int:
    """Multiplicative inverse in Fp; zero maps to zero."""
    return pow(x % P, P - 2, P)


def fp2_add(a: Fp2, b: Fp2) -> Fp2:
    """Sum of two Fp2 elements."""
    return ((a[0] + b[0]) % P, (a[1] + b[1]) % P)


def fp2_sub(a: Fp2, b: Fp2) -> Fp2:
    """Difference of two Fp2 elements."""
    return ((a[0] - b[0]) % P, (a[1] - b[1]) % P)


def fp2_neg(a: Fp2) -> Fp2:
    """Additive inverse of an Fp2 element."""
    return (-a[0] % P, -a[1] % P)


def fp2_mul(a: Fp2, b: Fp2) -> Fp2:
    """Product of two Fp2 elements."""
    a0, a1 = a
    b0, b1 = b
    return ((a0 * b0 - a1 * b1) % P, (a0 * b1 + a1 * b0) % P)


def fp2_inv(a: Fp2) -> Fp2:
    """Multiplicative inverse in Fp2; zero maps to zero."""
    a0, a1 = a
    norm_inv = fp_inv(a0 * a0 + a1 * a1)
    return (a0 * norm_inv % P, -a1 * norm_inv % P)


def _fp2_pow(base: Fp2, exponent: int) -> Fp2:
    result = FP2_ONE
    for bit in bin(exponent)[2:] if exponent > 0 else "":
        result = fp2_mul(result, result)
        if bit == "1":
            result = fp2_mul(result, base)
    return result


def expand_message_xmd(msg: bytes, dst: bytes, len_in_bytes: int) -> bytes:
    """Expand a message to ``len_in_bytes`` uniform bytes with SHA-256."""
    msg = bytes(msg)
    dst = bytes(dst)
    ell = (len_in_bytes + B_IN_BYTES - 1) // B_IN_BYTES
    if ell > 255 or len_in_bytes > 0xFFFF:
        raise ValueError("requested output is too long for expand_message_xmd")
    if len(dst) > 255:
        raise ValueError("domain separation tag must be at most 255 bytes")
    dst_prime = dst + bytes((len(dst),))
    z_pad = bytes(S_IN_BYTES)
    l_i_b_str = len_in_bytes.to_bytes(2, "big")
    msg_prime = z_pad + msg + l_i_b_str + b"\x00" + dst_prime
    b_0 = hashlib.sha256(msg_prime).digest()
    b_i = hashlib.sha256(b_0 + b"\x01" + dst_prime).digest()
    uniform = bytearray(b_i)
    for i in range(2, ell + 1):
        mixed = bytes(x ^ y for x, y in zip(b_0, b_i))
        b_i = hashlib.sha256(mixed + bytes((i,)) + dst_prime).digest()
        uniform += b_i
    return bytes(uniform[:len_in_bytes])


def _element(uniform: bytes, index: int) -> int:
    return int.from_bytes(uniform[L * index : L * (index + 1)], "big") % P


def fp_hash_to_field(msg: bytes, dst: bytes, count: int) -> list[int]:
    """Hash a message to ``count`` elements of Fp."""
    uniform = expand_message_xmd(msg, dst, count * L)
    return [_element(uniform, i) for i in range(count)]


def fp2_hash_to_field(msg: bytes, dst: bytes, count: int) -> list[Fp2]:
    """Hash a message to ``count`` elements of Fp2."""
    uniform = expand_message_xmd(msg, dst, count * 2 * L)
    return [(_element(uniform, 2 * i), _element(uniform, 2 * i + 1)) for i in range(count)]


def fp_sgn0(x: int) -> bool:
    """True if the element is odd."""
    return (x % P) % 2 == 1


def fp_is_square(x: int) -> bool:
    """True if the element is zero or a quadratic residue."""
    return pow(x % P, _P_MINUS_1_HALF, P) in (0, 1)


def fp_sqrt(x: int) -> int:
    """A square root of ``x``; meaningful only when ``x`` is a square."""
    return pow(x % P, _P_PLUS_1_QUARTER, P)


def fp2_sgn0(x: Fp2) -> bool:
    """Sign of an Fp2 element as defined for hashing to curves."""
    x0, x1 = x[0] % P, x[1] % P
    return fp_sgn0(x0) or (x0 == 0 and fp_sgn0(x1))


def fp2_is_square(x: Fp2) -> bool:
    """True if the Fp2 element is a square."""
    x0, x1 = x
    return pow((x0 * x0 + x1 * x1) % P, _P_MINUS_1_HALF, P) != P - 1


def fp2_sqrt(a: Fp2) -> Fp2:
    """A square root in Fp2; meaningful only when ``a`` is a square."""
    a = (a[0] % P, a[1] % P)
    a1 = _fp2_pow(a, _P_MINUS_3_QUARTER)
    x0 = fp2_mul(a1, a)
    alpha = fp2_mul(a1, x0)
    if alpha == (P - 1, 0):
        return fp2_mul((0, 1), x0)
    b = _fp2_pow(fp2_add(FP2_ONE, alpha), _P_MINUS_1_HALF)
    return fp2_mul(b, x0)