"""Schnorr signatures over secp256k1 as specified by BIP-340.

This is a straightforward reference implementation and is not constant time.
"""

from __future__ import annotations

import hashlib
from enum import Enum, auto

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

BIP0340_AUX = b"BIP0340/aux"
BIP0340_NONCE = b"BIP0340/nonce"
BIP0340_CHALLENGE = b"BIP0340/challenge"

# Points are (x, y) tuples; None stands for the point at infinity.
AffinePoint = tuple[int, int]


class ErrorKind(Enum):
    """Reasons a key, signature or coordinate is rejected."""

    INVALID_SECRET_KEY = auto()
    INVALID_NONCE_GENERATED = auto()
    INVALID_PUBLIC_KEY = auto()
    INVALID_X_COORDINATE = auto()
    INVALID_SIGNATURE = auto()

    @property
    def description(self) -> str:
        return self.name.lower().replace("_", " ")


class Bip340Error(ValueError):
    """Raised when signing, key generation or verification fails."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.description)
        self.kind = kind


def _require_length(name: str, data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(data)}")
    return data


def has_even_y(p: AffinePoint) -> bool:
    """Return True if the y coordinate of an affine point is even."""
    return p[1] % 2 == 0


def _sqrt(y: int) -> int | None:
    x = pow(y, (P + 1) // 4, P)
    return x if x * x % P == y % P else None


def lift_x(x: int) -> AffinePoint:
    """Return the curve point with x coordinate ``x`` and an even y."""
    x %= P
    y = _sqrt((pow(x, 3, P) + 7) % P)
    if y is None:
        raise Bip340Error(ErrorKind.INVALID_X_COORDINATE)
    if y % 2 == 1:
        y = (P - y) % P
    return (x, y)


def _compute_lam(p1: AffinePoint, p2: AffinePoint) -> int:
    x1, y1 = p1
    x2, y2 = p2
    if p1 != p2:
        return (y2 - y1) * pow((x2 - x1) % P, P - 2, P) % P
    return 3 * x1 * x1 * pow(2 * y1 % P, P - 2, P) % P


def point_add(p1: AffinePoint | None, p2: AffinePoint | None) -> AffinePoint | None:
    """Add two points; None is the point at infinity."""
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    x1, y1 = p1
    x2, y2 = p2
    if x1 == x2 and y1 != y2:
        return None
    lam = _compute_lam(p1, p2)
    x3 = (lam * lam - x1 - x2) % P
    return (x3, (lam * (x1 - x3) - y1) % P)


def point_mul(s: int, p: AffinePoint | None) -> AffinePoint | None:
    """Multiply a point by a scalar reduced modulo the group order."""
    s %= N
    q: AffinePoint | None = None
    for i in range(256):
        if (s >> i) & 1:
            q = point_add(q, p)
        p = point_add(p, p)
    return q


def point_mul_base(s: int) -> AffinePoint | None:
    """Multiply the generator by a scalar."""
    return point_mul(s, G)


def tagged_hash(tag: bytes, msg: bytes) -> bytes:
    """SHA-256(SHA-256(tag) || SHA-256(tag) || msg)."""
    tag_hash = hashlib.sha256(bytes(tag)).digest()
    return hashlib.sha256(tag_hash + tag_hash + bytes(msg)).digest()


def hash_aux(aux_rand: bytes) -> bytes:
    """Tagged hash of the auxiliary randomness."""
    return tagged_hash(BIP0340_AUX, _require_length("aux_rand", aux_rand, 32))


def hash_nonce(rand: bytes, pubkey: bytes, msg: bytes) -> bytes:
    """Tagged hash used to derive the signing nonce."""
    data = (
        _require_length("rand", rand, 32)
        + _require_length("pubkey", pubkey, 32)
        + _require_length("msg", msg, 32)
    )
    return tagged_hash(BIP0340_NONCE, data)


def hash_challenge(rx: bytes, pubkey: bytes, msg: bytes) -> bytes:
    """Tagged hash used to derive the challenge."""
    data = (
        _require_length("rx", rx, 32)
        + _require_length("pubkey", pubkey, 32)
        + _require_length("msg", msg, 32)
    )
    return tagged_hash(BIP0340_CHALLENGE, data)


def bytes_from_point(p: AffinePoint) -> bytes:
    """The 32-byte big-endian x coordinate of a point."""
    return p[0].to_bytes(32, "big")


def bytes_from_scalar(x: int) -> bytes:
    """The 32-byte big-endian encoding of a scalar."""
    return (x % N).to_bytes(32, "big")


def scalar_from_bytes(b: bytes) -> int:
    """Decode 32 bytes as a scalar, reducing modulo the group order."""
    return int.from_bytes(_require_length("scalar", b, 32), "big") % N


def scalar_from_bytes_strict(b: bytes) -> int | None:
    """Decode 32 bytes as a scalar, or None if not below the group order."""
    s = int.from_bytes(_require_length("scalar", b, 32), "big")
    return None if s > N - 1 else s


def seckey_scalar_from_bytes(b: bytes) -> int | None:
    """Decode a secret key, or None if it is zero or out of range."""
    s = scalar_from_bytes_strict(b)
    if s is None or s == 0:
        return None
    return s


def fieldelem_from_bytes(b: bytes) -> int | None:
    """Decode a field element, or None if not below the field prime."""
    s = int.from_bytes(_require_length("field element", b, 32), "big")
    return None if s > P - 1 else s


def _xor_bytes(b0: bytes, b1: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(b0, b1))


def _public_point(seckey: bytes) -> tuple[int, AffinePoint]:
    d0 = seckey_scalar_from_bytes(seckey)
    if d0 is None:
        raise Bip340Error(ErrorKind.INVALID_SECRET_KEY)
    p = point_mul_base(d0)
    assert p is not None
    return d0, p


def pubkey_gen(seckey: bytes) -> bytes:
    """Return the x-only public key for a secret key."""
    _, p = _public_point(seckey)
    return bytes_from_point(p)


def sign(msg: bytes, seckey: bytes, aux_rand: bytes) -> bytes:
    """Sign a 32-byte message, returning a 64-byte signature."""
    msg = _require_length("msg", msg, 32)
    d0, p = _public_point(seckey)
    d = d0 if has_even_y(p) else N - d0
    t = _xor_bytes(bytes_from_scalar(d), hash_aux(aux_rand))
    k0 = scalar_from_bytes(hash_nonce(t, bytes_from_point(p), msg))
    if k0 == 0:
        raise Bip340Error(ErrorKind.INVALID_NONCE_GENERATED)
    r = point_mul_base(k0)
    assert r is not None
    k = k0 if has_even_y(r) else N - k0
    e = scalar_from_bytes(hash_challenge(bytes_from_point(r), bytes_from_point(p), msg))
    sig = bytes_from_point(r) + bytes_from_scalar(k + e * d)
    verify(msg, bytes_from_point(p), sig)
    return sig


def verify(msg: bytes, pubkey: bytes, sig: bytes) -> None:
    """Check a signature; raise Bip340Error if it is not valid."""
    msg = _require_length("msg", msg, 32)
    sig = _require_length("sig", sig, 64)
    p_x = fieldelem_from_bytes(pubkey)
    if p_x is None:
        raise Bip340Error(ErrorKind.INVALID_PUBLIC_KEY)
    p = lift_x(p_x)
    r = fieldelem_from_bytes(sig[:32])
    if r is None:
        raise Bip340Error(ErrorKind.INVALID_SIGNATURE)
    s = scalar_from_bytes_strict(sig[32:])
    if s is None:
        raise Bip340Error(ErrorKind.INVALID_SIGNATURE)
    e = scalar_from_bytes(hash_challenge(sig[:32], bytes_from_point(p), msg))
    r_p = point_add(point_mul_base(s), point_mul(N - e, p))
    if r_p is None or not has_even_y(r_p) or r_p[0] != r:
        raise Bip340Error(ErrorKind.INVALID_SIGNATURE)