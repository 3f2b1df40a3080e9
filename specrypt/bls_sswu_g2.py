"""Simplified SWU map to the BLS12-381 G2 curve through a 3-isogeny.

Elements of Fp2 are pairs ``(c0, c1)`` standing for ``c0 + c1 * i``. The map
first lands on the isogenous curve ``y^2 = x^3 + A' * x + B'`` and then applies
the isogeny to reach ``y^2 = x^3 + 4(1 + i)``. Points are ``(x, y, at_infinity)``.
"""

from __future__ import annotations

from specrypt.bls_field import (
    FP2_ONE,
    FP2_ZERO,
    Fp2,
    P,
    fp2_add,
    fp2_inv,
    fp2_is_square,
    fp2_mul,
    fp2_neg,
    fp2_sgn0,
    fp2_sqrt,
)

G2Point = tuple[Fp2, Fp2, bool]


def _fp(words: str) -> int:
    return int("".join(words.split()), 16)


# Constant Z of the simplified SWU map for G2: -(2 + i).
SSWU_Z: Fp2 = fp2_neg((2, 1))

# Coefficients of the isogenous curve.
ISO_A: Fp2 = (0, 240)
ISO_B: Fp2 = (1012, 1012)

_XNUM_K_0 = _fp(
    "05c759507e8e333e bb5b7a9a47d7ed85 32c52d39fd3a042a"
    " 88b58423c50ae15d 5c2638e343d9c71c 6238aaaaaaaa97d6"
)
_XNUM_K_1_I = _fp(
    "11560bf17baa99bc 32126fced787c88f 984f87adf7ae0c7f"
    " 9a208c6b4f20a418 1472aaa9cb8d5555 26a9ffffffffc71a"
)
_XNUM_K_2_R = _fp(
    "11560bf17baa99bc 32126fced787c88f 984f87adf7ae0c7f"
    " 9a208c6b4f20a418 1472aaa9cb8d5555 26a9ffffffffc71e"
)
_XNUM_K_2_I = _fp(
    "08ab05f8bdd54cde 190937e76bc3e447 cc27c3d6fbd7063f"
    " cd104635a790520c 0a395554e5c6aaaa 9354ffffffffe38d"
)
_XNUM_K_3_R = _fp(
    "171d6541fa38ccfa ed6dea691f5fb614 cb14b4e7f4e810aa"
    " 22d6108f142b8575 7098e38d0f671c71 88e2aaaaaaaa5ed1"
)
_XDEN_K_0_I = _fp(
    "1a0111ea397fe69a 4b1ba7b6434bacd7 64774b84f38512bf"
    " 6730d2a0f6b0f624 1eabfffeb153ffff b9feffffffffaa63"
)
_XDEN_K_1_I = _fp(
    "1a0111ea397fe69a 4b1ba7b6434bacd7 64774b84f38512bf"
    " 6730d2a0f6b0f624 1eabfffeb153ffff b9feffffffffaa9f"
)
_YNUM_K_0 = _fp(
    "1530477c7ab4113b 59a4c18b076d1193 0f7da5d4a07f649b"
    " f54439d87d27e500 fc8c25ebf8c92f68 12cfc71c71c6d706"
)
_YNUM_K_1_I = _fp(
    "05c759507e8e333e bb5b7a9a47d7ed85 32c52d39fd3a042a"
    " 88b58423c50ae15d 5c2638e343d9c71c 6238aaaaaaaa97be"
)
_YNUM_K_2_R = _fp(
    "11560bf17baa99bc 32126fced787c88f 984f87adf7ae0c7f"
    " 9a208c6b4f20a418 1472aaa9cb8d5555 26a9ffffffffc71c"
)
_YNUM_K_2_I = _fp(
    "08ab05f8bdd54cde 190937e76bc3e447 cc27c3d6fbd7063f"
    " cd104635a790520c 0a395554e5c6aaaa 9354ffffffffe38f"
)
_YNUM_K_3_R = _fp(
    "124c9ad43b6cf79b fbf7043de3811ad0 761b0f37a1e26286"
    " b0e977c69aa27452 4e79097a56dc4bd9 e1b371c71c718b10"
)
_YDEN_K_0 = _fp(
    "1a0111ea397fe69a 4b1ba7b6434bacd7 64774b84f38512bf"
    " 6730d2a0f6b0f624 1eabfffeb153ffff b9feffffffffa8fb"
)
_YDEN_K_1_I = _fp(
    "1a0111ea397fe69a 4b1ba7b6434bacd7 64774b84f38512bf"
    " 6730d2a0f6b0f624 1eabfffeb153ffff b9feffffffffa9d3"
)
_YDEN_K_2_I = _fp(
    "1a0111ea397fe69a 4b1ba7b6434bacd7 64774b84f38512bf"
    " 6730d2a0f6b0f624 1eabfffeb153ffff b9feffffffffaa99"
)

# Isogeny coefficients, lowest degree first.
XNUM_K: tuple[Fp2, ...] = (
    (_XNUM_K_0, _XNUM_K_0),
    (0, _XNUM_K_1_I),
    (_XNUM_K_2_R, _XNUM_K_2_I),
    (_XNUM_K_3_R, 0),
)
XDEN_K: tuple[Fp2, ...] = (
    (0, _XDEN_K_0_I),
    (12, _XDEN_K_1_I),
)
YNUM_K: tuple[Fp2, ...] = (
    (_YNUM_K_0, _YNUM_K_0),
    (0, _YNUM_K_1_I),
    (_YNUM_K_2_R, _YNUM_K_2_I),
    (_YNUM_K_3_R, 0),
)
YDEN_K: tuple[Fp2, ...] = (
    (_YDEN_K_0, _YDEN_K_0),
    (0, _YDEN_K_1_I),
    (18, _YDEN_K_2_I),
)


def _reduce(a: Fp2) -> Fp2:
    return (a[0] % P, a[1] % P)


def _iso_curve_func(x: Fp2) -> Fp2:
    return fp2_add(fp2_add(fp2_mul(fp2_mul(x, x), x), fp2_mul(ISO_A, x)), ISO_B)


def _poly(coefficients: tuple[Fp2, ...], x: Fp2, monic: bool = False) -> Fp2:
    """Evaluate sum(k_i * x^i), adding x^len(coefficients) when monic."""
    acc = FP2_ONE if monic else FP2_ZERO
    for k in reversed(coefficients):
        acc = fp2_add(fp2_mul(acc, x), k)
    return acc


def g2_simple_swu_iso(u: Fp2) -> tuple[Fp2, Fp2]:
    """Map an element of Fp2 to a point on the curve isogenous to G2."""
    u = _reduce(u)
    z = SSWU_Z
    zu2 = fp2_mul(z, fp2_mul(u, u))
    tv1 = fp2_inv(fp2_add(fp2_mul(zu2, zu2), zu2))
    if tv1 == FP2_ZERO:
        x1 = fp2_mul(ISO_B, fp2_inv(fp2_mul(z, ISO_A)))
    else:
        x1 = fp2_mul(fp2_mul(fp2_neg(ISO_B), fp2_inv(ISO_A)), fp2_add(FP2_ONE, tv1))
    gx1 = _iso_curve_func(x1)
    if fp2_is_square(gx1):
        x, y = x1, fp2_sqrt(gx1)
    else:
        x2 = fp2_mul(zu2, x1)
        x, y = x2, fp2_sqrt(_iso_curve_func(x2))
    if fp2_sgn0(u) != fp2_sgn0(y):
        y = fp2_neg(y)
    return (x, y)


def g2_isogeny_map(x: Fp2, y: Fp2) -> G2Point:
    """Apply the 3-isogeny from the auxiliary curve to the G2 curve."""
    x = _reduce(x)
    y = _reduce(y)
    xnum = _poly(XNUM_K, x)
    xden = _poly(XDEN_K, x, monic=True)
    ynum = _poly(YNUM_K, x)
    yden = _poly(YDEN_K, x, monic=True)
    xr = fp2_mul(xnum, fp2_inv(xden))
    yr = fp2_mul(y, fp2_mul(ynum, fp2_inv(yden)))
    return (xr, yr, xden == FP2_ZERO or yden == FP2_ZERO)


def g2_map_to_curve_sswu(u: Fp2) -> G2Point:
    """Map an element of Fp2 to a point on the G2 curve."""
    return g2_isogeny_map(*g2_simple_swu_iso(u))