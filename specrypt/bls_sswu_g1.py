"""Simplified SWU map to the BLS12-381 G1 curve through an 11-isogeny.

Field elements are integers reduced modulo ``P``. The map first lands on the
isogenous curve ``y^2 = x^3 + A' * x + B'`` and then applies the isogeny to
reach ``y^2 = x^3 + 4``. Points are ``(x, y, at_infinity)``.
"""

from __future__ import annotations

from specrypt.bls_field import P, fp_inv, fp_is_square, fp_sgn0, fp_sqrt

G1Point = tuple[int, int, bool]


def _fp(words: str) -> int:
    return int("".join(words.split()), 16)


# Constant Z of the simplified SWU map for G1.
SSWU_Z = 11

# Coefficients of the isogenous curve.
ISO_A = _fp(
    "00144698a3b8e943 3d693a02c96d4982 b0ea985383ee66a8"
    " d8e8981aefd881ac 98936f8da0e0f97f 5cf428082d584c1d"
)
ISO_B = _fp(
    "12e2908d11688030 018b12e8753eee3b 2016c1f0f24f4070"
    " a0b9c14fcef35ef5 5a23215a316ceaa5 d1cc48e98e172be0"
)

# Isogeny coefficients, lowest degree first.
XNUM_K = tuple(
    _fp(words)
    for words in (
        "11a05f2b1e833340 b809101dd9981585 6b303e88a2d7005f f2627b56cdb4e2c8 5610c2d5f2e62d6e aeac1662734649b7",
        "17294ed3e943ab2f 0588bab22147a81c 7c17e75b2f6a8417 f565e33c70d1e86b 4838f2a6f318c356 e834eef1b3cb83bb",
        "0d54005db97678ec 1d1048c5d10a9a1b ce032473295983e5 6878e501ec68e25c 958c3e3d2a09729f e0179f9dac9edcb0",
        "1778e7166fcc6db7 4e0609d307e55412 d7f5e4656a8dbf25 f1b33289f1b33083 5336e25ce3107193 c5b388641d9b6861",
        "0e99726a3199f443 6642b4b3e4118e54 99db995a1257fb3f 086eeb65982fac18 985a286f301e77c4 51154ce9ac8895d9",
        "1630c3250d7313ff 01d1201bf7a74ab5 db3cb17dd952799b 9ed3ab9097e68f90 a0870d2dcae73d19 cd13c1c66f652983",
        "0d6ed6553fe44d29 6a3726c38ae652bf b11586264f0f8ce1 9008e218f9c86b2a 8da25128c1052eca ddd7f225a139ed84",
        "17b81e7701abdbe2 e8743884d1117e53 356de5ab275b4db1 a682c62ef0f27533 39b7c8f8c8f475af 9ccb5618e3f0c88e",
        "080d3cf1f9a78fc4 7b90b33563be990d c43b756ce79f5574 a2c596c928c5d1de 4fa295f296b74e95 6d71986a8497e317",
        "169b1f8e1bcfa7c4 2e0c37515d138f22 dd2ecb803a0c5c99 676314baf4bb1b7f a3190b2edc032779 7f241067be390c9e",
        "10321da079ce07e2 72d8ec09d2565b0d fa7dccdde6787f96 d50af36003b14866 f69b771f8c285dec ca67df3f1605fb7b",
        "06e08c248e260e70 bd1e962381edee3d 31d79d7e22c837bc 23c0bf1bc24c6b68 c24b1b80b64d391f a9c8ba2e8ba2d229",
    )
)

XDEN_K = tuple(
    _fp(words)
    for words in (
        "08ca8d548cff19ae 18b2e62f4bd3fa6f 01d5ef4ba35b48ba 9c9588617fc8ac62 b558d681be343df8 993cf9fa40d21b1c",
        "12561a5deb559c43 48b4711298e53636 7041e8ca0cf0800c 0126c2588c48bf57 13daa8846cb026e9 e5c8276ec82b3bff",
        "0b2962fe57a3225e 8137e629bff2991f 6f89416f5a718cd1 fca64e00b11aceac d6a3d0967c94fedc fcc239ba5cb83e19",
        "03425581a58ae2fe c83aafef7c40eb54 5b08243f16b16551 54cca8abc28d6fd0 4976d5243eecf5c4 130de8938dc62cd8",
        "13a8e162022914a8 0a6f1d5f43e7a07d ffdfc759a12062bb 8d6b44e833b306da 9bd29ba81f35781d 539d395b3532a21e",
        "0e7355f8e4e667b9 55390f7f0506c6e9 395735e9ce9cad4d 0a43bcef24b8982f 7400d24bc4228f11 c02df9a29f6304a5",
        "0772caacf1693619 0f3e0c63e0596721 570f5799af53a189 4e2e073062aede9c ea73b3538f0de06c ec2574496ee84a3a",
        "14a7ac2a9d64a8b2 30b3f5b074cf0199 6e7f63c21bca68a8 1996e1cdf9822c58 0fa5b9489d11e2d3 11f7d99bbdcc5a5e",
        "0a10ecf6ada54f82 5e920b3dafc7a3cc e07f8d1d7161366b 74100da67f398835 03826692abba4370 4776ec3a79a1d641",
        "095fc13ab9e92ad4 476d6e3eb3a56680 f682b4ee96f7d037 76df533978f31c15 93174e4b4b786500 2d6384d168ecdd0a",
    )
)

YNUM_K = tuple(
    _fp(words)
    for words in (
        "090d97c81ba24ee0 259d1f094980dcfa 11ad138e48a86952 2b52af6c956543d3 cd0c7aee9b3ba3c2 be9845719707bb33",
        "134996a104ee5811 d51036d776fb4683 1223e96c254f383d 0f906343eb67ad34 d6c56711962fa8bf e097e75a2e41c696",
        "00cc786baa966e66 f4a384c86a3b4994 2552e2d658a31ce2 c344be4b91400da7 d26d521628b00523 b8dfe240c72de1f6",
        "01f86376e8981c21 7898751ad8746757 d42aa7b90eeb791c 09e4a3ec03251cf9 de405aba9ec61dec a6355c77b0e5f4cb",
        "08cc03fdefe0ff13 5caf4fe2a21529c4 195536fbe3ce50b8 79833fd221351adc 2ee7f8dc099040a8 41b6daecf2e8fedb",
        "16603fca40634b6a 2211e11db8f0a6a0 74a7d0d4afadb7bd 76505c3d3ad5544e 203f6326c95a8072 99b23ab13633a5f0",
        "04ab0b9bcfac1bbc b2c977d027796b3c e75bb8ca2be184cb 5231413c4d634f37 47a87ac2460f415e c961f8855fe9d6f2",
        "0987c8d5333ab86f de9926bd2ca6c674 170a05bfe3bdd81f fd038da6c26c8426 42f64550fedfe935 a15e4ca31870fb29",
        "09fc4018bd96684b e88c9e221e4da1bb 8f3abd16679dc26c 1e8b6e6a1f20cabe 69d65201c78607a3 60370e577bdba587",
        "0e1bba7a1186bdb5 223abde7ada14a23 c42a0ca7915af6fe 06985e7ed1e4d43b 9b3f7055dd4eba6f 2bafaaebca731c30",
        "19713e47937cd1be 0dfd0b8f1d43fb93 cd2fcbcb6caf493f d1183e416389e610 31bf3a5cce3fbafc e813711ad011c132",
        "18b46a908f36f6de b918c143fed2edcc 523559b8aaf0c246 2e6bfe7f911f6432 49d9cdf41b44d606 ce07c8a4d0074d8e",
        "0b182cac101b9399 d155096004f53f44 7aa7b12a3426b08e c02710e807b4633f 06c851c1919211f2 0d4c04f00b971ef8",
        "0245a394ad1eca9b 72fc00ae7be315dc 757b3b080d4c1580 13e6632d3c40659c c6cf90ad1c232a64 42d9d3f5db980133",
        "05c129645e44cf11 02a159f748c4a3fc 5e673d81d7e86568 d9ab0f5d396a7ce4 6ba1049b6579afb7 866b1e715475224b",
        "15e6be4e990f03ce 4ea50b3b42df2eb5 cb181d8f84965a39 57add4fa95af01b2 b665027efec01c77 04b456be69c8b604",
    )
)

YDEN_K = tuple(
    _fp(words)
    for words in (
        "16112c4c3a9c98b2 52181140fad0eae9 601a6de578980be6 eec3232b5be72e7a 07f3688ef60c206d 01479253b03663c1",
        "1962d75c2381201e 1a0cbd6c43c348b8 85c84ff731c4d59c a4a10356f453e01f 78a4260763529e35 32f6102c2e49a03d",
        "058df3306640da27 6faaae7d6e8eb157 78c4855551ae7f31 0c35a5dd279cd2ec a6757cd636f96f89 1e2538b53dbf67f2",
        "16b7d288798e5395 f20d23bf89edb4d1 d115c5dbddbcd30e 123da489e726af41 727364f2c28297ad a8d26d98445f5416",
        "0be0e079545f43e4 b00cc912f8228ddc c6d19c9f0f69bbb0 542eda0fc9dec916 a20b15dc0fd2eded da39142311a5001d",
        "08d9e5297186db2d 9fb266eaac783182 b70152c65550d881 c5ecd87b6f0f5a64 49f38db9dfa9cce2 02c6477faaf9b7ac",
        "166007c08a99db2f c3ba8734ace9824b 5eecfdfa8d0cf8ef 5dd365bc400a0051 d5fa9c01a58b1fb9 3d1a1399126a775c",
        "16a3ef08be3ea7ea 03bcddfabba6ff6e e5a4375efa1f4fd7 feb34fd206357132 b920f5b00801dee4 60ee415a15812ed9",
        "1866c8ed336c6123 1a1be54fd1d74cc4 f9fb0ce4c6af5920 abc5750c4bf39b48 52cfe2f7bb924883 6b233d9d55535d4a",
        "167a55cda70a6e1c ea820597d94a8490 3216f763e13d87bb 5308592e7ea7d4fb c7385ea3d529b35e 346ef48bb8913f55",
        "04d2f259eea405bd 48f010a01ad2911d 9c6dd039bb61a629 0e591b36e636a5c8 71a5c29f4f830604 00f8b49cba8f6aa8",
        "0accbb67481d033f f5852c1e48c50c47 7f94ff8aefce42d2 8c0f9a88cea79135 16f968986f7ebbea 9684b529e2561092",
        "0ad6b9514c767fe3 c3613144b45f1496 543346d98adf0226 7d5ceef9a00d9b86 93000763e3b90ac1 1e99b138573345cc",
        "02660400eb2e4f3b 628bdd0d53cd76f2 bf565b94e72927c1 cb748df27942480e 420517bd8714cc80 d1fadc1326ed06f7",
        "0e0fa1d816ddc03e 6b24255e0d7819c1 71c40f65e273b853 324efcd6356caa20 5ca2f570f1349780 4415473a1d634b8f",
    )
)


def _iso_curve_func(x: int) -> int:
    return (pow(x, 3, P) + ISO_A * x + ISO_B) % P


def _poly(coefficients: tuple[int, ...], x: int, monic: bool = False) -> int:
    """Evaluate sum(k_i * x^i), adding x^len(coefficients) when monic."""
    acc = 1 if monic else 0
    for k in reversed(coefficients):
        acc = (acc * x + k) % P
    return acc


def g1_simple_swu_iso(u: int) -> tuple[int, int]:
    """Map an element of Fp to a point on the curve isogenous to G1."""
    u %= P
    z = SSWU_Z
    zu2 = z * u * u % P
    tv1 = fp_inv(zu2 * zu2 + zu2)
    if tv1 == 0:
        x1 = ISO_B * fp_inv(z * ISO_A) % P
    else:
        x1 = -ISO_B * fp_inv(ISO_A) % P * (1 + tv1) % P
    gx1 = _iso_curve_func(x1)
    if fp_is_square(gx1):
        x, y = x1, fp_sqrt(gx1)
    else:
        x2 = zu2 * x1 % P
        x, y = x2, fp_sqrt(_iso_curve_func(x2))
    if fp_sgn0(u) != fp_sgn0(y):
        y = -y % P
    return (x, y)


def g1_isogeny_map(x: int, y: int) -> G1Point:
    """Apply the 11-isogeny from the auxiliary curve to the G1 curve."""
    x %= P
    y %= P
    xnum = _poly(XNUM_K, x)
    xden = _poly(XDEN_K, x, monic=True)
    ynum = _poly(YNUM_K, x)
    yden = _poly(YDEN_K, x, monic=True)
    xr = xnum * fp_inv(xden) % P
    yr = y * ynum % P * fp_inv(yden) % P
    return (xr, yr, xden == 0 or yden == 0)


def g1_map_to_curve_sswu(u: int) -> G1Point:
    """Map an element of Fp to a point on the G1 curve."""
    return g1_isogeny_map(*g1_simple_swu_iso(u))