import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from specrypt.bls_field import P, fp2_add, fp2_inv, fp2_mul, fp2_sgn0
from specrypt.bls_sswu_g2 import (
    ISO_A,
    ISO_B,
    SSWU_Z,
    g2_isogeny_map,
    g2_map_to_curve_sswu,
    g2_simple_swu_iso,
)

U128 = st.integers(min_value=0, max_value=(1 << 128) - 1)


def _on_iso_curve(x, y):
    lhs = fp2_mul(y, y)
    rhs = fp2_add(fp2_add(fp2_mul(fp2_mul(x, x), x), fp2_mul(ISO_A, x)), ISO_B)
    return lhs == rhs


def _on_g2_curve(x, y):
    return fp2_mul(y, y) == fp2_add(fp2_mul(fp2_mul(x, x), x), (4, 4))


def test_iso_curve_constants_drive_exceptional_case():
    assert ISO_A == (0, 240)
    assert ISO_B == (1012, 1012)
    assert SSWU_Z == (P - 2, P - 1)
    x, _ = g2_simple_swu_iso((0, 0))
    assert x == fp2_mul(ISO_B, fp2_inv(fp2_mul(SSWU_Z, ISO_A)))


def test_g2_simple_swu_iso():
    x, y = g2_simple_swu_iso((3082, 4021))
    assert _on_iso_curve(x, y)


def test_g2_simple_swu_iso_sign_matches_input():
    u = (3082, 4021)
    _, y = g2_simple_swu_iso(u)
    assert fp2_sgn0(y) == fp2_sgn0(u)


def test_g2_simple_swu_iso_zero_input_takes_exceptional_branch():
    x, y = g2_simple_swu_iso((0, 0))
    assert _on_iso_curve(x, y)


def test_g2_simple_swu_iso_is_deterministic():
    assert g2_simple_swu_iso((17, 99)) == g2_simple_swu_iso((17 + P, 99))


@settings(max_examples=15, deadline=None)
@given(U128, U128)
def test_prop_g2_simple_swu_iso(u1, u2):
    x, y = g2_simple_swu_iso((u1, u2))
    assert _on_iso_curve(x, y)


def test_g2_map_to_curve_sswu():
    x, y, inf = g2_map_to_curve_sswu((3082, 4021))
    assert _on_g2_curve(x, y)
    assert inf is False


@settings(max_examples=15, deadline=None)
@given(U128, U128)
def test_prop_g2_map_to_curve_sswu(a, b):
    x, y, _ = g2_map_to_curve_sswu((a, b))
    assert _on_g2_curve(x, y)


def test_isogeny_maps_iso_point_onto_g2():
    x, y = g2_simple_swu_iso((5, 7))
    xr, yr, inf = g2_isogeny_map(x, y)
    assert _on_g2_curve(xr, yr)
    assert inf is False


def test_map_is_composition_of_iso_and_isogeny():
    u = (123456789, 987654321)
    assert g2_map_to_curve_sswu(u) == g2_isogeny_map(*g2_simple_swu_iso(u))


@pytest.mark.parametrize("u", [(1, 0), (0, 1), (P - 1, P - 1)])
def test_map_edge_inputs_land_on_curve(u):
    x, y, _ = g2_map_to_curve_sswu(u)
    assert _on_g2_curve(x, y)