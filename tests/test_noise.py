import pytest
from hypothesis import given, strategies as st

from voxelcraft.noise import (
    noise1,
    noise2,
    noise3,
    noise4,
    pnoise1,
    pnoise2,
    pnoise3,
    pnoise4,
)

# Coordinates with exact binary fractions, so adding whole periods stays exact.
dyadic = st.builds(lambda k, f: k + f / 8.0, st.integers(-300, 300), st.integers(0, 7))
nonneg_dyadic = st.builds(lambda k, f: k + f / 8.0, st.integers(0, 300), st.integers(0, 7))
periods = st.integers(1, 40)


def test_noise1_half_pinned():
    assert noise1(0.5) == pytest.approx(0.329, abs=1e-6)


@pytest.mark.parametrize("point", [(0,), (3,), (-5,), (255,)])
def test_noise1_zero_on_lattice(point):
    assert noise1(float(point[0])) == 0.0


@given(st.integers(-500, 500), st.integers(-500, 500))
def test_noise2_zero_on_lattice(x, y):
    assert noise2(float(x), float(y)) == 0.0


@given(st.integers(-500, 500), st.integers(-500, 500), st.integers(-500, 500))
def test_noise3_zero_on_lattice(x, y, z):
    assert noise3(float(x), float(y), float(z)) == 0.0


@given(st.integers(-50, 50), st.integers(-50, 50), st.integers(-50, 50), st.integers(-50, 50))
def test_noise4_zero_on_lattice(x, y, z, w):
    assert noise4(float(x), float(y), float(z), float(w)) == 0.0


@given(dyadic)
def test_noise1_repeats_every_256(x):
    assert noise1(x + 256) == noise1(x)


@given(dyadic, dyadic)
def test_noise2_repeats_every_256(x, y):
    assert noise2(x + 256, y - 256) == noise2(x, y)


@given(dyadic, dyadic, dyadic)
def test_noise3_repeats_every_256(x, y, z):
    assert noise3(x, y + 256, z + 512) == noise3(x, y, z)


@given(dyadic, dyadic, dyadic, dyadic)
def test_noise4_repeats_every_256(x, y, z, w):
    assert noise4(x + 256, y, z, w - 256) == noise4(x, y, z, w)


@given(dyadic)
def test_pnoise1_with_256_matches_noise1(x):
    assert pnoise1(x, 256) == noise1(x)


@given(dyadic, dyadic)
def test_pnoise2_with_256_matches_noise2(x, y):
    assert pnoise2(x, y, 256, 512) == noise2(x, y)


@given(dyadic, dyadic, dyadic)
def test_pnoise3_with_256_matches_noise3(x, y, z):
    assert pnoise3(x, y, z, 256, 256, 256) == noise3(x, y, z)


@given(dyadic, dyadic, dyadic, dyadic)
def test_pnoise4_with_256_matches_noise4(x, y, z, w):
    assert pnoise4(x, y, z, w, 256, 256, 256, 256) == noise4(x, y, z, w)


@given(nonneg_dyadic, periods)
def test_pnoise1_periodic(x, px):
    assert pnoise1(x + px, px) == pnoise1(x, px)


@given(nonneg_dyadic, nonneg_dyadic, periods, periods)
def test_pnoise2_periodic(x, y, px, py):
    assert pnoise2(x + px, y + py, px, py) == pnoise2(x, y, px, py)


@given(nonneg_dyadic, nonneg_dyadic, nonneg_dyadic, periods, periods, periods)
def test_pnoise3_periodic(x, y, z, px, py, pz):
    assert pnoise3(x + px, y, z + 2 * pz, px, py, pz) == pnoise3(x, y, z, px, py, pz)


@given(
    nonneg_dyadic, nonneg_dyadic, nonneg_dyadic, nonneg_dyadic,
    periods, periods, periods, periods,
)
def test_pnoise4_periodic(x, y, z, w, px, py, pz, pw):
    shifted = pnoise4(x, y + py, z, w + pw, px, py, pz, pw)
    assert shifted == pnoise4(x, y, z, w, px, py, pz, pw)


finite = st.floats(-1000, 1000, allow_nan=False)


@given(finite)
def test_noise1_bounded(x):
    assert abs(noise1(x)) <= 1.6


@given(finite, finite)
def test_noise2_bounded(x, y):
    assert abs(noise2(x, y)) <= 2.0


@given(finite, finite, finite)
def test_noise3_bounded(x, y, z):
    assert abs(noise3(x, y, z)) <= 2.0


@given(finite, finite, finite, finite)
def test_noise4_bounded(x, y, z, w):
    assert abs(noise4(x, y, z, w)) <= 3.0


@given(st.floats(-100, 100, allow_nan=False))
def test_noise1_is_continuous(x):
    assert abs(noise1(x + 1e-6) - noise1(x)) < 1e-3


@given(st.floats(-100, 100, allow_nan=False), st.floats(-100, 100, allow_nan=False))
def test_noise2_is_continuous(x, y):
    assert abs(noise2(x + 1e-6, y - 1e-6) - noise2(x, y)) < 1e-3


def test_noise_off_lattice_matches_shifted_point():
    first = noise3(1.5, -2.25, 5.125)
    assert first == noise3(257.5, -2.25, 5.125)
    assert abs(first) <= 2.0
    second = noise4(0.125, 0.25, 0.375, 0.5)
    assert second == noise4(0.125, 256.25, 0.375, -255.5)
    assert abs(second) <= 3.0


def test_noise1_not_constant():
    values = {noise1(k + 0.5) for k in range(16)}
    assert len(values) > 1


def test_pnoise_zero_period_raises():
    with pytest.raises(ZeroDivisionError):
        pnoise1(0.5, 0)
    with pytest.raises(ZeroDivisionError):
        pnoise2(0.5, 0.5, 4, 0)
    with pytest.raises(ZeroDivisionError):
        pnoise3(0.5, 0.5, 0.5, 0, 4, 4)
    with pytest.raises(ZeroDivisionError):
        pnoise4(0.5, 0.5, 0.5, 0.5, 4, 4, 4, 0)