# tests/test_fft.py
import logging

import numpy as np
import pytest

from barc4fourier.maths import ComplexNumber
from barc4fourier.signal import (
    DomainError,
    Signal,
    Signal2D,
    fft1d,
    fft2d,
    freq_axes2d,
    freq_axis1d,
    ifft1d,
    ifft2d,
    psd1d,
    psd2d,
)


def _random_complex(rng, shape):
    return rng.standard_normal(shape) + 1j * rng.standard_normal(shape)


def test_fft_of_constant_signal():
    X = fft1d(Signal.from_array([1, 1, 1, 1]))
    np.testing.assert_allclose(X.to_array(), [4, 0, 0, 0], atol=1e-12)


def test_fft_base_case_returns_equal_samples():
    s = Signal.from_array([2 - 5j])
    X = fft1d(s)
    assert X[0] == ComplexNumber(2.0, -5.0)
    assert len(X) == 1


@pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 256])
def test_fft_matches_numpy(n):
    rng = np.random.default_rng(n)
    x = _random_complex(rng, n)
    np.testing.assert_allclose(fft1d(x).to_array(), np.fft.fft(x), rtol=1e-10, atol=1e-10)


def test_fft_does_not_mutate_input():
    x = Signal.from_array([1, 2, 3, 4j])
    before = x.to_array()
    fft1d(x)
    ifft1d(x)
    np.testing.assert_array_equal(x.to_array(), before)


@pytest.mark.parametrize("n", [0, 3, 6, 12])
def test_fft_rejects_non_power_of_two(n):
    with pytest.raises(DomainError) as exc:
        fft1d(Signal(n))
    assert exc.value.length == n
    with pytest.raises(DomainError):
        ifft1d(Signal(n))


def test_fft_linearity():
    rng = np.random.default_rng(1)
    a = Signal.from_array(_random_complex(rng, 16))
    b = Signal.from_array(_random_complex(rng, 16))
    np.testing.assert_allclose(
        fft1d(a + b).to_array(), (fft1d(a) + fft1d(b)).to_array(), atol=1e-10
    )


@pytest.mark.parametrize("n", [1, 2, 8, 32])
def test_round_trip_complex(n):
    rng = np.random.default_rng(100 + n)
    x = _random_complex(rng, n)
    np.testing.assert_allclose(ifft1d(fft1d(x)).to_array(), x, atol=1e-10)


def test_ifft_matches_numpy():
    rng = np.random.default_rng(7)
    X = _random_complex(rng, 16)
    np.testing.assert_allclose(ifft1d(X).to_array(), np.fft.ifft(X), atol=1e-12)


@pytest.mark.parametrize("shape", [(1, 1), (2, 4), (4, 2), (8, 8), (16, 4)])
def test_fft2d_matches_numpy(shape):
    rng = np.random.default_rng(sum(shape))
    x = _random_complex(rng, shape)
    F = fft2d(Signal2D.from_array(x))
    assert F.shape == shape
    np.testing.assert_allclose(F.to_array(), np.fft.fft2(x), rtol=1e-10, atol=1e-10)


@pytest.mark.parametrize("shape", [(2, 2), (4, 8), (8, 1)])
def test_round_trip_2d(shape):
    rng = np.random.default_rng(42)
    x = _random_complex(rng, shape)
    np.testing.assert_allclose(ifft2d(fft2d(x)).to_array(), x, atol=1e-10)


@pytest.mark.parametrize("shape,axis", [((3, 4), "height"), ((4, 6), "width"), ((0, 4), "height")])
def test_fft2d_rejects_non_power_of_two(shape, axis):
    with pytest.raises(DomainError) as exc:
        fft2d(Signal2D(*shape))
    assert exc.value.axis == axis
    with pytest.raises(DomainError):
        ifft2d(Signal2D(*shape))


def test_fft2d_does_not_mutate_input():
    g = Signal2D.from_array([[1, 2], [3, 4j]])
    before = g.to_array()
    fft2d(g)
    ifft2d(g)
    np.testing.assert_array_equal(g.to_array(), before)


def test_verbose_logs_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="barc4fourier.signal.fft"):
        fft2d(Signal2D(2, 4), verbose=True)
    assert "fft2d: (h x w: 2 x 4)" in caplog.text


def test_freq_axes():
    np.testing.assert_allclose(freq_axis1d(4), [-0.5, -0.25, 0.0, 0.25])
    np.testing.assert_allclose(freq_axis1d(4, dx=0.5), [-1.0, -0.5, 0.0, 0.5])
    fx, fy = freq_axes2d(2, 4, dx=1.0, dy=2.0)
    np.testing.assert_allclose(fx, [-0.5, -0.25, 0.0, 0.25])
    np.testing.assert_allclose(fy, [-0.25, 0.0])
    with pytest.raises(ValueError):
        freq_axis1d(4, dx=0.0)


def test_psd1d_parseval_and_centering():
    rng = np.random.default_rng(3)
    x = rng.standard_normal(32)
    P, fx = psd1d(x, scale=False)
    assert P.shape == (32,)
    assert fx[16] == 0.0
    np.testing.assert_allclose(P[16], abs(np.sum(x)) ** 2)
    np.testing.assert_allclose(np.sum(P) / 32, np.sum(np.abs(x) ** 2))


def test_psd1d_axis_calibration():
    x = np.ones(8)
    axis = np.arange(8) * 0.1
    P_axis, fx_axis = psd1d(x, x=axis)
    P_dx, fx_dx = psd1d(x, dx=0.1)
    np.testing.assert_allclose(P_axis, P_dx)
    np.testing.assert_allclose(fx_axis, fx_dx)
    np.testing.assert_allclose(P_dx[4], 64 * 0.1 / 8)

    with pytest.raises(ValueError):
        psd1d(x, x=axis, dx=0.1)
    with pytest.raises(ValueError):
        psd1d(x, x=np.array([0.0, 1.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]))


def test_psd2d_matches_numpy():
    rng = np.random.default_rng(5)
    img = rng.standard_normal((4, 8))
    P, fx, fy = psd2d(img, dx=2.0, dy=0.5)
    expected = np.fft.fftshift(np.abs(np.fft.fft2(img)) ** 2) * (2.0 * 0.5 / 32)
    np.testing.assert_allclose(P, expected, rtol=1e-10)
    assert fx.shape == (8,)
    assert fy.shape == (4,)

    with pytest.raises(ValueError):
        psd2d(img, x=np.arange(8.0))
