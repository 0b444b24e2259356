# SPDX-License-Identifier: CECILL-2.1
# Copyright (c) 2026 ESRF - the European Synchrotron

"""
Radix-2 FFT engine and power spectral density helpers.

Conventions:
- Transforms operate on Signal / Signal2D containers (array-likes are
  converted) and always return a new container; inputs are never mutated.
- Lengths (1D) and both dimensions (2D) must be powers of two, else DomainError.
- Forward kernel is exp(-2*pi*i*k*n/N), unnormalized. Inverse transforms
  divide by N (1D) or width*height (2D).
- fft1d/fft2d outputs are NOT shifted: bin 0 is DC. Only the PSD helpers
  return DC-centered (fftshift) arrays, with matching shifted frequency axes.
- 2D grids use NumPy shape (height, width) = (ny, nx), axes (y, x).
"""

from __future__ import annotations

import logging

import numpy as np

from .common import (
    _as_signal,
    _as_signal2d,
    _check_power_of_two,
    _resolve_step_1d,
    _resolve_steps_2d,
)
from .containers import Signal, Signal2D

logger = logging.getLogger(__name__)


def _radix2(a: np.ndarray) -> np.ndarray:
    # recursive decimation-in-time; a.size is a power of two
    n = a.size
    if n == 1:
        return a.copy()

    half = n // 2
    even = _radix2(a[0::2])
    odd = _radix2(a[1::2])

    w = -2.0 * np.pi * np.arange(half) / n
    t = (np.cos(w) + 1j * np.sin(w)) * odd

    out = np.empty(n, dtype=np.complex128)
    out[:half] = even + t
    out[half:] = even - t
    return out


def fft1d(signal, *, verbose: bool = False) -> Signal:
    """
    Forward 1D discrete Fourier transform (recursive radix-2 Cooley-Tukey).

    Parameters:
        signal (Signal | array-like):
            1D input of length n, n a power of two.
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal:
            Unshifted spectrum of length n; X[k] = sum_t x[t] exp(-2*pi*i*k*t/n).

    Raises:
        DomainError
    """
    s = _as_signal(signal)
    _check_power_of_two(s.length)

    if verbose:
        logger.info("fft1d: n=%d", s.length)

    return Signal._wrap(_radix2(s._data))


def ifft1d(spectrum, *, verbose: bool = False) -> Signal:
    """
    Inverse 1D discrete Fourier transform.

    Computed as conj(FFT(conj(X))) / n, so ifft1d(fft1d(x)) == x for complex x.

    Parameters:
        spectrum (Signal | array-like):
            Unshifted 1D spectrum of length n, n a power of two.
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal:
            Reconstructed signal of length n.

    Raises:
        DomainError
    """
    X = _as_signal(spectrum)
    if verbose:
        logger.info("ifft1d: n=%d", X.length)

    result = fft1d(X.conjugate()).conjugate_inplace()
    result /= X.length
    return result


def fft2d(signal, *, verbose: bool = False) -> Signal2D:
    """
    Forward 2D discrete Fourier transform, separable: rows first, then columns.

    Parameters:
        signal (Signal2D | array-like):
            2D input with shape (height, width), both powers of two.
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal2D:
            Unshifted 2D spectrum with the same shape.

    Raises:
        DomainError
    """
    s = _as_signal2d(signal)
    _check_power_of_two(s.height, axis="height")
    _check_power_of_two(s.width, axis="width")

    if verbose:
        logger.info("fft2d: (h x w: %d x %d)", s.height, s.width)

    result = Signal2D(s.height, s.width)
    for n in range(s.height):
        result[n] = fft1d(s[n])
    for i in range(s.width):
        result.set_column(i, fft1d(result.column(i)))
    return result


def ifft2d(spectrum, *, verbose: bool = False) -> Signal2D:
    """
    Inverse 2D discrete Fourier transform.

    Computed as conj(FFT2D(conj(X))) / (width * height).

    Parameters:
        spectrum (Signal2D | array-like):
            Unshifted 2D spectrum with shape (height, width), both powers of two.
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal2D:
            Reconstructed 2D signal with the same shape.

    Raises:
        DomainError
    """
    X = _as_signal2d(spectrum)
    if verbose:
        logger.info("ifft2d: (h x w: %d x %d)", X.height, X.width)

    result = fft2d(X.conjugate()).conjugate_inplace()
    result /= X.width * X.height
    return result


def freq_axis1d(n: int, *, dx: float = 1.0) -> np.ndarray:
    """
    Shifted 1D frequency axis (cycles per unit of dx) for n samples.

    Raises:
        ValueError
    """
    if n < 1:
        raise ValueError("n must be >= 1.")
    if dx <= 0:
        raise ValueError("dx must be > 0.")
    return np.fft.fftshift(np.fft.fftfreq(int(n), d=float(dx)))


def freq_axes2d(ny: int, nx: int, *, dx: float = 1.0, dy: float = 1.0) -> tuple[np.ndarray, np.ndarray]:
    """
    Shifted frequency axes for a (ny, nx) grid.

    Returns:
        tuple[np.ndarray, np.ndarray]:
            - fx (np.ndarray): shifted frequency axis for x (length nx).
            - fy (np.ndarray): shifted frequency axis for y (length ny).

    Raises:
        ValueError
    """
    return freq_axis1d(nx, dx=dx), freq_axis1d(ny, dx=dy)


def psd1d(
    signal,
    *,
    x: np.ndarray | None = None,
    dx: float = 1.0,
    scale: bool = True,
    verbose: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Shifted 1D power spectral density |FFT|^2 of a signal.

    Parameters:
        signal (Signal | array-like):
            1D input of length n, n a power of two.
        x (np.ndarray | None):
            Optional 1D coordinate axis (length n), uniformly sampled.
        dx (float):
            Sample spacing (default: 1.0). Used only if x is None.
        scale (bool):
            If True, applies scaling: PSD *= dx / n.
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        tuple[np.ndarray, np.ndarray]:
            - P (np.ndarray): DC-centered PSD (length n).
            - fx (np.ndarray): shifted frequency axis (length n).

    Raises:
        DomainError, ValueError
    """
    s = _as_signal(signal)
    step = _resolve_step_1d(n=s.length, x=x, dx=dx, name="x")

    F = fft1d(s, verbose=verbose).to_array()
    P = np.fft.fftshift(np.abs(F) ** 2)

    if scale:
        P = P * (step / float(P.size))

    return P, freq_axis1d(s.length, dx=step)


def psd2d(
    image,
    *,
    x: np.ndarray | None = None,
    y: np.ndarray | None = None,
    dx: float = 1.0,
    dy: float = 1.0,
    scale: bool = True,
    verbose: bool = False,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Shifted 2D power spectral density |FFT2D|^2 of an image.

    Parameters:
        image (Signal2D | array-like):
            2D input with shape (ny, nx), both powers of two.
        x (np.ndarray | None):
            Optional 1D x-axis coordinates (length nx), uniformly sampled.
        y (np.ndarray | None):
            Optional 1D y-axis coordinates (length ny), uniformly sampled.
        dx (float):
            Pixel size in x (default: 1.0). Used only if x/y are None.
        dy (float):
            Pixel size in y (default: 1.0). Used only if x/y are None.
        scale (bool):
            If True, applies scaling: PSD *= (dx * dy) / (nx * ny).
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        tuple[np.ndarray, np.ndarray, np.ndarray]:
            - P (np.ndarray): DC-centered PSD with shape (ny, nx).
            - fx (np.ndarray): shifted frequency axis for x (length nx).
            - fy (np.ndarray): shifted frequency axis for y (length ny).

    Raises:
        DomainError, ValueError
    """
    img = _as_signal2d(image)
    step_x, step_y = _resolve_steps_2d(shape=img.shape, x=x, y=y, dx=dx, dy=dy)

    F = fft2d(img, verbose=verbose).to_array()
    P = np.fft.fftshift(np.abs(F) ** 2)

    if scale:
        ny, nx = P.shape
        P = P * ((step_x * step_y) / (float(nx) * float(ny)))

    fx, fy = freq_axes2d(img.height, img.width, dx=step_x, dy=step_y)
    return P, fx, fy
