# SPDX-License-Identifier: CECILL-2.1
# Copyright (c) 2026 ESRF - the European Synchrotron

"""
FFT-based correlation and convolution.

Conventions:
- Everything is computed through fft1d/fft2d and is therefore circular
  (wrap-around). Callers wanting linear results must zero-pad beforehand.
- Results are NOT shifted: index 0 is zero lag.
- xcorr1d(x, y)[k] = sum_n x[(n + k) % N] * conj(y[n])
- xcorr2d(signal, pulse)[k, l] = sum_{m,n} signal[(m + k) % H, (n + l) % W] * conj(pulse[m, n])
- xconv1d(signal, filt)[k] = sum_n signal[n] * filt[(k - n) % N]

Normalization:
- normalize="none": raw circular correlation (default).
- normalize="peak": divides by the maximum absolute value, so the peak is 1.

Notes:
- remove_mean=True subtracts the mean sample from each operand first,
  which suppresses the DC pedestal for texture/speckle work.
"""

from __future__ import annotations

import logging
from typing import Literal

import numpy as np

from .common import _as_signal, _as_signal2d
from .containers import Signal, Signal2D
from .errors import ShapeMismatchError
from .fft import fft1d, fft2d, ifft1d, ifft2d

logger = logging.getLogger(__name__)


def _check_normalize(normalize: str) -> None:
    if normalize not in ("none", "peak"):
        raise ValueError(f"Invalid normalize='{normalize}'. Use 'none' or 'peak'.")


def _demean(s):
    arr = s.to_array()
    return type(s).from_array(arr - np.mean(arr))


def _peak_normalize(corr):
    m = float(np.max(np.abs(corr._data))) if corr._data.size else 0.0
    if m > 0:
        corr /= m
    return corr


def xcorr1d(
    x,
    y,
    *,
    remove_mean: bool = False,
    normalize: Literal["none", "peak"] = "none",
    verbose: bool = False,
) -> Signal:
    """
    Circular cross-correlation of two 1D signals using FFT.

    The shorter operand is zero-padded to the length of the longer one, then
    the result is IFFT(FFT(x) * conj(FFT(y))).

    Parameters:
        x (Signal | array-like):
            1D signal.
        y (Signal | array-like):
            1D signal (reference).
        remove_mean (bool):
            If True, subtracts the mean from each signal before correlation (default: False).
        normalize (str):
            "none" or "peak" (default: "none").
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal:
            Unshifted circular cross-correlation, length max(len(x), len(y)).

    Raises:
        DomainError, ValueError
    """
    _check_normalize(normalize)
    X = _as_signal(x)
    Y = _as_signal(y)

    # demean before padding: the padded tail stays at zero
    if remove_mean:
        X = _demean(X)
        Y = _demean(Y)

    if Y.length < X.length:
        logger.debug("xcorr1d: zero-padding y from %d to %d samples", Y.length, X.length)
        Y = Y.pad_with_zeros(X.length)
    elif X.length < Y.length:
        logger.debug("xcorr1d: zero-padding x from %d to %d samples", X.length, Y.length)
        X = X.pad_with_zeros(Y.length)

    if verbose:
        logger.info("xcorr1d: n=%d", X.length)

    corr = ifft1d(fft1d(X) * fft1d(Y).conjugate_inplace())

    if normalize == "peak":
        return _peak_normalize(corr)
    return corr


def autocorr1d(
    x,
    *,
    remove_mean: bool = False,
    normalize: Literal["none", "peak"] = "none",
    verbose: bool = False,
) -> Signal:
    """
    Circular auto-correlation of a 1D signal using FFT.

    Parameters:
        x (Signal | array-like):
            1D signal.
        remove_mean (bool):
            If True, subtracts the mean before correlation (default: False).
        normalize (str):
            "none" or "peak" (default: "none").
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal:
            Unshifted circular auto-correlation (same length as x).

    Raises:
        DomainError, ValueError
    """
    return xcorr1d(x, x, remove_mean=remove_mean, normalize=normalize, verbose=verbose)


def xconv1d(signal, filt, *, verbose: bool = False) -> Signal:
    """
    Circular convolution of a signal with a filter, via the convolution theorem.

    The filter is zero-padded to the signal length; no extra padding for linear
    convolution is performed.

    Parameters:
        signal (Signal | array-like):
            1D signal to filter, length a power of two.
        filt (Signal | array-like):
            1D filter kernel, not longer than the signal.
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal:
            Filtered signal (same length as signal).

    Raises:
        DomainError, PadLengthError
    """
    S = _as_signal(signal)
    H = _as_signal(filt).pad_with_zeros(S.length)

    if verbose:
        logger.info("xconv1d: n=%d", S.length)

    return ifft1d(fft1d(S) * fft1d(H))


def xcorr2d(
    signal,
    pulse,
    *,
    remove_mean: bool = False,
    normalize: Literal["none", "peak"] = "none",
    verbose: bool = False,
) -> Signal2D:
    """
    Circular cross-correlation of a 2D response with a 2D pulse using FFT.

    Computes IFFT2D(conj(FFT2D(pulse)) * FFT2D(signal)).

    Parameters:
        signal (Signal2D | array-like):
            2D response with shape (ny, nx), both powers of two.
        pulse (Signal2D | array-like):
            2D pulse with the same shape as signal.
        remove_mean (bool):
            If True, subtracts the mean from each grid before correlation (default: False).
        normalize (str):
            "none" or "peak" (default: "none").
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal2D:
            Unshifted circular cross-correlation with shape (ny, nx).

    Raises:
        ShapeMismatchError, DomainError, ValueError
    """
    _check_normalize(normalize)
    S = _as_signal2d(signal)
    P = _as_signal2d(pulse)
    if S.shape != P.shape:
        raise ShapeMismatchError(S.shape, P.shape)

    if verbose:
        logger.info("xcorr2d: (h x w: %d x %d)", S.height, S.width)

    if remove_mean:
        S = _demean(S)
        P = _demean(P)

    corr = ifft2d(fft2d(P).conjugate_inplace() * fft2d(S))

    if normalize == "peak":
        return _peak_normalize(corr)
    return corr


def autocorr2d(
    a,
    *,
    remove_mean: bool = False,
    normalize: Literal["none", "peak"] = "none",
    verbose: bool = False,
) -> Signal2D:
    """
    Circular auto-correlation of a 2D signal using FFT.

    Parameters:
        a (Signal2D | array-like):
            2D signal with shape (ny, nx), both powers of two.
        remove_mean (bool):
            If True, subtracts the mean before correlation (default: False).
        normalize (str):
            "none" or "peak" (default: "none").
        verbose (bool):
            If True, log a one-line summary at INFO level (default: False).

    Returns:
        Signal2D:
            Unshifted circular auto-correlation with shape (ny, nx).

    Raises:
        DomainError, ValueError
    """
    return xcorr2d(a, a, remove_mean=remove_mean, normalize=normalize, verbose=verbose)
