# SPDX-License-Identifier: CECILL-2.1
from __future__ import annotations

from importlib.metadata import version as _version

__version__ = _version("barc4fourier")

from .maths import ComplexNumber
from .signal import (
    DomainError,
    FourierError,
    PadLengthError,
    ShapeMismatchError,
    Signal,
    Signal2D,
    autocorr1d,
    autocorr2d,
    fft1d,
    fft2d,
    ifft1d,
    ifft2d,
    psd1d,
    psd2d,
    xconv1d,
    xcorr1d,
    xcorr2d,
)
from . import maths
from . import signal

__all__ = [
    "__version__",
    "ComplexNumber",
    "Signal",
    "Signal2D",
    "FourierError",
    "DomainError",
    "ShapeMismatchError",
    "PadLengthError",
    "fft1d",
    "ifft1d",
    "fft2d",
    "ifft2d",
    "psd1d",
    "psd2d",
    "xcorr1d",
    "autocorr1d",
    "xconv1d",
    "xcorr2d",
    "autocorr2d",
    "maths",
    "signal",
]
