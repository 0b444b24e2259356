# SPDX-License-Identifier: CECILL-2.1
# Copyright (c) 2026 ESRF - the European Synchrotron

"""
Complex sample value type.

Conventions:
- ComplexNumber is immutable; every operation returns a new value.
- Division is by a real scalar only and follows IEEE-754 (inf/nan on zero
  division, no ZeroDivisionError).
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Complex, Real

import numpy as np


@dataclass(frozen=True)
class ComplexNumber:
    """
    A single complex sample.

    Parameters:
        real (float): Real component (default: 0.0).
        imag (float): Imaginary component (default: 0.0).
    """

    real: float = 0.0
    imag: float = 0.0

    @classmethod
    def from_complex(cls, value) -> ComplexNumber:
        """
        Build a ComplexNumber from a ComplexNumber, Python number or NumPy scalar.

        Raises:
            TypeError
        """
        if isinstance(value, ComplexNumber):
            return value
        if isinstance(value, (Complex, np.number)):
            z = complex(value)
            return cls(z.real, z.imag)
        raise TypeError(f"Cannot interpret {type(value).__name__} as a complex sample.")

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.real, -self.imag)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __abs__(self) -> float:
        return float(np.hypot(self.real, self.imag))

    def __neg__(self) -> ComplexNumber:
        return ComplexNumber(-self.real, -self.imag)

    def __add__(self, other) -> ComplexNumber:
        try:
            o = ComplexNumber.from_complex(other)
        except TypeError:
            return NotImplemented
        return ComplexNumber(self.real + o.real, self.imag + o.imag)

    __radd__ = __add__

    def __sub__(self, other) -> ComplexNumber:
        try:
            o = ComplexNumber.from_complex(other)
        except TypeError:
            return NotImplemented
        return ComplexNumber(self.real - o.real, self.imag - o.imag)

    def __rsub__(self, other) -> ComplexNumber:
        try:
            o = ComplexNumber.from_complex(other)
        except TypeError:
            return NotImplemented
        return ComplexNumber(o.real - self.real, o.imag - self.imag)

    def __mul__(self, other) -> ComplexNumber:
        try:
            o = ComplexNumber.from_complex(other)
        except TypeError:
            return NotImplemented
        return ComplexNumber(
            self.real * o.real - self.imag * o.imag,
            self.real * o.imag + self.imag * o.real,
        )

    __rmul__ = __mul__

    def __truediv__(self, scalar) -> ComplexNumber:
        if not isinstance(scalar, (Real, np.floating, np.integer)):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            re = np.float64(self.real) / np.float64(scalar)
            im = np.float64(self.imag) / np.float64(scalar)
        return ComplexNumber(float(re), float(im))


def add(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return a + b


def subtract(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return a - b


def multiply(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return a * b


def divide(a: ComplexNumber, scalar: float) -> ComplexNumber:
    """Divide both components of a by a real scalar."""
    return a / scalar
