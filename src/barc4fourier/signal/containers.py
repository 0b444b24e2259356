# SPDX-License-Identifier: CECILL-2.1
# Copyright (c) 2026 ESRF - the European Synchrotron

"""
Complex sample containers (1D Signal, 2D Signal2D).

Conventions:
- Samples are stored as numpy.complex128 arrays; element access returns
  ComplexNumber values.
- Signal2D uses NumPy shape (height, width), i.e. (rows, columns).
- Lengths and shapes are fixed at construction. Operations that change the
  length (pad_with_zeros) return a new container.
- Two operation shapes are provided:
    - pure: conjugate(), pad_with_zeros(), a / k, a * b, a + b, a - b
      return a new container.
    - in-place: conjugate_inplace(), divide_by_scalar(k) and a /= k mutate
      the receiver and return it for chaining.
- Indices are checked against [0, size); negative indices are not wrapped.
"""

from __future__ import annotations

import operator
from numbers import Real

import numpy as np

from ..maths.cnumber import ComplexNumber
from .errors import PadLengthError, ShapeMismatchError


def _check_index(i, size: int, name: str) -> int:
    idx = operator.index(i)
    if idx < 0 or idx >= size:
        raise IndexError(f"{name} index {idx} out of range [0, {size}).")
    return idx


def _as_sample(value) -> complex:
    return complex(ComplexNumber.from_complex(value))


def _check_scalar(scalar) -> float:
    if not isinstance(scalar, (Real, np.floating, np.integer)):
        raise TypeError(f"Expected a real scalar, got {type(scalar).__name__}.")
    return float(scalar)


def _check_size(n, name: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}.")
    return n


class Signal:
    """
    Fixed-length ordered sequence of complex samples, indexed 0..length-1.

    Parameters:
        length (int): Number of samples; all samples start at 0+0j.
    """

    __slots__ = ("_data",)

    def __init__(self, length: int) -> None:
        self._data = np.zeros(_check_size(length, "length"), dtype=np.complex128)

    @classmethod
    def from_array(cls, samples) -> Signal:
        """
        Build a Signal from a 1D array-like of numbers or ComplexNumber values.

        Raises:
            ValueError
        """
        if isinstance(samples, Signal):
            return samples.copy()
        arr = _to_complex_array(samples)
        if arr.ndim != 1:
            raise ValueError(f"samples must be 1D, got ndim={arr.ndim}.")
        return cls._wrap(arr.copy())

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> Signal:
        # takes ownership of arr, no copy
        out = cls.__new__(cls)
        out._data = arr
        return out

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def copy(self) -> Signal:
        return Signal._wrap(self._data.copy())

    @property
    def length(self) -> int:
        return int(self._data.size)

    @property
    def shape(self) -> tuple[int]:
        return (self.length,)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, i) -> ComplexNumber:
        z = self._data[_check_index(i, self.length, "Signal")]
        return ComplexNumber(float(z.real), float(z.imag))

    def __setitem__(self, i, value) -> None:
        self._data[_check_index(i, self.length, "Signal")] = _as_sample(value)

    def __iter__(self):
        for z in self._data:
            yield ComplexNumber(float(z.real), float(z.imag))

    def __repr__(self) -> str:
        return f"Signal(length={self.length}, samples={np.array2string(self._data, precision=4)})"

    def conjugate(self) -> Signal:
        return Signal._wrap(np.conjugate(self._data))

    def conjugate_inplace(self) -> Signal:
        np.conjugate(self._data, out=self._data)
        return self

    def pad_with_zeros(self, new_length: int) -> Signal:
        """
        Return a new Signal of new_length with this signal's samples in the low
        indices and zeros after them.

        Raises:
            PadLengthError: If new_length < length.
        """
        new_length = operator.index(new_length)
        if new_length < self.length:
            raise PadLengthError(self.length, new_length)
        out = Signal(new_length)
        out._data[: self.length] = self._data
        return out

    def divide_by_scalar(self, scalar: float) -> Signal:
        """Divide every sample by a real scalar, in place. Returns self."""
        s = _check_scalar(scalar)
        with np.errstate(divide="ignore", invalid="ignore"):
            np.divide(self._data, s, out=self._data)
        return self

    def __itruediv__(self, scalar) -> Signal:
        return self.divide_by_scalar(scalar)

    def __truediv__(self, scalar) -> Signal:
        return self.copy().divide_by_scalar(scalar)

    def _elementwise(self, other, op) -> Signal:
        if not isinstance(other, Signal):
            return NotImplemented
        if other.length != self.length:
            raise ShapeMismatchError(self.shape, other.shape)
        return Signal._wrap(op(self._data, other._data))

    def __mul__(self, other) -> Signal:
        return self._elementwise(other, np.multiply)

    def __add__(self, other) -> Signal:
        return self._elementwise(other, np.add)

    def __sub__(self, other) -> Signal:
        return self._elementwise(other, np.subtract)


class Signal2D:
    """
    Rectangular grid of complex samples with shape (height, width).

    Rows are exposed as Signal instances of length width; columns can be
    gathered and scattered with column() and set_column().

    Parameters:
        height (int): Number of rows.
        width (int): Number of samples per row.
    """

    __slots__ = ("_data",)

    def __init__(self, height: int, width: int) -> None:
        h = _check_size(height, "height")
        w = _check_size(width, "width")
        self._data = np.zeros((h, w), dtype=np.complex128)

    @classmethod
    def from_array(cls, samples) -> Signal2D:
        """
        Build a Signal2D from a 2D array-like (rows of equal length).

        Raises:
            ValueError
        """
        if isinstance(samples, Signal2D):
            return samples.copy()
        arr = _to_complex_array(samples)
        if arr.ndim != 2:
            raise ValueError(f"samples must be 2D, got ndim={arr.ndim}.")
        return cls._wrap(arr.copy())

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> Signal2D:
        out = cls.__new__(cls)
        out._data = arr
        return out

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def copy(self) -> Signal2D:
        return Signal2D._wrap(self._data.copy())

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            z = self._data[_check_index(i, self.height, "row"), _check_index(j, self.width, "column")]
            return ComplexNumber(float(z.real), float(z.imag))
        return Signal._wrap(self._data[_check_index(key, self.height, "row")].copy())

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            i, j = key
            self._data[_check_index(i, self.height, "row"), _check_index(j, self.width, "column")] = _as_sample(value)
            return
        i = _check_index(key, self.height, "row")
        row = Signal.from_array(value)
        if row.length != self.width:
            raise ShapeMismatchError((self.width,), row.shape)
        self._data[i] = row._data

    def __iter__(self):
        for i in range(self.height):
            yield self[i]

    def __repr__(self) -> str:
        return f"Signal2D(height={self.height}, width={self.width})"

    def column(self, j: int) -> Signal:
        """Return a copy of column j as a Signal of length height."""
        return Signal._wrap(self._data[:, _check_index(j, self.width, "column")].copy())

    def set_column(self, j: int, values) -> None:
        """
        Overwrite column j with a Signal (or 1D array-like) of length height.

        Raises:
            IndexError, ShapeMismatchError
        """
        j = _check_index(j, self.width, "column")
        col = Signal.from_array(values)
        if col.length != self.height:
            raise ShapeMismatchError((self.height,), col.shape)
        self._data[:, j] = col._data

    def conjugate(self) -> Signal2D:
        return Signal2D._wrap(np.conjugate(self._data))

    def conjugate_inplace(self) -> Signal2D:
        np.conjugate(self._data, out=self._data)
        return self

    def divide_by_scalar(self, scalar: float) -> Signal2D:
        """Divide every sample by a real scalar, in place. Returns self."""
        s = _check_scalar(scalar)
        with np.errstate(divide="ignore", invalid="ignore"):
            np.divide(self._data, s, out=self._data)
        return self

    def __itruediv__(self, scalar) -> Signal2D:
        return self.divide_by_scalar(scalar)

    def __truediv__(self, scalar) -> Signal2D:
        return self.copy().divide_by_scalar(scalar)

    def _elementwise(self, other, op) -> Signal2D:
        if not isinstance(other, Signal2D):
            return NotImplemented
        if other.shape != self.shape:
            raise ShapeMismatchError(self.shape, other.shape)
        return Signal2D._wrap(op(self._data, other._data))

    def __mul__(self, other) -> Signal2D:
        return self._elementwise(other, np.multiply)

    def __add__(self, other) -> Signal2D:
        return self._elementwise(other, np.add)

    def __sub__(self, other) -> Signal2D:
        return self._elementwise(other, np.subtract)


def _to_complex_array(samples) -> np.ndarray:
    if isinstance(samples, (Signal, Signal2D)):
        return samples._data
    if isinstance(samples, np.ndarray):
        return samples.astype(np.complex128, copy=False)
    # nested sequences may hold ComplexNumber values or Signal rows
    return np.asarray(_complexify(samples), dtype=np.complex128)


def _complexify(seq):
    if isinstance(seq, ComplexNumber):
        return complex(seq)
    if isinstance(seq, (Signal, Signal2D)):
        return seq.to_array()
    if isinstance(seq, (list, tuple)):
        return [_complexify(v) for v in seq]
    return seq
