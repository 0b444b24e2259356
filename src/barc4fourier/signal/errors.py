# SPDX-License-Identifier: CECILL-2.1
# Copyright (c) 2026 ESRF - the European Synchrotron

"""
Exceptions raised by the signal containers and the Fourier engine.

All of them derive from ValueError, so callers catching ValueError for bad
arguments keep working.
"""

from __future__ import annotations


class FourierError(ValueError):
    """Base exception for barc4fourier argument errors."""

    pass


class DomainError(FourierError):
    """
    Raised when a transform receives a size that is not a power of two.

    The radix-2 engine only supports lengths 2**k (k >= 0); nothing is padded
    or truncated on the caller's behalf.
    """

    def __init__(self, length: int, axis: str | None = None, message: str | None = None):
        self.length = length
        self.axis = axis

        if message is None:
            where = "signal length" if axis is None else f"{axis} size"
            message = f"{where} must be a power of 2, got {length}."

        super().__init__(message)


class ShapeMismatchError(FourierError):
    """Raised when element-wise operands do not have the same shape."""

    def __init__(self, left: tuple[int, ...], right: tuple[int, ...], message: str | None = None):
        self.left = tuple(left)
        self.right = tuple(right)

        if message is None:
            message = f"Operands must have the same shape, got {self.left} and {self.right}."

        super().__init__(message)


class PadLengthError(FourierError):
    """Raised when zero-padding is asked to shrink a signal."""

    def __init__(self, current: int, requested: int, message: str | None = None):
        self.current = current
        self.requested = requested

        if message is None:
            message = (
                f"Cannot pad a signal of length {current} to {requested}: "
                "the target length must be >= the current length."
            )

        super().__init__(message)
