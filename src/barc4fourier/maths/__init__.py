# SPDX-License-Identifier: CECILL-2.1
# Copyright (c) 2026 ESRF - the European Synchrotron

from __future__ import annotations

from .cnumber import ComplexNumber, add, divide, multiply, subtract

__all__ = ["ComplexNumber", "add", "subtract", "multiply", "divide"]
