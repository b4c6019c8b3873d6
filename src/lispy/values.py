# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
The result of evaluating an expression: either a number or an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# Numbers are signed 64-bit integers.
INT_BITS = 64
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


class ErrorKind(Enum):
    DIVISION_BY_ZERO = "division_by_zero"
    BAD_OPERATOR = "bad_operator"
    BAD_NUMBER = "bad_number"


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Error:
    kind: ErrorKind


Value = Union[Number, Error]


def is_error(value: Value) -> bool:
    return isinstance(value, Error)


def wrap(n: int) -> int:
    """
    Reduce an arbitrary Python int to the signed 64-bit range, the way
    two's complement hardware arithmetic does.
    """
    return (n - INT_MIN) % (2 ** INT_BITS) + INT_MIN
