# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
# Printer for evaluation results.

from __future__ import annotations

from .values import Error, ErrorKind, Number, Value

ERROR_MESSAGES = {
    ErrorKind.DIVISION_BY_ZERO: "Error: Division by zero.",
    ErrorKind.BAD_OPERATOR: "Error: Invalid operator.",
    ErrorKind.BAD_NUMBER: "Error: Invalid number.",
}


def to_string(value: Value) -> str:
    if isinstance(value, Number):
        return str(value.value)
    if isinstance(value, Error):
        return ERROR_MESSAGES[value.kind]
    raise TypeError(f"not a value: {value!r}")
