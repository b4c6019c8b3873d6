# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Exceptions raised by the interpreter. Arithmetic errors are not exceptions:
they are ordinary values (see values.py).
"""

from __future__ import annotations

from typing import Optional


class LispyError(Exception):
    pass


class LispySyntaxError(LispyError):
    """
    The input did not match the grammar. Carries enough position information
    to point at the offending character.
    """

    def __init__(
        self,
        description: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        filename: str = "<stdin>",
        context: str = "",
    ):
        self.description = description
        self.line = line
        self.column = column
        self.filename = filename
        self.context = context
        super().__init__(str(self))

    def __str__(self) -> str:
        line = self.line if self.line is not None else "?"
        column = self.column if self.column is not None else "?"
        return f"{self.filename}:{line}:{column}: error: {self.description}"
