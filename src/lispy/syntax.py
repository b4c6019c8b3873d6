# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Syntax tree that the evaluator walks. The parser translates lark's parse tree
into these nodes, so nothing downstream depends on lark.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Literal:
    # Source text of the literal. It is range checked during evaluation.
    text: str


@dataclass(frozen=True)
class Apply:
    operator: str
    operands: Tuple["Node", ...]

    def __post_init__(self):
        if not self.operands:
            raise ValueError(f"operator {self.operator!r} applied to no operands")


Node = Union[Literal, Apply]

