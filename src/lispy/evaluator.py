# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Tree-walking evaluator. Errors are values: once an operand evaluates to an
Error, every enclosing application evaluates to that same Error.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from .syntax import Apply, Literal, Node
from .values import INT_MAX, INT_MIN, Error, ErrorKind, Number, Value, is_error, wrap


def _divide(x: int, y: int) -> Value:
    if y == 0:
        return Error(ErrorKind.DIVISION_BY_ZERO)
    # Truncate toward zero; Python's // rounds toward negative infinity.
    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        quotient = -quotient
    return Number(wrap(quotient))


_OPERATORS: Dict[str, Callable[[int, int], Value]] = {
    "+": lambda x, y: Number(wrap(x + y)),
    "-": lambda x, y: Number(wrap(x - y)),
    "*": lambda x, y: Number(wrap(x * y)),
    "/": _divide,
}


def parse_number(text: str) -> Value:
    """
    Read a base-10 integer literal. Anything that is not an integer, or does
    not fit in 64 bits, is Error(BAD_NUMBER).
    """
    try:
        n = int(text, 10)
    except ValueError:
        # Includes literals longer than sys.get_int_max_str_digits().
        return Error(ErrorKind.BAD_NUMBER)
    if n < INT_MIN or n > INT_MAX:
        return Error(ErrorKind.BAD_NUMBER)
    return Number(n)


def combine(acc: Value, op: str, operand: Value) -> Value:
    """
    Fold operand into acc with op. The first error wins: an error in acc is
    returned before operand is looked at.
    """
    if is_error(acc):
        return acc
    if is_error(operand):
        return operand
    fn = _OPERATORS.get(op)
    if fn is None:
        return Error(ErrorKind.BAD_OPERATOR)
    return fn(acc.value, operand.value)


def evaluate(node: Node) -> Value:
    if isinstance(node, Literal):
        return parse_number(node.text)
    if not isinstance(node, Apply):
        raise TypeError(f"cannot evaluate {node!r}")
    first, *rest = node.operands
    acc = evaluate(first)
    for operand in rest:
        acc = combine(acc, node.operator, evaluate(operand))
    return acc


def evaluate_all(nodes: List[Node]) -> List[Value]:
    """Evaluate each top-level expression on its own."""
    values = [evaluate(node) for node in nodes]
    logging.debug(f"Evaluated {len(values)} expression(s): {values}")
    return values
