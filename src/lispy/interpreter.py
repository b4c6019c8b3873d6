# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Parse, evaluate, and print one line of input. Nothing is kept between calls.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import LispySyntaxError
from .evaluator import evaluate_all
from .parser import parse
from .printer import to_string
from .values import Value, is_error

TOO_DEEP_MESSAGE = "Error: Expression nested too deeply."


def run(text: str, filename: str = "<stdin>", first_line: int = 1) -> List[Value]:
    """
    Evaluate every top-level expression in text. Raises LispySyntaxError
    without evaluating anything if text does not parse.
    """
    return evaluate_all(parse(text, filename, first_line))


def run_line(text: str, filename: str = "<stdin>", first_line: int = 1) -> Tuple[List[str], bool]:
    """
    Returns the lines to print for one line of input (a result per
    expression, or the syntax error) and whether every expression produced
    a number.
    """
    try:
        values = run(text, filename, first_line)
    except LispySyntaxError as e:
        logging.info(f"Syntax error:\n{e.context}")
        return [str(e)], False
    except RecursionError:
        return [TOO_DEEP_MESSAGE], False
    ok = not any(is_error(value) for value in values)
    return [to_string(value) for value in values], ok
