# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Grammar and parser for Lispy. Lark does the matching; this module turns its
parse tree into syntax.py nodes and its exceptions into LispySyntaxError.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from lark import Lark, Tree, UnexpectedCharacters, UnexpectedInput, UnexpectedToken
from lark.lexer import PatternStr
from lark.visitors import Transformer_NonRecursive

from .errors import LispySyntaxError
from .syntax import Apply, Literal, Node

GRAMMAR = r"""
    number : INTEGER
    symbol : "+" | "-" | "*" | "/"
    sexpr  : "(" expr* ")"
    expr   : number | "(" symbol expr+ ")"
    lispy  : expr+

    INTEGER : /-?[0-9]+/

    %import common.WS
    %ignore WS
"""

# Every token is kept, so an operator application looks like
# expr -> "(" symbol expr+ ")".
_PARSER = Lark(GRAMMAR, start="lispy", parser="lalr", keep_all_tokens=True)

_TERMINAL_NAMES = {
    "INTEGER": "number",
    "$END": "end of input",
}


class _ToSyntax(Transformer_NonRecursive):
    """
    Translates lark's parse tree into Literal/Apply nodes, bottom-up,
    without recursion so deeply nested input translates too.
    """

    def number(self, children):
        (token,) = children
        return Literal(str(token))

    def symbol(self, children):
        (token,) = children
        return str(token)

    def expr(self, children):
        if len(children) == 1:
            return children[0]
        # "(" symbol expr+ ")"
        _, operator, *operands, _ = children
        return Apply(operator, tuple(operands))

    def lispy(self, children):
        return list(children)


def _describe_terminal(name: str) -> str:
    if name in _TERMINAL_NAMES:
        return _TERMINAL_NAMES[name]
    try:
        pattern = _PARSER.get_terminal(name).pattern
    except KeyError:
        return name
    if isinstance(pattern, PatternStr):
        return f"'{pattern.value}'"
    return name


def _describe_expected(names: Optional[Iterable[str]]) -> str:
    descriptions = sorted({_describe_terminal(n) for n in (names or ())})
    if not descriptions:
        return ""
    if len(descriptions) == 1:
        return f", expected {descriptions[0]}"
    return ", expected " + ", ".join(descriptions[:-1]) + " or " + descriptions[-1]


def _position(text: str, pos: int, first_line: int = 1):
    """1-based line and column of offset pos in text."""
    line = text.count("\n", 0, pos) + first_line
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, column


def _context(text: str, pos: int) -> str:
    start = text.rfind("\n", 0, pos) + 1
    end = text.find("\n", pos)
    if end == -1:
        end = len(text)
    return text[start:end] + "\n" + " " * (pos - start) + "^"


def _syntax_error(text: str, filename: str, first_line: int, e: UnexpectedInput) -> LispySyntaxError:
    if isinstance(e, UnexpectedCharacters):
        pos = e.pos_in_stream
        description = f"unexpected character {e.char!r}" + _describe_expected(e.allowed)
    elif isinstance(e, UnexpectedToken) and e.token.type != "$END":
        pos = e.token.start_pos
        description = f"unexpected {e.token.value!r}" + _describe_expected(e.expected)
    else:
        # Ran out of input while the grammar still wanted more.
        pos = len(text)
        description = "unexpected end of input" + _describe_expected(getattr(e, "expected", None))
    line, column = _position(text, pos, first_line)
    return LispySyntaxError(
        description,
        line=line,
        column=column,
        filename=filename,
        context=_context(text, pos),
    )


def parse_tree(text: str, filename: str = "<stdin>", first_line: int = 1) -> Tree:
    """
    Match the whole of text against the lispy rule and return lark's parse
    tree. Raises LispySyntaxError if any part of text does not match.

    filename and first_line only affect where errors say the input came from.
    """
    try:
        tree = _PARSER.parse(text)
    except UnexpectedInput as e:
        raise _syntax_error(text, filename, first_line, e) from e
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        logging.debug(tree.pretty())
    return tree


def parse(text: str, filename: str = "<stdin>", first_line: int = 1) -> List[Node]:
    """
    Parse a line into one syntax-tree node per top-level expression.
    """
    nodes = _ToSyntax().transform(parse_tree(text, filename, first_line))
    logging.debug(f"Parsed {len(nodes)} expression(s)")
    return nodes
