"""Lispy: an interpreter for parenthesized integer arithmetic."""

__version__ = "0.0.0.0.3"

from .errors import LispyError, LispySyntaxError
from .evaluator import combine, evaluate, evaluate_all
from .interpreter import run, run_line
from .parser import GRAMMAR, parse, parse_tree
from .printer import to_string
from .syntax import Apply, Literal, Node
from .values import Error, ErrorKind, Number, Value

__all__ = [
    "__version__",
    "Apply",
    "Error",
    "ErrorKind",
    "GRAMMAR",
    "LispyError",
    "LispySyntaxError",
    "Literal",
    "Node",
    "Number",
    "Value",
    "combine",
    "evaluate",
    "evaluate_all",
    "parse",
    "parse_tree",
    "run",
    "run_line",
    "to_string",
]
