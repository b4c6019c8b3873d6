# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha

import pytest

import lispy.interpreter as interpreter
from lispy import Error, ErrorKind, LispySyntaxError, Number, run, run_line, to_string
from lispy.interpreter import TOO_DEEP_MESSAGE


def test_run_single_expression():
    assert run("(+ 1 2)") == [Number(3)]


def test_run_each_top_level_expression():
    assert run("1 (+ 1 1) (/ 1 0)") == [
        Number(1),
        Number(2),
        Error(ErrorKind.DIVISION_BY_ZERO),
    ]


def test_syntax_error_skips_evaluation(monkeypatch):
    calls = []
    monkeypatch.setattr(interpreter, "evaluate_all", lambda nodes: calls.append(nodes))
    with pytest.raises(LispySyntaxError):
        run("(+ 1")
    assert calls == []


def test_same_line_twice():
    line = "(* (- 10 1 2) (/ 9 -2))"
    assert run(line) == run(line) == [Number(-28)]
    assert run_line(line) == run_line(line)


class TestToString:
    def test_number(self):
        assert to_string(Number(-42)) == "-42"

    def test_errors(self):
        assert to_string(Error(ErrorKind.DIVISION_BY_ZERO)) == "Error: Division by zero."
        assert to_string(Error(ErrorKind.BAD_OPERATOR)) == "Error: Invalid operator."
        assert to_string(Error(ErrorKind.BAD_NUMBER)) == "Error: Invalid number."

    def test_not_a_value(self):
        with pytest.raises(TypeError):
            to_string(42)


class TestRunLine:
    def test_number(self):
        assert run_line("(+ 1 2)") == (["3"], True)

    def test_error_value(self):
        assert run_line("(/ 1 0)") == (["Error: Division by zero."], False)

    def test_bad_number(self):
        assert run_line("(+ 1 99999999999999999999)") == (["Error: Invalid number."], False)

    def test_one_line_per_expression(self):
        assert run_line("1 (/ 1 0) 3") == (["1", "Error: Division by zero.", "3"], False)

    def test_syntax_error(self):
        output, ok = run_line("(+ 1")
        assert not ok
        assert len(output) == 1
        assert output[0].startswith("<stdin>:1:5: error: unexpected end of input")

    def test_moderately_deep_nesting(self):
        depth = 200
        assert run_line("(+ 1 " * depth + "0" + ")" * depth) == ([str(depth)], True)

    def test_too_deep(self):
        depth = 100_000
        assert run_line("(+ " * depth + "1" + ")" * depth) == ([TOO_DEEP_MESSAGE], False)

    def test_next_line_still_works_after_failure(self):
        run_line("(+ 1")
        run_line("(/ 1 0)")
        assert run_line("(- 3 1)") == (["2"], True)
