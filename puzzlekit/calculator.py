"""Evaluate arithmetic with + - * / and no parentheses, honouring precedence."""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Union


class Operator(Enum):
    """A binary arithmetic operator."""

    SUBTRACT = "-"
    ADD = "+"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def priority(self) -> int:
        """Binding strength: multiplication and division bind tighter."""
        return 2 if self in (Operator.MULTIPLY, Operator.DIVIDE) else 1

    def apply(self, left: float, right: float) -> float:
        """Apply the operator to ``left`` and ``right``."""
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.ADD:
            return left + right
        if self is Operator.MULTIPLY:
            return left * right
        return left / right


Term = Union[int, float, Operator]

_LEXEME_PATTERN = re.compile(
    r"(?P<num>\d+(?:\.\d+)?)|(?P<op>[-+*/])|(?P<space>\s+)|(?P<bad>.)"
)


class Calculator:
    """Evaluates term sequences with a number stack and an operator stack."""

    @staticmethod
    def _collapse(numbers: list[float], operators: list[Operator]) -> None:
        operator = operators.pop()
        right = numbers.pop()
        left = numbers.pop()
        numbers.append(operator.apply(left, right))

    def evaluate(self, tokens: Iterable[Term]) -> float:
        """Evaluate alternating numbers and operators, left to right by precedence."""
        numbers: list[float] = []
        operators: list[Operator] = []
        expect_number = True
        for term in tokens:
            if isinstance(term, Operator):
                if expect_number:
                    raise ValueError(f"operator {term.value!r} where a number was expected")
                while operators and term.priority <= operators[-1].priority:
                    self._collapse(numbers, operators)
                operators.append(term)
                expect_number = True
            elif isinstance(term, (int, float)) and not isinstance(term, bool):
                if not expect_number:
                    raise ValueError(f"number {term!r} where an operator was expected")
                numbers.append(float(term))
                expect_number = False
            else:
                raise TypeError(f"unexpected term {term!r}")
        if expect_number:
            raise ValueError("expression is empty or ends with an operator")
        while operators:
            self._collapse(numbers, operators)
        return numbers[0]


def tokenize(expression: str) -> list[Term]:
    """Split ``expression`` into numbers and operators; whitespace is ignored."""
    terms: list[Term] = []
    for match in _LEXEME_PATTERN.finditer(expression):
        kind = match.lastgroup
        text = match.group()
        if kind == "num":
            terms.append(float(text) if "." in text else int(text))
        elif kind == "op":
            terms.append(Operator(text))
        elif kind == "bad":
            raise ValueError(f"unexpected character {text!r} at {match.start()}")
    return terms


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression string."""
    return Calculator().evaluate(tokenize(expression))