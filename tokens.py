"""
Expression tokens for ProCalc
A committed token is either a number or one of the four binary operators.
"""
import math
from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def precedence(self):
        return 2 if self in (Operator.MULTIPLY, Operator.DIVIDE) else 1

    def apply(self, a, b):
        """Compute ``a <op> b``; division by zero is the caller's check"""
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        return a / b


@dataclass(frozen=True)
class NumberToken:
    text: str

    @property
    def value(self) -> float:
        """Parsed value, NaN when the text is not a decimal literal"""
        try:
            return float(self.text)
        except ValueError:
            return math.nan

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class OperatorToken:
    op: Operator

    def __str__(self):
        return self.op.value
