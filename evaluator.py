"""
Expression Evaluator for ProCalc
Reduces a committed token sequence to a single number with operator precedence.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tokens import NumberToken, Operator, OperatorToken

logger = logging.getLogger(__name__)


class EvalError(Enum):
    MALFORMED_EXPRESSION = "Malformed expression"
    INVALID_NUMBER = "Invalid number"
    DIVISION_BY_ZERO = "Division by zero"
    OVERFLOW = "Overflow"


@dataclass(frozen=True)
class EvalResult:
    value: Optional[float] = None
    error: Optional[EvalError] = None

    @property
    def ok(self):
        return self.error is None


class _Failure(Exception):
    def __init__(self, kind):
        super().__init__(kind.value)
        self.kind = kind


class ExpressionEvaluator:
    """Two-stack (operand / operator) reduction of a flat token sequence.

    ``*`` and ``/`` bind tighter than ``+`` and ``-``; equal precedence
    associates left to right. Failures come back as an ``EvalResult`` with
    ``error`` set; nothing is raised to the caller.
    """

    def evaluate(self, tokens):
        operands = []
        operators = []

        try:
            for token in tokens:
                if isinstance(token, OperatorToken):
                    while operators and operators[-1].precedence >= token.op.precedence:
                        self._apply(operators.pop(), operands)
                    operators.append(token.op)
                elif isinstance(token, NumberToken):
                    value = token.value
                    if not math.isfinite(value):
                        raise _Failure(EvalError.INVALID_NUMBER)
                    operands.append(value)
                else:
                    raise _Failure(EvalError.MALFORMED_EXPRESSION)

            while operators:
                self._apply(operators.pop(), operands)
        except _Failure as failure:
            logger.debug("Evaluation of %s failed: %s", _describe(tokens), failure.kind.value)
            return EvalResult(error=failure.kind)

        if len(operands) != 1:
            return EvalResult(error=EvalError.MALFORMED_EXPRESSION)
        value = operands[0]
        if not math.isfinite(value):
            return EvalResult(error=EvalError.OVERFLOW)
        return EvalResult(value=value)

    @staticmethod
    def _apply(op, operands):
        """Pop b then a, push ``a op b``"""
        if len(operands) < 2:
            raise _Failure(EvalError.MALFORMED_EXPRESSION)
        b = operands.pop()
        a = operands.pop()
        if not math.isfinite(a) or not math.isfinite(b):
            raise _Failure(EvalError.INVALID_NUMBER)
        if op is Operator.DIVIDE and b == 0:
            raise _Failure(EvalError.DIVISION_BY_ZERO)
        try:
            operands.append(op.apply(a, b))
        except OverflowError:
            operands.append(math.inf)


def _describe(tokens):
    return " ".join(str(token) for token in tokens)
