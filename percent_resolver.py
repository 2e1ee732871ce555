"""
Business percentage for ProCalc

``A + B%`` and ``A - B%`` mean "B percent of A", so 200 + 10% becomes
200 + 20. Everywhere else (a lone number, or after * and /) B% is B / 100.
"""
import math

from number_formatter import round_smart
from tokens import NumberToken, Operator, OperatorToken


def percent_of(base, percent, op=None):
    """Value that replaces ``percent`` given the preceding ``base <op>`` pair"""
    if base is not None and op in (Operator.ADD, Operator.SUBTRACT):
        return base * (percent / 100)
    return percent / 100


def _context(tokens, op_index):
    """(A, op) when tokens[op_index - 1], tokens[op_index] read as a number and an operator"""
    if op_index < 1:
        return None, None
    prev_num, prev_op = tokens[op_index - 1], tokens[op_index]
    if not isinstance(prev_num, NumberToken) or not isinstance(prev_op, OperatorToken):
        return None, None
    if not math.isfinite(prev_num.value):
        return None, None
    return prev_num.value, prev_op.op


class PercentResolver:
    def apply(self, stream):
        """Rewrite the number being edited, or the last committed number, in place.

        Returns True when the stream changed. A trailing operator or an
        unparsable number leaves the stream untouched.
        """
        tokens = stream.tokens

        if stream.pending:
            b = NumberToken(stream.pending).value
            if not math.isfinite(b):
                return False
            a, op = _context(tokens, len(tokens) - 1)
            stream.pending = round_smart(percent_of(a, b, op))
            return True

        if not isinstance(stream.last, NumberToken):
            return False
        b = stream.last.value
        if not math.isfinite(b):
            return False
        a, op = _context(tokens, len(tokens) - 2)
        stream.replace_last(NumberToken(round_smart(percent_of(a, b, op))))
        return True
