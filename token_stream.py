"""
Token stream for ProCalc
Holds the committed tokens plus the number currently being typed.
"""
import math

from tokens import NumberToken, Operator, OperatorToken


class TokenStream:
    def __init__(self):
        self.tokens = []
        self.pending = ""

    @property
    def is_empty(self):
        return not self.tokens and not self.pending

    @property
    def last(self):
        """Last committed token, or None"""
        return self.tokens[-1] if self.tokens else None

    def reset(self, tokens=()):
        """Replace the committed tokens and drop the pending buffer"""
        self.tokens = list(tokens)
        self.pending = ""

    def append_digit(self, digit):
        """Add a digit to the pending number, suppressing a leading zero"""
        if self.pending == "0" and digit != ".":
            self.pending = digit
        else:
            self.pending += digit

    def append_dot(self):
        if "." in self.pending:
            return
        self.pending = self.pending + "." if self.pending else "0."

    def toggle_sign(self):
        """Flip the sign of the pending number. Returns False if nothing is pending."""
        if not self.pending:
            return False
        if self.pending.startswith("-"):
            self.pending = self.pending[1:]
        else:
            self.pending = "-" + self.pending
        return True

    def pending_is_number(self):
        """Whether the pending buffer is a complete decimal literal (not "-" or "-.")"""
        return bool(self.pending) and math.isfinite(NumberToken(self.pending).value)

    def commit_pending(self):
        """Move the pending number into the committed tokens"""
        # A bare sign or point is not a number yet and is dropped
        if self.pending_is_number():
            self.tokens.append(NumberToken(self.pending))
        self.pending = ""

    def backspace(self):
        if self.pending:
            self.pending = self.pending[:-1]
        elif self.tokens:
            last = self.tokens.pop()
            if isinstance(last, NumberToken):
                # Reopen the number for editing
                self.pending = last.text[:-1]

    def push_operator(self, op: Operator):
        # Only a minus may start an expression, as the sign of the first number
        if not self.tokens and not self.pending_is_number():
            if op is Operator.SUBTRACT and not self.pending:
                self.pending = "-"
            return

        self.commit_pending()
        if isinstance(self.last, OperatorToken):
            self.tokens[-1] = OperatorToken(op)
        else:
            self.tokens.append(OperatorToken(op))

    def strip_trailing_operator(self):
        if isinstance(self.last, OperatorToken):
            self.tokens.pop()

    def replace_last(self, token):
        self.tokens[-1] = token

    def expression_line(self):
        """Committed tokens joined by single spaces"""
        return " ".join(str(token) for token in self.tokens)
