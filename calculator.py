"""
Calculator Engine for ProCalc
Handles calculator events and decides what the display shows
"""
import logging
from dataclasses import asdict, dataclass

import config
from evaluator import ExpressionEvaluator
from number_formatter import round_smart
from percent_resolver import PercentResolver
from token_stream import TokenStream
from tokens import NumberToken, Operator

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
OPERATORS = "+-*/"


@dataclass(frozen=True)
class Display:
    """What a shell paints after every event"""
    expression: str
    result: str
    is_error: bool = False

    def to_dict(self):
        return asdict(self)


class CalculatorSession:
    """Expression state machine behind a calculator keypad.

    Every event method mutates the session and returns the ``Display`` to
    render. After an evaluation error the session ignores all input until
    ``clear_all``.
    """

    def __init__(self, stream=None, evaluator=None, percent_resolver=None):
        self.evaluator = evaluator or ExpressionEvaluator()
        self.percent_resolver = percent_resolver or PercentResolver()
        self.stream = stream or TokenStream()
        self.clear_all()

    @property
    def pending(self):
        return self.stream.pending

    @property
    def tokens(self):
        return list(self.stream.tokens)

    def render(self):
        if self.is_error:
            result = config.ERROR_TEXT
        elif self.stream.pending:
            result = self.stream.pending
        elif self.last_result is not None:
            result = round_smart(self.last_result)
        else:
            result = "0"
        return Display(self.stream.expression_line(), result, self.is_error)

    # ── Events ───────────────────────────────────────────────────────────

    def clear_all(self):
        self.stream.reset()
        self.last_result = None
        self.is_error = False
        return self.render()

    def clear_entry(self):
        """Clear only the number being typed"""
        if not self.is_error:
            self.stream.pending = ""
        return self.render()

    def backspace(self):
        if not self.is_error:
            self.stream.backspace()
        return self.render()

    def append_digit(self, digit):
        if not self.is_error:
            self.stream.append_digit(str(digit))
        return self.render()

    def append_dot(self):
        if not self.is_error:
            self.stream.append_dot()
        return self.render()

    def toggle_sign(self):
        if self.is_error:
            return self.render()
        if not self.stream.toggle_sign() and self.last_result is not None:
            # Preview only: the committed result token keeps its sign
            self.last_result = -self.last_result
        return self.render()

    def push_operator(self, op):
        if not self.is_error:
            self.stream.push_operator(Operator(op))
        return self.render()

    def apply_percent(self):
        if not self.is_error:
            self.percent_resolver.apply(self.stream)
        return self.render()

    def equals(self):
        if self.is_error:
            return self.render()

        self.stream.commit_pending()
        self.stream.strip_trailing_operator()

        if not self.stream.tokens:
            if self.last_result is None:
                self.last_result = 0
            return self.render()

        outcome = self.evaluator.evaluate(self.stream.tokens)
        if not outcome.ok:
            logger.info("Calculation failed (%s): %s",
                        outcome.error.value, self.stream.expression_line())
            self.is_error = True
            self.last_result = None
            return self.render()

        self.last_result = outcome.value
        # Keep the result as the first token so the next operator continues from it
        self.stream.reset([NumberToken(round_smart(outcome.value))])
        return self.render()

    # ── Shell input ──────────────────────────────────────────────────────

    def press(self, button):
        """Dispatch a keypad button: a digit, operator, '%', '=' or an action name"""
        button = str(button)
        logger.debug("Button pressed: %s", button)

        if len(button) == 1 and button in DIGITS:
            return self.append_digit(button)
        if len(button) == 1 and button in OPERATORS:
            return self.push_operator(button)

        actions = {
            ".": self.append_dot,
            "dot": self.append_dot,
            "%": self.apply_percent,
            "percent": self.apply_percent,
            "=": self.equals,
            "equals": self.equals,
            "ac": self.clear_all,
            "clear": self.clear_entry,
            "backspace": self.backspace,
            "negate": self.toggle_sign,
        }
        if button not in actions:
            raise ValueError(f"Unknown button: {button!r}")
        return actions[button]()

    def handle_key(self, key):
        """Handle keyboard input. Keys without a binding are ignored."""
        if key in ("Enter", "="):
            return self.equals()
        if key == "Escape":
            return self.clear_all()
        if key == "Backspace":
            return self.backspace()
        if key and len(key) == 1 and key in DIGITS + OPERATORS + ".%":
            return self.press(key)
        return self.render()
