"""Tests for the calculator session: event handling, error state and rendering."""

import pytest

from calculator import CalculatorSession, Display
from tokens import NumberToken


def _press_all(session, buttons):
    display = session.render()
    for button in buttons:
        display = session.press(button)
    return display


@pytest.fixture
def session():
    return CalculatorSession()


def test_starts_cleared(session):
    assert session.render() == Display(expression="", result="0", is_error=False)
    assert session.tokens == []
    assert session.pending == ""
    assert session.last_result is None


def test_precedence(session):
    display = _press_all(session, ["2", "+", "3", "*", "4", "="])
    assert display.result == "14"
    assert display.expression == "14"


def test_float_noise_is_hidden(session):
    display = _press_all(session, ["0", ".", "1", "+", "0", ".", "2", "="])
    assert display.result == "0.3"


def test_pending_shown_on_result_line_not_expression_line(session):
    display = _press_all(session, ["1", "2", "+", "3", "4"])
    assert display.expression == "12 +"
    assert display.result == "34"


def test_result_line_shows_last_result_when_nothing_pending(session):
    display = _press_all(session, ["9", "*", "9", "=", "+"])
    assert display.expression == "81 +"
    assert display.result == "81"


class TestEquals:
    def test_chained_calculation(self, session):
        display = _press_all(session, ["5", "=", "+", "3", "="])
        assert display.result == "8"
        assert session.tokens == [NumberToken("8")]

    def test_trailing_operator_is_dropped(self, session):
        display = _press_all(session, ["7", "+", "="])
        assert display.result == "7"
        assert display.expression == "7"

    def test_empty_equals_defaults_to_zero(self, session):
        display = session.equals()
        assert session.last_result == 0
        assert display.result == "0"

    def test_empty_equals_keeps_last_result(self, session):
        _press_all(session, ["6", "=", "backspace"])
        assert session.tokens == []
        display = session.equals()
        assert session.last_result == 6
        assert display.result == "6"

    def test_digit_after_result_does_not_start_fresh(self, session):
        display = _press_all(session, ["5", "=", "3", "="])
        assert display.is_error


class TestErrorState:
    def test_division_by_zero_enters_error(self, session):
        display = _press_all(session, ["6", "/", "0", "="])
        assert display == Display(expression="6 / 0", result="Error", is_error=True)
        assert session.is_error
        assert session.last_result is None

    @pytest.mark.parametrize(
        "buttons",
        [["1"], ["dot"], ["+"], ["%"], ["="], ["clear"], ["backspace"], ["negate"]],
    )
    def test_input_ignored_until_clear_all(self, session, buttons):
        before = _press_all(session, ["6", "/", "0", "="])
        after = _press_all(session, buttons)
        assert after == before
        assert session.is_error

    def test_clear_all_recovers(self, session):
        _press_all(session, ["6", "/", "0", "="])
        display = session.press("ac")
        assert display == Display(expression="", result="0", is_error=False)
        display = _press_all(session, ["2", "+", "2", "="])
        assert display.result == "4"


class TestPercent:
    def test_business_percent_on_addition(self, session):
        display = _press_all(session, ["2", "0", "0", "+", "1", "0", "%"])
        assert display.result == "20"
        assert display.expression == "200 +"
        display = session.equals()
        assert display.result == "220"

    def test_discount_on_subtraction(self, session):
        display = _press_all(session, ["8", "0", "-", "2", "5", "%", "="])
        assert display.result == "60"

    def test_lone_percent(self, session):
        display = _press_all(session, ["5", "0", "%"])
        assert display.result == "0.5"

    def test_percent_on_result_token(self, session):
        display = _press_all(session, ["5", "0", "=", "%"])
        assert display.expression == "0.5"
        # lastResult is not rewritten, only the token
        assert display.result == "50"
        assert session.equals().result == "0.5"

    def test_percent_after_backspace_uses_three_back_context(self, session):
        display = _press_all(session, ["2", "0", "0", "+", "1", "0", "*", "backspace", "%"])
        assert display.expression == "200 + 20"
        assert session.equals().result == "220"


class TestToggleSign:
    def test_toggles_pending(self, session):
        assert _press_all(session, ["4", "negate"]).result == "-4"
        assert session.press("negate").result == "4"

    def test_negative_operand(self, session):
        display = _press_all(session, ["3", "*", "4", "negate", "="])
        assert display.result == "-12"

    def test_without_pending_negates_displayed_result_only(self, session):
        display = _press_all(session, ["5", "=", "negate"])
        assert display.result == "-5"
        assert session.last_result == -5
        # The committed result token is not negated, so chaining uses +5
        assert session.tokens == [NumberToken("5")]
        assert _press_all(session, ["+", "1", "="]).result == "6"

    def test_without_anything_is_noop(self, session):
        assert session.toggle_sign() == Display(expression="", result="0")


def test_leading_minus(session):
    display = _press_all(session, ["-", "3", "+", "5", "="])
    assert display.result == "2"


def test_sign_and_point_never_become_a_token(session):
    display = _press_all(session, ["-", "dot", "+", "2", "="])
    assert display == Display(expression="-0.2", result="-0.2", is_error=False)
    assert session.tokens == [NumberToken("-0.2")]


def test_equals_on_sign_and_point_alone(session):
    display = _press_all(session, ["-", "dot", "="])
    assert display == Display(expression="", result="0", is_error=False)
    assert session.tokens == []


def test_clear_entry_keeps_committed_tokens(session):
    display = _press_all(session, ["1", "2", "+", "9", "9", "clear"])
    assert display.expression == "12 +"
    assert display.result == "0"
    assert _press_all(session, ["3", "="]).result == "15"


def test_backspace_until_empty_returns_to_cleared_state(session):
    _press_all(session, ["1", "2", "+", "3", ".", "5", "*"])
    for _ in range(12):
        display = session.backspace()
    assert display == Display(expression="", result="0", is_error=False)
    assert session.tokens == []
    assert session.pending == ""


def test_clear_all_is_idempotent(session):
    _press_all(session, ["7", "*", "6", "=", "+", "1"])
    first = session.clear_all()
    state = (session.tokens, session.pending, session.last_result, session.is_error)
    second = session.clear_all()
    assert first == second
    assert (session.tokens, session.pending, session.last_result, session.is_error) == state


def test_unknown_button_raises(session):
    with pytest.raises(ValueError):
        session.press("sqrt")
    with pytest.raises(ValueError):
        session.press("")


class TestKeyboard:
    def test_digits_operators_and_enter(self, session):
        for key in ["1", "+", "2", "*", "3", "Enter"]:
            display = session.handle_key(key)
        assert display.result == "7"

    def test_equals_key(self, session):
        for key in ["4", "/", "8", "="]:
            display = session.handle_key(key)
        assert display.result == "0.5"

    def test_escape_clears_all(self, session):
        _press_all(session, ["6", "/", "0", "="])
        assert session.handle_key("Escape") == Display(expression="", result="0")

    def test_backspace_and_percent(self, session):
        for key in ["5", "0", "0", "Backspace", "%"]:
            display = session.handle_key(key)
        assert display.result == "0.5"

    @pytest.mark.parametrize("key", ["a", "Shift", "", "F1", "^"])
    def test_unbound_keys_are_ignored(self, session, key):
        session.press("3")
        assert session.handle_key(key) == Display(expression="", result="3")
