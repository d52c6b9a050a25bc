"""
Tests for the QuadCalc controller (button and keyboard mapping)
"""
import pytest

from calculator import Calculator, Operation
from controller import BUTTON_LAYOUT, CalculatorController, DisplayState, resolve_key
from history_manager import HistoryManager


@pytest.fixture
def controller():
    return CalculatorController(Calculator(), HistoryManager())


def press_all(controller, labels):
    state = None
    for label in labels:
        state = controller.press(label)
    return state


class TestButtons:
    def test_initial_snapshot(self, controller):
        assert controller.snapshot() == DisplayState("0", "", False)

    def test_digits_update_display(self, controller):
        assert controller.press("5").primary == "5"
        assert controller.press("3").primary == "53"

    def test_operator_updates_expression(self, controller):
        state = press_all(controller, ["5", "+"])
        assert state.secondary == "5 +"
        assert controller.calculator.get_current_operation() is Operation.ADD

    def test_equals(self, controller):
        state = press_all(controller, ["5", "+", "3", "="])
        assert state == DisplayState("8", "5 + 3 =", False)

    def test_clear(self, controller):
        state = press_all(controller, ["5", "+", "AC"])
        assert state == DisplayState("0", "", False)

    def test_clear_entry(self, controller):
        state = press_all(controller, ["5", "+", "3", "CE"])
        assert state == DisplayState("0", "5 +", False)

    def test_decimal_sign_and_backspace(self, controller):
        assert press_all(controller, ["3", ".", "1"]).primary == "3.1"
        assert controller.press("±").primary == "-3.1"
        assert controller.press("←").primary == "-3."
        assert controller.press("±").primary == "3."

    def test_error_flag(self, controller):
        state = press_all(controller, ["1", "÷", "0", "="])
        assert state.error
        assert state.primary == "Error: Division by zero"
        assert not controller.press("5").error

    def test_complex_calculation(self, controller):
        state = press_all(controller, ["1", "5", "÷", "3", "+", "2", "×", "4", "="])
        assert state.primary == "28"

    @pytest.mark.parametrize("label", ["", "x", "12", "%", "MR"])
    def test_unknown_label(self, controller, label):
        with pytest.raises(KeyError):
            controller.press(label)

    def test_every_layout_button_is_dispatchable(self, controller):
        for row in BUTTON_LAYOUT:
            for label, kind in row:
                assert kind in ("number", "operator", "clear", "equals")
                controller.press(label)

    def test_layout_shape(self):
        assert len(BUTTON_LAYOUT) == 5
        assert all(len(row) == 4 for row in BUTTON_LAYOUT)
        labels = [label for row in BUTTON_LAYOUT for label, _ in row]
        assert sorted(labels) == sorted(list("0123456789") + [".", "±", "+", "-", "×", "÷", "=", "AC", "CE", "←"])

    def test_results_are_recorded(self, controller):
        press_all(controller, ["2", "×", "2", "1", "=", "="])
        history = controller.history.get_calculation_history()
        assert [(expr, result) for expr, result, _ in history] == [("2 × 21 =", "42")]


class TestKeyboard:
    @pytest.mark.parametrize("char, keysym, expected", [
        ("7", "7", "7"),
        ("0", "KP_0", "0"),
        (".", "period", "."),
        ("+", "plus", "+"),
        ("-", "minus", "-"),
        ("*", "asterisk", "×"),
        ("/", "slash", "÷"),
        ("=", "equal", "="),
        ("\r", "Return", "="),
        ("\r", "KP_Enter", "="),
        ("\x1b", "Escape", "AC"),
        ("\x7f", "Delete", "CE"),
        ("\x08", "BackSpace", "←"),
        ("a", "a", None),
        ("", "Shift_L", None),
        ("%", "percent", None),
    ])
    def test_resolve_key(self, char, keysym, expected):
        assert resolve_key(char, keysym) == expected

    def test_handle_key_drives_calculator(self, controller):
        for char, keysym in [("1", "1"), ("2", "2"), ("*", "asterisk"), ("3", "3"), ("\r", "Return")]:
            controller.handle_key(char, keysym)
        assert controller.snapshot().primary == "36"
        assert controller.snapshot().secondary == "12 × 3 ="

    def test_handle_key_ignores_unbound(self, controller):
        assert controller.handle_key("q", "q") is None
        assert controller.snapshot() == DisplayState("0", "", False)

    def test_escape_and_delete(self, controller):
        for char in "12+34":
            controller.handle_key(char)
        controller.handle_key("\x7f", "Delete")
        assert controller.snapshot() == DisplayState("0", "12 +", False)
        controller.handle_key("\x1b", "Escape")
        assert controller.snapshot() == DisplayState("0", "", False)
