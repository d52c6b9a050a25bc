"""
Controller for QuadCalc
Translates button labels and key presses into calculator operations
"""
from collections import namedtuple

from calculator import DIGITS, Operation

DisplayState = namedtuple("DisplayState", ["primary", "secondary", "error"])

# Button grid, top to bottom: (label, style kind)
BUTTON_LAYOUT = [
    [("AC", "clear"), ("CE", "clear"), ("←", "clear"), ("÷", "operator")],
    [("7", "number"), ("8", "number"), ("9", "number"), ("×", "operator")],
    [("4", "number"), ("5", "number"), ("6", "number"), ("-", "operator")],
    [("1", "number"), ("2", "number"), ("3", "number"), ("+", "operator")],
    [("±", "operator"), ("0", "number"), (".", "number"), ("=", "equals")],
]

OPERATOR_LABELS = {op.symbol: op for op in Operation}

# Characters typed on the keyboard that differ from the button label
KEY_CHARS = {
    "*": "×",
    "/": "÷",
    "=": "=",
    "\r": "=",
    "\n": "=",
}

KEY_SYMS = {
    "Return": "=",
    "KP_Enter": "=",
    "Escape": "AC",
    "Delete": "CE",
    "BackSpace": "←",
}


class CalculatorController:
    def __init__(self, calculator, history=None):
        self.calculator = calculator
        self.history = history
        if history is not None:
            calculator.on_result = history.add_calculation

        self._actions = {
            ".": calculator.input_decimal,
            "±": calculator.toggle_sign,
            "=": calculator.calculate,
            "AC": calculator.clear,
            "CE": calculator.clear_entry,
            "←": calculator.backspace,
        }

    def press(self, label):
        """Dispatch a button label to the calculator and return the new display state"""
        if len(label) == 1 and label in DIGITS:
            self.calculator.input_digit(label)
        elif label in OPERATOR_LABELS:
            self.calculator.set_operation(OPERATOR_LABELS[label])
        elif label in self._actions:
            self._actions[label]()
        else:
            raise KeyError(label)
        return self.snapshot()

    def handle_key(self, char, keysym=""):
        """Handle a keyboard event; returns the label pressed, or None if unbound"""
        label = resolve_key(char, keysym)
        if label is not None:
            self.press(label)
        return label

    def snapshot(self):
        return DisplayState(
            primary=self.calculator.get_current_display(),
            secondary=self.calculator.get_expression_display(),
            error=self.calculator.has_error(),
        )


def resolve_key(char, keysym=""):
    """Map a key event (character and Tk keysym) to a button label"""
    if keysym in KEY_SYMS:
        return KEY_SYMS[keysym]
    if not char:
        return None
    if char in KEY_CHARS:
        return KEY_CHARS[char]
    if len(char) == 1 and char in DIGITS + ".+-×÷":
        return char
    return None
