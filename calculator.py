"""
Calculator Engine for QuadCalc
Left-to-right four-function state machine over exact decimal arithmetic
"""
from decimal import Decimal, InvalidOperation, localcontext
from enum import Enum

import config

DIGITS = "0123456789"


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self):
        return self.value

    def apply(self, left, right):
        """Apply the operation; DIVIDE raises ZeroDivisionError for a zero right operand"""
        if self is Operation.ADD:
            return left + right
        if self is Operation.SUBTRACT:
            return left - right
        if self is Operation.MULTIPLY:
            return left * right
        if right.is_zero():
            raise ZeroDivisionError("division by zero")
        return left / right


class CalculatorError(Enum):
    DIVISION_BY_ZERO = "Error: Division by zero"

    @property
    def message(self):
        return self.value


def parse_number(text):
    """Return the Decimal value of display text, or None if it is not a number"""
    if not text or text in ("-", ".", "-."):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def format_number(value):
    """Render a Decimal for the display.

    Rounds to MAX_DIGITS significant digits and strips trailing fractional
    zeros. Magnitudes outside the display budget use scientific notation.
    """
    with localcontext() as ctx:
        ctx.prec = config.MAX_DIGITS
        value = +value

    if value.is_zero():
        return "0"

    exponent = value.adjusted()
    if exponent >= config.MAX_DIGITS or exponent < -config.MAX_DIGITS:
        return format(value.normalize(), "E")

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def count_digits(text):
    return sum(1 for ch in text if ch in DIGITS)


class Calculator:
    def __init__(self, on_result=None):
        self.on_result = on_result
        self._reset()

    def _reset(self):
        self.current_input = "0"
        self.accumulated_value = None
        self.pending_operation = None
        self.expression_trace = []
        self.error = None
        self.just_calculated = False
        # current_input holds a committed value the next digit replaces
        self._awaiting_operand = False

    # ── Entry ────────────────────────────────────────────────────────────
    def input_digit(self, digit):
        """Enter one or more digits"""
        digit = str(digit)
        if not digit or digit.strip(DIGITS):
            raise ValueError(f"not a digit: {digit!r}")

        if self.error is not None:
            self._reset()

        for d in digit:
            self._enter_digit(d)
        return self.get_current_display()

    def _enter_digit(self, d):
        if self.just_calculated or self._awaiting_operand:
            self.current_input = d
            self.just_calculated = False
            self._awaiting_operand = False
            return

        if self.current_input == "0":
            self.current_input = d
            return

        if count_digits(self.current_input) >= config.MAX_DIGITS:
            return
        self.current_input += d

    def input_decimal(self):
        """Add a decimal point to the current input"""
        if self.error is not None:
            return self.get_current_display()

        if self.just_calculated or self._awaiting_operand:
            self.current_input = "0."
            self.just_calculated = False
            self._awaiting_operand = False
        elif "." not in self.current_input:
            self.current_input = (self.current_input or "0") + "."
        return self.get_current_display()

    def toggle_sign(self):
        """Flip the sign of the current input (zero stays unsigned)"""
        if self.error is not None:
            return self.get_current_display()

        value = parse_number(self.current_input)
        if value is None or value.is_zero():
            return self.get_current_display()

        if self.current_input.startswith("-"):
            self.current_input = self.current_input[1:]
        else:
            self.current_input = "-" + self.current_input
        return self.get_current_display()

    def backspace(self):
        """Remove the last character of the current input"""
        if self.error is not None or self.just_calculated or self._awaiting_operand:
            return self.get_current_display()

        text = self.current_input[:-1]
        value = parse_number(text)
        if value is None:
            text = "0"
        elif value.is_zero() and text.startswith("-"):
            text = text[1:]
        self.current_input = text
        return self.get_current_display()

    # ── Operators ────────────────────────────────────────────────────────
    def set_operation(self, operation):
        """Select an operator, evaluating any pending one first"""
        if self.error is not None:
            return self.get_current_display()
        operation = Operation(operation)

        if self.pending_operation is not None and self._awaiting_operand:
            # Operator pressed again without a new operand: swap it
            self.pending_operation = operation
            self.expression_trace[-1] = operation.symbol
            return self.get_current_display()

        value = self._input_value()
        if self.pending_operation is not None:
            value = self._evaluate(value)
            if value is None:
                return self.get_current_display()
            self.current_input = format_number(value)

        self.accumulated_value = value
        self.pending_operation = operation
        self.expression_trace = [format_number(value), operation.symbol]
        self.just_calculated = False
        self._awaiting_operand = True
        return self.get_current_display()

    def calculate(self):
        """Evaluate the pending operation ("equals")"""
        if self.error is not None or self.pending_operation is None:
            return self.get_current_display()

        operand = self._input_value()
        result = self._evaluate(operand)
        if result is None:
            return self.get_current_display()

        self.expression_trace += [format_number(operand), "="]
        self.current_input = format_number(result)
        self.accumulated_value = None
        self.pending_operation = None
        self.just_calculated = True
        self._awaiting_operand = False

        if self.on_result is not None:
            self.on_result(self.get_expression_display(), self.current_input)
        return self.get_current_display()

    def _input_value(self):
        value = parse_number(self.current_input)
        return Decimal(0) if value is None else value

    def _evaluate(self, operand):
        """Apply the pending operation to operand; latch the error on failure"""
        try:
            with localcontext() as ctx:
                # Results carry the same digits the display shows
                ctx.prec = config.MAX_DIGITS
                return self.pending_operation.apply(self.accumulated_value, operand)
        except ZeroDivisionError:
            self._set_error(CalculatorError.DIVISION_BY_ZERO)
            return None

    def _set_error(self, error):
        self.error = error
        self.current_input = error.message
        self.accumulated_value = None
        self.pending_operation = None
        self.just_calculated = False
        self._awaiting_operand = False

    # ── Clearing ─────────────────────────────────────────────────────────
    def clear(self):
        """Reset to the initial state (AC)"""
        self._reset()
        return self.get_current_display()

    def clear_entry(self):
        """Reset only the current input (CE)"""
        if self.error is not None:
            self._reset()
        self.current_input = "0"
        self.just_calculated = False
        return self.get_current_display()

    # ── Accessors ────────────────────────────────────────────────────────
    def get_current_display(self):
        if self.error is not None:
            return self.error.message
        return self.current_input

    def get_expression_display(self):
        return " ".join(self.expression_trace)

    def has_error(self):
        return self.error is not None

    def get_current_value(self):
        if self.accumulated_value is None:
            return Decimal(0)
        return self.accumulated_value

    def get_current_operation(self):
        return self.pending_operation
