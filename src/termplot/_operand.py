"""Binary operators supported in equations."""

import math
from collections.abc import Callable
from enum import StrEnum
from typing import Self

from ._errors import ParseError


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and math.fmod(value, 2.0) != 0.0


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0.0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # math.pow raises where IEEE pow returns a special value
        if a == 0.0:
            if math.copysign(1.0, a) < 0.0 and _is_odd_integer(b):
                return -math.inf
            return math.inf
        return math.nan


class Operand(StrEnum):
    """Operator symbol with its binding precedence.

    Members are created from ``(symbol, precedence, function, doc)`` tuples, in the
    same manner as a string enum carrying a docstring per member.
    """

    precedence: int
    _function: Callable[[float, float], float]

    def __new__(
        cls,
        symbol: str,
        precedence: int,
        function: Callable[[float, float], float],
        doc: str = "",
    ) -> Self:
        """Create a new operand member."""
        obj = str.__new__(cls, symbol)
        obj._value_ = symbol
        obj.precedence = precedence
        obj._function = function
        obj.__doc__ = doc
        return obj

    ADD = "+", 1, lambda a, b: a + b, "Addition"
    SUB = "-", 1, lambda a, b: a - b, "Subtraction"
    MUL = "*", 2, lambda a, b: a * b, "Multiplication"
    DIV = "/", 2, _divide, "Division, infinite or NaN on a zero divisor"
    POW = "^", 3, _power, "Exponentiation"

    def calculate(self, a: float, b: float) -> float:
        """Apply the operator to two operands."""
        return self._function(a, b)

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        """Look up the operand for a single-character symbol.

        Raises:
            ParseError: If the symbol is not exactly one recognized character.

        """
        if len(symbol) != 1:
            msg = f"Expected a single operator character, got {symbol!r}"
            raise ParseError(msg, symbol)
        try:
            return cls(symbol)
        except ValueError:
            msg = f"Illegal operator {symbol!r}"
            raise ParseError(msg, symbol) from None
