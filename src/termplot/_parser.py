"""Parser turning an equation string into a term chain."""

import logging
import re

from ._errors import ParseError
from ._operand import Operand
from ._term import ChainTerm, Constant, Term, TrivialTerm, Value, Variable

logger = logging.getLogger(__name__)

VARIABLE = "x"

# <value> <operator?> <remainder>, ASCII digits only
_TERM_PATTERN = re.compile(r"(?P<value>-?\d+|x)\s*(?P<operator>\S?)(?P<remainder>.*)", re.DOTALL | re.ASCII)


def _parse_value(token: str) -> Value:
    if token == VARIABLE:
        return Variable()
    return Constant(float(token))


def parse_equation(equation: str) -> Term:
    """Parse a stripped equation string into a term.

    Grammar, applied greedily from the left without backtracking::

        term      := value operator? remainder
        value     := integer-literal | "x"
        operator  := one of "+-*/^"

    The remainder after an operator is stripped and parsed as a term again.
    Steps are collected left to right and the chain is built from the right,
    so long equations do not hit the recursion limit.

    Args:
        equation: The equation, without leading or trailing whitespace.

    Returns:
        A TrivialTerm if the equation is a single value, otherwise a ChainTerm.

    Raises:
        ParseError: If a value or operator cannot be recognized, or if an
            operator is not followed by another term.

    """
    steps: list[tuple[Value, Operand]] = []
    remainder = equation.strip()
    if not remainder:
        msg = "Equation is empty"
        raise ParseError(msg)

    while True:
        if remainder.startswith("("):
            msg = f"Parenthesized groups are not supported: {remainder!r}"
            raise ParseError(msg, remainder)

        match = _TERM_PATTERN.match(remainder)
        if match is None:
            msg = f"Expected a number or {VARIABLE!r} at {remainder!r}"
            raise ParseError(msg, remainder)

        value = _parse_value(match["value"])
        symbol = match["operator"]
        if not symbol:
            logger.debug("Parsed trivial term %s", value)
            break

        operand = Operand.from_symbol(symbol)
        following = match["remainder"].strip()
        if not following:
            msg = f"Missing term after operator {symbol!r} in {remainder!r}"
            raise ParseError(msg, remainder)

        logger.debug("Parsed %s %s, continuing with %r", value, operand, following)
        steps.append((value, operand))
        remainder = following

    term: Term = TrivialTerm(value)
    for step_value, step_operand in reversed(steps):
        term = ChainTerm(step_value, step_operand, term)
    return term
