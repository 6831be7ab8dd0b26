"""Term model for parsed equations.

An equation is stored as a right-leaning chain of terms. Each ChainTerm holds
a leading value, an operand and the whole remaining suffix of the equation.
Operator precedence is not encoded in the shape of the chain; it is resolved
while evaluating, by comparing the precedence of a node with the precedence
of the node that follows it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

    from ._operand import Operand

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Constant:
    """A numeric literal."""

    value: float

    def resolve(self, x: float) -> float:  # noqa: ARG002
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True, slots=True)
class Variable:
    """The equation variable ``x``."""

    def resolve(self, x: float) -> float:
        return x

    def __str__(self) -> str:
        return "x"


Value = Constant | Variable


@dataclass(frozen=True, slots=True)
class TrivialTerm:
    """A term consisting of a single value.

    Attributes:
        value: The constant or variable this term evaluates to.

    """

    value: Value

    @property
    def precedence(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class ChainTerm:
    """A value combined with the rest of the equation.

    Attributes:
        value: The leading value.
        operand: The operator joining the leading value with ``rest``.
        rest: Everything to the right of the operator.

    """

    value: Value
    operand: Operand
    rest: Term

    @property
    def precedence(self) -> int:
        return self.operand.precedence


Term = TrivialTerm | ChainTerm


def precedence_of(term: Term) -> int:
    """Return the top-level precedence of a term (0 for a trivial term)."""
    match term:
        case TrivialTerm():
            return 0
        case ChainTerm(operand=operand):
            return operand.precedence
    msg = f"Unsupported term type: {type(term)}"
    raise TypeError(msg)


def evaluate_term(term: Term, x: float) -> float:
    """Evaluate a term for a given value of ``x``.

    When the operand of a chain node binds at least as tightly as the operand
    heading ``rest``, the node is folded into the leading value of ``rest`` and
    the shortened chain is evaluated. Otherwise ``rest`` is evaluated first and
    the operand is applied to its result. Ties fold left to right for every
    operand, including ``^``.

    Deferred operands are kept on an explicit stack, so chains of any length
    are evaluated without recursion.

    Args:
        term: The term to evaluate.
        x: The value substituted for the variable.

    Returns:
        The value of the term. Division by zero and other edge cases yield
        IEEE special values instead of raising.

    """
    pending: list[tuple[float, Operand]] = []
    while True:
        match term:
            case TrivialTerm(value=value):
                result = value.resolve(x)
                break
            case ChainTerm(value=value, operand=operand, rest=rest):
                if operand.precedence >= precedence_of(rest):
                    folded = operand.calculate(value.resolve(x), rest.value.resolve(x))
                    term = replace(rest, value=Constant(folded))
                else:
                    # rest binds tighter; apply this operand to its result afterwards
                    pending.append((value.resolve(x), operand))
                    term = rest
            case _:
                msg = f"Unsupported term type: {type(term)}"
                raise TypeError(msg)

    for left, operand in reversed(pending):
        result = operand.calculate(left, result)
    return result


def iter_chain(term: Term) -> Generator[Term]:
    """Iterate over the nodes of a term chain from left to right."""
    current: Term | None = term
    while current is not None:
        yield current
        current = current.rest if isinstance(current, ChainTerm) else None


def describe_term(term: Term) -> list[tuple[str, str, int]]:
    """Describe each node of a chain as ``(value, operator, precedence)`` rows.

    The operator column is empty for the final, trivial node.
    """
    rows = []
    for node in iter_chain(term):
        operator = str(node.operand) if isinstance(node, ChainTerm) else ""
        rows.append((str(node.value), operator, precedence_of(node)))
    logger.debug("Term chain has %d node(s)", len(rows))
    return rows


def format_term(term: Term) -> str:
    """Render a term back to a normalized equation string."""
    parts: list[str] = []
    for node in iter_chain(term):
        parts.append(str(node.value))
        if isinstance(node, ChainTerm):
            parts.append(str(node.operand))
    return " ".join(parts)
