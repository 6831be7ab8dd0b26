"""Equation facade over the parser and the term model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._numbers import parse_float, sample_range
from ._parser import parse_equation
from ._term import ChainTerm, evaluate_term, iter_chain

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._term import Term

logger = logging.getLogger(__name__)


class Equation:
    """A single-variable equation in ``x`` that can be evaluated repeatedly.

    The equation string is parsed once on construction. A malformed string
    raises ParseError and no Equation is created.

    Example:
        >>> eq = Equation("3 * 2 + 1 / 2 * 2")
        >>> eq.evaluate(0)
        7.0

    """

    __slots__ = ("_equation_string", "_term")

    def __init__(self, equation_string: str) -> None:
        self._equation_string = equation_string.strip()
        self._term = parse_equation(self._equation_string)
        logger.debug(f"Parsed equation {self._equation_string!r}")

    @property
    def equation_string(self) -> str:
        return self._equation_string

    @property
    def term(self) -> Term:
        return self._term

    def evaluate(self, x: float) -> float:
        """Evaluate the equation at a single x-value."""
        return evaluate_term(self._term, float(x))

    def evaluate_many(self, xs: Iterable[float]) -> list[float]:
        """Evaluate the equation for each x-value, preserving order."""
        return [self.evaluate(x) for x in xs]

    def evaluate_range(
        self,
        start: float | str,
        stop: float | str,
        step: float | str,
    ) -> dict[float, float]:
        """Evaluate the equation over ``[start, stop]`` sampled every ``step``.

        Numeric strings are accepted for all three arguments. The bounds may be
        given in either order.

        Returns:
            Mapping from each sampled x-value to its y-value.

        Raises:
            NumericFormatError: If a string argument is not a number.
            InvalidRangeError: If the range cannot be sampled.

        """
        xs = self._sample_xs(start, stop, step)
        return {x: self.evaluate(x) for x in xs}

    def sample(
        self,
        start: float | str,
        stop: float | str,
        step: float | str,
    ) -> list[float]:
        """Like evaluate_range, but return only the y-values in x order."""
        return self.evaluate_many(self._sample_xs(start, stop, step))

    @staticmethod
    def _sample_xs(start: float | str, stop: float | str, step: float | str) -> list[float]:
        return list(
            sample_range(
                parse_float(start, name="from"),
                parse_float(stop, name="to"),
                parse_float(step, name="step"),
            ),
        )

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def __str__(self) -> str:
        return f"f(x) = {self._equation_string}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._equation_string!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Equation):
            return NotImplemented
        return self._chain_key() == other._chain_key()

    def __hash__(self) -> int:
        return hash(self._chain_key())

    def _chain_key(self) -> tuple[tuple[object, object], ...]:
        # flat per-node key; dataclass equality would recurse through the whole chain
        return tuple(
            (node.value, node.operand if isinstance(node, ChainTerm) else None) for node in iter_chain(self._term)
        )
