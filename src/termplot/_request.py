"""Request and result models for plotting an equation over a range.

These mirror the contract of a plot endpoint: the equation and the range
are received as strings, with the range defaulting to ``0..100`` in steps
of ``1``.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from ._equation import Equation

logger = logging.getLogger(__name__)

DEFAULT_FROM = "0"
DEFAULT_TO = "100"
DEFAULT_STEP = "1"


class PlotResult(BaseModel):
    """Sampled points of an equation."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    equation: str
    points: dict[float, float] = Field(default_factory=dict)

    @property
    def xs(self) -> list[float]:
        return list(self.points)

    @property
    def ys(self) -> list[float]:
        return list(self.points.values())


class PlotRequest(BaseModel):
    """Plot an equation over a range given as strings.

    Attributes:
        equation: The equation in ``x``.
        from_: Start of the range (``from`` when validated from a mapping).
        to: End of the range.
        step: Distance between sampled x-values.

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    equation: str
    from_: str = Field(default=DEFAULT_FROM, alias="from")
    to: str = DEFAULT_TO
    step: str = DEFAULT_STEP

    def build_equation(self) -> Equation:
        return Equation(self.equation)

    def evaluate(self) -> PlotResult:
        """Evaluate the equation over the requested range.

        Raises:
            ParseError: If the equation is malformed.
            NumericFormatError: If a range argument is not a number.
            InvalidRangeError: If the range cannot be sampled.

        """
        equation = self.build_equation()
        points = equation.evaluate_range(self.from_, self.to, self.step)
        logger.debug(f"Sampled {len(points)} point(s) for {equation}")
        return PlotResult(equation=equation.equation_string, points=points)

    def values(self) -> list[float]:
        """Evaluate the equation over the requested range, returning only y-values."""
        return self.build_equation().sample(self.from_, self.to, self.step)
