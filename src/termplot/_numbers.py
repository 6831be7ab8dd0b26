"""Conversion of numeric strings and generation of sampling ranges."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from ._errors import InvalidRangeError, NumericFormatError

if TYPE_CHECKING:
    from collections.abc import Generator

logger = logging.getLogger(__name__)


def parse_float(text: str | float, *, name: str = "value") -> float:
    """Convert a numeric string to a float.

    Floats and ints are passed through unchanged. Digit-group underscores
    (``"1_000"``) are not accepted.

    Args:
        text: The string to convert.
        name: Name of the argument, used in the error message.

    Raises:
        NumericFormatError: If the string is not a valid floating-point number.

    """
    msg = f"Invalid number for {name}: {text!r}"
    if isinstance(text, bool):
        raise NumericFormatError(msg)
    if isinstance(text, int | float):
        return float(text)
    if "_" in text:
        raise NumericFormatError(msg)
    try:
        return float(text.strip())
    except ValueError as e:
        raise NumericFormatError(msg) from e


def sample_range(start: float, stop: float, step: float) -> Generator[float]:
    """Generate x-values from ``start`` to ``stop`` inclusive.

    The bounds are swapped if ``start > stop`` and the absolute value of
    ``step`` is used. Values are produced by repeated addition, so the last
    value may miss ``stop`` by accumulated rounding error.

    Raises:
        InvalidRangeError: If the step is zero or NaN, a bound is NaN, the range
            is infinite, or the step is too small to advance past a value.

    """
    if math.isnan(start) or math.isnan(stop) or math.isnan(step):
        msg = f"Range bounds and step must be numbers, got from={start}, to={stop}, step={step}"
        raise InvalidRangeError(msg)
    if start > stop:
        start, stop = stop, start
    step = abs(step)
    if step == 0.0:
        msg = "Step must not be zero"
        raise InvalidRangeError(msg)
    if math.isinf(start) or math.isinf(stop):
        msg = f"Range must be finite, got from={start}, to={stop}"
        raise InvalidRangeError(msg)

    logger.debug("Sampling [%s, %s] with step %s", start, stop, step)
    current = start
    while current <= stop:
        yield current
        following = current + step
        if following == current:
            msg = f"Step {step} is too small to advance past {current}"
            raise InvalidRangeError(msg)
        current = following
