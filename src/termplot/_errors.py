"""Exceptions raised by termplot."""


class TermplotError(Exception):
    """Base class for all termplot errors."""


class ParseError(TermplotError, ValueError):
    """The equation string does not match the expression grammar."""

    def __init__(self, message: str, fragment: str = "") -> None:
        super().__init__(message)
        self.fragment = fragment


class NumericFormatError(TermplotError, ValueError):
    """A string argument is not a valid floating-point number."""


class InvalidRangeError(TermplotError, ValueError):
    """A sampling range cannot be walked to completion."""
