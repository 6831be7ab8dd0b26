"""Parse and evaluate single-variable equations."""

__all__ = [
    "ChainTerm",
    "Constant",
    "Equation",
    "InvalidRangeError",
    "NumericFormatError",
    "Operand",
    "ParseError",
    "PlotRequest",
    "PlotResult",
    "Term",
    "TermplotError",
    "TrivialTerm",
    "Variable",
    "evaluate_term",
    "export_to_json",
    "export_to_toml",
    "load_result_from_toml",
    "parse_equation",
    "parse_float",
    "sample_range",
]

from ._equation import Equation
from ._errors import InvalidRangeError, NumericFormatError, ParseError, TermplotError
from ._io import export_to_json, export_to_toml, load_result_from_toml
from ._numbers import parse_float, sample_range
from ._operand import Operand
from ._parser import parse_equation
from ._request import PlotRequest, PlotResult
from ._term import ChainTerm, Constant, Term, TrivialTerm, Variable, evaluate_term
