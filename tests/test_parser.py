import pytest

from termplot import ChainTerm, Constant, Operand, ParseError, TrivialTerm, Variable, parse_equation
from termplot._term import iter_chain


def test_parse_single_constant() -> None:
    assert parse_equation("42") == TrivialTerm(Constant(42.0))


def test_parse_single_variable() -> None:
    assert parse_equation("x") == TrivialTerm(Variable())


def test_parse_negative_literal() -> None:
    assert parse_equation("-7") == TrivialTerm(Constant(-7.0))


def test_parse_chain_is_right_leaning() -> None:
    assert parse_equation("1 + x * 3") == ChainTerm(
        Constant(1.0),
        Operand.ADD,
        ChainTerm(Variable(), Operand.MUL, TrivialTerm(Constant(3.0))),
    )


def test_parse_negative_literal_after_operator() -> None:
    assert parse_equation("2 + -4") == ChainTerm(Constant(2.0), Operand.ADD, TrivialTerm(Constant(-4.0)))


def test_parse_without_whitespace() -> None:
    assert parse_equation("x+-1") == parse_equation("x + -1")


def test_parse_subtraction_without_whitespace() -> None:
    assert parse_equation("x-1") == ChainTerm(Variable(), Operand.SUB, TrivialTerm(Constant(1.0)))


def test_parse_strips_surrounding_whitespace() -> None:
    assert parse_equation("  x ^ 2  ") == parse_equation("x ^ 2")


@pytest.mark.parametrize(
    ("equation", "message"),
    [
        ("", "empty"),
        ("   ", "empty"),
        ("x $ 1", "Illegal operator"),
        ("1 2", "Illegal operator"),
        ("1.5 + x", "Illegal operator"),
        ("1 ** 2", "Expected a number"),
        ("y + 1", "Expected a number"),
        ("-x", "Expected a number"),
        ("\u0663 + x", "Expected a number"),
        ("1 +", "Missing term"),
        ("x + 1 -", "Missing term"),
        ("(x + 1) * 2", "Parenthesized"),
        ("x * (1 + 2)", "Parenthesized"),
    ],
)
def test_parse_malformed_equation_raises(equation: str, message: str) -> None:
    with pytest.raises(ParseError, match=message):
        parse_equation(equation)


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="Illegal operator"):
        parse_equation("x % 2")


def test_parse_error_carries_fragment() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_equation("1 + 2 + y")
    assert exc_info.value.fragment == "y"


def test_parse_long_equation() -> None:
    term = parse_equation(" + ".join(["x"] * 5000))

    nodes = list(iter_chain(term))
    assert len(nodes) == 5000
    assert nodes[-1] == TrivialTerm(Variable())
