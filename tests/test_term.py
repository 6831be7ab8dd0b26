from termplot import ChainTerm, Constant, Operand, TrivialTerm, Variable, evaluate_term
from termplot._term import describe_term, format_term, iter_chain, precedence_of


def test_constant_ignores_x() -> None:
    assert Constant(4.0).resolve(123.0) == 4.0


def test_variable_resolves_to_x() -> None:
    assert Variable().resolve(2.5) == 2.5


def test_trivial_term_precedence_is_zero() -> None:
    term = TrivialTerm(Constant(1.0))
    assert term.precedence == 0
    assert precedence_of(term) == 0


def test_chain_term_precedence_follows_operand() -> None:
    term = ChainTerm(Constant(1.0), Operand.MUL, TrivialTerm(Variable()))
    assert term.precedence == 2
    assert precedence_of(term) == 2


def test_evaluate_trivial_term() -> None:
    assert evaluate_term(TrivialTerm(Variable()), 7.0) == 7.0
    assert evaluate_term(TrivialTerm(Constant(3.0)), 7.0) == 3.0


def test_evaluate_folds_equal_precedence_left_to_right() -> None:
    # 10 - 2 - 3
    term = ChainTerm(
        Constant(10.0),
        Operand.SUB,
        ChainTerm(Constant(2.0), Operand.SUB, TrivialTerm(Constant(3.0))),
    )
    assert evaluate_term(term, 0.0) == 5.0


def test_evaluate_defers_to_higher_precedence_rest() -> None:
    # 1 + 2 * x
    term = ChainTerm(
        Constant(1.0),
        Operand.ADD,
        ChainTerm(Constant(2.0), Operand.MUL, TrivialTerm(Variable())),
    )
    assert evaluate_term(term, 4.0) == 9.0


def test_evaluate_does_not_mutate_term() -> None:
    rest = ChainTerm(Constant(2.0), Operand.ADD, TrivialTerm(Constant(3.0)))
    term = ChainTerm(Constant(4.0), Operand.MUL, rest)

    assert evaluate_term(term, 0.0) == 11.0
    assert rest.value == Constant(2.0)
    assert evaluate_term(term, 0.0) == 11.0


def test_iter_chain() -> None:
    last = TrivialTerm(Variable())
    term = ChainTerm(Constant(1.0), Operand.ADD, last)
    assert list(iter_chain(term)) == [term, last]


def test_describe_term() -> None:
    term = ChainTerm(
        Constant(3.0),
        Operand.MUL,
        ChainTerm(Variable(), Operand.POW, TrivialTerm(Constant(-2.0))),
    )
    assert describe_term(term) == [("3", "*", 2), ("x", "^", 3), ("-2", "", 0)]


def test_format_term() -> None:
    term = ChainTerm(Variable(), Operand.DIV, TrivialTerm(Constant(2.0)))
    assert format_term(term) == "x / 2"
