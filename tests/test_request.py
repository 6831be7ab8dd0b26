import pytest

from termplot import NumericFormatError, ParseError, PlotRequest, PlotResult


def test_defaults() -> None:
    request = PlotRequest(equation="x")
    assert request.from_ == "0"
    assert request.to == "100"
    assert request.step == "1"


def test_default_range_has_101_points() -> None:
    result = PlotRequest(equation="x").evaluate()
    assert len(result.points) == 101
    assert result.xs[0] == 0.0
    assert result.xs[-1] == 100.0


def test_validate_from_alias() -> None:
    request = PlotRequest.model_validate({"equation": "x * 2", "from": "0", "to": "2", "step": "1"})

    result = request.evaluate()

    assert result == PlotResult(equation="x * 2", points={0.0: 0.0, 1.0: 2.0, 2.0: 4.0})


def test_populate_by_field_name() -> None:
    request = PlotRequest(equation="x", from_="1", to="3")
    assert request.evaluate().xs == [1.0, 2.0, 3.0]


def test_values() -> None:
    request = PlotRequest(equation="x ^ 2", to="3")
    assert request.values() == [0.0, 1.0, 4.0, 9.0]


def test_result_strips_equation() -> None:
    result = PlotRequest(equation="  x ", to="1").evaluate()
    assert result.equation == "x"


def test_malformed_equation_raises() -> None:
    with pytest.raises(ParseError):
        PlotRequest(equation="x $ 1").evaluate()


def test_malformed_range_raises() -> None:
    with pytest.raises(NumericFormatError, match="to"):
        PlotRequest(equation="x", to="ten").evaluate()


def test_result_xs_ys() -> None:
    result = PlotResult(equation="x + 1", points={0.0: 1.0, 1.0: 2.0})
    assert result.xs == [0.0, 1.0]
    assert result.ys == [1.0, 2.0]
