import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from termplot._equation import Equation
from termplot._errors import TermplotError
from termplot._io import export_to_json, export_to_toml
from termplot._request import PlotRequest, PlotResult
from termplot._term import describe_term, format_term

from .config import ConfigError, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Termplot CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(error: Exception) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(str(error))}[/red]")
    return typer.Exit(code=1)


def _build_equation(equation: str) -> Equation:
    try:
        return Equation(equation)
    except TermplotError as e:
        raise _fail(e) from e


def _points_table(points: dict[float, float]) -> Table:
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("x", justify="right", style="dim")
    table.add_column("y", justify="right")
    for x, y in points.items():
        table.add_row(f"{x:g}", f"{y:g}")
    return table


@app.command(name="eval")
def eval_(
    equation: Annotated[str, typer.Argument(help="Equation in x, e.g. '3 * x + 1'")],
    *,
    xs: Annotated[
        list[float],
        typer.Option("-x", help="Value of x (repeat for several values)"),
    ],
) -> None:
    """Evaluate an equation at one or more x-values."""
    eq = _build_equation(equation)
    ys = eq.evaluate_many(xs)

    out_console.print(
        Panel(
            _points_table(dict(zip(xs, ys, strict=True))),
            title=f"[bold]{escape(str(eq))}[/bold]",
            border_style="cyan",
        ),
    )


@app.command()
def plot(
    equation: Annotated[str, typer.Argument(help="Equation in x, e.g. '3 * x + 1'")],
    *,
    from_: Annotated[
        str | None,
        typer.Option("--from", help="Start of the range (defaults to 0 or the configured value)"),
    ] = None,
    to: Annotated[
        str | None,
        typer.Option("--to", help="End of the range (defaults to 100 or the configured value)"),
    ] = None,
    step: Annotated[
        str | None,
        typer.Option("--step", help="Distance between x-values (defaults to 1 or the configured value)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Export the points to a .toml or .json file"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the points as JSON to stdout"),
    ] = False,
) -> None:
    """Sample an equation over a range of x-values."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(e) from e

    request = PlotRequest.model_validate(
        {
            "equation": equation,
            "from": from_ if from_ is not None else config.from_,
            "to": to if to is not None else config.to,
            "step": step if step is not None else config.step,
        },
    )
    logger.debug(f"Plot request: {request!r}")

    try:
        result = request.evaluate()
    except TermplotError as e:
        raise _fail(e) from e

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        out_console.print(
            Panel(
                _points_table(result.points),
                title=f"[bold]f(x) = {escape(result.equation)}[/bold]",
                subtitle=f"[dim]{len(result.points)} points[/dim]",
                border_style="cyan",
            ),
        )

    output = output if output is not None else config.output
    if output is not None:
        _export(result, output)


def _export(result: PlotResult, output: Path) -> None:
    if output.suffix not in {".json", ".toml"}:
        msg = f"Unsupported output format {output.suffix!r}, expected .toml or .json"
        raise _fail(ValueError(msg))

    err_console.print(f"[cyan]Exporting points to:[/cyan] {output}")
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix == ".json":
        export_to_json(result, output)
    else:
        export_to_toml(result, output)
    err_console.print("[green]✓ Export complete[/green]")


@app.command()
def check(
    equation: Annotated[str, typer.Argument(help="Equation in x, e.g. '3 * x + 1'")],
) -> None:
    """Check that an equation parses, and show its term chain."""
    eq = _build_equation(equation)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Value", style="bold")
    table.add_column("Operator", justify="center", style="yellow")
    table.add_column("Precedence", justify="right", style="green")

    rows = describe_term(eq.term)
    for index, (value, operator, precedence) in enumerate(rows):
        table.add_row(str(index), value, escape(operator), str(precedence))

    err_console.print(
        Panel(
            table,
            title=f"[bold]{escape(format_term(eq.term))}[/bold]",
            subtitle=f"[dim]{len(rows)} terms[/dim]",
            border_style="cyan",
        ),
    )
    err_console.print("[green]✓ Equation is valid[/green]")


if __name__ == "__main__":
    app()
