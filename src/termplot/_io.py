import logging
import tomllib
from pathlib import Path

import tomli_w

from ._request import PlotResult

logger = logging.getLogger(__name__)


def result_to_dict(result: PlotResult) -> dict[str, dict[str, object]]:
    """Convert a plot result to a TOML-compatible dictionary.

    TOML tables only allow string keys, so the sampled points are stored as two
    parallel arrays under a ``[plot]`` table.
    """
    return {
        "plot": {
            "equation": result.equation,
            "xs": result.xs,
            "ys": result.ys,
        },
    }


def export_to_toml(result: PlotResult, output_path: Path | str) -> None:
    """Export a plot result to a TOML file.

    Args:
        result: The sampled points to export.
        output_path: Path to the output TOML file.

    """
    toml_data = result_to_dict(result)

    output_path = Path(output_path)
    with output_path.open("wb") as f:
        tomli_w.dump(toml_data, f)

    logger.debug(f"Exported {len(result.points)} point(s) to {output_path}")


def export_to_json(result: PlotResult, output_path: Path | str, *, indent: int = 2) -> None:
    """Export a plot result to a JSON file."""
    output_path = Path(output_path)
    output_path.write_text(result.model_dump_json(indent=indent))

    logger.debug(f"Exported {len(result.points)} point(s) to {output_path}")


def load_result_from_toml(input_path: Path | str) -> PlotResult:
    """Load a plot result written by export_to_toml.

    Raises:
        ValueError: If the ``[plot]`` table is missing or its arrays differ in length.

    """
    input_path = Path(input_path)
    with input_path.open("rb") as f:
        toml_contents = tomllib.load(f)

    plot = toml_contents.get("plot")
    if not isinstance(plot, dict):
        msg = f"No [plot] table found in {input_path}"
        raise ValueError(msg)

    xs = plot.get("xs", [])
    ys = plot.get("ys", [])
    if len(xs) != len(ys):
        msg = f"Mismatched xs/ys lengths in {input_path}: {len(xs)} != {len(ys)}"
        raise ValueError(msg)

    logger.debug(f"Loaded plot result from {input_path}")
    return PlotResult(equation=plot.get("equation", ""), points=dict(zip(xs, ys, strict=True)))
