"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from termplot._request import DEFAULT_FROM, DEFAULT_STEP, DEFAULT_TO


class ConfigError(Exception):
    """Error in termplot configuration."""


@dataclass(slots=True, frozen=True)
class TermplotConfig:
    """Configuration loaded from pyproject.toml.

    Range values are kept as strings, exactly as a plot request receives them.
    Relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    from_: str = DEFAULT_FROM
    to: str = DEFAULT_TO
    step: str = DEFAULT_STEP
    output: Path | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_range_value(section: dict[str, object], key: str, default: str) -> str:
    if key not in section:
        return default
    value = section[key]
    # bool is an int subclass but never a valid bound
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        msg = f"Invalid [tool.termplot].{key}: expected number or numeric string"
        raise ConfigError(msg)
    return str(value)


def load_config(pyproject_path: Path) -> TermplotConfig:
    """Load and validate [tool.termplot] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed TermplotConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    termplot_section = tool_section.get("termplot", {})

    if not termplot_section:
        return TermplotConfig(project_root=project_root)

    if not isinstance(termplot_section, dict):
        msg = "Invalid [tool.termplot] configuration: expected a table"
        raise ConfigError(msg)

    from_ = _parse_range_value(termplot_section, "from", DEFAULT_FROM)
    to = _parse_range_value(termplot_section, "to", DEFAULT_TO)
    step = _parse_range_value(termplot_section, "step", DEFAULT_STEP)

    output_path: Path | None = None
    if "output" in termplot_section:
        output_value = termplot_section["output"]
        if not isinstance(output_value, str):
            msg = "Invalid [tool.termplot].output: expected string path"
            raise ConfigError(msg)
        output_path = Path(output_value)
        if not output_path.is_absolute():
            output_path = project_root / output_path

    return TermplotConfig(
        from_=from_,
        to=to,
        step=step,
        output=output_path,
        project_root=project_root,
    )


def get_config() -> TermplotConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        TermplotConfig (defaults if no pyproject.toml or no [tool.termplot] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return TermplotConfig()
    return load_config(pyproject_path)
