"""Display configuration for iterbar progress bars.

Configuration sources are merged in priority order:
    1. Defaults (defined in DisplayConfig)
    2. Global config (~/.iterbar.toml)
    3. Project config (./iterbar.toml)
    4. Explicit config file
    5. Environment variables (ITERBAR_* prefix)
    6. Keyword overrides

Example:
    >>> config = load_config(prefix="loading ", bar_width=20)
    >>> config.bar_width
    20
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

DEFAULT_BAR_WIDTH = 30
# Found experimentally: bounds redraw overhead without looking laggy.
DEFAULT_MIN_INTERVAL = 0.15


@dataclass(frozen=True)
class DisplayConfig:
    """How a progress line looks and how often it is redrawn.

    Attributes:
        prefix: Text written before the percentage
        bar_width: Number of cells between the brackets
        min_interval: Minimum seconds between two redraws

    Only types are checked. Degenerate values are legal: a bar width of 0
    renders ``[]`` and an interval of 0 redraws on every step.
    """

    prefix: str = ""
    bar_width: int = DEFAULT_BAR_WIDTH
    min_interval: float = DEFAULT_MIN_INTERVAL

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str):
            raise InvalidConfigError("prefix", self.prefix, "must be a string")
        if isinstance(self.bar_width, bool) or not isinstance(self.bar_width, int):
            raise InvalidConfigError("bar_width", self.bar_width, "must be an integer")
        if isinstance(self.min_interval, bool) or not isinstance(
            self.min_interval, (int, float)
        ):
            raise InvalidConfigError("min_interval", self.min_interval, "must be a number")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> DisplayConfig:
    """Load display configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset flags do not mask file settings

    Returns:
        Validated DisplayConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value has the wrong type
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".iterbar.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "iterbar.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(DisplayConfig.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown setting")

    return DisplayConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from ITERBAR_* environment variables.

    Supported environment variables:
        ITERBAR_PREFIX: str
        ITERBAR_BAR_WIDTH: int
        ITERBAR_MIN_INTERVAL: float
    """
    type_hints = get_type_hints(DisplayConfig)
    result: dict[str, Any] = {}

    for field_name in DisplayConfig.__dataclass_fields__:
        env_key = f"ITERBAR_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    if type_hint is int:
        return int(value)
    if type_hint is float:
        return float(value)
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Read the ``[iterbar]`` table of a TOML file (or the top level if absent)."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f"Invalid config file '{path}': {e}", details={"path": str(path)}
        ) from e

    section = data.get("iterbar", data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Invalid config file '{path}': [iterbar] must be a table",
            details={"path": str(path)},
        )
    return dict(section)
