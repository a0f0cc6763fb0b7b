"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import DisplayConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    prefix: Optional[str] = None,
    bar_width: Optional[int] = None,
    min_interval: Optional[float] = None,
) -> DisplayConfig:
    """Build display settings from CLI options."""
    return load_config(
        config_file=config,
        prefix=prefix,
        bar_width=bar_width,
        min_interval=min_interval,
    )
