"""Demo command: runs each kind of progress bar over a small workload."""

import sys
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Dict, List, Optional

import typer
from rich.markup import escape

from ..api import tqdm, tqdm_timer, trange
from ..config import DisplayConfig
from ..exceptions import IterbarError
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


@dataclass(frozen=True)
class Workload:
    """Size and pacing shared by the demo scenarios."""

    count: int = 5000
    delay: float = 0.0002
    timer_seconds: float = 2.0


def _with_label(config: DisplayConfig, label: str) -> DisplayConfig:
    return replace(config, prefix=f"{config.prefix}{label} ")


def run_timer(config: DisplayConfig, workload: Workload) -> int:
    steps = 0
    for _ in tqdm_timer(workload.timer_seconds, config=_with_label(config, "timer")):
        time.sleep(workload.delay)
        steps += 1
    return steps


def run_mutable(config: DisplayConfig, workload: Workload) -> int:
    data = list(range(1000, 1000 + workload.count))
    bar = tqdm(data, config=_with_label(config, "borrowed list"))
    for i, value in enumerate(bar):
        data[i] = value * 2
        time.sleep(workload.delay)
        bar.append_to_suffix(data[i])
    return bar.iterations_done


def run_immutable(config: DisplayConfig, workload: Workload) -> int:
    data = tuple(range(1000, 1000 + workload.count))
    bar = tqdm(data, config=_with_label(config, "borrowed tuple"))
    for value in bar:
        time.sleep(workload.delay)
        bar.append_to_suffix(value)
    return bar.iterations_done


def run_owned(config: DisplayConfig, workload: Workload) -> int:
    bar = tqdm(
        (value for value in range(1000, 1000 + workload.count)),
        config=_with_label(config, "owned generator"),
    )
    for value in bar:
        time.sleep(workload.delay)
        bar.append_to_suffix(value)
    return bar.iterations_done


def run_range(config: DisplayConfig, workload: Workload) -> int:
    bar = trange(100, workload.count, config=_with_label(config, "range"))
    for value in bar:
        time.sleep(workload.delay)
        bar.append_to_suffix(value)
    return bar.iterations_done


SCENARIOS: Dict[str, Callable[[DisplayConfig, Workload], int]] = {
    "timer": run_timer,
    "mutable": run_mutable,
    "immutable": run_immutable,
    "owned": run_owned,
    "range": run_range,
}


@app.command()
def demo(
    scenarios: Optional[List[str]] = typer.Argument(
        None,
        help=f"Scenarios to run: {', '.join(SCENARIOS)} (default: all)",
        show_default=False,
    ),
    count: int = typer.Option(5000, "--count", "-n", min=0, help="Elements per scenario"),
    delay: float = typer.Option(
        0.0002, "--delay", "-d", min=0.0, help="Seconds of simulated work per element"
    ),
    timer_seconds: float = typer.Option(
        2.0, "--timer-seconds", help="Duration of the timer scenario (paced by --delay)"
    ),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Text before every bar"),
    bar_width: Optional[int] = typer.Option(None, "--bar-width", help="Bar width in cells"),
    min_interval: Optional[float] = typer.Option(
        None, "--min-interval", help="Minimum seconds between redraws"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="TOML config file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    """
    Run the progress bar demos.

    [bold cyan]Examples:[/bold cyan]

      iterbar demo

      iterbar demo range owned --count 20000

      iterbar demo timer --timer-seconds 5 --prefix "> "
    """
    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    selected = scenarios or list(SCENARIOS)
    unknown = [name for name in selected if name not in SCENARIOS]
    if unknown:
        console.print(
            f"[red]Error:[/red] unknown scenario(s): {', '.join(unknown)} "
            f"(choose from {', '.join(SCENARIOS)})"
        )
        raise typer.Exit(1)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        display = resolve_config(
            config, prefix=prefix, bar_width=bar_width, min_interval=min_interval
        )
        logger.debug("Display settings: %s", display)

        workload = Workload(count=count, delay=delay, timer_seconds=timer_seconds)
        for name in selected:
            steps = SCENARIOS[name](display, workload)
            sys.stderr.write("\n")
            sys.stderr.flush()
            logger.debug("Scenario %s finished after %d steps", name, steps)

    except IterbarError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Demo interrupted[/yellow]")
        raise typer.Exit(130)
