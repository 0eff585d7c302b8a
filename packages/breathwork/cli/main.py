"""Command-line interface for Breathwork.

Runs guided breathing sessions in the terminal and previews their timeline.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
import sys
from typing import Any
import uuid

from rich.console import Console
from rich.table import Table

from breathwork.core.config.loader import configure_logging, load_app_config
from breathwork.core.config.models import AppConfig
from breathwork.core.driver import SessionDriver
from breathwork.core.guidance import CYCLE_CHOICES, cycle_label, guidance_for
from breathwork.core.sequencer import (
    InvalidConfigError,
    PhaseSequencer,
    SequencerConfig,
    SequencerState,
    coerce_config,
    phase_boundaries,
    total_ticks,
)
from breathwork.core.utils.json import write_json

console = Console()
logger = logging.getLogger(__name__)

_PHASE_STYLES = {
    "inhale": "cyan",
    "hold": "magenta",
    "exhale": "green",
    "rest": "yellow",
}


def parse_pattern(value: str) -> dict[str, int]:
    """Parse an ``inhale-hold-exhale-rest`` pattern such as ``4-7-8-4``.

    Raises:
        argparse.ArgumentTypeError: If the pattern is not four positive integers
    """
    parts = value.split("-")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"Pattern must be four durations like 4-7-8-4, got {value!r}"
        )
    try:
        durations = [int(part) for part in parts]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Pattern durations must be integers: {value!r}") from e
    if any(d < 1 for d in durations):
        raise argparse.ArgumentTypeError(f"Pattern durations must be >= 1: {value!r}")

    inhale, hold, exhale, rest = durations
    return {
        "inhale_seconds": inhale,
        "hold_seconds": hold,
        "exhale_seconds": exhale,
        "rest_seconds": rest,
    }


def resolve_sequencer_config(app_config: AppConfig, args: argparse.Namespace) -> SequencerConfig:
    """Merge command-line overrides into the configured session pattern.

    Raises:
        InvalidConfigError: If the merged config is rejected
    """
    overrides: dict[str, Any] = {}
    if args.pattern is not None:
        overrides.update(args.pattern)
    if args.cycles is not None:
        overrides["total_cycles"] = args.cycles
    return coerce_config({**app_config.session.pattern.model_dump(), **overrides})


def _load(args: argparse.Namespace) -> tuple[AppConfig, SequencerConfig] | None:
    """Load app config and sequencer config, reporting failures."""
    try:
        app_config = load_app_config(Path(args.app_config))
        if getattr(args, "log_level", None):
            app_config = app_config.model_copy(
                update={
                    "logging": app_config.logging.model_copy(
                        update={"level": args.log_level.upper()}
                    )
                }
            )
        sequencer_config = resolve_sequencer_config(app_config, args)
    except InvalidConfigError as e:
        console.print(f"[red]ERROR: Invalid breathing pattern: {e}[/red]")
        return None
    except Exception as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return None
    return app_config, sequencer_config


def render_state(state: SequencerState, config: SequencerConfig) -> None:
    """Print one snapshot."""
    guidance = guidance_for(state.phase)
    style = _PHASE_STYLES[state.phase.value]
    console.print(
        f"[{style}]{state.phase.value.upper():<7}[/{style}] "
        f"[bold]{state.seconds_remaining:>2}s[/bold]  "
        f"{guidance.instruction:<36} [dim]{cycle_label(state, config)}[/dim]"
    )


def run_session(args: argparse.Namespace) -> int:
    """Run a guided breathing session in the terminal.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    loaded = _load(args)
    if loaded is None:
        return 1
    app_config, sequencer_config = loaded

    interval = (
        args.tick_interval
        if args.tick_interval is not None
        else app_config.session.tick_interval_seconds
    )
    if interval < 0:
        console.print(f"[red]ERROR: Tick interval must be >= 0, got {interval}[/red]")
        return 1

    configure_logging(app_config)

    sequencer = PhaseSequencer(sequencer_config)
    driver = SessionDriver(
        sequencer,
        tick_interval_seconds=interval,
        on_tick=lambda state: render_state(state, sequencer.config),
        session_id=uuid.uuid4().hex[:8],
    )

    console.print(
        f"[bold]Breathing {sequencer_config.inhale_seconds}-{sequencer_config.hold_seconds}-"
        f"{sequencer_config.exhale_seconds}-{sequencer_config.rest_seconds}[/bold] "
        f"for {sequencer_config.total_cycles} cycles "
        f"({total_ticks(sequencer_config)} ticks)\n"
    )
    render_state(sequencer.state, sequencer.config)

    try:
        asyncio.run(driver.run())
    except KeyboardInterrupt:
        sequencer.pause()
        state = sequencer.state
        console.print(
            f"\n[yellow]Paused during {state.phase.value} "
            f"({state.seconds_remaining}s left, {cycle_label(state, sequencer.config)})[/yellow]"
        )
        return 0

    console.print("\n[bold green]Session complete. Well done.[/bold green]")
    return 0


def show_timeline(args: argparse.Namespace) -> int:
    """Print the phase boundary table for a run.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    loaded = _load(args)
    if loaded is None:
        return 1
    _, sequencer_config = loaded

    table = Table(title="Breathing timeline")
    table.add_column("Tick", justify="right")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Cycles done", justify="right")

    boundaries = phase_boundaries(sequencer_config)
    for boundary in boundaries:
        table.add_row(
            str(boundary.tick),
            boundary.from_phase.value,
            boundary.to_phase.value,
            str(boundary.completed_cycles),
        )

    console.print(table)
    console.print(f"Total: {total_ticks(sequencer_config)} ticks")

    if args.json is not None:
        write_json(
            args.json,
            {
                "pattern": sequencer_config.model_dump(),
                "total_ticks": total_ticks(sequencer_config),
                "boundaries": [b.model_dump(mode="json") for b in boundaries],
            },
        )
        console.print(f"Wrote timeline to {args.json}")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--app-config",
        default="config.json",
        help="Path to app config JSON/YAML (default: config.json)",
    )
    parser.add_argument(
        "--pattern",
        type=parse_pattern,
        default=None,
        help="Phase durations as inhale-hold-exhale-rest, e.g. 4-7-8-4",
    )
    parser.add_argument(
        "--cycles",
        type=int,
        choices=CYCLE_CHOICES,
        default=None,
        help="Number of cycles",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="breathwork",
        description="Breathwork - guided breathing exercises in the terminal",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    run = sub.add_parser("run", help="Run a guided breathing session")
    _add_common_arguments(run)
    run.add_argument(
        "--tick-interval",
        type=float,
        default=None,
        help="Seconds between ticks (default: from config, normally 1.0)",
    )
    run.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )

    timeline = sub.add_parser("timeline", help="Show when each phase starts")
    _add_common_arguments(timeline)
    timeline.add_argument(
        "--json",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also write the timeline to a JSON file",
    )

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "run":
        sys.exit(run_session(args))
    elif args.cmd == "timeline":
        sys.exit(show_timeline(args))


if __name__ == "__main__":
    main()
