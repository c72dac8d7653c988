#!/usr/bin/env python3
"""
Command-line interface for the WoW combat log parser.
"""

import logging
from collections import Counter
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config.loader import load_and_apply_config
from .config.settings import get_settings
from .consumers import DamageTally, FileLogger, NullHandler, StdLogger
from .parser.parser import CombatLogParser, process

# Set up rich console for pretty output
console = Console()

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="YAML config file")
@click.option("--year", type=int, help="Year for timestamps that do not include one")
@click.version_option(package_name="wowcombatlog")
def cli(verbose, config_path, year):
    """WoW Combat Log Parser"""
    load_and_apply_config(config_path)

    settings = get_settings()
    if year is not None:
        settings.year = year
    if verbose:
        settings.log_level = "debug"

    try:
        settings.validate()
    except ValueError as e:
        raise click.UsageError(str(e))

    settings.setup_logging()


def _output_options(func):
    func = click.option(
        "--tally", is_flag=True, help="Print a damage-done table per source at the end"
    )(func)
    func = click.option("--failed", type=click.Path(dir_okay=False), help="Failed lines file (--output file)")(func)
    func = click.option("--good", type=click.Path(dir_okay=False), help="Parsed events file (--output file)")(func)
    func = click.option(
        "--output",
        "-o",
        type=click.Choice(["std", "file", "none"]),
        default="std",
        show_default=True,
        help="Where parsed events go",
    )(func)
    return func


def _build_handlers(output, good, failed, tally):
    if output == "file":
        if not good or not failed:
            raise click.UsageError("--output file needs both --good and --failed")
        handlers = [FileLogger(good, failed)]
    elif output == "std":
        handlers = [StdLogger(console=console)]
    else:
        handlers = [NullHandler()]

    if tally:
        handlers.append(DamageTally())
    return handlers


def _close_handlers(handlers):
    for handler in handlers:
        handler.close()
        if isinstance(handler, DamageTally):
            handler.render(console)


class _EventTypeCounter(NullHandler):
    def __init__(self):
        self.event_types = Counter()

    def handle_event(self, event):
        self.event_types[event.name] += 1


@cli.command("process")
@click.argument("log_path", type=click.Path(exists=True, dir_okay=False))
@_output_options
@click.option(
    "--parallel/--no-parallel",
    default=False,
    help="Parse on a thread pool (loads the whole file first)",
)
@click.option("--threads", type=int, default=None, help="Worker threads (default: configured workers)")
def process_command(log_path, output, good, failed, tally, parallel, threads):
    """Parse a complete combat log file."""
    log_path = Path(log_path)
    quiet = output == "std"
    if not quiet:
        console.print(f"[bold green]Parsing combat log:[/bold green] {log_path.name}")
        console.print(f"[cyan]File size:[/cyan] {log_path.stat().st_size / 1024 / 1024:.1f} MB")

    parser = CombatLogParser()
    handlers = _build_handlers(output, good, failed, tally)
    counter = _EventTypeCounter()
    start_time = datetime.now()

    try:
        if parallel:
            with open(log_path, "r", encoding=parser.encoding, errors="replace") as f:
                lines = f.readlines()
            results = parser.parse_lines_parallel(lines, max_workers=threads)
        else:
            results = parser.parse_file(log_path)

        if quiet:
            process(results, handlers + [counter])
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                task = progress.add_task("[cyan]Processing...", total=None)
                process(results, handlers + [counter])
                progress.update(task, description="[green]Done")
    finally:
        _close_handlers(handlers)

    if not quiet:
        display_summary(parser, counter.event_types, (datetime.now() - start_time).total_seconds())


@cli.command("watch")
@click.argument("log_path", type=click.Path(exists=True, dir_okay=False))
@_output_options
@click.option("--from-start", is_flag=True, help="Parse existing content before following")
@click.option("--poll-interval", type=float, default=None, help="Seconds between polls")
def watch_command(log_path, output, good, failed, tally, from_start, poll_interval):
    """Follow a combat log while the game writes it (Ctrl+C to stop)."""
    parser = CombatLogParser()
    handlers = _build_handlers(output, good, failed, tally)

    console.print(f"[bold green]Watching:[/bold green] {log_path}")
    try:
        process(parser.follow(log_path, poll_interval=poll_interval, from_start=from_start), handlers)
    except KeyboardInterrupt:
        parser.stop()
        console.print("\n[yellow]Stopped[/yellow]")
    finally:
        _close_handlers(handlers)

    stats = parser.get_stats()
    console.print(f"Events: {stats['events_processed']:,}  Errors: {stats['parse_errors']:,}")


def display_summary(parser, event_types, processing_time):
    """Display parsing summary."""
    stats = parser.get_stats()
    total_events = stats["events_processed"]

    console.print("\n[bold cyan]═══ Parsing Complete ═══[/bold cyan]")

    stats_table = Table(title="Parsing Statistics", show_header=False)
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", style="white")

    stats_table.add_row("Total Events", f"{total_events:,}")
    stats_table.add_row("Parse Errors", f"{stats['parse_errors']:,}")
    stats_table.add_row("Processing Time", f"{processing_time:.2f}s")
    stats_table.add_row("Events/Second", f"{total_events / max(processing_time, 0.01):,.0f}")
    console.print(stats_table)

    if event_types:
        type_table = Table(title="Top Event Types")
        type_table.add_column("Event", style="cyan")
        type_table.add_column("Count", justify="right")
        for name, count in event_types.most_common(15):
            type_table.add_row(name, f"{count:,}")
        console.print(type_table)


def main():
    """Entry point for the wowcombatlog command."""
    cli()


if __name__ == "__main__":
    main()
