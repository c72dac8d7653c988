"""
Event handlers: sinks that receive parsed events and per-line failures.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.table import Table

from .errors import LineParseError
from .parser.events import Event, StandardPayload
from .parser.suffixes import Damage

logger = logging.getLogger(__name__)


class EventHandler:
    """
    Receives every parse result of a stream.

    Subclasses override `handle_event` and `handle_error`; `close` is called
    once the stream is exhausted.
    """

    def handle_event(self, event: Event):
        raise NotImplementedError

    def handle_error(self, error: LineParseError):
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class StdLogger(EventHandler):
    """Prints events to stdout and failures to stderr."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def handle_event(self, event: Event):
        # Event reprs contain brackets that rich would read as markup
        self.console.print(repr(event), markup=False, emoji=False, highlight=False, soft_wrap=True)

    def handle_error(self, error: LineParseError):
        self.error_console.print(f"line {error.line_number}: {error.cause}", markup=False, style="red")


class FileLogger(EventHandler):
    """
    Writes good events and failed lines to two separate files.

    The failed file holds the raw lines, so it can be fed back into the
    parser once the cause is fixed.
    """

    def __init__(self, good_path: Union[str, Path], failed_path: Union[str, Path]):
        self.good_path = Path(good_path)
        self.failed_path = Path(failed_path)
        self._good = open(self.good_path, "w", encoding="utf-8")
        self._failed = open(self.failed_path, "w", encoding="utf-8")
        self.good_count = 0
        self.failed_count = 0

    def handle_event(self, event: Event):
        self._good.write(f"{event!r}\n")
        self.good_count += 1

    def handle_error(self, error: LineParseError):
        self._failed.write(f"{error.raw_line}\n")
        self.failed_count += 1

    def close(self):
        if self._good.closed:
            return
        self._good.close()
        self._failed.close()
        logger.info(
            f"Wrote {self.good_count} events to {self.good_path} "
            f"and {self.failed_count} failed lines to {self.failed_path}"
        )


class NullHandler(EventHandler):
    def handle_event(self, event: Event):
        pass

    def handle_error(self, error: LineParseError):
        pass


class DamageTally(EventHandler):
    """Sums damage done per source actor name."""

    def __init__(self):
        self.damage: Counter = Counter()
        self.hits: Counter = Counter()
        self.errors = 0

    def handle_event(self, event: Event):
        payload = event.payload
        if not isinstance(payload, StandardPayload) or payload.source is None:
            return
        # *_DAMAGE_LANDED repeats a hit already logged as *_DAMAGE
        if type(payload.suffix) is Damage:
            self.damage[payload.source.name] += payload.suffix.amount
            self.hits[payload.source.name] += 1

    def handle_error(self, error: LineParseError):
        self.errors += 1

    def top(self, limit: Optional[int] = None):
        return self.damage.most_common(limit)

    def render(self, console: Optional[Console] = None, limit: int = 20):
        """Print the tally as a table, highest damage first."""
        console = console or Console()

        table = Table(title="Damage Done")
        table.add_column("Source", style="cyan")
        table.add_column("Damage", justify="right", style="green")
        table.add_column("Hits", justify="right")
        table.add_column("Share", justify="right", style="yellow")

        total = sum(self.damage.values())
        for name, amount in self.top(limit):
            share = amount / total * 100 if total else 0.0
            table.add_row(name, f"{amount:,}", str(self.hits[name]), f"{share:.1f}%")

        console.print(table)
