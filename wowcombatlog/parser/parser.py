"""
Stream-level parser: feeds lines from files, live-tailed files or any
iterable into the event parser and forwards results to handlers.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from ..errors import LineParseError
from .events import Event, EventParser
from .tokenizer import LineTokenizer

logger = logging.getLogger(__name__)

ParseResult = Union[Event, LineParseError]


class CombatLogParser:
    """
    Main parser for WoW combat log files.

    Handles file reading, line tokenization and event creation. A bad line
    never stops a stream: it is returned as a LineParseError in place of the
    event and counted in `parse_errors`.
    """

    def __init__(self, year: Optional[int] = None, encoding: str = "utf-8"):
        """
        Initialize the combat log parser.

        Args:
            year: Year for timestamps without one (defaults to configuration)
            encoding: Text encoding of log files
        """
        self.tokenizer = LineTokenizer()
        self.event_parser = EventParser(year)
        self.encoding = encoding
        self.current_file: Optional[Path] = None
        self.events_processed = 0
        self.parse_errors = 0
        self._following = False

    def parse_line(self, line: str, line_number: Optional[int] = None) -> Event:
        """
        Parse one raw line.

        Raises:
            LineParseError: if the line cannot be decoded
        """
        fields = self.tokenizer.split(line)
        try:
            return self.event_parser.parse(fields)
        except LineParseError as e:
            e.line_number = line_number
            e.line = line.rstrip("\r\n")
            raise

    def _process_line(self, line: str, line_number: Optional[int] = None) -> Iterator[ParseResult]:
        if not line.strip():
            return

        try:
            event = self.parse_line(line, line_number)
        except LineParseError as e:
            self.parse_errors += 1
            logger.debug(f"Parse error on line {line_number}: {e.cause}")
            yield e
            return

        self.events_processed += 1
        yield event

    def parse_lines(self, lines: Iterable[str]) -> Iterator[ParseResult]:
        """
        Parse lines in order, yielding an Event or LineParseError for each
        non-blank line.
        """
        for line_number, line in enumerate(lines, 1):
            yield from self._process_line(line, line_number)

    def parse_lines_parallel(
        self, lines: Iterable[str], max_workers: Optional[int] = None
    ) -> List[ParseResult]:
        """
        Parse a batch of lines on a thread pool.

        Lines are independent, so results are identical to `parse_lines`
        and returned in input order.
        """
        if max_workers is None:
            from ..config.settings import get_settings

            max_workers = get_settings().workers

        numbered = [(n, line) for n, line in enumerate(lines, 1) if line.strip()]
        logger.info(f"Parsing {len(numbered)} lines with {max_workers} workers")

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda item: self._safe_parse(*item), numbered))

        errors = sum(1 for result in results if isinstance(result, LineParseError))
        self.parse_errors += errors
        self.events_processed += len(results) - errors
        return results

    def _safe_parse(self, line_number: int, line: str) -> ParseResult:
        # Uses a private tokenizer so worker threads share no counters
        fields = LineTokenizer().split(line)
        try:
            return self.event_parser.parse(fields)
        except LineParseError as e:
            e.line_number = line_number
            e.line = line.rstrip("\r\n")
            return e

    def parse_file(self, file_path: Union[str, Path]) -> Iterator[ParseResult]:
        """
        Parse a combat log file and yield results.

        Args:
            file_path: Path to the combat log file
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Combat log file not found: {file_path}")

        self.current_file = file_path
        logger.info(
            f"Starting parse of {file_path.name} ({file_path.stat().st_size / 1024 / 1024:.1f} MB)"
        )

        with open(file_path, "r", encoding=self.encoding, errors="replace") as f:
            yield from self.parse_lines(f)

        logger.info(
            f"Completed parsing {file_path.name}: "
            f"{self.events_processed} events, {self.parse_errors} errors"
        )

    def follow(
        self,
        file_path: Union[str, Path],
        poll_interval: Optional[float] = None,
        from_start: bool = False,
    ) -> Iterator[ParseResult]:
        """
        Tail a combat log that the game is still writing.

        Yields results as complete lines appear until `stop()` is called.

        Args:
            file_path: Path to the combat log file
            poll_interval: Seconds to sleep when no new data is available
            from_start: Parse existing content first instead of seeking to the end
        """
        if poll_interval is None:
            from ..config.settings import get_settings

            poll_interval = get_settings().poll_interval

        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Combat log file not found: {file_path}")

        self.current_file = file_path
        self._following = True
        logger.info(f"Watching: {file_path.name}")

        line_number = 0
        pending = ""
        with open(file_path, "r", encoding=self.encoding, errors="replace") as f:
            if not from_start:
                f.seek(0, 2)

            while self._following:
                chunk = f.readline()
                if not chunk:
                    time.sleep(poll_interval)
                    continue

                # The game may flush half a line; wait for its newline
                pending += chunk
                if not pending.endswith("\n"):
                    continue

                line_number += 1
                line, pending = pending, ""
                yield from self._process_line(line, line_number)

        logger.info(f"Stopped watching {file_path.name}")

    def stop(self):
        """Stop a running `follow`."""
        self._following = False

    def get_stats(self) -> Dict[str, Any]:
        return {
            "file": str(self.current_file) if self.current_file else None,
            "events_processed": self.events_processed,
            "parse_errors": self.parse_errors,
            "tokenizer_stats": self.tokenizer.get_stats(),
        }

    def reset(self):
        """Reset parser state for a new file."""
        self.tokenizer = LineTokenizer()
        self.events_processed = 0
        self.parse_errors = 0
        self.current_file = None


def process(results: Iterable[ParseResult], handlers) -> int:
    """
    Forward every result to every handler.

    Returns:
        Number of results forwarded
    """
    count = 0
    for result in results:
        for handler in handlers:
            if isinstance(result, LineParseError):
                handler.handle_error(result)
            else:
                handler.handle_event(result)
        count += 1
    return count
