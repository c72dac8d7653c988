"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from pathlib import Path

import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from wowcombatlog.config.settings import reload_settings
from wowcombatlog.parser.events import EventParser
from wowcombatlog.parser.tokenizer import LineTokenizer

from tests.samples import BAD_LINES, LINES

LOG_YEAR = 2024


@pytest.fixture(autouse=True)
def fresh_settings():
    """Undo any settings changes a test (or the CLI) made."""
    yield
    reload_settings()


@pytest.fixture
def event_parser():
    return EventParser(year=LOG_YEAR)


@pytest.fixture
def parse(event_parser):
    """Tokenize and parse one raw line."""
    tokenizer = LineTokenizer()

    def _parse(line):
        return event_parser.parse(tokenizer.split(line))

    return _parse


@pytest.fixture
def sample_log_lines():
    return [
        LINES["combat_log_version"],
        LINES["zone_change"],
        LINES["encounter_start"],
        LINES["spell_damage"],
        LINES["swing_damage"],
        LINES["spell_periodic_damage"],
        LINES["spell_periodic_heal"],
        LINES["unit_died"],
        LINES["encounter_end"],
    ]


@pytest.fixture
def sample_log_file(tmp_path, sample_log_lines):
    """A log with one unparseable line and one blank line in the middle."""
    lines = list(sample_log_lines)
    lines.insert(3, BAD_LINES["unknown_event"])
    lines.insert(5, "")

    path = tmp_path / "WoWCombatLog.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
