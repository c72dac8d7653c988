"""
Combat log parser module for processing WoW combat log files.
"""

from .tokenizer import LineTokenizer
from .events import Event, EventParser, SpecialPayload, StandardPayload
from .parser import CombatLogParser, process

__all__ = [
    "LineTokenizer",
    "Event",
    "EventParser",
    "SpecialPayload",
    "StandardPayload",
    "CombatLogParser",
    "process",
]
