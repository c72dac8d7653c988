"""
Prefix classification for standard combat events.

The prefix is the leading part of the event name (SWING, RANGE, SPELL, ...)
and decides how many fields after the two actor blocks belong to it.
"""

from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

from ..errors import TruncatedRecord, UnknownPrefix, require
from .components import SPELL_INFO_WIDTH, SpellInfo
from .enums import EnvironmentalType


class Prefix:
    """Base class for prefix shapes."""


@dataclass(frozen=True)
class SwingPrefix(Prefix):
    pass


@dataclass(frozen=True)
class RangePrefix(Prefix):
    spell: SpellInfo


@dataclass(frozen=True)
class SpellPrefix(Prefix):
    # None only for SPELL_ABSORBED lines caused by a melee swing
    spell: Optional[SpellInfo]


@dataclass(frozen=True)
class SpellPeriodicPrefix(Prefix):
    spell: SpellInfo


@dataclass(frozen=True)
class SpellBuildingPrefix(Prefix):
    spell: SpellInfo


@dataclass(frozen=True)
class EnvironmentalPrefix(Prefix):
    environmental_type: EnvironmentalType


def _swing(fields: Sequence[str]) -> Prefix:
    return SwingPrefix()


def _range(fields: Sequence[str]) -> Prefix:
    return RangePrefix(SpellInfo.parse(fields))


def _spell_periodic(fields: Sequence[str]) -> Prefix:
    return SpellPeriodicPrefix(SpellInfo.parse(fields))


def _spell_building(fields: Sequence[str]) -> Prefix:
    return SpellBuildingPrefix(SpellInfo.parse(fields))


def _spell(fields: Sequence[str]) -> Prefix:
    if len(fields) == 0:
        return SpellPrefix(None)
    if len(fields) == SPELL_INFO_WIDTH:
        return SpellPrefix(SpellInfo.parse(fields))
    raise TruncatedRecord("Spell prefix", SPELL_INFO_WIDTH, len(fields))


def _environmental(fields: Sequence[str]) -> Prefix:
    require(fields, 1, "Environmental prefix")
    return EnvironmentalPrefix(EnvironmentalType.parse(fields[0]))


class PrefixRule(NamedTuple):
    starts_with: str
    width: int
    decode: Callable[[Sequence[str]], Prefix]


# Evaluated top to bottom: SPELL_PERIODIC and SPELL_BUILDING must be tried
# before the generic SPELL rule.
PREFIX_RULES: Tuple[PrefixRule, ...] = (
    PrefixRule("SWING", 0, _swing),
    PrefixRule("RANGE", SPELL_INFO_WIDTH, _range),
    PrefixRule("SPELL_PERIODIC", SPELL_INFO_WIDTH, _spell_periodic),
    PrefixRule("SPELL_BUILDING", SPELL_INFO_WIDTH, _spell_building),
    PrefixRule("SPELL", SPELL_INFO_WIDTH, _spell),
    PrefixRule("ENVIRONMENTAL", 1, _environmental),
)


def match_prefix(event_type: str) -> PrefixRule:
    for rule in PREFIX_RULES:
        if event_type.startswith(rule.starts_with):
            return rule
    raise UnknownPrefix(event_type)


def prefix_width(event_type: str) -> int:
    """Number of fields the prefix of `event_type` consumes."""
    return match_prefix(event_type).width


def parse_prefix(event_type: str, fields: Sequence[str]) -> Prefix:
    """Decode the prefix from exactly the fields it consumes."""
    return match_prefix(event_type).decode(fields)
