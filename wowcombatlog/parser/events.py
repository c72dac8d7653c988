"""
Event model and the top-level line assembler.

A line arrives already split into fields. The first field holds the
timestamp and the event name separated by two spaces; everything after it
is read positionally, with the layout chosen by the event name:

    special events   name -> bespoke record (special.py)
    standard events  source actor, target actor, prefix,
                     [advanced block], suffix
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Optional, Sequence, Union

from ..errors import (
    DateParseFailure,
    FieldSplitFailure,
    LineParseError,
    ParseError,
    TruncatedRecord,
    require,
)
from .advanced import ADVANCED_WIDTH, AdvancedParams
from .components import ACTOR_WIDTH, Actor
from .guid import Guid, parse_guid
from .prefixes import Prefix, parse_prefix, prefix_width
from .primitives import is_number
from .special import Special, parse_special
from .suffixes import SUPPORT_TAG, Suffix, has_advanced_params, parse_suffix

VERSION_SENTINEL = "COMBAT_LOG_VERSION"

# Events that reuse another event's layout. The original name is kept on
# the emitted payload; only dispatch uses the mapped one.
RENAMED_EVENTS = MappingProxyType(
    {
        "DAMAGE_SPLIT": "SPELL_DAMAGE",
        "DAMAGE_SHIELD": "SPELL_DAMAGE",
        "DAMAGE_SHIELD_MISSED": "SPELL_MISSED",
        "SWING_DAMAGE_LANDED_SUPPORT": "SPELL_DAMAGE_SUPPORT",
    }
)

# Advanced block comes before the one-field environmental prefix
ADVANCED_BEFORE_PREFIX = frozenset({"ENVIRONMENTAL_DAMAGE"})

logger = logging.getLogger(__name__)

# The spell prefix is missing when a melee swing was absorbed
OPTIONAL_SPELL_PREFIX = frozenset({"SPELL_ABSORBED", "SPELL_ABSORBED_SUPPORT"})

# "4/6 14:09:44.867" or "9/18/2025 20:23:42.758-4"
TIMESTAMP_PATTERN = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})(?:/(?P<year>\d{4}))?\s+"
    r"(?P<time>\d{1,2}:\d{2}:\d{2}\.\d{3})(?:[-+]\d+)?$"
)


@dataclass(frozen=True)
class SpecialPayload:
    name: str
    detail: Special


@dataclass(frozen=True)
class StandardPayload:
    name: str
    source: Optional[Actor]
    target: Optional[Actor]
    prefix: Prefix
    advanced: Optional[AdvancedParams]
    suffix: Suffix
    # Set on *_SUPPORT events: the player whose buff contributed
    supporter: Optional[Guid] = None


EventPayload = Union[SpecialPayload, StandardPayload]


@dataclass(frozen=True)
class Event:
    timestamp: datetime
    payload: EventPayload

    @property
    def name(self) -> str:
        return self.payload.name

    @property
    def is_special(self) -> bool:
        return isinstance(self.payload, SpecialPayload)


def parse_timestamp(raw: str, year: int) -> datetime:
    """
    Parse the log's timestamp.

    Older logs omit the year; `year` is used for those. Timezone offsets on
    newer logs are discarded.
    """
    match = TIMESTAMP_PATTERN.match(raw.strip())
    if not match:
        raise DateParseFailure(raw)

    parts = match.groupdict()
    stamp = f"{parts['year'] or year}/{parts['month']}/{parts['day']} {parts['time']}"
    try:
        return datetime.strptime(stamp, "%Y/%m/%d %H:%M:%S.%f")
    except ValueError:
        raise DateParseFailure(raw) from None


def split_head(head: str):
    """Split "date  EVENT_NAME" on the first double space."""
    date, sep, event_type = head.partition("  ")
    if not sep or not event_type:
        raise FieldSplitFailure(head)
    return date, event_type.strip()


class EventParser:
    """
    Parses one tokenized line into an Event.

    Holds no per-line state; the same parser may be shared between threads.
    The only mutable attribute is the one-time missing-year warning flag.
    """

    def __init__(self, year: Optional[int] = None):
        """
        Args:
            year: Year for timestamps that carry none. Defaults to the
                  configured year (see config.settings), then to the
                  current year with a warning on the first such timestamp.
        """
        if year is None:
            from ..config.settings import get_settings

            year = get_settings().year
        self.year_assumed = year is None
        self.year = datetime.now().year if year is None else year
        self._warned_year = False

    def parse(self, fields: Sequence[str]) -> Event:
        """
        Parse a field list.

        Raises:
            LineParseError: wrapping the underlying ParseError
        """
        try:
            return self._parse(fields)
        except LineParseError:
            raise
        except ParseError as e:
            raise LineParseError(fields, e) from e

    def _parse(self, fields: Sequence[str]) -> Event:
        if not fields:
            raise FieldSplitFailure("")

        if fields[0] == VERSION_SENTINEL:
            timestamp = datetime(self.year, 1, 1)
            event_type = VERSION_SENTINEL
        else:
            date, event_type = split_head(fields[0])
            timestamp = parse_timestamp(date, self.year)
            if self.year_assumed and not self._warned_year and date.count("/") < 2:
                self._warned_year = True
                logger.warning(
                    f"Log timestamps carry no year, assuming {self.year}; "
                    "set --year or COMBATLOG_YEAR if the log is from another year"
                )

        return Event(timestamp=timestamp, payload=parse_payload(event_type, fields[1:]))


def parse_payload(event_type: str, fields: Sequence[str]) -> EventPayload:
    special = parse_special(event_type, fields)
    if special is not None:
        return SpecialPayload(name=event_type, detail=special)

    return parse_standard(event_type, fields)


def parse_standard(name: str, fields: Sequence[str]) -> StandardPayload:
    """Decode actors, prefix, optional advanced block and suffix in order."""
    event_type = RENAMED_EVENTS.get(name, name)

    require(fields, 2 * ACTOR_WIDTH, name)
    source = Actor.parse(fields[0:ACTOR_WIDTH])
    target = Actor.parse(fields[ACTOR_WIDTH : 2 * ACTOR_WIDTH])
    offset = 2 * ACTOR_WIDTH

    supporter = None
    if event_type.endswith(SUPPORT_TAG):
        require(fields, offset + 1, name)
        supporter = parse_guid(fields[-1])
        fields = fields[:-1]

    advanced = None
    if event_type in ADVANCED_BEFORE_PREFIX:
        advanced, offset = _parse_advanced(fields, offset, name)
        width = prefix_width(event_type)
        prefix, offset = _parse_prefix(event_type, fields, offset, width, name)
    else:
        width = prefix_width(event_type)
        if event_type in OPTIONAL_SPELL_PREFIX and not _has_spell_id(fields, offset):
            width = 0
        prefix, offset = _parse_prefix(event_type, fields, offset, width, name)
        if has_advanced_params(event_type):
            advanced, offset = _parse_advanced(fields, offset, name)

    suffix = parse_suffix(event_type, fields[offset:])

    return StandardPayload(
        name=name,
        source=source,
        target=target,
        prefix=prefix,
        advanced=advanced,
        suffix=suffix,
        supporter=supporter,
    )


def _has_spell_id(fields: Sequence[str], offset: int) -> bool:
    return offset < len(fields) and is_number(fields[offset])


def _parse_prefix(event_type, fields, offset, width, name):
    if len(fields) < offset + width:
        raise TruncatedRecord(f"{name} prefix", offset + width, len(fields))
    return parse_prefix(event_type, fields[offset : offset + width]), offset + width


def _parse_advanced(fields, offset, name):
    if len(fields) < offset + ADVANCED_WIDTH:
        raise TruncatedRecord(f"{name} advanced block", offset + ADVANCED_WIDTH, len(fields))
    return AdvancedParams.parse(fields[offset : offset + ADVANCED_WIDTH]), offset + ADVANCED_WIDTH
