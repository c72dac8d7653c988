"""
Fixed-arity sub-records shared by many event shapes.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Sequence

from ..errors import require
from .enums import SpellSchool
from .guid import Guid, parse_guid
from .primitives import parse_hex, parse_num

ACTOR_WIDTH = 4
SPELL_INFO_WIDTH = 3


@dataclass(frozen=True)
class Actor:
    """A participant: GUID, display name and unit flags."""

    guid: Guid
    name: str
    flags: int
    raid_flags: Optional[int] = None

    @classmethod
    def parse(cls, fields: Sequence[str]) -> Optional["Actor"]:
        """
        Decode guid, name, flags, raid_flags.

        An empty GUID means there is no actor at all; the remaining three
        fields are not inspected in that case.
        """
        require(fields, ACTOR_WIDTH, "Actor")

        guid = parse_guid(fields[0])
        if guid is None:
            return None

        return cls(
            guid=guid,
            name=fields[1],
            flags=parse_hex(fields[2]),
            raid_flags=None if fields[3] == "nil" else parse_hex(fields[3]),
        )

    @property
    def is_player(self) -> bool:
        return self.guid.raw.startswith("Player-")


@dataclass(frozen=True)
class SpellInfo:
    id: int
    name: str
    # None when the log wrote -1, otherwise the (possibly empty) school set
    school: Optional[FrozenSet[SpellSchool]]

    @classmethod
    def parse(cls, fields: Sequence[str]) -> "SpellInfo":
        require(fields, SPELL_INFO_WIDTH, "SpellInfo")
        return cls(
            id=parse_num(fields[0]),
            name=fields[1],
            school=SpellSchool.parse(fields[2]),
        )
