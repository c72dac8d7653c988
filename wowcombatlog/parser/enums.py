"""
Enumerated domain codes used throughout the combat log.

See https://warcraft.wiki.gg/wiki/COMBAT_LOG_EVENT for the meaning of each.
"""

from enum import Enum, IntEnum, IntFlag
from typing import FrozenSet, Optional, Type, TypeVar

from ..errors import InvalidNumber, UnknownEnumValue, UnknownPowerType
from .primitives import parse_hex, parse_num

E = TypeVar("E", bound=Enum)

ABSENT = "-1"


class SpellSchool(IntFlag):
    """Spell school bits. A spell may belong to several schools at once."""

    PHYSICAL = 1
    HOLY = 2
    FIRE = 4
    NATURE = 8
    FROST = 16
    SHADOW = 32
    ARCANE = 64

    @classmethod
    def parse(cls, field: str) -> Optional[FrozenSet["SpellSchool"]]:
        """
        Decode a school bitmask into the set of named schools.

        "-1" means no school information and returns None, which is distinct
        from an empty set (mask 0).
        """
        if field == ABSENT:
            return None

        mask = parse_hex(field) if field.startswith("0x") else parse_num(field)
        if not 0 <= mask <= 0xFF:
            raise InvalidNumber(field, "u8")

        return frozenset(school for school in cls if school & mask)


class PowerType(IntEnum):
    HEALTH = -2
    MANA = 0
    RAGE = 1
    FOCUS = 2
    ENERGY = 3
    COMBO_POINTS = 4
    RUNES = 5
    RUNIC_POWER = 6
    SOUL_SHARDS = 7
    LUNAR_POWER = 8
    HOLY_POWER = 9
    ALTERNATE = 10
    MAELSTROM = 11
    CHI = 12
    INSANITY = 13
    OBSOLETE = 14
    OBSOLETE2 = 15
    ARCANE_CHARGES = 16
    FURY = 17
    PAIN = 18
    ESSENCE = 19
    RUNE_BLOOD = 20
    RUNE_FROST = 21
    RUNE_UNHOLY = 22
    ALTERNATE_QUEST = 23
    ALTERNATE_ENCOUNTER = 24
    ALTERNATE_MOUNT = 25

    @classmethod
    def parse(cls, field: str) -> Optional["PowerType"]:
        """Decode a signed power code; "-1" means no power type."""
        if field == ABSENT:
            return None

        code = parse_num(field)
        if not -128 <= code <= 127:
            raise InvalidNumber(field, "i8")

        try:
            return cls(code)
        except ValueError:
            raise UnknownPowerType(code) from None


def lookup(enum_cls: Type[E], raw: str) -> E:
    """
    Case-insensitive name lookup.

    The log writes enum text in upper case ("DEBUFF", "ABSORB") while some
    fields use title case ("Falling"); both resolve to the same member.
    """
    wanted = raw.strip().upper()
    for member in enum_cls:
        if member.name.replace("_", "") == wanted.replace("_", ""):
            return member
    raise UnknownEnumValue(enum_cls.__name__, raw)


class _NamedEnum(Enum):
    @classmethod
    def parse(cls, field: str):
        return lookup(cls, field)


class MissType(_NamedEnum):
    ABSORB = "ABSORB"
    BLOCK = "BLOCK"
    DEFLECT = "DEFLECT"
    DODGE = "DODGE"
    EVADE = "EVADE"
    IMMUNE = "IMMUNE"
    MISS = "MISS"
    PARRY = "PARRY"
    REFLECT = "REFLECT"
    RESIST = "RESIST"


class AuraType(_NamedEnum):
    BUFF = "BUFF"
    DEBUFF = "DEBUFF"


class EnvironmentalType(_NamedEnum):
    DROWNING = "Drowning"
    FALLING = "Falling"
    FATIGUE = "Fatigue"
    FIRE = "Fire"
    LAVA = "Lava"
    SLIME = "Slime"


class CreatureType(_NamedEnum):
    """Unit kinds sharing the creature GUID layout."""

    CREATURE = "Creature"
    PET = "Pet"
    GAME_OBJECT = "GameObject"
    VEHICLE = "Vehicle"
    CORPSE = "Corpse"


class CastType(IntEnum):
    LOCAL = 2
    ACTIVE = 3
    PASSIVE = 4
    TICK_A = 13
    TICK_B = 16

    @classmethod
    def parse(cls, field: str) -> "CastType":
        code = parse_num(field)
        try:
            return cls(code)
        except ValueError:
            raise UnknownEnumValue(cls.__name__, field) from None
