"""
COMBATANT_INFO decoder.

A combatant record mixes flat scalars with nested sections whose commas
must not be treated as field separators:

    guid, faction, <21 stats>, spec_id,
    [(node, entry, rank), ...]                         class talents
    (pvp1, pvp2, pvp3, pvp4)                           pvp talents
    [(item, ilvl, (enchants), (bonus ids), (gems)), ...] equipped items
    [caster_guid, aura_id, caster_guid, aura_id, ...]  interesting auras
    honor_level, season, rating, tier

The fields are joined back into one string and scanned once with a
bracket-depth tracking splitter; nested sections are then decoded
recursively with the same splitter.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..errors import MalformedCombatantInfo, ParseError, require
from .guid import Guid, parse_guid
from .primitives import parse_num

_OPENERS = {"[": "]", "(": ")"}
_CLOSERS = {"]", ")"}

STAT_NAMES = (
    "strength",
    "agility",
    "stamina",
    "intelligence",
    "dodge",
    "parry",
    "block",
    "crit_melee",
    "crit_ranged",
    "crit_spell",
    "speed",
    "leech",
    "haste_melee",
    "haste_ranged",
    "haste_spell",
    "avoidance",
    "mastery",
    "versatility_damage_done",
    "versatility_healing_done",
    "versatility_damage_taken",
    "armor",
)

# guid, faction, stats, spec_id before the sections; pvp stats after
_LEADING_SCALARS = 2 + len(STAT_NAMES) + 1
_TRAILING_SCALARS = 4


def split_top_level(text: str) -> List[str]:
    """
    Split on commas that are not nested inside brackets or parentheses.

    Raises:
        MalformedCombatantInfo: on unbalanced or mismatched brackets
    """
    items = []
    current = []
    stack = []

    for char in text:
        if char in _OPENERS:
            stack.append(_OPENERS[char])
        elif char in _CLOSERS:
            if not stack or stack.pop() != char:
                raise MalformedCombatantInfo(f"unbalanced {char!r}")
        elif char == "," and not stack:
            items.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    if stack:
        raise MalformedCombatantInfo(f"unclosed section, expected {stack[-1]!r}")

    items.append("".join(current).strip())
    return items


def _inner(section: str) -> List[str]:
    """Items of a bracketed or parenthesized section; [] and () are empty."""
    body = section[1:-1].strip()
    return split_top_level(body) if body else []


def _is_list(item: str) -> bool:
    return item.startswith("[")


def _is_tuple(item: str) -> bool:
    return item.startswith("(")


@dataclass(frozen=True)
class CharacterStats:
    strength: int
    agility: int
    stamina: int
    intelligence: int
    dodge: int
    parry: int
    block: int
    crit_melee: int
    crit_ranged: int
    crit_spell: int
    speed: int
    leech: int
    haste_melee: int
    haste_ranged: int
    haste_spell: int
    avoidance: int
    mastery: int
    versatility_damage_done: int
    versatility_healing_done: int
    versatility_damage_taken: int
    armor: int

    @classmethod
    def parse(cls, fields: Sequence[str]) -> "CharacterStats":
        require(fields, len(STAT_NAMES), "CharacterStats")
        return cls(**{name: parse_num(field) for name, field in zip(STAT_NAMES, fields)})


@dataclass(frozen=True)
class PvPStats:
    honor_level: int
    season: int
    rating: int
    tier: int

    @classmethod
    def parse(cls, fields: Sequence[str]) -> "PvPStats":
        require(fields, _TRAILING_SCALARS, "PvPStats")
        honor_level, season, rating, tier = (parse_num(f) for f in fields[:4])
        return cls(honor_level=honor_level, season=season, rating=rating, tier=tier)


@dataclass(frozen=True)
class ClassTalent:
    node_id: int
    entry_id: int
    rank: int


@dataclass(frozen=True)
class EquippedItem:
    item_id: int
    ilvl: int
    enchant: Optional[int]
    bonus_ids: Tuple[int, ...]
    gem_ids: Tuple[int, ...]


@dataclass(frozen=True)
class InterestingAura:
    caster: Optional[Guid]
    aura_id: int


@dataclass(frozen=True)
class CombatantInfo:
    guid: Guid
    faction: int
    stats: CharacterStats
    spec_id: int
    class_talents: Tuple[ClassTalent, ...]
    pvp_talents: Tuple[int, int, int, int]
    equipped_items: Tuple[EquippedItem, ...]
    interesting_auras: Tuple[InterestingAura, ...]
    pvp_stats: PvPStats

    @property
    def average_item_level(self) -> float:
        levels = [item.ilvl for item in self.equipped_items if item.item_id and item.ilvl]
        return sum(levels) / len(levels) if levels else 0.0

    @classmethod
    def parse(cls, fields: Sequence[str]) -> "CombatantInfo":
        items = split_top_level(",".join(fields))

        lists = [item for item in items if _is_list(item)]
        tuples = [item for item in items if _is_tuple(item)]
        scalars = [item for item in items if not (_is_list(item) or _is_tuple(item))]

        if len(lists) != 3:
            raise MalformedCombatantInfo(
                f"expected talent, item and aura lists, found {len(lists)} bracketed lists"
            )
        if len(tuples) != 1:
            raise MalformedCombatantInfo(
                f"expected one pvp talent tuple, found {len(tuples)}"
            )
        if len(scalars) != _LEADING_SCALARS + _TRAILING_SCALARS:
            raise MalformedCombatantInfo(
                f"expected {_LEADING_SCALARS + _TRAILING_SCALARS} scalar fields, "
                f"found {len(scalars)}"
            )

        talents_raw, items_raw, auras_raw = lists
        guid = parse_guid(scalars[0])
        if guid is None:
            raise MalformedCombatantInfo("combatant GUID is empty")

        try:
            return cls(
                guid=guid,
                faction=parse_num(scalars[1]),
                stats=CharacterStats.parse(scalars[2 : 2 + len(STAT_NAMES)]),
                spec_id=parse_num(scalars[_LEADING_SCALARS - 1]),
                class_talents=_parse_talents(talents_raw),
                pvp_talents=_parse_pvp_talents(tuples[0]),
                equipped_items=tuple(_parse_item(item) for item in _inner(items_raw)),
                interesting_auras=_parse_auras(auras_raw),
                pvp_stats=PvPStats.parse(scalars[_LEADING_SCALARS:]),
            )
        except MalformedCombatantInfo:
            raise
        except ParseError as e:
            raise MalformedCombatantInfo(str(e)) from e


def _numbers(section: str) -> Tuple[int, ...]:
    return tuple(parse_num(value) for value in _inner(section))


def _parse_talents(section: str) -> Tuple[ClassTalent, ...]:
    talents = []
    for entry in _inner(section):
        values = _numbers(entry)
        if len(values) != 3:
            raise MalformedCombatantInfo(f"talent entry is not a triple: {entry}")
        talents.append(ClassTalent(*values))
    return tuple(talents)


def _parse_pvp_talents(section: str) -> Tuple[int, int, int, int]:
    values = _numbers(section)
    if len(values) != 4:
        raise MalformedCombatantInfo(f"pvp talents must be a 4-tuple: {section}")
    return values


def _parse_item(entry: str) -> EquippedItem:
    parts = _inner(entry)
    if len(parts) != 5:
        raise MalformedCombatantInfo(f"equipped item must have 5 parts: {entry}")

    item_id, ilvl, enchants, bonus_ids, gems = parts
    enchant_ids = _numbers(enchants)
    return EquippedItem(
        item_id=parse_num(item_id),
        ilvl=parse_num(ilvl),
        enchant=enchant_ids[0] if enchant_ids else None,
        bonus_ids=_numbers(bonus_ids),
        gem_ids=_numbers(gems),
    )


def _parse_auras(section: str) -> Tuple[InterestingAura, ...]:
    values = _inner(section)
    if len(values) % 2:
        raise MalformedCombatantInfo("interesting auras must be caster/aura pairs")

    return tuple(
        InterestingAura(caster=parse_guid(caster), aura_id=parse_num(aura_id))
        for caster, aura_id in zip(values[::2], values[1::2])
    )
