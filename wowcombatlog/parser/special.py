"""
Special events: records whose whole layout is irregular and bypasses the
standard actor/prefix/advanced/suffix pipeline.
"""

from dataclasses import dataclass
from typing import Callable, Dict, NamedTuple, Optional, Sequence, Tuple

from ..errors import ParseError, require
from .combatant import CombatantInfo
from .components import Actor
from .guid import Guid, parse_guid
from .primitives import parse_bool, parse_num


class Special:
    """Base class for special event shapes."""


@dataclass(frozen=True)
class EnchantApplied(Special):
    source: Optional[Actor]
    target: Optional[Actor]
    spell_name: str
    item_id: int
    item_name: str


@dataclass(frozen=True)
class EnchantRemoved(EnchantApplied):
    pass


@dataclass(frozen=True)
class PartyKill(Special):
    source: Optional[Actor]
    target: Optional[Actor]
    unconscious_on_death: bool


@dataclass(frozen=True)
class UnitDied(PartyKill):
    pass


@dataclass(frozen=True)
class UnitDestroyed(PartyKill):
    pass


@dataclass(frozen=True)
class UnitDissipates(PartyKill):
    pass


@dataclass(frozen=True)
class CombatLogInfo(Special):
    log_version: int
    advanced_log_enabled: bool
    build_version: str
    project_id: int


@dataclass(frozen=True)
class ZoneChange(Special):
    instance_id: int
    zone_name: str
    difficulty_id: int


@dataclass(frozen=True)
class MapChange(Special):
    ui_map_id: int
    ui_map_name: str
    x0: float
    x1: float
    y0: float
    y1: float


@dataclass(frozen=True)
class EncounterStart(Special):
    encounter_id: int
    encounter_name: str
    difficulty_id: int
    group_size: int
    instance_id: int


@dataclass(frozen=True)
class EncounterEnd(Special):
    encounter_id: int
    encounter_name: str
    difficulty_id: int
    group_size: int
    success: bool
    fight_time: int


@dataclass(frozen=True)
class WorldMarkerPlaced(Special):
    instance_id: int
    marker: int
    x: float
    y: float


@dataclass(frozen=True)
class WorldMarkerRemoved(Special):
    marker: int


@dataclass(frozen=True)
class EmoteStandard(Special):
    actor: Optional[Actor]
    text: str


@dataclass(frozen=True)
class EmoteEnvironmental(Special):
    source_guid: Optional[Guid]
    source_name: str
    target_guid: Optional[Guid]
    target_name: str
    text: str


@dataclass(frozen=True)
class CombatantInfoEvent(Special):
    info: CombatantInfo


@dataclass(frozen=True)
class ChallengeModeStart(Special):
    zone_name: str
    instance_id: int
    challenge_mode_id: int
    keystone_level: int
    affix_ids: Tuple[int, ...]


@dataclass(frozen=True)
class ChallengeModeEnd(Special):
    instance_id: int
    success: bool
    keystone_level: int
    total_time: int


def _enchant(shape):
    def decode(fields: Sequence[str]) -> Special:
        return shape(
            source=Actor.parse(fields[0:4]),
            target=Actor.parse(fields[4:8]),
            spell_name=fields[8],
            item_id=parse_num(fields[9]),
            item_name=fields[10],
        )

    return decode


def _death(shape):
    def decode(fields: Sequence[str]) -> Special:
        return shape(
            source=Actor.parse(fields[0:4]),
            target=Actor.parse(fields[4:8]),
            unconscious_on_death=parse_bool(fields[8]),
        )

    return decode


def _combat_log_version(fields: Sequence[str]) -> Special:
    # 20,ADVANCED_LOG_ENABLED,1,BUILD_VERSION,10.2.6,PROJECT_ID,1
    return CombatLogInfo(
        log_version=parse_num(fields[0]),
        advanced_log_enabled=parse_bool(fields[2]),
        build_version=fields[4],
        project_id=parse_num(fields[6]),
    )


def _zone_change(fields: Sequence[str]) -> Special:
    return ZoneChange(
        instance_id=parse_num(fields[0]),
        zone_name=fields[1],
        difficulty_id=parse_num(fields[2]),
    )


def _map_change(fields: Sequence[str]) -> Special:
    return MapChange(
        ui_map_id=parse_num(fields[0]),
        ui_map_name=fields[1],
        x0=parse_num(fields[2], float),
        x1=parse_num(fields[3], float),
        y0=parse_num(fields[4], float),
        y1=parse_num(fields[5], float),
    )


def _encounter_start(fields: Sequence[str]) -> Special:
    return EncounterStart(
        encounter_id=parse_num(fields[0]),
        encounter_name=fields[1],
        difficulty_id=parse_num(fields[2]),
        group_size=parse_num(fields[3]),
        instance_id=parse_num(fields[4]),
    )


def _encounter_end(fields: Sequence[str]) -> Special:
    return EncounterEnd(
        encounter_id=parse_num(fields[0]),
        encounter_name=fields[1],
        difficulty_id=parse_num(fields[2]),
        group_size=parse_num(fields[3]),
        success=parse_bool(fields[4]),
        fight_time=parse_num(fields[5]),
    )


def _world_marker_placed(fields: Sequence[str]) -> Special:
    return WorldMarkerPlaced(
        instance_id=parse_num(fields[0]),
        marker=parse_num(fields[1]),
        x=parse_num(fields[2], float),
        y=parse_num(fields[3], float),
    )


def _world_marker_removed(fields: Sequence[str]) -> Special:
    return WorldMarkerRemoved(parse_num(fields[0]))


def _emote(fields: Sequence[str]) -> Special:
    # No tag tells the two layouts apart: a GUID in the third field means
    # source guid/name followed by target guid/name.
    try:
        target_guid = parse_guid(fields[2])
    except ParseError:
        return EmoteStandard(actor=Actor.parse(fields[0:4]), text=fields[4])

    return EmoteEnvironmental(
        source_guid=parse_guid(fields[0]),
        source_name=fields[1],
        target_guid=target_guid,
        target_name=fields[3],
        text=fields[4],
    )


def _combatant_info(fields: Sequence[str]) -> Special:
    return CombatantInfoEvent(CombatantInfo.parse(fields))


def _challenge_mode_start(fields: Sequence[str]) -> Special:
    affixes = ",".join(fields[4:]).strip()
    if affixes.startswith("[") and affixes.endswith("]"):
        affixes = affixes[1:-1]

    return ChallengeModeStart(
        zone_name=fields[0],
        instance_id=parse_num(fields[1]),
        challenge_mode_id=parse_num(fields[2]),
        keystone_level=parse_num(fields[3]),
        affix_ids=tuple(parse_num(a.strip()) for a in affixes.split(",") if a.strip()),
    )


def _challenge_mode_end(fields: Sequence[str]) -> Special:
    return ChallengeModeEnd(
        instance_id=parse_num(fields[0]),
        success=parse_bool(fields[1]),
        keystone_level=parse_num(fields[2]),
        total_time=parse_num(fields[3]),
    )


class SpecialRule(NamedTuple):
    min_fields: int
    decode: Callable[[Sequence[str]], Special]


SPECIAL_RULES: Dict[str, SpecialRule] = {
    "ENCHANT_APPLIED": SpecialRule(11, _enchant(EnchantApplied)),
    "ENCHANT_REMOVED": SpecialRule(11, _enchant(EnchantRemoved)),
    "PARTY_KILL": SpecialRule(9, _death(PartyKill)),
    "UNIT_DIED": SpecialRule(9, _death(UnitDied)),
    "UNIT_DESTROYED": SpecialRule(9, _death(UnitDestroyed)),
    "UNIT_DISSIPATES": SpecialRule(9, _death(UnitDissipates)),
    "COMBAT_LOG_VERSION": SpecialRule(7, _combat_log_version),
    "ZONE_CHANGE": SpecialRule(3, _zone_change),
    "MAP_CHANGE": SpecialRule(6, _map_change),
    "ENCOUNTER_START": SpecialRule(5, _encounter_start),
    "ENCOUNTER_END": SpecialRule(6, _encounter_end),
    "WORLD_MARKER_PLACED": SpecialRule(4, _world_marker_placed),
    "WORLD_MARKER_REMOVED": SpecialRule(1, _world_marker_removed),
    "EMOTE": SpecialRule(5, _emote),
    "COMBATANT_INFO": SpecialRule(0, _combatant_info),
    "CHALLENGE_MODE_START": SpecialRule(5, _challenge_mode_start),
    "CHALLENGE_MODE_END": SpecialRule(4, _challenge_mode_end),
}


def parse_special(event_type: str, fields: Sequence[str]) -> Optional[Special]:
    """
    Decode a special event.

    Returns:
        The decoded record, or None when `event_type` is not a special event
        and should go through standard dispatch instead
    """
    rule = SPECIAL_RULES.get(event_type)
    if rule is None:
        return None

    require(fields, rule.min_fields, event_type)
    return rule.decode(fields)
