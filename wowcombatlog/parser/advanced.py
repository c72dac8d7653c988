"""
Advanced combat logging block.

With advanced logging enabled, certain events carry a 17-field snapshot of
the affected unit's state between the prefix and the suffix:

    0  infoGUID          6  armor            12 positionX
    1  ownerGUID         7  absorb           13 positionY
    2  currentHP         8  powerType        14 uiMapID
    3  maxHP             9  currentPower     15 facing
    4  attackPower       10 maxPower         16 level / item level
    5  spellPower        11 powerCost

Fields 8-11 hold one value per power pool, pipe-joined when a unit has more
than one pool (e.g. "3|4" for energy and combo points).
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..errors import MalformedPowerInfo, require
from .enums import PowerType
from .guid import Guid, parse_guid
from .primitives import parse_num

ADVANCED_WIDTH = 17


@dataclass(frozen=True)
class PowerInfo:
    power_type: Optional[PowerType]
    current_power: int
    max_power: int
    power_cost: int

    @classmethod
    def parse_all(cls, cells: Sequence[str]) -> Tuple["PowerInfo", ...]:
        """Zip the four pipe-joined cells into one record per power pool."""
        require(cells, 4, "PowerInfo")

        columns = [cell.split("|") for cell in cells[:4]]
        if len({len(column) for column in columns}) != 1:
            raise MalformedPowerInfo(cells[:4])

        return tuple(
            cls(
                power_type=PowerType.parse(power_type),
                current_power=parse_num(current),
                max_power=parse_num(maximum),
                power_cost=parse_num(cost),
            )
            for power_type, current, maximum, cost in zip(*columns)
        )


@dataclass(frozen=True)
class Position:
    x: float
    y: float
    facing: float


@dataclass(frozen=True)
class AdvancedParams:
    info_guid: Optional[Guid]
    owner_guid: Optional[Guid]
    current_hp: int
    max_hp: int
    attack_power: int
    spell_power: int
    armor: int
    absorb: int
    power_info: Tuple[PowerInfo, ...]
    position: Position
    ui_map_id: int
    level_or_ilvl: int

    @classmethod
    def parse(cls, fields: Sequence[str]) -> "AdvancedParams":
        require(fields, ADVANCED_WIDTH, "AdvancedParams")

        return cls(
            info_guid=parse_guid(fields[0]),
            owner_guid=parse_guid(fields[1]),
            current_hp=parse_num(fields[2]),
            max_hp=parse_num(fields[3]),
            attack_power=parse_num(fields[4]),
            spell_power=parse_num(fields[5]),
            armor=parse_num(fields[6]),
            absorb=parse_num(fields[7]),
            power_info=PowerInfo.parse_all(fields[8:12]),
            # facing sits after the map id, not next to x/y
            position=Position(
                x=parse_num(fields[12], float),
                y=parse_num(fields[13], float),
                facing=parse_num(fields[15], float),
            ),
            ui_map_id=parse_num(fields[14]),
            level_or_ilvl=parse_num(fields[16]),
        )
