"""
Decoder for dash-delimited actor identifiers (GUIDs).

A GUID's first dash-separated token names its kind; the remaining parts are
read positionally according to that kind. The literal sixteen-zero string is
the log's "nobody" value and decodes to None.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..errors import UnknownGuidKind, require
from .enums import CastType, CreatureType
from .primitives import parse_hex, parse_num

EMPTY_GUID = "0000000000000000"


@dataclass(frozen=True)
class Guid:
    """Base class for every GUID kind."""

    raw: str


@dataclass(frozen=True)
class PlayerGuid(Guid):
    server_id: int
    player_uid: str


@dataclass(frozen=True)
class CreatureGuid(Guid):
    """Creatures, pets, game objects, vehicles and corpses."""

    unit_type: CreatureType
    server_id: int
    instance_id: int
    zone_uid: int
    id: int
    spawn_uid: str


@dataclass(frozen=True)
class BattlePetGuid(Guid):
    id: int


@dataclass(frozen=True)
class BNetAccountGuid(Guid):
    account_id: int


@dataclass(frozen=True)
class CastGuid(Guid):
    cast_type: CastType
    server_id: int
    instance_id: int
    zone_uid: int
    spell_id: int
    cast_uid: str


@dataclass(frozen=True)
class ClientActorGuid(Guid):
    x: int
    y: int
    z: int


@dataclass(frozen=True)
class FollowerGuid(Guid):
    value: str


@dataclass(frozen=True)
class ItemGuid(Guid):
    server_id: int
    spawn_uid: str


@dataclass(frozen=True)
class VignetteGuid(Guid):
    server_id: int
    instance_id: int
    zone_uid: int
    spawn_uid: str


def _player(raw: str, parts: List[str]) -> Guid:
    require(parts, 3, "Player GUID")
    return PlayerGuid(raw=raw, server_id=parse_num(parts[1]), player_uid=parts[2])


def _creature(raw: str, parts: List[str]) -> Guid:
    require(parts, 7, f"{parts[0]} GUID")
    return CreatureGuid(
        raw=raw,
        unit_type=CreatureType.parse(parts[0]),
        server_id=parse_num(parts[2]),
        instance_id=parse_num(parts[3]),
        zone_uid=parse_num(parts[4]),
        id=parse_num(parts[5]),
        spawn_uid=parts[6],
    )


def _battle_pet(raw: str, parts: List[str]) -> Guid:
    require(parts, 3, "BattlePet GUID")
    return BattlePetGuid(raw=raw, id=parse_hex(parts[2]))


def _bnet_account(raw: str, parts: List[str]) -> Guid:
    require(parts, 3, "BNetAccount GUID")
    return BNetAccountGuid(raw=raw, account_id=parse_hex(parts[2]))


def _cast(raw: str, parts: List[str]) -> Guid:
    require(parts, 7, "Cast GUID")
    return CastGuid(
        raw=raw,
        cast_type=CastType.parse(parts[1]),
        server_id=parse_num(parts[2]),
        instance_id=parse_num(parts[3]),
        zone_uid=parse_num(parts[4]),
        spell_id=parse_num(parts[5]),
        cast_uid=parts[6],
    )


def _client_actor(raw: str, parts: List[str]) -> Guid:
    require(parts, 4, "ClientActor GUID")
    return ClientActorGuid(
        raw=raw, x=parse_num(parts[1]), y=parse_num(parts[2]), z=parse_num(parts[3])
    )


def _follower(raw: str, parts: List[str]) -> Guid:
    require(parts, 2, "Follower GUID")
    return FollowerGuid(raw=raw, value="-".join(parts[1:]))


def _item(raw: str, parts: List[str]) -> Guid:
    require(parts, 4, "Item GUID")
    return ItemGuid(raw=raw, server_id=parse_num(parts[1]), spawn_uid=parts[3])


def _vignette(raw: str, parts: List[str]) -> Guid:
    require(parts, 7, "Vignette GUID")
    return VignetteGuid(
        raw=raw,
        server_id=parse_num(parts[2]),
        instance_id=parse_num(parts[3]),
        zone_uid=parse_num(parts[4]),
        spawn_uid=parts[6],
    )


_DECODERS: Dict[str, Callable[[str, List[str]], Guid]] = {
    "Player": _player,
    "BattlePet": _battle_pet,
    "BNetAccount": _bnet_account,
    "Cast": _cast,
    "ClientActor": _client_actor,
    "Follower": _follower,
    "Item": _item,
    "Vignette": _vignette,
}
_DECODERS.update({unit.value: _creature for unit in CreatureType})


def parse_guid(field: str) -> Optional[Guid]:
    """
    Decode a GUID field.

    Returns:
        The decoded GUID, or None for the empty GUID

    Raises:
        UnknownGuidKind: if the leading token is not a known GUID kind
    """
    if field == EMPTY_GUID:
        return None

    parts = field.split("-")
    decoder = _DECODERS.get(parts[0])
    if decoder is None:
        raise UnknownGuidKind(parts[0])

    return decoder(field, parts)
