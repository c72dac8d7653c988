"""
Suffix classification and decoding for standard combat events.

The suffix is the trailing part of the event name (DAMAGE, HEAL,
AURA_APPLIED, ...) and fixes the shape of the fields that follow the prefix
and the optional advanced block. SUFFIX_RULES is the single table both
`parse_suffix` and `has_advanced_params` read from.
"""

from dataclasses import dataclass
from typing import Callable, FrozenSet, NamedTuple, Optional, Sequence, Tuple

from ..errors import MissingActor, UnknownSuffix, require
from .components import Actor, SpellInfo
from .enums import AuraType, MissType, PowerType, SpellSchool
from .primitives import parse_bool, parse_num

SUPPORT_TAG = "_SUPPORT"


class Suffix:
    """Base class for suffix shapes."""


@dataclass(frozen=True)
class Damage(Suffix):
    amount: int
    base_amount: int
    overkill: Optional[int]
    school: Optional[FrozenSet[SpellSchool]]
    resisted: int
    blocked: int
    absorbed: int
    critical: bool
    glancing: bool
    crushing: bool


@dataclass(frozen=True)
class DamageLanded(Damage):
    pass


@dataclass(frozen=True)
class Missed(Suffix):
    miss_type: MissType
    offhand: bool
    amount_missed: int = 0
    base_amount: int = 0
    critical: bool = False


@dataclass(frozen=True)
class Heal(Suffix):
    amount: int
    base_amount: int
    overhealing: int
    absorbed: int
    critical: bool

    @property
    def effective_healing(self) -> int:
        return max(0, self.amount - self.overhealing)


@dataclass(frozen=True)
class HealAbsorbed(Suffix):
    actor: Optional[Actor]
    spell: SpellInfo
    absorbed_amount: int
    total_amount: int


@dataclass(frozen=True)
class Absorbed(Suffix):
    caster: Actor
    spell: SpellInfo
    absorbed_amount: int
    base_amount: int
    critical: bool


@dataclass(frozen=True)
class Energize(Suffix):
    amount: float
    over_energize: float
    power_type: Optional[PowerType]
    max_power: int


@dataclass(frozen=True)
class Drain(Suffix):
    amount: int
    power_type: Optional[PowerType]
    extra_amount: int
    max_power: int


@dataclass(frozen=True)
class Leech(Suffix):
    amount: int
    power_type: Optional[PowerType]
    extra_amount: int


@dataclass(frozen=True)
class Interrupt(Suffix):
    spell: SpellInfo


@dataclass(frozen=True)
class Dispel(Suffix):
    spell: SpellInfo
    aura_type: AuraType


@dataclass(frozen=True)
class DispelFailed(Suffix):
    spell: SpellInfo


@dataclass(frozen=True)
class Stolen(Suffix):
    spell: SpellInfo
    aura_type: AuraType


@dataclass(frozen=True)
class ExtraAttacks(Suffix):
    amount: int


@dataclass(frozen=True)
class AuraApplied(Suffix):
    aura_type: AuraType
    amount: Optional[int] = None


@dataclass(frozen=True)
class AuraRemoved(Suffix):
    aura_type: AuraType
    amount: Optional[int] = None


@dataclass(frozen=True)
class AuraAppliedDose(Suffix):
    aura_type: AuraType
    amount: int


@dataclass(frozen=True)
class AuraRemovedDose(Suffix):
    aura_type: AuraType
    amount: int


@dataclass(frozen=True)
class AuraRefresh(Suffix):
    aura_type: AuraType


@dataclass(frozen=True)
class AuraBroken(Suffix):
    aura_type: AuraType


@dataclass(frozen=True)
class AuraBrokenSpell(Suffix):
    spell: SpellInfo
    aura_type: AuraType


@dataclass(frozen=True)
class CastStart(Suffix):
    pass


@dataclass(frozen=True)
class CastSuccess(Suffix):
    pass


@dataclass(frozen=True)
class CastFailed(Suffix):
    failed_type: str


@dataclass(frozen=True)
class Instakill(Suffix):
    unconscious_on_death: bool


@dataclass(frozen=True)
class DurabilityDamage(Suffix):
    pass


@dataclass(frozen=True)
class DurabilityDamageAll(Suffix):
    pass


@dataclass(frozen=True)
class Create(Suffix):
    pass


@dataclass(frozen=True)
class Summon(Suffix):
    pass


@dataclass(frozen=True)
class Resurrect(Suffix):
    pass


@dataclass(frozen=True)
class EmpowerStart(Suffix):
    pass


@dataclass(frozen=True)
class EmpowerEnd(Suffix):
    empowered_rank: int


@dataclass(frozen=True)
class EmpowerInterrupt(Suffix):
    empowered_rank: int


def _overkill(field: str) -> Optional[int]:
    return None if field == "-1" else parse_num(field)


def _damage(fields: Sequence[str], shape=Damage) -> Suffix:
    return shape(
        amount=parse_num(fields[0]),
        base_amount=parse_num(fields[1]),
        overkill=_overkill(fields[2]),
        school=SpellSchool.parse(fields[3]),
        resisted=parse_num(fields[4]),
        blocked=parse_num(fields[5]),
        # negative when a shield absorbed more than the hit
        absorbed=parse_num(fields[6]),
        critical=parse_bool(fields[7]),
        glancing=parse_bool(fields[8]),
        crushing=parse_bool(fields[9]),
    )


def _damage_landed(fields: Sequence[str]) -> Suffix:
    return _damage(fields, DamageLanded)


def _missed(fields: Sequence[str]) -> Suffix:
    miss_type = MissType.parse(fields[0])
    offhand = parse_bool(fields[1])

    # Only absorbed misses report how much would have landed
    if miss_type is MissType.ABSORB:
        require(fields, 5, "MISSED (ABSORB)")
        return Missed(
            miss_type=miss_type,
            offhand=offhand,
            amount_missed=parse_num(fields[2]),
            base_amount=parse_num(fields[3]),
            critical=parse_bool(fields[4]),
        )

    return Missed(miss_type=miss_type, offhand=offhand)


def _heal(fields: Sequence[str]) -> Suffix:
    return Heal(
        amount=parse_num(fields[0]),
        base_amount=parse_num(fields[1]),
        overhealing=parse_num(fields[2]),
        absorbed=parse_num(fields[3]),
        critical=parse_bool(fields[4]),
    )


def _heal_absorbed(fields: Sequence[str]) -> Suffix:
    return HealAbsorbed(
        actor=Actor.parse(fields[0:4]),
        spell=SpellInfo.parse(fields[4:7]),
        absorbed_amount=parse_num(fields[7]),
        total_amount=parse_num(fields[8]),
    )


def _absorbed(fields: Sequence[str]) -> Suffix:
    caster = Actor.parse(fields[0:4])
    if caster is None:
        raise MissingActor("ABSORBED caster")

    return Absorbed(
        caster=caster,
        spell=SpellInfo.parse(fields[4:7]),
        absorbed_amount=parse_num(fields[7]),
        base_amount=parse_num(fields[8]),
        critical=parse_bool(fields[9]),
    )


def _energize(fields: Sequence[str]) -> Suffix:
    return Energize(
        amount=parse_num(fields[0], float),
        over_energize=parse_num(fields[1], float),
        power_type=PowerType.parse(fields[2]),
        max_power=parse_num(fields[3]),
    )


def _drain(fields: Sequence[str]) -> Suffix:
    return Drain(
        amount=parse_num(fields[0]),
        power_type=PowerType.parse(fields[1]),
        extra_amount=parse_num(fields[2]),
        max_power=parse_num(fields[3]),
    )


def _leech(fields: Sequence[str]) -> Suffix:
    return Leech(
        amount=parse_num(fields[0]),
        power_type=PowerType.parse(fields[1]),
        extra_amount=parse_num(fields[2]),
    )


def _interrupt(fields: Sequence[str]) -> Suffix:
    return Interrupt(SpellInfo.parse(fields[0:3]))


def _dispel(fields: Sequence[str]) -> Suffix:
    return Dispel(spell=SpellInfo.parse(fields[0:3]), aura_type=AuraType.parse(fields[3]))


def _dispel_failed(fields: Sequence[str]) -> Suffix:
    return DispelFailed(SpellInfo.parse(fields[0:3]))


def _stolen(fields: Sequence[str]) -> Suffix:
    return Stolen(spell=SpellInfo.parse(fields[0:3]), aura_type=AuraType.parse(fields[3]))


def _extra_attacks(fields: Sequence[str]) -> Suffix:
    return ExtraAttacks(parse_num(fields[0]))


def _optional_amount(fields: Sequence[str]) -> Optional[int]:
    return parse_num(fields[1]) if len(fields) >= 2 else None


def _aura_applied(fields: Sequence[str]) -> Suffix:
    return AuraApplied(aura_type=AuraType.parse(fields[0]), amount=_optional_amount(fields))


def _aura_removed(fields: Sequence[str]) -> Suffix:
    return AuraRemoved(aura_type=AuraType.parse(fields[0]), amount=_optional_amount(fields))


def _aura_applied_dose(fields: Sequence[str]) -> Suffix:
    return AuraAppliedDose(aura_type=AuraType.parse(fields[0]), amount=parse_num(fields[1]))


def _aura_removed_dose(fields: Sequence[str]) -> Suffix:
    return AuraRemovedDose(aura_type=AuraType.parse(fields[0]), amount=parse_num(fields[1]))


def _aura_refresh(fields: Sequence[str]) -> Suffix:
    return AuraRefresh(AuraType.parse(fields[0]))


def _aura_broken(fields: Sequence[str]) -> Suffix:
    return AuraBroken(AuraType.parse(fields[0]))


def _aura_broken_spell(fields: Sequence[str]) -> Suffix:
    return AuraBrokenSpell(
        spell=SpellInfo.parse(fields[0:3]), aura_type=AuraType.parse(fields[3])
    )


def _cast_failed(fields: Sequence[str]) -> Suffix:
    return CastFailed(fields[0])


def _instakill(fields: Sequence[str]) -> Suffix:
    return Instakill(parse_bool(fields[0]))


def _empower_end(fields: Sequence[str]) -> Suffix:
    return EmpowerEnd(parse_num(fields[0]))


def _empower_interrupt(fields: Sequence[str]) -> Suffix:
    return EmpowerInterrupt(parse_num(fields[0]))


def _unit(shape: type) -> Callable[[Sequence[str]], Suffix]:
    def decode(fields: Sequence[str]) -> Suffix:
        return shape()

    return decode


class SuffixRule(NamedTuple):
    ends_with: str
    min_fields: int
    advanced: bool
    decode: Callable[[Sequence[str]], Suffix]


# Evaluated top to bottom. A suffix that is the tail of another one
# (DAMAGE / DURABILITY_DAMAGE, ABSORBED / HEAL_ABSORBED, ...) comes after it.
SUFFIX_RULES: Tuple[SuffixRule, ...] = (
    SuffixRule("DURABILITY_DAMAGE_ALL", 0, False, _unit(DurabilityDamageAll)),
    SuffixRule("DURABILITY_DAMAGE", 0, False, _unit(DurabilityDamage)),
    SuffixRule("DAMAGE_LANDED", 10, True, _damage_landed),
    SuffixRule("DAMAGE", 10, True, _damage),
    SuffixRule("MISSED", 2, False, _missed),
    SuffixRule("HEAL_ABSORBED", 9, False, _heal_absorbed),
    SuffixRule("HEAL", 5, True, _heal),
    SuffixRule("ABSORBED", 10, False, _absorbed),
    SuffixRule("ENERGIZE", 4, True, _energize),
    SuffixRule("DRAIN", 4, True, _drain),
    SuffixRule("LEECH", 3, True, _leech),
    SuffixRule("EMPOWER_INTERRUPT", 1, False, _empower_interrupt),
    SuffixRule("INTERRUPT", 3, False, _interrupt),
    SuffixRule("DISPEL_FAILED", 3, False, _dispel_failed),
    SuffixRule("DISPEL", 4, False, _dispel),
    SuffixRule("STOLEN", 4, True, _stolen),
    SuffixRule("EXTRA_ATTACKS", 1, False, _extra_attacks),
    SuffixRule("AURA_APPLIED_DOSE", 2, False, _aura_applied_dose),
    SuffixRule("AURA_REMOVED_DOSE", 2, False, _aura_removed_dose),
    SuffixRule("AURA_APPLIED", 1, False, _aura_applied),
    SuffixRule("AURA_REMOVED", 1, False, _aura_removed),
    SuffixRule("AURA_REFRESH", 1, False, _aura_refresh),
    SuffixRule("AURA_BROKEN_SPELL", 4, False, _aura_broken_spell),
    SuffixRule("AURA_BROKEN", 1, False, _aura_broken),
    SuffixRule("CAST_START", 0, False, _unit(CastStart)),
    SuffixRule("CAST_SUCCESS", 0, True, _unit(CastSuccess)),
    SuffixRule("CAST_FAILED", 1, False, _cast_failed),
    SuffixRule("INSTAKILL", 1, False, _instakill),
    SuffixRule("CREATE", 0, False, _unit(Create)),
    SuffixRule("SUMMON", 0, False, _unit(Summon)),
    SuffixRule("RESURRECT", 0, False, _unit(Resurrect)),
    SuffixRule("EMPOWER_START", 0, False, _unit(EmpowerStart)),
    SuffixRule("EMPOWER_END", 1, False, _empower_end),
)


def strip_support(event_type: str) -> str:
    """SPELL_DAMAGE_SUPPORT -> SPELL_DAMAGE; other names are returned as-is."""
    if event_type.endswith(SUPPORT_TAG):
        return event_type[: -len(SUPPORT_TAG)]
    return event_type


def match_suffix(event_type: str) -> SuffixRule:
    base = strip_support(event_type)
    for rule in SUFFIX_RULES:
        if base.endswith(rule.ends_with):
            return rule
    raise UnknownSuffix(event_type)


def has_advanced_params(event_type: str) -> bool:
    """Whether a 17-field advanced block precedes this event's suffix."""
    return match_suffix(event_type).advanced


def parse_suffix(event_type: str, fields: Sequence[str]) -> Suffix:
    rule = match_suffix(event_type)
    require(fields, rule.min_fields, rule.ends_with)
    return rule.decode(fields)
