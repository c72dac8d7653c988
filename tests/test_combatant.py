"""
Tests for COMBATANT_INFO decoding.
"""

import pytest

from wowcombatlog.errors import MalformedCombatantInfo
from wowcombatlog.parser.combatant import (
    ClassTalent,
    CombatantInfo,
    EquippedItem,
    split_top_level,
)
from wowcombatlog.parser.guid import PlayerGuid
from wowcombatlog.parser.tokenizer import LineTokenizer

from tests.samples import LINES


@pytest.fixture
def combatant_fields():
    fields = LineTokenizer().split(LINES["combatant_info"])
    # drop the "date  COMBATANT_INFO" head
    return fields[1:]


def _with_items(fields, items):
    return [items if field.startswith("[(193526") else field for field in fields]


class TestSplitTopLevel:
    def test_nested_sections(self):
        assert split_top_level("1,[(2,3),(4,5)],(6,(7)),8") == ["1", "[(2,3),(4,5)]", "(6,(7))", "8"]

    def test_empty_sections(self):
        assert split_top_level("(),[]") == ["()", "[]"]

    @pytest.mark.parametrize("text", ["[(1,2)", "(1,2]", "1,2)"])
    def test_unbalanced(self, text):
        with pytest.raises(MalformedCombatantInfo):
            split_top_level(text)


class TestCombatantInfo:
    def test_parse(self, combatant_fields):
        info = CombatantInfo.parse(combatant_fields)

        assert isinstance(info.guid, PlayerGuid)
        assert info.faction == 0
        assert info.stats.strength == 2357
        assert info.stats.agility == 10938
        assert info.stats.stamina == 46563
        assert info.stats.mastery == 3977
        assert info.stats.armor == 10154
        assert info.spec_id == 261

        assert info.class_talents == (ClassTalent(74642, 96551, 1), ClassTalent(74644, 96553, 1))
        assert info.pvp_talents == (0, 0, 0, 0)

        assert info.equipped_items == (
            EquippedItem(193526, 447, None, (7977, 6652, 7936, 8828, 1498), ()),
            EquippedItem(137311, 424, None, (8836, 8840, 8902), (192985, 415)),
        )
        assert info.average_item_level == pytest.approx(435.5)

        assert [aura.aura_id for aura in info.interesting_auras] == [1126, 381753]
        assert info.interesting_auras[0].caster == info.guid

        assert (info.pvp_stats.honor_level, info.pvp_stats.season) == (1, 0)

    def test_enchant_is_first_id(self, combatant_fields):
        fields = _with_items(combatant_fields, "[(207788,483,(6643,0,0),(10356,1520),())]")
        (item,) = CombatantInfo.parse(fields).equipped_items
        assert item.enchant == 6643

    def test_empty_sections(self, combatant_fields):
        fields = [
            "[]" if field.startswith("[") else field
            for field in combatant_fields
        ]
        info = CombatantInfo.parse(fields)
        assert info.class_talents == ()
        assert info.equipped_items == ()
        assert info.interesting_auras == ()
        assert info.average_item_level == 0.0

    def test_missing_section(self, combatant_fields):
        fields = [field for field in combatant_fields if not field.startswith("[Player")]
        with pytest.raises(MalformedCombatantInfo):
            CombatantInfo.parse(fields)

    def test_missing_pvp_talents(self, combatant_fields):
        fields = [field for field in combatant_fields if field != "(0,0,0,0)"]
        with pytest.raises(MalformedCombatantInfo):
            CombatantInfo.parse(fields)

    def test_missing_scalar(self, combatant_fields):
        with pytest.raises(MalformedCombatantInfo):
            CombatantInfo.parse(combatant_fields[:-1])

    def test_malformed_item(self, combatant_fields):
        fields = _with_items(combatant_fields, "[(207788,483,(),())]")
        with pytest.raises(MalformedCombatantInfo):
            CombatantInfo.parse(fields)

    def test_bad_number_is_reported_as_combatant_error(self, combatant_fields):
        fields = list(combatant_fields)
        fields[2] = "lots"
        with pytest.raises(MalformedCombatantInfo):
            CombatantInfo.parse(fields)

    def test_odd_aura_list(self, combatant_fields):
        fields = [
            "[Player-1329-09AF0ACF,1126,Player-1329-09AF0ACF]" if field.startswith("[Player") else field
            for field in combatant_fields
        ]
        with pytest.raises(MalformedCombatantInfo):
            CombatantInfo.parse(fields)
