"""
Combat log lines captured from real raid logs, keyed by a short label.
"""

PLAYER = 'Player-1390-0B058D1A,"Nistî-Hyjal",0x40514,0x20'
GNARLROOT = 'Creature-0-1469-2549-12530-209333-000011428A,"Gnarlroot",0xa48,0x0'
NOBODY = "0000000000000000,nil,0x80000000,0x80000000"

DAMAGE_ADVANCED = (
    "Creature-0-1469-2549-12530-209333-000011428A,0000000000000000,268607404,268624895,"
    "0,0,5043,0,3,0,100,0,3475.30,13117.91,2232,2.7460,73"
)
DAMAGE_AMOUNTS = "3820,1910,-1,36,0,0,0,1,nil,nil"

LINES = {
    "combat_log_version": (
        "4/6 13:57:24.313  COMBAT_LOG_VERSION,20,ADVANCED_LOG_ENABLED,1,"
        "BUILD_VERSION,10.2.6,PROJECT_ID,1"
    ),
    "bare_combat_log_version": (
        "COMBAT_LOG_VERSION,20,ADVANCED_LOG_ENABLED,1,BUILD_VERSION,10.2.6,PROJECT_ID,1"
    ),
    "zone_change": '4/6 14:01:52.697  ZONE_CHANGE,2549,"Amirdrassil, the Dream\'s Hope",14',
    "map_change": (
        '4/6 13:58:49.517  MAP_CHANGE,2232,"Amirdrassil",3800.000000,3000.000000,'
        "13725.000000,12525.000000"
    ),
    "encounter_start": '4/6 14:02:02.856  ENCOUNTER_START,2820,"Gnarlroot",14,19,2549',
    "encounter_end": '4/6 14:04:45.580  ENCOUNTER_END,2820,"Gnarlroot",14,19,1,162742',
    "spell_periodic_heal": (
        "4/6 13:57:24.741  SPELL_PERIODIC_HEAL,Player-1393-077C088C,"
        '"Mubaku-BronzeDragonflight",0x514,0x0,'
        'Creature-0-1469-2549-12530-210177-000011428F,"Tormented Ancient",0xa18,0x0,'
        '8936,"Regrowth",0x8,'
        "Creature-0-1469-2549-12530-210177-000011428F,0000000000000000,5927873,7468728,"
        "0,0,5043,0,1,0,0,0,3295.44,13209.11,2232,3.4506,72,"
        "2557,2557,0,0,nil"
    ),
    "spell_aura_applied": (
        "4/6 13:57:25.222  SPELL_AURA_APPLIED,Player-1393-077C088C,"
        '"Mubaku-BronzeDragonflight",0x514,0x0,Player-1393-077C088C,'
        '"Mubaku-BronzeDragonflight",0x514,0x0,768,"Cat Form",0x1,BUFF'
    ),
    "spell_aura_removed": (
        "4/6 13:57:27.495  SPELL_AURA_REMOVED,0000000000000000,nil,0x511,0x0,"
        'Player-1329-09AF0ACF,"Adamthebash-Ravencrest",0x511,0x0,421639,'
        '"Burning Heat",0x4,DEBUFF'
    ),
    "spell_cast_start": (
        '4/6 13:59:25.117  SPELL_CAST_START,Player-1084-0AA1EF84,"Ohlga-TarrenMill",'
        f'0x514,0x0,{NOBODY},556,"Astral Recall",0x8'
    ),
    "spell_cast_success_corpse": (
        '4/11 22:38:54.708  SPELL_CAST_SUCCESS,Player-1329-09AF0ACF,"Adamthebash-Ravencrest",'
        '0x511,0x0,Corpse-0-1465-2454-103-0-000018584E,"Unknown",0x4228,0x0,'
        '20484,"Rebirth",0x8,Player-1329-09AF0ACF,0000000000000000,732698,846460,'
        "16347,15718,5632,0,0,250000,250000,5000,66.53,3330.43,2133,4.7368,486"
    ),
    "spell_cast_failed": (
        '4/6 14:02:04.424  SPELL_CAST_FAILED,Player-1329-09AF0ACF,"Adamthebash-Ravencrest",'
        f'0x511,0x0,{NOBODY},8921,"Moonfire",0x40,"Not yet recovered"'
    ),
    "spell_energize": (
        '4/6 13:59:50.643  SPELL_ENERGIZE,Player-1316-0CC289C3,"Ferrarello-Nemesis",'
        '0x514,0x0,Player-1316-0CC289C3,"Ferrarello-Nemesis",0x514,0x0,'
        '101033,"Resurgence",0x8,Player-1316-0CC289C3,0000000000000000,700790,700790,'
        "3937,13311,6359,0,0,249202,250000,0,3411.52,13122.82,2232,6.1016,464,"
        "1200.0000,0.0000,0,250000"
    ),
    "spell_summon": (
        '4/6 14:02:02.773  SPELL_SUMMON,Player-1390-0B058D1A,"Nistî-Hyjal",0x40514,0x20,'
        'Creature-0-1469-2549-12530-27893-00001147CA,"Unknown",0xa28,0x0,'
        '377671,"Everlasting Bond",0x1'
    ),
    "swing_damage": (
        "4/6 14:02:02.797  SWING_DAMAGE,Creature-0-1469-2549-12530-27893-00009147CA,"
        f'"Unknown",0x2114,0x0,{GNARLROOT},'
        "Creature-0-1469-2549-12530-27893-00009147CA,Player-1390-0B058D1A,675350,675350,"
        "5761,0,23324,0,1,0,0,0,3475.76,13116.73,2232,6.2641,476,"
        "3575,5106,-1,1,0,0,0,nil,nil,nil"
    ),
    "swing_missed": (
        '4/6 14:02:03.352  SWING_MISSED,Player-1335-0A264B4C,"Sønike-Ysondre",0x514,0x0,'
        f"{GNARLROOT},MISS,nil"
    ),
    "spell_absorbed": (
        f"4/6 14:02:03.252  SPELL_ABSORBED,{PLAYER},{PLAYER},"
        '425461,"Tainted Heart",0x24,'
        'Player-1587-0F81497D,"Huisarts-Arathor",0x514,0x0,17,"Power Word: Shield",0x2,'
        "1629,1910,nil"
    ),
    "spell_absorbed_melee": (
        f"4/6 14:02:03.260  SPELL_ABSORBED,{GNARLROOT},{PLAYER},"
        'Player-1587-0F81497D,"Huisarts-Arathor",0x514,0x0,17,"Power Word: Shield",0x2,'
        "5200,6100,nil"
    ),
    "spell_missed_absorb": (
        f'4/6 14:02:03.253  SPELL_MISSED,{PLAYER},{PLAYER},425461,"Tainted Heart",0x24,'
        "ABSORB,nil,1629,1910,nil"
    ),
    "spell_damage": (
        f'4/6 14:02:03.255  SPELL_DAMAGE,{PLAYER},{GNARLROOT},425461,"Tainted Heart",0x24,'
        f"{DAMAGE_ADVANCED},{DAMAGE_AMOUNTS}"
    ),
    "spell_periodic_damage": (
        '4/6 14:02:05.129  SPELL_PERIODIC_DAMAGE,Player-3692-0A2A043C,"Hypersus-Eredar",'
        f'0x514,0x0,{GNARLROOT},12654,"Ignite",0x4,'
        "Creature-0-1469-2549-12530-209333-000011428A,0000000000000000,267910173,268624895,"
        "0,0,5043,0,3,2,100,0,3475.30,13117.91,2232,2.7460,73,"
        "6374,6374,-1,4,0,0,0,nil,nil,nil"
    ),
    "environmental_damage": (
        f"4/11 22:42:01.100  ENVIRONMENTAL_DAMAGE,{NOBODY},"
        'Player-1329-070EBCFC,"Naladrem-Ravencrest",0x518,0x0,'
        "Player-1329-070EBCFC,0000000000000000,815216,866544,14879,1421,5217,0,17,109,120,0,"
        "-931.46,2546.12,2133,4.8479,484,Falling,51328,51328,0,1,0,0,0,nil,nil,nil"
    ),
    "damage_split": (
        f'4/6 14:02:03.256  DAMAGE_SPLIT,{PLAYER},{GNARLROOT},425461,"Tainted Heart",0x24,'
        f"{DAMAGE_ADVANCED},{DAMAGE_AMOUNTS}"
    ),
    "spell_damage_support": (
        f"4/6 14:02:03.257  SPELL_DAMAGE_SUPPORT,{PLAYER},{GNARLROOT},"
        f'395152,"Ebon Might",0x20,{DAMAGE_ADVANCED},{DAMAGE_AMOUNTS},Player-1329-09AF0ACF'
    ),
    "swing_damage_landed_support": (
        f"4/6 14:02:03.258  SWING_DAMAGE_LANDED_SUPPORT,{PLAYER},{GNARLROOT},"
        f'413984,"Shifting Sands",0x40,{DAMAGE_ADVANCED},{DAMAGE_AMOUNTS},Player-1329-09AF0ACF'
    ),
    "swing_damage_landed": (
        "4/6 14:02:02.798  SWING_DAMAGE_LANDED,Creature-0-1469-2549-12530-27893-00009147CA,"
        f'"Unknown",0x2114,0x0,{GNARLROOT},'
        "Creature-0-1469-2549-12530-27893-00009147CA,Player-1390-0B058D1A,675350,675350,"
        "5761,0,23324,0,1,0,0,0,3475.76,13116.73,2232,6.2641,476,"
        "3575,5106,-1,1,0,0,0,nil,nil,nil"
    ),
    "spell_drain": (
        f'4/6 14:02:06.001  SPELL_DRAIN,{PLAYER},{GNARLROOT},8921,"Mana Drain",0x20,'
        f"{DAMAGE_ADVANCED},500,0,0,250000"
    ),
    "spell_leech": (
        f'4/6 14:02:06.002  SPELL_LEECH,{PLAYER},{GNARLROOT},8922,"Energy Leech",0x20,'
        f"{DAMAGE_ADVANCED},30,3,0"
    ),
    "spell_stolen": (
        f'4/6 14:02:06.003  SPELL_STOLEN,{PLAYER},{GNARLROOT},30449,"Spellsteal",0x40,'
        f'{DAMAGE_ADVANCED},768,"Cat Form",0x1,BUFF'
    ),
    "spell_extra_attacks": (
        f'4/6 14:02:06.004  SPELL_EXTRA_ATTACKS,{PLAYER},{PLAYER},16459,"Sword Specialization",0x1,1'
    ),
    "spell_aura_refresh": (
        f'4/6 14:02:06.005  SPELL_AURA_REFRESH,{PLAYER},{PLAYER},774,"Rejuvenation",0x8,BUFF'
    ),
    "spell_aura_removed_dose": (
        f'4/6 14:02:06.006  SPELL_AURA_REMOVED_DOSE,{PLAYER},{GNARLROOT},421972,'
        '"Controlled Burn",0x4,DEBUFF,2'
    ),
    "spell_aura_removed_amount": (
        f'4/6 14:02:06.007  SPELL_AURA_REMOVED,{PLAYER},{PLAYER},17,"Power Word: Shield",0x2,BUFF,52000'
    ),
    "spell_instakill": (
        f'4/6 14:02:06.008  SPELL_INSTAKILL,{GNARLROOT},{PLAYER},421971,"Doom Cultivation",0x20,0'
    ),
    "spell_empower_start": (
        f'4/6 14:02:06.009  SPELL_EMPOWER_START,{PLAYER},{NOBODY},357208,"Fire Breath",0x4'
    ),
    "spell_empower_end": (
        f'4/6 14:02:06.010  SPELL_EMPOWER_END,{PLAYER},{NOBODY},357208,"Fire Breath",0x4,3'
    ),
    "spell_create": (
        f'4/6 14:02:06.011  SPELL_CREATE,{PLAYER},{NOBODY},698,"Ritual of Summoning",0x20'
    ),
    "spell_resurrect": (
        f'4/6 14:02:06.012  SPELL_RESURRECT,{PLAYER},'
        'Player-1329-09AF0ACF,"Adamthebash-Ravencrest",0x511,0x0,20484,"Rebirth",0x8'
    ),
    "unit_destroyed": (
        f"4/6 14:04:46.100  UNIT_DESTROYED,{NOBODY},"
        'Creature-0-1469-2549-12530-27893-00001147CA,"Unknown",0xa28,0x0,0'
    ),
    "unit_died": f"4/6 14:04:45.100  UNIT_DIED,{NOBODY},{GNARLROOT},0",
    "enchant_applied": (
        f"4/11 22:30:00.000  ENCHANT_APPLIED,{NOBODY},"
        'Player-1329-09AF0ACF,"Adamthebash-Ravencrest",0x511,0x0,"Howling Rune",207782,'
        '"Sickle of the White Stag"'
    ),
    "world_marker_placed": "4/6 14:03:00.000  WORLD_MARKER_PLACED,2549,7,4010.06,13115.27",
    "world_marker_removed": "4/6 14:03:30.000  WORLD_MARKER_REMOVED,7",
    "emote_environmental": (
        "4/11 22:47:58.605  EMOTE,Creature-0-4233-2549-14868-200927-00004E8C97,"
        '"Smolderon",0000000000000000,nil,'
        '"|TInterface\\Icons\\SPELL_FIRE_RAGNAROS_MOLTENINFERNO.BLP:20|tEmberscar attempts to '
        '|cFFFF0000|Hspell:422277|h[Devour Your Essence]|h|r!"'
    ),
    "emote_standard": (
        "4/11 22:47:59.000  EMOTE,Creature-0-4233-2549-14868-200927-00004E8C97,"
        '"Smolderon",0xa48,0x0,"The flames will consume you!"'
    ),
    "combatant_info": (
        "4/11 22:30:00.000  COMBATANT_INFO,Player-1329-09AF0ACF,0,2357,10938,46563,2357,"
        "0,0,0,4167,4167,4167,0,0,3313,3313,3313,0,3977,1555,1555,1555,10154,261,"
        "[(74642,96551,1),(74644,96553,1)],(0,0,0,0),"
        "[(193526,447,(),(7977,6652,7936,8828,1498),()),"
        "(137311,424,(),(8836,8840,8902),(192985,415))],"
        "[Player-1329-09AF0ACF,1126,Player-1329-09AF0ACF,381753],1,0,0,0"
    ),
    "challenge_mode_start": (
        '9/18/2025 20:23:42.758-4  CHALLENGE_MODE_START,"Ara-Kara, City of Echoes",'
        "2660,503,12,[10,147,9,152]"
    ),
    "challenge_mode_end": "9/18/2025 20:54:16.825-4  CHALLENGE_MODE_END,2660,1,12,1834067",
}

BAD_LINES = {
    "unknown_event": f"4/6 14:02:03.255  FOO_BAR,{PLAYER},{GNARLROOT},1,2,3",
    "truncated_prefix": f"4/6 14:02:03.255  SPELL_DAMAGE,{PLAYER},{GNARLROOT},425461",
    "bad_date": f"13/45 14:02:03.255  SWING_MISSED,{PLAYER},{GNARLROOT},MISS,nil",
    "no_event_name": "4/6 14:02:03.255 SWING_MISSED",
    "bad_guid": f"4/6 14:02:03.255  SWING_MISSED,Monster-1-2,x,0x0,0x0,{GNARLROOT},MISS,nil",
}
