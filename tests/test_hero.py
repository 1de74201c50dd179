"""
Tests for heroes: creation, basic attacks, skill checks, passives and leveling.
"""

import pytest
from deathsgame.character.hero import new_hero
from deathsgame.character.monster import Monster
from deathsgame.core.constants import HeroClass, StatType
from deathsgame.core.error_handling import InsufficientResource, InvalidAction


def test_new_warrior_uses_class_table(warrior):
    """
    Test that a warrior starts with its class numbers and passive bonus.
    """
    assert warrior.hero_class is HeroClass.WARRIOR
    assert warrior.level == 1
    assert warrior.exp == 0
    assert warrior.hp == warrior.max_hp == 150
    assert warrior.mana == warrior.max_mana == 35
    assert warrior.DEF == 10 + 4
    assert warrior.main_stat is StatType.STR
    assert len(warrior.cooldowns) == len(warrior.skills)
    assert all(cooldown == 0 for cooldown in warrior.cooldowns)


def test_unknown_class_falls_back_to_default(content):
    """
    Test that an unknown class id builds a hero from the default profile.
    """
    hero = new_hero("Nobody", "BARD", content=content)
    assert hero.hero_class is HeroClass.DEFAULT
    assert hero.stats == [12, 12, 12, 12, 12]
    assert hero.max_hp == 110
    assert hero.max_mana == 50


def test_heroes_do_not_share_skills(content):
    """
    Test that each hero owns its catalog and cooldowns.
    """
    first = new_hero("A", "MAGE", content=content)
    second = new_hero("B", "MAGE", content=content)
    assert first.skills[1] is not second.skills[1]
    first.cooldowns[1] = 3
    assert second.cooldowns[1] == 0


def test_basic_attack_formula(warrior):
    """
    Test the basic attack with main stat 20, level 5 and a fixed jitter of 3.
    """
    warrior.stats[StatType.STR] = 20
    warrior.level = 5
    target = Monster("Target", 200, 10, 10)
    result = warrior.attack(target, jitter=3)
    assert result.damage == 43
    assert target.hp == 200 - 43


def test_attack_adds_mark_bonus_and_restores_mana(warrior, dummy, make_effect):
    """
    Test that marks add flat damage and landing a hit returns mana.
    """
    dummy.effects.enqueue(make_effect("Mark", duration=2, magnitude=6))
    warrior.mana = 20
    result = warrior.attack(dummy, jitter=0)
    assert result.damage == 15 * 2 + 2 - 5 + 6
    assert result.mana_restored == 4
    assert warrior.mana == 24


def test_mage_attacks_with_intelligence(mage, dummy):
    """
    Test that caster classes use INT for basic attacks.
    """
    result = mage.attack(dummy, jitter=0)
    assert result.damage == 22 * 2 + 2 - 5


def test_mana_restore_is_clamped(warrior, dummy):
    """
    Test that mana never exceeds its maximum.
    """
    result = warrior.attack(dummy, jitter=0)
    assert result.mana_restored == 0
    assert warrior.mana == warrior.max_mana


def test_passive_skill_cannot_be_used(warrior, dummy):
    """
    Test that selecting the passive is an invalid action.
    """
    with pytest.raises(InvalidAction):
        warrior.use_skill(0, dummy)


def test_out_of_range_skill_is_invalid(warrior, dummy):
    """
    Test that a skill index past the catalog is an invalid action.
    """
    with pytest.raises(InvalidAction):
        warrior.use_skill(99, dummy)


def test_insufficient_mana_changes_nothing(warrior, dummy):
    """
    Test that a skill the hero cannot afford leaves mana and cooldowns alone.
    """
    warrior.mana = 5
    with pytest.raises(InsufficientResource):
        warrior.use_skill(1, dummy)
    assert warrior.mana == 5
    assert warrior.cooldowns[1] == 0
    assert dummy.hp == 100


def test_skill_use_pays_and_starts_cooldown(warrior, dummy):
    """
    Test that Power Strike costs mana, starts its cooldown and hits.
    """
    outcome = warrior.use_skill(1, dummy)
    assert warrior.mana == 35 - 10
    assert warrior.cooldowns[1] == 2
    assert outcome.damage == 12 + 15 * 2 + 1 * 2 - 5
    assert dummy.hp == 100 - outcome.damage


def test_cooldown_blocks_until_ticked(warrior, dummy):
    """
    Test that a skill on cooldown is rejected until enough turns pass.
    """
    warrior.use_skill(1, dummy)
    with pytest.raises(InsufficientResource):
        warrior.check_skill(1)
    warrior.tick_skill_cooldowns()
    warrior.tick_skill_cooldowns()
    warrior.check_skill(1)
    warrior.tick_skill_cooldowns()
    assert warrior.cooldowns[1] == 0


def test_mage_passive_regenerates_mana(mage):
    """
    Test that the mage regains mana every turn.
    """
    mage.mana = 10
    message = mage.process_turn_passives()
    assert mage.mana == 15
    assert "mana" in message


def test_priest_passive_heals(priest):
    """
    Test that the priest regains HP every turn.
    """
    priest.hp = 50
    priest.process_turn_passives()
    assert priest.hp == 54


def test_warrior_has_no_turn_passive(warrior):
    """
    Test that stat-only passives do nothing per turn.
    """
    warrior.hp = 50
    assert warrior.process_turn_passives() is None
    assert warrior.hp == 50


def test_gain_exp_levels_up(warrior):
    """
    Test that 150 experience grants one level with class growth and a full restore.
    """
    warrior.hp = 10
    warrior.mana = 0
    levels = warrior.gain_exp(150)
    assert levels == 1
    assert warrior.level == 2
    assert warrior.exp == 50
    assert warrior.STR == 15 + 4
    assert warrior.AGI == 10 + 2
    assert warrior.DEF == 10 + 4 + 3 + 4
    assert warrior.max_hp == 150 + 35
    assert warrior.max_mana == 35 + 15
    assert warrior.hp == warrior.max_hp
    assert warrior.mana == warrior.max_mana


def test_gain_exp_multiple_levels(mage):
    """
    Test that a large reward can grant several levels at once.
    """
    assert mage.gain_exp(230) == 2
    assert mage.level == 3
    assert mage.exp == 30
    assert mage.INT == 22 + 5 * 2


def test_try_resurrect(priest, make_effect):
    """
    Test that an active Resurrection revives the hero and is consumed.
    """
    priest.effects.enqueue(make_effect("Resurrection", duration=3, is_buff=True))
    priest.hp = -5
    assert priest.try_resurrect(0.6)
    assert priest.hp == round(priest.max_hp * 0.6)
    assert priest.effects.find_active("Resurrection") is None
    priest.hp = -5
    assert not priest.try_resurrect(0.6)


def test_restore_full(warrior):
    """
    Test that a full restore refills HP and mana.
    """
    warrior.hp = 1
    warrior.mana = 0
    warrior.restore_full()
    assert warrior.hp == warrior.max_hp
    assert warrior.mana == warrior.max_mana


def test_status_summaries(warrior):
    """
    Test the textual summaries used by the status screen.
    """
    assert "Atk 15" in warrior.get_stat_summary()
    lines = warrior.get_skill_summary()
    assert len(lines) == len(warrior.skills)
    assert "passive" in lines[0]
