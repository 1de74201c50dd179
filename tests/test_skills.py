"""
Tests for skills, the per-hero skill catalog and skill execution.
"""

import pytest
from deathsgame.actions import Skill, SkillCatalog, UltimateSpec, execute_skill
from deathsgame.character.hero import new_hero
from deathsgame.character.monster import Monster
from deathsgame.core.constants import EffectName, SkillKind, StatType


@pytest.fixture
def golem():
    """A large target so multi-hit skills never overkill."""
    return Monster("Golem", 500, 10, 5)


def test_catalog_menu_skips_the_passive(warrior):
    """
    Test that the menu lists only active skills with their catalog indices.
    """
    catalog = warrior.skills
    assert catalog.passive.name == "Iron Will"
    assert catalog.active_indices() == [1, 2, 3, 4]
    assert [skill.name for _, skill in catalog.menu_entries()] == [
        "Power Strike",
        "Shield Wall",
        "Shield Bash",
        "Titan's Wrath",
    ]


def test_catalog_lookup_by_name(warrior):
    """
    Test case-insensitive lookup and the error for unknown names.
    """
    assert warrior.skills.index_of("shield bash") == 3
    with pytest.raises(KeyError):
        warrior.skills.index_of("Fireball")


def test_catalog_for_class_copies_templates(content):
    """
    Test that catalogs built from the same class are independent.
    """
    config = content.get_hero_class("ROGUE")
    first = SkillCatalog.for_class(config)
    second = SkillCatalog.for_class(config)
    assert len(first) == len(second) == len(config.skills)
    assert first[2] is not second[2]
    assert first[2].effects[0] is not config.skills[2].effects[0]


def test_skill_parses_stat_names():
    """
    Test that the scaling stat can be given by name.
    """
    skill = Skill(name="Quick Jab", stat_index="agi", power=3)
    assert skill.stat_index is StatType.AGI
    assert skill.kind is SkillKind.DAMAGE


def test_ultimate_data_requires_ultimate_flag():
    """
    Test that tuning data on a regular skill is rejected.
    """
    with pytest.raises(ValueError):
        Skill(name="Fake", ultimate=UltimateSpec(hits=2))


def test_fireball_burns_and_damages(mage, dummy):
    """
    Test that a damaging skill applies its debuff to the target.
    """
    outcome = mage.use_skill(mage.skills.index_of("Fireball"), dummy)
    assert outcome.damage == 10 + 22 * 2 + 2 - 5
    assert outcome.debuffs == ["Burn"]
    burn = dummy.effects.find_active(EffectName.BURN)
    assert burn is not None and burn.magnitude == 5
    dummy.resolve_effects()
    template = mage.skills[mage.skills.index_of("Fireball")].effects[0]
    assert template.duration == 3
    assert burn.duration == 2


def test_support_skill_only_applies_effects(warrior, dummy):
    """
    Test that Shield Wall puts a shield on the caster and deals no damage.
    """
    outcome = warrior.use_skill(2, dummy)
    assert outcome.damage == 0
    assert outcome.buffs == ["Shield"]
    assert warrior.effects.active_shield_total() == 25
    assert dummy.hp == 100


def test_shield_bash_stuns(warrior, dummy):
    """
    Test that a stun debuff lands on the target.
    """
    warrior.use_skill(3, dummy)
    assert dummy.is_stunned()
    assert not warrior.is_stunned()


def test_holy_light_heals_caster(priest, dummy):
    """
    Test that heal skills restore the caster and add their buff.
    """
    priest.hp = 50
    outcome = priest.use_skill(priest.skills.index_of("Holy Light"), dummy)
    assert outcome.healed == 10 + 18
    assert priest.hp == 78
    assert priest.effects.find_active(EffectName.HEAL) is not None
    assert dummy.hp == 100


def test_resurrection_skill_grants_the_buff(priest, dummy):
    """
    Test that the priest ultimate only applies a Resurrection buff.
    """
    outcome = priest.use_skill(priest.skills.index_of("Resurrection"), dummy)
    assert outcome.buffs == ["Resurrection"]
    assert priest.effects.find_active(EffectName.RESURRECTION) is not None
    assert priest.mana == 75 - 40


def test_titans_wrath_pierces_defense(warrior):
    """
    Test that defense pierce ignores part of the target defense.
    """
    target = Monster("Knight", 300, 10, 10)
    outcome = warrior.use_skill(4, target)
    assert outcome.damage == 25 + 15 * 3 + 2 - 5


def test_meteor_storm_hits_twice(mage, golem):
    """
    Test that multi-hit ultimates repeat their damage.
    """
    outcome = mage.use_skill(mage.skills.index_of("Meteor Storm"), golem)
    per_hit = 12 + 22 * 2 + 2 - 5
    assert outcome.damage == per_hit * 2
    assert golem.hp == 500 - per_hit * 2


def test_multi_hit_stops_when_target_dies(mage):
    """
    Test that no further hits land once the target is dead.
    """
    weak = Monster("Rat", 10, 1, 0)
    outcome = mage.use_skill(mage.skills.index_of("Meteor Storm"), weak)
    assert outcome.target_defeated
    assert outcome.damage == 12 + 22 * 2 + 2


def test_assassinate_executes_weakened_targets(content, golem):
    """
    Test that the execute multiplier applies under the HP threshold.
    """
    rogue = new_hero("Vex", "ROGUE", content=content)
    golem.hp = 150
    outcome = rogue.use_skill(rogue.skills.index_of("Assassinate"), golem)
    assert outcome.damage == (15 + 22 * 2 + 2 - 5) * 2


def test_assassinate_without_execute(content, golem):
    """
    Test that healthy targets take normal damage.
    """
    rogue = new_hero("Vex", "ROGUE", content=content)
    outcome = rogue.use_skill(rogue.skills.index_of("Assassinate"), golem)
    assert outcome.damage == 15 + 22 * 2 + 2 - 5


def test_rain_of_arrows_heals_the_hunter(content, golem):
    """
    Test that self-heal ultimates return part of the damage as HP.
    """
    hunter = new_hero("Robin", "HUNTER", content=content)
    hunter.hp = 100
    outcome = hunter.use_skill(hunter.skills.index_of("Rain of Arrows"), golem)
    assert outcome.damage == (6 + 19 + 2 - 5) * 3
    assert outcome.healed == int(outcome.damage * 0.2)
    assert hunter.hp == 100 + outcome.healed


def test_hunters_mark_boosts_attacks(content, dummy):
    """
    Test that a mark adds its magnitude to later attacks.
    """
    hunter = new_hero("Robin", "HUNTER", content=content)
    hunter.use_skill(hunter.skills.index_of("Hunter's Mark"), dummy)
    result = hunter.attack(dummy, jitter=0)
    assert result.damage == (14 + 4) * 2 + 2 - 5 + 6


def test_execute_skill_without_target(priest):
    """
    Test that debuffs are dropped when there is no target.
    """
    skill = Skill(
        name="Curse",
        kind=SkillKind.SUPPORT,
        effects=[
            {"name": "Poison", "duration": 2, "magnitude": 3, "is_buff": False},
        ],
    )
    outcome = execute_skill(priest, skill, None)
    assert outcome.debuffs == []
    assert not outcome.target_defeated
