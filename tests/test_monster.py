"""
Tests for monsters: generators and their moves against heroes.
"""

import pytest
from deathsgame.character.monster import Monster, generate_monster
from deathsgame.combat.monster_ai import MonsterMove, MoveTable
from deathsgame.core.constants import MonsterKind


def _numbers(monster):
    return monster.name, monster.max_hp, monster.atk, monster.defense


@pytest.mark.parametrize(
    "kind, level, expected",
    [
        (MonsterKind.REGULAR, 4, ("Goblin Lv.4", 52, 12, 7)),
        (MonsterKind.REGULAR, 5, ("Goblin Lv.5", 55, 13, 7)),
        (MonsterKind.BOSS, 3, ("Goblin (Boss Lv.3)", 141, 21, 13)),
        (MonsterKind.FINAL_BOSS, 2, ("DEATH", 320, 34, 22)),
    ],
)
def test_generator_formulas(kind, level, expected):
    """
    Test the stat formulas of every level-driven generator.
    """
    assert _numbers(generate_monster(kind, level, name="Goblin")) == expected


def test_generators_are_pure():
    """
    Test that the same kind and level always give the same monster.
    """
    for kind in (MonsterKind.REGULAR, MonsterKind.BOSS, MonsterKind.FINAL_BOSS):
        first = generate_monster(kind, 7, name="Imp")
        second = generate_monster(kind, 7, name="Imp")
        assert _numbers(first) == _numbers(second)
        assert first is not second


def test_shadow_copies_the_hero(warrior):
    """
    Test that the shadow is built from the hero's current numbers.
    """
    warrior.level = 3
    shadow = generate_monster("shadow", 0, hero=warrior)
    assert shadow.name == "Aria's Shadow"
    assert shadow.max_hp == warrior.max_hp
    assert shadow.atk == warrior.STR + 2 * 3
    assert shadow.defense == warrior.DEF + 3
    warrior.stats[0] += 10
    assert shadow.atk == 15 + 6


def test_shadow_needs_a_hero():
    """
    Test that a shadow cannot be generated without a hero.
    """
    with pytest.raises(ValueError):
        generate_monster(MonsterKind.SHADOW, 1)


def test_unknown_kind_is_rejected():
    """
    Test that unknown monster kinds raise an error.
    """
    with pytest.raises(ValueError):
        generate_monster("dragon", 1)


def test_monster_defense_mirrors_def_stat():
    """
    Test that the DEF slot and the defense value agree.
    """
    monster = Monster("Slime", 30, 6, 4)
    assert monster.DEF == monster.defense == 4
    assert monster.process_turn_passives() is None


def test_enemy_attack_hits_the_hero(warrior):
    """
    Test a plain monster attack against the hero's defense.
    """
    monster = Monster("Brute", 80, 30, 5)
    result = monster.enemy_attack(warrior)
    assert result.damage == 30 - warrior.DEF
    assert warrior.hp == 150 - result.damage


def test_enemy_attack_goes_through_shields(warrior, make_effect):
    """
    Test that hero shields absorb monster damage.
    """
    warrior.effects.enqueue(make_effect("Shield", duration=2, magnitude=25, is_buff=True))
    monster = Monster("Brute", 80, 30, 5)
    result = monster.enemy_attack(warrior)
    assert result.absorbed == result.damage
    assert warrior.hp == 150


def test_enemy_picks_from_weighted_table(warrior, make_rng):
    """
    Test that a forced draw selects the special move.
    """
    table = MoveTable(
        moves=[
            MonsterMove(name="Reaping Scythe", bonus=15, weight=0.7, halve_defense=True),
            MonsterMove(name="Cold Touch", weight=0.3, halve_defense=True),
        ]
    )
    death = generate_monster(MonsterKind.FINAL_BOSS, 1)
    result = death.enemy_attack(warrior, table, make_rng(value=0.2))
    assert result.move == "Reaping Scythe"
    assert result.damage == death.atk + 15 - warrior.DEF // 2
    result = death.enemy_attack(warrior, table, make_rng(value=0.8))
    assert result.move == "Cold Touch"
