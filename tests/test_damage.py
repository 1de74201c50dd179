"""
Tests for the damage formulas and monster move selection.
"""

import pytest
from deathsgame.combat.damage import (
    basic_attack_damage,
    monster_attack_damage,
    revive_hp,
    roll_jitter,
    skill_damage,
    skill_heal,
    special_move_damage,
)
from deathsgame.combat.monster_ai import MonsterMove, MoveTable
from pydantic import ValidationError


def test_basic_attack_formula():
    """
    Test the basic attack with main stat 20, level 5, defense 10 and jitter 3.
    """
    assert basic_attack_damage(20, 5, 10, 3) == 43


def test_damage_never_drops_below_one():
    """
    Test that every formula deals at least one point.
    """
    assert basic_attack_damage(1, 1, 500, 0) == 1
    assert monster_attack_damage(5, 50) == 1
    assert special_move_damage(5, 0, 100) == 1
    assert skill_damage(0, 1, 2, 1, 300) == 1
    assert skill_heal(0, 0, 2) == 1


def test_monster_formulas():
    """
    Test the plain and special monster attacks.
    """
    assert monster_attack_damage(20, 8) == 12
    assert special_move_damage(20, 10, 9) == 26


def test_skill_formulas():
    """
    Test skill damage and healing scaling.
    """
    assert skill_damage(12, 15, 2, 3, 10) == 12 + 30 + 6 - 10
    assert skill_heal(10, 18, 1) == 28


def test_revive_hp_rounds():
    """
    Test that resurrection HP is rounded to the nearest point.
    """
    assert revive_hp(100, 0.6) == 60
    assert revive_hp(95, 0.6) == 57
    assert revive_hp(151, 0.6) == 91


def test_roll_jitter_uses_randrange(make_rng):
    """
    Test that the jitter comes from the given random source.
    """
    assert roll_jitter(make_rng(jitter=5)) == 5


@pytest.fixture
def mirror_table():
    return MoveTable(
        moves=[
            MonsterMove(name="Mirror Strike", bonus=10, weight=0.5, halve_defense=True),
            MonsterMove(name="Attack", weight=0.5, halve_defense=True),
        ]
    )


def test_move_table_respects_forced_draws(mirror_table, make_rng):
    """
    Test that the draw is compared against cumulative weights.
    """
    assert mirror_table.choose(make_rng(value=0.1)).name == "Mirror Strike"
    assert mirror_table.choose(make_rng(value=0.49)).name == "Mirror Strike"
    assert mirror_table.choose(make_rng(value=0.5)).name == "Attack"
    assert mirror_table.choose(make_rng(value=0.99)).name == "Attack"


def test_special_move_halves_defense(mirror_table):
    """
    Test the damage of special moves against a hero.
    """
    strike, attack = mirror_table.moves
    assert strike.damage(atk=20, hero_def=10) == 25
    assert attack.damage(atk=20, hero_def=10) == 15
    assert MonsterMove(name="Attack").damage(atk=20, hero_def=10) == 10


def test_move_table_needs_a_move():
    """
    Test that an empty move table is rejected.
    """
    with pytest.raises(ValidationError):
        MoveTable(moves=[])
