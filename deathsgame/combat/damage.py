"""
Damage module for the combat engine.

Holds the exact damage formulas used by heroes, monsters and skills, and the
report returned by the damage intake path.
"""

import random

from pydantic import BaseModel, Field

# Basic attacks add a uniform jitter in [0, ATTACK_JITTER).
ATTACK_JITTER = 8


class DamageReport(BaseModel):
    """The outcome of sending damage through a combatant's intake path."""

    requested: int = Field(
        description="Damage that reached the combatant before shields.",
    )
    absorbed: int = Field(
        0,
        ge=0,
        description="Damage soaked up by active shields.",
    )
    taken: int = Field(
        0,
        ge=0,
        description="Damage subtracted from HP.",
    )


def roll_jitter(rng: random.Random) -> int:
    """Draws the basic-attack jitter from the given random source."""
    return rng.randrange(ATTACK_JITTER)


def basic_attack_damage(main_stat: int, level: int, enemy_def: int, jitter: int) -> int:
    """
    Damage of a hero basic attack before the mark bonus.

    Args:
        main_stat (int): STR for melee classes, INT for casters.
        level (int): The hero level.
        enemy_def (int): The defense of the target.
        jitter (int): The random jitter in [0, 8).

    Returns:
        int: `max(1, main_stat*2 + level*2 - enemy_def + jitter)`.

    """
    return max(1, main_stat * 2 + level * 2 - enemy_def + jitter)


def monster_attack_damage(atk: int, hero_def: int) -> int:
    """Damage of a plain monster attack: `max(1, atk - hero_def)`."""
    return max(1, atk - hero_def)


def special_move_damage(atk: int, bonus: int, hero_def: int) -> int:
    """Damage of a boss special move: `max(1, atk + bonus - hero_def // 2)`."""
    return max(1, atk + bonus - hero_def // 2)


def skill_damage(
    power: int,
    stat: int,
    stat_scaling: int,
    level: int,
    enemy_def: int,
) -> int:
    """
    Damage of an offensive skill before the mark bonus.

    Follows the same floor convention as basic attacks.

    Args:
        power (int): The skill power.
        stat (int): The caster stat at the skill's stat index.
        stat_scaling (int): Multiplier applied to the stat.
        level (int): The caster level.
        enemy_def (int): The effective defense of the target.

    Returns:
        int: `max(1, power + stat*stat_scaling + level*2 - enemy_def)`.

    """
    return max(1, power + stat * stat_scaling + level * 2 - enemy_def)


def skill_heal(power: int, stat: int, stat_scaling: int) -> int:
    """Healing of a restorative skill: `max(1, power + stat*stat_scaling)`."""
    return max(1, power + stat * stat_scaling)


def revive_hp(max_hp: int, ratio: float) -> int:
    """HP restored by a resurrection, rounded to the nearest integer."""
    return int(round(max_hp * ratio))
