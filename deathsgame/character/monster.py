"""
Monster module for the combat engine.

Defines the enemies the hero fights and the pure generators that derive their
stats from a level (or from the hero, for the mirror shadow).
"""

import random
from typing import TYPE_CHECKING

from deathsgame.combat.monster_ai import BASIC_ATTACK_TABLE, MonsterMove, MoveTable
from deathsgame.core.constants import MonsterKind
from deathsgame.core.logging import log_debug
from pydantic import BaseModel, Field

from .combatant import Combatant

if TYPE_CHECKING:
    from .hero import Hero


class MonsterAttackResult(BaseModel):
    """What a monster move did to the hero."""

    move: str = Field(
        description="The name of the move performed.",
    )
    verb: str = Field(
        "attacks",
        description="Narration used for the move.",
    )
    damage: int = Field(
        description="Damage sent at the hero.",
    )
    absorbed: int = Field(
        0,
        description="Part of the damage soaked up by the hero's shields.",
    )
    target_defeated: bool = Field(
        False,
        description="True if the hero's HP dropped to zero or below.",
    )


class Monster(Combatant):
    """
    An enemy. Created fresh for each encounter and discarded afterwards.

    The DEF slot of the stat block mirrors `defense`, and the STR slot holds
    the attack value.
    """

    def __init__(self, name: str, hp: int, atk: int, defense: int) -> None:
        super().__init__(name, hp, [atk, 0, 0, defense, 0])

    @property
    def atk(self) -> int:
        return self.stats[0]

    @property
    def colored_name(self) -> str:
        return f"[bold red]{self.name}[/]"

    def process_turn_passives(self) -> str | None:
        return None

    def perform(self, move: MonsterMove, hero: "Hero") -> MonsterAttackResult:
        """
        Performs a move against the hero.

        Args:
            move (MonsterMove):
                The move to perform.
            hero (Hero):
                The target.

        Returns:
            MonsterAttackResult:
                The damage dealt.

        """
        damage = move.damage(self.atk, hero.defense)
        report = hero.take_damage(damage)
        log_debug(
            f"{self.name} uses {move.name}",
            {"damage": damage, "absorbed": report.absorbed, "hero_hp": hero.hp},
        )
        return MonsterAttackResult(
            move=move.name,
            verb=move.verb,
            damage=damage,
            absorbed=report.absorbed,
            target_defeated=hero.is_dead(),
        )

    def enemy_attack(
        self,
        hero: "Hero",
        table: MoveTable = BASIC_ATTACK_TABLE,
        rng: random.Random | None = None,
    ) -> MonsterAttackResult:
        """Picks a move from the table and performs it."""
        move = table.choose(rng or random.Random())
        return self.perform(move, hero)

    # ============================================================================
    # GENERATORS
    # ============================================================================

    @classmethod
    def generate(cls, base_name: str, level: int) -> "Monster":
        """A regular dungeon monster."""
        return cls(f"{base_name} Lv.{level}", 40 + level * 3, 8 + level, 5 + level // 2)

    @classmethod
    def boss(cls, boss_name: str, level: int) -> "Monster":
        """A dungeon boss."""
        return cls(f"{boss_name} (Boss Lv.{level})", 120 + level * 7, 15 + level * 2, 10 + level)

    @classmethod
    def create_shadow(cls, hero: "Hero") -> "Monster":
        """
        The mirror boss, built from a snapshot of the hero.

        The shadow copies the hero's current numbers; later changes to the
        hero do not reach it.
        """
        return cls(
            f"{hero.name}'s Shadow",
            hero.max_hp,
            hero.STR + hero.level * 2,
            hero.DEF + hero.level,
        )

    @classmethod
    def death_boss(cls, level: int) -> "Monster":
        """The final boss."""
        return cls("DEATH", 300 + level * 10, 30 + level * 2, 20 + level)

    def __repr__(self) -> str:
        return (
            f"Monster(name='{self.name}', hp={self.hp}/{self.max_hp}, "
            f"atk={self.atk}, defense={self.defense})"
        )


def generate_monster(
    kind: MonsterKind | str,
    level: int,
    name: str | None = None,
    hero: "Hero | None" = None,
) -> Monster:
    """
    Creates a monster of the given kind.

    Args:
        kind (MonsterKind | str):
            One of `regular`, `boss`, `shadow` or `final_boss`.
        level (int):
            The level used by the stat formulas.
        name (str | None):
            Base name for regular monsters and bosses.
        hero (Hero | None):
            Required for `shadow`.

    Returns:
        Monster: A new monster at full HP.

    Raises:
        ValueError:
            If the kind is unknown or a shadow is requested without a hero.

    """
    kind = MonsterKind.parse(kind)
    if kind is MonsterKind.REGULAR:
        return Monster.generate(name or "Monster", level)
    if kind is MonsterKind.BOSS:
        return Monster.boss(name or "Guardian", level)
    if kind is MonsterKind.SHADOW:
        if hero is None:
            raise ValueError("A shadow can only be created from a hero.")
        return Monster.create_shadow(hero)
    return Monster.death_boss(level)
