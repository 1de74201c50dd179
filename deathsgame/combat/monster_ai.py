"""
Monster move selection for the combat engine.

Enemies pick their move from a fixed, weighted table chosen by the kind of
encounter. Plain monsters have a single move; the mirror shadow and DEATH
mix a plain strike with a stronger special.
"""

import random

from pydantic import BaseModel, Field

from .damage import monster_attack_damage, special_move_damage


class MonsterMove(BaseModel):
    """One entry of a monster move table."""

    name: str = Field(
        description="The name of the move.",
    )
    verb: str = Field(
        "attacks",
        description="Narration used when the move is performed.",
    )
    bonus: int = Field(
        0,
        description="Flat damage added to the monster attack.",
    )
    weight: float = Field(
        1.0,
        gt=0.0,
        description="Relative probability of picking the move.",
    )
    halve_defense: bool = Field(
        False,
        description="Special moves only subtract half of the hero defense.",
    )

    def damage(self, atk: int, hero_def: int) -> int:
        """
        Damage of the move against a hero.

        Args:
            atk (int): The monster attack.
            hero_def (int): The hero DEF stat.

        Returns:
            int: The damage, never below 1.

        """
        if self.halve_defense:
            return special_move_damage(atk, self.bonus, hero_def)
        return monster_attack_damage(atk + self.bonus, hero_def)


class MoveTable(BaseModel):
    """A weighted list of moves for one kind of encounter."""

    moves: list[MonsterMove] = Field(
        min_length=1,
        description="The moves to pick from.",
    )

    @property
    def total_weight(self) -> float:
        return sum(move.weight for move in self.moves)

    def choose(self, rng: random.Random) -> MonsterMove:
        """
        Picks a move with probability proportional to its weight.

        A single `rng.random()` draw is compared against the cumulative
        weights, so a forced draw selects a predictable move.

        Args:
            rng (random.Random): The random source.

        Returns:
            MonsterMove: The selected move.

        """
        if len(self.moves) == 1:
            return self.moves[0]
        roll = rng.random() * self.total_weight
        cumulative = 0.0
        for move in self.moves:
            cumulative += move.weight
            if roll < cumulative:
                return move
        return self.moves[-1]


BASIC_ATTACK_TABLE = MoveTable(moves=[MonsterMove(name="Attack")])
