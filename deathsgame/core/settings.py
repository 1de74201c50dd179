"""
Combat tunables.

Flee odds, experience rewards and the other numbers the encounter loop
consults, gathered in one validated model so callers can override them per
encounter.
"""

from deathsgame.core.constants import EncounterKind
from pydantic import BaseModel, Field


class ExpReward(BaseModel):
    """Experience bases for a kill, before the level bonus."""

    attack: int = Field(
        0,
        ge=0,
        description="Base experience when the killing blow is a basic attack.",
    )
    skill: int = Field(
        0,
        ge=0,
        description="Base experience when the killing blow is a skill.",
    )


def _default_flee_chance() -> dict[EncounterKind, float]:
    return {
        EncounterKind.REGULAR: 0.5,
        EncounterKind.AMBUSH: 0.5,
        EncounterKind.BOSS: 0.2,
        EncounterKind.MIRROR: 0.0,
        EncounterKind.FINAL: 0.0,
    }


def _default_exp_rewards() -> dict[EncounterKind, ExpReward]:
    return {
        EncounterKind.REGULAR: ExpReward(attack=8, skill=12),
        EncounterKind.AMBUSH: ExpReward(attack=8, skill=12),
        EncounterKind.BOSS: ExpReward(attack=22, skill=28),
        EncounterKind.MIRROR: ExpReward(),
        EncounterKind.FINAL: ExpReward(),
    }


class CombatSettings(BaseModel):
    """
    Numbers the encounter loop consults.
    """

    flee_chance: dict[EncounterKind, float] = Field(
        default_factory=_default_flee_chance,
        description="Probability that a Run action succeeds, per encounter kind.",
    )
    exp_rewards: dict[EncounterKind, ExpReward] = Field(
        default_factory=_default_exp_rewards,
        description="Experience bases per encounter kind.",
    )
    exp_per_level: int = Field(
        2,
        ge=0,
        description="Experience added per point of the caller's level parameter.",
    )
    resurrection_ratio: float = Field(
        0.6,
        gt=0.0,
        le=1.0,
        description="Fraction of maximum HP restored by a Resurrection effect.",
    )
    max_reprompts: int = Field(
        20,
        ge=1,
        description="Rejected actions tolerated in one slot before the hero hesitates.",
    )

    def flee_probability(self, kind: EncounterKind) -> float:
        return self.flee_chance.get(kind, 0.0)

    def exp_for_kill(self, kind: EncounterKind, by_skill: bool, min_level: int) -> int:
        """
        Experience for defeating the opponent.

        Args:
            kind (EncounterKind): The kind of encounter.
            by_skill (bool): True if the killing blow was a skill.
            min_level (int): The caller's level parameter (dungeon minimum level).

        Returns:
            int: `base + exp_per_level * min_level`, or 0 for kinds without rewards.

        """
        reward = self.exp_rewards.get(kind, ExpReward())
        base = reward.skill if by_skill else reward.attack
        if base == 0:
            return 0
        return base + self.exp_per_level * min_level
