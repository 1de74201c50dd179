"""
Hero class module for the combat engine.

Each hero class is a row in a data-driven capability table: base stats,
resource pools, the stat used by basic attacks, mana regained on hit, level
growth, passive behavior and the skill catalog.
"""

from typing import Any

from deathsgame.actions.skill import Skill
from deathsgame.core.constants import HeroClass, StatType
from pydantic import BaseModel, Field, field_validator


class PassiveRegen(BaseModel):
    """A per-turn passive that restores HP or mana by `base + level // per_levels`."""

    resource: str = Field(
        description="Either 'hp' or 'mana'.",
    )
    base: int = Field(
        ge=0,
        description="Flat amount restored each turn.",
    )
    per_levels: int = Field(
        2,
        ge=1,
        description="One extra point every this many levels.",
    )

    @field_validator("resource")
    @classmethod
    def _check_resource(cls, value: str) -> str:
        value = value.lower()
        if value not in ("hp", "mana"):
            raise ValueError(f"Unknown passive resource '{value}'.")
        return value

    def amount(self, level: int) -> int:
        return self.base + level // self.per_levels


class HeroClassConfig(BaseModel):
    """
    Represents a hero class with its stats, growth and skills.
    """

    hero_class: HeroClass = Field(
        description="The class identifier.",
    )
    title: str = Field(
        description="Display name of the mask.",
    )
    base_stats: list[int] = Field(
        description="Starting STR, INT, AGI, DEF, LUK.",
    )
    max_hp: int = Field(
        gt=0,
        description="Starting maximum HP.",
    )
    max_mana: int = Field(
        ge=0,
        description="Starting maximum mana.",
    )
    main_stat: StatType = Field(
        description="Stat used by basic attacks.",
    )
    mana_on_hit: int = Field(
        4,
        ge=0,
        description="Mana regained after landing a basic attack.",
    )
    level_growth: dict[StatType, int] = Field(
        default_factory=dict,
        description="Stat increases applied on every level up.",
    )
    passive_stat_bonus: dict[StatType, int] = Field(
        default_factory=dict,
        description="Stat bonus granted by the passive, applied at creation and every level up.",
    )
    passive_regen: PassiveRegen | None = Field(
        None,
        description="Per-turn passive restoration, if the class has one.",
    )
    hp_per_level: int = Field(
        35,
        description="Maximum HP gained per level.",
    )
    mana_per_level: int = Field(
        15,
        description="Maximum mana gained per level.",
    )
    skills: list[Skill] = Field(
        default_factory=list,
        description="The ordered skill catalog of the class.",
    )

    @field_validator("base_stats")
    @classmethod
    def _check_stats(cls, value: list[int]) -> list[int]:
        if len(value) != len(StatType):
            raise ValueError(f"base_stats must have {len(StatType)} entries.")
        return value

    @field_validator("main_stat", mode="before")
    @classmethod
    def _parse_main_stat(cls, value: Any) -> Any:
        if isinstance(value, str):
            return StatType[value.upper()]
        return value

    @field_validator("level_growth", "passive_stat_bonus", mode="before")
    @classmethod
    def _parse_stat_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                StatType[key.upper()] if isinstance(key, str) else key: amount
                for key, amount in value.items()
            }
        return value

    def build_skill_catalog(self) -> list[Skill]:
        """
        A private copy of the skill list for one hero.

        Returns:
            list[Skill]: Deep copies of the class skill templates, in order.

        """
        return [skill.model_copy(deep=True) for skill in self.skills]
