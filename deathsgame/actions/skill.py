"""
Skill module for the combat engine.

Defines the read-only skill templates heroes carry: stat scaling, mana cost,
cooldown, status effect payloads and the optional ultimate configuration.
"""

from typing import Any

from deathsgame.core.constants import SkillKind, StatType
from deathsgame.effects import StatusEffect
from pydantic import BaseModel, ConfigDict, Field, field_validator


class UltimateSpec(BaseModel):
    """
    Class-specific tuning for ultimate skills.

    Ultimates go through the same execution contract as every other skill;
    these knobs only reshape the direct damage or healing they resolve.
    """

    model_config = ConfigDict(frozen=True)

    hits: int = Field(
        1,
        ge=1,
        description="Number of times the direct damage is dealt.",
    )
    defense_pierce: float = Field(
        0.0,
        ge=0.0,
        le=1.0,
        description="Fraction of the target defense ignored.",
    )
    execute_threshold: float = Field(
        0.0,
        ge=0.0,
        le=1.0,
        description="Target HP ratio at or below which the execute multiplier applies.",
    )
    execute_multiplier: float = Field(
        1.0,
        ge=1.0,
        description="Damage multiplier against targets under the execute threshold.",
    )
    self_heal_ratio: float = Field(
        0.0,
        ge=0.0,
        description="Fraction of the damage dealt returned to the caster as HP.",
    )
    restore_mana: int = Field(
        0,
        ge=0,
        description="Flat mana returned to the caster after the skill resolves.",
    )


class Skill(BaseModel):
    """
    A hero skill: active, passive or ultimate.

    Skills are shared templates and never mutate. The effects they list are
    cloned every time the skill is used.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the skill.",
    )
    desc: str = Field(
        "",
        description="A short description shown in menus.",
    )
    power: int = Field(
        0,
        description="Flat power added to the scaled stat.",
    )
    stat_index: StatType = Field(
        StatType.STR,
        description="Index of the stat the skill scales with (0-STR ... 4-LUK).",
    )
    stat_scaling: int = Field(
        2,
        ge=0,
        description="Multiplier applied to the scaling stat.",
    )
    mana_cost: int = Field(
        0,
        ge=0,
        description="Mana deducted when the skill is used.",
    )
    cooldown: int = Field(
        0,
        ge=0,
        description="Turns before the skill can be used again.",
    )
    kind: SkillKind = Field(
        SkillKind.DAMAGE,
        description="The direct action resolved after effects are applied.",
    )
    effects: list[StatusEffect] = Field(
        default_factory=list,
        description="Status effect templates applied on use.",
    )
    is_passive: bool = Field(
        False,
        description="Passive skills are never selectable.",
    )
    is_ultimate: bool = Field(
        False,
        description="Ultimate skills carry class-specific tuning.",
    )
    ultimate: UltimateSpec | None = Field(
        None,
        description="Tuning used when the skill is an ultimate.",
    )

    @field_validator("stat_index", mode="before")
    @classmethod
    def _parse_stat_index(cls, value: Any) -> Any:
        if isinstance(value, str):
            return StatType[value.upper()]
        return value

    def model_post_init(self, _: Any) -> None:
        if self.ultimate is not None and not self.is_ultimate:
            raise ValueError(f"Skill '{self.name}' has ultimate data but is not an ultimate.")

    @property
    def colored_name(self) -> str:
        if self.is_passive:
            return f"[dim cyan]{self.name}[/]"
        if self.is_ultimate:
            return f"[bold magenta]{self.name}[/]"
        return f"[bold blue]{self.name}[/]"

    @property
    def menu_label(self) -> str:
        return f"{self.name} (Ultimate)" if self.is_ultimate else self.name

    def instantiate_effects(self) -> list[StatusEffect]:
        """Fresh copies of the effect templates, ready to be enqueued."""
        return [effect.clone() for effect in self.effects]
