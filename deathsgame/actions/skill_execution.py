"""
Skill execution for the combat engine.

Resolves a skill that already passed its cooldown and mana checks: clones its
effects onto the caster or the target, then resolves its direct damage or
healing, reshaped by the ultimate tuning when present.
"""

from typing import TYPE_CHECKING

from deathsgame.combat.damage import skill_damage, skill_heal
from deathsgame.core.constants import GLOBAL_VERBOSE_LEVEL, SkillKind
from deathsgame.core.logging import log_debug
from deathsgame.core.utils import cprint
from pydantic import BaseModel, Field

from .skill import Skill, UltimateSpec

if TYPE_CHECKING:
    from deathsgame.character.combatant import Combatant
    from deathsgame.character.hero import Hero


class SkillOutcome(BaseModel):
    """What a skill did once it resolved."""

    skill: str = Field(
        description="The name of the skill used.",
    )
    damage: int = Field(
        0,
        description="Total damage sent at the target, mark bonus included.",
    )
    absorbed: int = Field(
        0,
        description="Part of the damage soaked up by the target's shields.",
    )
    healed: int = Field(
        0,
        description="HP restored to the caster.",
    )
    mana_restored: int = Field(
        0,
        description="Mana returned to the caster by the skill.",
    )
    buffs: list[str] = Field(
        default_factory=list,
        description="Effects added to the caster.",
    )
    debuffs: list[str] = Field(
        default_factory=list,
        description="Effects added to the target.",
    )
    target_defeated: bool = Field(
        False,
        description="True if the target's HP dropped to zero or below.",
    )


def _apply_effects(
    caster: "Hero",
    skill: Skill,
    target: "Combatant | None",
    outcome: SkillOutcome,
) -> None:
    for effect in skill.instantiate_effects():
        if effect.is_buff:
            caster.effects.enqueue(effect)
            outcome.buffs.append(effect.name)
            cprint(f"    {effect.emoji} You gain effect: {effect.colored_name} ({effect.duration} turns)")
        elif target is not None:
            target.effects.enqueue(effect)
            outcome.debuffs.append(effect.name)
            cprint(
                f"    {effect.emoji} {target.colored_name} is afflicted with "
                f"{effect.colored_name} ({effect.duration} turns)"
            )


def _resolve_damage(
    caster: "Hero",
    skill: Skill,
    target: "Combatant",
    outcome: SkillOutcome,
) -> None:
    tuning = skill.ultimate or UltimateSpec()
    stat = caster.stat(skill.stat_index)
    pierced = int(target.defense * tuning.defense_pierce)
    per_hit = skill_damage(
        skill.power,
        stat,
        skill.stat_scaling,
        caster.level,
        target.defense - pierced,
    )
    if tuning.execute_threshold > 0 and target.hp <= target.max_hp * tuning.execute_threshold:
        per_hit = int(per_hit * tuning.execute_multiplier)
        cprint(f"    💀 {target.colored_name} is vulnerable! {skill.colored_name} strikes true.")

    for hit in range(tuning.hits):
        if hit > 0 and target.is_dead():
            break
        damage = per_hit + target.effects.mark_bonus()
        report = target.take_damage(damage)
        outcome.damage += damage
        outcome.absorbed += report.absorbed
        cprint(f"    ✨ {skill.colored_name} hits {target.colored_name} for {damage} damage.")
        if report.absorbed and GLOBAL_VERBOSE_LEVEL >= 1:
            cprint(f"    🛡️ Shield absorbed {report.absorbed} damage!")

    if tuning.self_heal_ratio > 0:
        outcome.healed += caster.heal(int(outcome.damage * tuning.self_heal_ratio))
        if outcome.healed:
            cprint(f"    💚 You recover {outcome.healed} HP.")


def execute_skill(
    caster: "Hero",
    skill: Skill,
    target: "Combatant | None",
) -> SkillOutcome:
    """
    Resolves a skill whose costs were already paid.

    Args:
        caster (Hero):
            The hero using the skill.
        skill (Skill):
            The skill template.
        target (Combatant | None):
            The opponent, if any. Debuffs are dropped without a target.

    Returns:
        SkillOutcome:
            The damage, healing and effects the skill produced.

    """
    outcome = SkillOutcome(skill=skill.name)
    cprint(f"    🌀 You use {skill.colored_name}!")

    _apply_effects(caster, skill, target, outcome)

    if skill.kind is SkillKind.DAMAGE and target is not None:
        _resolve_damage(caster, skill, target, outcome)
    elif skill.kind is SkillKind.HEAL:
        amount = skill_heal(skill.power, caster.stat(skill.stat_index), skill.stat_scaling)
        outcome.healed += caster.heal(amount)
        cprint(f"    💚 You recover {outcome.healed} HP.")

    if skill.ultimate is not None and skill.ultimate.restore_mana:
        outcome.mana_restored = caster.restore_mana(skill.ultimate.restore_mana)

    outcome.target_defeated = target is not None and target.is_dead()
    log_debug(
        f"Skill {skill.name} resolved",
        {
            "damage": outcome.damage,
            "healed": outcome.healed,
            "buffs": outcome.buffs,
            "debuffs": outcome.debuffs,
        },
    )
    return outcome
