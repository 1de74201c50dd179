"""
Hero module for the combat engine.

Defines the player-controlled combatant: class-driven stats, mana, level and
experience, the private skill catalog with its cooldowns, the basic attack,
skill selection checks and the per-turn class passives.
"""

import random
from typing import TYPE_CHECKING

from deathsgame.actions.skill_catalog import SkillCatalog
from deathsgame.actions.skill_execution import SkillOutcome, execute_skill
from deathsgame.combat.damage import basic_attack_damage, revive_hp, roll_jitter
from deathsgame.core.constants import EffectName, HeroClass, StatType
from deathsgame.core.error_handling import InsufficientResource, InvalidAction
from deathsgame.core.logging import log_debug, log_info
from deathsgame.core.utils import make_bar
from pydantic import BaseModel, Field

from .combatant import Combatant
from .hero_class import HeroClassConfig

if TYPE_CHECKING:
    from deathsgame.core.content import ContentRepository

# Experience needed to gain one level.
EXP_PER_LEVEL = 100


class AttackResult(BaseModel):
    """What a basic attack did."""

    damage: int = Field(
        description="Damage sent at the target, mark bonus included.",
    )
    absorbed: int = Field(
        0,
        description="Part of the damage soaked up by shields.",
    )
    mana_restored: int = Field(
        0,
        description="Mana the hero regained by landing the hit.",
    )
    target_defeated: bool = Field(
        False,
        description="True if the target's HP dropped to zero or below.",
    )


class Hero(Combatant):
    """
    The player character. Persists across every encounter of one life.

    Attributes:
        config (HeroClassConfig):
            The class row the hero was built from.
        level (int):
            The current level, starting at 1.
        exp (int):
            Experience towards the next level, in [0, 100) after leveling.
        mana (int):
            Current mana.
        max_mana (int):
            Maximum mana.
        skills (SkillCatalog):
            The hero's own copy of the class skills.
        cooldowns (list[int]):
            Turns left before each skill can be used, aligned with `skills`.

    """

    config: HeroClassConfig
    level: int
    exp: int
    mana: int
    max_mana: int
    skills: SkillCatalog
    cooldowns: list[int]

    def __init__(
        self,
        name: str,
        config: HeroClassConfig,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, config.max_hp, list(config.base_stats))
        self.config = config
        self.rng = rng or random.Random()
        self.level = 1
        self.exp = 0
        self.max_mana = config.max_mana
        self.mana = config.max_mana
        self.skills = SkillCatalog.for_class(config)
        self.cooldowns = [0] * len(self.skills)
        self._apply_passive_bonuses()

    # ============================================================================
    # IDENTITY
    # ============================================================================

    @property
    def hero_class(self) -> HeroClass:
        return self.config.hero_class

    @property
    def colored_name(self) -> str:
        return f"{self.hero_class.emoji} [bold green]{self.name}[/]"

    @property
    def main_stat(self) -> StatType:
        """The stat used by basic attacks."""
        return self.config.main_stat

    # ============================================================================
    # RESOURCES
    # ============================================================================

    def restore_mana(self, amount: int) -> int:
        """
        Restores mana up to the maximum.

        Returns:
            int: The mana actually restored.

        """
        before = self.mana
        self.mana = min(self.max_mana, self.mana + max(0, amount))
        return self.mana - before

    def restore_full(self) -> None:
        """Refills HP and mana, as after a boss or when leaving a dungeon."""
        self.hp = self.max_hp
        self.mana = self.max_mana

    def try_resurrect(self, ratio: float) -> bool:
        """
        Consumes an active Resurrection effect to bring the hero back.

        Args:
            ratio (float):
                Fraction of maximum HP restored.

        Returns:
            bool: True if the hero was revived.

        """
        effect = self.effects.find_active(EffectName.RESURRECTION)
        if effect is None:
            return False
        self.hp = revive_hp(self.max_hp, ratio)
        self.effects.remove(effect)
        log_info(f"{self.name} rises again", {"hp": self.hp, "max_hp": self.max_hp})
        return True

    # ============================================================================
    # EXPERIENCE
    # ============================================================================

    def gain_exp(self, amount: int) -> int:
        """
        Adds experience, leveling up every 100 points.

        Args:
            amount (int):
                The experience gained.

        Returns:
            int: The number of levels gained.

        """
        self.exp += max(0, amount)
        levels = 0
        while self.exp >= EXP_PER_LEVEL:
            self.exp -= EXP_PER_LEVEL
            self._level_up()
            levels += 1
        return levels

    def _level_up(self) -> None:
        self.level += 1
        for stat, amount in self.config.level_growth.items():
            self.stats[stat] += amount
        self.max_hp += self.config.hp_per_level
        self.max_mana += self.config.mana_per_level
        self._apply_passive_bonuses()
        self.restore_full()
        log_info(
            f"{self.name} reached level {self.level}",
            {"stats": list(self.stats), "max_hp": self.max_hp, "max_mana": self.max_mana},
        )

    def _apply_passive_bonuses(self) -> None:
        for stat, amount in self.config.passive_stat_bonus.items():
            self.stats[stat] += amount

    # ============================================================================
    # TURN HOOKS
    # ============================================================================

    def process_turn_passives(self) -> str | None:
        regen = self.config.passive_regen
        if regen is None:
            return None
        amount = regen.amount(self.level)
        passive = self.skills.passive
        source = passive.colored_name if passive else "Passive"
        if regen.resource == "mana":
            restored = self.restore_mana(amount)
            return f"{source}: you recover {restored} mana."
        restored = self.heal(amount)
        return f"{source}: you recover {restored} HP."

    def tick_skill_cooldowns(self) -> None:
        """Lowers every running cooldown by one turn."""
        self.cooldowns = [max(0, cooldown - 1) for cooldown in self.cooldowns]

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def attack(self, target: Combatant, jitter: int | None = None) -> AttackResult:
        """
        Performs a basic attack with the class main stat.

        Args:
            target (Combatant):
                The opponent.
            jitter (int | None):
                The random bonus in [0, 8). Rolled from the hero's random
                source when not given.

        Returns:
            AttackResult:
                The damage dealt and the mana regained.

        """
        if jitter is None:
            jitter = roll_jitter(self.rng)
        damage = basic_attack_damage(
            self.stat(self.main_stat),
            self.level,
            target.defense,
            jitter,
        )
        damage += target.effects.mark_bonus()
        report = target.take_damage(damage)
        restored = self.restore_mana(self.config.mana_on_hit)
        return AttackResult(
            damage=damage,
            absorbed=report.absorbed,
            mana_restored=restored,
            target_defeated=target.is_dead(),
        )

    def check_skill(self, index: int) -> None:
        """
        Validates a skill selection without changing anything.

        Args:
            index (int):
                The catalog index of the skill.

        Raises:
            InvalidAction:
                If the index is out of range or names a passive skill.
            InsufficientResource:
                If the skill is on cooldown or the hero lacks the mana.

        """
        if not 0 <= index < len(self.skills):
            raise InvalidAction(
                f"There is no skill number {index}.",
                {"index": index, "skills": len(self.skills)},
            )
        skill = self.skills[index]
        if skill.is_passive:
            raise InvalidAction(
                f"{skill.name} is a passive skill.",
                {"index": index, "skill": skill.name},
            )
        if self.cooldowns[index] > 0:
            raise InsufficientResource(
                f"{skill.name} is on cooldown for {self.cooldowns[index]} more turn(s).",
                {"skill": skill.name, "cooldown": self.cooldowns[index]},
            )
        if self.mana < skill.mana_cost:
            raise InsufficientResource(
                f"Not enough mana for {skill.name}.",
                {"skill": skill.name, "mana": self.mana, "cost": skill.mana_cost},
            )

    def use_skill(self, index: int, target: Combatant | None) -> SkillOutcome:
        """
        Pays for and resolves a skill.

        Raises:
            InvalidAction, InsufficientResource:
                See `check_skill`. Nothing is mutated when raised.

        """
        self.check_skill(index)
        skill = self.skills[index]
        self.mana -= skill.mana_cost
        self.cooldowns[index] = skill.cooldown
        log_debug(
            f"{self.name} uses {skill.name}",
            {"mana": self.mana, "cooldown": skill.cooldown},
        )
        return execute_skill(self, skill, target)

    # ============================================================================
    # DISPLAY
    # ============================================================================

    def get_status_line(self, show_bars: bool = True) -> str:
        hp_bar = make_bar(self.hp, self.max_hp, color="green") if show_bars else ""
        mana_bar = make_bar(self.mana, self.max_mana, color="blue") if show_bars else ""
        return (
            f"{self.colored_name} [dim]Lv.{self.level} {self.config.title}[/] "
            f"| [green]HP:{max(self.hp, 0):>3}/{self.max_hp}[/]{hp_bar} "
            f"| [blue]MP:{self.mana:>3}/{self.max_mana}[/]{mana_bar} "
            f"| {self.effects.colored_description()}"
        )

    def get_stat_summary(self) -> str:
        """The stat block as a single line, e.g. `STR 15 | INT 6 | ...`."""
        return " | ".join(f"{stat.display_name} {self.stats[stat]}" for stat in StatType)

    def get_skill_summary(self) -> list[str]:
        """One line per skill with its cost and remaining cooldown."""
        lines = []
        for index, skill in enumerate(self.skills):
            if skill.is_passive:
                lines.append(f"{skill.colored_name} (passive): {skill.desc}")
                continue
            cooldown = self.cooldowns[index]
            ready = "[green]ready[/]" if cooldown == 0 else f"[yellow]{cooldown} turn(s)[/]"
            lines.append(f"{skill.colored_name} [{skill.mana_cost} MP] {ready}: {skill.desc}")
        return lines

    def __repr__(self) -> str:
        return (
            f"Hero(name='{self.name}', class={self.hero_class}, level={self.level}, "
            f"hp={self.hp}/{self.max_hp}, mana={self.mana}/{self.max_mana})"
        )


def new_hero(
    name: str,
    hero_class: HeroClass | str,
    content: "ContentRepository | None" = None,
    rng: random.Random | None = None,
) -> Hero:
    """
    Creates a level 1 hero of the given class.

    Unknown class ids fall back to the DEFAULT profile.

    Args:
        name (str):
            The hero's name.
        hero_class (HeroClass | str):
            The class identifier.
        content (ContentRepository | None):
            Where class data comes from. Defaults to the bundled content.
        rng (random.Random | None):
            Random source for attack jitter.

    Returns:
        Hero: The new hero at full HP and mana.

    """
    if content is None:
        from deathsgame.core.content import ContentRepository

        content = ContentRepository()
    return Hero(name, content.get_hero_class(hero_class), rng=rng)
