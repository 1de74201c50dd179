"""
Combatant module for the combat engine.

Defines the capability set shared by heroes and monsters: a five-slot stat
block, an HP model, a status effect queue, damage intake and the per-turn
passive hook.
"""

from abc import ABC, abstractmethod

from deathsgame.combat.damage import DamageReport
from deathsgame.core.constants import StatType
from deathsgame.core.logging import log_debug
from deathsgame.core.utils import make_bar
from deathsgame.effects import EffectQueue, EffectTick


class Combatant(ABC):
    """
    Anything that can stand in an encounter.

    HP may go negative for a moment after a killing blow; `hp <= 0` always
    reads as dead.

    Attributes:
        name (str):
            The display name.
        hp (int):
            Current hit points.
        max_hp (int):
            Maximum hit points.
        stats (list[int]):
            The stat block, indexed by StatType: STR, INT, AGI, DEF, LUK.
        effects (EffectQueue):
            Active buffs and debuffs.

    """

    name: str
    hp: int
    max_hp: int
    stats: list[int]
    effects: EffectQueue

    def __init__(self, name: str, max_hp: int, stats: list[int]) -> None:
        if len(stats) != len(StatType):
            raise ValueError(f"Expected {len(StatType)} stats, got {len(stats)}.")
        self.name = name
        self.max_hp = max_hp
        self.hp = max_hp
        self.stats = list(stats)
        self.effects = EffectQueue(owner=self)

    # === Stat accessors ===

    def stat(self, stat: StatType | int) -> int:
        """Returns the value of a stat by index."""
        return self.stats[int(stat)]

    @property
    def STR(self) -> int:
        return self.stats[StatType.STR]

    @property
    def INT(self) -> int:
        return self.stats[StatType.INT]

    @property
    def AGI(self) -> int:
        return self.stats[StatType.AGI]

    @property
    def DEF(self) -> int:
        return self.stats[StatType.DEF]

    @property
    def defense(self) -> int:
        """The defense value attackers subtract from their damage."""
        return self.stats[StatType.DEF]

    @property
    @abstractmethod
    def colored_name(self) -> str:
        """The name with rich color markup."""

    # === HP model ===

    def is_alive(self) -> bool:
        return self.hp > 0

    def is_dead(self) -> bool:
        return self.hp <= 0

    def take_damage(self, amount: int) -> DamageReport:
        """
        Sends damage through shields, then into HP.

        HP is not floored here; callers read `hp <= 0` as dead.

        Args:
            amount (int):
                The incoming damage.

        Returns:
            DamageReport:
                How much was absorbed by shields and how much reached HP.

        """
        amount = max(0, amount)
        absorbed = self.effects.absorb(amount)
        taken = amount - absorbed
        if taken > 0:
            self.hp -= taken
        log_debug(
            f"{self.name} takes {taken} damage",
            {"requested": amount, "absorbed": absorbed, "hp": self.hp},
        )
        return DamageReport(requested=amount, absorbed=absorbed, taken=taken)

    def heal(self, amount: int) -> int:
        """
        Restores HP up to the maximum.

        Returns:
            int: The HP actually restored.

        """
        before = self.hp
        self.hp = min(self.max_hp, self.hp + max(0, amount))
        return self.hp - before

    # === Status effects ===

    def is_stunned(self) -> bool:
        return self.effects.is_stunned()

    def resolve_effects(self) -> list[EffectTick]:
        """Resolves the status effects for this turn."""
        return self.effects.resolve_turn()

    @abstractmethod
    def process_turn_passives(self) -> str | None:
        """
        Applies per-turn passives.

        Returns:
            str | None: A line of narration, if anything happened.

        """

    # === Display ===

    def get_status_line(self, show_bars: bool = True) -> str:
        """A one-line rich summary: name, HP and active effects."""
        hp_bar = make_bar(self.hp, self.max_hp, color="green", length=10) if show_bars else ""
        return (
            f"{self.colored_name} | [green]HP:{max(self.hp, 0):>3}/{self.max_hp}[/]{hp_bar} "
            f"| {self.effects.colored_description()}"
        )

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', hp={self.hp}/{self.max_hp})"
