"""
Status effect module for the combat engine.

Defines the timed modifiers (buffs and debuffs) that skills attach to
combatants: poison, burn, heal, stun, shield, mark and resurrection.
"""

from deathsgame.core.constants import EffectName
from pydantic import BaseModel, Field


class StatusEffect(BaseModel):
    """
    A buff or debuff attached to a combatant for a number of turns.

    Templates live inside skills and are never enqueued directly: every
    application enqueues a fresh copy, so ticking the duration of one
    instance never touches the template or another combatant's copy.
    """

    name: str = Field(
        description="The name of the effect (e.g. 'Poison').",
    )
    description: str = Field(
        "",
        description="A brief description of the effect.",
    )
    duration: int = Field(
        ge=0,
        description="Turns remaining before the effect expires.",
    )
    magnitude: int = Field(
        0,
        description="Effect power (damage per turn, heal per turn, shield points...).",
    )
    is_buff: bool = Field(
        description="True if the effect goes on the caster, False if on the target.",
    )
    stat_target: str = Field(
        "HP",
        description="The stat the effect is about (e.g. 'HP', 'DEF').",
    )

    @property
    def kind(self) -> EffectName | None:
        """The mechanical effect this name maps to, if any."""
        for effect_name in EffectName:
            if effect_name.matches(self.name):
                return effect_name
        return None

    @property
    def color(self) -> str:
        """Returns the color string associated with this effect."""
        kind = self.kind
        if kind is not None:
            return kind.color
        return "bold green" if self.is_buff else "bold magenta"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this effect."""
        kind = self.kind
        return kind.emoji if kind is not None else "❔"

    @property
    def colored_name(self) -> str:
        """Returns the effect name with color formatting applied."""
        return f"[{self.color}]{self.name}[/]"

    def is_active(self) -> bool:
        """An effect is active while it has turns remaining."""
        return self.duration > 0

    def is_named(self, name: "str | EffectName") -> bool:
        """Case-insensitive comparison of the effect name."""
        other = name.value if isinstance(name, EffectName) else name
        return self.name.lower() == other.lower()

    def expire(self) -> None:
        """Force the effect to expire immediately."""
        self.duration = 0

    def clone(self) -> "StatusEffect":
        """
        Clone this effect for a fresh application.

        Returns:
            StatusEffect: An independent copy with the same field values.

        """
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return f"{self.name}({self.duration})"
