"""
Effect queue module for the combat engine.

Holds the active status effects of one combatant in insertion order and owns
their per-turn resolution, shield absorption and expiry rules.
"""

from collections.abc import Iterator
from typing import Any

from deathsgame.core.constants import EffectName
from deathsgame.core.logging import log_debug
from pydantic import BaseModel, Field

from .status_effect import StatusEffect


class EffectTick(BaseModel):
    """What one effect did to its owner during a turn resolution."""

    effect: str = Field(
        description="Name of the effect that ticked.",
    )
    kind: EffectName = Field(
        description="The mechanical effect that was applied.",
    )
    amount: int = Field(
        description="Damage inflicted or HP restored.",
    )
    absorbed: int = Field(
        0,
        description="Part of the damage soaked up by shields.",
    )

    @property
    def message(self) -> str:
        if self.kind is EffectName.HEAL:
            return f"is healed for {self.amount} HP"
        return f"suffers {self.amount} {self.effect.lower()} damage"


class EffectQueue:
    """
    Manages the status effects attached to a combatant.

    Duplicate names are never merged: two Poison applications tick twice.
    Expired effects are swept after every resolution pass.

    Attributes:
        _owner (Any):
            The combatant that owns this queue.
        _effects (list[StatusEffect]):
            The effects in the order they were applied.

    """

    _owner: Any
    _effects: list[StatusEffect]

    def __init__(self, owner: Any) -> None:
        """
        Initialize the EffectQueue.

        Args:
            owner (Any):
                The combatant that owns this queue. It must expose
                `take_damage(amount)` and `heal(amount)`.

        """
        self._owner = owner
        self._effects = []

    # === Queue Management ===

    def enqueue(self, effect: StatusEffect) -> None:
        """Append an effect at the rear of the queue."""
        self._effects.append(effect)

    def remove(self, effect: StatusEffect) -> bool:
        """
        Remove a specific effect instance from the queue.

        Returns:
            bool: True if the effect was present and removed.

        """
        for index, entry in enumerate(self._effects):
            if entry is effect:
                del self._effects[index]
                return True
        return False

    def clear(self) -> None:
        """Drop every effect."""
        self._effects.clear()

    def __iter__(self) -> Iterator[StatusEffect]:
        return iter(list(self._effects))

    def __len__(self) -> int:
        return len(self._effects)

    def active_effects(self) -> list[StatusEffect]:
        """Effects with turns remaining, in insertion order."""
        return [effect for effect in self._effects if effect.is_active()]

    def find_active(self, name: "str | EffectName") -> StatusEffect | None:
        """The first active effect with the given name, if any."""
        for effect in self._effects:
            if effect.is_active() and effect.is_named(name):
                return effect
        return None

    # === Queries ===

    def _active_magnitude(self, name: EffectName) -> int:
        return sum(
            effect.magnitude
            for effect in self._effects
            if effect.is_active() and effect.is_named(name)
        )

    def active_shield_total(self) -> int:
        """Total shield points currently available to absorb damage."""
        return self._active_magnitude(EffectName.SHIELD)

    def mark_bonus(self) -> int:
        """Flat bonus damage that attacks against the owner receive."""
        return self._active_magnitude(EffectName.MARK)

    def is_stunned(self) -> bool:
        """True if any Stun effect is still running."""
        return self.find_active(EffectName.STUN) is not None

    # === Resolution ===

    def absorb(self, amount: int) -> int:
        """
        Let active shields soak up incoming damage, in queue order.

        A shield whose magnitude reaches zero is expired on the spot, even in
        the middle of a turn.

        Args:
            amount (int):
                The incoming damage.

        Returns:
            int:
                The amount absorbed, never more than the shield total.

        """
        absorbed = min(self.active_shield_total(), amount)
        if absorbed <= 0:
            return 0
        remaining = amount
        for effect in self._effects:
            if not (effect.is_active() and effect.is_named(EffectName.SHIELD)):
                continue
            soaked = min(effect.magnitude, remaining)
            effect.magnitude -= soaked
            remaining -= soaked
            if effect.magnitude <= 0:
                effect.expire()
            if remaining == 0:
                break
        return absorbed

    def resolve_turn(self) -> list[EffectTick]:
        """
        Apply every active effect once, tick durations, then sweep expired ones.

        Returns:
            list[EffectTick]:
                One entry per effect that changed the owner's HP.

        """
        ticks: list[EffectTick] = []
        for effect in list(self._effects):
            if not effect.is_active():
                continue
            kind = effect.kind
            if kind in (EffectName.POISON, EffectName.BURN):
                report = self._owner.take_damage(effect.magnitude)
                ticks.append(
                    EffectTick(
                        effect=effect.name,
                        kind=kind,
                        amount=effect.magnitude,
                        absorbed=report.absorbed,
                    )
                )
            elif kind is EffectName.HEAL:
                restored = self._owner.heal(effect.magnitude)
                ticks.append(EffectTick(effect=effect.name, kind=kind, amount=restored))
            effect.duration = max(0, effect.duration - 1)
        self._effects = [effect for effect in self._effects if effect.is_active()]
        if ticks:
            log_debug(
                "Resolved status effects",
                {
                    "owner": getattr(self._owner, "name", "unknown"),
                    "ticks": [str(tick.kind) for tick in ticks],
                },
            )
        return ticks

    # === Display ===

    def describe(self) -> str:
        """Compact listing such as 'Poison(2) Shield(1)', or 'None'."""
        active = self.active_effects()
        if not active:
            return "None"
        return " ".join(str(effect) for effect in active)

    def colored_description(self) -> str:
        """Rich-markup listing of the active effects."""
        active = self.active_effects()
        if not active:
            return "[dim]None[/]"
        return " ".join(
            f"{effect.emoji} [{effect.color}]{effect.name}[/]({effect.duration})"
            for effect in active
        )
