"""
Status effect system for the combat engine.

This package contains the timed buffs and debuffs that skills attach to
combatants, and the per-combatant queue that resolves them every turn.
"""

from .effect_queue import EffectQueue, EffectTick
from .status_effect import StatusEffect

__all__ = [
    "EffectQueue",
    "EffectTick",
    "StatusEffect",
]
