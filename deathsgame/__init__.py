"""
Death's Game combat engine.

This package contains the turn-based combat core of the game: status
effects, heroes and monsters, skills and the encounter state machine.
"""

from .character import Hero, Monster, generate_monster, new_hero
from .combat.actions import HeroAction, ScriptedActionSource, parse_action_token
from .combat.encounter import (
    CombatEncounter,
    EncounterContext,
    EncounterResult,
    run_encounter,
)
from .core.constants import EncounterKind, EncounterState, HeroClass, MonsterKind
from .core.content import ContentRepository
from .core.settings import CombatSettings

__all__ = [
    "CombatEncounter",
    "CombatSettings",
    "ContentRepository",
    "EncounterContext",
    "EncounterKind",
    "EncounterResult",
    "EncounterState",
    "Hero",
    "HeroAction",
    "HeroClass",
    "Monster",
    "MonsterKind",
    "ScriptedActionSource",
    "generate_monster",
    "new_hero",
    "parse_action_token",
    "run_encounter",
]
