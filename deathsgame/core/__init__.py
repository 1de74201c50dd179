"""
Core system module for the combat engine.

This module contains the fundamental components shared by the rest of the
engine: constants, the error taxonomy, combat tunables, logging and display
utilities. Content loading lives in `deathsgame.core.content`.
"""

from .constants import (
    ActionType,
    EffectName,
    EncounterKind,
    EncounterState,
    HeroClass,
    KillMethod,
    MonsterKind,
    SkillKind,
    StatType,
)
from .error_handling import (
    CombatError,
    ErrorHandler,
    ErrorSeverity,
    IllegalState,
    InsufficientResource,
    InvalidAction,
)
from .settings import CombatSettings, ExpReward

__all__ = [
    # Import from constants.py
    "ActionType",
    "EffectName",
    "EncounterKind",
    "EncounterState",
    "HeroClass",
    "KillMethod",
    "MonsterKind",
    "SkillKind",
    "StatType",
    # Import from error_handling.py
    "CombatError",
    "ErrorHandler",
    "ErrorSeverity",
    "IllegalState",
    "InsufficientResource",
    "InvalidAction",
    # Import from settings.py
    "CombatSettings",
    "ExpReward",
]
