"""
Character system module for the combat engine.

This module handles the combatants: the shared capability base, the hero
class table, heroes and monsters with their generators.
"""

from .combatant import Combatant
from .hero import AttackResult, Hero, new_hero
from .hero_class import HeroClassConfig, PassiveRegen
from .monster import Monster, MonsterAttackResult, generate_monster

__all__ = [
    # Import from combatant.py
    "Combatant",
    # Import from hero.py
    "AttackResult",
    "Hero",
    "new_hero",
    # Import from hero_class.py
    "HeroClassConfig",
    "PassiveRegen",
    # Import from monster.py
    "Monster",
    "MonsterAttackResult",
    "generate_monster",
]
