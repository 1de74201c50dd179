"""
Skill system module for the combat engine.

This module contains the skill templates heroes carry, the per-hero skill
catalog and the execution of a chosen skill.
"""

from .skill import Skill, UltimateSpec
from .skill_catalog import SkillCatalog
from .skill_execution import SkillOutcome, execute_skill

__all__ = [
    "Skill",
    "SkillCatalog",
    "SkillOutcome",
    "UltimateSpec",
    "execute_skill",
]
