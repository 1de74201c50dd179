"""
Skill catalog module for the combat engine.

A hero's ordered skill list, built once per hero from the class table so
that two heroes never share skill state.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .skill import Skill

if TYPE_CHECKING:
    from deathsgame.character.hero_class import HeroClassConfig


class SkillCatalog:
    """
    The ordered skills of one hero.

    Indices are stable for the lifetime of the hero and line up with the
    hero's cooldown array. Menus number only the active skills, so
    `menu_entries` maps the 1-based menu choice back to the catalog index.
    """

    def __init__(self, skills: list[Skill]) -> None:
        self._skills: list[Skill] = list(skills)

    @classmethod
    def for_class(cls, config: "HeroClassConfig") -> "SkillCatalog":
        """Builds a private catalog from a hero class configuration."""
        return cls(config.build_skill_catalog())

    def __len__(self) -> int:
        return len(self._skills)

    def __iter__(self) -> Iterator[Skill]:
        return iter(self._skills)

    def __getitem__(self, index: int) -> Skill:
        return self._skills[index]

    @property
    def passive(self) -> Skill | None:
        """The passive skill, if the class has one."""
        return next((skill for skill in self._skills if skill.is_passive), None)

    def active_indices(self) -> list[int]:
        """Catalog indices of every selectable skill."""
        return [index for index, skill in enumerate(self._skills) if not skill.is_passive]

    def menu_entries(self) -> list[tuple[int, Skill]]:
        """(catalog index, skill) pairs in menu order."""
        return [(index, self._skills[index]) for index in self.active_indices()]

    def index_of(self, name: str) -> int:
        """
        Catalog index of a skill by name, case-insensitive.

        Raises:
            KeyError: If no skill has that name.

        """
        for index, skill in enumerate(self._skills):
            if skill.name.lower() == name.lower():
                return index
        raise KeyError(name)
