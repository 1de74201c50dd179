"""
Hero action tokens and the sources that produce them.

The encounter asks its action source for the next action whenever the hero
may act. Sources can be scripted (tests, simulations) or interactive (the
console interface).
"""

from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from deathsgame.core.constants import ActionType
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from deathsgame.actions.skill_catalog import SkillCatalog

    from .encounter import CombatEncounter


class HeroAction(BaseModel):
    """A single choice made at the action prompt."""

    type: ActionType = Field(
        description="What the hero does.",
    )
    skill_index: int | None = Field(
        None,
        description="Catalog index of the skill, for skill actions.",
    )
    token: str = Field(
        "",
        description="The raw input the action was parsed from, if any.",
    )

    @classmethod
    def attack(cls) -> "HeroAction":
        return cls(type=ActionType.ATTACK)

    @classmethod
    def skill(cls, index: int) -> "HeroAction":
        return cls(type=ActionType.SKILL, skill_index=index)

    @classmethod
    def run(cls) -> "HeroAction":
        return cls(type=ActionType.RUN)

    @classmethod
    def status(cls) -> "HeroAction":
        return cls(type=ActionType.STATUS)

    @classmethod
    def unknown(cls, token: str = "") -> "HeroAction":
        return cls(type=ActionType.UNKNOWN, token=token)

    def __str__(self) -> str:
        if self.type is ActionType.SKILL:
            return f"skill({self.skill_index})"
        return self.type.value


class ActionSource(Protocol):
    """Anything that can choose the hero's next action."""

    def next_action(self, encounter: "CombatEncounter") -> HeroAction:
        """Blocks until the hero's next action is known."""
        ...


_ATTACK_WORDS = {"1", "a", "attack"}
_SKILL_WORDS = {"2", "s", "skill"}
_RUN_WORDS = {"3", "r", "run", "flee"}
_STATUS_WORDS = {"4", "0", "st", "status"}


def parse_action_token(token: str, skills: "SkillCatalog | None" = None) -> HeroAction:
    """
    Turns a line of player input into an action.

    Accepted forms: `1`/`attack`, `2 <n>`/`skill <n>` where `<n>` is the
    1-based number in the skill menu (or a skill name), `3`/`run` and
    `4`/`status`. Anything else is an unknown action.

    Args:
        token (str):
            The raw input.
        skills (SkillCatalog | None):
            The hero's catalog, used to map menu numbers and names to catalog
            indices. Without it the number is taken as a catalog index.

    Returns:
        HeroAction: The parsed action.

    """
    words = token.strip().split(maxsplit=1)
    if not words:
        return HeroAction.unknown(token)
    head = words[0].lower()
    if head in _ATTACK_WORDS and len(words) == 1:
        return HeroAction.attack()
    if head in _RUN_WORDS and len(words) == 1:
        return HeroAction.run()
    if head in _STATUS_WORDS and len(words) == 1:
        return HeroAction.status()
    if head in _SKILL_WORDS and len(words) == 2:
        index = _resolve_skill(words[1].strip(), skills)
        if index is None:
            return HeroAction.unknown(token)
        return HeroAction(type=ActionType.SKILL, skill_index=index, token=token)
    return HeroAction.unknown(token)


def _resolve_skill(choice: str, skills: "SkillCatalog | None") -> int | None:
    if choice.isdigit():
        number = int(choice)
        if skills is None:
            return number
        entries = skills.menu_entries()
        if 1 <= number <= len(entries):
            return entries[number - 1][0]
        return None
    if skills is None:
        return None
    try:
        return skills.index_of(choice)
    except KeyError:
        return None


class ScriptedActionSource:
    """
    Replays a fixed list of actions.

    Strings are parsed with `parse_action_token` against the hero of the
    encounter. Once the script runs out, `default` is returned forever.
    """

    def __init__(
        self,
        actions: Iterable["HeroAction | str"],
        default: HeroAction | None = None,
    ) -> None:
        self._actions: deque[HeroAction | str] = deque(actions)
        self.default = default or HeroAction.attack()
        self.history: list[HeroAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def next_action(self, encounter: "CombatEncounter") -> HeroAction:
        if self._actions:
            action = self._actions.popleft()
            if isinstance(action, str):
                action = parse_action_token(action, encounter.hero.skills)
        else:
            action = self.default
        self.history.append(action)
        return action
