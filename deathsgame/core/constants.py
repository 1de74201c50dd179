"""
Constants and enumerations for the combat engine.

Defines the hero classes, stat indices, effect names, monster and encounter
kinds, and the terminal states of an encounter.
"""

from enum import Enum, IntEnum

# Global verbose level for combat output:
# 0 - Minimal (only the narration of actions)
# 1 - Moderate (show shield absorption and effect ticks)
# 2 - Full detail (intermediate computations)
GLOBAL_VERBOSE_LEVEL = 1


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()


class StatType(IntEnum):
    """Indices into the five-slot stat block shared by every combatant."""

    STR = 0
    INT = 1
    AGI = 2
    DEF = 3
    LUK = 4

    @property
    def display_name(self) -> str:
        return {
            StatType.STR: "Atk",
            StatType.INT: "Int",
            StatType.AGI: "Agi",
            StatType.DEF: "Def",
            StatType.LUK: "Luck",
        }[self]


class HeroClass(NiceEnum):
    """The masks a hero can wear. DEFAULT is used for unknown class ids."""

    WARRIOR = "WARRIOR"
    MAGE = "MAGE"
    ROGUE = "ROGUE"
    PRIEST = "PRIEST"
    HUNTER = "HUNTER"
    DEFAULT = "DEFAULT"

    @classmethod
    def parse(cls, value: "str | HeroClass") -> "HeroClass":
        """
        Resolves a class identifier, falling back to DEFAULT.

        Args:
            value (str | HeroClass): The class name, case-insensitive.

        Returns:
            HeroClass: The matching class, or DEFAULT when unknown.

        """
        if isinstance(value, HeroClass):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            return cls.DEFAULT

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this hero class."""
        return {
            HeroClass.WARRIOR: "🛡️",
            HeroClass.MAGE: "🔮",
            HeroClass.ROGUE: "🗡️",
            HeroClass.PRIEST: "✨",
            HeroClass.HUNTER: "🏹",
        }.get(self, "👤")


class EffectName(str, Enum):
    """Status effect names that carry engine mechanics."""

    POISON = "Poison"
    BURN = "Burn"
    HEAL = "Heal"
    STUN = "Stun"
    SHIELD = "Shield"
    MARK = "Mark"
    RESURRECTION = "Resurrection"

    def matches(self, name: str) -> bool:
        """Case-insensitive comparison against an effect name."""
        return self.value.lower() == name.lower()

    @property
    def color(self) -> str:
        """Returns the color string associated with this effect."""
        return {
            EffectName.POISON: "bold green",
            EffectName.BURN: "bold red",
            EffectName.HEAL: "bold green",
            EffectName.STUN: "bold yellow",
            EffectName.SHIELD: "bold cyan",
            EffectName.MARK: "bold magenta",
            EffectName.RESURRECTION: "bold white",
        }[self]

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this effect."""
        return {
            EffectName.POISON: "☠️",
            EffectName.BURN: "🔥",
            EffectName.HEAL: "💚",
            EffectName.STUN: "💫",
            EffectName.SHIELD: "🛡️",
            EffectName.MARK: "🎯",
            EffectName.RESURRECTION: "🕊️",
        }[self]


class SkillKind(NiceEnum):
    """The direct mechanical action a skill resolves after its effects."""

    DAMAGE = "damage"
    HEAL = "heal"
    SUPPORT = "support"


class MonsterKind(NiceEnum):
    """The stat-generation formulas available for monsters."""

    REGULAR = "regular"
    BOSS = "boss"
    SHADOW = "shadow"
    FINAL_BOSS = "final_boss"

    @classmethod
    def parse(cls, value: "str | MonsterKind") -> "MonsterKind":
        if isinstance(value, MonsterKind):
            return value
        return cls(str(value).strip().lower())


class EncounterKind(NiceEnum):
    """The kind of fight, which selects flee odds, rewards and enemy moves."""

    REGULAR = "regular"
    AMBUSH = "ambush"
    BOSS = "boss"
    MIRROR = "mirror"
    FINAL = "final"


class EncounterState(NiceEnum):
    """States of the encounter turn-state machine."""

    ONGOING = "ONGOING"
    HERO_VICTORY = "HERO_VICTORY"
    HERO_DEFEAT = "HERO_DEFEAT"
    HERO_FLED = "HERO_FLED"

    @property
    def is_terminal(self) -> bool:
        return self is not EncounterState.ONGOING

    @property
    def color(self) -> str:
        return {
            EncounterState.ONGOING: "bold cyan",
            EncounterState.HERO_VICTORY: "bold green",
            EncounterState.HERO_DEFEAT: "bold red",
            EncounterState.HERO_FLED: "bold yellow",
        }[self]


class ActionType(NiceEnum):
    """The choices offered to the hero at the action prompt."""

    ATTACK = "attack"
    SKILL = "skill"
    RUN = "run"
    STATUS = "status"
    UNKNOWN = "unknown"

    @property
    def consumes_turn(self) -> bool:
        """Status checks loop back to the prompt, everything else spends the turn."""
        return self is not ActionType.STATUS


class KillMethod(NiceEnum):
    """How the opponent was defeated, which selects the experience reward."""

    ATTACK = "attack"
    SKILL = "skill"
