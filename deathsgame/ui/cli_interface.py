"""
User interface module for the combat engine.

Provides the console action source: rich tables for the action and skill
menus, and prompt_toolkit for reading the player's choices.
"""

from typing import TYPE_CHECKING

from deathsgame.character.hero import Hero
from deathsgame.combat.actions import HeroAction, parse_action_token
from deathsgame.core.constants import EncounterKind
from deathsgame.core.utils import ccapture
from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

if TYPE_CHECKING:
    from deathsgame.combat.encounter import CombatEncounter


class PlayerInterface:
    """
    Command-line interface for the hero's choices during a fight.

    Shows Rich table menus and reads answers with prompt_toolkit. Numeric
    shortcuts pick menu entries, `q` goes back from the skill menu, and full
    commands such as `skill 2` are accepted at the main prompt.
    """

    def __init__(self, session: PromptSession | None = None) -> None:
        """
        Initialize the PlayerInterface.

        Args:
            session (PromptSession | None):
                The prompt session to read from. One session keeps history
                across prompts; a new one is created when not given.

        """
        self.session = session or PromptSession(erase_when_done=True)

    def choose_action(self, hero: Hero, kind: EncounterKind) -> HeroAction:
        """
        Asks for the hero's next action.

        Args:
            hero (Hero): The hero, used to build the skill menu.
            kind (EncounterKind): The kind of fight, shown next to Run.

        Returns:
            HeroAction: The chosen action. Unreadable input becomes an
            unknown action, which the encounter treats as a hesitation.

        """
        table = Table(title="Actions", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Action", style="bold")
        table.add_column("Notes", style="dim")
        table.add_row("1", "Attack", "")
        table.add_row("2", "Skill", "")
        table.add_row("3", "Run", f"{kind.display_name} fight")
        table.add_row("4", "Check Status", "")
        prompt = "\n" + ccapture(table) + "\nAction > "
        while True:
            answer = self.session.prompt(ANSI(prompt))
            if not answer:
                continue
            if self.get_digit_choice(answer) == 2:
                index = self.choose_skill(hero)
                if index is None:
                    continue
                return HeroAction.skill(index)
            return parse_action_token(answer, hero.skills)

    def choose_skill(self, hero: Hero) -> int | None:
        """
        Shows the skill menu.

        Args:
            hero (Hero): The hero whose skills are listed.

        Returns:
            int | None: The catalog index of the chosen skill, or None to go
            back to the action menu.

        """
        entries = hero.skills.menu_entries()
        table = Table(title="Skills", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Mana", style="blue")
        table.add_column("Cooldown", style="yellow")
        table.add_column("Description")
        for number, (index, skill) in enumerate(entries, 1):
            cooldown = hero.cooldowns[index]
            table.add_row(
                str(number),
                skill.menu_label,
                str(skill.mana_cost),
                "Ready" if cooldown == 0 else str(cooldown),
                skill.desc,
            )
        table.add_row("q", "Back", "", "", "")
        prompt = "\n" + ccapture(table) + "\nSkill > "
        while True:
            answer = self.session.prompt(ANSI(prompt))
            if not answer:
                continue
            if answer.strip().lower() == "q":
                return None
            number = self.get_digit_choice(answer.strip())
            if 1 <= number <= len(entries):
                return entries[number - 1][0]

    @staticmethod
    def get_digit_choice(answer: str) -> int:
        """
        Convert a single digit string input to its integer value.

        Args:
            answer (str): User input string to parse.

        Returns:
            int: The integer value of the digit (0-9), or -1 if invalid input.

        """
        if isinstance(answer, str) and len(answer) == 1 and answer.isdigit():
            return int(answer)
        return -1


class ConsoleActionSource:
    """Action source that asks a human through the console interface."""

    def __init__(self, ui: PlayerInterface | None = None) -> None:
        self.ui = ui or PlayerInterface()

    def next_action(self, encounter: "CombatEncounter") -> HeroAction:
        return self.ui.choose_action(encounter.hero, encounter.context.kind)
