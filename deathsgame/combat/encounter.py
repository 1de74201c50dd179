"""
Encounter module for the combat engine.

Runs one hero-versus-monster fight as a turn-state machine. Every round goes
through passives, status resolution, cooldowns, the hero's action, the flee
roll, the monster's move and the defeat check, until the encounter reaches a
terminal state.
"""

import random
from typing import TYPE_CHECKING

from deathsgame.character.combatant import Combatant
from deathsgame.character.hero import Hero
from deathsgame.character.monster import Monster
from deathsgame.core.constants import (
    GLOBAL_VERBOSE_LEVEL,
    ActionType,
    EncounterKind,
    EncounterState,
    KillMethod,
)
from deathsgame.core.error_handling import (
    ErrorHandler,
    IllegalState,
    InsufficientResource,
    InvalidAction,
)
from deathsgame.core.logging import log_debug, log_error, log_info, log_warning
from deathsgame.core.settings import CombatSettings
from deathsgame.core.utils import cprint, crule
from pydantic import BaseModel, Field

from .actions import ActionSource
from .damage import roll_jitter
from .monster_ai import MoveTable

if TYPE_CHECKING:
    from deathsgame.core.content import ContentRepository


class EncounterContext(BaseModel):
    """What the caller tells the engine about the fight."""

    kind: EncounterKind = Field(
        EncounterKind.REGULAR,
        description="The kind of fight: flee odds, rewards and enemy moves depend on it.",
    )
    min_level: int = Field(
        1,
        ge=0,
        description="The level parameter used by the experience reward.",
    )
    settings: CombatSettings = Field(
        default_factory=CombatSettings,
        description="Tunables for this fight.",
    )
    award_exp: bool = Field(
        True,
        description="Apply the experience reward to the hero on victory.",
    )


class EncounterResult(BaseModel):
    """The terminal outcome of an encounter."""

    outcome: EncounterState = Field(
        description="How the fight ended.",
    )
    exp_awarded: int = Field(
        0,
        description="Experience earned by the hero.",
    )
    rounds: int = Field(
        0,
        description="Number of rounds played.",
    )
    kill_method: KillMethod | None = Field(
        None,
        description="How the opponent died, on victory.",
    )
    levels_gained: int = Field(
        0,
        description="Levels the hero gained from the reward.",
    )


class CombatEncounter:
    """
    Manages the flow of a single fight between a hero and a monster.

    The encounter owns both combatants while it runs. Its only suspension
    point is the action source, asked once per hero turn (more than once when
    the choice is rejected or is a status check).

    Attributes:
        hero (Hero):
            The player character.
        monster (Monster):
            The opponent.
        action_source (ActionSource):
            Where the hero's choices come from.
        context (EncounterContext):
            The kind of fight and its tunables.
        state (EncounterState):
            The current state of the machine.
        rounds (int):
            Rounds started so far.
        errors (ErrorHandler):
            Rejected actions recorded during the fight.

    """

    def __init__(
        self,
        hero: Hero,
        monster: Monster,
        action_source: ActionSource,
        context: EncounterContext | None = None,
        content: "ContentRepository | None" = None,
        rng: random.Random | None = None,
        move_table: MoveTable | None = None,
    ) -> None:
        self.hero = hero
        self.monster = monster
        self.action_source = action_source
        self.context = context or EncounterContext()
        self.rng = rng or hero.rng
        if move_table is None:
            if content is None:
                from deathsgame.core.content import ContentRepository

                content = ContentRepository()
            move_table = content.get_move_table(self.context.kind)
        self.move_table = move_table
        self.state = EncounterState.ONGOING
        self.rounds = 0
        self.kill_method: KillMethod | None = None
        self.exp_awarded = 0
        self.levels_gained = 0
        self.errors = ErrorHandler()

    @property
    def settings(self) -> CombatSettings:
        return self.context.settings

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    # ============================================================================
    # MAIN LOOP
    # ============================================================================

    def run(self) -> EncounterResult:
        """Plays rounds until the encounter ends."""
        self._ensure_ongoing("run")
        crule(
            f"⚔️  {self.hero.colored_name} vs {self.monster.colored_name}",
            style="bold red",
        )
        while not self.is_over:
            self.play_round()
        return self.result()

    def play_round(self) -> EncounterState:
        """
        Plays one full round.

        Returns:
            EncounterState: The state after the round.

        Raises:
            IllegalState: If the encounter already ended.

        """
        self._ensure_ongoing("play a round")
        self.rounds += 1
        crule(f"⏱ Round {self.rounds}", style="cyan")

        # Passives: hero first, then the opponent.
        for combatant in (self.hero, self.monster):
            message = combatant.process_turn_passives()
            if message:
                cprint(f"    {message}")

        # Status effects: a death here ends the round immediately.
        self._resolve_status(self.hero)
        if self.hero.is_dead():
            self._check_defeat()
            if self.is_over:
                return self.state
        self._resolve_status(self.monster)
        if self.monster.is_dead():
            cprint(f"    {self.monster.colored_name} succumbs to its wounds.")
            self._finish_victory(KillMethod.ATTACK)
            return self.state

        self.hero.tick_skill_cooldowns()

        cprint(self.hero.get_status_line())
        cprint(self.monster.get_status_line())

        if self.hero.is_stunned():
            cprint(f"    💫 {self.hero.colored_name} is stunned and cannot act!")
        else:
            self._hero_turn()
            if self.is_over:
                return self.state

        if self.monster.is_dead():
            self._finish_victory(self.kill_method or KillMethod.ATTACK)
            return self.state

        self._monster_turn()
        self._check_defeat()
        return self.state

    def abandon(self) -> EncounterResult:
        """
        Ends the fight at once as a flight, with no experience.

        Raises:
            IllegalState: If the encounter already ended.

        """
        self._ensure_ongoing("abandon")
        self.state = EncounterState.HERO_FLED
        self.exp_awarded = 0
        log_info("Encounter abandoned", {"rounds": self.rounds})
        return self.result()

    def result(self) -> EncounterResult:
        return EncounterResult(
            outcome=self.state,
            exp_awarded=self.exp_awarded,
            rounds=self.rounds,
            kill_method=self.kill_method,
            levels_gained=self.levels_gained,
        )

    # ============================================================================
    # ROUND PHASES
    # ============================================================================

    def _resolve_status(self, combatant: Combatant) -> None:
        for tick in combatant.resolve_effects():
            cprint(f"    {tick.kind.emoji} {combatant.colored_name} {tick.message}.")
            if tick.absorbed and GLOBAL_VERBOSE_LEVEL >= 1:
                cprint(f"    🛡️ Shield absorbed {tick.absorbed} damage!")

    def _hero_turn(self) -> None:
        rejected = 0
        while True:
            if rejected > self.settings.max_reprompts:
                log_warning(
                    "Action slot rejected too many times",
                    {"round": self.rounds, "rejected": rejected},
                )
                self._hesitate("Too many rejected choices.")
                return
            action = self.action_source.next_action(self)
            log_debug(f"Hero action: {action}", {"round": self.rounds})

            if not action.type.consumes_turn:
                self.show_status()
                continue
            if action.type is ActionType.ATTACK:
                self._hero_attack()
                return
            if action.type is ActionType.RUN:
                self._try_flee()
                return
            if action.type is ActionType.SKILL and action.skill_index is not None:
                try:
                    self._hero_skill(action.skill_index)
                except InsufficientResource as error:
                    self.errors.handle_exception(error)
                    cprint(f"    [yellow]{error.message}[/]")
                    rejected += 1
                    continue
                except InvalidAction as error:
                    self.errors.handle_exception(error)
                    self._hesitate(error.message)
                return

            error = InvalidAction(
                f"Unknown action '{action.token}'.",
                {"token": action.token, "round": self.rounds},
            )
            self.errors.handle_exception(error)
            self._hesitate(error.message)
            return

    def _hero_attack(self) -> None:
        result = self.hero.attack(self.monster, jitter=roll_jitter(self.rng))
        cprint(
            f"    🗡️ {self.hero.colored_name} attacks {self.monster.colored_name} "
            f"for {result.damage} damage."
        )
        if result.absorbed and GLOBAL_VERBOSE_LEVEL >= 1:
            cprint(f"    🛡️ Shield absorbed {result.absorbed} damage!")
        if result.target_defeated:
            self.kill_method = KillMethod.ATTACK

    def _hero_skill(self, index: int) -> None:
        outcome = self.hero.use_skill(index, self.monster)
        if outcome.target_defeated:
            self.kill_method = KillMethod.SKILL

    def _try_flee(self) -> None:
        chance = self.settings.flee_probability(self.context.kind)
        roll = self.rng.random()
        log_debug("Flee roll", {"roll": round(roll, 3), "chance": chance})
        if roll < chance:
            self.state = EncounterState.HERO_FLED
            cprint(f"    🏃 {self.hero.colored_name} escapes!")
        else:
            cprint(f"    [yellow]{self.hero.colored_name} fails to escape![/]")

    def _hesitate(self, reason: str) -> None:
        cprint(f"    [yellow]{reason} {self.hero.colored_name} hesitates...[/]")

    def _monster_turn(self) -> None:
        if self.monster.is_dead() or self.hero.is_dead():
            return
        if self.monster.is_stunned():
            cprint(f"    💫 {self.monster.colored_name} is stunned and cannot act!")
            return
        result = self.monster.enemy_attack(self.hero, self.move_table, self.rng)
        cprint(
            f"    👹 {self.monster.colored_name} {result.verb}! "
            f"{self.hero.colored_name} takes {result.damage} damage."
        )
        if result.absorbed and GLOBAL_VERBOSE_LEVEL >= 1:
            cprint(f"    🛡️ Shield absorbed {result.absorbed} damage!")

    def _check_defeat(self) -> None:
        if self.hero.is_alive():
            return
        if self.hero.try_resurrect(self.settings.resurrection_ratio):
            cprint(
                f"    🕊️ {self.hero.colored_name} is resurrected with "
                f"{self.hero.hp} HP!"
            )
            return
        self.state = EncounterState.HERO_DEFEAT
        cprint(f"[{self.state.color}]{self.hero.name} has fallen.[/]")
        log_info("Hero defeated", {"monster": self.monster.name, "rounds": self.rounds})

    def _finish_victory(self, method: KillMethod) -> None:
        self.state = EncounterState.HERO_VICTORY
        self.kill_method = method
        self.exp_awarded = self.settings.exp_for_kill(
            self.context.kind,
            method is KillMethod.SKILL,
            self.context.min_level,
        )
        cprint(f"[{self.state.color}]{self.monster.name} is defeated![/]")
        if self.exp_awarded:
            cprint(f"    You gain {self.exp_awarded} EXP.")
        if self.context.award_exp and self.exp_awarded:
            self.levels_gained = self.hero.gain_exp(self.exp_awarded)
            if self.levels_gained:
                cprint(f"    [bold green]Level up! You are now level {self.hero.level}.[/]")
        log_info(
            "Hero victorious",
            {"monster": self.monster.name, "method": str(method), "exp": self.exp_awarded},
        )

    def _ensure_ongoing(self, operation: str) -> None:
        if self.is_over:
            context = {"state": str(self.state), "rounds": self.rounds}
            log_error(f"Refused to {operation} a finished encounter", context)
            raise IllegalState(
                f"Cannot {operation}: the encounter already ended with {self.state}.",
                context,
            )

    # ============================================================================
    # DISPLAY
    # ============================================================================

    def show_status(self) -> None:
        """Prints both combatants and the hero's skills."""
        crule("📜 Status", style="blue")
        cprint(self.hero.get_status_line())
        cprint(f"    {self.hero.get_stat_summary()}")
        for line in self.hero.get_skill_summary():
            cprint(f"    {line}")
        cprint(self.monster.get_status_line())


def run_encounter(
    hero: Hero,
    monster: Monster,
    action_source: ActionSource,
    context: EncounterContext | None = None,
    content: "ContentRepository | None" = None,
    rng: random.Random | None = None,
) -> EncounterResult:
    """
    Runs a fight to its end.

    Args:
        hero (Hero):
            The player character.
        monster (Monster):
            The opponent, created for this encounter.
        action_source (ActionSource):
            Where the hero's choices come from.
        context (EncounterContext | None):
            The kind of fight and its tunables.
        content (ContentRepository | None):
            Where the monster move tables come from.
        rng (random.Random | None):
            Random source for jitter, flee rolls and monster moves. Defaults
            to the hero's.

    Returns:
        EncounterResult: The terminal outcome and the experience awarded.

    """
    return CombatEncounter(
        hero,
        monster,
        action_source,
        context=context,
        content=content,
        rng=rng,
    ).run()
