"""
Main entry point for the Death's Game combat engine.

Runs a short demo run through the engine: a hero of the chosen class fights
a regular monster, a dungeon boss and finally its own shadow. Choices are
read from the console, or made automatically with `--auto`.
"""

import argparse
import logging
import random

from deathsgame.character.hero import new_hero
from deathsgame.character.monster import generate_monster
from deathsgame.combat.actions import ActionSource, HeroAction, ScriptedActionSource
from deathsgame.combat.encounter import EncounterContext, run_encounter
from deathsgame.core.constants import EncounterKind, EncounterState, HeroClass, MonsterKind
from deathsgame.core.content import ContentRepository
from deathsgame.core.logging import setup_logging
from deathsgame.core.utils import cprint, crule

# The demo gauntlet: (monster kind, encounter kind, name, level).
GAUNTLET = [
    (MonsterKind.REGULAR, EncounterKind.REGULAR, "Lesser Demon", 1),
    (MonsterKind.BOSS, EncounterKind.BOSS, "Gluttony", 3),
    (MonsterKind.SHADOW, EncounterKind.MIRROR, None, 0),
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deathsgame", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--name", default="Hero", help="The hero's name.")
    parser.add_argument(
        "--hero-class",
        default="WARRIOR",
        help="One of " + ", ".join(str(c) for c in HeroClass if c is not HeroClass.DEFAULT) + ".",
    )
    parser.add_argument("--auto", action="store_true", help="Attack every turn instead of asking.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source.")
    parser.add_argument("--debug", action="store_true", help="Show combat tracing.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    crule("Death's Game", style="bold green")
    rng = random.Random(args.seed)
    content = ContentRepository()
    hero = new_hero(args.name, args.hero_class, content=content, rng=rng)
    cprint(hero.get_status_line())

    source: ActionSource
    if args.auto:
        source = ScriptedActionSource([], default=HeroAction.attack())
    else:
        from deathsgame.ui.cli_interface import ConsoleActionSource

        source = ConsoleActionSource()

    for monster_kind, encounter_kind, name, level in GAUNTLET:
        monster = generate_monster(monster_kind, level, name=name, hero=hero)
        context = EncounterContext(kind=encounter_kind, min_level=level)
        result = run_encounter(hero, monster, source, context=context, content=content, rng=rng)
        crule(
            f"[{result.outcome.color}]{result.outcome.display_name}[/] after {result.rounds} rounds",
            style="bold blue",
        )
        if result.outcome is EncounterState.HERO_DEFEAT:
            cprint("[bold red]Your journey ends here.[/]")
            return 1
        if encounter_kind is EncounterKind.BOSS:
            hero.restore_full()

    cprint("[bold green]You survived the gauntlet.[/]")
    cprint(hero.get_status_line())
    return 0
