import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_critical, log_warning
from deathsgame.character.hero_class import HeroClassConfig
from deathsgame.combat.monster_ai import BASIC_ATTACK_TABLE, MonsterMove, MoveTable
from deathsgame.core.constants import EncounterKind, HeroClass
from deathsgame.core.logging import log_debug

# The JSON assets shipped with the package.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ContentRepository:
    """
    By-name access to the static game content: the hero class table with its
    skill catalogs and the monster move tables.

    Content is read-only once loaded. Each repository owns its own copies, so
    two repositories never share state.
    """

    hero_classes: dict[HeroClass, HeroClassConfig]
    move_tables: dict[EncounterKind, MoveTable]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing the data files. Defaults to the
                files bundled with the package.

        """
        self.data_dir = data_dir or DEFAULT_DATA_DIR
        self.reload(self.data_dir)

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Args:
            root (Path):
                The directory containing data files to load.
        """
        self.hero_classes = _load_json_file(
            root / "hero_classes.json",
            self._load_hero_classes,
            "hero classes",
        )
        self.move_tables = _load_json_file(
            root / "monster_moves.json",
            self._load_move_tables,
            "monster moves",
        )

    def get_hero_class(self, hero_class: HeroClass | str) -> HeroClassConfig:
        """
        Get a hero class configuration, falling back to the DEFAULT profile.

        Args:
            hero_class (HeroClass | str):
                The class identifier.

        Returns:
            HeroClassConfig:
                The configuration of the class.

        Raises:
            KeyError:
                If neither the class nor the DEFAULT profile is defined.

        """
        key = HeroClass.parse(hero_class)
        config = self.hero_classes.get(key)
        if config is None:
            log_warning(
                f"Hero class '{hero_class}' not found, using the default profile.",
                {"hero_class": str(hero_class), "available": [str(k) for k in self.hero_classes]},
            )
            config = self.hero_classes[HeroClass.DEFAULT]
        return config

    def get_move_table(self, kind: EncounterKind) -> MoveTable:
        """Get the monster move table for an encounter kind."""
        table = self.move_tables.get(kind)
        if table is None:
            log_debug(f"No move table for {kind}, using a basic attack.")
            return BASIC_ATTACK_TABLE
        return table

    @staticmethod
    def _load_hero_classes(data: Any) -> dict[HeroClass, HeroClassConfig]:
        """
        Load hero classes from JSON data.

        Raises:
            ValueError: If the data is not a list or a class is duplicated.

        """
        if not isinstance(data, list):
            raise ValueError(f"Expected list, got {type(data).__name__}")
        classes: dict[HeroClass, HeroClassConfig] = {}
        for class_data in data:
            config = HeroClassConfig(**class_data)
            if config.hero_class in classes:
                raise ValueError(f"Duplicate hero class: {config.hero_class}")
            classes[config.hero_class] = config
        if HeroClass.DEFAULT not in classes:
            raise ValueError("The DEFAULT hero class profile is missing.")
        return classes

    @staticmethod
    def _load_move_tables(data: Any) -> dict[EncounterKind, MoveTable]:
        """
        Load monster move tables from JSON data.

        Raises:
            ValueError: If the data is not a mapping of encounter kinds.

        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected mapping, got {type(data).__name__}")
        tables: dict[EncounterKind, MoveTable] = {}
        for kind_name, moves in data.items():
            kind = EncounterKind(kind_name)
            tables[kind] = MoveTable(moves=[MonsterMove(**move) for move in moves])
        return tables


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[Any], dict[Any, Any]],
    description: str,
) -> dict[Any, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_debug(f"Loading {description} from {filepath.name}")
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data in {filepath}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        log_critical(
            f"Error loading {description}: {str(e)}",
            {"file": str(filepath), "error": str(e)},
            e,
        )
        raise ValueError(f"File {filepath} raised an error: {e}") from e
