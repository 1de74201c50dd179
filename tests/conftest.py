"""
Shared fixtures for the combat engine tests.
"""

import random

import pytest
from deathsgame.character.hero import Hero, new_hero
from deathsgame.character.monster import Monster
from deathsgame.core.content import ContentRepository
from deathsgame.effects import StatusEffect


class FixedRandom(random.Random):
    """A random source whose draws are forced by the test."""

    def __init__(self, value: float = 0.0, jitter: int = 0) -> None:
        super().__init__(0)
        self.value = value
        self.jitter = jitter

    def random(self) -> float:
        return self.value

    def randrange(self, *args, **kwargs) -> int:
        return self.jitter


@pytest.fixture(scope="session")
def content() -> ContentRepository:
    return ContentRepository()


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom(value=0.99, jitter=0)


@pytest.fixture
def warrior(content, fixed_rng) -> Hero:
    return new_hero("Aria", "WARRIOR", content=content, rng=fixed_rng)


@pytest.fixture
def mage(content, fixed_rng) -> Hero:
    return new_hero("Merlin", "MAGE", content=content, rng=fixed_rng)


@pytest.fixture
def priest(content, fixed_rng) -> Hero:
    return new_hero("Sera", "PRIEST", content=content, rng=fixed_rng)


@pytest.fixture
def dummy() -> Monster:
    """A sturdy target with 100 HP, 10 attack and 5 defense."""
    return Monster("Dummy", 100, 10, 5)


@pytest.fixture
def make_rng():
    """Factory for random sources with forced draws."""
    return FixedRandom


@pytest.fixture
def make_effect():
    """Factory for status effects with a throwaway description."""

    def _make(name: str, duration: int, magnitude: int = 0, is_buff: bool = False) -> StatusEffect:
        return StatusEffect(
            name=name,
            description=f"{name} for testing",
            duration=duration,
            magnitude=magnitude,
            is_buff=is_buff,
        )

    return _make
