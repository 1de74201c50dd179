"""
Tests for status effects.
"""

import pytest
from deathsgame.core.constants import EffectName
from deathsgame.effects import StatusEffect
from pydantic import ValidationError


def test_clone_is_isolated_from_template(make_effect):
    """
    Test that mutating a clone never changes the effect it was copied from.
    """
    template = make_effect("Poison", duration=3, magnitude=6)
    clone = template.clone()
    clone.duration -= 2
    clone.magnitude = 1
    assert template.duration == 3
    assert template.magnitude == 6
    assert clone is not template


def test_names_compare_case_insensitively(make_effect):
    """
    Test that known names are recognised regardless of case.
    """
    effect = make_effect("sHiElD", duration=2, magnitude=10, is_buff=True)
    assert effect.is_named("Shield")
    assert effect.is_named(EffectName.SHIELD)
    assert effect.kind is EffectName.SHIELD


def test_unknown_name_has_no_kind(make_effect):
    """
    Test that unknown effect names are carried without mechanics.
    """
    effect = make_effect("Inspired", duration=2, magnitude=3, is_buff=True)
    assert effect.kind is None
    assert effect.emoji == "❔"


def test_expire_and_is_active(make_effect):
    """
    Test that expiring an effect makes it inactive immediately.
    """
    effect = make_effect("Stun", duration=1)
    assert effect.is_active()
    effect.expire()
    assert effect.duration == 0
    assert not effect.is_active()


def test_str_shows_name_and_duration(make_effect):
    """
    Test the compact textual form of an effect.
    """
    assert str(make_effect("Burn", duration=2, magnitude=5)) == "Burn(2)"


def test_negative_duration_is_rejected():
    """
    Test that an effect cannot be created with a negative duration.
    """
    with pytest.raises(ValidationError):
        StatusEffect(name="Poison", duration=-1, magnitude=3, is_buff=False)
