"""
Unit tests for combat math and attack results.
"""

import pytest

from mudgame.engine.systems.combat import (MIN_DAMAGE, CombatResult,
                                          calculate_damage)


@pytest.mark.unit
@pytest.mark.parametrize(
    "attack_power,defense,expected",
    [
        (10, 5, 5),
        (25, 5, 20),
        (6, 5, 1),
        (5, 5, 1),
        (0, 5, 1),
        (1, 100, 1),
        (100, 0, 100),
    ],
)
def test_calculate_damage(attack_power, defense, expected):
    assert calculate_damage(attack_power, defense) == expected


@pytest.mark.unit
def test_damage_floor_for_every_losing_matchup():
    """Whenever defense matches or beats attack power, exactly MIN_DAMAGE lands."""
    for attack_power in range(0, 20):
        for defense in range(attack_power, 25):
            assert calculate_damage(attack_power, defense) == MIN_DAMAGE


@pytest.mark.unit
def test_damage_is_difference_when_attack_wins():
    for attack_power in range(1, 30):
        for defense in range(0, attack_power):
            assert calculate_damage(attack_power, defense) == attack_power - defense


@pytest.mark.unit
def test_combat_result_defaults():
    result = CombatResult()

    assert result.success is False
    assert result.damage_dealt == 0
    assert result.target_killed is False
    assert result.attacker_id is None
