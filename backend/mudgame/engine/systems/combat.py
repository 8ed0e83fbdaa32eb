# backend/mudgame/engine/systems/combat.py
"""
Combat math shared by the player's attack and the command layer.

Provides:
- Damage calculation (attack power minus defense, floored at MIN_DAMAGE)
- CombatResult record describing a single attack
"""

from __future__ import annotations
from dataclasses import dataclass

# Every landed attack deals at least this much, even against high defense.
MIN_DAMAGE = 1


def calculate_damage(attack_power: int, defense: int) -> int:
    """
    Damage dealt by an attack of ``attack_power`` against ``defense``.

    Examples:
        calculate_damage(25, 5) -> 20
        calculate_damage(3, 5) -> 1
    """
    return max(MIN_DAMAGE, attack_power - defense)


@dataclass
class CombatResult:
    """Result of a single attack."""
    success: bool = False
    damage_dealt: int = 0
    target_health: int = 0
    target_killed: bool = False

    attacker_id: str | None = None
    defender_id: str | None = None
