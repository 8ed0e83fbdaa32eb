# backend/mudgame/engine/systems/__init__.py
"""
Game systems - kept apart from the world model for modularity.

- combat: damage calculation and attack results
- GameContext: shared world/rng access and event helpers
- CommandRouter: command parsing, availability and help
- look_helpers: text formatters and the ASCII map
"""

from . import look_helpers
from .combat import MIN_DAMAGE, CombatResult, calculate_damage
from .context import Event, GameContext
from .router import CommandMeta, CommandRouter

__all__ = [
    "look_helpers",
    "MIN_DAMAGE",
    "CombatResult",
    "calculate_damage",
    "Event",
    "GameContext",
    "CommandMeta",
    "CommandRouter",
]
