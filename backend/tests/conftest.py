"""
Global pytest configuration and shared fixtures.

Provides common test infrastructure for all test suites including:
- Seeded random source
- Room, item, NPC and player factories
- The bundled scenario as a World and as a Simulation
"""

import random
import sys
from pathlib import Path

import pytest

# Add backend to path
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

from mudgame.engine import Simulation, load_world  # noqa: E402
from mudgame.engine.world import NPC, Item, Player, Room, Weapon, World  # noqa: E402

# ============================================================================
# Randomness
# ============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


# ============================================================================
# Entity Factories
# ============================================================================


@pytest.fixture
def room_factory():
    """Factory for creating test Room instances."""

    def _create_room(
        room_id: str = "room_test",
        name: str = "Test Chamber",
        x: float = 25,
        y: float = 25,
        width: float = 350,
        height: float = 250,
    ) -> Room:
        return Room(name=name, id=room_id, x=x, y=y, width=width, height=height)

    return _create_room


@pytest.fixture
def item_factory():
    """Factory for plain items with unique ids."""
    counter = {"n": 0}

    def _create_item(name: str | None = None, item_id: str | None = None) -> Item:
        counter["n"] += 1
        n = counter["n"]
        return Item(name or f"Pebble {n}", item_id or f"item_{n}")

    return _create_item


@pytest.fixture
def weapon_factory():
    """Factory for weapons."""

    def _create_weapon(attack_power: int = 15, name: str = "Sword", item_id: str = "weapon_test") -> Weapon:
        return Weapon(name, item_id, 300, 300, attack_power=attack_power)

    return _create_weapon


@pytest.fixture
def npc_factory():
    """Factory for NPCs."""

    def _create_npc(health: int = 50, defense: int = 5, npc_id: str = "npc_test", name: str = "Enemy") -> NPC:
        return NPC(name, npc_id, 400, 200, health=health, defense=defense)

    return _create_npc


@pytest.fixture
def player_factory():
    """Factory for players."""

    def _create_player(base_attack_power: int = 10, health: int = 100, player_id: str = "player_test") -> Player:
        return Player("TestHero", player_id, 200, 100, health=health, base_attack_power=base_attack_power)

    return _create_player


@pytest.fixture
def room(room_factory) -> Room:
    return room_factory()


@pytest.fixture
def player_in_room(player_factory, room) -> Player:
    player = player_factory()
    player.enter_room(room)
    return player


# ============================================================================
# Scenario Fixtures
# ============================================================================


@pytest.fixture
def world() -> World:
    """The bundled Twilight Forest scenario."""
    return load_world()


@pytest.fixture
def simulation(world) -> Simulation:
    return Simulation(world, seed=42)
