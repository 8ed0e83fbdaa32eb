"""Game engine: world model, placement rule, loader and the Simulation facade."""

from .engine import Simulation
from .loader import DEFAULT_WORLD_FILE, build_world, load_world, load_world_data
from .placement import WALL_MARGIN, place_in_room, random_point_in_room
from .world import (
    MAX_INVENTORY,
    MAX_ROOM_ITEMS,
    MAX_ROOM_NPCS,
    NPC,
    BoundedList,
    GameObject,
    Item,
    ItemKind,
    Player,
    Room,
    Weapon,
    World,
)

__all__ = [
    "Simulation",
    "DEFAULT_WORLD_FILE",
    "build_world",
    "load_world",
    "load_world_data",
    "WALL_MARGIN",
    "place_in_room",
    "random_point_in_room",
    "MAX_INVENTORY",
    "MAX_ROOM_ITEMS",
    "MAX_ROOM_NPCS",
    "NPC",
    "BoundedList",
    "GameObject",
    "Item",
    "ItemKind",
    "Player",
    "Room",
    "Weapon",
    "World",
]
