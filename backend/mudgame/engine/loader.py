# backend/mudgame/engine/loader.py
"""
Build the in-memory World from a YAML world-data file.

File layout (see world_data/twilight_forest.yaml):

    room:   {id, name, x, y, width, height, description?}
    player: {id, name, x?, y?, health?, base_attack_power?}
    npc:    {id, name, x?, y?, health?, defense?}
    items:  [{id, name, type: plain|weapon, x?, y?, attack_power?}, ...]

Items are added to the room in file order, which is also pickup order.
"""
import logging
from pathlib import Path
from typing import Any

import yaml

from .world import ItemKind, NPC, Item, Player, Room, Weapon, World

logger = logging.getLogger(__name__)

WORLD_DATA_DIR = Path(__file__).resolve().parent.parent / "world_data"
DEFAULT_WORLD_FILE = WORLD_DATA_DIR / "twilight_forest.yaml"


def _require(section: dict, key: str, where: str) -> Any:
    if key not in section:
        raise ValueError(f"World data is missing '{where}.{key}'")
    return section[key]


def _number(section: dict, key: str, where: str, default: Any = None, cast=float) -> Any:
    """Read a numeric field; it is required unless a ``default`` is given."""
    if default is None:
        value = _require(section, key, where)
    else:
        value = section.get(key, default)
    try:
        return cast(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"World data '{where}.{key}' must be a number") from exc


def _section(data: dict, key: str) -> dict:
    section = data.get(key)
    if not isinstance(section, dict):
        raise ValueError(f"World data is missing the '{key}' section")
    return section


def load_world_data(path: str | Path) -> dict:
    """Read and parse a world-data YAML file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Could not parse world data {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"World data {path} must be a mapping")
    return data


def build_item(item_data: dict) -> Item:
    """Create a plain item or a weapon from its YAML entry."""
    if not isinstance(item_data, dict):
        raise ValueError(f"World data 'items[]' entries must be mappings, got {item_data!r}")
    item_id = _require(item_data, "id", "items[]")
    where = f"items[{item_id}]"
    name = _require(item_data, "name", where)
    try:
        kind = ItemKind(item_data.get("type", ItemKind.PLAIN.value))
    except ValueError as exc:
        raise ValueError(f"World data '{where}.type' must be 'plain' or 'weapon'") from exc
    x = _number(item_data, "x", where, 0.0)
    y = _number(item_data, "y", where, 0.0)
    if kind is ItemKind.WEAPON:
        attack_power = _number(item_data, "attack_power", where, 0, cast=int)
        return Weapon(name, item_id, x, y, attack_power=attack_power)
    return Item(name, item_id, x, y)


def build_world(data: dict) -> World:
    """
    Construct rooms, entities and items from parsed world data.

    Raises:
        ValueError: when a section or key is missing or has the wrong type
    """
    room_data = _section(data, "room")
    room = Room(
        name=_require(room_data, "name", "room"),
        id=_require(room_data, "id", "room"),
        x=_number(room_data, "x", "room"),
        y=_number(room_data, "y", "room"),
        width=_number(room_data, "width", "room"),
        height=_number(room_data, "height", "room"),
        description=room_data.get("description") or "",
    )

    player_data = _section(data, "player")
    player = Player(
        name=_require(player_data, "name", "player"),
        id=_require(player_data, "id", "player"),
        x=_number(player_data, "x", "player", 0.0),
        y=_number(player_data, "y", "player", 0.0),
        health=_number(player_data, "health", "player", 100, cast=int),
        base_attack_power=_number(player_data, "base_attack_power", "player", 10, cast=int),
    )

    npc_data = _section(data, "npc")
    npc = NPC(
        name=_require(npc_data, "name", "npc"),
        id=_require(npc_data, "id", "npc"),
        x=_number(npc_data, "x", "npc", 0.0),
        y=_number(npc_data, "y", "npc", 0.0),
        health=_number(npc_data, "health", "npc", 100, cast=int),
        defense=_number(npc_data, "defense", "npc", 0, cast=int),
    )
    room.add_npc(npc)

    item_list = data.get("items") or []
    if not isinstance(item_list, list):
        raise ValueError("World data 'items' must be a list")

    items: dict[str, Item] = {}
    weapon = None
    for item_data in item_list:
        item = build_item(item_data)
        items[item.id] = item
        room.add_item(item)
        if weapon is None and item.is_weapon():
            weapon = item

    return World(room=room, player=player, npc=npc, weapon=weapon, items=items)


def load_world(path: str | Path | None = None) -> World:
    """
    Load a World from ``path``, or from the bundled scenario.

    Called once at startup by the CLI, but can be reused for tests.
    """
    path = Path(path) if path is not None else DEFAULT_WORLD_FILE
    world = build_world(load_world_data(path))
    logger.info(
        "Loaded world %s: room %s, %d items, npc %s",
        path.name, world.room.id, world.room.item_count, world.npc.id,
    )
    return world
