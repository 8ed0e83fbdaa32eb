"""
Look helpers: text formatters for the presentation layer.

Provides reusable formatters for:
- Health and inventory lines
- Room descriptions
- The ASCII room map

All functions only read state.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..world import GameObject, Item, NPC, Player, Room, World

# Map glyphs
PLAYER_GLYPH = "@"
NPC_GLYPH = "N"
ITEM_GLYPH = "i"
WEAPON_GLYPH = "w"


def format_health(player: "Player") -> str:
    return f"Health: {player.health}"


def format_inventory_entry(item: "Item") -> str:
    """Item name, with the attack bonus appended for weapons."""
    if item.is_weapon():
        return f"{item.name} (Attack: +{item.attack_power})"
    return item.name


def format_inventory(player: "Player") -> List[str]:
    return [format_inventory_entry(item) for item in player.inventory]


def format_npc_status(npc: "NPC") -> str:
    if not npc.is_alive():
        return f"{npc.name} lies dead."
    return f"{npc.name} (health {npc.health}, defense {npc.defense})"


def format_room(world: "World") -> str:
    """
    Describe the room the player is in.

    Dead NPCs are left out, matching what the map shows.
    """
    player = world.player
    room = player.current_room
    if room is None:
        return "You stand outside. Type 'enter' to step into the room."

    lines = [f"═══ {room.name} ═══"]
    if room.description:
        lines.append(room.description)

    if room.item_count:
        names = ", ".join(format_inventory_entry(item) for item in room.items)
        lines.append(f"Items here: {names}")
    else:
        lines.append("There is nothing here to pick up.")

    for npc in room.living_npcs():
        lines.append(f"You see {format_npc_status(npc)} at ({npc.x:.0f}, {npc.y:.0f}).")

    lines.append(f"You are at ({player.x:.0f}, {player.y:.0f}). {format_health(player)}")
    return "\n".join(lines)


def _grid_cell(obj: "GameObject", room: "Room", cols: int, rows: int) -> tuple[int, int]:
    """Map a world position to an interior cell of the map grid."""
    rel_x = (obj.x - room.x) / room.width if room.width else 0.5
    rel_y = (obj.y - room.y) / room.height if room.height else 0.5
    col = round(rel_x * (cols - 1))
    row = round(rel_y * (rows - 1))
    # Keep glyphs off the border
    col = min(max(col, 1), cols - 2)
    row = min(max(row, 1), rows - 2)
    return (col, row)


def render_map(world: "World", cols: int = 40, rows: int = 14) -> str:
    """
    Draw the player's room as ASCII art.

    Draw order is room, items, living NPCs, player, so the player glyph wins
    when several objects share a cell.
    """
    room = world.player.current_room
    if room is None:
        return "(You are not in a room.)"

    cols = max(cols, 3)
    rows = max(rows, 3)
    grid = [[" "] * cols for _ in range(rows)]
    for col in range(cols):
        grid[0][col] = "-"
        grid[rows - 1][col] = "-"
    for row in range(rows):
        grid[row][0] = "|"
        grid[row][cols - 1] = "|"
    for row, col in ((0, 0), (0, cols - 1), (rows - 1, 0), (rows - 1, cols - 1)):
        grid[row][col] = "+"

    for item in room.items:
        col, row = _grid_cell(item, room, cols, rows)
        grid[row][col] = WEAPON_GLYPH if item.is_weapon() else ITEM_GLYPH

    for npc in room.living_npcs():
        col, row = _grid_cell(npc, room, cols, rows)
        grid[row][col] = NPC_GLYPH

    col, row = _grid_cell(world.player, room, cols, rows)
    grid[row][col] = PLAYER_GLYPH

    title = room.name.center(cols)
    return "\n".join([title.rstrip()] + ["".join(line) for line in grid])
