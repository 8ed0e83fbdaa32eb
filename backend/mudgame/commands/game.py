"""
Game commands for the text front end.

Commands:
- enter                     - Step into the room
- attack (kill, a)          - Attack the enemy
- move (m)                  - Move to a random spot; the enemy moves too
- take (get, pickup, t)     - Pick up the oldest item in the room
- inventory (inv, i)        - List carried items
- look (l)                  - Describe the room
- map                       - Draw the room
- status (health)           - Show health and attack power
- help (?)                  - List commands
"""

from typing import TYPE_CHECKING, Any

from ..engine.systems import look_helpers
from ..engine.systems.router import CommandRouter

if TYPE_CHECKING:
    from ..engine.engine import Simulation

Event = dict[str, Any]


def build_router(engine: "Simulation", map_cols: int = 40, map_rows: int = 14) -> CommandRouter:
    """Create a router with every game command registered against ``engine``."""
    router = CommandRouter(engine)

    def map_event(sim: "Simulation") -> Event:
        return sim.ctx.msg_to_player(
            sim.ctx.player_id,
            look_helpers.render_map(sim.world, cols=map_cols, rows=map_rows),
            payload={"kind": "map"},
        )

    @router.register(
        names=["enter"],
        category="actions",
        description="Step into the room",
        requires=lambda sim: sim.can_enter(),
    )
    def handle_enter(sim: "Simulation", args: str) -> list[Event]:
        events = sim.enter_room()
        events.append(sim.ctx.msg_to_player(sim.ctx.player_id, look_helpers.format_room(sim.world)))
        events.append(map_event(sim))
        return events

    @router.register(
        names=["attack", "kill"],
        aliases=["a"],
        category="actions",
        description="Attack the enemy in the room",
        requires=lambda sim: sim.can_attack(),
    )
    def handle_attack(sim: "Simulation", args: str) -> list[Event]:
        events = sim.attack()
        events.append(sim.ctx.msg_to_player(
            sim.ctx.player_id, look_helpers.format_npc_status(sim.world.npc)
        ))
        return events

    @router.register(
        names=["move"],
        aliases=["m"],
        category="actions",
        description="Move somewhere else in the room; the enemy moves too",
        requires=lambda sim: sim.can_move(),
    )
    def handle_move(sim: "Simulation", args: str) -> list[Event]:
        events = sim.move()
        events.append(map_event(sim))
        return events

    @router.register(
        names=["take", "get", "pickup"],
        aliases=["t"],
        category="actions",
        description="Pick up the oldest item lying in the room",
        requires=lambda sim: sim.can_pick_up(),
    )
    def handle_take(sim: "Simulation", args: str) -> list[Event]:
        events = sim.pick_up()
        events.append(_inventory_event(sim))
        events.append(map_event(sim))
        return events

    @router.register(
        names=["inventory", "inv"],
        aliases=["i"],
        category="info",
        description="List what you are carrying",
    )
    def handle_inventory(sim: "Simulation", args: str) -> list[Event]:
        return [_inventory_event(sim)]

    @router.register(
        names=["look"],
        aliases=["l"],
        category="info",
        description="Describe your surroundings",
    )
    def handle_look(sim: "Simulation", args: str) -> list[Event]:
        return [sim.ctx.msg_to_player(sim.ctx.player_id, look_helpers.format_room(sim.world))]

    @router.register(
        names=["map"],
        category="info",
        description="Draw the room",
    )
    def handle_map(sim: "Simulation", args: str) -> list[Event]:
        return [map_event(sim)]

    @router.register(
        names=["status", "health"],
        category="info",
        description="Show your health and attack power",
    )
    def handle_status(sim: "Simulation", args: str) -> list[Event]:
        player = sim.world.player
        text = f"{look_helpers.format_health(player)}  Attack: {player.total_attack_power()}"
        return [sim.ctx.msg_to_player(player.id, text)]

    @router.register(
        names=["help"],
        aliases=["?"],
        category="info",
        description="List commands",
    )
    def handle_help(sim: "Simulation", args: str) -> list[Event]:
        return [sim.ctx.msg_to_player(sim.ctx.player_id, router.get_help())]

    return router


def _inventory_event(sim: "Simulation") -> Event:
    entries = look_helpers.format_inventory(sim.world.player)
    if entries:
        text = "You are carrying:\n" + "\n".join(f"  {entry}" for entry in entries)
    else:
        text = "You are carrying nothing."
    return sim.ctx.msg_to_player(sim.ctx.player_id, text, payload={"inventory": entries})
