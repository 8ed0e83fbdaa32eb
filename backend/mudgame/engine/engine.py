# backend/mudgame/engine/engine.py
"""
Simulation - the engine facade the front end talks to.

Owns one World, one random source and one lock. Every command runs to
completion under the lock, so a multi-threaded host sees each command as a
single step. Commands return message events; they never raise for
precondition failures.
"""
import logging
import random
import threading
from typing import List

from .placement import place_in_room
from .systems.context import Event, GameContext
from .world import World

logger = logging.getLogger(__name__)


class Simulation:
    """
    One running game: a room, a player, an NPC and their items.

    Usage:
        sim = Simulation(load_world(), seed=42)
        sim.enter_room()
        events = sim.attack()

    ``seed`` builds a fresh random source; ``rng`` supplies one that is
    already seeded. Giving both is a ValueError.
    """

    def __init__(self, world: World, rng: random.Random | None = None, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self.world = world
        injected = rng is not None
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self.ctx = GameContext(world, rng=rng)
        self._lock = threading.RLock()
        logger.info(
            "Simulation started in room %s (seed=%s)",
            world.room.id, "injected rng" if injected else ("unset" if seed is None else seed),
        )

    # ---------- Queries ----------

    @property
    def entered(self) -> bool:
        return self.world.player.current_room is not None

    def can_enter(self) -> bool:
        return not self.entered

    def can_attack(self) -> bool:
        return self.entered

    def can_move(self) -> bool:
        return self.entered

    def can_pick_up(self) -> bool:
        room = self.world.player.current_room
        return room is not None and room.item_count > 0

    # ---------- Commands ----------

    def enter_room(self) -> List[Event]:
        """
        Put the player in the room and scatter player, NPC and weapon inside it.

        Entering a second time does nothing.
        """
        with self._lock:
            world = self.world
            player = world.player
            if self.entered:
                return [self.ctx.msg_to_player(player.id, f"You are already in {player.current_room.name}.")]

            room = world.room
            player.enter_room(room)
            place_in_room(player, room, self.rng)
            place_in_room(world.npc, room, self.rng)
            if world.weapon is not None:
                place_in_room(world.weapon, room, self.rng)
            logger.info("Player %s entered room %s", player.id, room.id)
            return [self.ctx.msg_to_player(player.id, f"You enter {room.name}.")]

    def attack(self) -> List[Event]:
        """Attack the scenario's NPC."""
        with self._lock:
            player = self.world.player
            npc = self.world.npc
            if not self.entered:
                return [self.ctx.msg_to_player(player.id, "There is nothing to attack out here.")]
            if not npc.is_alive():
                return [self.ctx.msg_to_player(player.id, f"{npc.name} is already dead.")]

            result = player.attack(npc)
            events = [self.ctx.msg_to_player(
                player.id,
                f"You hit {npc.name} for {result.damage_dealt} damage. "
                f"{npc.name} has {result.target_health} health left.",
                payload={"damage": result.damage_dealt, "target_health": result.target_health},
            )]
            if result.target_killed:
                events.append(self.ctx.msg_to_room(player.current_room.id, f"{npc.name} collapses, dead."))
            return events

    def move(self) -> List[Event]:
        """Move the player; living NPCs in the room move too."""
        with self._lock:
            player = self.world.player
            if not self.entered:
                return [self.ctx.msg_to_player(player.id, "You need to enter the room first.")]

            player.move(self.rng)
            events = [self.ctx.msg_to_player(player.id, f"You move to ({player.x:.0f}, {player.y:.0f}).")]
            for npc in player.current_room.living_npcs():
                events.append(self.ctx.msg_to_room(
                    player.current_room.id,
                    f"{npc.name} shifts to ({npc.x:.0f}, {npc.y:.0f}).",
                ))
            return events

    def pick_up(self) -> List[Event]:
        """Pick up the oldest item in the room."""
        with self._lock:
            player = self.world.player
            if not self.can_pick_up():
                return [self.ctx.msg_to_player(player.id, "There is nothing here to pick up.")]

            before = player.inventory_count
            item = player.pick_up_item()
            if player.inventory_count == before:
                return [self.ctx.msg_to_player(player.id, f"Your pack is full; {item.name} falls out of reach.")]
            return [self.ctx.msg_to_player(player.id, f"You pick up {item.name}.")]
