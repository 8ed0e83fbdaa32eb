# backend/mudgame/engine/systems/context.py
"""
GameContext - Shared context object for the engine and command handlers.

Provides:
- Access to World state
- The simulation's single random source
- Event helpers for building message dicts

Events are plain dicts returned to the caller; nothing is pushed anywhere.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING, Dict, Any

if TYPE_CHECKING:
    from ..world import World, PlayerId, RoomId


# Type alias for events (message dicts handed to the presentation layer)
Event = Dict[str, Any]


class GameContext:
    """
    Shared context object passed to command handlers.

    Usage:
        ctx = GameContext(world, rng=random.Random(42))
        ctx.msg_to_player(ctx.player_id, "You look around.")
    """

    def __init__(self, world: "World", rng: random.Random | None = None) -> None:
        self.world = world
        self.rng = rng if rng is not None else random.Random()

    @property
    def player_id(self) -> "PlayerId":
        return self.world.player.id

    # ---------- Event Helpers ----------

    def msg_to_player(
        self,
        player_id: "PlayerId",
        text: str,
        *,
        payload: dict | None = None,
    ) -> Event:
        """Create a per-player message event."""
        ev: Event = {
            "type": "message",
            "scope": "player",
            "player_id": player_id,
            "text": text,
        }
        if payload:
            ev["payload"] = payload
        return ev

    def msg_to_room(
        self,
        room_id: "RoomId",
        text: str,
        *,
        payload: dict | None = None,
    ) -> Event:
        """Create a room-broadcast message event."""
        ev: Event = {
            "type": "message",
            "scope": "room",
            "room_id": room_id,
            "text": text,
        }
        if payload:
            ev["payload"] = payload
        return ev
