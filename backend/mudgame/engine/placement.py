# backend/mudgame/engine/placement.py
"""
Shared placement rule for putting objects at random points inside a room.

Every random reposition in the game (entering the room, the player moving,
NPCs wandering in response) goes through ``random_point_in_room`` so they all
follow the same distribution.
"""
from __future__ import annotations

import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .world import GameObject, Room

# Distance kept between a placed object and the room walls.
WALL_MARGIN = 20


def random_point_in_room(room: "Room", rng: random.Random | None = None) -> tuple[float, float]:
    """
    Draw a point uniformly inside ``room`` minus a ``WALL_MARGIN`` inset.

    Each axis is drawn independently. ``rng`` is any object with a
    ``uniform(a, b)`` method; the module-level ``random`` functions are used
    when it is omitted.
    """
    source = rng if rng is not None else random
    x, y, width, height = room.bounds
    new_x = source.uniform(x + WALL_MARGIN, x + width - WALL_MARGIN)
    new_y = source.uniform(y + WALL_MARGIN, y + height - WALL_MARGIN)
    return (new_x, new_y)


def place_in_room(obj: "GameObject", room: "Room", rng: random.Random | None = None) -> None:
    """Move ``obj`` to a fresh random point inside ``room``."""
    new_x, new_y = random_point_in_room(room, rng)
    obj.place_at(new_x, new_y)
