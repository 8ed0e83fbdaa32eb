# backend/mudgame/engine/world.py
"""
Runtime world model: game objects, items, NPCs, the room and the player.

Containment rules:
- A Room exclusively owns its item and NPC lists. Items and NPCs only keep a
  weak, non-owning back-reference to the room they are in.
- Picking up an item moves it from the room's item list into the player's
  inventory in one step.

Every precondition failure (no room, dead target, full list, bad index) is a
silent no-op or a ``None`` result. Nothing in here raises during play.
"""
import logging
import random
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Iterator, TypeVar

from .placement import place_in_room
from .systems.combat import CombatResult, calculate_damage

logger = logging.getLogger(__name__)


# Simple type aliases for clarity
RoomId = str
PlayerId = str
ItemId = str
NpcId = str

# Occupancy limits
MAX_ROOM_ITEMS = 10
MAX_ROOM_NPCS = 10
MAX_INVENTORY = 10

T = TypeVar("T")


class ItemKind(Enum):
    """Closed set of item variants."""
    PLAIN = "plain"
    WEAPON = "weapon"


_NO_DEFAULT = object()


class _SetOnce:
    """
    Dataclass field that only the generated ``__init__`` may assign.

    The value lives in a private ``_<name>`` attribute; assigning it a second
    time raises AttributeError.
    """

    def __init__(self, default: Any = _NO_DEFAULT) -> None:
        self.default = default

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.private_name = f"_{name}"

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            # Class access is how dataclass looks up the field default
            if self.default is _NO_DEFAULT:
                raise AttributeError(self.name)
            return self.default
        return getattr(obj, self.private_name)

    def __set__(self, obj: Any, value: Any) -> None:
        if self.private_name in obj.__dict__:
            raise AttributeError(f"{type(obj).__name__}.{self.name} is read-only")
        obj.__dict__[self.private_name] = value


class BoundedList(Generic[T]):
    """
    Ordered, fixed-capacity sequence.

    Appending past capacity does nothing and returns False. Removal is by
    identity and keeps the relative order of the remaining entries.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: list[T] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._entries))

    def __contains__(self, entry: object) -> bool:
        return any(existing is entry for existing in self._entries)

    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    def append(self, entry: T) -> bool:
        if self.is_full():
            return False
        self._entries.append(entry)
        return True

    def remove(self, entry: T) -> bool:
        for index, existing in enumerate(self._entries):
            if existing is entry:
                del self._entries[index]
                return True
        return False

    def get(self, index: int) -> T | None:
        """Entry at ``index``, or None outside ``0 <= index < len``."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def snapshot(self) -> tuple[T, ...]:
        return tuple(self._entries)


@dataclass(eq=False)
class GameObject:
    """
    Base for every placed entity: a name, a fixed id and a position.

    Not instantiated directly. ``id`` cannot be reassigned once set; the
    position changes through ``place_at`` only.
    """
    name: str
    id: str = _SetOnce()
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        if type(self) is GameObject:
            raise TypeError("GameObject is abstract; use Item, Weapon, NPC or Player")

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def place_at(self, x: float, y: float) -> None:
        """Move the object to an absolute position."""
        self.x = x
        self.y = y


class _RoomOccupant:
    """Mixin holding the weak back-reference to the containing room."""

    _room_ref: "weakref.ReferenceType[Room] | None" = None

    @property
    def location(self) -> "Room | None":
        """The room this object is in, or None."""
        if self._room_ref is None:
            return None
        return self._room_ref()

    def _set_location(self, room: "Room | None") -> None:
        # Only Room calls this.
        self._room_ref = weakref.ref(room) if room is not None else None


@dataclass(eq=False)
class Item(_RoomOccupant, GameObject):
    """A pickupable object. ``location`` is set only by Room."""
    kind: ItemKind = field(default=ItemKind.PLAIN, init=False)

    def is_weapon(self) -> bool:
        return self.kind is ItemKind.WEAPON

    def __repr__(self) -> str:
        return f"Item(id={self.id!r}, name={self.name!r}, kind={self.kind.value})"


@dataclass(eq=False)
class Weapon(Item):
    """An item that adds ``attack_power`` to its holder's attacks."""
    attack_power: int = _SetOnce(default=0)
    kind: ItemKind = field(default=ItemKind.WEAPON, init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.attack_power < 0:
            raise ValueError(f"Weapon {self.id!r} attack_power must be >= 0, got {self.attack_power}")

    def __repr__(self) -> str:
        return f"Weapon(id={self.id!r}, name={self.name!r}, attack_power={self.attack_power})"


@dataclass(eq=False)
class NPC(_RoomOccupant, GameObject):
    """
    A hostile non-player character.

    Death is implicit: an NPC with zero health is dead but stays in its
    room's NPC list. Callers check ``is_alive()`` before fighting, moving or
    drawing it.
    """
    health: int = 100
    defense: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.health = max(0, self.health)
        self.defense = max(0, self.defense)

    def take_damage(self, damage: int) -> None:
        """Reduce health by ``damage``; health never drops below zero."""
        self.health = max(0, self.health - damage)

    def is_alive(self) -> bool:
        """Check if NPC is alive."""
        return self.health > 0

    def move_random(self, rng: random.Random | None = None) -> None:
        """Jump to a random point inside the NPC's room. No-op outside a room."""
        room = self.location
        if room is None:
            return
        place_in_room(self, room, rng)

    def __repr__(self) -> str:
        return f"NPC(id={self.id!r}, name={self.name!r}, health={self.health}, defense={self.defense})"


@dataclass(eq=False)
class Room:
    """Bounded rectangular container for items and NPCs."""
    name: str
    id: RoomId
    x: float
    y: float
    width: float
    height: float
    description: str = ""

    _items: BoundedList[Item] = field(
        default_factory=lambda: BoundedList(MAX_ROOM_ITEMS), init=False, repr=False
    )
    _npcs: BoundedList[NPC] = field(
        default_factory=lambda: BoundedList(MAX_ROOM_NPCS), init=False, repr=False
    )

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Room rectangle as ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)

    # ---------- Items ----------

    def add_item(self, item: Item) -> None:
        """Append ``item`` if there is room for it; otherwise do nothing."""
        if not self._items.append(item):
            logger.debug("Room %s is full; item %s not added", self.id, item.id)
            return
        item._set_location(self)

    def remove_item(self, item: Item) -> None:
        """Remove ``item`` keeping the order of the rest. No-op if absent."""
        if self._items.remove(item):
            item._set_location(None)

    @property
    def item_count(self) -> int:
        return len(self._items)

    def get_item(self, index: int) -> Item | None:
        return self._items.get(index)

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items.snapshot()

    # ---------- NPCs ----------

    def add_npc(self, npc: NPC) -> None:
        """Append ``npc`` if there is room for it; otherwise do nothing."""
        if not self._npcs.append(npc):
            logger.debug("Room %s is full; NPC %s not added", self.id, npc.id)
            return
        npc._set_location(self)

    @property
    def npc_count(self) -> int:
        return len(self._npcs)

    def get_npc(self, index: int) -> NPC | None:
        return self._npcs.get(index)

    @property
    def npcs(self) -> tuple[NPC, ...]:
        return self._npcs.snapshot()

    def living_npcs(self) -> list[NPC]:
        return [npc for npc in self._npcs if npc.is_alive()]


@dataclass(eq=False)
class Player(GameObject):
    """
    The user-controlled character.

    Player health is never reduced by anything in the engine; NPCs do not
    fight back.
    """
    health: int = 100
    base_attack_power: int = 10

    current_room: Room | None = field(default=None, init=False)
    _inventory: BoundedList[Item] = field(
        default_factory=lambda: BoundedList(MAX_INVENTORY), init=False, repr=False
    )

    # ---------- Queries ----------

    @property
    def inventory_count(self) -> int:
        return len(self._inventory)

    def get_inventory_item(self, index: int) -> Item | None:
        return self._inventory.get(index)

    @property
    def inventory(self) -> tuple[Item, ...]:
        return self._inventory.snapshot()

    def total_attack_power(self) -> int:
        """Base attack power plus the attack power of every carried weapon."""
        total = self.base_attack_power
        for item in self._inventory:
            if item.kind is ItemKind.WEAPON:
                total += item.attack_power
        return total

    # ---------- Actions ----------

    def enter_room(self, room: Room) -> None:
        """Make ``room`` the player's current room (placement is done by the caller)."""
        self.current_room = room

    def attack(self, npc: NPC) -> CombatResult:
        """
        Hit ``npc`` for ``max(1, total_attack_power - npc.defense)``.

        Does nothing outside a room or against a dead NPC.
        """
        if self.current_room is None:
            logger.debug("Player %s attacked outside of a room; ignored", self.id)
            return CombatResult(attacker_id=self.id, defender_id=npc.id, target_health=npc.health)
        if not npc.is_alive():
            logger.debug("Player %s attacked dead NPC %s; ignored", self.id, npc.id)
            return CombatResult(attacker_id=self.id, defender_id=npc.id, target_health=npc.health)

        damage = calculate_damage(self.total_attack_power(), npc.defense)
        npc.take_damage(damage)
        logger.debug("Player %s hit NPC %s for %d (health now %d)", self.id, npc.id, damage, npc.health)
        return CombatResult(
            success=True,
            damage_dealt=damage,
            target_health=npc.health,
            target_killed=not npc.is_alive(),
            attacker_id=self.id,
            defender_id=npc.id,
        )

    def move(self, rng: random.Random | None = None) -> None:
        """
        Jump to a random point in the current room, then let every living NPC
        in the room reposition itself with the same random source.
        """
        room = self.current_room
        if room is None:
            return
        place_in_room(self, room, rng)
        for npc in room.npcs:
            if npc.is_alive():
                npc.move_random(rng)

    def pick_up_item(self) -> Item | None:
        """
        Take the oldest item in the current room.

        The item always leaves the room. With a full inventory it is dropped
        and lost. Returns the item that left the room, or None.
        """
        room = self.current_room
        if room is None or room.item_count == 0:
            return None
        item = room.get_item(0)
        room.remove_item(item)
        if not self._inventory.append(item):
            logger.debug("Inventory of %s is full; %s dropped", self.id, item.id)
        return item


@dataclass
class World:
    """
    In-memory scenario state.

    Built by the loader; the Simulation drives every change to it.
    """
    room: Room
    player: Player
    npc: NPC
    weapon: Weapon | None = None
    items: Dict[ItemId, Item] = field(default_factory=dict)

    def get_item(self, item_id: ItemId) -> Item | None:
        return self.items.get(item_id)
