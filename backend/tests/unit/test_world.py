"""
Unit tests for World data structures.

Tests GameObject, Item, Weapon, NPC, BoundedList and World.
"""

import gc

import pytest

from mudgame.engine.world import (NPC, BoundedList, GameObject, Item, ItemKind,
                                  Weapon)

# ============================================================================
# GameObject Tests
# ============================================================================


@pytest.mark.unit
def test_game_object_is_abstract():
    """GameObject cannot be created on its own."""
    with pytest.raises(TypeError):
        GameObject("Thing", "thing_1", 0, 0)


@pytest.mark.unit
def test_game_object_id_is_read_only():
    item = Item("Pebble", "pebble_1", 1, 2)

    with pytest.raises(AttributeError):
        item.id = "pebble_2"

    assert item.id == "pebble_1"


@pytest.mark.unit
def test_place_at_updates_position():
    item = Item("Pebble", "pebble_1", 1, 2)

    item.place_at(30.5, 40.25)

    assert item.position == (30.5, 40.25)
    assert item.x == 30.5
    assert item.y == 40.25


@pytest.mark.unit
def test_objects_compare_by_identity():
    """Two items with the same fields are still different objects."""
    first = Item("Pebble", "pebble_1")
    second = Item("Pebble", "pebble_1")

    assert first != second
    assert first == first


# ============================================================================
# Item / Weapon Tests
# ============================================================================


@pytest.mark.unit
def test_item_defaults():
    item = Item("Pebble", "pebble_1")

    assert item.kind is ItemKind.PLAIN
    assert not item.is_weapon()
    assert item.location is None


@pytest.mark.unit
def test_weapon_creation():
    weapon = Weapon("Sword", "weapon1", 300, 300, 15)

    assert weapon.kind is ItemKind.WEAPON
    assert weapon.is_weapon()
    assert weapon.attack_power == 15
    assert weapon.position == (300, 300)
    assert weapon.location is None


@pytest.mark.unit
def test_weapon_attack_power_is_read_only():
    weapon = Weapon("Sword", "weapon1", attack_power=15)

    with pytest.raises(AttributeError):
        weapon.attack_power = 99

    assert weapon.attack_power == 15


@pytest.mark.unit
def test_weapon_rejects_negative_attack_power():
    with pytest.raises(ValueError):
        Weapon("Cursed Sword", "weapon_bad", attack_power=-1)


@pytest.mark.unit
def test_location_is_weak_reference(room_factory):
    """An item does not keep its room alive."""
    room = room_factory()
    item = Item("Pebble", "pebble_1")
    room.add_item(item)
    assert item.location is room

    del room
    gc.collect()

    assert item.location is None


# ============================================================================
# NPC Tests
# ============================================================================


@pytest.mark.unit
def test_npc_creation():
    npc = NPC("Enemy", "npc1", 400, 200, health=50, defense=5)

    assert npc.health == 50
    assert npc.defense == 5
    assert npc.location is None
    assert npc.is_alive() is True


@pytest.mark.unit
def test_npc_negative_health_is_clamped():
    npc = NPC("Ghost", "npc_ghost", health=-10)

    assert npc.health == 0
    assert npc.is_alive() is False


@pytest.mark.unit
@pytest.mark.parametrize("damage", [0, 1, 5, 49, 50, 51, 500])
def test_take_damage_never_goes_negative(damage):
    npc = NPC("Enemy", "npc1", health=50, defense=5)

    npc.take_damage(damage)

    assert npc.health == max(0, 50 - damage)
    assert npc.is_alive() == (npc.health > 0)


@pytest.mark.unit
def test_take_damage_on_dead_npc_stays_at_zero():
    npc = NPC("Enemy", "npc1", health=10)
    npc.take_damage(10)
    assert npc.health == 0

    npc.take_damage(7)

    assert npc.health == 0
    assert not npc.is_alive()


@pytest.mark.unit
def test_move_random_without_room_is_noop(rng):
    npc = NPC("Enemy", "npc1", 400, 200)

    npc.move_random(rng)

    assert npc.position == (400, 200)


@pytest.mark.unit
def test_move_random_stays_inside_room(room, rng):
    npc = NPC("Enemy", "npc1", 400, 200)
    room.add_npc(npc)

    for _ in range(200):
        npc.move_random(rng)
        assert 45 <= npc.x <= 355
        assert 45 <= npc.y <= 255


# ============================================================================
# BoundedList Tests
# ============================================================================


@pytest.mark.unit
def test_bounded_list_capacity():
    entries = BoundedList(2)

    assert entries.append("a") is True
    assert entries.append("b") is True
    assert entries.append("c") is False

    assert entries.snapshot() == ("a", "b")
    assert entries.is_full()


@pytest.mark.unit
def test_bounded_list_remove_keeps_order():
    a, b, c = object(), object(), object()
    entries = BoundedList(5)
    for entry in (a, b, c):
        entries.append(entry)

    assert entries.remove(b) is True

    assert entries.snapshot() == (a, c)


@pytest.mark.unit
def test_bounded_list_remove_missing_is_noop():
    entries = BoundedList(3)
    entries.append("a")

    assert entries.remove("z") is False
    assert len(entries) == 1


@pytest.mark.unit
@pytest.mark.parametrize("index", [-1, 1, 10])
def test_bounded_list_get_out_of_range(index):
    entries = BoundedList(3)
    entries.append("a")

    assert entries.get(index) is None


# ============================================================================
# World Tests
# ============================================================================


@pytest.mark.unit
def test_bundled_world(world):
    assert world.room.id == "room1"
    assert world.player.id == "player1"
    assert world.npc.id == "npc1"
    assert world.weapon is world.get_item("weapon1")
    assert world.get_item("missing") is None


@pytest.mark.unit
def test_read_only_fields_keep_constructor_keywords():
    weapon = Weapon(name="Axe", id="axe_1", x=5, y=6, attack_power=4)
    npc = NPC(name="Rat", id="rat_1")

    assert (weapon.id, weapon.attack_power) == ("axe_1", 4)
    assert Weapon("Stick", "stick_1").attack_power == 0
    with pytest.raises(AttributeError):
        npc.id = "rat_2"
    assert "axe_1" in repr(weapon)
