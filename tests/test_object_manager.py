import pytest

from arenakit.character import Character
from arenakit.geometry import TileSettings
from arenakit.object_manager import ObjectManager
from arenakit.objects import GameObject


def test_add_with_int_coordinates_uses_physics_units():
    manager = ObjectManager()
    obj = manager.add("crate", 40, 72)
    assert (obj.hitbox.x, obj.hitbox.y) == (40, 72)
    assert manager.get("crate") is obj


def test_add_with_float_coordinates_uses_tiles():
    settings = TileSettings(tile_size_physics=20)
    manager = ObjectManager(settings=settings)
    obj = manager.add("crate", 2.0, 3.7)
    assert obj.hitbox.x == 2 * settings.tile_size_physics
    assert obj.hitbox.y == 3 * settings.tile_size_physics


def test_duplicate_name_rejected():
    manager = ObjectManager()
    manager.add("crate", 0, 0)
    with pytest.raises(ValueError):
        manager.add("crate", 1, 1)


def test_missing_name_raises_key_error():
    manager = ObjectManager()
    with pytest.raises(KeyError):
        manager.get("ghost")
    with pytest.raises(KeyError):
        manager["ghost"]


def test_iteration_keeps_insertion_order():
    manager = ObjectManager()
    names = ["b", "a", "c"]
    created = [manager.add(n, 0, 0) for n in names]
    assert manager.all() == created
    assert list(manager) == created
    assert len(manager) == len(names)


def test_clean_removes_dead_objects():
    manager = ObjectManager()
    alive = manager.add("alive", 0, 0)
    doomed = manager.add("doomed", 16, 0)
    doomed.set_health(5)
    doomed.modify_health(-5)
    manager.clean()
    assert manager.all() == [alive]
    assert "doomed" not in manager
    assert "alive" in manager


def test_factory_builds_chosen_type():
    manager = ObjectManager(Character)
    hero = manager.add("hero", 0, 0)
    assert isinstance(hero, Character)
    assert hero.dmgr_insts == {}
    assert isinstance(manager["hero"], GameObject)