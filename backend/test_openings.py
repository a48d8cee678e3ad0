"""Tests for door and window placement."""

import pytest

from services.layout_engine import (
    PlacedRoom,
    RoomRole,
    RoomType,
    SequentialIdGenerator,
    classify_walls,
    generate_walls,
    place_doors,
    place_windows,
)


def _placed(name, x, y, w, d, rtype=RoomType.BEDROOM):
    return PlacedRoom(role=RoomRole(rtype, name), width=w, depth=d, x=x, y=y)


def _classify(rooms):
    ids = SequentialIdGenerator()
    walls = generate_walls(rooms, "#FFFFFF", ids)
    return classify_walls(walls, rooms), ids


# ---------- Doors ----------

def test_door_centered_on_shared_wall():
    classes, ids = _classify([_placed("A", 0, 0, 4, 4), _placed("B", 4, 0, 4, 4)])
    doors = place_doors(classes, ids)
    assert len(doors) == 1
    door = doors[0]
    assert door.position == pytest.approx(1.55)
    assert door.width == 0.9 and door.height == 2.1
    assert classes[door.wall_id].is_interior


def test_short_interior_wall_gets_no_door():
    # shared wall is 1.2 m, below 0.9 + 0.4
    classes, ids = _classify([_placed("A", 0, 0, 3, 1.2), _placed("B", 3, 0, 3, 1.2)])
    assert place_doors(classes, ids) == []


def test_door_fits_its_wall():
    classes, ids = _classify([_placed("A", 0, 0, 3, 1.5), _placed("B", 3, 0, 3, 1.5)])
    doors = place_doors(classes, ids)
    assert len(doors) == 1
    wall_len = classes[doors[0].wall_id].wall.length
    assert doors[0].position >= 0.2
    assert doors[0].position + doors[0].width <= wall_len - 0.2 + 1e-9


def test_exterior_walls_get_no_doors():
    classes, ids = _classify([_placed("A", 0, 0, 5, 6)])
    assert place_doors(classes, ids) == []


# ---------- Windows ----------

def test_long_walls_get_two_windows():
    classes, ids = _classify([_placed("A", 0, 0, 5, 6, RoomType.LIVING)])
    windows = place_windows(classes, ids)
    assert len(windows) == 8
    top = [w for w in windows if w.wall_id == "w-1"]
    assert [round(w.position, 4) for w in top] == [round(5 / 3 - 0.6, 4), round(10 / 3 - 0.6, 4)]
    assert all(w.width == 1.2 and w.height == 1.0 and w.sill_height == 1.0 for w in windows)


def test_bathroom_gets_small_high_window():
    classes, ids = _classify([_placed("Bath", 0, 0, 3, 3, RoomType.BATHROOM)])
    windows = place_windows(classes, ids)
    assert len(windows) == 4
    for w in windows:
        assert (w.width, w.height, w.sill_height) == (0.6, 0.6, 1.5)
        assert w.position == pytest.approx(1.2)


def test_long_bathroom_wall_still_gets_one_window():
    classes, ids = _classify([_placed("Bath", 0, 0, 4.5, 2.5, RoomType.BATHROOM)])
    windows = place_windows(classes, ids)
    assert len(windows) == 4
    assert len({w.wall_id for w in windows}) == 4


def test_short_exterior_wall_skipped():
    classes, ids = _classify([_placed("Closet", 0, 0, 1.4, 3, RoomType.OFFICE)])
    windows = place_windows(classes, ids)
    assert len(windows) == 2
    assert all(classes[w.wall_id].wall.length == 3 for w in windows)
    assert all(w.position == pytest.approx(0.9) for w in windows)


def test_interior_walls_get_no_windows():
    classes, ids = _classify([_placed("A", 0, 0, 4, 4), _placed("B", 4, 0, 4, 4)])
    windows = place_windows(classes, ids)
    assert all(classes[w.wall_id].is_exterior for w in windows)


def test_opening_ids_are_prefixed():
    classes, ids = _classify([_placed("A", 0, 0, 4, 4), _placed("B", 4, 0, 4, 4)])
    doors = place_doors(classes, ids)
    windows = place_windows(classes, ids)
    assert doors[0].id == "d-1"
    assert windows[0].id == "win-1"
