"""Tests for dimension allocation and spatial packing."""

from services.layout_constants import ROOM_SIZE_RANGES
from services.layout_engine import (
    RoomRole,
    RoomType,
    SizedRoom,
    compute_room_dimensions,
    determine_room_types,
    place_rooms,
)
from services.layout_engine.dimensions import size_room
from services.layout_engine.geometry_utils import detect_overlaps, snap_half


def _room(name, w, d, rtype=RoomType.BEDROOM):
    return SizedRoom(role=RoomRole(rtype, name), width=w, depth=d)


# ---------- Dimension allocation ----------

def test_snap_half_rounds_half_up():
    assert snap_half(5.25) == 5.5
    assert snap_half(5.24) == 5.0
    assert snap_half(3.908) == 4.0


def test_scenario_a_dimensions():
    roles = determine_room_types("house", 3)
    sized = compute_room_dimensions(roles, 70)
    dims = [(r.type, r.width, r.depth) for r in sized]
    assert dims == [
        (RoomType.LIVING, 5.5, 6.5),
        (RoomType.KITCHEN, 3.0, 4.0),
        (RoomType.BATHROOM, 3.0, 3.0),
    ]


def test_area_clamped_to_range():
    living = size_room(RoomRole(RoomType.LIVING, "Living Room"), 1000)
    assert (living.width, living.depth) == (6.0, 7.0)


def test_tiny_laundry_snaps_up():
    laundry = size_room(RoomRole(RoomType.LAUNDRY, "Laundry"), 1.0)
    assert (laundry.width, laundry.depth) == (2.0, 2.0)


def test_area_is_width_times_depth():
    for r in compute_room_dimensions(determine_room_types("house", 10), 180):
        assert r.area == r.width * r.depth


def test_dimensions_within_ranges():
    for count in range(1, 11):
        for total in (10, 70, 200, 500):
            for r in compute_room_dimensions(determine_room_types("house", count), total):
                min_w, max_w, min_d, max_d = ROOM_SIZE_RANGES[r.type.value]
                # half-meter snapping may lift a bound that is not itself on the grid
                assert snap_half(min_w) <= r.width <= snap_half(max_w)
                assert snap_half(min_d) <= r.depth <= snap_half(max_d)


def test_no_roles_no_rooms():
    assert compute_room_dimensions([], 100) == []


# ---------- Packing ----------

def test_empty_layout():
    assert place_rooms([]) == []


def test_rows_of_two():
    rooms = [_room("C", 3, 3), _room("A", 4, 5), _room("D", 2, 2), _room("B", 3, 4)]
    placed = place_rooms(rooms)
    assert [(p.name, p.x, p.y) for p in placed] == [
        ("A", 0, 0), ("B", 4, 0), ("C", 0, 5), ("D", 3, 5),
    ]


def test_l_shape():
    rooms = [_room("A", 5, 6), _room("B", 4, 5), _room("C", 3, 4),
             _room("D", 3, 3), _room("E", 2, 3)]
    placed = place_rooms(rooms)
    assert [(p.name, p.x, p.y) for p in placed] == [
        ("A", 0, 0), ("B", 5, 0), ("C", 9, 0),
        ("D", 9, 6), ("E", 9, 9),
    ]


def test_rows_of_three():
    rooms = [_room(str(i), 3, 3) for i in range(7)]
    placed = place_rooms(rooms)
    assert [(p.x, p.y) for p in placed] == [
        (0, 0), (3, 0), (6, 0), (0, 3), (3, 3), (6, 3), (0, 6),
    ]


def test_sort_is_stable_for_equal_areas():
    rooms = [_room("first", 3, 4), _room("second", 4, 3)]
    assert [p.name for p in place_rooms(rooms)] == ["first", "second"]


def test_packing_never_overlaps():
    for ptype in ("house", "apartment", "commercial", "singleRoom"):
        for count in range(1, 11):
            for total in (10, 70, 150, 500):
                sized = compute_room_dimensions(determine_room_types(ptype, count), total)
                placed = place_rooms(sized)
                assert len(placed) == len(sized)
                assert detect_overlaps([p.polygon for p in placed]) == [], \
                    f"{ptype}/{count}/{total}"
