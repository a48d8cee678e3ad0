"""Tests for furniture suggestion, placement and proportion advice."""

import math

import pytest

from services.furniture_catalog import CatalogItem, FurnitureCatalog, default_catalog
from services.layout_constants import FURNITURE_SUGGESTIONS
from services.layout_engine import (
    PlacedRoom,
    RoomRole,
    RoomType,
    SequentialIdGenerator,
    SizedRoom,
    compute_furniture_positions,
    generate_furniture,
    suggest_furniture,
    validate_proportions,
)


def _placed(name, x, y, w, d, rtype):
    return PlacedRoom(role=RoomRole(rtype, name), width=w, depth=d, x=x, y=y)


# ---------- Suggestions ----------

def test_suggestions_by_tier():
    assert suggest_furniture(RoomType.BEDROOM, "economical") == [
        "bed-double", "table-bedside", "wardrobe-2d"]
    assert len(suggest_furniture("kitchen", "premium")) == 11


def test_unknown_budget_falls_back_to_medium():
    assert suggest_furniture("living", "luxury") == suggest_furniture("living", "medium")


def test_unknown_room_type_gets_nothing():
    assert suggest_furniture("garage", "premium") == []


def test_economical_hallway_is_empty():
    assert suggest_furniture("hallway", "economical") == []
    assert suggest_furniture("hallway", "luxury") == ["bench-entry", "shoe-rack"]


def test_every_suggestion_is_in_catalog():
    for tiers in FURNITURE_SUGGESTIONS.values():
        for items in tiers.values():
            for item_id in items:
                assert default_catalog.get_item(item_id) is not None, item_id


def test_suggestions_are_copies():
    items = suggest_furniture("bedroom", "medium")
    items.append("bed-bunk")
    assert "bed-bunk" not in suggest_furniture("bedroom", "medium")


# ---------- Positions ----------

def test_bedroom_zone_order():
    room = _placed("Bedroom 1", 0, 0, 4, 5, RoomType.BEDROOM)
    positions = compute_furniture_positions(room, suggest_furniture("bedroom", "medium"),
                                            default_catalog)
    assert positions[0] == (2.0, 0.3, 0.0)                           # topCenter
    assert positions[1] == pytest.approx((0.6, 0.6, 0.0))            # topLeft
    assert positions[2] == pytest.approx((3.4, 0.6, 0.0))            # topRight
    assert positions[3] == pytest.approx((3.7, 2.5, -math.pi / 2))   # rightCenter


def test_repeats_are_offset_and_clamped():
    room = _placed("Bath", 0, 0, 3, 3, RoomType.BATHROOM)
    positions = compute_furniture_positions(room, ["toilet"] * 9, default_catalog)
    # bathroom strategy has 7 zones; item 7 wraps to bottomCenter, item 8 to topCenter
    assert positions[7] == pytest.approx((1.9, 2.7, math.pi))
    assert positions[8] == pytest.approx((2.3, 1.1, 0.0))


def test_unknown_item_spread_around_center():
    room = _placed("Office", 0, 0, 4, 4, RoomType.OFFICE)
    positions = compute_furniture_positions(room, ["no-such-item"], default_catalog)
    assert positions == [(1.75, 2.0, 0.0)]


def test_positions_stay_inside_margin():
    catalog = default_catalog
    for rtype in RoomType:
        room = _placed("R", 2, 3, 2.5, 3.0, rtype)
        items = suggest_furniture(rtype, "premium") * 3
        for x, y, _ in compute_furniture_positions(room, items, catalog):
            assert 2.3 - 1e-9 <= x <= 4.2 + 1e-9
            assert 3.3 - 1e-9 <= y <= 5.7 + 1e-9


def test_generate_furniture_skips_unknown_items():
    room = _placed("Laundry", 0, 0, 2.5, 3, RoomType.LAUNDRY)
    catalog = FurnitureCatalog(items=[
        CatalogItem("washer-dryer", "Washer-dryer", "laundry", 0.6, 0.65, 0.85, "#E0E0E0"),
    ])
    furniture = generate_furniture([room], "medium", catalog, SequentialIdGenerator())
    assert [f.catalog_id for f in furniture] == ["washer-dryer"]
    assert furniture[0].id == "furn-1"
    assert furniture[0].scale == (1.0, 1.0, 1.0)


# ---------- Proportions ----------

def test_reasonable_room_has_no_issues():
    room = SizedRoom(role=RoomRole(RoomType.BEDROOM, "Bedroom 1"), width=3.5, depth=4.0)
    assert validate_proportions(room) == []


def test_narrow_small_room_flags_several_issues():
    room = SizedRoom(role=RoomRole(RoomType.BEDROOM, "Bedroom 1"), width=1.0, depth=4.0)
    issues = validate_proportions(room)
    assert len(issues) == 3
    assert issues[0].startswith("Proportion too narrow")
    assert issues[1].startswith("Width too small")
    assert issues[2].startswith("Area too small for bedroom")


def test_oversized_room_flagged():
    room = SizedRoom(role=RoomRole(RoomType.LIVING, "Living Room"), width=10.0, depth=10.0)
    assert validate_proportions(room) == [
        "Area too large for living (100.0m2). Typical maximum: 42.0m2."]


def test_missing_dimensions_do_not_raise():
    class Blank:
        width = 0
        depth = 3
        type = "bedroom"

    assert validate_proportions(Blank()) == ["Missing room dimensions."]
    assert validate_proportions(object()) == ["Missing room dimensions."]
