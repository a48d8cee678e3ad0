"""End-to-end tests for the layout generator."""

import pytest

from services.furniture_catalog import default_catalog
from services.layout_constants import FURNITURE_MARGIN
from services.layout_engine import (
    ConfigOutOfRange,
    LayoutGenerator,
    PlacedRoom,
    RoomRole,
    RoomType,
    SequentialIdGenerator,
    WizardConfig,
    classify_walls,
    generate_layout,
    suggest_furniture,
    validate_plan,
)
from services.layout_engine.geometry_utils import has_overlaps, point_in_inset


CONFIGS = [
    {"projectType": pt, "roomCount": n, "totalSize": size, "style": style, "budget": budget}
    for pt in ("house", "apartment", "commercial", "singleRoom")
    for n in (1, 3, 5, 8, 10)
    for size, style, budget in ((40, "modern", "economical"),
                                (120, "classic", "medium"),
                                (400, "industrial", "premium"))
]


def _placed(plan):
    return [
        PlacedRoom(role=RoomRole(RoomType(r.type), r.name),
                   width=r.width, depth=r.depth, x=r.x, y=r.y)
        for r in plan.rooms
    ]


@pytest.fixture(params=CONFIGS, ids=lambda c: f"{c['projectType']}-{c['roomCount']}-{c['totalSize']}")
def plan_and_config(request):
    return generate_layout(request.param), request.param


# ---------- Properties over many configurations ----------

def test_same_config_same_plan():
    config = {"projectType": "house", "roomCount": 6, "totalSize": 140,
              "style": "modern", "budget": "premium"}
    assert generate_layout(config).to_dict() == generate_layout(config).to_dict()


def test_rooms_never_overlap(plan_and_config):
    plan, _ = plan_and_config
    assert not has_overlaps([r.polygon for r in _placed(plan)])


def test_wall_keys_unique(plan_and_config):
    plan, _ = plan_and_config
    keys = [w.key for w in plan.walls]
    assert len(keys) == len(set(keys))
    assert all(w.length > 0 for w in plan.walls)


def test_every_wall_touches_a_room(plan_and_config):
    plan, _ = plan_and_config
    classes = classify_walls(plan.walls, _placed(plan))
    assert list(classes) == [w.id for w in plan.walls]
    assert all(len(c.adjacent_rooms) >= 1 for c in classes.values())


def test_openings_sit_on_existing_walls(plan_and_config):
    plan, _ = plan_and_config
    walls = plan.wall_by_id()
    for door in plan.doors:
        wall = walls[door.wall_id]
        assert 0 <= door.position
        assert door.position + door.width <= wall.length + 1e-9
    for window in plan.windows:
        wall = walls[window.wall_id]
        assert 0 <= window.position
        assert window.position + window.width <= wall.length + 1e-9


def test_doors_on_interior_and_windows_on_exterior_walls(plan_and_config):
    plan, _ = plan_and_config
    classes = classify_walls(plan.walls, _placed(plan))
    assert all(classes[d.wall_id].is_interior for d in plan.doors)
    assert all(classes[w.wall_id].is_exterior for w in plan.windows)
    assert len({d.wall_id for d in plan.doors}) == len(plan.doors)


def test_window_count_per_wall(plan_and_config):
    plan, _ = plan_and_config
    classes = classify_walls(plan.walls, _placed(plan))
    for wall_id, info in classes.items():
        count = sum(1 for w in plan.windows if w.wall_id == wall_id)
        is_bathroom = info.adjacent_rooms[0].type == RoomType.BATHROOM
        if not info.is_exterior or info.wall.length < 1.5:
            assert count == 0
        elif info.wall.length > 4.0 and not is_bathroom:
            assert count == 2
        else:
            assert count == 1


def test_furniture_inside_owning_room(plan_and_config):
    plan, config = plan_and_config
    remaining = list(plan.furniture)
    # furniture is emitted room by room, in room order
    for room in _placed(plan):
        expected = [i for i in suggest_furniture(room.type, config["budget"])
                    if default_catalog.get_item(i) is not None]
        owned, remaining = remaining[:len(expected)], remaining[len(expected):]
        assert [f.catalog_id for f in owned] == expected
        for item in owned:
            x, y = item.position
            assert point_in_inset(x, y, room.polygon, FURNITURE_MARGIN), (room, item)
    assert remaining == []


def test_ids_unique(plan_and_config):
    plan, _ = plan_and_config
    ids = ([w.id for w in plan.walls] + [r.id for r in plan.rooms] + [d.id for d in plan.doors]
           + [w.id for w in plan.windows] + [f.id for f in plan.furniture])
    assert len(ids) == len(set(ids))


def test_generated_plan_validates(plan_and_config):
    plan, _ = plan_and_config
    assert validate_plan(plan.to_dict()) == []


# ---------- Scenarios ----------

def test_small_house():
    plan = generate_layout({"projectType": "house", "roomCount": 3, "totalSize": 70,
                            "budget": "medium"})
    assert [r.type for r in plan.rooms] == ["living", "kitchen", "bathroom"]
    assert [(r.x, r.y) for r in plan.rooms] == [(0.0, 0.0), (5.5, 0.0), (0.0, 6.5)]
    assert len(plan.walls) == 12
    classes = classify_walls(plan.walls, _placed(plan))
    assert sum(1 for c in classes.values() if c.is_interior) == 4
    assert len(plan.doors) == 4
    assert plan.name == "House - 70m2"


def test_single_room():
    plan = generate_layout({"projectType": "singleRoom", "roomCount": 1, "totalSize": 30})
    assert len(plan.rooms) == 1
    room = plan.rooms[0]
    assert (room.name, room.width, room.depth) == ("Studio", 5.0, 6.0)
    assert room.vertices == [(0.0, 0.0), (5.0, 0.0), (5.0, 6.0), (0.0, 6.0)]
    assert [w.id for w in plan.walls] == ["w-1", "w-2", "w-3", "w-4"]
    assert plan.doors == []
    assert len(plan.windows) == 8
    assert len(plan.furniture) == 7


def test_commercial_gets_one_meeting_room():
    plan = generate_layout({"projectType": "commercial", "roomCount": 5, "totalSize": 120})
    assert [r.type for r in plan.rooms].count("dining") == 1
    assert len(plan.rooms) == 6


# ---------- Configuration ----------

@pytest.mark.parametrize("room_count,total_size,field", [
    (0, 70, "roomCount"),
    (11, 70, "roomCount"),
    (3, 5, "totalSize"),
    (3, 501, "totalSize"),
])
def test_out_of_range_config_rejected(room_count, total_size, field):
    with pytest.raises(ConfigOutOfRange) as exc:
        generate_layout({"projectType": "house", "roomCount": room_count,
                         "totalSize": total_size})
    assert exc.value.field_name == field
    assert isinstance(exc.value, ValueError)


def test_fractional_room_count_rejected():
    with pytest.raises(ConfigOutOfRange) as exc:
        generate_layout({"projectType": "house", "roomCount": 10.9, "totalSize": 200})
    assert exc.value.field_name == "roomCount"
    assert "whole number" in str(exc.value)
    with pytest.raises(ConfigOutOfRange):
        LayoutGenerator().generate(WizardConfig(project_type="house", room_count=2.5,
                                                total_size=60))
    assert WizardConfig.from_mapping({"roomCount": 4.0}).room_count == 4


def test_snake_and_camel_case_config():
    camel = WizardConfig.from_mapping({"projectType": "apartment", "roomCount": 4,
                                       "totalSize": 85, "style": "classic"})
    snake = WizardConfig.from_mapping({"project_type": "apartment", "room_count": 4,
                                       "total_size": 85, "style": "classic"})
    assert camel == snake
    assert camel.budget == "medium"


def test_style_applied_to_walls_and_floors():
    plan = generate_layout({"projectType": "house", "roomCount": 3, "totalSize": 70,
                            "style": "industrial"})
    assert {w.color for w in plan.walls} == {"#D3D3D3"}
    assert {r.floor_material for r in plan.rooms} == {"concrete"}


def test_unknown_style_uses_fallback():
    plan = generate_layout({"projectType": "house", "roomCount": 3, "totalSize": 70,
                            "style": "baroque"})
    assert {r.floor_material for r in plan.rooms} == {"hardwood"}
    assert {w.color for w in plan.walls} == {"#F5F5F0"}


def test_shared_id_generator_keeps_counting():
    ids = SequentialIdGenerator()
    gen = LayoutGenerator(ids=ids)
    first = gen.generate({"projectType": "singleRoom", "roomCount": 1, "totalSize": 30})
    second = gen.generate({"projectType": "singleRoom", "roomCount": 1, "totalSize": 30})
    assert first.id == "plan-1"
    assert second.id == "plan-2"
    assert second.walls[0].id == "w-5"


def test_plan_dict_shape():
    data = generate_layout({"projectType": "house", "roomCount": 2, "totalSize": 50}).to_dict()
    assert data["schemaVersion"] == 2
    assert data["units"] == "meters"
    assert data["floorHeight"] == 2.8
    assert data["wallThickness"] == 0.15
    for key in ("stairs", "columns", "dimensions", "annotations"):
        assert data[key] == []
    assert set(data["rooms"][0]) >= {"vertices", "floorMaterial", "floorColor"}


# ---------- Plan validation ----------

def test_dangling_door_reported():
    data = generate_layout({"projectType": "house", "roomCount": 3, "totalSize": 70}).to_dict()
    data["doors"].append({"id": "d-99", "wallId": "w-404"})
    assert validate_plan(data) == ["Door d-99 references missing wall w-404"]


def test_empty_plan_invalid():
    assert validate_plan({}) == ["Plan is empty"]
    assert "Missing plan name" in validate_plan({"id": "p", "walls": [], "rooms": []})
