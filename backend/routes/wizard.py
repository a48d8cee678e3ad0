"""
Smart Wizard API Route.

Generates a complete floor plan from the five wizard answers and exposes
the wizard's helper lookups.

Endpoints:
  GET  /api/wizard/options                — choices offered by the wizard
  GET  /api/wizard/preview                — room program for a type / count
  POST /api/wizard/generate               — generate a full plan
  GET  /api/wizard/furniture/{room_type}  — furniture suggestions
  POST /api/wizard/proportions            — advisory proportion check
  POST /api/wizard/validate               — plan wall-reference check
  GET  /api/wizard/catalog                — browse the furniture catalog
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from schemas import (
    CatalogResponse,
    FurnitureSuggestionResponse,
    PlanSummary,
    PlanValidateRequest,
    PlanValidateResponse,
    ProportionRequest,
    ProportionResponse,
    RoomPreviewResponse,
    RoomRoleOut,
    WizardOptionsResponse,
    WizardRequest,
    WizardResponse,
)
from services.layout_constants import (
    BUDGET_LEVELS,
    DEFAULT_BUDGET,
    MAX_ROOM_COUNT,
    MAX_TOTAL_SIZE,
    MIN_ROOM_COUNT,
    MIN_TOTAL_SIZE,
    PROJECT_TYPES,
    SIZE_PRESETS,
)
from services.layout_engine import (
    ConfigOutOfRange,
    LayoutGenerator,
    WizardConfig,
    classify_walls,
    determine_room_types,
    suggest_furniture,
    validate_plan,
    validate_proportions,
)
from services.layout_engine.room_model import PlacedRoom, RoomRole, RoomType
from services.furniture_catalog import default_catalog
from services.styles import default_palette

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/wizard", tags=["wizard"])

_generator = LayoutGenerator()


def _summarize(plan, config: WizardConfig) -> PlanSummary:
    # Rebuild the room rectangles to count interior walls
    placed = [
        PlacedRoom(role=RoomRole(RoomType(r.type), r.name),
                   width=r.width, depth=r.depth, x=r.x, y=r.y)
        for r in plan.rooms
    ]
    classes = classify_walls(plan.walls, placed)
    return PlanSummary(
        rooms=len(plan.rooms),
        walls=len(plan.walls),
        interior_walls=sum(1 for c in classes.values() if c.is_interior),
        doors=len(plan.doors),
        windows=len(plan.windows),
        furniture=len(plan.furniture),
        requested_area=config.total_size,
        built_area=round(plan.built_area, 2),
    )


# ---------- Endpoints ----------

@router.get("/options", response_model=WizardOptionsResponse)
async def wizard_options():
    """Everything the wizard UI offers as choices."""
    return WizardOptionsResponse(
        project_types=PROJECT_TYPES,
        styles=default_palette.list_styles(),
        budget_levels=BUDGET_LEVELS,
        size_presets=SIZE_PRESETS,
        room_count_range=[MIN_ROOM_COUNT, MAX_ROOM_COUNT],
        total_size_range=[MIN_TOTAL_SIZE, MAX_TOTAL_SIZE],
    )


@router.get("/preview", response_model=RoomPreviewResponse)
async def wizard_preview(
    project_type: str = Query(..., alias="projectType"),
    room_count: int = Query(..., alias="roomCount", ge=1, le=10),
):
    """Room program the wizard would generate, without sizing or placement."""
    roles = determine_room_types(project_type, room_count)
    return RoomPreviewResponse(
        project_type=project_type,
        room_count=room_count,
        rooms=[RoomRoleOut(**r.to_dict()) for r in roles],
    )


@router.post("/generate", response_model=WizardResponse)
async def wizard_generate(req: WizardRequest):
    """
    Generate a complete floor plan.

    Returns the plan in the editor's JSON shape plus a short summary that
    compares the built area with the requested one.
    """
    config = WizardConfig.from_mapping(req.model_dump())
    try:
        plan = _generator.generate(config)
    except ConfigOutOfRange as e:
        raise HTTPException(status_code=422, detail=str(e))

    return WizardResponse(plan=plan.to_dict(), summary=_summarize(plan, config))


@router.get("/furniture/{room_type}", response_model=FurnitureSuggestionResponse)
async def wizard_furniture(room_type: str, budget: str = DEFAULT_BUDGET):
    """Catalog ids suggested for a room type; unknown types get an empty list."""
    return FurnitureSuggestionResponse(
        room_type=room_type,
        budget=budget,
        items=suggest_furniture(room_type, budget),
    )


@router.post("/proportions", response_model=ProportionResponse)
async def wizard_proportions(req: ProportionRequest):
    """Advisory check of a room's proportions. Never fails on odd rooms."""
    issues = validate_proportions(req)
    return ProportionResponse(valid=not issues, issues=issues)


@router.post("/validate", response_model=PlanValidateResponse)
async def wizard_validate(req: PlanValidateRequest):
    """Check a plan for missing ids and dangling door/window wall references."""
    errors = validate_plan(req.plan)
    if errors:
        logger.info(f"Plan {req.plan.get('id')} failed validation: {len(errors)} errors")
    return PlanValidateResponse(valid=not errors, errors=errors)


@router.get("/catalog", response_model=CatalogResponse)
async def wizard_catalog(category: Optional[str] = None, q: Optional[str] = None):
    """Browse the furniture catalog by category and/or free-text search."""
    items = default_catalog.search(q) if q else default_catalog.get_all()
    if category:
        in_category = {i.id for i in default_catalog.get_by_category(category)}
        items = [i for i in items if i.id in in_category]
    return CatalogResponse(
        categories=default_catalog.get_categories(),
        items=[i.to_dict() for i in items],
    )
