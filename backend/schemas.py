"""Pydantic schemas for API request/response validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from config import WIZARD_DEFAULT_BUDGET, WIZARD_DEFAULT_STYLE


# ---------- Wizard ----------
class WizardRequest(BaseModel):
    """The five wizard answers. Accepts camelCase or snake_case keys."""
    model_config = ConfigDict(populate_by_name=True)

    project_type: Literal["house", "apartment", "commercial", "singleRoom"] = Field(
        ..., alias="projectType")
    room_count: int = Field(..., alias="roomCount", ge=1, le=10)
    total_size: float = Field(..., alias="totalSize", ge=10, le=500,
                              description="Total area in m2")
    style: str = Field(default=WIZARD_DEFAULT_STYLE, description="Palette id")
    budget: Literal["economical", "medium", "premium"] = WIZARD_DEFAULT_BUDGET


class PlanSummary(BaseModel):
    rooms: int
    walls: int
    interior_walls: int
    doors: int
    windows: int
    furniture: int
    requested_area: float
    built_area: float


class WizardResponse(BaseModel):
    plan: dict
    summary: PlanSummary


class RoomRoleOut(BaseModel):
    type: str
    name: str


class RoomPreviewResponse(BaseModel):
    project_type: str
    room_count: int
    rooms: list[RoomRoleOut] = []


class FurnitureSuggestionResponse(BaseModel):
    room_type: str
    budget: str
    items: list[str] = []


class ProportionRequest(BaseModel):
    type: str = Field(..., description="Room type, e.g. 'bedroom'")
    width: float = Field(..., ge=0)
    depth: float = Field(..., ge=0)


class ProportionResponse(BaseModel):
    valid: bool
    issues: list[str] = []


class PlanValidateRequest(BaseModel):
    plan: dict


class PlanValidateResponse(BaseModel):
    valid: bool
    errors: list[str] = []


class WizardOptionsResponse(BaseModel):
    project_types: list[dict] = []
    styles: list[dict] = []
    budget_levels: list[dict] = []
    size_presets: list[int] = []
    room_count_range: list[int] = []
    total_size_range: list[float] = []


class CatalogResponse(BaseModel):
    categories: list[dict] = []
    items: list[dict] = []
