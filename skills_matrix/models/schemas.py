from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SkillOut(BaseModel):
    id: str
    name: str


class PositionOut(BaseModel):
    id: str
    name: str
    requirements: dict[str, int] = Field(default_factory=dict)  # skill_id -> required level


class PersonOut(BaseModel):
    id: str
    name: str
    position_id: str
    acquired: dict[str, int] = Field(default_factory=dict)  # skill_id -> acquired level
    # Deficits against the current position; only filled in listings, None when the position is unknown.
    deficit_count: int | None = None


class SkillGapOut(BaseModel):
    skill: SkillOut
    required: int
    acquired: int
    gap: int
    status: Literal["deficit", "met", "excess", "not-required"]
    required_label: str | None = None
    acquired_label: str | None = None


class GapSummaryOut(BaseModel):
    deficit: int
    ready: int
    extra: int


class SkillGapAnalysisResponse(BaseModel):
    person: PersonOut
    position: PositionOut
    gaps: list[SkillGapOut] = Field(default_factory=list)
    summary: GapSummaryOut


class TargetRoleResponse(BaseModel):
    person: PersonOut
    target_position: PositionOut
    is_ready: bool
    needed_skills: list[SkillGapOut] = Field(default_factory=list)


class CareerReadinessOut(BaseModel):
    position: PositionOut
    is_ready: bool
    missing_skills: list[SkillGapOut] = Field(default_factory=list)


class CareerReadinessResponse(BaseModel):
    person: PersonOut
    current_position: PositionOut | None = None
    rankings: list[CareerReadinessOut] = Field(default_factory=list)
    ready_positions: list[CareerReadinessOut] = Field(default_factory=list)
    potential_positions: list[CareerReadinessOut] = Field(default_factory=list)
    potential_gap_threshold: int


class PositionSupplyOut(BaseModel):
    position: PositionOut
    current_count: int
    ready_count: int
    total_supply: int
    status: Literal["critical", "low", "medium", "high"]
    current_employees: list[PersonOut] = Field(default_factory=list)
    ready_people: list[PersonOut] = Field(default_factory=list)


class SupplyResponse(BaseModel):
    positions: list[PositionSupplyOut] = Field(default_factory=list)


class OrganisationSummaryResponse(BaseModel):
    total_employees: int
    positions_filled: int
    total_skills: int
    readiness_percentage: int = Field(ge=0, le=100)
