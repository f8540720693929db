from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from skills_matrix.models.entities import CareerReadiness, Person, Position, Skill, SkillGap, rank_label
from skills_matrix.models.schemas import (
    CareerReadinessOut,
    CareerReadinessResponse,
    GapSummaryOut,
    OrganisationSummaryResponse,
    PersonOut,
    PositionOut,
    PositionSupplyOut,
    SkillGapAnalysisResponse,
    SkillGapOut,
    SkillOut,
    SupplyResponse,
    TargetRoleResponse,
)
from skills_matrix.services.matching import (
    compute_gaps_for_current_role,
    compute_gaps_for_target_role,
    potential_positions,
    rank_positions_by_readiness,
    ready_positions,
)
from skills_matrix.services.summary.dashboard import compute_organisation_summary, search_people, summarize_gaps
from skills_matrix.services.supply.supply_analysis import PositionSupply, compute_supply
from skills_matrix.utils.config import settings
from skills_matrix.utils.storage import Dataset, DatasetError, DatasetStore

logger = logging.getLogger(__name__)

router = APIRouter()

store = DatasetStore(dataset_path=settings.dataset_path)


@lru_cache(maxsize=1)
def _load_dataset() -> Dataset:
    return store.load()


def get_dataset() -> Dataset:
    try:
        return _load_dataset()
    except (FileNotFoundError, DatasetError) as e:
        logger.error("Dataset unavailable: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e


def _skill_out(skill: Skill) -> SkillOut:
    return SkillOut(id=skill.id, name=skill.name)


def _position_out(position: Position) -> PositionOut:
    return PositionOut(id=position.id, name=position.name, requirements=dict(position.requirements))


def _person_out(person: Person, deficit_count: int | None = None) -> PersonOut:
    return PersonOut(
        id=person.id,
        name=person.name,
        position_id=person.position_id,
        acquired=dict(person.acquired),
        deficit_count=deficit_count,
    )


def _listing_row(person: Person, dataset: Dataset) -> PersonOut:
    try:
        position = dataset.get_position(person.position_id)
    except KeyError:
        return _person_out(person)
    gaps = compute_gaps_for_current_role(person, position, dataset.skills)
    return _person_out(person, deficit_count=summarize_gaps(gaps).deficit)


def _gap_out(g: SkillGap) -> SkillGapOut:
    return SkillGapOut(
        skill=_skill_out(g.skill),
        required=g.required,
        acquired=g.acquired,
        gap=g.gap,
        status=g.status,
        required_label=rank_label(g.required),
        acquired_label=rank_label(g.acquired),
    )


def _readiness_out(r: CareerReadiness) -> CareerReadinessOut:
    return CareerReadinessOut(
        position=_position_out(r.position),
        is_ready=r.is_ready,
        missing_skills=[_gap_out(g) for g in r.missing_skills],
    )


def _supply_out(s: PositionSupply) -> PositionSupplyOut:
    return PositionSupplyOut(
        position=_position_out(s.position),
        current_count=s.current_count,
        ready_count=s.ready_count,
        total_supply=s.total_supply,
        status=s.status,
        current_employees=[_person_out(p) for p in s.current_employees],
        ready_people=[_person_out(p) for p in s.ready_people],
    )


def _person_or_404(dataset: Dataset, person_id: str) -> Person:
    try:
        return dataset.get_person(person_id)
    except KeyError as e:
        logger.warning("Person lookup failed: %s", person_id)
        raise HTTPException(status_code=404, detail=f"Unknown person_id: {person_id}") from e


def _position_or_404(dataset: Dataset, position_id: str) -> Position:
    try:
        return dataset.get_position(position_id)
    except KeyError as e:
        logger.warning("Position lookup failed: %s", position_id)
        raise HTTPException(status_code=404, detail=f"Unknown position_id: {position_id}") from e


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/skills", response_model=list[SkillOut])
async def list_skills(dataset: Dataset = Depends(get_dataset)) -> list[SkillOut]:
    return [_skill_out(s) for s in dataset.skills]


@router.get("/positions", response_model=list[PositionOut])
async def list_positions(dataset: Dataset = Depends(get_dataset)) -> list[PositionOut]:
    return [_position_out(p) for p in dataset.positions]


@router.get("/people", response_model=list[PersonOut])
async def list_people(q: str | None = None, dataset: Dataset = Depends(get_dataset)) -> list[PersonOut]:
    return [_listing_row(p, dataset) for p in search_people(dataset.people, dataset.positions, q)]


@router.get("/people/{person_id}/skill-gaps", response_model=SkillGapAnalysisResponse)
async def get_skill_gaps(person_id: str, dataset: Dataset = Depends(get_dataset)) -> SkillGapAnalysisResponse:
    person = _person_or_404(dataset, person_id)
    try:
        position = dataset.get_position(person.position_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail="Position not found") from e

    gaps = compute_gaps_for_current_role(person, position, dataset.skills)
    summary = summarize_gaps(gaps)
    return SkillGapAnalysisResponse(
        person=_person_out(person),
        position=_position_out(position),
        gaps=[_gap_out(g) for g in gaps],
        summary=GapSummaryOut(deficit=summary.deficit, ready=summary.ready, extra=summary.extra),
    )


@router.get("/people/{person_id}/target/{position_id}", response_model=TargetRoleResponse)
async def get_target_role_gaps(
    person_id: str,
    position_id: str,
    dataset: Dataset = Depends(get_dataset),
) -> TargetRoleResponse:
    person = _person_or_404(dataset, person_id)
    target = _position_or_404(dataset, position_id)

    needed = compute_gaps_for_target_role(person, target, dataset.skills)
    return TargetRoleResponse(
        person=_person_out(person),
        target_position=_position_out(target),
        is_ready=not needed,
        needed_skills=[_gap_out(g) for g in needed],
    )


@router.get("/people/{person_id}/career-readiness", response_model=CareerReadinessResponse)
async def get_career_readiness(person_id: str, dataset: Dataset = Depends(get_dataset)) -> CareerReadinessResponse:
    person = _person_or_404(dataset, person_id)
    try:
        current = dataset.get_position(person.position_id)
    except KeyError:
        current = None

    rankings = rank_positions_by_readiness(person, dataset.positions, dataset.skills)
    threshold = settings.potential_gap_threshold
    return CareerReadinessResponse(
        person=_person_out(person),
        current_position=_position_out(current) if current is not None else None,
        rankings=[_readiness_out(r) for r in rankings],
        ready_positions=[_readiness_out(r) for r in ready_positions(rankings)],
        potential_positions=[_readiness_out(r) for r in potential_positions(rankings, max_gaps=threshold)],
        potential_gap_threshold=threshold,
    )


@router.get("/supply", response_model=SupplyResponse)
async def get_supply(dataset: Dataset = Depends(get_dataset)) -> SupplyResponse:
    supply = compute_supply(dataset.positions, dataset.people, dataset.skills)
    return SupplyResponse(positions=[_supply_out(s) for s in supply])


@router.get("/summary", response_model=OrganisationSummaryResponse)
async def get_summary(dataset: Dataset = Depends(get_dataset)) -> OrganisationSummaryResponse:
    s = compute_organisation_summary(dataset.people, dataset.positions, dataset.skills)
    return OrganisationSummaryResponse(
        total_employees=s.total_employees,
        positions_filled=s.positions_filled,
        total_skills=s.total_skills,
        readiness_percentage=s.readiness_percentage,
    )
