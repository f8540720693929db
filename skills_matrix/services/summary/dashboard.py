from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from skills_matrix.models.entities import Person, Position, Skill, SkillGap
from skills_matrix.services.gap.skill_gap import compute_gaps_for_current_role


@dataclass(frozen=True)
class GapSummary:
    deficit: int
    ready: int
    extra: int


@dataclass(frozen=True)
class OrganisationSummary:
    total_employees: int
    positions_filled: int
    total_skills: int
    readiness_percentage: int


def _round_pct(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 0
    pct = Decimal(numerator) * 100 / Decimal(denominator)
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize_gaps(gaps: Iterable[SkillGap]) -> GapSummary:
    deficit = ready = extra = 0
    for g in gaps:
        if g.status == "deficit":
            deficit += 1
        elif g.status in ("met", "excess"):
            ready += 1
        else:
            extra += 1
    return GapSummary(deficit=deficit, ready=ready, extra=extra)


def compute_organisation_summary(
    people: Sequence[Person],
    positions: Sequence[Position],
    skills: Sequence[Skill],
) -> OrganisationSummary:
    """
    Headline numbers for the whole organisation.

    readiness_percentage is the share of required skill entries (over every
    person whose current position is known) that are met or exceeded.
    People whose position_id doesn't resolve are left out of the percentage.
    """
    positions_by_id = {p.id: p for p in positions}
    met = required = 0
    for person in people:
        position = positions_by_id.get(person.position_id)
        if position is None:
            continue
        for g in compute_gaps_for_current_role(person, position, skills):
            if g.required > 0:
                required += 1
                if g.gap >= 0:
                    met += 1

    return OrganisationSummary(
        total_employees=len(people),
        positions_filled=len({p.position_id for p in people}),
        total_skills=len(skills),
        readiness_percentage=_round_pct(met, required),
    )


def search_people(people: Iterable[Person], positions: Iterable[Position], term: str | None) -> list[Person]:
    needle = (term or "").strip().lower()
    people = list(people)
    if not needle:
        return people

    names = {p.id: p.name.lower() for p in positions}
    return [
        person
        for person in people
        if needle in person.name.lower() or needle in names.get(person.position_id, "")
    ]
