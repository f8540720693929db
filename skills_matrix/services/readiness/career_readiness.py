from __future__ import annotations

from typing import Iterable, Sequence

from skills_matrix.models.entities import CareerReadiness, Person, Position, Skill
from skills_matrix.services.gap.skill_gap import index_skills, target_role_deficits

DEFAULT_POTENTIAL_GAP_THRESHOLD = 3


def rank_positions_by_readiness(
    person: Person,
    positions: Iterable[Position],
    catalog: Iterable[Skill],
) -> list[CareerReadiness]:
    """
    One readiness verdict per position: ready ones first, then by fewest
    missing skills. Remaining ties keep input order (sorted() is stable).
    """
    skills = index_skills(catalog)
    results = []
    for position in positions:
        missing = target_role_deficits(person, position, skills)
        results.append(CareerReadiness(position=position, is_ready=not missing, missing_skills=tuple(missing)))

    return sorted(results, key=lambda r: (not r.is_ready, len(r.missing_skills)))


def ready_positions(rankings: Sequence[CareerReadiness]) -> list[CareerReadiness]:
    return [r for r in rankings if r.is_ready]


def potential_positions(
    rankings: Sequence[CareerReadiness],
    max_gaps: int = DEFAULT_POTENTIAL_GAP_THRESHOLD,
) -> list[CareerReadiness]:
    """Not-ready positions within reach: at most max_gaps skills to improve."""
    return [r for r in rankings if not r.is_ready and len(r.missing_skills) <= max_gaps]
